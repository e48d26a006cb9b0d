"""Lyrics API request and response dataclasses.

WHY: The lyrics API returns a small JSON object whose only field we rely
on is the TTML document. A typed dataclass makes that contract explicit
and keeps dict handling out of the client.

HOW: LyricsQuery holds the cleaned lookup parameters and knows how to
render itself as query parameters. LyricsResponse maps the response JSON
1:1 via ``from_dict``.

RULES:
- duration is whole seconds; -1 means "unknown" and is not sent
- ttml is None when the API has no document for the track
- Unknown response fields are ignored
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

UNKNOWN_DURATION = -1


@dataclass
class LyricsQuery:
    """Parameters for one ``GET /getLyrics`` request."""

    title: str
    artist: str
    duration: int = UNKNOWN_DURATION

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"s": self.title, "a": self.artist}
        if self.duration != UNKNOWN_DURATION:
            params["d"] = self.duration
        return params


@dataclass
class LyricsResponse:
    """Body of a ``GET /getLyrics`` response."""

    ttml: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LyricsResponse:
        """Parse a LyricsResponse from the decoded JSON body.

        RULES:
        - A missing, null or non-string "ttml" becomes None
        - An empty/blank "ttml" becomes None
        """
        ttml = data.get("ttml")
        if not isinstance(ttml, str) or not ttml.strip():
            ttml = None
        return cls(ttml=ttml)
