"""Async HTTP client for the BetterLyrics TTML lyrics API.

WHY: The converter needs to look up a synced TTML lyric document for a
track and turn it into karaoke LRC. This module encapsulates the HTTP
details and the normalize → fetch → parse → serialize workflow behind a
single client class so callers (CLI, tests) never touch httpx directly.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. LyricsClient is an
async context manager: enter it to get a configured client, exit to
close the connection pool. ``fetch_ttml`` returns the raw document or
None; ``get_lyrics`` runs the whole pipeline and raises typed errors.

RULES:
- Always use the async context manager (async with LyricsClient() as client:)
- Timeouts come from config (15s request, 10s connect by default)
- No retries: one request per lookup
- fetch_ttml never raises for HTTP/transport/JSON problems, it returns None
- get_lyrics raises LyricsUnavailableError / LyricsParseError
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ttml_lyrics.api.models import UNKNOWN_DURATION, LyricsQuery, LyricsResponse
from ttml_lyrics.api.search import clean_artist, clean_title
from ttml_lyrics.config import (
    LYRICS_API_BASE_URL,
    LYRICS_API_CONNECT_TIMEOUT_S,
    LYRICS_API_TIMEOUT_S,
)
from ttml_lyrics.core.parser import parse_document
from ttml_lyrics.formatters.lrc import to_lyric_text

logger = logging.getLogger(__name__)


class LyricsError(Exception):
    """Base class for lyric lookup failures."""


class LyricsUnavailableError(LyricsError):
    """Raised when the API has no TTML document for the requested track."""


class LyricsParseError(LyricsError):
    """Raised when a fetched TTML document yields no lyric lines.

    RULES:
    - The parser itself never raises; this is raised on an empty result
    """


class LyricsClient:
    """Async client for the lyrics API.

    RULES:
    - Use as: async with LyricsClient() as client: ...
    - base_url defaults to LYRICS_API_BASE_URL from config
    - transport is for tests (httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = (base_url or LYRICS_API_BASE_URL).rstrip("/")
        self._timeout = timeout or LYRICS_API_TIMEOUT_S
        self._connect_timeout = connect_timeout or LYRICS_API_CONNECT_TIMEOUT_S
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> LyricsClient:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout, connect=self._connect_timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "LyricsClient must be used as an async context manager: "
                "async with LyricsClient() as client: ..."
            )
        return self._client

    async def fetch_ttml(
        self,
        title: str,
        artist: str,
        duration: int = UNKNOWN_DURATION,
    ) -> Optional[str]:
        """Fetch the raw TTML document for a track.

        Args:
            title: Track title, already cleaned by the caller if needed.
            artist: Artist name, already cleaned by the caller if needed.
            duration: Track length in whole seconds, or -1 when unknown.

        Returns:
            The TTML document, or None when the API has none or the
            request failed.
        """
        client = self._ensure_client()
        query = LyricsQuery(title=title, artist=artist, duration=duration)

        try:
            resp = await client.get("/getLyrics", params=query.to_params())
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("Lyrics request failed for %r by %r: %s", title, artist, e)
            return None
        except ValueError as e:
            logger.warning("Lyrics API returned invalid JSON for %r by %r: %s", title, artist, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Unexpected lyrics API response for %r by %r", title, artist)
            return None
        return LyricsResponse.from_dict(data).ttml

    async def get_lyrics(
        self,
        title: str,
        artist: str,
        duration: int = UNKNOWN_DURATION,
    ) -> str:
        """Look up a track and return karaoke LRC text.

        HOW: clean title/artist → fetch TTML → parse → serialize.

        Raises:
            LyricsUnavailableError: No document was returned.
            LyricsParseError: The document produced no lines.
        """
        cleaned_title = clean_title(title)
        cleaned_artist = clean_artist(artist)
        logger.info("Looking up lyrics for %r by %r", cleaned_title, cleaned_artist)

        ttml = await self.fetch_ttml(cleaned_title, cleaned_artist, duration)
        if ttml is None:
            raise LyricsUnavailableError(
                "Lyrics unavailable for {!r} by {!r}".format(cleaned_title, cleaned_artist)
            )

        lines = parse_document(ttml)
        if not lines:
            raise LyricsParseError(
                "Failed to parse lyrics for {!r} by {!r}".format(cleaned_title, cleaned_artist)
            )

        logger.info("Parsed %d lyric lines", len(lines))
        return to_lyric_text(lines)
