"""Lyrics API client package: async interface to the TTML lyrics service.

WHY: The converter needs to find a synced TTML document for a track
before the core can parse it. This package encapsulates that lookup
behind an async client class.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. Title/artist noise is
removed by search.py before the query; response data is parsed into the
dataclasses defined in models.py.

RULES:
- All HTTP calls go through LyricsClient (no direct httpx usage elsewhere)
- The client never retries; callers decide what to do on failure
"""

from ttml_lyrics.api.client import (
    LyricsClient,
    LyricsError,
    LyricsParseError,
    LyricsUnavailableError,
)
from ttml_lyrics.api.search import clean_artist, clean_title

__all__ = [
    "LyricsClient",
    "LyricsError",
    "LyricsParseError",
    "LyricsUnavailableError",
    "clean_artist",
    "clean_title",
]
