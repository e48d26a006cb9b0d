"""Title and artist normalization for lyric lookups.

WHY: Track metadata from streaming sources is noisy: "Song (Official
Video)", "Song | Live at X", "Artist feat. Other". The lyrics API matches
on plain title and primary artist, so the noise must go before the query.

HOW: Titles are passed through an ordered list of regex removals.
Artists are cut at the first collaboration separator found.

RULES:
- Title removals are case-insensitive and applied in order
- Only decorations mentioning a known keyword are removed from (...)/[...]
- 【...】 blocks, "| ..." tails and "- Official ..." tails are removed
- The first matching artist separator wins; the first artist is kept
- Results are trimmed
"""

from __future__ import annotations

import re
from typing import List

_DECORATION_KEYWORDS = (
    "official|video|audio|lyrics|lyric|visualizer|hd|hq|4k|remaster|live"
    "|acoustic|version|edit|extended|radio|clean|explicit"
)

_TITLE_CLEANUP_PATTERNS: List[re.Pattern] = [
    re.compile(r"\s*\(.*?(?:{}).*?\)".format(_DECORATION_KEYWORDS), re.IGNORECASE),
    re.compile(r"\s*\[.*?(?:{}).*?\]".format(_DECORATION_KEYWORDS), re.IGNORECASE),
    re.compile(r"\s*【.*?】"),
    re.compile(r"\s*\|.*$"),
    re.compile(r"\s*-\s*(?:official|video|audio|lyrics|lyric|visualizer).*$", re.IGNORECASE),
]

_ARTIST_SEPARATORS = (
    " & ", " and ", ", ", " x ", " feat. ", " feat ",
    " ft. ", " ft ", " featuring ", " with ",
)


def clean_title(title: str) -> str:
    """Strip video/lyric decorations from a track title."""
    cleaned = title.strip()
    for pattern in _TITLE_CLEANUP_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def clean_artist(artist: str) -> str:
    """Reduce an artist credit to its first artist."""
    cleaned = artist.strip()
    for separator in _ARTIST_SEPARATORS:
        parts = re.split(re.escape(separator), cleaned, maxsplit=1, flags=re.IGNORECASE)
        if len(parts) > 1:
            cleaned = parts[0]
            break
    return cleaned.strip()
