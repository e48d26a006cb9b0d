"""TTML Lyrics: timed-text to karaoke LRC converter.

WHY: Synced-lyrics services publish TTML with syllable-level spans, while
players expect LRC. A faithful conversion has to rebuild whole words from
spans and keep their timing, which plain LRC cannot carry.

HOW: Three-stage pipeline: fetch (API client), parse (core model),
format (pluggable formatters). The LRC formatter appends a word-timing
annotation line after each timed line.

RULES:
- All formatters consume the same list of Lines
- Parsing never raises; an empty list means "no lyrics"
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
