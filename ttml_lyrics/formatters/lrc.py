"""LRC formatter with word-timing annotations, and its reader.

WHY: LRC is what lyric players understand, but it only times whole lines.
Karaoke-style highlighting needs per-word timing, so each timed line is
followed by an annotation line that a cooperating reader can decode and
that ordinary LRC consumers skip as untimed text.

HOW: ``to_lyric_text`` writes one ``[MM:SS.CC]text`` line per Line and,
when the Line has words, an annotation line
``<text:start:end[:bg]|text:start:end[:bg]|...>``. ``parse_lyric_text``
reads the same grammar back into Lines.

RULES:
- Timestamp uses floor(start * 1000) ms → minutes, seconds, centiseconds
- Negative start times are written as [00:00.00]
- Annotation times use str(float), e.g. "0.3", "83.456"
- ":bg" is appended to background words
- Lines without words get no annotation line
- Every emitted line ends with "\\n"
- Output suffix: "-lyrics.lrc"
"""

from __future__ import annotations

import math
import re
from typing import List, Optional, Sequence

from ttml_lyrics.core.model import Line, Word
from ttml_lyrics.formatters.base import BaseFormatter, FormatterOutput

_TIMESTAMP_RE = re.compile(r"^\[(\d+):(\d{1,2})(?:\.(\d{1,3}))?\](.*)$")

_BACKGROUND_SUFFIX = ":bg"


def format_timestamp(seconds: float) -> str:
    """Format seconds as an LRC ``[MM:SS.CC]`` tag."""
    total_ms = max(0, math.floor(seconds * 1000))
    minutes = total_ms // 60000
    secs = (total_ms % 60000) // 1000
    centis = (total_ms % 1000) // 10
    return "[{:02d}:{:02d}.{:02d}]".format(minutes, secs, centis)


def format_word_annotation(words: Sequence[Word]) -> str:
    """Build the ``<...|...>`` word-timing line for a sequence of words."""
    entries = []
    for word in words:
        entry = "{}:{}:{}".format(word.text, float(word.start_time), float(word.end_time))
        if word.is_background:
            entry += _BACKGROUND_SUFFIX
        entries.append(entry)
    return "<{}>".format("|".join(entries))


def to_lyric_text(lines: Sequence[Line]) -> str:
    """Serialize Lines to LRC text with word-timing annotation lines.

    Args:
        lines: Lines already in time order.

    Returns:
        The LRC document; empty string when there are no lines.
    """
    parts: List[str] = []
    for line in lines:
        parts.append(format_timestamp(line.start_time) + line.text + "\n")
        if line.words:
            parts.append(format_word_annotation(line.words) + "\n")
    return "".join(parts)


def _parse_annotation_entry(entry: str) -> Optional[Word]:
    """Parse ``text:start:end[:bg]``; None when the entry is malformed."""
    is_background = entry.endswith(_BACKGROUND_SUFFIX)
    if is_background:
        entry = entry[: -len(_BACKGROUND_SUFFIX)]

    # Split from the right so word text may itself contain ":".
    fields = entry.rsplit(":", 2)
    if len(fields) != 3 or not fields[0]:
        return None
    try:
        start_time = float(fields[1])
        end_time = float(fields[2])
    except ValueError:
        return None
    return Word(
        text=fields[0],
        start_time=start_time,
        end_time=max(end_time, start_time),
        is_background=is_background,
    )


def parse_word_annotation(text: str) -> List[Word]:
    """Parse a ``<...|...>`` annotation line, skipping malformed entries."""
    text = text.strip()
    if not (text.startswith("<") and text.endswith(">")):
        return []
    words = []
    for entry in text[1:-1].split("|"):
        word = _parse_annotation_entry(entry)
        if word is not None:
            words.append(word)
    return words


def parse_lyric_text(text: str) -> List[Line]:
    """Read LRC text with word-timing annotations back into Lines.

    An annotation line applies to the timed line directly above it.
    Metadata tags, blank lines and anything unrecognized are ignored.
    """
    lines: List[Line] = []
    pending: Optional[Line] = None

    for raw in text.splitlines():
        raw = raw.strip()
        if pending is not None and raw.startswith("<"):
            words = tuple(parse_word_annotation(raw))
            if words:
                pending = Line(
                    text=pending.text,
                    start_time=pending.start_time,
                    end_time=max(words[-1].end_time, pending.start_time),
                    words=words,
                    is_background=any(w.is_background for w in words),
                )
            lines.append(pending)
            pending = None
            continue

        match = _TIMESTAMP_RE.match(raw)
        if match is None:
            continue
        if pending is not None:
            lines.append(pending)
            pending = None

        minutes, secs, fraction, lyric = match.groups()
        lyric = lyric.strip()
        if not lyric:
            continue
        start_time = int(minutes) * 60 + int(secs)
        if fraction:
            start_time += int(fraction) / (10 ** len(fraction))
        pending = Line(text=lyric, start_time=float(start_time), end_time=float(start_time))

    if pending is not None:
        lines.append(pending)
    return lines


class LRCFormatter(BaseFormatter):
    """Formatter that produces karaoke LRC with word-timing annotations."""

    @property
    def name(self) -> str:
        return "Karaoke LRC"

    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-lyrics.lrc",
                content=to_lyric_text(lines),
                media_type="text/plain",
            )
        ]
