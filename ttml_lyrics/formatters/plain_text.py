"""Plain lyric sheet formatter.

WHY: Editors and reviewers often want just the words of a song, without
timestamps or annotations, e.g. to proofread a lyric document before it
goes to a player.

HOW: Writes one text line per Line in the given order. Background vocal
lines are wrapped in parentheses, the usual lyric-sheet convention.

RULES:
- One output line per Line, no timestamps
- Background lines (is_background) are written as "(text)"
- Trailing newline only when there is content
- Output suffix: "-lyrics.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from ttml_lyrics.core.model import Line
from ttml_lyrics.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces an untimed lyric sheet."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        rendered = []
        for line in lines:
            if line.is_background:
                rendered.append("({})".format(line.text))
            else:
                rendered.append(line.text)

        content = "\n".join(rendered)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-lyrics.txt",
                content=content,
                media_type="text/plain",
            )
        ]
