"""Abstract base formatter and output container.

WHY: Every output format consumes the same parsed Lines but produces
different file content. This base class enforces a consistent interface
so the CLI and API client can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list so a formatter may emit several files
- ``suffix`` starts with a hyphen, e.g. ``"-lyrics.lrc"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from ttml_lyrics.core.model import Line


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-lyrics.lrc"`` → ``"song-lyrics.lrc"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/plain"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Karaoke LRC'."""

    @abstractmethod
    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        """Convert parsed lyric lines into one or more output files.

        Args:
            lines: Lines in display order, as returned by parse_document().

        Returns:
            List of FormatterOutput objects.
        """
