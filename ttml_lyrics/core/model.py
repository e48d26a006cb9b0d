"""Timed-text model: the Line and Word value types.

WHY: The TTML parser and every output formatter need one shared, typed
shape for lyrics. Parsing reconstructs words from syllable spans and
formatters only ever read the result, so the model is the contract
between the two sides.

HOW: Two frozen dataclasses form a hierarchy:
  Word: one sung word with its own timing and background flag
  Line: one timed paragraph of lyric text made of Words

RULES:
- All times are float seconds
- A Word's text is never empty and start_time <= end_time
- A Line's text is already trimmed and never empty
- words is an ordered tuple, ascending by start_time
- Instances are immutable; merging syllables produces a new Word
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class Word:
    """A single sung word, possibly assembled from several syllable spans.

    RULES:
    - text: trimmed, non-empty, syllables concatenated without separator
    - start_time: begin of the first syllable
    - end_time: end of the last syllable
    - is_background: True for background vocals (ttm:role="x-bg")
    """

    text: str
    start_time: float
    end_time: float
    is_background: bool = False

    def extend(self, text: str, end_time: float, is_background: bool = False) -> Word:
        """Return a copy of this word with another syllable appended."""
        return replace(
            self,
            text=self.text + text,
            end_time=max(end_time, self.start_time),
            is_background=self.is_background or is_background,
        )


@dataclass(frozen=True)
class Line:
    """One timed lyric line, built from a TTML ``<p>`` element.

    RULES:
    - text: trimmed, non-empty; words separated by single spaces
    - end_time: the paragraph's end, or start + 5s when it had none
    - words: may be empty for lines read back without annotations
    - is_background: paragraph role marker OR any background word
    """

    text: str
    start_time: float
    end_time: float
    words: Tuple[Word, ...] = field(default_factory=tuple)
    is_background: bool = False
