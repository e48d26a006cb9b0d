"""TTML time expression parsing.

WHY: Every ``begin``/``end`` attribute in a lyric document is a time
expression, and real documents are sloppy about them. A single bad
timestamp must never cost the whole line, let alone the document.

HOW: The token is split on ``:`` and each part is parsed as a decimal.
Unparsable parts count as zero. The outcome is a TimeCode that keeps
the seconds value and whether any fallback happened; ``parse_time``
exposes only the seconds.

RULES:
- "9.731" → 9.731 (plain seconds)
- "1:23.456" → 83.456 (MM:SS.fraction)
- "1:02:03.5" → 3723.5 (HH:MM:SS.fraction)
- Any other number of ``:`` parts → 0.0
- A non-numeric part contributes 0.0, the other parts still count
- nan/inf are treated as non-numeric
- parse_time never raises; it cannot distinguish 0.0 from malformed
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional

# Plain decimal numbers only: no exponents, no digit separators.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Multipliers for MM:SS and HH:MM:SS forms, most significant part first.
_PART_WEIGHTS = {
    2: (60.0, 1.0),
    3: (3600.0, 60.0, 1.0),
}


class TimeCode(NamedTuple):
    """Result of parsing one time expression.

    ``valid`` is False when the token, or any part of it, was coerced to
    zero. The seconds value is usable either way.
    """

    seconds: float
    valid: bool


def _parse_decimal(text: str) -> Optional[float]:
    """Parse a plain decimal number, returning None when it is not one."""
    text = text.strip()
    if not _DECIMAL_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_time_code(token: str) -> TimeCode:
    """Parse a TTML time expression into seconds with a validity flag.

    Args:
        token: Raw attribute value, e.g. ``"1:23.456"``.

    Returns:
        TimeCode with the seconds value and whether parsing was clean.
    """
    clean = (token or "").strip()

    if ":" not in clean:
        value = _parse_decimal(clean)
        if value is None:
            return TimeCode(0.0, False)
        return TimeCode(value, True)

    parts = clean.split(":")
    weights = _PART_WEIGHTS.get(len(parts))
    if weights is None:
        return TimeCode(0.0, False)

    seconds = 0.0
    valid = True
    for part, weight in zip(parts, weights):
        value = _parse_decimal(part)
        if value is None:
            valid = False
            continue
        seconds += value * weight
    return TimeCode(seconds, valid)


def parse_time(token: str) -> float:
    """Parse a TTML time expression into seconds, 0.0 when malformed."""
    return parse_time_code(token).seconds
