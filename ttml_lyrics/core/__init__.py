"""Core timed-text model and TTML parsing.

WHY: The core package is the stable heart of the converter: the Line/Word
model and the TTML parser that builds it. Formatters and the API client
consume it and must not reach into parsing details.

HOW: model.py defines the value types, timecode.py parses time
expressions, parser.py walks a TTML tree and builds Lines.

RULES:
- The model is the contract between parsing and formatting
- Parsing is total: bad input yields [] or 0.0, never an exception
- No I/O in this package
"""

from ttml_lyrics.core.model import Line, Word
from ttml_lyrics.core.parser import parse_document
from ttml_lyrics.core.timecode import TimeCode, parse_time, parse_time_code

__all__ = ["Line", "Word", "TimeCode", "parse_document", "parse_time", "parse_time_code"]
