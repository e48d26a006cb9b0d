"""Shared test fixtures for the ttml_lyrics test suite.

WHY: Parser, formatter, client and CLI tests all need the same sample
lyric document and its expected parse. Centralizing them here avoids
duplication and keeps every test module on one authoritative example.

HOW: SAMPLE_TTML is an Apple-style word-timed TTML document covering
syllable merging, a background container span, a background paragraph,
a "M:SS" timestamp and an unsynced paragraph. The ``sample_lines``
fixture is the expected parse, written out by hand.

RULES:
- SAMPLE_TTML and sample_lines must stay in sync
- Times use values that are exact in binary or parse identically
"""

from typing import List

import pytest

from ttml_lyrics.core.model import Line, Word


SAMPLE_TTML = """<?xml version="1.0" encoding="UTF-8"?>
<tt xmlns="http://www.w3.org/ns/ttml" xmlns:ttm="http://www.w3.org/ns/ttml#metadata" xmlns:itunes="http://music.apple.com/lyric-ttml-internal" itunes:timing="Word" xml:lang="en">
  <head>
    <metadata>
      <ttm:agent type="person" xml:id="v1"/>
    </metadata>
  </head>
  <body dur="15.000">
    <div begin="1.000" end="6.000">
      <p begin="1.000" end="3.500" ttm:agent="v1"><span begin="1.000" end="1.400">Hel</span><span begin="1.400" end="1.800">lo</span> <span begin="1.900" end="2.500">darkness</span></p>
      <p begin="4.000" end="6.000" ttm:agent="v1"><span begin="4.000" end="4.500">my</span> <span begin="4.500" end="5.000">old</span> <span begin="5.000" end="6.000">friend</span> <span ttm:role="x-bg"><span begin="5.200" end="5.600">(friend)</span></span></p>
    </div>
    <div begin="7.000" end="15.000">
      <p begin="0:07.000" end="0:09.000" ttm:role="x-bg"><span begin="7.000" end="8.000">ooh</span></p>
      <p begin="10.000">Unsynced line here</p>
    </div>
  </body>
</tt>
"""


@pytest.fixture
def sample_ttml() -> str:
    """The sample TTML document as a string."""
    return SAMPLE_TTML


@pytest.fixture
def sample_lines() -> List[Line]:
    """Expected parse of SAMPLE_TTML."""
    return [
        Line(
            text="Hello darkness",
            start_time=1.0,
            end_time=3.5,
            words=(
                Word("Hello", 1.0, 1.8),
                Word("darkness", 1.9, 2.5),
            ),
        ),
        Line(
            text="my old friend (friend)",
            start_time=4.0,
            end_time=6.0,
            words=(
                Word("my", 4.0, 4.5),
                Word("old", 4.5, 5.0),
                Word("friend", 5.0, 6.0),
                Word("(friend)", 5.2, 5.6, is_background=True),
            ),
            is_background=True,
        ),
        Line(
            text="ooh",
            start_time=7.0,
            end_time=9.0,
            words=(Word("ooh", 7.0, 8.0),),
            is_background=True,
        ),
        Line(
            text="Unsynced line here",
            start_time=10.0,
            end_time=15.0,
            words=(Word("Unsynced line here", 10.0, 15.0),),
        ),
    ]
