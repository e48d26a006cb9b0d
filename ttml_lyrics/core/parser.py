"""TTML document parsing into timed Lines and Words.

WHY: Lyric providers deliver TTML where a "word" is often several
syllable ``<span>`` elements and the only hint that a new word starts is
a whitespace text node between two spans. Documents are also inconsistent:
spans nest inside spans, end times and roles are missing. Formatters need
clean, word-level timing regardless.

HOW: The document is parsed with ElementTree. Paragraphs are collected
per ``<div>`` (or directly when there are none). Each paragraph's child
nodes are walked recursively with a shared accumulator holding the line
text built so far and the words extracted so far. Leaf spans either start
a new Word or, when nothing separates them from the previous span, are
merged into it.

RULES:
- Element names are matched on their local name, case-insensitively
- <p> without begin → dropped; without end → begin + 5 seconds
- <span> without begin/end → the paragraph's begin/end
- Whitespace-only text node → at most one space in the line text
- Leaf span merges into the previous word when the line text does not end
  in whitespace and the span's raw text does not start with a space
- Role "x-bg" or "background" marks background; probed as ttm:role,
  then role in any other namespace, then plain role
- Paragraph role flags the Line only; span role flags its words
- Any parse or traversal error → [] (never a partial result)
- Output is stably sorted by start_time
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from ttml_lyrics.core.model import Line, Word
from ttml_lyrics.core.timecode import parse_time

logger = logging.getLogger(__name__)

DEFAULT_LINE_DURATION_S = 5.0
"""Duration assumed for a paragraph that has a begin but no end."""

_TTML_METADATA_NS = "http://www.w3.org/ns/ttml#metadata"

_ROLE_ATTRIBUTE = "role"

_BACKGROUND_ROLES = frozenset({"x-bg", "background"})


@dataclass
class _LineAccumulator:
    """Mutable state shared by the recursive span walk of one paragraph."""

    line_start: float
    line_end: float
    text: str = ""
    words: List[Word] = field(default_factory=list)

    def ends_with_space(self) -> bool:
        return bool(self.text) and self.text[-1].isspace()


def parse_document(markup_text: str) -> List[Line]:
    """Parse a TTML document into Lines sorted by start time.

    Args:
        markup_text: The raw TTML document.

    Returns:
        The parsed lines, or an empty list when the document cannot be
        parsed or contains no usable paragraph.
    """
    try:
        root = ET.fromstring(markup_text)
        lines: List[Line] = []
        for paragraph in _collect_paragraphs(root):
            line = _parse_paragraph(paragraph)
            if line is not None:
                lines.append(line)
    except Exception as e:
        logger.warning("Failed to parse TTML document: %s", e)
        return []

    lines.sort(key=lambda line: line.start_time)
    logger.debug("Parsed %d lines from TTML document", len(lines))
    return lines


def _local_name(element: ET.Element) -> str:
    """Return the lowercase tag name without its ``{namespace}`` prefix."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1].lower()


def _collect_paragraphs(root: ET.Element) -> List[ET.Element]:
    """Gather <p> elements per <div> in document order.

    Falls back to every <p> in the document when it has no <div>. A <p>
    under nested divs is returned once.
    """
    groups = [el for el in root.iter() if _local_name(el) == "div"]
    if not groups:
        return [el for el in root.iter() if _local_name(el) == "p"]

    seen = set()
    paragraphs: List[ET.Element] = []
    for group in groups:
        for el in group.iter():
            if el is group or _local_name(el) != "p" or id(el) in seen:
                continue
            seen.add(id(el))
            paragraphs.append(el)
    return paragraphs


def _parse_paragraph(paragraph: ET.Element) -> Optional[Line]:
    """Build a Line from one <p> element, or None when it has no content."""
    begin = paragraph.get("begin")
    if not begin:
        return None

    line_start = parse_time(begin)
    end = paragraph.get("end")
    line_end = parse_time(end) if end else line_start + DEFAULT_LINE_DURATION_S

    acc = _LineAccumulator(line_start=line_start, line_end=line_end)
    _walk_spans(paragraph, acc, False)

    # Unsynced paragraph: the whole text is one word.
    if not acc.words:
        direct_text = _direct_text(paragraph).strip()
        if direct_text:
            acc.words.append(Word(direct_text, line_start, max(line_end, line_start)))

    text = acc.text.strip()
    if not text:
        return None

    words = tuple(sorted(acc.words, key=lambda word: word.start_time))
    is_background = _is_background(paragraph) or any(w.is_background for w in words)
    return Line(
        text=text,
        start_time=line_start,
        end_time=line_end,
        words=words,
        is_background=is_background,
    )


def _walk_spans(element: ET.Element, acc: _LineAccumulator, background: bool) -> None:
    """Walk the child nodes of ``element``, extracting words into ``acc``.

    ``background`` is True when an enclosing span carries a background
    role; it applies to every word extracted below it.
    """
    for node in _child_nodes(element):
        if isinstance(node, str):
            _append_text_node(acc, node)
            continue
        if _local_name(node) != "span":
            continue

        span_background = background or _is_background(node)
        if _has_direct_span_children(node):
            _walk_spans(node, acc, span_background)
        else:
            _add_leaf_span(node, acc, span_background)


def _append_text_node(acc: _LineAccumulator, text: str) -> None:
    if text.strip():
        acc.text += text
    elif acc.text and not acc.ends_with_space():
        # Whitespace between spans is the word boundary signal.
        acc.text += " "


def _add_leaf_span(span: ET.Element, acc: _LineAccumulator, background: bool) -> None:
    """Turn a span without nested spans into a new or merged Word."""
    raw_text = _direct_text(span)
    if not raw_text:
        return

    should_merge = (
        bool(acc.words)
        and bool(acc.text)
        and not acc.ends_with_space()
        and not raw_text.startswith(" ")
    )
    acc.text += raw_text

    word_text = raw_text.strip()
    if not word_text:
        return

    begin = span.get("begin")
    end = span.get("end")
    start_time = parse_time(begin) if begin else acc.line_start
    end_time = parse_time(end) if end else acc.line_end

    if should_merge:
        acc.words[-1] = acc.words[-1].extend(word_text, end_time, background)
    else:
        acc.words.append(Word(
            text=word_text,
            start_time=start_time,
            end_time=max(end_time, start_time),
            is_background=background,
        ))


def _child_nodes(element: ET.Element) -> Iterator[Union[str, ET.Element]]:
    """Yield text and element children in document order, DOM style.

    ElementTree stores text before the first child in ``element.text`` and
    text after each child in ``child.tail``.
    """
    if element.text:
        yield element.text
    for child in element:
        yield child
        if child.tail:
            yield child.tail


def _direct_text(element: ET.Element) -> str:
    """Return the element's own text, excluding text inside child elements."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _has_direct_span_children(element: ET.Element) -> bool:
    return any(_local_name(child) == "span" for child in element)


def _role(element: ET.Element) -> Optional[str]:
    """Probe role attributes in priority order; the first one present wins.

    ttm:role in the TTML metadata namespace, then ``role`` in any other
    namespace (e.g. the older TTAF one), then the plain ``role``.
    """
    value = element.get("{%s}%s" % (_TTML_METADATA_NS, _ROLE_ATTRIBUTE))
    if value:
        return value
    for name, value in element.attrib.items():
        if name.startswith("{") and name.rsplit("}", 1)[-1] == _ROLE_ATTRIBUTE and value:
            return value
    return element.get(_ROLE_ATTRIBUTE) or None


def _is_background(element: ET.Element) -> bool:
    role = _role(element)
    return role is not None and role.strip() in _BACKGROUND_ROLES
