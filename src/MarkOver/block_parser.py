from __future__ import annotations

import logging
import re
from typing import List

from .delimiters import is_opener, iter_markers
from .model import (
    ORPHAN_CLOSE,
    UNTERMINATED_BLOCK,
    BlockTree,
    Container,
    Diagnostic,
    Node,
    PlainText,
)

SNIPPET_LENGTH = 40


def parse_blocks(text: str) -> BlockTree:
    """Build the angle block tree for already code-guarded text.

    Markers are read once and paired with a stack, then the tree is built in
    a second walk over the same markers. Both walks are linear and keep no
    call stack per nesting level, so depth is only limited by memory.
    Malformed markers are dropped and reported as diagnostics.
    """
    tree = BlockTree()
    markers = list(iter_markers(text))
    matched = _pair_markers(markers)

    parents: List[List[Node]] = [tree.children]
    cursor = 0
    dropping = False
    for index, marker in enumerate(markers):
        if not dropping:
            _append_text(parents[-1], text[cursor : marker.start()])
        dropping = False
        cursor = marker.end()

        if index not in matched:
            if is_opener(marker):
                # The dangling opener takes the text up to the next marker with it.
                tree.diagnostics.append(_diagnostic(UNTERMINATED_BLOCK, text, marker, "angle block not properly closed"))
                dropping = True
            else:
                tree.diagnostics.append(_diagnostic(ORPHAN_CLOSE, text, marker, "closing marker without an open block"))
        elif is_opener(marker):
            container = Container(class_list=marker.group("classes").strip())
            parents[-1].append(container)
            parents.append(container.children)
        else:
            parents.pop()

    if not dropping:
        _append_text(parents[-1], text[cursor:])
    if tree.diagnostics:
        logging.warning("Recovered from %d malformed angle block marker(s)", len(tree.diagnostics))
    return tree


def _pair_markers(markers: List[re.Match]) -> set[int]:
    """Indexes of markers that have a partner; the rest are dangling or orphaned."""
    matched: set[int] = set()
    open_stack: List[int] = []
    for index, marker in enumerate(markers):
        if is_opener(marker):
            open_stack.append(index)
        elif open_stack:
            matched.add(open_stack.pop())
            matched.add(index)
    return matched


def _append_text(children: List[Node], text: str) -> None:
    if text:
        children.append(PlainText(text))


def _diagnostic(kind: str, text: str, marker: re.Match, message: str) -> Diagnostic:
    offset = marker.start()
    snippet = text[offset : offset + SNIPPET_LENGTH]
    logging.debug("%s at offset %d: %s (%r)", kind, offset, message, snippet)
    return Diagnostic(kind=kind, offset=offset, snippet=snippet, message=message)
