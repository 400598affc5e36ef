from __future__ import annotations

import logging
from typing import List

from markdown_it.common.utils import escapeHtml

from . import code_guard
from .block_parser import parse_blocks
from .constants import CONTAINER_CLOSE, CONTAINER_OPEN
from .delimiters import find_matching_tag_end
from .markdown_bridge import MarkdownBridge, default_bridge
from .model import BlockTree, Container, MarkOverOptions, Node, ParseResult, PlainText


def parse(
    text: str,
    options: MarkOverOptions | None = None,
    bridge: MarkdownBridge | None = None,
) -> ParseResult:
    """Convert MarkOver source into HTML.

    Code spans are guarded before any marker scanning, so angle block syntax
    inside code is left alone. Malformed markers never raise; they are
    stripped and listed in the result's diagnostics.
    """
    options = options or MarkOverOptions()
    bridge = bridge or default_bridge()
    if not text.strip():
        return ParseResult(html="")

    logging.debug("Parsing %d chars (mode=%s, zoom=%s)", len(text), options.mode, options.zoom)
    guarded, table = code_guard.protect(text)
    logging.debug("Guarded %d code spans", len(table))
    tree = parse_blocks(guarded)
    _restore_tree(tree, table)
    html = render_tree(tree, bridge, escape_classes=options.escape_classes)
    return ParseResult(html=html, diagnostics=tree.diagnostics)


def resolve(text: str, bridge: MarkdownBridge | None = None) -> str:
    return parse(text, bridge=bridge).html


def render_tree(tree: BlockTree, bridge: MarkdownBridge, escape_classes: bool = False) -> str:
    parts: list[str] = []
    # Work items are either nodes or literal markup, consumed from the end.
    stack: list[Node | str] = list(reversed(tree.children))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, PlainText):
            parts.append(bridge.render(item.text))
        elif isinstance(item, Container):
            class_list = escapeHtml(item.class_list) if escape_classes else item.class_list
            parts.append(f'{CONTAINER_OPEN}{class_list}">')
            stack.append(CONTAINER_CLOSE)
            stack.extend(reversed(item.children))
    return "".join(parts)


def split_rendered_containers(text: str) -> List[tuple[bool, str]]:
    """Split text into top-level rendered containers and the spans around them.

    Public helper for text that already mixes container markup with raw
    Markdown. ``parse`` never needs it, because the tree keeps containers
    away from the Markdown bridge.

    Each entry is ``(is_container, span)``. Nested containers stay inside
    their parent's span. An unbalanced container and everything after it is
    returned as a plain span.
    """
    spans: List[tuple[bool, str]] = []
    i = 0
    while i < len(text):
        div_start = text.find(CONTAINER_OPEN, i)
        if div_start == -1:
            spans.append((False, text[i:]))
            break
        if div_start > i:
            spans.append((False, text[i:div_start]))
        div_end = find_matching_tag_end(text, div_start)
        if div_end is None:
            spans.append((False, text[div_start:]))
            break
        end = div_end + len(CONTAINER_CLOSE)
        spans.append((True, text[div_start:end]))
        i = end
    return spans


def render_mixed(text: str, bridge: MarkdownBridge | None = None) -> str:
    """Render plain spans of partially rendered text, passing container markup through.

    Not part of the ``parse`` pipeline; see ``split_rendered_containers``.
    """
    bridge = bridge or default_bridge()
    parts: list[str] = []
    for is_container, span in split_rendered_containers(text):
        if is_container:
            parts.append(span)
        elif span.strip():
            parts.append(bridge.render(span))
    return "".join(parts)


def _restore_tree(tree: BlockTree, table: dict[str, str]) -> None:
    if not table:
        return
    stack: list[Node] = list(tree.children)
    while stack:
        node = stack.pop()
        if isinstance(node, PlainText):
            node.text = code_guard.restore(node.text, table)
        elif isinstance(node, Container):
            node.class_list = code_guard.restore(node.class_list, table)
            stack.extend(node.children)
