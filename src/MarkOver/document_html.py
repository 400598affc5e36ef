from __future__ import annotations

import logging
from typing import Sequence

from markdown_it.common.utils import escapeHtml

from . import paginator, renderer_html
from .constants import PAGE_WIDTH_PX
from .markdown_bridge import MarkdownBridge
from .model import MarkOverOptions, ParseResult

PAGE_STYLE = """\
body { margin: 0; background: #f3f4f6; font-family: sans-serif; }
.markover-view { transform-origin: top left; }
.markover-page { background: #fff; margin: 16px auto; box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15); }
.markover-page-body { padding: 32px; overflow: hidden; box-sizing: border-box; }
.markover-page-footer { text-align: center; font-size: 12px; color: #6b7280; padding: 8px 0; border-top: 1px solid #e5e7eb; }
"""


def build_document(
    source: str,
    options: MarkOverOptions | None = None,
    title: str = "MarkOver",
    bridge: MarkdownBridge | None = None,
) -> tuple[str, ParseResult]:
    """Parse MarkOver source and wrap it in a complete HTML document for the chosen view."""
    options = options or MarkOverOptions()
    result = renderer_html.parse(source, options=options, bridge=bridge)
    if options.mode == "paged":
        pages = paginator.split_into_pages(result.html, page_height=options.page_height)
        logging.info("Split content into %d page(s)", len(pages))
        return render_paged_document(pages, options, title), result
    return render_web_document(result.html, options, title), result


def render_web_document(html: str, options: MarkOverOptions, title: str = "MarkOver") -> str:
    body = f'<div class="markover-view markover-content" style="{_zoom_style(options.zoom)}">\n{html}</div>'
    return _wrap(body, title)


def render_paged_document(pages: Sequence[str], options: MarkOverOptions, title: str = "MarkOver") -> str:
    total = len(pages)
    page_blocks: list[str] = []
    for index, page_html in enumerate(pages, start=1):
        page_blocks.append(
            f'<section class="markover-page" style="width: {PAGE_WIDTH_PX}px;">\n'
            f'<div class="markover-page-body markover-content" '
            f'style="min-height: {options.page_height}px; max-height: {options.page_height}px;">\n'
            f"{page_html}</div>\n"
            f'<div class="markover-page-footer">Page {index} of {total}</div>\n'
            f"</section>"
        )
    body = f'<div class="markover-view" style="{_zoom_style(options.zoom)}">\n' + "\n".join(page_blocks) + "\n</div>"
    return _wrap(body, title)


def _zoom_style(zoom: int) -> str:
    scale = zoom / 100
    return f"transform: scale({scale:g}); width: {100 / scale:g}%;"


def _wrap(body: str, title: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
        f"<title>{escapeHtml(title)}</title>\n"
        f"<style>\n{PAGE_STYLE}</style>\n"
        f"</head>\n<body>\n{body}\n</body>\n</html>\n"
    )
