from __future__ import annotations

import math
import re
from typing import Dict, List, Optional

from .constants import (
    BASE_HEIGHT,
    HEIGHT_WEIGHTS,
    PAGE_BREAK_MIN_RATIO,
    PAGE_BREAK_TAGS,
    PAGE_HEIGHT_PX,
)

TAG_PATTERNS = {
    "heading": re.compile(r"<h[1-6](?:\s[^>]*)?>"),
    "paragraph": re.compile(r"<p(?:\s[^>]*)?>"),
    "list": re.compile(r"<(?:ul|ol)(?:\s[^>]*)?>"),
    "image": re.compile(r"<img(?:\s[^>]*)?/?>"),
    "code": re.compile(r"<pre(?:\s[^>]*)?>"),
    "blockquote": re.compile(r"<blockquote(?:\s[^>]*)?>"),
}

CLOSING_TAG_RE = re.compile(r"</[^<>]*>")


class HeightEstimator:
    """Estimates the rendered height of an HTML fragment in page units."""

    def estimate(self, html: str) -> int:
        raise NotImplementedError


class TagWeightEstimator(HeightEstimator):
    """Weighted count of block-level opening tags plus a fixed base height."""

    def __init__(self, weights: Optional[Dict[str, int]] = None, base: int = BASE_HEIGHT) -> None:
        self.weights = dict(HEIGHT_WEIGHTS)
        if weights:
            unknown = set(weights) - set(TAG_PATTERNS)
            if unknown:
                raise ValueError(f"Unknown height weight keys: {sorted(unknown)}")
            self.weights.update(weights)
        self.base = base

    def estimate(self, html: str) -> int:
        height = self.base
        for kind, pattern in TAG_PATTERNS.items():
            height += len(pattern.findall(html)) * self.weights[kind]
        return height


DEFAULT_ESTIMATOR = TagWeightEstimator()


def estimate_height(html: str, estimator: HeightEstimator | None = None) -> int:
    return (estimator or DEFAULT_ESTIMATOR).estimate(html)


def split_into_pages(
    html: str,
    page_height: int = PAGE_HEIGHT_PX,
    estimator: HeightEstimator | None = None,
) -> List[str]:
    """Split rendered HTML into page fragments.

    The page count comes from the height estimate; the HTML is then divided
    into equal character shares, each cut pulled back to the last closing tag
    when that tag sits late enough in the page. Cuts only move, so joining
    the fragments gives back the input exactly.
    """
    if not html.strip():
        return [""]
    if page_height <= 0:
        raise ValueError("page_height must be positive")

    pages_needed = max(1, math.ceil(estimate_height(html, estimator) / page_height))
    if pages_needed == 1:
        return [html]

    share = math.ceil(len(html) / pages_needed)
    pages: List[str] = []
    start = 0
    for i in range(pages_needed):
        if i == pages_needed - 1:
            pages.append(html[start:])
            break
        naive_end = max(start, min((i + 1) * share, len(html)))
        cut = _snap_to_closing_tag(html, start, naive_end, share)
        pages.append(html[start:cut])
        start = cut
    return pages


def page_count(
    html: str,
    page_height: int = PAGE_HEIGHT_PX,
    estimator: HeightEstimator | None = None,
) -> int:
    return len(split_into_pages(html, page_height, estimator))


def _snap_to_closing_tag(html: str, start: int, naive_end: int, share: int) -> int:
    page = html[start:naive_end]
    # Latest candidate first; a malformed tag hands over to the next one.
    candidates = sorted({page.rfind(tag) for tag in PAGE_BREAK_TAGS} - {-1}, reverse=True)
    for break_point in candidates:
        if break_point < share * PAGE_BREAK_MIN_RATIO:
            break
        closing = CLOSING_TAG_RE.match(html, start + break_point)
        if closing is not None:
            return closing.end()
    return naive_end
