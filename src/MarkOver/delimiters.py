from __future__ import annotations

import re
from typing import Iterator, Optional

from .constants import CLASS_QUOTE, CLOSER, CONTAINER_CLOSE, CONTAINER_TAG, OPENER_PREFIX

# <>'class list' with no quote inside the class list; an empty list still opens a block.
OPENER_RE = re.compile(re.escape(OPENER_PREFIX) + f"(?P<classes>[^{CLASS_QUOTE}]*)" + re.escape(CLASS_QUOTE))
# Leftmost marker wins; a closer inside an opener's class list belongs to the opener.
MARKER_RE = re.compile(OPENER_RE.pattern + "|" + re.escape(CLOSER))


def find_opener(text: str, start: int = 0) -> Optional[re.Match]:
    return OPENER_RE.search(text, start)


def is_opener(marker: re.Match) -> bool:
    return marker.group("classes") is not None


def iter_markers(text: str, start: int = 0, end: Optional[int] = None) -> Iterator[re.Match]:
    """Openers and closers in document order, each consumed whole."""
    return MARKER_RE.finditer(text, start, len(text) if end is None else end)


def find_matching_close(text: str, open_index: int, opener_length: int) -> Optional[int]:
    """Return the start index of the closer that balances the opener at open_index.

    Depth counting starts at 1 just past the opener. Markers are taken in
    document order and each one moves the scan past itself, so the scan
    always terminates. Returns None when the opener is never closed.
    """
    depth = 1
    for marker in iter_markers(text, open_index + opener_length):
        if is_opener(marker):
            depth += 1
            continue
        depth -= 1
        if depth == 0:
            return marker.start()
    return None


def find_matching_tag_end(
    text: str,
    start: int,
    open_tag: str = CONTAINER_TAG,
    close_tag: str = CONTAINER_CLOSE,
) -> Optional[int]:
    """Same depth counting, over rendered tags.

    ``start`` must point at an ``open_tag``. Returns the start index of the
    matching ``close_tag`` or None.
    """
    depth = 0
    i = start
    while i < len(text):
        open_at = text.find(open_tag, i)
        close_at = text.find(close_tag, i)
        if open_at == -1 and close_at == -1:
            break
        if open_at != -1 and (close_at == -1 or open_at < close_at):
            depth += 1
            i = open_at + len(open_tag)
        else:
            depth -= 1
            if depth == 0:
                return close_at
            i = close_at + len(close_tag)
    return None
