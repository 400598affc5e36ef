from __future__ import annotations

# Angle block markers: <>'classes' ... </>
OPENER_PREFIX = "<>'"
CLASS_QUOTE = "'"
CLOSER = "</>"

# Rendered container wrapper
CONTAINER_OPEN = '<div class="'
CONTAINER_TAG = "<div"
CONTAINER_CLOSE = "</div>"

# A4 at 96 dpi
PAGE_WIDTH_PX = 794
PAGE_HEIGHT_PX = 1123

ZOOM_MIN = 60
ZOOM_MAX = 140
ZOOM_DEFAULT = 100

VIEW_MODES = ("web", "paged")

# Rough height, in px, contributed by each opening tag
HEIGHT_WEIGHTS = {
    "heading": 40,
    "paragraph": 60,
    "list": 100,
    "image": 200,
    "code": 150,
    "blockquote": 80,
}
BASE_HEIGHT = 200

# Closing tags preferred as page boundaries, in search order
PAGE_BREAK_TAGS = ("</", "</p>", "</h", "</ul>", "</ol>")
# A boundary tag earlier than this share of the page is ignored
PAGE_BREAK_MIN_RATIO = 0.7
