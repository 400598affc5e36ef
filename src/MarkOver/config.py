from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .constants import VIEW_MODES, ZOOM_MAX, ZOOM_MIN
from .model import MarkOverOptions

OPTION_KEYS = {"mode", "zoom", "page_height", "escape_classes"}


def parse_options(text: str, base: MarkOverOptions | None = None) -> MarkOverOptions:
    """Parse a YAML mapping of render options on top of ``base``."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Options YAML root must be a mapping.")

    options = base or MarkOverOptions()
    values = {
        "mode": options.mode,
        "zoom": options.zoom,
        "page_height": options.page_height,
        "escape_classes": options.escape_classes,
    }
    for key, value in data.items():
        if key not in OPTION_KEYS:
            logging.warning("Ignoring unknown option %r", key)
            continue
        values[key] = value
    return validate_options(MarkOverOptions(**values))


def load_options(path: str | Path, base: MarkOverOptions | None = None) -> MarkOverOptions:
    path = Path(path)
    logging.debug("Loading options from %s", path)
    return parse_options(path.read_text(encoding="utf-8"), base=base)


def validate_options(options: MarkOverOptions) -> MarkOverOptions:
    if options.mode not in VIEW_MODES:
        raise ValueError(f"mode must be one of {', '.join(VIEW_MODES)}, got {options.mode!r}")
    if isinstance(options.zoom, bool) or not isinstance(options.zoom, int):
        raise ValueError(f"zoom must be an integer percentage, got {options.zoom!r}")
    if not ZOOM_MIN <= options.zoom <= ZOOM_MAX:
        raise ValueError(f"zoom must be between {ZOOM_MIN} and {ZOOM_MAX}, got {options.zoom}")
    if isinstance(options.page_height, bool) or not isinstance(options.page_height, int) or options.page_height <= 0:
        raise ValueError(f"page_height must be a positive integer, got {options.page_height!r}")
    if not isinstance(options.escape_classes, bool):
        raise ValueError("escape_classes must be true or false")
    return options
