from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin


class MarkdownBridge:
    """Plain Markdown to HTML with line breaks, tables, strikethrough and task lists."""

    def __init__(self) -> None:
        self._md = (
            MarkdownIt("commonmark", {"breaks": True, "html": True})
            .use(tasklists_plugin)
            .enable(["table", "strikethrough"])
        )

    def render(self, text: str) -> str:
        if not text.strip():
            return ""
        return self._md.render(text)


_default_bridge: MarkdownBridge | None = None


def default_bridge() -> MarkdownBridge:
    global _default_bridge
    if _default_bridge is None:
        _default_bridge = MarkdownBridge()
    return _default_bridge


def render_markdown(text: str) -> str:
    return default_bridge().render(text)
