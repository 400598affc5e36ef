from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import PAGE_HEIGHT_PX, ZOOM_DEFAULT


@dataclass
class Node:
    """Base class for block tree nodes."""


@dataclass
class PlainText(Node):
    text: str


@dataclass
class Container(Node):
    class_list: str
    children: List[Node] = field(default_factory=list)

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self.class_list.split())


UNTERMINATED_BLOCK = "UnterminatedBlock"
ORPHAN_CLOSE = "OrphanClose"


@dataclass
class Diagnostic:
    kind: str
    offset: int
    snippet: str
    message: str


@dataclass
class BlockTree:
    children: List[Node] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class ParseResult:
    """Rendered HTML plus whatever was recovered from along the way.

    A result without diagnostics is a clean parse; otherwise the HTML is a
    best-effort rendering with the malformed syntax stripped.
    """

    html: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def kinds(self) -> list[str]:
        return [diag.kind for diag in self.diagnostics]


@dataclass
class MarkOverOptions:
    mode: str = "web"
    zoom: int = ZOOM_DEFAULT
    page_height: int = PAGE_HEIGHT_PX
    escape_classes: bool = False
