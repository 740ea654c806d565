from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class BoundingBox:
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(eq=False, slots=True)
class DomNode:
    """One rendered element as handed over by the browser layer.

    ``style`` carries computed ``display``/``visibility``/``opacity`` values as
    strings. ``rect`` is ``None`` when the element has no layout box.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)
    rect: BoundingBox | None = None
    hidden: bool = False
    disabled_property: bool = False
    onclick_property: bool = False
    text_content: str = ""
    parent: DomNode | None = field(default=None, repr=False)
    children: list[DomNode] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.tag = (self.tag or "").strip().lower()

    def attr(self, name: str) -> str | None:
        return self.attributes.get(name)

    def has_attr(self, name: str) -> bool:
        return name in self.attributes

    def style_value(self, name: str) -> str:
        raw = self.style.get(name)
        return "" if raw is None else str(raw).strip()

    def append(self, child: DomNode) -> DomNode:
        child.parent = self
        self.children.append(child)
        return child

    def previous_siblings(self) -> Iterator[DomNode]:
        if self.parent is None:
            return
        siblings = self.parent.children
        position = next(index for index, item in enumerate(siblings) if item is self)
        for index in range(position - 1, -1, -1):
            yield siblings[index]

    def ancestors(self, include_self: bool = False) -> Iterator[DomNode]:
        current = self if include_self else self.parent
        while current is not None:
            yield current
            current = current.parent


@dataclass(slots=True)
class DomSnapshot:
    nodes: list[DomNode]
    url: str = ""
    title: str = ""

    def __iter__(self) -> Iterator[DomNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def label_for(self, element_id: str) -> DomNode | None:
        for node in self.nodes:
            if node.tag == "label" and node.attr("for") == element_id:
                return node
        return None

    @classmethod
    def from_root(cls, root: DomNode, url: str = "", title: str = "") -> DomSnapshot:
        ordered: list[DomNode] = []
        stack = [root]
        while stack:
            node = stack.pop()
            ordered.append(node)
            stack.extend(reversed(node.children))
        return cls(nodes=ordered, url=url, title=title)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> DomSnapshot:
        """Rebuild the element tree from the flat list produced by the page script.

        Each entry refers to its parent by position in the list (``-1`` for the
        document element); entries are already in document order.
        """
        raw_nodes: Sequence[Any] = payload.get("nodes") or []
        nodes: list[DomNode] = []
        for raw in raw_nodes:
            if not isinstance(raw, Mapping):
                continue
            node = DomNode(
                tag=str(raw.get("tag", "") or ""),
                attributes={str(k): str(v) for k, v in dict(raw.get("attributes") or {}).items()},
                style={str(k): str(v) for k, v in dict(raw.get("style") or {}).items()},
                rect=_to_bounding_box(raw.get("rect")),
                hidden=bool(raw.get("hidden", False)),
                disabled_property=bool(raw.get("disabled", False)),
                onclick_property=bool(raw.get("onclick", False)),
                text_content=str(raw.get("text", "") or ""),
            )
            parent_index = _to_int(raw.get("parent"), default=-1)
            if 0 <= parent_index < len(nodes):
                nodes[parent_index].append(node)
            nodes.append(node)

        return cls(
            nodes=nodes,
            url=str(payload.get("url", "") or ""),
            title=str(payload.get("title", "") or ""),
        )


def _to_bounding_box(raw: Any) -> BoundingBox | None:
    if not isinstance(raw, Mapping):
        return None
    return BoundingBox(width=_to_float(raw.get("width")), height=_to_float(raw.get("height")))


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
