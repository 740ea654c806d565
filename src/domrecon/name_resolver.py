from __future__ import annotations

from .selector_rules import BUTTON_INPUT_TYPES, normalize_or_none
from .snapshot import DomNode, DomSnapshot


def visible_text(node: DomNode) -> str | None:
    return normalize_or_none(node.text_content)


def find_associated_label_text(node: DomNode, snapshot: DomSnapshot) -> str | None:
    element_id = node.attr("id")
    if element_id:
        label = snapshot.label_for(element_id)
        if label is not None:
            text = normalize_or_none(label.text_content)
            if text:
                return text

    for ancestor in node.ancestors(include_self=True):
        if ancestor.tag == "label":
            return normalize_or_none(ancestor.text_content)
    return None


def accessible_name(node: DomNode, snapshot: DomSnapshot, label_text: str | None = None) -> str | None:
    """Best-effort approximation of the accessible name.

    aria-label, then associated label text, then the ``value`` of button-like
    inputs, then ``alt``, then visible text. ``label_text`` may be passed when
    the caller already resolved it.
    """
    aria_label = normalize_or_none(node.attr("aria-label"))
    if aria_label:
        return aria_label

    label = label_text if label_text is not None else find_associated_label_text(node, snapshot)
    if label:
        return label

    if node.tag == "input" and (node.attr("type") or "").strip().lower() in BUTTON_INPUT_TYPES:
        value = normalize_or_none(node.attr("value"))
        if value:
            return value

    alt = normalize_or_none(node.attr("alt"))
    if alt:
        return alt

    return visible_text(node)
