from __future__ import annotations

from .models import ElementFlags
from .selector_rules import (
    GENERIC_CONTAINER_TAGS,
    NATIVE_INTERACTIVE_TAGS,
    is_interactive_role,
)
from .snapshot import DomNode


def is_visible(node: DomNode) -> bool:
    if node.style_value("display") == "none":
        return False
    if node.style_value("visibility") == "hidden":
        return False
    if node.style_value("opacity") == "0":
        return False
    if node.hidden:
        return False
    if node.rect is None or node.rect.is_empty:
        return False
    if node.attr("aria-hidden") == "true":
        return False
    return True


def disabled_state(node: DomNode) -> ElementFlags:
    disabled = node.disabled_property or node.has_attr("disabled")
    aria_disabled = node.attr("aria-disabled") == "true"
    return ElementFlags(disabled=disabled, aria_disabled=aria_disabled)


def has_click_handler(node: DomNode) -> bool:
    return node.onclick_property or node.has_attr("onclick")


def has_focusable_tabindex(node: DomNode) -> bool:
    raw = node.attr("tabindex")
    if raw is None:
        return False
    try:
        return float(raw.strip()) >= 0
    except ValueError:
        return False


def is_native_interactive(node: DomNode) -> bool:
    if node.tag in NATIVE_INTERACTIVE_TAGS:
        return True
    if node.tag == "a":
        return node.has_attr("href")
    if node.tag == "summary":
        return node.parent is not None and node.parent.tag == "details"
    return False


def is_candidate(node: DomNode) -> bool:
    if not is_visible(node):
        return False
    return (
        is_native_interactive(node)
        or is_interactive_role(node.attr("role"))
        or has_focusable_tabindex(node)
        or has_click_handler(node)
        or node.attr("contenteditable") == "true"
    )


def passes_container_filter(node: DomNode) -> bool:
    # Bare div/span wrappers only count when they carry an explicit interaction signal.
    if node.tag not in GENERIC_CONTAINER_TAGS:
        return True
    return bool(node.attr("role") or node.attr("tabindex") or has_click_handler(node))
