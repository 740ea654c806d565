from __future__ import annotations

from .selector_rules import TEST_ID_ATTRS, escape_css_value
from .snapshot import DomNode


def find_test_id(node: DomNode) -> str | None:
    for attr in TEST_ID_ATTRS:
        value = node.attr(attr)
        if value:
            return value
    return None


def best_css(node: DomNode) -> str:
    """Most stable CSS hint available for ``node``.

    Preference: test-id (matching any of the test-id attributes), id, name,
    aria-label, then the bare tag. The result is not guaranteed to be unique.
    """
    tag = node.tag

    test_id = find_test_id(node)
    if test_id:
        escaped = escape_css_value(test_id)
        return ", ".join(f'[{attr}="{escaped}"]' for attr in TEST_ID_ATTRS)

    element_id = node.attr("id")
    if element_id:
        return f"#{escape_css_value(element_id)}"

    name = node.attr("name")
    if name:
        return f'{tag}[name="{escape_css_value(name)}"]'

    aria_label = node.attr("aria-label")
    if aria_label:
        return f'{tag}[aria-label="{escape_css_value(aria_label)}"]'

    return tag


def xpath_for(node: DomNode) -> str:
    element_id = node.attr("id")
    if element_id:
        return f"//*[@id={_xpath_literal(element_id)}]"

    parts: list[str] = []
    for current in node.ancestors(include_self=True):
        index = 1 + sum(1 for sibling in current.previous_siblings() if sibling.tag == current.tag)
        parts.append(f"{current.tag}[{index}]")
    parts.reverse()
    return "/" + "/".join(parts)


def _xpath_literal(value: str) -> str:
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    pieces = value.split('"')
    return "concat(" + ", '\"', ".join(f'"{piece}"' for piece in pieces) + ")"

