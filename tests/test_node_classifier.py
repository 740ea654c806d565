import pytest

from domrecon.node_classifier import (
    disabled_state,
    is_candidate,
    is_visible,
    passes_container_filter,
)
from domrecon.snapshot import BoundingBox, DomNode


def _node(tag: str, attributes: dict[str, str] | None = None, **overrides) -> DomNode:
    node = DomNode(
        tag=tag,
        attributes=attributes or {},
        style={"display": "block", "visibility": "visible", "opacity": "1"},
        rect=BoundingBox(width=120, height=24),
    )
    for key, value in overrides.items():
        setattr(node, key, value)
    return node


def test_visible_node_passes_all_checks() -> None:
    assert is_visible(_node("button"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"style": {"display": "none"}},
        {"style": {"visibility": "hidden"}},
        {"style": {"opacity": "0"}},
        {"hidden": True},
        {"rect": BoundingBox(width=0, height=20)},
        {"rect": BoundingBox(width=20, height=0)},
        {"rect": None},
    ],
)
def test_rendered_state_hides_node(overrides: dict) -> None:
    assert not is_visible(_node("button", **overrides))


def test_aria_hidden_true_hides_node() -> None:
    assert not is_visible(_node("button", {"aria-hidden": "true"}))
    assert is_visible(_node("button", {"aria-hidden": "false"}))


def test_partial_opacity_is_still_visible() -> None:
    assert is_visible(_node("button", style={"opacity": "0.5"}))


def test_native_interactive_tags_are_candidates() -> None:
    for tag in ("button", "input", "select", "textarea"):
        assert is_candidate(_node(tag)), tag


def test_anchor_requires_href_attribute() -> None:
    assert is_candidate(_node("a", {"href": "/home"}))
    assert is_candidate(_node("a", {"href": ""}))
    assert not is_candidate(_node("a"))


def test_summary_only_counts_inside_details() -> None:
    details = _node("details")
    summary = details.append(_node("summary"))
    assert is_candidate(summary)

    section = _node("section")
    orphan = section.append(_node("summary"))
    assert not is_candidate(orphan)


def test_interactive_role_makes_candidate_case_insensitively() -> None:
    assert is_candidate(_node("li", {"role": "MenuItem"}))
    assert not is_candidate(_node("li", {"role": "presentation"}))


def test_tabindex_must_be_non_negative_number() -> None:
    assert is_candidate(_node("li", {"tabindex": "0"}))
    assert is_candidate(_node("li", {"tabindex": "3"}))
    assert not is_candidate(_node("li", {"tabindex": "-1"}))
    assert not is_candidate(_node("li", {"tabindex": "abc"}))


def test_click_handler_via_attribute_or_property() -> None:
    assert is_candidate(_node("li", {"onclick": "go()"}))
    assert is_candidate(_node("li", onclick_property=True))


def test_contenteditable_true_is_candidate() -> None:
    assert is_candidate(_node("p", {"contenteditable": "true"}))
    assert not is_candidate(_node("p", {"contenteditable": "false"}))


def test_invisible_interactive_node_is_not_candidate() -> None:
    assert not is_candidate(_node("button", style={"display": "none"}))


def test_plain_div_is_not_candidate() -> None:
    assert not is_candidate(_node("div"))


def test_container_filter_requires_explicit_signal_for_div_and_span() -> None:
    assert not passes_container_filter(_node("div", {"contenteditable": "true"}))
    assert passes_container_filter(_node("div", {"role": "button"}))
    assert passes_container_filter(_node("span", {"tabindex": "0"}))
    assert passes_container_filter(_node("span", onclick_property=True))
    assert passes_container_filter(_node("p", {"contenteditable": "true"}))


def test_disabled_state_reports_native_and_aria_independently() -> None:
    neither = disabled_state(_node("button"))
    assert (neither.disabled, neither.aria_disabled) == (False, False)

    native = disabled_state(_node("button", {"disabled": ""}))
    assert (native.disabled, native.aria_disabled) == (True, False)

    by_property = disabled_state(_node("button", disabled_property=True))
    assert by_property.disabled is True

    aria = disabled_state(_node("div", {"aria-disabled": "true"}))
    assert (aria.disabled, aria.aria_disabled) == (False, True)

    both = disabled_state(_node("button", {"disabled": "disabled", "aria-disabled": "true"}))
    assert (both.disabled, both.aria_disabled) == (True, True)
