from __future__ import annotations

import re

from .models import (
    CssHint,
    DiscoveredElement,
    DiscoveryReport,
    ElementFlags,
    ElementKind,
    LabelHint,
    LocatorHint,
    NormalizedElement,
    PageModel,
    PlaceholderHint,
    RoleHint,
    SemanticType,
    TestIdHint,
    XPathHint,
)
from .selector_rules import normalize_space
from .validation import domain_from_url

MAX_NAME_LENGTH = 80
MAX_SLUG_LENGTH = 50

_KIND_BY_TYPE: dict[SemanticType, ElementKind] = {
    "button": "button",
    "link": "link",
    # No input type in the report, so checkbox/radio are not inferred.
    "input": "textbox",
    "select": "select",
    "textarea": "textarea",
    "other": "other",
}

_SLUG_JUNK = re.compile(r"[^a-z0-9]+")


def safe_name(value: str | None) -> str | None:
    return normalize_space(value, limit=MAX_NAME_LENGTH) or None


def kind_from_type(semantic_type: SemanticType) -> ElementKind:
    return _KIND_BY_TYPE.get(semantic_type, "other")


def build_name(element: DiscoveredElement) -> str | None:
    for value in (
        element.accessible_name,
        element.label_text,
        element.aria_label,
        element.name,
        element.id,
        element.text,
    ):
        name = safe_name(value)
        if name:
            return name
    return None


def build_locators(element: DiscoveredElement) -> tuple[LocatorHint, ...]:
    """Locator hints best first: testId, role, label, placeholder, css, xpath."""
    locators: list[LocatorHint] = []
    if element.test_id:
        locators.append(TestIdHint(element.test_id))
    # Role alone is still usable by some generators.
    if element.role:
        locators.append(RoleHint(element.role, safe_name(element.accessible_name)))
    label = safe_name(element.label_text)
    if label:
        locators.append(LabelHint(label))
    if element.placeholder:
        locators.append(PlaceholderHint(element.placeholder))
    if element.css:
        locators.append(CssHint(element.css))
    if element.xpath:
        locators.append(XPathHint(element.xpath))
    return tuple(locators)


def stable_element_id(element: DiscoveredElement, index: int) -> str:
    base = (
        element.test_id
        or element.id
        or element.name
        or element.aria_label
        or element.text
        or element.tag_name
        or ""
    )
    slug = _SLUG_JUNK.sub("-", normalize_space(base, limit=len(base)).lower()).strip("-")[:MAX_SLUG_LENGTH]
    return f"{element.type}-{slug or 'unnamed'}-{index}"


def _flags(element: DiscoveredElement) -> ElementFlags | None:
    if element.disabled is None and element.aria_disabled is None:
        return None
    return ElementFlags(disabled=element.disabled, aria_disabled=element.aria_disabled)


def normalize_element(element: DiscoveredElement, index: int) -> NormalizedElement:
    return NormalizedElement(
        id=stable_element_id(element, index),
        kind=kind_from_type(element.type),
        name=build_name(element),
        tag_name=element.tag_name or None,
        role=element.role or None,
        href=element.href if element.type == "link" else None,
        locators=build_locators(element),
        flags=_flags(element),
    )


def build_page_model(report: DiscoveryReport, title: str | None = None) -> PageModel:
    """Deterministically derive a framework-agnostic page model from a report.

    Raises ``InvalidUrlError`` when the report URL cannot be parsed; missing
    optional signals only leave the derived fields empty.
    """
    domain_from_url(report.url)
    return PageModel(
        url=report.url,
        scanned_at=report.scanned_at,
        title=title,
        elements=tuple(normalize_element(element, index) for index, element in enumerate(report.elements)),
    )
