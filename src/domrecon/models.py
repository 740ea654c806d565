from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Literal, Mapping, Union

from .validation import ReportFormatError, domain_from_url

SemanticType = Literal["button", "link", "input", "select", "textarea", "other"]
ElementKind = Literal["button", "link", "textbox", "checkbox", "radio", "select", "textarea", "other"]
LocatorStrategy = Literal["testId", "role", "label", "placeholder", "css", "xpath"]

SEMANTIC_TYPES: tuple[SemanticType, ...] = ("button", "link", "input", "select", "textarea", "other")
ELEMENT_KINDS: tuple[ElementKind, ...] = (
    "button",
    "link",
    "textbox",
    "checkbox",
    "radio",
    "select",
    "textarea",
    "other",
)

# python attribute -> report wire key
_ELEMENT_FIELDS = (
    ("type", "type"),
    ("tag_name", "tagName"),
    ("role", "role"),
    ("accessible_name", "accessibleName"),
    ("label_text", "labelText"),
    ("test_id", "testId"),
    ("text", "text"),
    ("id", "id"),
    ("name", "name"),
    ("href", "href"),
    ("placeholder", "placeholder"),
    ("aria_label", "ariaLabel"),
    ("disabled", "disabled"),
    ("aria_disabled", "ariaDisabled"),
    ("type_attr", "typeAttr"),
    ("value", "value"),
    ("css", "css"),
    ("xpath", "xpath"),
)


@dataclass(frozen=True, slots=True)
class DiscoveredElement:
    type: SemanticType
    tag_name: str
    role: str | None = None
    accessible_name: str | None = None
    label_text: str | None = None
    test_id: str | None = None
    text: str | None = None
    id: str | None = None
    name: str | None = None
    href: str | None = None
    placeholder: str | None = None
    aria_label: str | None = None
    disabled: bool | None = None
    aria_disabled: bool | None = None
    type_attr: str | None = None
    value: str | None = None
    css: str | None = None
    xpath: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for attribute, key in _ELEMENT_FIELDS:
            value = getattr(self, attribute)
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> DiscoveredElement:
        values: dict[str, Any] = {}
        for attribute, key in _ELEMENT_FIELDS:
            raw = payload.get(key)
            if raw is None:
                continue
            if attribute in {"disabled", "aria_disabled"}:
                values[attribute] = bool(raw)
            else:
                values[attribute] = str(raw)
        element_type = values.pop("type", "other")
        if element_type not in SEMANTIC_TYPES:
            element_type = "other"
        tag_name = values.pop("tag_name", "")
        return cls(type=element_type, tag_name=tag_name, **values)


@dataclass(frozen=True, slots=True)
class DiscoveryReport:
    url: str
    scanned_at: str
    counts: dict[SemanticType, int]
    elements: tuple[DiscoveredElement, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "scannedAt": self.scanned_at,
            "counts": {key: int(self.counts.get(key, 0)) for key in SEMANTIC_TYPES},
            "elements": [element.to_dict() for element in self.elements],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> DiscoveryReport:
        """Load a report payload; counts are always recomputed from the elements.

        Raises ``ReportFormatError`` when ``counts`` is present but is not a
        mapping of integers.
        """
        _check_counts(payload.get("counts"))
        elements = tuple(
            DiscoveredElement.from_dict(item) for item in payload.get("elements") or [] if isinstance(item, Mapping)
        )
        return cls(
            url=str(payload.get("url", "")),
            scanned_at=str(payload.get("scannedAt", "")),
            counts=count_by_type(elements),
            elements=elements,
        )


def count_by_type(elements: Iterable[DiscoveredElement]) -> dict[SemanticType, int]:
    tally = Counter(element.type for element in elements)
    return {semantic_type: tally.get(semantic_type, 0) for semantic_type in SEMANTIC_TYPES}


def _check_counts(raw_counts: Any) -> None:
    if raw_counts is None:
        return
    if not isinstance(raw_counts, Mapping):
        raise ReportFormatError("counts must be an object keyed by element type.")
    for key, value in raw_counts.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ReportFormatError(f"counts.{key} must be an integer (got {value!r}).")


@dataclass(frozen=True, slots=True)
class TestIdHint:
    strategy: ClassVar[LocatorStrategy] = "testId"
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}


@dataclass(frozen=True, slots=True)
class RoleHint:
    strategy: ClassVar[LocatorStrategy] = "role"
    role: str
    name: str | None = None

    def to_dict(self) -> dict[str, str]:
        payload = {"strategy": self.strategy, "role": self.role}
        if self.name is not None:
            payload["name"] = self.name
        return payload


@dataclass(frozen=True, slots=True)
class LabelHint:
    strategy: ClassVar[LocatorStrategy] = "label"
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}


@dataclass(frozen=True, slots=True)
class PlaceholderHint:
    strategy: ClassVar[LocatorStrategy] = "placeholder"
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}


@dataclass(frozen=True, slots=True)
class CssHint:
    strategy: ClassVar[LocatorStrategy] = "css"
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}


@dataclass(frozen=True, slots=True)
class XPathHint:
    strategy: ClassVar[LocatorStrategy] = "xpath"
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}


LocatorHint = Union[TestIdHint, RoleHint, LabelHint, PlaceholderHint, CssHint, XPathHint]


@dataclass(frozen=True, slots=True)
class ElementFlags:
    disabled: bool | None = None
    aria_disabled: bool | None = None

    def to_dict(self) -> dict[str, bool]:
        payload: dict[str, bool] = {}
        if self.disabled is not None:
            payload["disabled"] = self.disabled
        if self.aria_disabled is not None:
            payload["ariaDisabled"] = self.aria_disabled
        return payload


@dataclass(frozen=True, slots=True)
class NormalizedElement:
    id: str
    kind: ElementKind
    name: str | None = None
    tag_name: str | None = None
    role: str | None = None
    href: str | None = None
    locators: tuple[LocatorHint, ...] = ()
    flags: ElementFlags | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id, "kind": self.kind}
        if self.name is not None:
            payload["name"] = self.name
        if self.tag_name is not None:
            payload["tagName"] = self.tag_name
        if self.role is not None:
            payload["role"] = self.role
        if self.href is not None:
            payload["href"] = self.href
        payload["locators"] = [hint.to_dict() for hint in self.locators]
        if self.flags is not None:
            payload["flags"] = self.flags.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class PageModel:
    url: str
    scanned_at: str
    title: str | None = None
    elements: tuple[NormalizedElement, ...] = field(default_factory=tuple)

    @property
    def domain(self) -> str:
        return domain_from_url(self.url)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "url": self.url,
            "domain": self.domain,
            "scannedAt": self.scanned_at,
        }
        if self.title is not None:
            payload["title"] = self.title
        payload["elements"] = [element.to_dict() for element in self.elements]
        return payload
