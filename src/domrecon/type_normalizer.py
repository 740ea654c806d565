from __future__ import annotations

from .models import SemanticType
from .selector_rules import BUTTON_INPUT_TYPES, INTERACTIVE_ROLES

_ROLE_TYPES: dict[str, SemanticType] = {
    "textbox": "input",
    "combobox": "select",
    "listbox": "select",
    "link": "link",
    "button": "button",
}

_TAG_TYPES: dict[str, SemanticType] = {
    "button": "button",
    "select": "select",
    "textarea": "textarea",
}


def normalize_type(
    tag: str,
    role: str | None = None,
    href: str | None = None,
    type_attr: str | None = None,
) -> SemanticType:
    """Map tag/role signals onto the coarse semantic type.

    An interactive role wins over the tag. Checkbox and radio semantics are
    never inferred here.
    """
    normalized_role = (role or "").strip().lower()
    if normalized_role in INTERACTIVE_ROLES:
        return _ROLE_TYPES.get(normalized_role, "other")

    normalized_tag = (tag or "").strip().lower()
    if normalized_tag in _TAG_TYPES:
        return _TAG_TYPES[normalized_tag]
    if normalized_tag == "a":
        return "link" if href else "other"
    if normalized_tag == "input":
        input_type = (type_attr or "").strip().lower()
        return "button" if input_type in BUTTON_INPUT_TYPES else "input"
    return "other"
