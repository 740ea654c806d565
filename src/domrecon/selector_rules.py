from __future__ import annotations

import re

INTERACTIVE_ROLES = frozenset(
    {
        "button",
        "link",
        "textbox",
        "checkbox",
        "radio",
        "switch",
        "combobox",
        "listbox",
        "option",
        "menuitem",
        "tab",
        "slider",
        "spinbutton",
    }
)

TEST_ID_ATTRS = (
    "data-testid",
    "data-test",
    "data-test-id",
)

NATIVE_INTERACTIVE_TAGS = frozenset({"button", "input", "select", "textarea"})
GENERIC_CONTAINER_TAGS = frozenset({"div", "span"})
BUTTON_INPUT_TYPES = frozenset({"button", "submit", "reset"})

MAX_TEXT_LENGTH = 200

_CSS_SPECIAL_CHARS = re.compile(r'(["\\.#:\[\]])')


def normalize_space(value: str | None, limit: int = MAX_TEXT_LENGTH) -> str:
    if not value:
        return ""
    compact = re.sub(r"\s+", " ", str(value)).strip()
    return compact[:limit] if compact else ""


def normalize_or_none(value: str | None, limit: int = MAX_TEXT_LENGTH) -> str | None:
    return normalize_space(value, limit=limit) or None


def escape_css_value(value: str) -> str:
    return _CSS_SPECIAL_CHARS.sub(r"\\\1", value)


def is_interactive_role(role: str | None) -> bool:
    return bool(role) and role.strip().lower() in INTERACTIVE_ROLES
