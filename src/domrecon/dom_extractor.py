from __future__ import annotations

from typing import Any, TYPE_CHECKING

from .snapshot import DomSnapshot

if TYPE_CHECKING:
    from playwright.sync_api import Page

_SNAPSHOT_SCRIPT = """
() => {
  const elements = Array.from(document.querySelectorAll('*'));
  const positions = new Map();
  elements.forEach((el, index) => positions.set(el, index));

  const nodes = elements.map((el) => {
    const attrs = {};
    for (const attr of Array.from(el.attributes || [])) {
      attrs[attr.name] = attr.value;
    }

    const style = window.getComputedStyle(el);
    const rect = el.getBoundingClientRect();
    const parent = el.parentElement;

    return {
      tag: (el.tagName || '').toLowerCase(),
      attributes: attrs,
      style: {
        display: style.display,
        visibility: style.visibility,
        opacity: style.opacity,
      },
      rect: { width: rect.width, height: rect.height },
      hidden: el.hidden === true,
      disabled: el.disabled === true,
      onclick: typeof el.onclick === 'function',
      text: el.textContent || '',
      parent: parent && positions.has(parent) ? positions.get(parent) : -1,
    };
  });

  return {
    url: location.href || '',
    title: document.title || '',
    nodes,
  };
}
"""


def extract_dom_snapshot(page: Page) -> DomSnapshot:
    """Capture every element of the current document in one evaluate round-trip."""
    payload: dict[str, Any] = page.evaluate(_SNAPSHOT_SCRIPT)
    if not isinstance(payload, dict):
        payload = {}
    return DomSnapshot.from_payload(payload)
