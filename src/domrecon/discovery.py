from __future__ import annotations

import logging
from datetime import datetime, timezone

from .locator_generator import best_css, find_test_id, xpath_for
from .models import DiscoveredElement, DiscoveryReport, count_by_type
from .name_resolver import accessible_name, find_associated_label_text, visible_text
from .node_classifier import disabled_state, is_candidate, passes_container_filter
from .snapshot import DomNode, DomSnapshot
from .type_normalizer import normalize_type

logger = logging.getLogger("domrecon.discovery")


def discover_elements(snapshot: DomSnapshot) -> list[DiscoveredElement]:
    candidates = [node for node in snapshot if is_candidate(node)]
    survivors = [node for node in candidates if passes_container_filter(node)]
    logger.debug(
        "Discovery: %s nodes, %s candidates, %s after container filter",
        len(snapshot),
        len(candidates),
        len(survivors),
    )
    return [describe_node(node, snapshot) for node in survivors]


def describe_node(node: DomNode, snapshot: DomSnapshot) -> DiscoveredElement:
    tag = node.tag
    role = node.attr("role") or None
    type_attr = (node.attr("type") or "text") if tag == "input" else None
    href = (node.attr("href") or None) if tag == "a" else None
    placeholder = (node.attr("placeholder") or None) if tag in {"input", "textarea"} else None
    value = (node.attr("value") or None) if tag == "input" else None
    label_text = find_associated_label_text(node, snapshot)
    flags = disabled_state(node)

    return DiscoveredElement(
        type=normalize_type(tag, role=role, href=href, type_attr=type_attr),
        tag_name=tag,
        role=role,
        accessible_name=accessible_name(node, snapshot, label_text=label_text),
        label_text=label_text,
        test_id=find_test_id(node),
        text=visible_text(node),
        id=node.attr("id") or None,
        name=node.attr("name") or None,
        href=href,
        placeholder=placeholder,
        aria_label=node.attr("aria-label") or None,
        disabled=flags.disabled,
        aria_disabled=flags.aria_disabled,
        type_attr=type_attr,
        value=value,
        css=best_css(node),
        xpath=xpath_for(node),
    )

def build_discovery_report(
    snapshot: DomSnapshot,
    url: str | None = None,
    scanned_at: str | None = None,
) -> DiscoveryReport:
    elements = discover_elements(snapshot)
    timestamp = scanned_at or _utc_timestamp()
    return DiscoveryReport(
        url=url if url is not None else snapshot.url,
        scanned_at=timestamp,
        counts=count_by_type(elements),
        elements=tuple(elements),
    )


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
