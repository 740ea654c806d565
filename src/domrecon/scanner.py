from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import ReconSettings
from .discovery import build_discovery_report
from .dom_extractor import extract_dom_snapshot
from .models import DiscoveryReport
from .runtime_checks import INSTALL_HINT, is_missing_browser_error
from .validation import parse_target_url

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger("domrecon.scan")


class ScanError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class ScanResult:
    report: DiscoveryReport
    title: str | None = None


def scan_page(page: Page, url: str) -> ScanResult:
    """Run discovery against a page that has already been navigated."""
    snapshot = extract_dom_snapshot(page)
    report = build_discovery_report(snapshot, url=url)
    logger.info("Discovered %s elements on %s: %s", len(report.elements), url, report.counts)
    return ScanResult(report=report, title=snapshot.title or None)


def scan_url(url: str, settings: ReconSettings | None = None) -> ScanResult:
    settings = settings or ReconSettings()
    target = parse_target_url(url)

    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=not settings.headed)
        except PlaywrightError as exc:
            if is_missing_browser_error(exc):
                raise ScanError(INSTALL_HINT) from exc
            raise ScanError(f"Failed to launch Chromium: {exc}") from exc

        try:
            page = browser.new_page()
            logger.info("Scanning %s (wait_until=%s)", target, settings.wait_until)
            page.goto(target, wait_until=settings.wait_until, timeout=settings.navigation_timeout_ms)
            return scan_page(page, target)
        except PlaywrightError as exc:
            raise ScanError(f"Scan of {target} failed: {exc}") from exc
        finally:
            browser.close()
