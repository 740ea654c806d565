from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .models import DiscoveryReport, PageModel
from .validation import ReportFormatError, hostname_from_url

logger = logging.getLogger("domrecon.reports")

_SLUG_JUNK = re.compile(r"[^a-z0-9]+")
_TLD_SUFFIX = re.compile(r"-(com|net|org)$")


def safe_slug(value: str) -> str:
    lowered = value.lower().removeprefix("www.")
    return _SLUG_JUNK.sub("-", lowered).strip("-")


def build_report_file_name(report_url: str, now: datetime | None = None) -> str:
    """``recon-report-MM-DD-YYYY-<domain>-HHMMSS.json`` using local time."""
    moment = now or datetime.now()
    domain = _TLD_SUFFIX.sub("", safe_slug(hostname_from_url(report_url)))
    return f"recon-report-{moment:%m-%d-%Y}-{domain}-{moment:%H%M%S}.json"


def build_model_file_name(domain: str, now: datetime | None = None) -> str:
    moment = now or datetime.now(timezone.utc)
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    stamp = re.sub(r"[:.]", "-", stamp)
    return f"page-model-{domain}-{stamp}.json"


def write_json_report(output_dir: Path, report: DiscoveryReport, now: datetime | None = None) -> Path:
    file_path = _write_json(Path(output_dir) / build_report_file_name(report.url, now), report.to_dict())
    logger.info("Wrote recon report: %s", file_path)
    return file_path


def write_page_model(output_dir: Path, model: PageModel, now: datetime | None = None) -> Path:
    file_path = _write_json(Path(output_dir) / build_model_file_name(model.domain, now), model.to_dict())
    logger.info("Wrote page model: %s", file_path)
    return file_path


def dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def load_report(path: Path) -> DiscoveryReport:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ReportFormatError(f"{path} is not valid UTF-8 JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ReportFormatError(f"{path} does not contain a report object.")
    missing = [key for key in ("url", "elements") if key not in payload]
    if missing:
        raise ReportFormatError(f"{path} is missing required field(s): {', '.join(missing)}")
    if not isinstance(payload["elements"], list):
        raise ReportFormatError(f"{path}: elements must be a list.")
    return DiscoveryReport.from_dict(payload)


def _write_json(file_path: Path, payload: dict[str, Any]) -> Path:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_json(payload), encoding="utf-8")
    return file_path
