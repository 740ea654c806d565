from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on"}
_WAIT_UNTIL_VALUES = {"load", "domcontentloaded", "networkidle", "commit"}


def _default_log_dir() -> Path:
    return Path.home() / ".domrecon"


@dataclass(frozen=True, slots=True)
class ReconSettings:
    output_dir: Path = Path("reports")
    headed: bool = False
    navigation_timeout_ms: int = 30_000
    wait_until: str = "domcontentloaded"
    log_dir: Path = field(default_factory=_default_log_dir)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReconSettings:
        env = os.environ if environ is None else environ
        defaults = cls()

        output_dir = env.get("DOMRECON_OUTPUT_DIR", "").strip()
        log_dir = env.get("DOMRECON_LOG_DIR", "").strip()
        wait_until = env.get("DOMRECON_WAIT_UNTIL", "").strip().lower()
        log_level = env.get("DOMRECON_LOG_LEVEL", "").strip().upper()

        return cls(
            output_dir=Path(output_dir) if output_dir else defaults.output_dir,
            headed=env.get("DOMRECON_HEADED", "").strip().lower() in _TRUE_VALUES,
            navigation_timeout_ms=_positive_int(env.get("DOMRECON_NAV_TIMEOUT_MS"), defaults.navigation_timeout_ms),
            wait_until=wait_until if wait_until in _WAIT_UNTIL_VALUES else defaults.wait_until,
            log_dir=Path(log_dir).expanduser() if log_dir else defaults.log_dir,
            log_level=log_level or defaults.log_level,
        )


def _positive_int(raw: str | None, default: int) -> int:
    value = (raw or "").strip()
    if not value.isdigit() or int(value) <= 0:
        return default
    return int(value)
