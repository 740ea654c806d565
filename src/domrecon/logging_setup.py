from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def build_logger(log_dir: Path | None = None, level: str = "INFO", name: str = "domrecon") -> logging.Logger:
    logger = logging.getLogger(name)
    level_value = getattr(logging, (level or "").upper(), None)
    logger.setLevel(level_value if isinstance(level_value, int) else logging.INFO)
    if logger.handlers:
        return logger

    logger.propagate = False
    try:
        target_dir = log_dir or (Path.home() / ".domrecon")
        target_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_dir / "recon.log", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError:
        # Fallback to stderr logging if file logger cannot be initialized.
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)
    return logger
