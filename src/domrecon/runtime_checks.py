from __future__ import annotations

_MISSING_BROWSER_ERROR_HINTS = (
    "executable doesn't exist",
    "executable does not exist",
    "download new browsers",
    "playwright install",
    "could not find browser",
    "failed to launch chromium because executable",
)

INSTALL_HINT = "Chromium not installed. Run: python -m playwright install chromium"


def is_missing_browser_error(exc: BaseException) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _MISSING_BROWSER_ERROR_HINTS)

