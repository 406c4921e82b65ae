"""Runtime configuration for description assembly."""
from __future__ import annotations

import os
from typing import Final


def _parse_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "on"}


def _env_bool(name: str, *, default: bool = False) -> bool:
    return _parse_bool(os.getenv(name), default=default)


def _env_str(name: str, *, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# Attributes without a group sort ahead of grouped ones unless disabled here.
GROUPLESS_FIRST: Final[bool] = _env_bool("DESCRIPTIONS_GROUPLESS_FIRST", default=True)
DEFAULT_LOCALE: Final[str] = _env_str("DESCRIPTIONS_DEFAULT_LOCALE", default="en")
VALIDATE_OUTPUT: Final[bool] = _env_bool("DESCRIPTIONS_VALIDATE_OUTPUT", default=False)


__all__ = [
    "DEFAULT_LOCALE",
    "GROUPLESS_FIRST",
    "VALIDATE_OUTPUT",
]
