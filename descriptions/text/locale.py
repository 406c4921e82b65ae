"""Locale normalisation and fallback chains."""
from __future__ import annotations

from typing import List, Optional

ROOT_LOCALE = ""


def normalize_locale(locale: Optional[str]) -> str:
    """Return ``lang`` or ``lang_REGION`` for tags such as ``fr-ca`` or ``en_US.UTF-8``."""

    if locale is None:
        return ROOT_LOCALE
    raw = str(locale).strip()
    if not raw:
        return ROOT_LOCALE
    raw = raw.split(".", 1)[0].split("@", 1)[0]
    parts = [part for part in raw.replace("-", "_").split("_") if part]
    if not parts:
        return ROOT_LOCALE
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return f"{language}_{parts[1].upper()}"


def locale_candidates(locale: Optional[str]) -> List[str]:
    """Return the lookup chain for *locale*, most specific first, ending at the root."""

    normalized = normalize_locale(locale)
    candidates: List[str] = []
    while normalized:
        candidates.append(normalized)
        normalized = normalized.rpartition("_")[0]
    candidates.append(ROOT_LOCALE)
    return candidates


__all__ = ["ROOT_LOCALE", "locale_candidates", "normalize_locale"]
