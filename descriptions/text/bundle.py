"""Resource bundles holding localized description texts."""
from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .locale import ROOT_LOCALE, locale_candidates, normalize_locale

logger = logging.getLogger(__name__)


class MissingResourceError(KeyError):
    """Raised when a bundle or a key inside it cannot be found."""

    def __init__(self, key: str, locale: str, *, base_name: Optional[str] = None):
        self.key = key
        self.locale = locale
        self.base_name = base_name
        super().__init__(key)

    def __str__(self) -> str:
        where = f" in bundle '{self.base_name}'" if self.base_name else ""
        return f"no text for key '{self.key}'{where} (locale '{self.locale or 'root'}')"


class ResourceBundle:
    """Immutable key to text mapping that falls back to a parent bundle."""

    def __init__(
        self,
        texts: Mapping[str, str],
        *,
        locale: str = ROOT_LOCALE,
        parent: Optional["ResourceBundle"] = None,
        base_name: Optional[str] = None,
    ) -> None:
        self._texts = MappingProxyType({str(k): str(v) for k, v in texts.items()})
        self.locale = locale
        self.parent = parent
        self.base_name = base_name

    def get(self, key: str) -> Optional[str]:
        bundle: Optional[ResourceBundle] = self
        while bundle is not None:
            value = bundle._texts.get(key)
            if value is not None:
                return value
            bundle = bundle.parent
        return None

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise MissingResourceError(key, self.locale, base_name=self.base_name)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        return f"ResourceBundle(base_name={self.base_name!r}, locale={self.locale!r})"


def _file_name(base_name: str, locale: str) -> str:
    return f"{base_name}_{locale}.json" if locale else f"{base_name}.json"


def _read_json(handle: Any, source: str) -> Dict[str, str]:
    data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"bundle {source} must contain a JSON object")
    return {str(key): str(value) for key, value in data.items()}


def _load_texts(
    base_name: str,
    locale: str,
    *,
    directory: Optional[Path],
    package: Optional[str],
    bundles: Optional[Mapping[str, Mapping[str, str]]],
) -> Optional[Dict[str, str]]:
    if bundles is not None:
        texts = bundles.get(locale)
        return dict(texts) if texts is not None else None
    name = _file_name(base_name, locale)
    if directory is not None:
        path = directory / name
        if not path.is_file():
            return None
        with path.open("r", encoding="utf-8") as handle:
            return _read_json(handle, str(path))
    if package is not None:
        entry = resources.files(package).joinpath(name)
        if not entry.is_file():
            return None
        with entry.open("r", encoding="utf-8") as handle:
            return _read_json(handle, f"{package}/{name}")
    raise ValueError("a bundle directory, package or in-memory bundles are required")


def load_bundle(
    base_name: str,
    locale: Optional[str],
    *,
    directory: Optional[str | Path] = None,
    package: Optional[str] = None,
    bundles: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> ResourceBundle:
    """Load *base_name* for *locale*, chaining every fallback locale as a parent.

    Texts come from JSON files named ``<base>.json`` / ``<base>_<lang>.json`` /
    ``<base>_<lang>_<REGION>.json`` in *directory* or *package*, or from the
    in-memory *bundles* mapping keyed by normalised locale (``""`` is the root).
    """

    resolved_directory = Path(directory).expanduser() if directory is not None else None
    normalized_bundles = (
        {normalize_locale(key): value for key, value in bundles.items()}
        if bundles is not None
        else None
    )

    bundle: Optional[ResourceBundle] = None
    for candidate in reversed(locale_candidates(locale)):
        texts = _load_texts(
            base_name,
            candidate,
            directory=resolved_directory,
            package=package,
            bundles=normalized_bundles,
        )
        if texts is None:
            continue
        bundle = ResourceBundle(texts, locale=candidate, parent=bundle, base_name=base_name)

    if bundle is None:
        raise MissingResourceError(
            _file_name(base_name, ROOT_LOCALE), normalize_locale(locale), base_name=base_name
        )
    logger.debug(
        "bundle.loaded",
        extra={"base_name": base_name, "requested": locale, "resolved": bundle.locale},
    )
    return bundle


__all__ = ["MissingResourceError", "ResourceBundle", "load_bundle"]
