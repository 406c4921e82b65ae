"""Resolvers turning a locale into the description texts of one resource type."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Protocol, runtime_checkable

from .bundle import ResourceBundle, load_bundle

DEPRECATED_SUFFIX = "deprecated"


@runtime_checkable
class ResourceDescriptionResolver(Protocol):
    """Source of localized text for a resource, its children and its attributes."""

    def get_resource_bundle(self, locale: Optional[str]) -> Optional[ResourceBundle]:
        ...

    def get_resource_description(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        ...

    def get_resource_deprecated_description(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        ...

    def get_child_type_description(
        self, child_type: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        ...

    def get_resource_attribute_description(
        self, attribute_name: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        ...

    def get_resource_attribute_deprecated_description(
        self, attribute_name: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        ...


class StandardResourceDescriptionResolver:
    """Look up texts in a resource bundle using dotted keys under a common prefix.

    For a prefix ``logging.handler`` the keys are::

        logging.handler                          resource description
        logging.handler.deprecated               resource deprecation reason
        logging.handler.<child-type>             child type description
        logging.handler.<attribute>              attribute description
        logging.handler.<attribute>.deprecated   attribute deprecation reason

    Child type keys drop the prefix when ``use_unprefixed_child_types`` is set.
    """

    def __init__(
        self,
        key_prefix: str,
        bundle_base_name: str,
        *,
        directory: Optional[str | Path] = None,
        package: Optional[str] = None,
        bundles: Optional[Mapping[str, Mapping[str, str]]] = None,
        use_unprefixed_child_types: bool = False,
    ) -> None:
        if not key_prefix:
            raise ValueError("key_prefix is required")
        if directory is None and package is None and bundles is None:
            raise ValueError("one of directory, package or bundles is required")
        self.key_prefix = key_prefix
        self.bundle_base_name = bundle_base_name
        self._directory = directory
        self._package = package
        self._bundles = bundles
        self._unprefixed_children = use_unprefixed_child_types

    def _key(self, *parts: str) -> str:
        return ".".join((self.key_prefix, *parts))

    def _bundle(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> ResourceBundle:
        return bundle if bundle is not None else self.get_resource_bundle(locale)

    def get_resource_bundle(self, locale: Optional[str]) -> ResourceBundle:
        return load_bundle(
            self.bundle_base_name,
            locale,
            directory=self._directory,
            package=self._package,
            bundles=self._bundles,
        )

    def get_resource_description(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        return self._bundle(locale, bundle).get_string(self.key_prefix)

    def get_resource_deprecated_description(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        return self._bundle(locale, bundle).get_string(self._key(DEPRECATED_SUFFIX))

    def get_child_type_description(
        self, child_type: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        key = child_type if self._unprefixed_children else self._key(child_type)
        return self._bundle(locale, bundle).get_string(key)

    def get_resource_attribute_description(
        self, attribute_name: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        return self._bundle(locale, bundle).get_string(self._key(attribute_name))

    def get_resource_attribute_deprecated_description(
        self, attribute_name: str, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> str:
        return self._bundle(locale, bundle).get_string(
            self._key(attribute_name, DEPRECATED_SUFFIX)
        )

    def child_resolver(self, child_type: str) -> "StandardResourceDescriptionResolver":
        """Return a resolver for the child type, sharing this resolver's bundle."""

        return StandardResourceDescriptionResolver(
            self._key(child_type),
            self.bundle_base_name,
            directory=self._directory,
            package=self._package,
            bundles=self._bundles,
            use_unprefixed_child_types=self._unprefixed_children,
        )


class NonResolvingResourceDescriptionResolver:
    """Resolver for resources that carry no human-readable text."""

    def get_resource_bundle(self, locale: Optional[str]) -> None:
        return None

    def get_resource_description(self, locale, bundle) -> str:
        return ""

    def get_resource_deprecated_description(self, locale, bundle) -> str:
        return ""

    def get_child_type_description(self, child_type, locale, bundle) -> str:
        return ""

    def get_resource_attribute_description(self, attribute_name, locale, bundle) -> str:
        return ""

    def get_resource_attribute_deprecated_description(self, attribute_name, locale, bundle) -> str:
        return ""


__all__ = [
    "NonResolvingResourceDescriptionResolver",
    "ResourceDescriptionResolver",
    "StandardResourceDescriptionResolver",
]
