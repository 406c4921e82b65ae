"""Default description of a resource assembled from its registration metadata."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union, runtime_checkable

from .access import add_access_constraints
from .attributes import ATTRIBUTES, AttributeDefinition
from .registry.path import EMPTY_ADDRESS, PathAddress
from .registry.registration import UNBOUNDED, ImmutableResourceRegistration
from .registry.versions import DeprecationData
from .text.bundle import ResourceBundle
from .text.resolver import ResourceDescriptionResolver
from .utils import config
from .utils.logging import increment_counter

logger = logging.getLogger(__name__)

DESCRIPTION = "description"
MIN_OCCURS = "minOccurs"
MAX_OCCURS = "maxOccurs"
CAPABILITIES = "capabilities"
DEPRECATED = "deprecated"
STORAGE = "storage"
RUNTIME_ONLY = "runtime-only"
OPERATIONS = "operations"
NOTIFICATIONS = "notifications"
CHILDREN = "children"
MODEL_DESCRIPTION = "modelDescription"


@runtime_checkable
class DescriptionProvider(Protocol):
    def get_model_description(self, locale: Optional[str]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True, slots=True)
class AttributeSortKey:
    """Orders attribute descriptions by group, then by name."""

    name: str
    group: Optional[str] = None

    @classmethod
    def of(cls, definition: AttributeDefinition) -> "AttributeSortKey":
        return cls(definition.name, definition.group)

    def sort_key(self, groupless_first: bool = True) -> Tuple[int, str, str]:
        if self.group is None:
            rank = 0 if groupless_first else 1
        else:
            rank = 1 if groupless_first else 0
        return (rank, self.group or "", self.name)


@dataclass(frozen=True, slots=True)
class DefinedAttribute:
    name: str
    definition: AttributeDefinition


@dataclass(frozen=True, slots=True)
class PlaceholderAttribute:
    name: str


AttributeLookup = Union[DefinedAttribute, PlaceholderAttribute]


def lookup_attribute(
    registration: ImmutableResourceRegistration, name: str
) -> AttributeLookup:
    access = registration.get_attribute_access(EMPTY_ADDRESS, name)
    definition = access.get_attribute_definition() if access is not None else None
    if definition is None:
        return PlaceholderAttribute(name)
    return DefinedAttribute(name, definition)


def default_max_occurs(address: Optional[PathAddress]) -> Optional[int]:
    """Return the implied ``maxOccurs`` for *address*; the root has none."""

    if address is None or address.size == 0:
        return None
    last = address.last_element
    return UNBOUNDED if last is not None and last.is_wildcard else 1


class DefaultResourceDescriptionProvider:
    """Describe a resource by analysing its registration.

    The document is rebuilt on every call. Operation, notification and child
    model descriptions are left as empty placeholders for other providers.
    """

    def __init__(
        self,
        registration: ImmutableResourceRegistration,
        resolver: ResourceDescriptionResolver,
        deprecation: Optional[DeprecationData] = None,
        *,
        groupless_first: Optional[bool] = None,
    ) -> None:
        self.registration = registration
        self.resolver = resolver
        self.deprecation = deprecation
        self.groupless_first = (
            config.GROUPLESS_FIRST if groupless_first is None else bool(groupless_first)
        )

    def get_model_description(self, locale: Optional[str]) -> Dict[str, Any]:
        bundle = self.resolver.get_resource_bundle(locale)
        result: Dict[str, Any] = {}
        self._add_header(result, locale, bundle)
        result[ATTRIBUTES] = self._describe_attributes(locale, bundle)
        result[OPERATIONS] = {}
        result[NOTIFICATIONS] = {}
        result[CHILDREN] = self._describe_children(locale, bundle)
        logger.debug(
            "description.assembled",
            extra={
                "address": str(self.registration.get_path_address() or EMPTY_ADDRESS),
                "locale": locale,
                "attributes": len(result[ATTRIBUTES]),
                "children": len(result[CHILDREN]),
            },
        )
        return result

    def _add_header(
        self, result: Dict[str, Any], locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> None:
        registration = self.registration
        result[DESCRIPTION] = self.resolver.get_resource_description(locale, bundle)

        # Only non-default occurrence bounds are written.
        min_occurs = registration.get_min_occurs()
        if min_occurs > 0:
            result[MIN_OCCURS] = min_occurs
        max_occurs = registration.get_max_occurs()
        default_max = default_max_occurs(registration.get_path_address())
        if default_max is None or max_occurs != default_max:
            result[MAX_OCCURS] = max_occurs

        capabilities = registration.get_capabilities()
        if capabilities:
            result[CAPABILITIES] = [
                {"name": capability.name, "dynamic": bool(capability.dynamically_named)}
                for capability in capabilities
            ]

        if self.deprecation is not None:
            result[DEPRECATED] = {
                "since": str(self.deprecation.since),
                "reason": self.resolver.get_resource_deprecated_description(locale, bundle),
            }
        if registration.is_runtime_only():
            result[STORAGE] = RUNTIME_ONLY
        add_access_constraints(result, registration.get_access_constraints(), locale)

    def _describe_attributes(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> Dict[str, Any]:
        entries: List[Tuple[AttributeSortKey, Dict[str, Any]]] = []
        for name in self.registration.get_attribute_names(EMPTY_ADDRESS):
            lookup = lookup_attribute(self.registration, name)
            if isinstance(lookup, DefinedAttribute):
                scratch: Dict[str, Any] = {}
                description = lookup.definition.add_resource_attribute_description(
                    scratch, self.resolver, locale, bundle
                )
                # Keyed by the registered name even if the definition names itself differently.
                entries.append((AttributeSortKey(name, lookup.definition.group), description))
                increment_counter("attributes.defined")
            else:
                entries.append((AttributeSortKey(name), {}))
                increment_counter("attributes.placeholder")

        entries.sort(key=lambda entry: entry[0].sort_key(self.groupless_first))
        return {key.name: description for key, description in entries}

    def _describe_children(
        self, locale: Optional[str], bundle: Optional[ResourceBundle]
    ) -> Dict[str, Any]:
        children: Dict[str, Any] = {}
        for element in self.registration.get_child_addresses(EMPTY_ADDRESS) or ():
            if element.key in children:
                continue
            children[element.key] = {
                DESCRIPTION: self.resolver.get_child_type_description(element.key, locale, bundle),
                MODEL_DESCRIPTION: {},
            }
            increment_counter("children.types")
        return children


__all__ = [
    "AttributeLookup",
    "AttributeSortKey",
    "DefaultResourceDescriptionProvider",
    "DefinedAttribute",
    "DescriptionProvider",
    "PlaceholderAttribute",
    "default_max_occurs",
    "lookup_attribute",
]
