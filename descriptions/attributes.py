"""Attribute definitions and their per-attribute description documents."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, MutableMapping, Optional, Tuple

from .registry.versions import DeprecationData
from .text.bundle import ResourceBundle
from .text.resolver import ResourceDescriptionResolver

ATTRIBUTES = "attributes"


class ModelType(str, Enum):
    """Value types an attribute may carry."""

    STRING = "STRING"
    INT = "INT"
    LONG = "LONG"
    BOOLEAN = "BOOLEAN"
    DOUBLE = "DOUBLE"
    BIG_DECIMAL = "BIG_DECIMAL"
    LIST = "LIST"
    OBJECT = "OBJECT"
    PROPERTY = "PROPERTY"


_NUMERIC_TYPES = {ModelType.INT, ModelType.LONG, ModelType.DOUBLE, ModelType.BIG_DECIMAL}
_SIZED_TYPES = {ModelType.STRING, ModelType.LIST, ModelType.OBJECT}


@dataclass(frozen=True)
class AttributeDefinition:
    """Static metadata describing one attribute of a resource."""

    name: str
    type: ModelType = ModelType.STRING
    required: bool = False
    nillable: Optional[bool] = None
    default: Any = None
    group: Optional[str] = None
    allow_expression: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    allowed_values: Tuple[str, ...] = field(default_factory=tuple)
    measurement_unit: Optional[str] = None
    deprecated: Optional[DeprecationData] = None
    storage_runtime: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("attribute name is required")
        if self.group is not None and not self.group.strip():
            raise ValueError(f"attribute '{self.name}' has a blank group")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"attribute '{self.name}' has min greater than max")
        if not isinstance(self.type, ModelType):
            object.__setattr__(self, "type", ModelType(str(self.type).upper()))
        object.__setattr__(self, "allowed_values", tuple(self.allowed_values))

    @property
    def is_nillable(self) -> bool:
        if self.nillable is not None:
            return self.nillable
        return not self.required

    def add_resource_attribute_description(
        self,
        result: MutableMapping[str, Any],
        resolver: ResourceDescriptionResolver,
        locale: Optional[str],
        bundle: Optional[ResourceBundle],
    ) -> Dict[str, Any]:
        """Write this attribute's description under ``result["attributes"][name]``."""

        attributes = result.setdefault(ATTRIBUTES, {})
        description = self._describe_value(resolver, locale, bundle)
        attributes[self.name] = description
        return description

    def _describe_value(
        self,
        resolver: ResourceDescriptionResolver,
        locale: Optional[str],
        bundle: Optional[ResourceBundle],
    ) -> Dict[str, Any]:
        node: Dict[str, Any] = {
            "type": self.type.value,
            "description": resolver.get_resource_attribute_description(
                self.name, locale, bundle
            ),
            "expressionsAllowed": bool(self.allow_expression),
            "required": bool(self.required),
            "nillable": self.is_nillable,
        }
        if self.default is not None:
            node["default"] = self.default
        if self.type in _NUMERIC_TYPES:
            if self.min is not None:
                node["min"] = self.min
            if self.max is not None:
                node["max"] = self.max
        if self.type in _SIZED_TYPES:
            if self.min_length is not None:
                node["minLength"] = self.min_length
            if self.max_length is not None:
                node["maxLength"] = self.max_length
        if self.allowed_values:
            node["allowed"] = list(self.allowed_values)
        if self.measurement_unit:
            node["unit"] = self.measurement_unit
        if self.group is not None:
            node["attributeGroup"] = self.group
        if self.deprecated is not None:
            node["deprecated"] = {
                "since": str(self.deprecated.since),
                "reason": resolver.get_resource_attribute_deprecated_description(
                    self.name, locale, bundle
                ),
            }
        return node


__all__ = ["ATTRIBUTES", "AttributeDefinition", "ModelType"]
