"""Access constraints attached to resources and their description rendering."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional

ACCESS_CONSTRAINTS = "accessConstraints"
CORE = "core"


class ConstraintType(str, Enum):
    """Families of access constraint understood by management clients."""

    SENSITIVE = "sensitive"
    APPLICATION = "application"


@dataclass(frozen=True)
class AccessConstraintDefinition:
    """A sensitivity or application classification restricting who may see a resource."""

    name: str
    type: ConstraintType = ConstraintType.SENSITIVE
    core: bool = True
    subsystem: Optional[str] = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("constraint name is required")
        if not isinstance(self.type, ConstraintType):
            object.__setattr__(self, "type", ConstraintType(str(self.type).lower()))
        if not self.core and not self.subsystem:
            raise ValueError(f"non-core constraint '{self.name}' requires a subsystem")

    @property
    def origin(self) -> str:
        return CORE if self.core else str(self.subsystem)

    def model_description_details(self, locale: Optional[str]) -> Dict[str, Any]:
        """Extra descriptive fields for this constraint; *locale* is reserved for texts."""

        return dict(self.details)


def add_access_constraints(
    result: MutableMapping[str, Any],
    constraints: Optional[Iterable[AccessConstraintDefinition]],
    locale: Optional[str],
) -> Optional[Dict[str, Any]]:
    """Write ``accessConstraints`` into *result*; does nothing for no constraints."""

    if not constraints:
        return None
    rendered: Dict[str, Any] = {}
    for constraint in constraints:
        by_name = rendered.setdefault(constraint.type.value, {})
        node: Dict[str, Any] = {"type": constraint.origin}
        node.update(constraint.model_description_details(locale))
        by_name[constraint.name] = node
    if not rendered:
        return None
    result[ACCESS_CONSTRAINTS] = rendered
    return rendered


__all__ = [
    "ACCESS_CONSTRAINTS",
    "AccessConstraintDefinition",
    "ConstraintType",
    "add_access_constraints",
]
