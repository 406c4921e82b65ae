"""Read-only registration view and an in-memory registration tree."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from .capability import Capability
from .path import EMPTY_ADDRESS, PathAddress, PathElement

if TYPE_CHECKING:
    from ..access import AccessConstraintDefinition
    from ..attributes import AttributeDefinition

# Largest signed 32-bit value; clients read it as "no upper bound".
UNBOUNDED = 2_147_483_647


class AccessType(str, Enum):
    READ_ONLY = "read-only"
    READ_WRITE = "read-write"
    METRIC = "metric"


class Storage(str, Enum):
    CONFIGURATION = "configuration"
    RUNTIME = "runtime"


@dataclass(frozen=True)
class AttributeAccess:
    """How an attribute is exposed; ``definition`` is ``None`` for legacy registrations."""

    definition: Optional["AttributeDefinition"]
    access_type: AccessType = AccessType.READ_WRITE
    storage: Storage = Storage.CONFIGURATION

    def get_attribute_definition(self) -> Optional["AttributeDefinition"]:
        return self.definition


@runtime_checkable
class ImmutableResourceRegistration(Protocol):
    """Queries a description provider may run against a registered resource."""

    def get_min_occurs(self) -> int:
        ...

    def get_max_occurs(self) -> int:
        ...

    def get_path_address(self) -> Optional[PathAddress]:
        ...

    def get_capabilities(self) -> Optional[Sequence[Capability]]:
        ...

    def get_access_constraints(self) -> Optional[Sequence["AccessConstraintDefinition"]]:
        ...

    def is_runtime_only(self) -> bool:
        ...

    def get_attribute_names(self, address: PathAddress) -> Sequence[str]:
        ...

    def get_attribute_access(self, address: PathAddress, name: str) -> Optional[AttributeAccess]:
        ...

    def get_child_addresses(self, address: PathAddress) -> Sequence[PathElement]:
        ...

    def get_sub_model(self, address: PathAddress) -> Optional["ImmutableResourceRegistration"]:
        ...


class ResourceRegistration:
    """A node of the in-memory registration tree.

    Build the tree from :meth:`root` with :meth:`register_sub_model`,
    :meth:`register_attribute` and :meth:`register_capability`; description
    providers only use the read-only query methods.
    """

    def __init__(
        self,
        address: PathAddress = EMPTY_ADDRESS,
        *,
        parent: Optional["ResourceRegistration"] = None,
        min_occurs: Optional[int] = None,
        max_occurs: Optional[int] = None,
        runtime_only: bool = False,
        capabilities: Iterable[Capability] = (),
        access_constraints: Iterable["AccessConstraintDefinition"] = (),
    ) -> None:
        if min_occurs is not None and min_occurs < 0:
            raise ValueError("min_occurs must be non-negative")
        if max_occurs is not None and max_occurs < 1:
            raise ValueError("max_occurs must be positive")
        self._address = address
        self._parent = parent
        self._min_occurs = min_occurs
        self._max_occurs = max_occurs
        if self.get_min_occurs() > self.get_max_occurs():
            raise ValueError(
                f"min_occurs {self.get_min_occurs()} exceeds max_occurs "
                f"{self.get_max_occurs()} at {address}"
            )
        self._runtime_only = runtime_only
        self._capabilities: List[Capability] = []
        for capability in capabilities:
            self.register_capability(capability)
        self._access_constraints: Tuple["AccessConstraintDefinition", ...] = tuple(
            access_constraints
        )
        self._attributes: Dict[str, AttributeAccess] = {}
        self._children: Dict[PathElement, ResourceRegistration] = {}

    @classmethod
    def root(cls, **kwargs) -> "ResourceRegistration":
        return cls(EMPTY_ADDRESS, **kwargs)

    @property
    def parent(self) -> Optional["ResourceRegistration"]:
        return self._parent

    # Registration

    def register_sub_model(self, element: PathElement | str, **kwargs) -> "ResourceRegistration":
        """Register and return the child resource reached through *element*."""

        if isinstance(element, str):
            element = PathElement.parse(element)
        if element in self._children:
            raise ValueError(f"child '{element}' is already registered at {self._address}")
        child = ResourceRegistration(self._address.append(element), parent=self, **kwargs)
        self._children[element] = child
        return child

    def register_attribute(
        self,
        definition: "AttributeDefinition",
        *,
        access_type: AccessType = AccessType.READ_WRITE,
        storage: Optional[Storage] = None,
    ) -> AttributeAccess:
        if storage is None:
            runtime = self._runtime_only or definition.storage_runtime
            storage = Storage.RUNTIME if runtime else Storage.CONFIGURATION
        return self._add_attribute(
            definition.name, AttributeAccess(definition, access_type, storage)
        )

    def register_attribute_placeholder(
        self,
        name: str,
        *,
        access_type: AccessType = AccessType.READ_ONLY,
        storage: Storage = Storage.RUNTIME,
    ) -> AttributeAccess:
        """Register an attribute that has no definition and so no description."""

        return self._add_attribute(name, AttributeAccess(None, access_type, storage))

    def _add_attribute(self, name: str, access: AttributeAccess) -> AttributeAccess:
        if not name or not name.strip():
            raise ValueError("attribute name is required")
        if name in self._attributes:
            raise ValueError(f"attribute '{name}' is already registered at {self._address}")
        self._attributes[name] = access
        return access

    def register_capability(self, capability: Capability) -> None:
        if any(existing.name == capability.name for existing in self._capabilities):
            raise ValueError(f"capability '{capability.name}' is already registered")
        self._capabilities.append(capability)

    # Queries

    def get_path_address(self) -> PathAddress:
        return self._address

    def get_min_occurs(self) -> int:
        return self._min_occurs if self._min_occurs is not None else 0

    def get_max_occurs(self) -> int:
        if self._max_occurs is not None:
            return self._max_occurs
        last = self._address.last_element
        return UNBOUNDED if last is not None and last.is_wildcard else 1

    def get_capabilities(self) -> Tuple[Capability, ...]:
        return tuple(self._capabilities)

    def get_access_constraints(self) -> Tuple["AccessConstraintDefinition", ...]:
        return self._access_constraints

    def is_runtime_only(self) -> bool:
        return self._runtime_only

    def get_sub_model(self, address: PathAddress) -> Optional["ResourceRegistration"]:
        """Walk *address* from this node; exact elements win over wildcard registrations."""

        node: Optional[ResourceRegistration] = self
        for element in address:
            if node is None:
                return None
            child = node._children.get(element)
            if child is None and not element.is_wildcard:
                child = node._children.get(PathElement(element.key))
            node = child
        return node

    def get_attribute_names(self, address: PathAddress) -> Tuple[str, ...]:
        node = self.get_sub_model(address)
        return tuple(node._attributes) if node is not None else ()

    def get_attribute_access(self, address: PathAddress, name: str) -> Optional[AttributeAccess]:
        node = self.get_sub_model(address)
        return node._attributes.get(name) if node is not None else None

    def get_child_addresses(self, address: PathAddress) -> Tuple[PathElement, ...]:
        node = self.get_sub_model(address)
        return tuple(node._children) if node is not None else ()

    def __repr__(self) -> str:
        return f"ResourceRegistration({self._address})"


__all__ = [
    "AccessType",
    "AttributeAccess",
    "ImmutableResourceRegistration",
    "ResourceRegistration",
    "Storage",
    "UNBOUNDED",
]
