"""The registered resource model a description is built from."""
from .capability import Capability
from .path import EMPTY_ADDRESS, WILDCARD_VALUE, PathAddress, PathElement
from .registration import (
    UNBOUNDED,
    AccessType,
    AttributeAccess,
    ImmutableResourceRegistration,
    ResourceRegistration,
    Storage,
)
from .versions import DeprecationData, ModelVersion

__all__ = [
    "AccessType",
    "AttributeAccess",
    "Capability",
    "DeprecationData",
    "EMPTY_ADDRESS",
    "ImmutableResourceRegistration",
    "ModelVersion",
    "PathAddress",
    "PathElement",
    "ResourceRegistration",
    "Storage",
    "UNBOUNDED",
    "WILDCARD_VALUE",
]
