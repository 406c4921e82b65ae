"""Locale-sensitive description documents for registered management resources."""

from .utils.env import load_env

# Environment defaults from `.env` must be in place before configuration is read.
load_env()

from .access import AccessConstraintDefinition, ConstraintType, add_access_constraints  # noqa: E402
from .api import describe  # noqa: E402
from .attributes import AttributeDefinition, ModelType  # noqa: E402
from .provider import (  # noqa: E402
    AttributeSortKey,
    DefaultResourceDescriptionProvider,
    DescriptionProvider,
)
from .registry import (  # noqa: E402
    Capability,
    DeprecationData,
    ModelVersion,
    PathAddress,
    PathElement,
    ResourceRegistration,
)
from .text import (  # noqa: E402
    MissingResourceError,
    NonResolvingResourceDescriptionResolver,
    StandardResourceDescriptionResolver,
)

__all__ = [
    "AccessConstraintDefinition",
    "AttributeDefinition",
    "AttributeSortKey",
    "Capability",
    "ConstraintType",
    "DefaultResourceDescriptionProvider",
    "DeprecationData",
    "DescriptionProvider",
    "MissingResourceError",
    "ModelType",
    "ModelVersion",
    "NonResolvingResourceDescriptionResolver",
    "PathAddress",
    "PathElement",
    "ResourceRegistration",
    "StandardResourceDescriptionResolver",
    "add_access_constraints",
    "describe",
]
