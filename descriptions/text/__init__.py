"""Localized text resolution for resource descriptions."""
from .bundle import MissingResourceError, ResourceBundle, load_bundle
from .locale import ROOT_LOCALE, locale_candidates, normalize_locale
from .resolver import (
    NonResolvingResourceDescriptionResolver,
    ResourceDescriptionResolver,
    StandardResourceDescriptionResolver,
)

__all__ = [
    "MissingResourceError",
    "NonResolvingResourceDescriptionResolver",
    "ROOT_LOCALE",
    "ResourceBundle",
    "ResourceDescriptionResolver",
    "StandardResourceDescriptionResolver",
    "load_bundle",
    "locale_candidates",
    "normalize_locale",
]
