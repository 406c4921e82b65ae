"""Caller-facing helpers that wrap description assembly in result envelopes."""
from __future__ import annotations

import logging
from typing import Dict, Optional

from .provider import DefaultResourceDescriptionProvider
from .registry.path import EMPTY_ADDRESS, PathAddress
from .registry.registration import ImmutableResourceRegistration
from .registry.versions import DeprecationData
from .text.bundle import MissingResourceError
from .text.locale import normalize_locale
from .text.resolver import ResourceDescriptionResolver
from .utils import config
from .utils.errors import DescriptionContractError, ErrorCode, make_error
from .utils.logging import describe_scope
from .validators import ensure_valid_description

logger = logging.getLogger(__name__)


def envelope_ok(data: Dict[str, object]) -> Dict[str, object]:
    return {"ok": True, "data": data, "errors": []}


def envelope_error(
    code: ErrorCode,
    message: str | None = None,
    *,
    recovery: tuple[str, ...] | None = None,
    status: int | None = None,
) -> Dict[str, object]:
    return {
        "ok": False,
        "data": None,
        "errors": [make_error(code, message, recovery=recovery, status=status)],
    }


def describe(
    registration: ImmutableResourceRegistration,
    resolver: ResourceDescriptionResolver,
    locale: Optional[str] = None,
    *,
    address: PathAddress | str | None = None,
    deprecation: Optional[DeprecationData] = None,
    validate: Optional[bool] = None,
) -> Dict[str, object]:
    """Describe the resource at *address* below *registration*.

    Returns an ``ok`` envelope holding the document, or an error envelope when
    the description cannot be produced. Partial documents are never returned.
    """

    try:
        target_address = (
            PathAddress.parse(address) if isinstance(address, str) or address is None else address
        )
    except ValueError as exc:
        return envelope_error(ErrorCode.INVALID_REQUEST, str(exc))

    resolved_locale = normalize_locale(locale if locale is not None else config.DEFAULT_LOCALE)
    should_validate = config.VALIDATE_OUTPUT if validate is None else bool(validate)

    target = registration
    if target_address.size:
        sub_model = registration.get_sub_model(target_address)
        if sub_model is None:
            return envelope_error(
                ErrorCode.NOT_FOUND,
                f"No resource registered at {target_address}",
            )
        target = sub_model

    provider = DefaultResourceDescriptionProvider(target, resolver, deprecation)
    try:
        with describe_scope(
            "describe",
            extra={"address": str(target_address), "locale": resolved_locale},
        ):
            document = provider.get_model_description(resolved_locale)
            if should_validate:
                ensure_valid_description(document)
    except MissingResourceError as exc:
        return envelope_error(ErrorCode.TEXT_UNAVAILABLE, str(exc))
    except DescriptionContractError as exc:
        return envelope_error(ErrorCode.CONTRACT_VIOLATION, str(exc))
    except Exception as exc:
        # Already logged with its traceback by describe_scope.
        return envelope_error(ErrorCode.INTERNAL, f"{type(exc).__name__}: {exc}")
    return envelope_ok(document)


__all__ = ["describe", "envelope_error", "envelope_ok"]
