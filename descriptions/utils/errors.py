"""Error codes and helpers for callers of the description library."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, MutableMapping, Optional, Sequence


class ErrorCode(str, Enum):
    """Stable error codes reported when no description is available."""

    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    TEXT_UNAVAILABLE = "TEXT_UNAVAILABLE"
    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class ErrorTemplate:
    """Default status, message, and recovery hints for an error code."""

    status: int
    message: str
    recovery: Sequence[str] = ()


_TEMPLATES: Mapping[ErrorCode, ErrorTemplate] = {
    ErrorCode.INVALID_REQUEST: ErrorTemplate(
        status=400,
        message="Request was malformed or failed validation.",
        recovery=(
            "Check the address and locale formats.",
        ),
    ),
    ErrorCode.NOT_FOUND: ErrorTemplate(
        status=404,
        message="No resource is registered at the requested address.",
        recovery=(
            "List the parent's children to find a registered address.",
        ),
    ),
    ErrorCode.TEXT_UNAVAILABLE: ErrorTemplate(
        status=500,
        message="Description text could not be resolved.",
        recovery=(
            "Check that the resource bundle defines every description key.",
        ),
    ),
    ErrorCode.CONTRACT_VIOLATION: ErrorTemplate(
        status=500,
        message="Description document does not match the published schema.",
        recovery=(
            "Inspect the attribute definitions registered for the resource.",
        ),
    ),
    ErrorCode.INTERNAL: ErrorTemplate(
        status=500,
        message="Internal error while assembling the description.",
        recovery=(
            "Retry the call or report it with the describe logs.",
        ),
    ),
}


class DescriptionContractError(ValueError):
    """Raised when an assembled document fails schema validation."""

    def __init__(self, schema: str, errors: Sequence[str]):
        self.schema = schema
        self.errors = list(errors)
        summary = "; ".join(self.errors[:3]) or "unknown violation"
        super().__init__(f"description violates {schema}: {summary}")


def _resolve_template(code: ErrorCode) -> ErrorTemplate:
    try:
        return _TEMPLATES[code]
    except KeyError:  # pragma: no cover - defensive guard
        raise ValueError(f"No error template registered for {code!s}") from None


def make_error(
    code: ErrorCode,
    message: Optional[str] = None,
    *,
    recovery: Optional[Iterable[str]] = None,
    status: Optional[int] = None,
) -> Dict[str, object]:
    """Create a JSON-serialisable error dict."""

    template = _resolve_template(code)
    resolved_message = message if message is not None else template.message
    resolved_status = status if status is not None else template.status
    resolved_recovery: List[str] = list(recovery) if recovery is not None else list(
        template.recovery
    )
    payload: MutableMapping[str, object] = {
        "status": int(resolved_status),
        "code": code.value,
        "message": resolved_message,
        "recovery": resolved_recovery,
    }
    return dict(payload)


__all__ = ["DescriptionContractError", "ErrorCode", "ErrorTemplate", "make_error"]
