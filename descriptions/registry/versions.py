"""Model versions and deprecation metadata."""
from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class ModelVersion:
    """A ``major.minor.micro`` management model version."""

    major: int
    minor: int = 0
    micro: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.micro):
            if part < 0:
                raise ValueError("model version components must be non-negative")

    @classmethod
    def parse(cls, text: str) -> "ModelVersion":
        parts = [part for part in str(text or "").strip().split(".") if part]
        if not parts or len(parts) > 3:
            raise ValueError(f"invalid model version: {text!r}")
        try:
            numbers = [int(part) for part in parts]
        except ValueError as exc:
            raise ValueError(f"invalid model version: {text!r}") from exc
        return cls(*numbers)

    def _tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.micro)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModelVersion):
            return NotImplemented
        return self._tuple() < other._tuple()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.micro}"


@dataclass(frozen=True, slots=True)
class DeprecationData:
    """Marks a resource or attribute as deprecated since a model version."""

    since: ModelVersion


__all__ = ["DeprecationData", "ModelVersion"]
