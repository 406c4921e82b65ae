"""Path elements and addresses identifying resources in the management tree."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Optional, Tuple

WILDCARD_VALUE = "*"


@dataclass(frozen=True, slots=True)
class PathElement:
    """One ``key=value`` segment of a resource address."""

    key: str
    value: str = WILDCARD_VALUE

    def __post_init__(self) -> None:
        if not self.key or not self.key.strip():
            raise ValueError("path element key is required")
        if not self.value or not self.value.strip():
            raise ValueError(f"path element '{self.key}' requires a value")

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD_VALUE

    @classmethod
    def parse(cls, text: str) -> "PathElement":
        """Parse ``key=value`` (or a bare ``key`` meaning a wildcard)."""

        raw = str(text or "").strip()
        if not raw:
            raise ValueError("path element text is required")
        key, sep, value = raw.partition("=")
        if not sep:
            return cls(key.strip())
        return cls(key.strip(), value.strip())

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True, slots=True)
class PathAddress:
    """An ordered sequence of path elements from the root to a resource."""

    elements: Tuple[PathElement, ...] = ()

    EMPTY: ClassVar["PathAddress"]

    @classmethod
    def of(cls, *elements: PathElement) -> "PathAddress":
        return cls(tuple(elements))

    @classmethod
    def parse(cls, text: Optional[str]) -> "PathAddress":
        """Parse ``/a=b/c=*``; ``None``, empty text and ``/`` mean the root."""

        raw = str(text or "").strip()
        parts = [part for part in raw.split("/") if part.strip()]
        return cls(tuple(PathElement.parse(part) for part in parts))

    @property
    def size(self) -> int:
        return len(self.elements)

    @property
    def last_element(self) -> Optional[PathElement]:
        return self.elements[-1] if self.elements else None

    def append(self, *elements: PathElement) -> "PathAddress":
        return PathAddress(self.elements + tuple(elements))

    def extend(self, other: Iterable[PathElement]) -> "PathAddress":
        return PathAddress(self.elements + tuple(other))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __str__(self) -> str:
        if not self.elements:
            return "/"
        return "/" + "/".join(str(element) for element in self.elements)


EMPTY_ADDRESS = PathAddress()
PathAddress.EMPTY = EMPTY_ADDRESS


__all__ = ["EMPTY_ADDRESS", "PathAddress", "PathElement", "WILDCARD_VALUE"]
