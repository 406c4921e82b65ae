"""Capabilities a resource provides to the rest of the model."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Capability:
    """A named contract; dynamically named capabilities get one name per resource instance."""

    name: str
    dynamically_named: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("capability name is required")

    def dynamic_name(self, dynamic_part: str) -> str:
        if not self.dynamically_named:
            raise ValueError(f"capability '{self.name}' is not dynamically named")
        return f"{self.name}.{dynamic_part}"


__all__ = ["Capability"]
