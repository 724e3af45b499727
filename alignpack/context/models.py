"""Context line model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ContextLine:
    """One labeled line of failure-message context.

    An empty ``key`` marks a separator or a bare value such as ``[...]``.
    """

    key: str
    value: Any

    def as_tuple(self) -> tuple[str, Any]:
        return (self.key, self.value)

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}

    def __str__(self) -> str:
        if not self.key:
            return str(self.value)
        return f"{self.key}: {self.value}"
