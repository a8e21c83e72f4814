from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A specific reason a model cannot be loaded. Returned as data, never raised."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
