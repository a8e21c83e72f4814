from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

ValueType = Literal["numeric", "string", "categorical"]
VALUE_TYPES: tuple[str, ...] = ("numeric", "string", "categorical")


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """Typed descriptor of a single dataset column."""

    name: str
    value_type: ValueType
    # Only meaningful for categorical fields.
    levels: tuple[str, ...] = ()
    allow_missing: bool = False

    @property
    def is_categorical(self) -> bool:
        return self.value_type == "categorical"


@dataclass(frozen=True, slots=True)
class DatasetSchema:
    """
    Ordered description of the input a model scores.

    Owned upstream; loaders only read it.
    """

    fields: Sequence[FieldSchema] = field(default_factory=tuple)
    target_index: int | None = None

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def target_field(self) -> FieldSchema | None:
        if self.target_index is None or not 0 <= self.target_index < len(self.fields):
            return None
        return self.fields[self.target_index]

    @property
    def predictive_fields(self) -> list[FieldSchema]:
        return [f for index, f in enumerate(self.fields) if index != self.target_index]
