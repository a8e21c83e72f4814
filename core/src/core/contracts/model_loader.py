from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from core.contracts.schema import DatasetSchema
from core.contracts.validation import ValidationError


@dataclass(frozen=True, slots=True)
class LoaderInfo:
    key: str
    name: str
    version: str = "0.1.0"
    description: str | None = None


@runtime_checkable
class ClassificationModel(Protocol):
    """A loaded model ready to score instances."""

    def get_class_distribution(self, instance: Mapping[str, Any]) -> tuple[float, ...]:
        """Return the probability of each class for one instance."""
        ...

    def classify(self, instance: Mapping[str, Any]) -> int:
        """Return the index of the predicted class in the target levels."""
        ...

    def close(self) -> None: ...


@runtime_checkable
class ModelLoader(Protocol):
    """
    Model loader interface contract.

    Loaders are the concrete providers (caret, ...) that the host asks to validate and load models.
    """

    @property
    def info(self) -> LoaderInfo: ...

    def validate_for_load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> list[ValidationError]:
        """Return every reason the model cannot be loaded; empty when it can."""
        ...

    def load_model(self, model_path: Path, schema: DatasetSchema) -> ClassificationModel:
        """Load the model. Raises ModelLoadingError."""
        ...


class LoaderNotFoundError(KeyError):
    pass


@runtime_checkable
class ModelLoaderRegistry(Protocol):
    def get(self, loader_key: str) -> ModelLoader:
        """Return loader for key or raise LoaderNotFoundError."""
        ...

    def list(self) -> Iterable[LoaderInfo]:
        """List available loaders (for UI / debugging)."""
        ...
