from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from core.contracts import ClassificationModel, DatasetSchema, LoaderInfo, ValidationError


class DummyModel:
    def get_class_distribution(self, instance: Mapping[str, object]) -> tuple[float, ...]:
        return (0.5, 0.5)

    def classify(self, instance: Mapping[str, object]) -> int:
        return 0

    def close(self) -> None:
        return None


class DummyModelLoader:
    def __init__(self, *, errors: list[ValidationError] | None = None) -> None:
        self._errors = list(errors or [])
        self.loaded: list[Path] = []

    @property
    def info(self) -> LoaderInfo:
        return LoaderInfo(key="dummy", name="Dummy Loader", version="0.1.0")

    def validate_for_load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> list[ValidationError]:
        return list(self._errors)

    def load_model(self, model_path: Path, schema: DatasetSchema) -> ClassificationModel:
        self.loaded.append(model_path)
        return DummyModel()
