from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from core.contracts import DatasetSchema, FieldSchema, RObject, RSession


class RClassificationModel:
    """
    Classification model living in a prepared R session.

    Scores by calling the functions registered under `RObject` names.
    """

    def __init__(self, *, session: RSession, schema: DatasetSchema, model_path: Path) -> None:
        self._session = session
        self._schema = schema
        self._model_path = model_path

    @property
    def model_path(self) -> Path:
        return self._model_path

    @property
    def schema(self) -> DatasetSchema:
        return self._schema

    def get_class_distribution(self, instance: Mapping[str, Any]) -> tuple[float, ...]:
        frame = self.to_frame(instance)
        result = self._session.call_function(RObject.CLASS_DISTRIBUTION_FN.value, frame)
        return self._order_distribution(result)

    def classify(self, instance: Mapping[str, Any]) -> int:
        frame = self.to_frame(instance)
        result = self._session.call_function(RObject.CLASSIFICATION_FN.value, frame)
        label = _first_label(result)

        levels = self._target_levels()
        if not levels:
            raise ValueError("Cannot map a predicted label without categorical target levels")
        try:
            return levels.index(label)
        except ValueError:
            raise ValueError(
                f"Model predicted unknown class {label!r}; expected one of {levels}"
            ) from None

    def close(self) -> None:
        self._session.close()

    def to_frame(self, instance: Mapping[str, Any]) -> pd.DataFrame:
        """Build the one-row data frame R predicts against."""
        fields = self._schema.predictive_fields
        if not fields:
            return pd.DataFrame([dict(instance)])

        columns: dict[str, Any] = {}
        for field in fields:
            columns[field.name] = _column(field, instance.get(field.name))
        return pd.DataFrame(columns)

    def _order_distribution(self, result: Any) -> tuple[float, ...]:
        frame = result if isinstance(result, pd.DataFrame) else pd.DataFrame(result)
        if frame.empty:
            raise ValueError("R returned an empty class distribution")
        row = frame.iloc[0]

        levels = self._target_levels()
        if not levels:
            return tuple(float(value) for value in row.tolist())

        columns = [str(column) for column in row.index]
        missing = [level for level in levels if level not in columns]
        if missing:
            raise ValueError(f"Class distribution is missing levels: {', '.join(missing)}")
        values = dict(zip(columns, row.tolist(), strict=True))
        return tuple(float(values[level]) for level in levels)

    def _target_levels(self) -> list[str]:
        target = self._schema.target_field
        if target is None or not target.is_categorical:
            return []
        return list(target.levels)

    def __repr__(self) -> str:
        return f"RClassificationModel(model_path={str(self._model_path)!r})"


def _column(field: FieldSchema, value: Any) -> Any:
    if value is None and not field.allow_missing:
        raise ValueError(f"Missing value for field '{field.name}'")
    if field.is_categorical:
        return pd.Categorical([value], categories=list(field.levels))
    if field.value_type == "numeric":
        return [float("nan") if value is None else float(value)]
    return [value]


def _first_label(result: Any) -> str:
    values = result if isinstance(result, pd.Series) else pd.Series(result)
    if values.empty:
        raise ValueError("R returned no predicted label")
    return str(values.iloc[0])
