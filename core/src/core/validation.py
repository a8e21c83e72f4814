from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from core.contracts import DatasetSchema, ValidationError
from core.contracts.schema import VALUE_TYPES

_MIN_TARGET_LEVELS = 2


def validate_model_in_dir(model_path: str | Path) -> list[ValidationError]:
    """Check that the path holds a single, non-empty model file."""
    path = Path(model_path)
    try:
        if not path.exists():
            return [ValidationError("model_path", f"Model path does not exist: {path}")]

        if path.is_file():
            return _validate_model_file(path)

        if not path.is_dir():
            return [
                ValidationError("model_path", f"Model path is not a file or directory: {path}")
            ]

        candidates = list_model_files(path)
    except OSError as exc:
        return [ValidationError("model_path", f"Model directory is not readable: {path} ({exc})")]

    if not candidates:
        return [ValidationError("model_path", f"Model directory is empty: {path}")]
    if len(candidates) > 1:
        names = ", ".join(sorted(c.name for c in candidates))
        return [
            ValidationError(
                "model_path",
                f"Model directory must contain exactly one model file, found {len(candidates)}: "
                f"{names}",
            )
        ]
    return _validate_model_file(candidates[0])


def list_model_files(directory: Path) -> list[Path]:
    """Return the visible regular files of a model directory."""
    return [
        child
        for child in sorted(directory.iterdir())
        if child.is_file() and not child.name.startswith(".")
    ]


def _validate_model_file(path: Path) -> list[ValidationError]:
    try:
        size = path.stat().st_size
    except OSError as exc:
        return [ValidationError("model_path", f"Model file is not readable: {path} ({exc})")]
    if size == 0:
        return [ValidationError("model_path", f"Model file is empty: {path}")]
    return []


def validate_categorical_schema(schema: DatasetSchema) -> ValidationError | None:
    """
    Return the first categorical incompatibility in the schema, if any.

    Categorical fields need a non-empty set of unique, non-empty levels; a declared
    target must be categorical with at least two levels.
    """
    for index, field in enumerate(schema.fields):
        if not field.is_categorical:
            continue
        location = f"schema.fields[{index}]"
        if not field.levels:
            return ValidationError(
                location, f"Categorical field '{field.name}' must declare its levels"
            )
        if any(not level for level in field.levels):
            return ValidationError(
                location, f"Categorical field '{field.name}' has an empty level"
            )
        if len(set(field.levels)) != len(field.levels):
            return ValidationError(
                location, f"Categorical field '{field.name}' has duplicated levels"
            )

    target = schema.target_field
    if target is None:
        return None
    if not target.is_categorical:
        return ValidationError(
            "schema.target",
            f"Target field '{target.name}' must be categorical, got {target.value_type}",
        )
    if len(target.levels) < _MIN_TARGET_LEVELS:
        return ValidationError(
            "schema.target",
            f"Target field '{target.name}' must have at least {_MIN_TARGET_LEVELS} levels",
        )
    return None


def validate_schema_fields(schema: DatasetSchema) -> list[ValidationError]:
    errors: list[ValidationError] = []
    seen: set[str] = set()

    for index, field in enumerate(schema.fields):
        location = f"schema.fields[{index}]"
        if not field.name or not field.name.strip():
            errors.append(ValidationError(location, "Field name must be a non-empty string"))
        elif field.name in seen:
            errors.append(ValidationError(location, f"Duplicated field name '{field.name}'"))
        else:
            seen.add(field.name)

        if field.value_type not in VALUE_TYPES:
            errors.append(
                ValidationError(
                    location,
                    f"Field '{field.name}' has unsupported type {field.value_type!r}; "
                    f"expected one of {', '.join(VALUE_TYPES)}",
                )
            )

    if schema.target_index is not None and not 0 <= schema.target_index < len(schema.fields):
        errors.append(
            ValidationError(
                "schema.target",
                f"Target index {schema.target_index} is out of range for "
                f"{len(schema.fields)} fields",
            )
        )
    return errors


def validate_params(params: Mapping[Any, Any]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for key, value in params.items():
        if not isinstance(key, str) or not key:
            errors.append(ValidationError("params", f"Parameter key must be a string: {key!r}"))
        elif not isinstance(value, str):
            errors.append(
                ValidationError(
                    f"params.{key}",
                    f"Parameter value must be a string, got {type(value).__name__}",
                )
            )
    return errors
