from __future__ import annotations

from pathlib import Path

from core.contracts import RObject
from core.r import r_identifier, r_string_literal

CARET_LIBRARY = "caret"

_LOAD_MODEL_FN = (
    "{name} <- function() {{\n"
    "  temp_Model <- readRDS({path})\n"
    "  return(temp_Model)\n"
    "}}"
)
_CLASS_DISTRIBUTION_FN = (
    "{name} <- function(instance) {{\n"
    "  temp_Distribution <- predict({model}, instance, type='prob')\n"
    "  return(temp_Distribution)\n"
    "}}"
)
_CLASSIFICATION_FN = (
    "{name} <- function(instance) {{\n"
    "  temp_Classification <- predict({model}, instance, type='raw')\n"
    "  return(temp_Classification)\n"
    "}}"
)


def render_library_statement(library: str = CARET_LIBRARY) -> str:
    return f"library({r_identifier(library)})"


def render_load_model_fn(model_file: str | Path) -> str:
    """Define a zero-argument function that deserializes the model file."""
    path = model_file.as_posix() if isinstance(model_file, Path) else model_file
    return _LOAD_MODEL_FN.format(
        name=r_identifier(RObject.LOAD_MODEL_FN.value),
        path=r_string_literal(path),
    )


def render_class_distribution_fn() -> str:
    return _CLASS_DISTRIBUTION_FN.format(
        name=r_identifier(RObject.CLASS_DISTRIBUTION_FN.value),
        model=r_identifier(RObject.MODEL_VARIABLE.value),
    )


def render_classification_fn() -> str:
    return _CLASSIFICATION_FN.format(
        name=r_identifier(RObject.CLASSIFICATION_FN.value),
        model=r_identifier(RObject.MODEL_VARIABLE.value),
    )


def render_statements(model_file: str | Path) -> list[str]:
    """Return the statements that prepare a session, in evaluation order."""
    return [
        render_library_statement(),
        render_load_model_fn(model_file),
        render_class_distribution_fn(),
        render_classification_fn(),
    ]
