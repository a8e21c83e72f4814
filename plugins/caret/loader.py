from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from core.contracts import (
    DatasetSchema,
    InterpreterError,
    LoaderInfo,
    ModelLoadingError,
    RSession,
    ValidationError,
)
from core.r import GenericRModelLoader, RClassificationModel
from core.r.generic_loader import SessionFactory, read_last_error
from core.validation import validate_categorical_schema, validate_model_in_dir

from .scripts import render_statements

_LOGGER = logging.getLogger("r_harness.caret")

_PREPARATION_PHASES = (
    "loading the caret library",
    "defining the load model function",
    "defining the class distribution function",
    "defining the classification function",
)


class CaretModelLoader:
    """
    Loads models trained with the caret R package.

    Validation and the model lifecycle are delegated to a `GenericRModelLoader`;
    this loader only supplies the caret-specific checks and session statements.
    """

    def __init__(
        self,
        *,
        generic_loader: GenericRModelLoader | None = None,
        session_factory: SessionFactory | None = None,
    ) -> None:
        if generic_loader is not None and session_factory is not None:
            raise ValueError("Provide either generic_loader or session_factory, not both.")
        self._generic_loader = generic_loader or GenericRModelLoader(session_factory)

    @property
    def info(self) -> LoaderInfo:
        return LoaderInfo(
            key="r.caret",
            name="Caret Model Loader",
            version="0.1.0",
            description="Load classification models trained with the caret R package.",
        )

    def validate_for_load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        errors.extend(self._generic_loader.validate_for_load(model_path, schema, params))
        errors.extend(validate_model_in_dir(model_path))

        categorical_error = validate_categorical_schema(schema)
        if categorical_error is not None:
            errors.append(categorical_error)

        return errors

    def load_model(self, model_path: Path, schema: DatasetSchema) -> RClassificationModel:
        return self._generic_loader.load_model(
            model_path, schema, prepare_session=self.prepare_session
        )

    def prepare_session(self, session: RSession, model_file_path: Path) -> None:
        """
        Prepare the R workspace to load the model and predict instances.

        Loads caret and defines the three `RObject` functions. On failure the session
        is closed, since a partially prepared workspace cannot be reused.
        """
        model_file = Path(model_file_path)
        try:
            if model_file.is_dir():
                model_file = self._generic_loader.get_model_file_path(model_file)
            statements = render_statements(model_file)
        except (ValueError, ModelLoadingError) as exc:
            _LOGGER.error(
                "Unable to prepare the workspace. Invalid model file path %r: %s",
                str(model_file_path),
                exc,
            )
            session.close()
            raise ModelLoadingError("Unable to prepare the workspace.") from exc

        for phase, statement in zip(_PREPARATION_PHASES, statements, strict=True):
            try:
                session.evaluate_void(statement)
            except InterpreterError as exc:
                last_error = read_last_error(session)
                _LOGGER.error(
                    "Unable to prepare the workspace while %s. Error found: %s",
                    phase,
                    last_error,
                )
                session.close()
                raise ModelLoadingError(
                    "Unable to prepare the workspace.", last_error=last_error
                ) from exc

        _LOGGER.debug("Prepared R workspace for %s", model_file)
