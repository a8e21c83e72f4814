from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from core.contracts import (
    DatasetSchema,
    InterpreterError,
    ModelLoadingError,
    RObject,
    RSession,
    SessionClosedError,
    ValidationError,
)
from core.loading import get_model_file_path
from core.r.model import RClassificationModel
from core.validation import validate_params, validate_schema_fields

SessionFactory = Callable[[], RSession]
SessionPreparer = Callable[[RSession, Path], None]

_LOGGER = logging.getLogger("r_harness.r.loader")


def read_last_error(session: RSession) -> str | None:
    """Return the session's last R error, or None when it cannot be read."""
    try:
        return session.get_last_error()
    except (InterpreterError, SessionClosedError):
        _LOGGER.warning("Unable to read the last R error", exc_info=True)
        return None


def _default_session_factory() -> RSession:
    from core.r.rpy2_session import Rpy2Session

    return Rpy2Session()


class GenericRModelLoader:
    """
    Model lifecycle shared by every R-backed loader.

    Concrete loaders hold one of these and supply the statements that define the
    `RObject` functions through `prepare_session`.
    """

    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory or _default_session_factory

    def validate_for_load(
        self,
        model_path: Path,
        schema: DatasetSchema,
        params: Mapping[str, str],
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        errors.extend(validate_schema_fields(schema))
        errors.extend(validate_params(params))
        return errors

    def get_model_file_path(self, model_path: Path) -> Path:
        return get_model_file_path(model_path)

    def load_model(
        self,
        model_path: Path,
        schema: DatasetSchema,
        *,
        prepare_session: SessionPreparer,
    ) -> RClassificationModel:
        model_file = self.get_model_file_path(model_path)
        session = self._open_session()

        prepare_session(session, model_file)

        statement = f"{RObject.MODEL_VARIABLE} <- {RObject.LOAD_MODEL_FN}()"
        try:
            session.evaluate_void(statement)
        except InterpreterError as exc:
            last_error = read_last_error(session)
            _LOGGER.error(
                "Unable to load the model from %s. Error found: %s", model_file, last_error
            )
            session.close()
            raise ModelLoadingError(
                f"Unable to load the model from {model_file}.", last_error=last_error
            ) from exc

        _LOGGER.info("Loaded R model from %s", model_file)
        return RClassificationModel(session=session, schema=schema, model_path=Path(model_path))

    def _open_session(self) -> RSession:
        try:
            return self._session_factory()
        except Exception as exc:
            _LOGGER.error("Unable to open an R session", exc_info=True)
            raise ModelLoadingError(f"Unable to open an R session: {exc}") from exc
