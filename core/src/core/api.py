from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from core.configuration import load_model_config
from core.contracts import (
    ClassificationModel,
    ModelLoadConfig,
    ModelLoaderRegistry,
    ValidationError,
)

_LOGGER = logging.getLogger("r_harness.api")


class ModelValidationError(ValueError):
    """Raised when a load is requested for a model that failed validation."""

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(str(error) for error in self.errors))


def validate_model(
    config: ModelLoadConfig,
    *,
    registry: ModelLoaderRegistry,
) -> list[ValidationError]:
    """Run the configured loader's validation and return every error found."""
    loader = registry.get(config.loader.key)
    errors = loader.validate_for_load(Path(config.model.path), config.to_schema(), config.params)
    if errors:
        _LOGGER.warning(
            "Model %s failed validation for loader %s with %d error(s)",
            config.model.path,
            config.loader.key,
            len(errors),
        )
    return errors


def load_model(
    config: ModelLoadConfig,
    *,
    registry: ModelLoaderRegistry,
) -> ClassificationModel:
    """Validate then load a model; nothing is loaded unless validation is clean."""
    errors = validate_model(config, registry=registry)
    if errors:
        raise ModelValidationError(errors)

    loader = registry.get(config.loader.key)
    model = loader.load_model(Path(config.model.path), config.to_schema())
    _LOGGER.info("Loaded model %s with loader %s", config.model.path, config.loader.key)
    return model


def validate_from_yaml(
    path: str | Path,
    *,
    registry: ModelLoaderRegistry,
) -> list[ValidationError]:
    return validate_model(load_model_config(path), registry=registry)


def load_from_yaml(
    path: str | Path,
    *,
    registry: ModelLoaderRegistry,
) -> ClassificationModel:
    return load_model(load_model_config(path), registry=registry)
