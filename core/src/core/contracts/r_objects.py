from __future__ import annotations

from enum import Enum


class RObject(str, Enum):
    """
    Names of the objects a prepared R session exposes.

    Shared by the loaders that register the functions and by the models that call them.
    """

    LOAD_MODEL_FN = "loadModel"
    CLASS_DISTRIBUTION_FN = "getClassDistribution"
    CLASSIFICATION_FN = "classify"
    MODEL_VARIABLE = "model"

    def __str__(self) -> str:
        return self.value


FUNCTION_HANDLES: tuple[RObject, ...] = (
    RObject.LOAD_MODEL_FN,
    RObject.CLASS_DISTRIBUTION_FN,
    RObject.CLASSIFICATION_FN,
)
