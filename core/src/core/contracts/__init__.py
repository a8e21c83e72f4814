from .errors import InterpreterError, ModelLoadingError, SessionClosedError
from .load_config import ModelLoadConfig
from .model_loader import (
    ClassificationModel,
    LoaderInfo,
    LoaderNotFoundError,
    ModelLoader,
    ModelLoaderRegistry,
)
from .r_objects import FUNCTION_HANDLES, RObject
from .schema import DatasetSchema, FieldSchema, ValueType
from .session import RSession
from .validation import ValidationError

__all__ = [
    "ClassificationModel",
    "DatasetSchema",
    "FieldSchema",
    "FUNCTION_HANDLES",
    "InterpreterError",
    "LoaderInfo",
    "LoaderNotFoundError",
    "ModelLoadConfig",
    "ModelLoader",
    "ModelLoaderRegistry",
    "ModelLoadingError",
    "RObject",
    "RSession",
    "SessionClosedError",
    "ValidationError",
    "ValueType",
]
