from __future__ import annotations

from pathlib import Path

from core.contracts import ModelLoadingError
from core.validation import list_model_files


def get_model_file_path(model_path: str | Path) -> Path:
    """
    Resolve the serialized model file for a model path.

    A file is returned as is; a directory must contain exactly one visible file.
    """
    path = Path(model_path)
    if path.is_file():
        return path
    if not path.is_dir():
        raise ModelLoadingError(f"Model path does not exist: {path}")

    candidates = list_model_files(path)
    if len(candidates) != 1:
        raise ModelLoadingError(
            f"Expected exactly one model file in {path}, found {len(candidates)}"
        )
    return candidates[0]
