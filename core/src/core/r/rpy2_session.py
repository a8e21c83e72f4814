from __future__ import annotations

import itertools
import logging
from contextlib import nullcontext
from typing import Any

from core.contracts import InterpreterError, SessionClosedError
from core.r.scripts import r_string_literal

try:
    import rpy2.robjects as _robjects
except Exception:  # pragma: no cover - handled via runtime error
    _robjects = None

_LOGGER = logging.getLogger("r_harness.r.session")
_ENVIRONMENT_IDS = itertools.count(1)


def _require_rpy2() -> Any:
    if _robjects is None:
        raise RuntimeError(
            "rpy2 is not installed or R is unavailable. Install R and rpy2, "
            "or pass an `r` evaluator for tests."
        )
    return _robjects


def _pandas_converter(robjects: Any) -> Any:
    from rpy2.robjects import pandas2ri

    return robjects.default_converter + pandas2ri.converter


class Rpy2Session:
    """
    RSession backed by the R embedded in the current process through rpy2.

    rpy2 hosts a single R per process, so each session evaluates inside its own
    environment bound in the global one; closing removes only that environment.
    """

    def __init__(self, *, r: Any | None = None, converter: Any | None = None) -> None:
        """Create a session; `r` and `converter` default to rpy2's evaluator and pandas2ri."""
        if r is None:
            robjects = _require_rpy2()
            r = robjects.r
            if converter is None:
                converter = _pandas_converter(robjects)
        self._r = r
        self._converter = converter
        self._environment = f".r_harness_session_{next(_ENVIRONMENT_IDS)}"
        self._closed = False

        try:
            self._r(f"{self._environment} <- new.env(parent = globalenv())")
        except Exception as exc:
            raise InterpreterError(f"Unable to create the session environment: {exc}") from exc

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def environment(self) -> str:
        """Name of the global binding holding this session's environment."""
        return self._environment

    def evaluate_void(self, statement: str) -> None:
        self._ensure_open()
        try:
            self._r(f"evalq({{\n{statement}\n}}, envir = {self._environment})")
        except Exception as exc:
            raise InterpreterError(f"R evaluation failed: {exc}") from exc

    def call_function(self, name: str, *args: Any) -> Any:
        self._ensure_open()
        lookup = f"get({r_string_literal(name)}, envir = {self._environment}, inherits = FALSE)"
        try:
            with self._conversion():
                function = self._r(lookup)
                return function(*args)
        except Exception as exc:
            raise InterpreterError(f"R call to {name}() failed: {exc}") from exc

    def get_last_error(self) -> str | None:
        self._ensure_open()
        try:
            message = self._r("geterrmessage()")
        except Exception as exc:
            raise InterpreterError(f"Unable to read the last R error: {exc}") from exc
        text = str(message[0]).strip() if len(message) else ""
        return text or None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._r(f"rm(list = {r_string_literal(self._environment)}, envir = globalenv())")
        except Exception:
            _LOGGER.warning("Failed to remove the R session environment on close", exc_info=True)

    def _conversion(self) -> Any:
        if self._converter is None:
            return nullcontext()
        from rpy2.robjects.conversion import localconverter

        return localconverter(self._converter)

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("R session is closed.")
