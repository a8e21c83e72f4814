from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from core.contracts import InterpreterError, SessionClosedError


@dataclass(frozen=True, slots=True)
class SessionCall:
    """Record of a session call for assertions in tests."""

    name: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]


class FakeRSession:
    """
    In-memory RSession for unit tests.

    `fail_on_evaluation` is the 1-based index of the `evaluate_void` call that fails.
    """

    def __init__(
        self,
        *,
        fail_on_evaluation: int | None = None,
        error_message: str = "Error: evaluation failed",
        functions: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self._fail_on_evaluation = fail_on_evaluation
        self._error_message = error_message
        self._functions = dict(functions or {})
        self._last_error: str | None = None
        self._evaluations = 0
        self._closed = False
        self._calls: list[SessionCall] = []

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def calls(self) -> list[SessionCall]:
        """Return the recorded calls in order."""
        return list(self._calls)

    @property
    def statements(self) -> list[str]:
        """Return the statements passed to evaluate_void, in order."""
        return [call.args[0] for call in self._calls if call.name == "evaluate_void"]

    def evaluate_void(self, statement: str) -> None:
        self._ensure_open()
        self._evaluations += 1
        self._record("evaluate_void", statement)
        if self._evaluations == self._fail_on_evaluation:
            self._last_error = self._error_message
            raise InterpreterError(self._error_message)

    def call_function(self, name: str, *args: Any) -> Any:
        self._ensure_open()
        self._record("call_function", name, *args)
        try:
            function = self._functions[name]
        except KeyError:
            self._last_error = f'Error: could not find function "{name}"'
            raise InterpreterError(self._last_error) from None
        return function(*args)

    def get_last_error(self) -> str | None:
        self._record("get_last_error")
        return self._last_error

    def close(self) -> None:
        self._record("close")
        self._closed = True

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self._calls.append(SessionCall(name=name, args=args, kwargs=kwargs))

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("R session is closed.")
