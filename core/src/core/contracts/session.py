from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RSession(Protocol):
    """
    Stateful connection to an R interpreter.

    Calls block until the interpreter answers. A session is not thread-safe;
    callers own one session per concurrent scoring unit.
    """

    @property
    def closed(self) -> bool:
        """Return True once the session has been closed."""
        ...

    def evaluate_void(self, statement: str) -> None:
        """Evaluate a statement, discarding its value. Raises InterpreterError."""
        ...

    def call_function(self, name: str, *args: Any) -> Any:
        """Call a function defined in the session and return its converted value."""
        ...

    def get_last_error(self) -> str | None:
        """Return the interpreter's last reported error message, if any."""
        ...

    def close(self) -> None:
        """Release the session. Closing twice is a no-op."""
        ...
