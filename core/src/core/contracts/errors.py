from __future__ import annotations


class InterpreterError(RuntimeError):
    """The R interpreter reported an error while evaluating a statement."""


class SessionClosedError(RuntimeError):
    pass


class ModelLoadingError(RuntimeError):
    """
    Fatal error for a model load attempt.

    `last_error` keeps the interpreter's last reported message, when there is one.
    """

    def __init__(self, message: str, *, last_error: str | None = None) -> None:
        super().__init__(message)
        self.last_error = last_error

    def __str__(self) -> str:
        base = super().__str__()
        if self.last_error:
            return f"{base} (R error: {self.last_error.strip()})"
        return base
