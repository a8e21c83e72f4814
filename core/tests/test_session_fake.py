import pytest

from core.contracts import InterpreterError, RSession, SessionClosedError
from core.testkit.fakes import FakeRSession


def test_fake_session_records_calls_in_order():
    session = FakeRSession(functions={"classify": lambda frame: ["fraud"]})

    session.evaluate_void("library(caret)")
    result = session.call_function("classify", "frame")
    session.close()

    assert isinstance(session, RSession)
    assert result == ["fraud"]
    assert [call.name for call in session.calls] == ["evaluate_void", "call_function", "close"]
    assert session.statements == ["library(caret)"]
    assert session.closed


def test_fake_session_fails_on_requested_evaluation():
    session = FakeRSession(fail_on_evaluation=2, error_message="Error: boom")

    session.evaluate_void("first")
    with pytest.raises(InterpreterError, match="boom"):
        session.evaluate_void("second")

    assert session.get_last_error() == "Error: boom"
    assert session.statements == ["first", "second"]


def test_fake_session_rejects_use_after_close():
    session = FakeRSession()
    session.close()

    with pytest.raises(SessionClosedError):
        session.evaluate_void("library(caret)")


def test_fake_session_reports_unknown_functions():
    session = FakeRSession()

    with pytest.raises(InterpreterError, match='could not find function "classify"'):
        session.call_function("classify")
