"""Test doubles for code that depends on core contracts."""

from core.testkit.dummies import DummyModel, DummyModelLoader
from core.testkit.fakes import FakeRSession, SessionCall

__all__ = ["DummyModel", "DummyModelLoader", "FakeRSession", "SessionCall"]
