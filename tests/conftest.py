import pytest

from initialized_counter import counter, state
from initialized_counter.config import CounterConfig
from initialized_counter.domain.class_registry import ClassRegistry


@pytest.fixture(autouse=True)
def _fresh_counter(monkeypatch):
    """
    Give every test its own configuration and an empty, enabled scope.
    """
    monkeypatch.setattr(counter, "_config", CounterConfig(registry=ClassRegistry()))
    state.reset()
    state.set_disabled(False)

    yield

    state.reset()
    state.set_disabled(False)
