import logging

import numpy as np
import pytest

from uncertain_fx.settings import LOG_LEVEL_ENV


class FixedSource:
    """Random source stub that always yields the same draw."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self, size=None):
        self.calls += 1
        if size is None:
            return self.value
        return np.full(size, self.value, dtype=float)


@pytest.fixture
def fixed_source():
    return FixedSource


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
