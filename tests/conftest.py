# tests/conftest.py
import os

import pytest
from hypothesis import settings

from miniparsec.Parsec import Err, Ok, State

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def assert_reply(reply, position, value=None, error=None):
    """
    Check a raw (state, result) reply: the position it stopped at, and either
    the success value or the expected error.
    """
    new_state, result = reply
    assert new_state.position == position, f"Position mismatch: {new_state.position} != {position}"
    if error is None:
        assert isinstance(result, Ok), f"Expected success, got {result}"
        assert result.value == value
    else:
        assert isinstance(result, Err), f"Expected failure, got {result}"
        assert result.error == error


@pytest.fixture
def state():
    def _make(source, position=0):
        return State(position, source)

    return _make
