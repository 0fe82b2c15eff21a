"""Tests for tick-machine exception types."""
import pytest

from tick_machine import (
    DuplicateStateIdError,
    DuplicateTransitionError,
    NoActiveStateError,
    StateBindingError,
    StateMachineError,
    UnknownStateIdError,
)


class TestExceptionHierarchy:
    """Every library error shares one base and a matching builtin."""

    @pytest.mark.parametrize("exc_type, builtin", [
        (DuplicateStateIdError, ValueError),
        (DuplicateTransitionError, ValueError),
        (UnknownStateIdError, KeyError),
        (NoActiveStateError, RuntimeError),
        (StateBindingError, RuntimeError),
    ])
    def test_subclasses(self, exc_type, builtin):
        """Each error is both a StateMachineError and its builtin."""
        assert issubclass(exc_type, StateMachineError)
        assert issubclass(exc_type, builtin)

    def test_unknown_state_id_message(self):
        """Message names the invalid id without KeyError's extra quoting."""
        err = UnknownStateIdError("nowhere")
        assert str(err) == "Invalid state ID: 'nowhere'"
        assert err.state_id == "nowhere"

    def test_duplicate_state_id_carries_id(self):
        """DuplicateStateIdError exposes the offending id."""
        err = DuplicateStateIdError(3)
        assert err.state_id == 3
        assert "3" in str(err)

    def test_duplicate_transition_carries_event_and_target(self):
        """DuplicateTransitionError exposes event and existing target."""
        err = DuplicateTransitionError("start", "running")
        assert err.event == "start"
        assert err.next_state_id == "running"
        assert "'start'" in str(err)
