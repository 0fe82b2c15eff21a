"""Shared identifier aliases and exceptions for tick-machine."""

from __future__ import annotations

from collections.abc import Hashable

StateId = Hashable
EventId = Hashable


class StateMachineError(Exception):
    """Base class for every error raised by tick-machine."""


class DuplicateStateIdError(StateMachineError, ValueError):
    """Raised when a state id is registered twice on one machine."""

    def __init__(self, state_id: StateId) -> None:
        self.state_id = state_id
        super().__init__(f"State ID already registered: {state_id!r}")


class DuplicateTransitionError(StateMachineError, ValueError):
    """Raised when an event already has a transition on the same state."""

    def __init__(self, event: EventId, next_state_id: StateId) -> None:
        self.event = event
        self.next_state_id = next_state_id
        super().__init__(
            f"Transition for event {event!r} already registered (-> {next_state_id!r})"
        )


class UnknownStateIdError(StateMachineError, KeyError):
    """Raised when setting a state id that was never registered."""

    def __init__(self, state_id: StateId) -> None:
        self.state_id = state_id
        super().__init__(f"Invalid state ID: {state_id!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0])


class NoActiveStateError(StateMachineError, RuntimeError):
    """Raised on update/send_event before any state was set."""


class StateBindingError(StateMachineError, RuntimeError):
    """Raised when a state is registered on a second machine."""
