"""tick-machine - A minimal, tick-driven finite state machine."""
from __future__ import annotations

from tick_machine.machine import StateMachine, TransitionHook
from tick_machine.state import EmptyState, State, StateBase
from tick_machine.types import (
    DuplicateStateIdError,
    DuplicateTransitionError,
    EventId,
    NoActiveStateError,
    StateBindingError,
    StateId,
    StateMachineError,
    UnknownStateIdError,
)

__all__ = [
    "StateMachine",
    "TransitionHook",
    "State",
    "StateBase",
    "EmptyState",
    "StateId",
    "EventId",
    "StateMachineError",
    "DuplicateStateIdError",
    "DuplicateTransitionError",
    "UnknownStateIdError",
    "NoActiveStateError",
    "StateBindingError",
]
