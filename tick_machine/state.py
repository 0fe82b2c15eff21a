"""State protocol and base implementations."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from tick_machine.types import (
    DuplicateTransitionError,
    EventId,
    StateBindingError,
    StateId,
)

if TYPE_CHECKING:
    from tick_machine.machine import StateMachine


@runtime_checkable
class State(Protocol):
    """Capability set every state registered on a StateMachine must provide.

    There are no defaults here on purpose: an implementation decides what
    each lifecycle hook does, even if that decision is "nothing".
    """

    def bind(self, machine: StateMachine) -> None:
        """Attach the state to its owning machine. Called by ``register``."""
        ...

    def next_state_id_for_event(self, event: EventId) -> StateId | None:
        """Return the id to transition to for ``event``, or None to stay put."""
        ...

    def on_enter(self) -> None:
        """The state became current."""
        ...

    def on_update(self) -> None:
        """The machine was ticked while this state is current."""
        ...

    def on_exit(self) -> None:
        """The state is about to stop being current."""
        ...


class StateBase(ABC):
    """State with a private event -> next-state-id transition table.

    Transitions reference states by id, so a state can be fully configured
    before any of its targets exist. Targets are resolved by the machine
    only when the transition fires.

    Subclasses must implement ``on_enter``, ``on_update`` and ``on_exit``.
    Use :class:`EmptyState` when all three are genuinely no-ops.
    """

    def __init__(self) -> None:
        self._transitions: dict[EventId, StateId] = {}
        self._machine: StateMachine | None = None

    @property
    def machine(self) -> StateMachine | None:
        """Owning machine, or None until registered."""
        return self._machine

    def bind(self, machine: StateMachine) -> None:
        """Set the machine back-reference. Rebinding elsewhere raises StateBindingError."""
        if self._machine is machine:
            return
        if self._machine is not None:
            raise StateBindingError(
                f"{type(self).__name__} is already bound to {self._machine!r}"
            )
        self._machine = machine

    def add_transition(self, event: EventId, next_state_id: StateId) -> None:
        """Transition to ``next_state_id`` when ``event`` arrives while current.

        Raises DuplicateTransitionError if ``event`` is already mapped.
        None is rejected for either argument since it means "no transition".
        """
        if event is None or next_state_id is None:
            raise ValueError("event and next_state_id must not be None")
        if event in self._transitions:
            raise DuplicateTransitionError(event, self._transitions[event])
        self._transitions[event] = next_state_id

    def next_state_id_for_event(self, event: EventId) -> StateId | None:
        return self._transitions.get(event)

    @abstractmethod
    def on_enter(self) -> None:
        """Initialize or reset; called each time the state becomes current."""

    @abstractmethod
    def on_update(self) -> None:
        """Per-tick work; may call ``self.machine.send_event`` to move on."""

    @abstractmethod
    def on_exit(self) -> None:
        """Tear down; called before the next state is entered."""


class EmptyState(StateBase):
    """StateBase with no-op lifecycle hooks."""

    def on_enter(self) -> None:
        pass

    def on_update(self) -> None:
        pass

    def on_exit(self) -> None:
        pass
