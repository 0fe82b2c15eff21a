"""StateMachine - state registry and transition dispatch."""
from __future__ import annotations

import logging
from typing import Callable

from tick_machine.state import State
from tick_machine.types import (
    DuplicateStateIdError,
    EventId,
    NoActiveStateError,
    StateId,
    UnknownStateIdError,
)

logger = logging.getLogger(__name__)

TransitionHook = Callable[["StateMachine", "StateId | None", StateId], None]


class StateMachine:
    """Owns a set of states by id and drives exactly one of them.

    States are registered once during setup. After the initial
    :meth:`set_state` the machine always has a current state; there is no
    way to unset it. Prefer :meth:`send_event` over :meth:`set_state` for
    moving between states, since it only transitions along edges the
    current state declares.
    """

    def __init__(self, name: str = "machine") -> None:
        self._name = name
        self._states: dict[StateId, State] = {}
        self._current: State | None = None
        self._current_id: StateId | None = None
        self._transition_hooks: list[TransitionHook] = []

    def __repr__(self) -> str:
        return f"StateMachine(name={self._name!r}, state={self._current_id!r})"

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._states

    @property
    def name(self) -> str:
        return self._name

    @property
    def current_state(self) -> State | None:
        return self._current

    @property
    def current_state_id(self) -> StateId | None:
        return self._current_id

    # --- Registration ---

    def register(self, state_id: StateId, state: State) -> None:
        """Add ``state`` under ``state_id`` and bind it to this machine.

        Does not change the current state. Raises DuplicateStateIdError if
        the id is taken. None is rejected with ValueError; it means
        "no transition" to next_state_id_for_event.
        """
        if state_id is None:
            raise ValueError("state_id must not be None")
        if state_id in self._states:
            raise DuplicateStateIdError(state_id)
        state.bind(self)
        self._states[state_id] = state
        logger.debug("%s: registered %r as %s", self._name, state_id, type(state).__name__)

    def on_transition(self, hook: TransitionHook) -> None:
        """Call ``hook(machine, old_id, new_id)`` on every state change.

        ``old_id`` is None for the initial state. Hooks run once the current
        pointer has moved and before the new state's ``on_enter``, so a
        transition started from ``on_enter`` is notified after this one.
        """
        self._transition_hooks.append(hook)

    # --- Queries ---

    def has(self, state_id: StateId) -> bool:
        return state_id in self._states

    def get(self, state_id: StateId) -> State | None:
        return self._states.get(state_id)

    def state_ids(self) -> list[StateId]:
        """Registered state ids in registration order."""
        return list(self._states)

    # --- Driving ---

    def set_state(self, state_id: StateId) -> None:
        """Force the machine into ``state_id``, ignoring declared transitions.

        The current state (if any) is exited, the current pointer moves,
        transition hooks run, then the new state is entered. Setting the
        current id again exits and re-enters it. Raises UnknownStateIdError,
        leaving everything untouched, if ``state_id`` is not registered.
        """
        if state_id not in self._states:
            raise UnknownStateIdError(state_id)
        state = self._states[state_id]

        old_id = self._current_id
        if self._current is not None:
            self._current.on_exit()

        self._current = state
        self._current_id = state_id
        logger.debug("%s: %r -> %r", self._name, old_id, state_id)
        for hook in self._transition_hooks:
            hook(self, old_id, state_id)

        state.on_enter()

    def send_event(self, event: EventId) -> None:
        """Transition if the current state declares one for ``event``.

        Events without a transition are ignored.
        """
        current = self._require_current("send_event")
        next_state_id = current.next_state_id_for_event(event)
        if next_state_id is None:
            return
        self.set_state(next_state_id)

    def update(self) -> None:
        """Tick the current state once."""
        self._require_current("update").on_update()

    def _require_current(self, operation: str) -> State:
        if self._current is None:
            raise NoActiveStateError(
                f"{self._name}: {operation}() called before set_state()"
            )
        return self._current
