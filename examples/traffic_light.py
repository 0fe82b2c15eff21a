"""Traffic light -- a tick-driven state machine.

Demonstrates:
- Defining states as StateBase subclasses with lifecycle hooks
- Wiring transitions by id before every target state exists
- A state advancing itself from on_update via self.machine.send_event
- An external event (pedestrian button) that only some states react to
- Observing state changes with on_transition

Run: python -m examples.traffic_light [--verbose]
"""

import argparse
import logging
from enum import Enum

from tick_machine import EmptyState, StateBase, StateMachine


class Light(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    OFF = "off"


class Signal(Enum):
    TIMER = "timer"
    BUTTON = "button"
    POWER = "power"


class TimedLight(StateBase):
    """Stays lit for a number of ticks, then fires TIMER."""

    def __init__(self, light: Light, ticks: int) -> None:
        super().__init__()
        self.light = light
        self.ticks = ticks
        self._remaining = 0

    def on_enter(self) -> None:
        self._remaining = self.ticks
        print(f"  [{self.light.value:>6}] on for {self.ticks} ticks")

    def on_update(self) -> None:
        self._remaining -= 1
        if self._remaining <= 0:
            self.machine.send_event(Signal.TIMER)

    def on_exit(self) -> None:
        # Nothing to tear down; the timer is reset on the next enter.
        pass


def build_light() -> StateMachine:
    red = TimedLight(Light.RED, ticks=4)
    red.add_transition(Signal.TIMER, Light.GREEN)
    red.add_transition(Signal.POWER, Light.OFF)

    green = TimedLight(Light.GREEN, ticks=6)
    green.add_transition(Signal.TIMER, Light.YELLOW)
    # Pedestrians cut green short.
    green.add_transition(Signal.BUTTON, Light.YELLOW)
    green.add_transition(Signal.POWER, Light.OFF)

    yellow = TimedLight(Light.YELLOW, ticks=2)
    yellow.add_transition(Signal.TIMER, Light.RED)
    yellow.add_transition(Signal.POWER, Light.OFF)

    off = EmptyState()
    off.add_transition(Signal.POWER, Light.RED)

    machine = StateMachine(name="crossing")
    machine.register(Light.RED, red)
    machine.register(Light.GREEN, green)
    machine.register(Light.YELLOW, yellow)
    machine.register(Light.OFF, off)
    return machine


def main() -> None:
    parser = argparse.ArgumentParser(description="Traffic light state machine demo")
    parser.add_argument("--verbose", action="store_true", help="log every transition")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s | %(message)s")

    print("=== Traffic Light ===\n")

    machine = build_light()
    machine.on_transition(
        lambda m, old, new: print(
            f"  {old.value if old else '-':>6} -> {new.value}"
        )
    )
    machine.set_state(Light.RED)

    for tick in range(1, 21):
        if tick == 7:
            print("  * button pressed")
            machine.send_event(Signal.BUTTON)
        if tick == 16:
            print("  * power cut")
            machine.send_event(Signal.POWER)
        machine.update()

    print(f"\nDone. Light is {machine.current_state_id.value}.")


if __name__ == "__main__":
    main()
