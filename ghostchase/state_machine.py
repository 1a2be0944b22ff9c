"""A finite state machine whose transitions are guarded by conditions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Protocol

from ghostchase.decisions import in_jail
from ghostchase.vector import Vec3, distance

IN_RANGE_DISTANCE = 3.0
OUT_OF_RANGE_DISTANCE = 3.5
LOW_HEALTH = 1
FULL_HEALTH = 3


class Observed(Protocol):
    """What conditions need to know about the character they watch."""

    def player_position(self) -> Vec3: ...

    def position(self) -> Vec3: ...

    def health(self) -> int: ...


class StateName(Enum):
    """Names of the states a character can be in."""

    SEEK = auto()
    FLEE = auto()
    ARRIVE = auto()
    FOLLOWAPATH = auto()
    DO_NOTHING = auto()


class Condition(ABC):
    """A test on the character that owns it."""

    def __init__(self, owner: Observed) -> None:
        self.owner = owner

    @abstractmethod
    def test(self) -> bool:
        """True when the condition holds."""


class ConditionInRange(Condition):
    """The player is close to the owner."""

    def test(self) -> bool:
        return distance(self.owner.player_position(), self.owner.position()) < IN_RANGE_DISTANCE


class ConditionOutOfRange(Condition):
    """The player has moved away from the owner."""

    def test(self) -> bool:
        return (
            distance(self.owner.player_position(), self.owner.position())
            > OUT_OF_RANGE_DISTANCE
        )


class ConditionInJail(Condition):
    """The owner stands in a jail tile."""

    def test(self) -> bool:
        return in_jail(self.owner.position())


class ConditionLowHealth(Condition):
    """The owner's health is at or below the low mark."""

    def test(self) -> bool:
        return self.owner.health() <= LOW_HEALTH


class ConditionHealthy(Condition):
    """The owner is back at full health."""

    def test(self) -> bool:
        return self.owner.health() == FULL_HEALTH


class State:
    """A named state with its outgoing transitions, checked in order."""

    def __init__(self, name: StateName) -> None:
        self.name = name
        self.transitions: list[Transition] = []

    def add_transition(self, transition: Transition) -> None:
        """Append a transition; earlier ones take precedence."""
        self.transitions.append(transition)


class Transition:
    """A move to a target state, taken when its condition holds."""

    def __init__(self, condition: Condition, target_state: State) -> None:
        self.condition = condition
        self.target_state = target_state

    def is_triggered(self) -> bool:
        """True when the transition should be taken."""
        return self.condition.test()


class StateMachine:
    """Holds a current state and follows the first triggered transition."""

    def __init__(self) -> None:
        self.initial_state: State | None = None
        self.current_state: State | None = None

    def _current(self) -> State:
        if self.current_state is None:
            raise RuntimeError("state machine has no initial state")
        return self.current_state

    def update(self) -> None:
        """Take at most one transition from the current state."""
        state = self._current()
        triggered = next((t for t in state.transitions if t.is_triggered()), None)
        if triggered is not None:
            self.current_state = triggered.target_state

    def current_state_name(self) -> StateName:
        """Name of the current state."""
        return self._current().name

    def set_initial_state(self, state: State) -> None:
        """Set the starting state and make it current."""
        self.initial_state = state
        self.current_state = state