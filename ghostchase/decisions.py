"""Decision trees: actions at the leaves, yes/no decisions at the branches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Protocol

from ghostchase.vector import Vec3, distance

JAIL_POSITIONS: tuple[Vec3, ...] = (
    Vec3(1.05, 0.95, 0.0),
    Vec3(24.15, 0.95, 0.0),
    Vec3(1.05, 14.25, 0.0),
    Vec3(24.15, 14.25, 0.0),
)
"""Centres of the four jail tiles in the corners of the level."""

JAIL_DISTANCE = 0.5
"""A character closer than this to a jail centre is in jail."""

PLAYER_RANGE = 3.0
"""The player is in range when closer than this."""


class Positioned(Protocol):
    """Anything that knows its own position and the player's."""

    def position(self) -> Vec3: ...

    def player_position(self) -> Vec3: ...


def in_jail(position: Vec3) -> bool:
    """True if position is within reach of any jail tile."""
    return any(distance(position, jail) < JAIL_DISTANCE for jail in JAIL_POSITIONS)


class ActionSet(Enum):
    """Actions a character can be told to take."""

    SEEK = auto()
    ARRIVE = auto()
    FOLLOWAPATH = auto()
    DO_NOTHING = auto()


class DecisionTreeNode(ABC):
    """A node of a decision tree."""

    @abstractmethod
    def make_decision(self) -> DecisionTreeNode:
        """Walk the tree from this node and return the action reached."""


class Action(DecisionTreeNode):
    """A leaf of the tree naming an action."""

    def __init__(self, value: ActionSet) -> None:
        self.value = value

    def make_decision(self) -> Action:
        return self


class Decision(DecisionTreeNode):
    """A branch that picks one of two subtrees by testing a value."""

    def __init__(self, true_node: DecisionTreeNode, false_node: DecisionTreeNode) -> None:
        self.true_node = true_node
        self.false_node = false_node

    def make_decision(self) -> DecisionTreeNode:
        return self.get_branch().make_decision()

    def test_value(self) -> bool:
        """The test that chooses the branch; subclasses supply the logic."""
        return False

    def get_branch(self) -> DecisionTreeNode:
        """The subtree chosen by the test."""
        return self.true_node if self.test_value() else self.false_node


class InJailDecision(Decision):
    """Chooses the true branch when the owner stands in a jail tile."""

    def __init__(
        self, true_node: DecisionTreeNode, false_node: DecisionTreeNode, owner: Positioned
    ) -> None:
        super().__init__(true_node, false_node)
        self.owner = owner

    def test_value(self) -> bool:
        return in_jail(self.owner.position())


class PlayerInRangeDecision(Decision):
    """Chooses the true branch when the player is near the owner."""

    def __init__(
        self, true_node: DecisionTreeNode, false_node: DecisionTreeNode, owner: Positioned
    ) -> None:
        super().__init__(true_node, false_node)
        self.owner = owner

    def test_value(self) -> bool:
        return distance(self.owner.player_position(), self.owner.position()) < PLAYER_RANGE