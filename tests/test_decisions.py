import pytest

from ghostchase.decisions import (
    JAIL_POSITIONS,
    Action,
    ActionSet,
    Decision,
    DecisionTreeNode,
    InJailDecision,
    PlayerInRangeDecision,
    in_jail,
)
from ghostchase.vector import Vec3


class Owner:
    def __init__(self, pos, player_pos=None):
        self.pos = pos
        self.player_pos = player_pos if player_pos is not None else Vec3()

    def position(self):
        return self.pos

    def player_position(self):
        return self.player_pos


def test_action_decides_itself():
    action = Action(ActionSet.ARRIVE)
    assert action.make_decision() is action
    assert action.value is ActionSet.ARRIVE


def test_tree_node_is_abstract():
    with pytest.raises(TypeError):
        DecisionTreeNode()


def test_base_decision_takes_false_branch():
    yes, no = Action(ActionSet.SEEK), Action(ActionSet.DO_NOTHING)
    decision = Decision(yes, no)
    assert decision.test_value() is False
    assert decision.get_branch() is no
    assert decision.make_decision() is no


@pytest.mark.parametrize("jail", JAIL_POSITIONS)
def test_in_jail_near_each_corner(jail):
    assert in_jail(Vec3(jail.x + 0.1, jail.y, 0.0))
    assert not in_jail(Vec3(jail.x + 0.6, jail.y, 0.0))


def test_not_in_jail_in_middle():
    assert not in_jail(Vec3(12.0, 7.0, 0.0))


def test_in_jail_decision_branches():
    yes, no = Action(ActionSet.DO_NOTHING), Action(ActionSet.FOLLOWAPATH)
    jail = JAIL_POSITIONS[0]
    jailed = InJailDecision(yes, no, Owner(Vec3(jail.x, jail.y, 0.0)))
    free = InJailDecision(yes, no, Owner(Vec3(12.0, 7.0, 0.0)))
    assert jailed.make_decision() is yes
    assert free.make_decision() is no


def test_player_in_range_decision_branches():
    yes, no = Action(ActionSet.ARRIVE), Action(ActionSet.FOLLOWAPATH)
    near = PlayerInRangeDecision(yes, no, Owner(Vec3(), Vec3(2.0, 0.0, 0.0)))
    far = PlayerInRangeDecision(yes, no, Owner(Vec3(), Vec3(4.0, 0.0, 0.0)))
    assert near.make_decision().value is ActionSet.ARRIVE
    assert far.make_decision().value is ActionSet.FOLLOWAPATH


def test_nested_decisions_reach_leaf():
    leaf = Action(ActionSet.DO_NOTHING)
    inner = Decision(Action(ActionSet.SEEK), leaf)
    outer = Decision(Action(ActionSet.ARRIVE), inner)
    assert outer.make_decision() is leaf