"""Non-player characters driven by a state machine and steering behaviours."""

from __future__ import annotations

import logging

from ghostchase.body import Body, KinematicBody, SteeringOutput
from ghostchase.path import Node, Path
from ghostchase.state_machine import (
    FULL_HEALTH,
    ConditionHealthy,
    ConditionInJail,
    ConditionInRange,
    ConditionLowHealth,
    ConditionOutOfRange,
    State,
    StateMachine,
    StateName,
    Transition,
)
from ghostchase.steering import Arrive, Flee, FollowAPath, SteeringBehaviour
from ghostchase.vector import Vec3

log = logging.getLogger(__name__)


def _default_body() -> KinematicBody:
    return KinematicBody(
        pos=Vec3(10.0, 5.0, 0.0),
        mass=1.0,
        radius=0.2,
        orientation=0.0,
        rotation=0.0,
        angular=0.0,
        max_speed=4.0,
        max_acceleration=10.0,
        max_rotation=2.0,
        max_angular=10.0,
    )


class CharacterAdapter:
    """Exposes the parts of a character that conditions look at."""

    def __init__(self, adaptee: Character) -> None:
        self.adaptee = adaptee

    def player_position(self) -> Vec3:
        return self.adaptee.player_position()

    def position(self) -> Vec3:
        return self.adaptee.position()

    def health(self) -> int:
        return self.adaptee.health


class Character:
    """A ghost that follows a path, chases the player, flees, or sits in jail."""

    def __init__(
        self,
        player: Body | None = None,
        body: KinematicBody | None = None,
        health: int = FULL_HEALTH,
    ) -> None:
        self.player = player
        self.body = body if body is not None else _default_body()
        self.health = health
        self.path: Path | None = None
        self.state_machine: StateMachine | None = None
        self.adapter = CharacterAdapter(self)

    def update(self, delta_time: float) -> None:
        """Let the state machine choose a behaviour, then move the body."""
        steering = SteeringOutput()

        if self.state_machine is not None:
            self.state_machine.update()
            state = self.state_machine.current_state_name()
            if state is StateName.FLEE:
                self._steer(steering, Flee(self.body, self._player()))
            elif state is StateName.ARRIVE:
                self._steer(steering, Arrive(self.body, self._player()))
            elif state is StateName.FOLLOWAPATH:
                self._steer(steering, FollowAPath(self.body, Body(), self.path))
            elif state is StateName.DO_NOTHING:
                self.body.vel = Vec3()

        self.body.update(delta_time, steering)

    @staticmethod
    def _steer(steering: SteeringOutput, *behaviours: SteeringBehaviour) -> None:
        for behaviour in behaviours:
            output = behaviour.get_steering()
            if output is not None:
                steering += output

    def _player(self) -> Body:
        if self.player is None:
            raise RuntimeError("character has no player to react to")
        return self.player

    def take_damage(self) -> None:
        """Lose one point of health."""
        self.health -= 1
        log.info("Character took damage; health is now %d", self.health)

    def heal(self) -> None:
        """Return to full health."""
        self.health = FULL_HEALTH
        log.info("Character healed itself; health is now %d", self.health)

    def set_spawn_point(self, node: Node) -> None:
        """Place the body on a node of the grid."""
        self.body.pos = Vec3(*node.position)

    def set_path(self, path: Path | None) -> None:
        """Set the path of nodes to follow."""
        self.path = path

    def position(self) -> Vec3:
        return self.body.pos

    def player_position(self) -> Vec3:
        return self._player().pos

    def build_state_machine(self) -> StateMachine:
        """Create the character's states and transitions and install them."""
        machine = StateMachine()

        follow_a_path = State(StateName.FOLLOWAPATH)
        arrive_to_player = State(StateName.ARRIVE)
        flee_player = State(StateName.FLEE)
        do_nothing = State(StateName.DO_NOTHING)

        machine.set_initial_state(follow_a_path)

        follow_a_path.add_transition(
            Transition(ConditionInRange(self.adapter), arrive_to_player)
        )
        arrive_to_player.add_transition(
            Transition(ConditionOutOfRange(self.adapter), follow_a_path)
        )
        arrive_to_player.add_transition(
            Transition(ConditionInJail(self.adapter), do_nothing)
        )
        arrive_to_player.add_transition(
            Transition(ConditionLowHealth(self.adapter), flee_player)
        )
        flee_player.add_transition(
            Transition(ConditionHealthy(self.adapter), follow_a_path)
        )

        self.state_machine = machine
        return machine