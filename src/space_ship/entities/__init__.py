"""
Space Ship entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from space_ship.constants import (
    BULLET_SIZE,
    METEOR_SIZE,
    MUZZLE_OFFSET,
    SHIP_SIZE,
    SHIP_START_X,
    SHIP_START_Y,
)


class Scene(str, Enum):
    PLAY = "play"
    GAME_OVER = "game_over"


@dataclass
class Player:
    """
    Player ship entity
    """

    position: Position2D = field(
        default_factory=lambda: Position2D(SHIP_START_X, SHIP_START_Y)
    )
    size: Size2D = field(default_factory=lambda: Size2D(*SHIP_SIZE))

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.position, self.size)

    @property
    def muzzle(self) -> Position2D:
        """Where the bullet rests while it is not in flight."""
        dx, dy = MUZZLE_OFFSET
        return Position2D(self.position.x + dx, self.position.y + dy)


@dataclass
class Bullet:
    """
    Bullet entity. There is only ever one.
    """

    position: Position2D = field(default_factory=lambda: Position2D(0.0, 0.0))
    size: Size2D = field(default_factory=lambda: Size2D(*BULLET_SIZE))
    in_flight: bool = False

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.position, self.size)


@dataclass
class Meteor:
    """
    Meteor entity
    """

    position: Position2D
    size: Size2D = field(default_factory=lambda: Size2D(*METEOR_SIZE))
    active: bool = True

    @property
    def collider(self) -> RectCollider:
        return RectCollider(self.position, self.size)
