"""
Space Ship Scene
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import pygame
from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.utils import logger

from space_ship.constants import (
    BULLET_SIZE,
    BULLET_STEP,
    HEIGHT,
    METEOR_COUNT,
    METEOR_SIZE,
    METEOR_SPAWN_Y,
    METEOR_STEP,
    SHIP_SIZE,
    SHIP_START_X,
    SHIP_START_Y,
    SHIP_STEP,
    WIDTH,
)
from space_ship.entities import Bullet, Meteor, Player, Scene


@dataclass
class SpaceShipWorld:
    """
    Space Ship World
    """

    viewport: tuple[float, float]
    player: Player
    bullet: Bullet
    meteors: list[Meteor] = field(default_factory=list)
    meteor_size: Size2D = field(default_factory=lambda: Size2D(*METEOR_SIZE))
    score: int = 0
    scene: Scene = Scene.PLAY
    rng: random.Random = field(default_factory=random.Random)


def create_world(
    seed: Optional[int] = None,
    ship_size: tuple[float, float] = SHIP_SIZE,
    bullet_size: tuple[float, float] = BULLET_SIZE,
    meteor_size: tuple[float, float] = METEOR_SIZE,
) -> SpaceShipWorld:
    """
    Build a fresh world with the ship at its start row and the bullet
    resting on the muzzle.

    :param seed: Seed for the meteor spawner, None seeds from the OS
    :type seed: Optional[int]

    :param ship_size: Ship footprint, usually the ship sprite size
    :type ship_size: tuple[float, float]

    :param bullet_size: Bullet footprint
    :type bullet_size: tuple[float, float]

    :param meteor_size: Meteor footprint
    :type meteor_size: tuple[float, float]

    :return: SpaceShipWorld
    :rtype: SpaceShipWorld
    """
    player = Player(
        position=Position2D(SHIP_START_X, SHIP_START_Y),
        size=Size2D(*ship_size),
    )
    bullet = Bullet(position=player.muzzle, size=Size2D(*bullet_size))
    return SpaceShipWorld(
        viewport=(WIDTH, HEIGHT),
        player=player,
        bullet=bullet,
        meteor_size=Size2D(*meteor_size),
        rng=random.Random(seed),
    )


@dataclass(frozen=True)
class SpaceShipIntent:
    """
    Control snapshot for one tick. The default is "nothing pressed".
    """

    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    restart: bool = False


def read_intent(keys: Mapping[int, Any]) -> SpaceShipIntent:
    """
    Read the control state into an intent.

    :param keys: Key state indexable by pygame key code,
        e.g. ``pygame.key.get_pressed()``
    :type keys: Mapping[int, Any]

    :return: SpaceShipIntent
    :rtype: SpaceShipIntent
    """
    return SpaceShipIntent(
        move_left=bool(keys[pygame.K_LEFT]),
        move_right=bool(keys[pygame.K_RIGHT]),
        fire=bool(keys[pygame.K_SPACE]),
        restart=bool(keys[pygame.K_r]),
    )


@dataclass
class SpaceShipTickContext:
    """
    Space Ship Tick Context
    """

    world: SpaceShipWorld
    intent: SpaceShipIntent


class PlaySystem:
    """
    Base for systems that only run while the round is being played.
    """

    phase: int = SystemPhase.SIMULATION

    def enabled(self, ctx: SpaceShipTickContext) -> bool:
        return ctx.world.scene is Scene.PLAY


@dataclass
class ShipSystem(PlaySystem):
    """
    Move the ship and latch the fire button.
    """

    name: str = "space_ship_ship"
    order: int = 20

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        vw, _ = w.viewport
        pos = w.player.position

        if ctx.intent.move_right and pos.x < vw - w.player.size.width:
            pos.x += SHIP_STEP
        if ctx.intent.move_left and pos.x > 0:
            pos.x -= SHIP_STEP

        # stays latched until the bullet leaves the screen or hits
        if ctx.intent.fire:
            w.bullet.in_flight = True


@dataclass
class BulletSystem(PlaySystem):
    """
    Fly the bullet upwards, or keep it on the muzzle while it rests.
    """

    name: str = "space_ship_bullet"
    order: int = 25

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        bullet = w.bullet
        if bullet.in_flight:
            bullet.position.y -= BULLET_STEP

        if bullet.position.y < 0:
            bullet.in_flight = False

        if not bullet.in_flight:
            bullet.position = w.player.muzzle


@dataclass
class MeteorSystem(PlaySystem):
    """Drop active meteors."""

    name: str = "space_ship_meteors"
    order: int = 30

    def step(self, ctx: SpaceShipTickContext):
        for m in ctx.world.meteors:
            if m.active:
                m.position.y += METEOR_STEP


@dataclass
class MeteorSpawnSystem(PlaySystem):
    """
    Cull meteors that fell off the bottom or were destroyed, then top the
    field back up to `count` meteors above the screen.
    """

    name: str = "space_ship_meteor_spawn"
    order: int = 35

    count: int = METEOR_COUNT
    spawn_y: float = METEOR_SPAWN_Y

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        _, vh = w.viewport
        w.meteors = [
            m for m in w.meteors if m.active and m.position.y <= vh
        ]

        while len(w.meteors) < self.count:
            w.meteors.append(self._spawn(w))

    def _spawn(self, w: SpaceShipWorld) -> Meteor:
        vw, _ = w.viewport
        x = w.rng.randint(0, int(vw))
        logger.debug(f"Spawning meteor at x={x}")
        return Meteor(
            position=Position2D(float(x), float(self.spawn_y)),
            size=w.meteor_size,
        )


@dataclass
class BulletMeteorCollisionSystem(PlaySystem):
    """
    Destroys the first meteor the flying bullet touches and puts the bullet
    back on the muzzle.
    """

    name: str = "space_ship_bullet_meteor_collision"
    order: int = 45

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        bullet = w.bullet
        for m in w.meteors:
            if not bullet.in_flight:
                break
            if bullet.collider.intersects(m.collider):
                bullet.in_flight = False
                bullet.position = w.player.muzzle
                m.active = False
                w.score += 1
                logger.debug(f"Hit! Score: {w.score}")


@dataclass
class ShipMeteorCollisionSystem(PlaySystem):
    """
    Any meteor touching the ship ends the game. Destroyed meteors that
    have not been culled yet still count.
    """

    name: str = "space_ship_ship_meteor_collision"
    order: int = 46

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        ship_collider = w.player.collider
        for m in w.meteors:
            if ship_collider.intersects(m.collider):
                w.scene = Scene.GAME_OVER
                logger.debug(f"Game over with score {w.score}")
                break


@dataclass
class RestartSystem:
    """
    Restart from the game over screen. Runs in every scene.
    """

    name: str = "space_ship_restart"
    phase: int = SystemPhase.SIMULATION
    order: int = 50

    def step(self, ctx: SpaceShipTickContext):
        w = ctx.world
        if w.scene is not Scene.GAME_OVER or not ctx.intent.restart:
            return

        w.scene = Scene.PLAY
        w.score = 0
        w.meteors = []
        w.player.position = Position2D(SHIP_START_X, SHIP_START_Y)
        w.bullet.in_flight = False
        w.bullet.position = w.player.muzzle
        logger.debug("Restarting")


def default_systems() -> list:
    return [
        ShipSystem(),
        BulletSystem(),
        MeteorSystem(),
        MeteorSpawnSystem(),
        BulletMeteorCollisionSystem(),
        ShipMeteorCollisionSystem(),
        RestartSystem(),
    ]


@dataclass(frozen=True)
class SpriteState:
    """
    Read-only view of one entity for drawing.
    """

    position: tuple[float, float]
    size: tuple[float, float]
    visible: bool = True


@dataclass(frozen=True)
class RenderState:
    """
    Read-only projection of the world for the renderer.
    """

    scene: Scene
    player: SpriteState
    bullet: SpriteState
    meteors: tuple[SpriteState, ...]
    score: int


class SpaceShipScene:
    """
    Owns the world and advances it one tick at a time.
    """

    world: SpaceShipWorld

    def __init__(
        self,
        world: Optional[SpaceShipWorld] = None,
        systems: Optional[list] = None,
    ):
        """
        :param world: World to drive, a fresh one when omitted
        :type world: Optional[SpaceShipWorld]

        :param systems: Update phases, the default set when omitted
        :type systems: Optional[list]
        """
        self.world = world if world is not None else create_world()
        self.pipeline = SystemPipeline()
        self.pipeline.extend(
            systems if systems is not None else default_systems()
        )

    def tick(self, intent: Optional[SpaceShipIntent] = None):
        """
        Advance the world by one frame.

        :param intent: Control snapshot for this frame
        :type intent: Optional[SpaceShipIntent]
        """
        ctx = SpaceShipTickContext(
            world=self.world,
            intent=intent if intent is not None else SpaceShipIntent(),
        )
        self.pipeline.step(ctx)

    def render_state(self) -> RenderState:
        """
        Snapshot what the renderer needs. Does not touch the world.

        :return: RenderState
        :rtype: RenderState
        """
        w = self.world
        return RenderState(
            scene=w.scene,
            player=SpriteState(
                w.player.position.to_tuple(), w.player.size.to_tuple()
            ),
            bullet=SpriteState(
                w.bullet.position.to_tuple(),
                w.bullet.size.to_tuple(),
                visible=w.bullet.in_flight,
            ),
            meteors=tuple(
                SpriteState(
                    m.position.to_tuple(), m.size.to_tuple(), visible=m.active
                )
                for m in w.meteors
            ),
            score=w.score,
        )
