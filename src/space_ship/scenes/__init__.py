"""
Space Ship scenes
"""

from space_ship.scenes.space_ship import (
    RenderState,
    SpaceShipIntent,
    SpaceShipScene,
    SpaceShipWorld,
    SpriteState,
    create_world,
    read_intent,
)

__all__ = [
    "RenderState",
    "SpaceShipIntent",
    "SpaceShipScene",
    "SpaceShipWorld",
    "SpriteState",
    "create_world",
    "read_intent",
]
