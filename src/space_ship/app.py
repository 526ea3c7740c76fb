"""
Space Ship game
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pygame
from mini_arcade_core.utils import find_assets_root, logger

from space_ship.constants import (
    BACKGROUND_SPRITE,
    BULLET_SPRITE,
    FPS,
    METEOR_SPRITE,
    PLAYER_SPRITE,
    TITLE,
    WINDOW_SIZE,
)
from space_ship.render import Renderer, Sprites
from space_ship.scenes import SpaceShipScene, create_world, read_intent
from space_ship.utils import load_image, set_screen


def load_sprites(assets_root: Optional[Path]) -> Sprites:
    """
    Load the four sprites from `assets_root`.

    :param assets_root: Directory holding the sprites, None to draw
        plain rectangles instead
    :type assets_root: Optional[Path]

    :raise SystemExit: If the directory exists but a sprite cannot be loaded

    :return: Sprites
    :rtype: Sprites
    """
    if assets_root is None:
        return Sprites()

    def _load(name: str) -> pygame.Surface:
        file = assets_root / name
        logger.debug(f"Loading image {file}")
        try:
            return load_image(str(file), transparent=True)
        except SystemExit as e:
            logger.error(f"Failed to load image {file}: {e}")
            raise

    return Sprites(
        background=_load(BACKGROUND_SPRITE),
        player=_load(PLAYER_SPRITE),
        bullet=_load(BULLET_SPRITE),
        meteor=_load(METEOR_SPRITE),
    )


class SpaceShip:
    """
    Window, frame loop and the scene it drives.
    """

    def __init__(
        self,
        settings: dict,
        assets_root: Optional[Path],
        seed: Optional[int] = None,
    ):
        """
        :param settings: Window and font settings
        :type settings: dict

        :param assets_root: Directory holding the sprites, or None
        :type assets_root: Optional[Path]

        :param seed: Seed for the meteor spawner
        :type seed: Optional[int]
        """
        window = settings["window"]
        logger.debug(f"Initializing {window['title']}")
        pygame.init()

        self._clock = pygame.time.Clock()
        self._carry_on = True
        self._screen = set_screen(
            window["title"], window["width"], window["height"]
        )

        sprites = load_sprites(assets_root)
        font_settings = settings["font"]
        font = pygame.font.Font(font_settings["path"], font_settings["size"])
        self._renderer = Renderer(sprites, font)

        # collision boxes follow the sprite sizes when there are sprites
        sizes = {}
        if sprites.player is not None:
            sizes = {
                "ship_size": sprites.player.get_size(),
                "bullet_size": sprites.bullet.get_size(),
                "meteor_size": sprites.meteor.get_size(),
            }
        self._scene = SpaceShipScene(create_world(seed=seed, **sizes))

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.debug("Escape pressed")
                self._carry_on = False

    def handle_game_logic(self):
        """
        Advance the simulation by one tick.
        """
        self._scene.tick(read_intent(pygame.key.get_pressed()))

    def draw_stuff(self):
        """
        Draw the stuff
        """
        self._renderer.draw(self._screen, self._scene.render_state())
        pygame.display.flip()

    def run(self):
        """
        Run the frame loop until the window is closed.
        """
        while self._carry_on:
            self._clock.tick(FPS)
            self.handle_events()
            self.handle_game_logic()
            self.draw_stuff()

        logger.info("Space Ship closed")
        pygame.quit()


def run(seed: Optional[int] = None):
    """
    Main entry point for Space Ship.

    - Looks for an `assets` directory; without one the game draws
      plain rectangles.
    - Opens a 480x600 window.
    - Runs the frame loop at 60 FPS.
    """
    try:
        assets_root: Optional[Path] = find_assets_root(__file__)
    except FileNotFoundError:
        logger.warning("No 'assets' directory found, drawing rectangles")
        assets_root = None

    w_width, w_height = WINDOW_SIZE

    settings = {
        "window": {
            "width": w_width,
            "height": w_height,
            "title": TITLE,
        },
        "font": {"path": None, "size": 30},
    }
    logger.info("Starting Space Ship...")
    logger.info(settings)

    SpaceShip(settings, assets_root, seed=seed).run()


if __name__ == "__main__":
    run()
