"""
Draw a RenderState onto a pygame surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from space_ship.constants import HEIGHT, WIDTH
from space_ship.entities import Scene
from space_ship.scenes import RenderState, SpriteState

WHITE = (255, 255, 255)


@dataclass
class Sprites:
    """
    Loaded images. Any missing one is drawn as a plain rectangle.
    """

    background: Optional[pygame.Surface] = None
    player: Optional[pygame.Surface] = None
    bullet: Optional[pygame.Surface] = None
    meteor: Optional[pygame.Surface] = None


def _draw_sprite(
    screen: pygame.Surface,
    image: Optional[pygame.Surface],
    sprite: SpriteState,
    color: tuple[int, int, int],
):
    x, y = sprite.position
    if image is not None:
        screen.blit(image, (x, y))
        return
    w, h = sprite.size
    pygame.draw.rect(screen, color, pygame.Rect(int(x), int(y), int(w), int(h)))


class Drawable:
    """
    Something drawn once per frame from a RenderState.
    """

    def draw(self, screen: pygame.Surface, state: RenderState):
        raise NotImplementedError("Subclasses must implement this method")


class DrawBackground(Drawable):
    def __init__(self, image: Optional[pygame.Surface], color=(0, 0, 0)):
        self._image = image
        self._color = color

    def draw(self, screen: pygame.Surface, state: RenderState):
        if self._image is not None:
            screen.blit(self._image, (0, 0))
        else:
            screen.fill(self._color)


class DrawBullet(Drawable):
    """Only while it is flying."""

    def __init__(self, image: Optional[pygame.Surface]):
        self._image = image

    def draw(self, screen: pygame.Surface, state: RenderState):
        if state.bullet.visible:
            _draw_sprite(screen, self._image, state.bullet, (80, 160, 255))


class DrawMeteors(Drawable):
    def __init__(self, image: Optional[pygame.Surface]):
        self._image = image

    def draw(self, screen: pygame.Surface, state: RenderState):
        for m in state.meteors:
            if m.visible:
                _draw_sprite(screen, self._image, m, (140, 90, 40))


class DrawShip(Drawable):
    def __init__(self, image: Optional[pygame.Surface]):
        self._image = image

    def draw(self, screen: pygame.Surface, state: RenderState):
        _draw_sprite(screen, self._image, state.player, (255, 140, 0))


class DrawScore(Drawable):
    def __init__(self, font: pygame.font.Font):
        self._font = font

    def draw(self, screen: pygame.Surface, state: RenderState):
        text = self._font.render(f"Score: {state.score}", True, WHITE)
        # y is the text baseline
        screen.blit(text, (10, 40 - self._font.get_ascent()))


class DrawGameOver(Drawable):
    def __init__(self, font: pygame.font.Font):
        self._font = font

    def draw(self, screen: pygame.Surface, state: RenderState):
        ascent = self._font.get_ascent()
        title = self._font.render("Game Over", True, WHITE)
        hint = self._font.render('Press "R" to restart', True, WHITE)
        screen.blit(title, (WIDTH / 2 - 70, HEIGHT / 4 - ascent))
        screen.blit(hint, (80, HEIGHT / 2 + 30 - ascent))


class Renderer:
    """
    Draws the play field or the game over screen depending on the scene.
    """

    def __init__(self, sprites: Sprites, font: pygame.font.Font):
        """
        :param sprites: Loaded images
        :type sprites: Sprites

        :param font: Font for the HUD and game over texts
        :type font: pygame.font.Font
        """
        self._background = DrawBackground(sprites.background)
        self._play = [
            DrawBullet(sprites.bullet),
            DrawMeteors(sprites.meteor),
            DrawShip(sprites.player),
            DrawScore(font),
        ]
        self._game_over = [DrawGameOver(font)]

    def draw(self, screen: pygame.Surface, state: RenderState):
        self._background.draw(screen, state)

        drawables = self._play if state.scene is Scene.PLAY else self._game_over
        for drawable in drawables:
            drawable.draw(screen, state)
