"""
Space Ship utils
"""

from __future__ import annotations

import pygame


def load_image(filename: str, transparent: bool = False) -> pygame.Surface:
    """
    Load an image

    :param filename: Name of the file
    :type filename: str

    :param transparent: Keep the alpha channel
    :type transparent: bool

    :raise SystemExit: If the image cannot be loaded

    :return: pygame.Surface
    """
    try:
        image = pygame.image.load(filename)
    except (pygame.error, FileNotFoundError) as message:
        raise SystemExit(message) from message

    # convert needs a display mode; headless callers get the raw surface
    if pygame.display.get_surface() is None:
        return image

    return image.convert_alpha() if transparent else image.convert()


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
