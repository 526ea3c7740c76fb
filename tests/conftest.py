import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from space_ship.scenes import SpaceShipScene, create_world  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_font():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def world():
    return create_world(seed=1234)


@pytest.fixture
def scene(world):
    return SpaceShipScene(world)
