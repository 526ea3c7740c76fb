"""
Constants for the game.
"""

from __future__ import annotations

WIDTH = 480
HEIGHT = 600

FPS = 60
WINDOW_SIZE = (WIDTH, HEIGHT)
TITLE = "Space ship"

# per-tick steps
SHIP_STEP = 5
BULLET_STEP = 15
METEOR_STEP = 3

METEOR_COUNT = 3
METEOR_SPAWN_Y = -20

# bullet rests at (ship.x + 43, ship.y)
MUZZLE_OFFSET = (43, 0)

SHIP_START_X = WIDTH / 2
SHIP_START_Y = HEIGHT - 100

# footprints of the default sprites
SHIP_SIZE = (99, 75)
BULLET_SIZE = (13, 37)
METEOR_SIZE = (28, 28)

PLAYER_SPRITE = "playerShip1_orange.png"
BACKGROUND_SPRITE = "bg.png"
BULLET_SPRITE = "laserBlue05.png"
METEOR_SPRITE = "meteorBrown_small1.png"
