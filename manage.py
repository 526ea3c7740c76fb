"""
This is the main file to run the game.
It imports the entry point from the space_ship app and runs it.
"""

from space_ship.app import run

if __name__ == "__main__":
    run()
