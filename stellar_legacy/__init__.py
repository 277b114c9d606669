"""
Stellar Legacy - the economy and transaction engine of a space dynasty game.

This package provides the resource ledger, crew and galaxy transactions,
the single-writer game loop, persistence and a seeded economy simulator.
"""

__version__ = "0.1.0"
__author__ = "Stellar Legacy Team"

from .game.game_state import GameState, create_game
from .game.game_loop import GameLoop
from .game.settings import GameSettings
from .simulation.simulator import EconomySimulator

__all__ = ["GameState", "create_game", "GameLoop", "GameSettings", "EconomySimulator"]
