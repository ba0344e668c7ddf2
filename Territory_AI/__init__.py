"""Territory_AI package exports."""

from .Board import Board, Cell, Color, Owner, Status, COLOR_COUNT, PLAYABLE_COLORS
from .Territorygame import Territorygame, GameState, TimedBanner, TurnResult
from .Player import Player, HumanPlayer, GuiHumanPlayer, WindowClosed

# Subpackages for the heuristic, persistence/referee, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Cell",
    "Color",
    "Owner",
    "Status",
    "COLOR_COUNT",
    "PLAYABLE_COLORS",
    "Territorygame",
    "GameState",
    "TimedBanner",
    "TurnResult",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "WindowClosed",
    "ai",
    "engine",
    "gui",
    "utils",
]
