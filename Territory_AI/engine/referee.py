"""Color-pick validation for the human side."""

import logging

try:
    from Board import Color, Owner, color_name
except ImportError:
    from Territory_AI.Board import Color, Owner, color_name

LOGGER = logging.getLogger(__name__)


def check_pick(color, board, owner=Owner.PLAYER):
    """
    Validate a color pick for `owner`.
    Raises ValueError for anything that is not a playable color; returns False
    (with a warning) when the owner already has that color, True otherwise.
    Taking the opponent's color is allowed here even when both sides touch.
    """
    if not isinstance(color, Color):
        raise ValueError(f"Not a playable color: {color!r}")

    if board.color_of(owner) == color:
        LOGGER.warning("ignoring change to color %s: %s already has this color", color_name(color), owner.name.lower())
        return False

    return True
