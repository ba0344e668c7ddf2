"""Greedy one-ply color selection: rank colors by the cells they would claim right now."""

import logging

try:
    from Board import COLOR_COUNT, PLAYABLE_COLORS, Owner, color_name, generate_random_color, opponent_of
except ImportError:
    from Territory_AI.Board import COLOR_COUNT, PLAYABLE_COLORS, Owner, color_name, generate_random_color, opponent_of

LOGGER = logging.getLogger(__name__)


def color_gains(board, owner):
    """
    Count, per candidate color, the distinct unowned cells of that color that touch
    `owner`'s territory. When both sides are in contact the opponent's color is
    left out entirely.
    """
    opponent = opponent_of(owner)
    opponent_color = board.color_of(opponent)
    in_contact = board.is_player_and_ai_in_contact()

    owned = [
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.cells[board.linear(x, y)].owner == owner
    ]

    gains = {}
    visited = bytearray(board.width * board.height)
    for color in PLAYABLE_COLORS:
        if in_contact and color == opponent_color:
            continue
        marked = []
        for x, y in owned:
            for nx, ny in board.neighbors(x, y):
                idx = board.linear(nx, ny)
                if visited[idx]:
                    continue
                cell = board.cells[idx]
                if cell.owner == Owner.NOBODY and cell.color == color:
                    visited[idx] = 1
                    marked.append(idx)
        gains[color] = len(marked)
        for idx in marked:
            visited[idx] = 0
    return gains


def rank_colors(gains):
    """Colors by descending gain; equal gains keep declaration order."""
    candidates = sorted(gains, key=lambda c: int(c))
    return sorted(candidates, key=lambda c: gains[c], reverse=True)


def best_color(board, owner, rng):
    gains = color_gains(board, owner)
    ranked = rank_colors(gains)

    if ranked and gains[ranked[0]] > 0:
        LOGGER.debug("%s best color %s (+%d)", owner.name.lower(), color_name(ranked[0]), gains[ranked[0]])
        return ranked[0]

    # No color gains anything: draw one that at least differs from the opponent.
    opponent_color = board.color_of(opponent_of(owner))
    color = generate_random_color(rng)
    tries = 1
    while color == opponent_color and tries < COLOR_COUNT:
        color = generate_random_color(rng)
        tries += 1
    if color == opponent_color:
        LOGGER.warning(
            "no gain available and %d draws kept hitting %s, using it anyway",
            COLOR_COUNT,
            color_name(opponent_color),
        )
    return color
