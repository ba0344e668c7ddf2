"""Scripted player that uses the greedy color ranking, for AI-vs-AI demos."""

try:
    from Board import PLAYABLE_COLORS, Owner
    from Player import Player
    from ai import heuristic
except ImportError:
    from Territory_AI.Board import PLAYABLE_COLORS, Owner
    from Territory_AI.Player import Player
    from Territory_AI.ai import heuristic


class GreedyPlayer(Player):
    def __init__(self, owner=Owner.PLAYER, rng=None):
        super().__init__(owner)
        self.rng = rng

    def next_color(self, board, deadline=None):
        # The referee refuses a pick of our own color, so skip it in the ranking.
        current = board.color_of(self.owner)
        gains = heuristic.color_gains(board, self.owner)
        gains.pop(current, None)
        ranked = heuristic.rank_colors(gains)
        if ranked and gains[ranked[0]] > 0:
            return ranked[0]

        color = board.best_color_for(self.owner, rng=self.rng)
        if color == current:
            # Fallback landed on our own color; take the first other one.
            color = next(c for c in PLAYABLE_COLORS if c != current)
        return color
