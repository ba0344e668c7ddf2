"""Entry point for Territory Colors. Load config, wire the player and view, start Territorygame."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from Territorygame import Territorygame
    from Player import HumanPlayer, GuiHumanPlayer
    from Board import Owner, Status
    from ai.greedy_player import GreedyPlayer
    from gui.pygame_view import PygameView
except ImportError:
    from Territory_AI.utils.cli import parse_args
    from Territory_AI.utils.logger import configure_logging, log_event
    from Territory_AI.Territorygame import Territorygame
    from Territory_AI.Player import HumanPlayer, GuiHumanPlayer
    from Territory_AI.Board import Owner, Status
    from Territory_AI.ai.greedy_player import GreedyPlayer
    from Territory_AI.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent

OUTCOMES = {
    Status.WIN: "You won !",
    Status.DRAW: "It's a draw !",
    Status.LOST: "You lost !",
    Status.RUNNING: "Game abandoned",
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Territory_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def render_scores(game):
    log_event(f"{game.territory[Owner.PLAYER]} | {game.territory[Owner.AI]}")


def render_text(game):
    print(game.board.pretty())
    render_scores(game)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure_logging(args.log_level or settings.get("log_level", "INFO"))

    width = args.width or settings.get("board_width", 32)
    height = args.height or settings.get("board_height", 32)
    move_timeout = args.timeout or settings.get("move_timeout_seconds")
    banner_duration_ms = settings.get("banner_duration_ms", 3000)
    window_size = settings.get("window_size", 800)
    seed = args.seed if args.seed is not None else settings.get("seed")
    rng = random.Random(seed)

    game = Territorygame(
        width=width,
        height=height,
        rng=rng,
        logger=log_event,
        banner_duration_ms=banner_duration_ms,
        move_timeout=move_timeout,
    )
    if args.load:
        game.load(args.load)

    view = None
    if args.gui:
        view = PygameView(board_width=game.board.width, board_height=game.board.height, window_size=window_size)
        game.renderer = view.render
        game.closer = view.close
    else:
        # Headless games have nobody to watch the end-of-game banner.
        for banner in game.banners.values():
            banner.duration_ms = 0
        game.renderer = render_text if args.mode == "human-vs-ai" else render_scores

    if args.mode == "ai-vs-ai":
        player = GreedyPlayer(owner=Owner.PLAYER, rng=rng)
    elif args.mode == "human-vs-ai":
        player = GuiHumanPlayer(view=view) if view else HumanPlayer()
    else:
        raise ValueError(f"Unsupported mode: {args.mode}")

    result = game.play(player)
    if args.save:
        game.save(args.save)
        log_event(f"Saved board to {args.save}")
    print(OUTCOMES.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
