"""CLI options for selecting play mode, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Territory Colors (conquer the board against a greedy AI)")
    parser.add_argument("--width", type=int, help="Board width in cells (default from settings)")
    parser.add_argument("--height", type=int, help="Board height in cells (default from settings)")
    parser.add_argument("--timeout", type=float, help="Seconds per color pick (default from settings)")
    parser.add_argument("--seed", type=int, help="Random seed for board colors and AI fallback")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-ai"],
        default="human-vs-ai",
        help="Who picks the player's colors",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--load", help="Load a saved board before playing")
    parser.add_argument("--save", help="Save the final board to this file")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)
