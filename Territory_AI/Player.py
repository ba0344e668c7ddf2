"""Abstract player interface for human or scripted color pickers."""

try:
    from Board import Color, Owner, PLAYABLE_COLORS
except ImportError:
    from Territory_AI.Board import Color, Owner, PLAYABLE_COLORS


class WindowClosed(Exception):
    """Raised by an interactive player when the user closes the game window."""


def parse_color(raw):
    """Accept a color name ("red") or its index ("0")."""
    raw = raw.strip().lower()
    if raw.isdigit():
        index = int(raw)
        if 0 <= index < len(PLAYABLE_COLORS):
            return PLAYABLE_COLORS[index]
        raise ValueError(f"Color index out of range: {index}")
    try:
        return Color[raw.upper()]
    except KeyError as exc:
        raise ValueError(f"Unknown color: {raw!r}") from exc


class Player:
    def __init__(self, owner=Owner.PLAYER):
        self.owner = owner

    def next_color(self, board, deadline=None):
        """Return the Color to adopt for this turn within the time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, owner=Owner.PLAYER):
        super().__init__(owner)

    def next_color(self, board, deadline=None):
        """Text-input player with deadline guard (raises TimeoutError on timeout)."""
        import os
        import sys
        import time

        names = ", ".join(f"{i}={c.name.lower()}" for i, c in enumerate(PLAYABLE_COLORS))
        prompt = f"Pick a color ({names}): "
        if deadline is None:
            raw = input(prompt).strip()
        else:
            remaining = deadline - time.time()
            if remaining <= 0:
                raise TimeoutError("Pick exceeded allotted time")

            sys.stdout.write(prompt)
            sys.stdout.flush()
            if os.name == "nt":
                # Windows: select() on stdin is not supported. Poll with msvcrt.
                import msvcrt

                buffer = ""
                while time.time() < deadline:
                    if msvcrt.kbhit():
                        ch = msvcrt.getwche()
                        if ch in ("\r", "\n"):
                            sys.stdout.write("\n")
                            break
                        buffer += ch
                    time.sleep(0.01)
                else:
                    raise TimeoutError("Pick exceeded allotted time")
                raw = buffer.strip()
            else:
                import select

                rlist, _, _ = select.select([sys.stdin], [], [], remaining)
                if not rlist:
                    raise TimeoutError("Pick exceeded allotted time")
                raw = sys.stdin.readline().strip()

        return parse_color(raw)


class GuiHumanPlayer(Player):
    def __init__(self, view, owner=Owner.PLAYER):
        super().__init__(owner)
        self.view = view

    def next_color(self, board, deadline=None):
        return self.view.wait_for_color(board, deadline)
