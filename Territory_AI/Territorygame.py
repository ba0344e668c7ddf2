"""Game orchestration: turn sequencing, pause/active/over states, and end-of-game banners."""

import logging
import time
from dataclasses import dataclass
from enum import Enum

try:
    from Board import PLAYABLE_COLORS, Board, Color, Owner, Status, color_name
    from Player import WindowClosed
    from engine import referee
    from utils import timer
    from utils.logger import log_event
except ImportError:
    from Territory_AI.Board import PLAYABLE_COLORS, Board, Color, Owner, Status, color_name
    from Territory_AI.Player import WindowClosed
    from Territory_AI.engine import referee
    from Territory_AI.utils import timer
    from Territory_AI.utils.logger import log_event

LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_DIMS = 32
DEFAULT_BANNER_DURATION_MS = 3000
FRAME_DELAY_SECONDS = 0.01
OPAQUE = 255


class GameState(Enum):
    PAUSED = "paused"
    ACTIVE = "active"
    OVER = "over"


@dataclass(frozen=True)
class TurnResult:
    player_color: Color
    player_gain: int
    ai_color: Color
    ai_gain: int
    status: Status


class TimedBanner:
    """A message shown once when its condition turns on, fading out over `duration_ms`."""

    def __init__(self, label, duration_ms=DEFAULT_BANNER_DURATION_MS, clock=time.monotonic):
        self.label = label
        self.duration_ms = duration_ms
        self.clock = clock
        self.visible = False
        self.was_active = False
        self.shown_at = None
        self.alpha = OPAQUE

    def update(self, active):
        if active:
            if not self.was_active:
                # First tick where the banner should show.
                self.shown_at = self.clock()
                self.was_active = True
                self.visible = True
                self.alpha = OPAQUE
            else:
                elapsed = timer.elapsed_ms(self.shown_at, self.clock)
                if elapsed > self.duration_ms:
                    self.visible = False
                else:
                    fraction = elapsed / self.duration_ms if self.duration_ms else 1.0
                    self.alpha = int(min(max((1.0 - fraction) * OPAQUE, 0.0), float(OPAQUE)))
        elif self.was_active:
            self.visible = False
            self.was_active = False
        return self.visible


class Territorygame:
    def __init__(
        self,
        width=DEFAULT_BOARD_DIMS,
        height=DEFAULT_BOARD_DIMS,
        rng=None,
        logger=log_event,
        renderer=None,
        closer=None,
        banner_duration_ms=DEFAULT_BANNER_DURATION_MS,
        clock=time.monotonic,
        move_timeout=None,
        max_invalid_picks=3,
    ):
        self.width = width
        self.height = height
        self.rng = rng
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.move_timeout = move_timeout
        self.max_invalid_picks = max_invalid_picks

        self.board = Board(width, height, rng=rng)
        self.state = GameState.PAUSED
        self.disabled = True
        self.player_color = self.board.color_of(Owner.PLAYER)
        self.ai_color = self.board.color_of(Owner.AI)
        self.last_turn = None

        self.banners = {
            Status.WIN: TimedBanner("You won !", banner_duration_ms, clock),
            Status.DRAW: TimedBanner("It's a draw !", banner_duration_ms, clock),
            Status.LOST: TimedBanner("You lost !", banner_duration_ms, clock),
        }
        self.territory = {}
        self.update_ui()

    @property
    def status(self):
        return self.board.status

    def set_player_color(self, color):
        """Play one turn: the player's pick, then the AI's greedy answer."""
        if self.state is not GameState.ACTIVE:
            self.logger(f"Ignoring action while game is {self.state.value}")
            return None
        if not referee.check_pick(color, self.board, Owner.PLAYER):
            return None

        player_gain = self.board.change_color_of(Owner.PLAYER, color)
        ai_color = self.board.best_color_for(Owner.AI)
        ai_gain = self.board.change_color_of(Owner.AI, ai_color)

        self.player_color = color
        self.ai_color = ai_color
        self.logger(f"player now has color {color_name(color)} (+{player_gain})")
        self.logger(f"ai choses {color_name(ai_color)} (+{ai_gain})")

        self.last_turn = TurnResult(color, player_gain, ai_color, ai_gain, self.board.status)
        return self.last_turn

    def enabled_colors(self):
        """Which color buttons accept a click: not the player's color, nor the AI's while both touch."""
        enabled = {c: c != self.player_color for c in PLAYABLE_COLORS}
        if self.board.is_player_and_ai_in_contact():
            enabled[self.board.color_of(Owner.AI)] = False
        return enabled

    def territory_text(self, owner):
        label = "player" if owner == Owner.PLAYER else "ai"
        return f"{label}: {self.board.occupied_by(owner) * 100.0:.1f}%"

    def update_ui(self):
        self.territory = {owner: self.territory_text(owner) for owner in (Owner.PLAYER, Owner.AI)}
        for status, banner in self.banners.items():
            banner.update(self.board.status is status)

    def visible_banner(self):
        for banner in self.banners.values():
            if banner.visible:
                return banner
        return None

    def step(self):
        """Advance one frame. Returns False once the game is over."""
        if self.state is GameState.PAUSED:
            return True

        self.update_ui()
        if self.state is GameState.OVER:
            return False

        done = self.board.status is not Status.RUNNING and self.visible_banner() is None
        if done:
            self.state = GameState.OVER
            self.enable(False)
            self.logger(f"Game over: {self.board.status.value}")
        return not done

    def resume(self):
        if self.board.status is Status.RUNNING:
            self.state = GameState.ACTIVE
        else:
            self.state = GameState.OVER
        self.enable(self.state is GameState.ACTIVE)

    def pause(self):
        self.state = GameState.PAUSED
        self.enable(False)

    def toggle_pause(self):
        if self.state is GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def enable(self, enable):
        self.disabled = not enable
        LOGGER.debug("Enabled game UI" if enable else "Disabled game UI")

    def save(self, path):
        self.board.save(path)

    def load(self, path):
        self.board.load(path)
        self._after_board_change()

    def reset(self):
        self.logger("Reset board")
        self.board = Board(self.width, self.height, rng=self.rng)
        self.pause()
        self._after_board_change()

    def _after_board_change(self):
        self.player_color = self.board.color_of(Owner.PLAYER)
        self.ai_color = self.board.color_of(Owner.AI)
        self.last_turn = None
        for banner in self.banners.values():
            banner.update(False)
        self.update_ui()
        if self.state is not GameState.PAUSED:
            self.resume()

    def play(self, player):
        """Run a game to the end with `player` picking colors. Returns the final Status."""
        self.resume()
        invalid_picks = 0
        try:
            while self.state is not GameState.OVER:
                if self.renderer:
                    self.renderer(self)

                if self.board.status is Status.RUNNING:
                    deadline = timer.deadline_after(self.move_timeout)
                    try:
                        color = player.next_color(self.board, deadline=deadline)
                        if self.set_player_color(color) is None:
                            raise ValueError(f"{color_name(color)} was not accepted")
                        # Only consecutive failures count towards the limit.
                        invalid_picks = 0
                    except WindowClosed:
                        self.logger("Window closed, ending game")
                        return self.board.status
                    except (TimeoutError, ValueError) as exc:
                        invalid_picks += 1
                        self.logger(f"Invalid pick ({invalid_picks}/{self.max_invalid_picks}): {exc}")
                        if invalid_picks >= self.max_invalid_picks:
                            self.logger("Too many invalid picks, abandoning game")
                            break
                        continue
                else:
                    time.sleep(FRAME_DELAY_SECONDS)

                self.step()

            if self.renderer:
                self.renderer(self)
            return self.board.status
        finally:
            if self.closer:
                self.closer()
