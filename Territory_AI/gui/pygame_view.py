"""Pygame-based board renderer and input helper."""

import time

try:
    from Board import PLAYABLE_COLORS, Color, Owner, color_name
    from Player import WindowClosed
except ImportError:
    from Territory_AI.Board import PLAYABLE_COLORS, Color, Owner, color_name
    from Territory_AI.Player import WindowClosed


DISPLAY_COLORS = {
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.YELLOW: (255, 255, 0),
    Color.CYAN: (0, 255, 255),
    Color.MAGENTA: (255, 0, 255),
    Color.BLACK: (0, 0, 0),
    Color.WHITE: (255, 255, 255),
}
UNKNOWN_COLOR = (192, 192, 192)


def display_color(color):
    """RGB triple used to paint a cell of `color`."""
    return DISPLAY_COLORS.get(color, UNKNOWN_COLOR)


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_PANEL_PLAYER = (0, 255, 0)
    COLOR_PANEL_AI = (0, 128, 0)
    COLOR_TEXT = (0, 0, 0)
    COLOR_OWNED_OUTLINE = (60, 60, 60)
    BANNER_COLORS = {
        "win": ((0, 64, 0), (0, 255, 0)),
        "draw": ((64, 64, 0), (255, 255, 0)),
        "lost": ((64, 0, 0), (255, 0, 0)),
    }

    MENU_HEIGHT = 50
    BANNER_SIZE = (300, 150)

    def __init__(self, board_width, board_height, window_size=800, caption="square-color"):
        import pygame

        self.board_width = board_width
        self.board_height = board_height
        self.window_size = window_size
        self._pygame = pygame
        self._game = None

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption(caption)

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 24)

        # The grid sits between the territory panel and the color strip.
        self.grid_height_px = window_size - 2 * self.MENU_HEIGHT
        self.tile_size = min(window_size / board_width, self.grid_height_px / board_height)
        self.grid_origin = (
            (window_size - self.tile_size * board_width) / 2,
            self.MENU_HEIGHT + (self.grid_height_px - self.tile_size * board_height) / 2,
        )
        self.button_width = window_size / len(PLAYABLE_COLORS)

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_cells(self, board):
        pygame = self._pygame
        ox, oy = self.grid_origin
        size = int(self.tile_size) + 1
        for y in range(board.height):
            for x in range(board.width):
                cell = board.at(x, y)
                rect = pygame.Rect(int(ox + x * self.tile_size), int(oy + y * self.tile_size), size, size)
                pygame.draw.rect(self.screen, display_color(cell.color), rect)
                if cell.owner != Owner.NOBODY:
                    pygame.draw.rect(self.screen, self.COLOR_OWNED_OUTLINE, rect, 1)

    def _draw_territory_panel(self, game):
        pygame = self._pygame
        half = self.window_size / 2
        for i, (owner, bg) in enumerate(((Owner.PLAYER, self.COLOR_PANEL_PLAYER), (Owner.AI, self.COLOR_PANEL_AI))):
            rect = pygame.Rect(int(i * half), 0, int(half), self.MENU_HEIGHT)
            pygame.draw.rect(self.screen, bg, rect)
            self._draw_text(game.territory[owner], self.font_small, self.COLOR_TEXT, rect.center)

    def _draw_color_buttons(self, game):
        pygame = self._pygame
        enabled = game.enabled_colors()
        top = self.window_size - self.MENU_HEIGHT
        for i, color in enumerate(PLAYABLE_COLORS):
            rect = pygame.Rect(int(i * self.button_width), top, int(self.button_width) + 1, self.MENU_HEIGHT)
            rgb = display_color(color)
            if not enabled[color]:
                rgb = tuple(c // 3 for c in rgb)
            pygame.draw.rect(self.screen, rgb, rect)
            text_color = (255, 255, 255) if color == Color.BLACK else self.COLOR_TEXT
            self._draw_text(color_name(color), self.font_small, text_color, rect.center)

    def _draw_banner(self, game):
        banner = game.visible_banner()
        if banner is None:
            return
        pygame = self._pygame
        status = next(s for s, b in game.banners.items() if b is banner)
        bg, fg = self.BANNER_COLORS[status.value]
        w, h = self.BANNER_SIZE
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        surf.fill((*bg, banner.alpha))
        self.screen.blit(surf, ((self.window_size - w) / 2, (self.window_size - h) / 2))
        self._draw_text(banner.label, self.font_large, fg, (self.window_size / 2, self.window_size / 2))

    def render(self, game):
        self._game = game
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_cells(game.board)
        self._draw_territory_panel(game)
        self._draw_color_buttons(game)
        self._draw_banner(game)
        self._pygame.display.flip()

    def cell_at_pixel(self, pos):
        """Map a window position to (x, y) grid coordinates, or None outside the grid."""
        mx, my = pos
        ox, oy = self.grid_origin
        gx = int((mx - ox) // self.tile_size)
        gy = int((my - oy) // self.tile_size)
        if mx < ox or my < oy:
            return None
        if 0 <= gx < self.board_width and 0 <= gy < self.board_height:
            return gx, gy
        return None

    def color_at_pixel(self, pos):
        """Map a window position in the button strip to a Color, or None."""
        mx, my = pos
        if not (self.window_size - self.MENU_HEIGHT <= my < self.window_size):
            return None
        index = int(mx // self.button_width)
        if 0 <= index < len(PLAYABLE_COLORS):
            return PLAYABLE_COLORS[index]
        return None

    def pick_from_click(self, board, pos):
        """A button click picks its color; a grid click picks the clicked cell's color."""
        color = self.color_at_pixel(pos)
        if color is not None:
            return color
        coords = self.cell_at_pixel(pos)
        if coords:
            return board.at(*coords).color
        return None

    def wait_for_color(self, board, deadline=None):
        pygame = self._pygame
        while True:
            if deadline is not None and time.time() > deadline:
                raise TimeoutError("Pick exceeded allotted time")

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise WindowClosed("Window closed")
                if event.type == pygame.KEYDOWN and event.key == pygame.K_p and self._game is not None:
                    self._game.toggle_pause()
                if event.type == pygame.MOUSEBUTTONDOWN:
                    color = self.pick_from_click(board, event.pos)
                    if color is None:
                        continue
                    if self._game is not None and (self._game.disabled or not self._game.enabled_colors()[color]):
                        continue
                    return color

            if self._game is not None:
                self._game.step()
                self.render(self._game)
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
