"""
Renderer - Reads gameplay state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict, Optional, Tuple

import pygame

from indieboxer.gameplay.constants import BOARD_COLUMNS, BOARD_ROWS, COL_WIDTH, ROW_HEIGHT, OFFSET_Y
from indieboxer.gameplay.game import Game


# Visual constants
BOARD_WIDTH = BOARD_COLUMNS * COL_WIDTH     # 505
BOARD_HEIGHT = 606
HUD_HEIGHT = 64
SCREEN_WIDTH = BOARD_WIDTH
SCREEN_HEIGHT = BOARD_HEIGHT + HUD_HEIGHT

# Row backgrounds
COLOR_WATER = (40, 90, 200)
COLOR_STONE = (120, 120, 120)
COLOR_GRASS = (70, 160, 70)
ROW_COLORS = [COLOR_WATER, COLOR_STONE, COLOR_STONE, COLOR_STONE, COLOR_GRASS, COLOR_GRASS]

COLOR_BG = (15, 15, 20)
COLOR_HUD = (200, 200, 200)
COLOR_PROMPT_BG = (0, 0, 0, 180)

# Sprite colors and glyphs (no image assets, cells are drawn as shapes)
SPRITES: Dict[str, Tuple[Tuple[int, int, int], str]] = {
    'star': ((255, 220, 60), '*'),
    'gem-blue': ((80, 140, 255), 'B'),
    'gem-green': ((80, 220, 120), 'B'),
    'gem-orange': ((255, 150, 50), 'B'),
    'heart': ((230, 50, 80), '<3'),
    'enemy-bug': ((200, 40, 40), 'E'),
    'rock': ((90, 80, 70), 'R'),
    'char-boy': ((250, 250, 250), '@'),
}

HUD_LABELS = [
    ('points', 'Points'),
    ('lives', 'Lives'),
    ('level', 'Level'),
    ('boxes_saved', 'Saved'),
    ('boxes_lost', 'Lost'),
    ('timer', 'Time'),
]


class Renderer:
    """
    Draws the board, sprites and HUD.

    Implements both collaborator contracts the game publishes to:
    render(sprite_id, pixel_x, pixel_y) and set_text(element_id, value).
    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, scale: float = 1.0):
        self.game = game
        self.scale = scale
        self.texts: Dict[str, str] = {}
        self.prompt: Optional[str] = None

        self.screen: Optional[pygame.Surface] = None
        self.canvas = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.font: Optional[pygame.font.Font] = None
        self.small_font: Optional[pygame.font.Font] = None

    def init_window(self) -> None:
        """Open the pygame window."""
        size = (int(SCREEN_WIDTH * self.scale), int(SCREEN_HEIGHT * self.scale))
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Indieboxer")
        self.font = pygame.font.Font(None, 40)
        self.small_font = pygame.font.Font(None, 24)

    # =========================================================================
    # COLLABORATOR CONTRACTS
    # =========================================================================

    def render(self, sprite_id: str, pixel_x: float, pixel_y: float) -> None:
        """Draw one sprite whose cell starts at (pixel_x, pixel_y + OFFSET_Y)."""
        color, glyph = SPRITES.get(sprite_id, ((255, 0, 255), '?'))
        rect = pygame.Rect(int(pixel_x) + 10, int(pixel_y) + OFFSET_Y + 10, COL_WIDTH - 20, ROW_HEIGHT - 20)
        pygame.draw.ellipse(self.canvas, color, rect)
        label = self.font.render(glyph, True, (0, 0, 0))
        self.canvas.blit(label, label.get_rect(center=rect.center))

    def set_text(self, element_id: str, value: str) -> None:
        self.texts[element_id] = value

    # =========================================================================
    # FRAME
    # =========================================================================

    def draw_frame(self) -> None:
        """Draw the whole frame and flip the display."""
        self.canvas.fill(COLOR_BG)
        self._draw_board()
        self.game.render(self)
        self._draw_hud()
        if self.prompt:
            self._draw_prompt(self.prompt)

        if self.scale == 1.0:
            self.screen.blit(self.canvas, (0, 0))
        else:
            scaled = pygame.transform.smoothscale(self.canvas, self.screen.get_size())
            self.screen.blit(scaled, (0, 0))
        pygame.display.flip()

    def _draw_board(self) -> None:
        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLUMNS):
                rect = pygame.Rect(col * COL_WIDTH, row * ROW_HEIGHT, COL_WIDTH, ROW_HEIGHT)
                pygame.draw.rect(self.canvas, ROW_COLORS[row], rect)
                pygame.draw.rect(self.canvas, COLOR_BG, rect, 1)

    def _draw_hud(self) -> None:
        top = BOARD_HEIGHT + 8
        x = 8
        for element_id, title in HUD_LABELS:
            text = f"{title}: {self.texts.get(element_id, '')}"
            surface = self.small_font.render(text, True, COLOR_HUD)
            self.canvas.blit(surface, (x, top))
            x += surface.get_width() + 16
            if x > SCREEN_WIDTH - 60:
                x = 8
                top += 24

        lane_texts = [
            f"L{n}: {self.texts[f'enemy_lane_{n}']}"
            for n in (1, 2, 3) if f'enemy_lane_{n}' in self.texts
        ]
        if lane_texts:
            surface = self.small_font.render("  ".join(lane_texts), True, COLOR_HUD)
            self.canvas.blit(surface, (8, BOARD_HEIGHT - 28))

    def _draw_prompt(self, message: str) -> None:
        overlay = pygame.Surface((SCREEN_WIDTH, 120), pygame.SRCALPHA)
        overlay.fill(COLOR_PROMPT_BG)
        self.canvas.blit(overlay, (0, BOARD_HEIGHT // 2 - 60))
        surface = self.font.render(message, True, (255, 255, 255))
        self.canvas.blit(surface, surface.get_rect(center=(SCREEN_WIDTH // 2, BOARD_HEIGHT // 2)))
