"""The playable window: key bindings, drawing and the main loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Hashable, Sequence
from enum import Enum

import pygame

from tetrirs.config import (
    CELL_BORDER_THICKNESS,
    CELL_SIZE,
    COLUMN_AMOUNT,
    ROW_AMOUNT,
    Vec3,
)
from tetrirs.game import Game, Movement
from tetrirs.grid import CellState
from tetrirs.shapes import Variant

TITLE = "Tetri-rs"
WINDOW_SIZE = 900
FRAME_RATE = 60
SCORE_FONT_SIZE = 67
GAME_OVER_TEXT = "Game Over!\nPress R to restart"

BACKGROUND = (43, 43, 43)
EMPTY_CELL = (255, 255, 255)
SHADOW = (107, 114, 128)
OVERLAY = (0, 0, 0, 128)
TEXT = (255, 255, 255)

COLORS: dict[Variant, tuple[int, int, int]] = {
    Variant.I: (6, 182, 212),
    Variant.O: (234, 179, 8),
    Variant.T: (168, 85, 247),
    Variant.S: (34, 197, 94),
    Variant.Z: (239, 68, 68),
    Variant.J: (59, 130, 246),
    Variant.L: (249, 115, 22),
}

# The grid is centred on the screen, as the world origin sits in the middle.
_GRID_X_OFFSET = -COLUMN_AMOUNT * CELL_SIZE / 2.0 + CELL_SIZE / 2.0
_GRID_Y_OFFSET = ROW_AMOUNT * CELL_SIZE / 2.0
_SCORE_Y = ROW_AMOUNT * CELL_SIZE / 1.5
_SQUARE_SIZE = CELL_SIZE - CELL_BORDER_THICKNESS


class Action(Enum):
    ROTATE = "rotate"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    DROP = "drop"
    RESTART = "restart"


_KEY_ACTIONS: dict[int, Action] = {
    pygame.K_w: Action.ROTATE,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_SPACE: Action.DROP,
    pygame.K_r: Action.RESTART,
}

_MOVEMENTS: dict[Action, Movement] = {
    Action.LEFT: Movement.LEFT,
    Action.RIGHT: Movement.RIGHT,
    Action.DOWN: Movement.DOWN,
    Action.DROP: Movement.SPACE,
}


def action_for_key(key: int) -> Action | None:
    """Return the action bound to a pygame key code, or None."""
    return _KEY_ACTIONS.get(key)


def apply_action(game: Game, action: Action) -> bool:
    """Carry out an action; return True if the game's state accepted it."""
    if game.game_over:
        if action is Action.RESTART:
            game.restart()
            return True
        return False
    if action is Action.ROTATE:
        game.rotate()
        return True
    movement = _MOVEMENTS.get(action)
    if movement is None:
        return False
    game.move(movement)
    return True


def _to_screen(world_x: float, world_y: float) -> tuple[float, float]:
    centre = WINDOW_SIZE / 2.0
    return centre + world_x, centre - world_y


def cell_rect(x: float, y: float) -> pygame.Rect:
    """Screen rectangle of the square drawn for grid column x, row y."""
    cx, cy = _to_screen(_GRID_X_OFFSET + x * CELL_SIZE, _GRID_Y_OFFSET - y * CELL_SIZE)
    half = _SQUARE_SIZE / 2.0
    return pygame.Rect(
        round(cx - half), round(cy - half), round(_SQUARE_SIZE), round(_SQUARE_SIZE)
    )


def _cell_color(color: Hashable) -> tuple[int, int, int]:
    if isinstance(color, Variant):
        return COLORS[color]
    return EMPTY_CELL


def _piece_cells(translation: Vec3, offsets: Sequence[Vec3]) -> list[tuple[float, float]]:
    return [
        ((translation.x + o.x) / CELL_SIZE, -(translation.y + o.y) / CELL_SIZE)
        for o in offsets
    ]


def _blit_centred(surface: pygame.Surface, image: pygame.Surface, cx: float, cy: float) -> None:
    surface.blit(image, image.get_rect(center=(round(cx), round(cy))))


def draw(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    """Render the field, the shadow, the active piece, the score and any overlay."""
    surface.fill(BACKGROUND)
    matrix = game.matrix
    for row in range(matrix.height):
        for column in range(matrix.width):
            cell = matrix.cells[matrix.index(column, row)]
            colour = (
                _cell_color(cell.color) if cell.state is CellState.FULL else EMPTY_CELL
            )
            pygame.draw.rect(surface, colour, cell_rect(column, row))

    piece = game.tetrimino
    offsets = piece.child_positions()
    for column, row in _piece_cells(game.shadow_position(), offsets):
        pygame.draw.rect(surface, SHADOW, cell_rect(column, row))
    for column, row in _piece_cells(piece.translation, offsets):
        pygame.draw.rect(surface, COLORS[piece.variant], cell_rect(column, row))

    score = font.render(game.scoreboard.text, True, TEXT)
    _blit_centred(surface, score, *_to_screen(0.0, _SCORE_Y))

    if game.game_over:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        surface.blit(overlay, (0, 0))
        lines = [font.render(line, True, TEXT) for line in GAME_OVER_TEXT.splitlines()]
        total = sum(line.get_height() for line in lines)
        top = surface.get_height() / 2.0 - total / 2.0
        for line in lines:
            _blit_centred(surface, line, surface.get_width() / 2.0, top + line.get_height() / 2.0)
            top += line.get_height()


def run(game: Game) -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, SCORE_FONT_SIZE)
        clock = pygame.time.Clock()
        while True:
            pressed: int | None = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and pressed is None:
                    pressed = event.key
            if pressed is not None:
                action = action_for_key(pressed)
                if action is not None:
                    apply_action(game, action)
            game.tick(clock.tick(FRAME_RATE) / 1000.0)
            draw(screen, game, font)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and start a game."""
    parser = argparse.ArgumentParser(prog="tetrirs", description="A falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece sequence")
    args = parser.parse_args(argv)
    run(Game(random.Random(args.seed)))
    return 0