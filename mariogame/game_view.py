"""Rendering of the running game onto an abstract drawing surface."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .model import GameModel

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)
GRAY: Color = (192, 192, 192)
LIGHT_GRAY: Color = (224, 224, 224)
GOLD: Color = (255, 215, 0)

HELVETICA = "Helvetica"
HELVETICA_BOLD = "Helvetica Bold"


class Key(str, Enum):
    """Keys the game reacts to."""

    LEFT = "Left"
    RIGHT = "Right"
    SPACE = " "


class Canvas(Protocol):
    """The drawing operations a view needs from a display backend."""

    def color(self, rgb: Color) -> None: ...

    def rectf(self, x: float, y: float, width: float, height: float) -> None: ...

    def rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def pie(
        self, x: float, y: float, width: float, height: float, start: float, end: float
    ) -> None: ...

    def arc(
        self, x: float, y: float, width: float, height: float, start: float, end: float
    ) -> None: ...

    def text(self, text: str, x: float, y: float) -> None: ...

    def font(self, face: str, size: int) -> None: ...

    def line_style(self, width: int) -> None: ...


KeyHandler = Callable[[str], None]


class GameView:
    """Draws the world of a GameModel as seen through its camera."""

    def __init__(self, width: int, height: int, title: str, model: GameModel | None) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.model = model
        self.visible = False
        self.on_key_down: KeyHandler | None = None
        self.on_key_up: KeyHandler | None = None
        self._coin_rotation = 0.0
        self._blink_counter = 0

    def set_key_handlers(self, on_key_down: KeyHandler | None, on_key_up: KeyHandler | None) -> None:
        """Register the functions that receive key presses and releases."""
        self.on_key_down = on_key_down
        self.on_key_up = on_key_up

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def render(self, canvas: Canvas) -> None:
        """Draw one frame: sky, world objects, player and the status panel."""
        model = self.model
        if model is None:
            return

        canvas.color(CYAN)
        canvas.rectf(0, 0, self.width, self.height)

        with model.locked():
            self._draw_platforms(canvas, model)
            self._draw_coins(canvas, model)
            self._draw_enemies(canvas, model)
            self._draw_player(canvas, model)

        self._draw_ui(canvas, model)

    def _draw_platforms(self, canvas: Canvas, model: GameModel) -> None:
        for platform in model.platforms:
            if not platform.active:
                continue
            x = platform.x - model.camera_x
            if x + platform.width >= 0 and x <= self.width:
                self._draw_platform(canvas, x, platform.y, platform.width, platform.height)

    @staticmethod
    def _draw_platform(canvas: Canvas, x: float, y: float, width: float, height: float) -> None:
        canvas.color((139, 69, 19))
        canvas.rectf(x, y, width, height)

        canvas.color((34, 139, 34))
        canvas.rectf(x, y - 5, width, 5)

        canvas.color((0, 100, 0))
        for i in range(0, math.ceil(width), 8):
            canvas.line(x + i, y - 5, x + i + 2, y - 2)
            canvas.line(x + i + 4, y - 4, x + i + 6, y - 1)

        canvas.color((101, 67, 33))
        canvas.line(x, y, x, y + height)
        canvas.line(x + width, y, x + width, y + height)

        canvas.color((160, 82, 45))
        for i in range(5, math.ceil(width - 5), 15):
            for j in range(5, math.ceil(height - 5), 10):
                canvas.rectf(x + i, y + j, 3, 2)

    def _draw_enemies(self, canvas: Canvas, model: GameModel) -> None:
        for enemy in model.enemies:
            if not enemy.active:
                continue
            screen_x = enemy.x - model.camera_x
            if screen_x + enemy.width >= -50 and screen_x <= self.width + 50:
                self._draw_enemy(canvas, screen_x, enemy.y, enemy.width, enemy.height)

    @staticmethod
    def _draw_enemy(canvas: Canvas, x: float, y: float, w: float, h: float) -> None:
        canvas.color((220, 20, 60))
        canvas.pie(x, y + h * 0.3, w, h * 0.7, 0, 360)

        canvas.color((255, 69, 0))
        canvas.pie(x + w * 0.1, y, w * 0.8, h * 0.6, 0, 360)

        canvas.color(WHITE)
        canvas.pie(x + w * 0.2, y + h * 0.15, w * 0.15, h * 0.15, 0, 360)
        canvas.pie(x + w * 0.65, y + h * 0.15, w * 0.15, h * 0.15, 0, 360)

        canvas.color(BLACK)
        canvas.pie(x + w * 0.23, y + h * 0.18, w * 0.08, h * 0.08, 0, 360)
        canvas.pie(x + w * 0.68, y + h * 0.18, w * 0.08, h * 0.08, 0, 360)

        canvas.color(BLACK)
        canvas.arc(x + w * 0.3, y + h * 0.35, w * 0.4, h * 0.2, 0, 180)

        canvas.color((139, 69, 19))
        canvas.rectf(x + w * 0.2, y + h * 0.85, w * 0.15, h * 0.15)
        canvas.rectf(x + w * 0.65, y + h * 0.85, w * 0.15, h * 0.15)

    def _draw_coins(self, canvas: Canvas, model: GameModel) -> None:
        self._coin_rotation += 3
        for coin in model.coins:
            if not coin.active:
                continue
            x = coin.x - model.camera_x
            if x + coin.width >= 0 and x <= self.width:
                self._draw_coin(canvas, x, coin.y, coin.width, coin.height)

    @staticmethod
    def _draw_coin(canvas: Canvas, x: float, y: float, w: float, h: float) -> None:
        canvas.color(GOLD)
        canvas.pie(x, y, w, h, 0, 360)

        canvas.color((255, 255, 0))
        canvas.pie(x + w * 0.15, y + h * 0.15, w * 0.7, h * 0.7, 0, 360)

        canvas.color((255, 140, 0))
        cx = x + w / 2
        cy = y + h / 2
        canvas.line(cx - w * 0.2, cy, cx + w * 0.2, cy)
        canvas.line(cx, cy - h * 0.2, cx, cy + h * 0.2)
        canvas.line(cx - w * 0.15, cy - h * 0.15, cx + w * 0.15, cy + h * 0.15)
        canvas.line(cx + w * 0.15, cy - h * 0.15, cx - w * 0.15, cy + h * 0.15)

        canvas.color(WHITE)
        canvas.pie(x + w * 0.2, y + h * 0.1, w * 0.3, h * 0.3, 0, 360)

    def _draw_player(self, canvas: Canvas, model: GameModel) -> None:
        player = model.player
        if player is None or not player.active:
            return

        self._blink_counter += 1
        if player.invulnerable and (self._blink_counter // 10) % 2 == 0:
            return

        x = player.x - model.camera_x
        y = player.y
        w = player.width
        h = player.height

        canvas.color((0, 100, 200))
        canvas.pie(x, y + h * 0.4, w, h * 0.6, 0, 360)

        canvas.color((255, 220, 177))
        canvas.pie(x + w * 0.1, y, w * 0.8, h * 0.5, 0, 360)

        canvas.color(RED)
        canvas.pie(x + w * 0.05, y - h * 0.1, w * 0.9, h * 0.4, 0, 360)

        canvas.color((200, 0, 0))
        canvas.pie(x - w * 0.1, y + h * 0.1, w * 0.6, h * 0.2, 0, 180)

        canvas.color(BLACK)
        canvas.pie(x + w * 0.25, y + h * 0.2, w * 0.1, h * 0.1, 0, 360)
        canvas.pie(x + w * 0.65, y + h * 0.2, w * 0.1, h * 0.1, 0, 360)

        canvas.color((255, 200, 150))
        canvas.pie(x + w * 0.45, y + h * 0.3, w * 0.1, h * 0.08, 0, 360)

        canvas.color((139, 69, 19))
        canvas.rectf(x + w * 0.3, y + h * 0.35, w * 0.4, h * 0.05)

        canvas.color((255, 220, 177))
        canvas.pie(x - w * 0.2, y + h * 0.5, w * 0.3, h * 0.2, 0, 360)
        canvas.pie(x + w * 0.9, y + h * 0.5, w * 0.3, h * 0.2, 0, 360)

        canvas.color((0, 0, 139))
        canvas.rectf(x + w * 0.2, y + h * 0.85, w * 0.25, h * 0.15)
        canvas.rectf(x + w * 0.55, y + h * 0.85, w * 0.25, h * 0.15)

        canvas.color((139, 69, 19))
        canvas.pie(x + w * 0.1, y + h * 0.95, w * 0.35, h * 0.1, 0, 360)
        canvas.pie(x + w * 0.55, y + h * 0.95, w * 0.35, h * 0.1, 0, 360)

    def _draw_ui(self, canvas: Canvas, model: GameModel) -> None:
        with model.locked():
            player = model.player
            if player is not None:
                canvas.color(BLACK)
                canvas.rectf(10, 10, 300, 120)

                canvas.color(WHITE)
                canvas.rect(10, 10, 300, 120)

                canvas.font(HELVETICA_BOLD, 18)
                canvas.text("Coins:", 20, 35)
                canvas.color(GOLD)
                canvas.pie(90, 20, 20, 20, 0, 360)
                canvas.color(WHITE)
                canvas.text(str(player.coins), 120, 35)

        if model.game_over:
            canvas.font(HELVETICA_BOLD, 32)
            canvas.color(RED)
            canvas.text("GAME OVER", self.width // 2 - 80, self.height // 2)
            canvas.font(HELVETICA, 16)