"""The About window listing the game controls."""

from __future__ import annotations

from collections.abc import Callable

from .game_view import BLACK, BLUE, GRAY, HELVETICA, HELVETICA_BOLD, LIGHT_GRAY, Canvas
from .menu_view import Button

CONTROL_LINES = (
    "Game Controls:",
    "",
    "Left Arrow - Move Left",
    "Right Arrow - Move Right",
    "Space - Jump",
    "",
)


class AboutWindow:
    """Shows the control help and closes when OK is pressed."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        screen_size: tuple[int, int] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.visible = False
        self.control_lines = list(CONTROL_LINES)
        self.ok_button = Button("OK", width // 2 - 50, height - 50, 100, 30)
        if screen_size is None:
            self.position = (0, 0)
        else:
            screen_width, screen_height = screen_size
            self.position = ((screen_width - width) // 2, (screen_height - height) // 2)
        self._close_callback: Callable[[], None] | None = None

    def set_close_callback(self, callback: Callable[[], None] | None) -> None:
        self._close_callback = callback

    def ok(self) -> None:
        """Press OK: run the close callback, then hide the window."""
        if self._close_callback is not None:
            self._close_callback()
        self.hide()

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def render(self, canvas: Canvas) -> None:
        """Draw the window background, OK button, heading and control lines."""
        canvas.color(GRAY)
        canvas.rectf(0, 0, self.width, self.height)

        button = self.ok_button
        canvas.color(LIGHT_GRAY)
        canvas.rectf(button.x, button.y, button.width, button.height)
        canvas.color(BLACK)
        canvas.font(HELVETICA, 14)
        canvas.text(button.label, button.x + button.width // 2 - 10, button.y + 20)

        canvas.color(BLUE)
        canvas.font(HELVETICA_BOLD, 24)
        canvas.text("About Mario Game", 20, 40)

        canvas.line_style(2)
        canvas.line(20, 50, self.width - 20, 50)
        canvas.line_style(0)

        canvas.color(BLACK)
        canvas.font(HELVETICA, 16)
        for index, line in enumerate(self.control_lines):
            canvas.text(line, 30, 80 + index * 20)

        canvas.color(GRAY)
        canvas.rect(0, 0, self.width, self.height)