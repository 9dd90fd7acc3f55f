"""The main menu: three buttons that trigger registered actions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Action = Callable[[], None]

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 40


@dataclass(frozen=True)
class Button:
    """A labelled rectangle in window coordinates."""

    label: str
    x: int
    y: int
    width: int
    height: int


class MenuView:
    """A window with New Game, About and Exit buttons."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.visible = False
        left = width // 2 - BUTTON_WIDTH // 2
        middle = height // 2
        self.buttons = (
            Button("New Game", left, middle - 60, BUTTON_WIDTH, BUTTON_HEIGHT),
            Button("About", left, middle, BUTTON_WIDTH, BUTTON_HEIGHT),
            Button("Exit", left, middle + 60, BUTTON_WIDTH, BUTTON_HEIGHT),
        )
        self._new_game_callback: Action | None = None
        self._about_callback: Action | None = None
        self._exit_callback: Action | None = None

    def set_new_game_callback(self, callback: Action | None) -> None:
        self._new_game_callback = callback

    def set_about_callback(self, callback: Action | None) -> None:
        self._about_callback = callback

    def set_exit_callback(self, callback: Action | None) -> None:
        self._exit_callback = callback

    @staticmethod
    def _fire(callback: Action | None) -> bool:
        if callback is None:
            return False
        callback()
        return True

    def new_game(self) -> bool:
        """Press New Game; return whether an action was registered."""
        return self._fire(self._new_game_callback)

    def about(self) -> bool:
        """Press About; return whether an action was registered."""
        return self._fire(self._about_callback)

    def exit(self) -> bool:
        """Press Exit; return whether an action was registered."""
        return self._fire(self._exit_callback)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False