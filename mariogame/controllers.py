"""Controllers tying the model and views together, and the command entry point."""

from __future__ import annotations

import argparse
import sys
import time

from .about_window import AboutWindow
from .game_view import GameView, Key
from .menu_view import MenuView
from .model import GameModel

FRAME_TIME = 1.0 / 60.0
GAME_WIDTH = 1200
GAME_HEIGHT = 600


class AboutController:
    """Owns the About window."""

    def __init__(self) -> None:
        self.window = AboutWindow(400, 400, "About Mario Game")
        self.menu_controller: MenuController | None = None

    def run(self) -> None:
        self.window.show()

    def set_menu_controller(self, menu: MenuController | None) -> None:
        self.menu_controller = menu


class GameController:
    """Runs a game session: starts the model, feeds it input, ends it on game over."""

    def __init__(self, width: int, height: int, seed: int | None = None) -> None:
        self.model = GameModel(seed)
        self.view = GameView(width, height, "Mario", self.model)
        self.view.set_key_handlers(self.handle_key_down, self.handle_key_up)
        self.menu_controller: MenuController | None = None
        self.active = False
        self.key_left = False
        self.key_right = False
        self.key_space = False

    def _clean_up(self) -> None:
        if self.active:
            self.model.stop()
        self.active = False
        self.view.hide()

    def run(self) -> None:
        """Start a fresh game and show its window."""
        self._clean_up()

        self.active = True
        self.view.show()

        self.model.reset()
        self.model.start()

        self.key_left = False
        self.key_right = False
        self.key_space = False

    def tick(self) -> bool:
        """Handle one frame; return True while the game wants further frames."""
        if not self.active:
            return False
        if self.model.game_over:
            self.return_to_menu()
            return False
        self.process_input()
        return True

    def return_to_menu(self) -> None:
        """End the session and bring the menu back."""
        self._clean_up()
        if self.menu_controller is not None:
            self.menu_controller.run()

    def set_menu_controller(self, menu: MenuController | None) -> None:
        self.menu_controller = menu

    def handle_key_down(self, key: str) -> None:
        if key == Key.LEFT:
            self.key_left = True
        elif key == Key.RIGHT:
            self.key_right = True
        elif key == Key.SPACE:
            self.key_space = True

    def handle_key_up(self, key: str) -> None:
        if key == Key.LEFT:
            self.key_left = False
        elif key == Key.RIGHT:
            self.key_right = False
        elif key == Key.SPACE:
            self.key_space = False

    def process_input(self) -> None:
        """Apply the held keys to the player."""
        player = self.model.player
        if player is None:
            return

        player.stop()
        if self.key_left:
            player.move_left()
        if self.key_right:
            player.move_right()
        if self.key_space:
            player.jump()


class MenuController:
    """Owns the main menu and starts the game or the About window from it."""

    def __init__(self, seed: int | None = None) -> None:
        self.view = MenuView(400, 300, "Mario Game")
        self.game_controller = GameController(GAME_WIDTH, GAME_HEIGHT, seed)
        self.about_controller = AboutController()
        self.game_controller.set_menu_controller(self)

    def _new_game(self) -> None:
        self.view.hide()
        self.game_controller.run()

    def _quit(self) -> None:
        self.game_controller._clean_up()
        self.view.hide()
        sys.exit(0)

    def setup_callbacks(self) -> None:
        self.view.set_new_game_callback(self._new_game)
        self.view.set_about_callback(self.about_controller.run)
        self.view.set_exit_callback(self._quit)

    def run(self) -> None:
        self.setup_callbacks()
        self.view.show()


def _play(game: GameController) -> None:
    while game.tick():
        time.sleep(FRAME_TIME)
    player = game.model.player
    coins = player.coins if player is not None else 0
    print(f"GAME OVER - coins: {coins}")


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input: 'new', 'about' or 'exit' per line."""
    parser = argparse.ArgumentParser(prog="mariogame", description="A side-scrolling platform game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for level generation")
    args = parser.parse_args(argv)

    menu = MenuController(seed=args.seed)
    menu.run()
    print("Commands: new, about, exit")
    try:
        for line in sys.stdin:
            command = line.strip().lower()
            if command in ("n", "new"):
                menu.view.new_game()
                _play(menu.game_controller)
            elif command in ("a", "about"):
                menu.view.about()
                window = menu.about_controller.window
                print(window.title)
                for text in window.control_lines:
                    print(text)
                window.ok()
            elif command in ("q", "quit", "e", "exit"):
                menu.view.exit()
            elif command:
                print(f"Unknown command: {command}")
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    finally:
        menu.game_controller.model.stop()
    return 0