import io

import pytest

from mariogame.controllers import AboutController, GameController, MenuController, main
from mariogame.game_view import Key
from mariogame.player import Player


@pytest.fixture
def game():
    controller = GameController(1200, 600, seed=1)
    yield controller
    controller.model.stop()


@pytest.fixture
def menu():
    controller = MenuController(seed=2)
    yield controller
    controller.game_controller.model.stop()


def test_about_controller_shows_window():
    about = AboutController()
    assert about.window.visible is False
    about.run()
    assert about.window.visible is True
    assert about.window.title == "About Mario Game"


def test_about_controller_stores_menu(menu):
    about = AboutController()
    about.set_menu_controller(menu)
    assert about.menu_controller is menu


def test_game_controller_starts_inactive(game):
    assert game.active is False
    assert game.view.visible is False
    assert game.tick() is False


def test_view_key_handlers_reach_controller(game):
    game.view.on_key_down(Key.LEFT)
    game.view.on_key_down(Key.SPACE)
    assert game.key_left is True
    assert game.key_space is True
    game.view.on_key_up(Key.LEFT)
    assert game.key_left is False
    assert game.key_space is True


def test_unknown_key_is_ignored(game):
    game.handle_key_down("x")
    assert (game.key_left, game.key_right, game.key_space) == (False, False, False)


def test_process_input_left(game):
    game.handle_key_down(Key.LEFT)
    game.process_input()
    assert game.model.player.velocity_x == -Player.RUN_SPEED


def test_process_input_right_and_jump(game):
    game.handle_key_down(Key.RIGHT)
    game.handle_key_down(Key.SPACE)
    game.process_input()
    assert game.model.player.velocity_x == Player.RUN_SPEED
    assert game.model.player.velocity_y == Player.JUMP_VELOCITY
    assert game.model.player.jumping is True


def test_process_input_without_keys_slows_player(game):
    game.model.player.velocity_x = 10.0
    game.process_input()
    assert game.model.player.velocity_x == pytest.approx(8.0)


def test_run_activates_game_and_clears_keys(game):
    game.handle_key_down(Key.RIGHT)
    game.run()
    try:
        assert game.active is True
        assert game.view.visible is True
        assert game.key_right is False
        assert game.tick() is True
    finally:
        game.return_to_menu()
    assert game.active is False
    assert game.view.visible is False
    assert game.model.running is False


def test_tick_on_game_over_returns_to_menu(menu):
    menu.run()
    menu.view.new_game()
    game = menu.game_controller
    assert menu.view.visible is False
    assert game.active is True
    game.model.stop()
    assert game.tick() is False
    assert game.active is False
    assert game.view.visible is False
    assert menu.view.visible is True


def test_menu_wires_game_controller(menu):
    assert menu.game_controller.menu_controller is menu


def test_menu_about_shows_about_window(menu):
    menu.run()
    assert menu.view.about() is True
    assert menu.about_controller.window.visible is True


def test_menu_exit_raises_system_exit(menu):
    menu.run()
    with pytest.raises(SystemExit) as info:
        menu.view.exit()
    assert info.value.code == 0


def test_menu_buttons_do_nothing_before_run(menu):
    assert menu.view.new_game() is False
    assert menu.game_controller.active is False


def test_main_about_then_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("about\nexit\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "About Mario Game" in out
    assert "Space - Jump" in out


def test_main_reports_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("dance\n"))
    assert main([]) == 0
    assert "Unknown command: dance" in capsys.readouterr().out