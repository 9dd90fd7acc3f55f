from mariogame.entities import Platform
from mariogame.game_view import CYAN, GameView, Key
from mariogame.model import GameModel

PLAYER_BODY = (0, 100, 200)
GRASS = (34, 139, 34)


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))

        return record

    def texts(self):
        return [args[0] for name, args in self.calls if name == "text"]

    def colors(self):
        return [args[0] for name, args in self.calls if name == "color"]


def make_view(width=1200, height=600):
    model = GameModel(seed=1)
    return GameView(width, height, "Mario", model), model


def test_render_starts_with_sky_fill():
    view, _ = make_view()
    canvas = RecordingCanvas()
    view.render(canvas)
    assert canvas.calls[0] == ("color", (CYAN,))
    assert canvas.calls[1] == ("rectf", (0, 0, 1200, 600))


def test_render_without_model_draws_nothing():
    view = GameView(100, 100, "Mario", None)
    canvas = RecordingCanvas()
    view.render(canvas)
    assert canvas.calls == []


def test_coin_count_is_shown():
    view, model = make_view()
    model.player.coins = 7
    canvas = RecordingCanvas()
    view.render(canvas)
    assert ("text", ("7", 120, 35)) in canvas.calls
    assert "Coins:" in canvas.texts()


def test_game_over_text_only_when_over():
    view, model = make_view()
    canvas = RecordingCanvas()
    view.render(canvas)
    assert "GAME OVER" not in canvas.texts()

    model.game_over = True
    canvas = RecordingCanvas()
    view.render(canvas)
    assert "GAME OVER" in canvas.texts()


def test_offscreen_platform_skipped_and_camera_applied():
    view, model = make_view(width=800)
    model.enemies = []
    model.coins = []
    model.player.active = False

    model.platforms = [Platform(5000, 300, 100, 20)]
    canvas = RecordingCanvas()
    view.render(canvas)
    assert GRASS not in canvas.colors()

    model.platforms = [Platform(500, 300, 100, 20)]
    model.camera_x = 400
    canvas = RecordingCanvas()
    view.render(canvas)
    assert GRASS in canvas.colors()
    assert ("rectf", (100.0, 300.0, 100.0, 20.0)) in canvas.calls


def test_inactive_player_not_drawn():
    view, model = make_view()
    model.player.active = False
    canvas = RecordingCanvas()
    view.render(canvas)
    assert PLAYER_BODY not in canvas.colors()


def test_invulnerable_player_blinks():
    view, model = make_view()
    model.player.set_invulnerable(True, 100.0)

    canvas = RecordingCanvas()
    view.render(canvas)
    assert PLAYER_BODY not in canvas.colors()

    for _ in range(9):
        view.render(RecordingCanvas())
    canvas = RecordingCanvas()
    view.render(canvas)
    assert PLAYER_BODY in canvas.colors()


def test_vulnerable_player_always_drawn():
    view, model = make_view()
    canvas = RecordingCanvas()
    view.render(canvas)
    assert PLAYER_BODY in canvas.colors()


def test_show_and_hide():
    view, _ = make_view()
    assert view.visible is False
    view.show()
    assert view.visible is True
    view.hide()
    assert view.visible is False


def test_key_handlers_receive_keys():
    view, _ = make_view()
    pressed, released = [], []
    view.set_key_handlers(pressed.append, released.append)
    view.on_key_down(Key.LEFT)
    view.on_key_up(Key.SPACE)
    assert pressed == [Key.LEFT]
    assert released == [Key.SPACE]