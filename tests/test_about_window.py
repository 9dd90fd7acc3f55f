from mariogame.about_window import AboutWindow


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))

        return record


def test_ok_runs_callback_before_hiding():
    window = AboutWindow(400, 400, "About Mario Game")
    window.show()
    seen = []
    window.set_close_callback(lambda: seen.append(window.visible))
    window.ok()
    assert seen == [True]
    assert window.visible is False


def test_ok_without_callback_hides():
    window = AboutWindow(400, 400, "About Mario Game")
    window.show()
    window.ok()
    assert window.visible is False


def test_ok_button_centred_near_bottom():
    window = AboutWindow(400, 400, "About Mario Game")
    button = window.ok_button
    assert button.label == "OK"
    assert button.x + button.width / 2 == window.width / 2
    assert button.y + button.height < window.height


def test_window_centred_on_screen():
    window = AboutWindow(400, 400, "About", screen_size=(1000, 800))
    x, y = window.position
    assert x * 2 + window.width == 1000
    assert y * 2 + window.height == 800


def test_render_underline_spans_window():
    window = AboutWindow(400, 400, "About Mario Game")
    canvas = RecordingCanvas()
    window.render(canvas)
    assert ("line", (20, 50, window.width - 20, 50)) in canvas.calls
    assert canvas.calls[-1] == ("rect", (0, 0, window.width, window.height))