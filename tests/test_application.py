import pytest

from crtscene.application import KEY_E, KEY_ESCAPE, KEY_W, Application, main
from crtscene.camera import Camera
from crtscene.display import DisplayManager
from crtscene.engine import Engine
from crtscene.shaders import ShaderManager


@pytest.fixture
def application():
    display = DisplayManager()
    shaders = ShaderManager()
    return Application(engine=Engine(shaders, display), display_manager=display, shader_manager=shaders)


def test_escape_requests_close(application):
    assert application.should_close is False
    application.on_key_press(KEY_ESCAPE, 0)
    assert application.should_close is True


def test_other_key_does_not_close(application):
    application.on_key_press(KEY_W, 0)
    assert application.should_close is False


def test_e_toggles_cursor_capture(application):
    application.on_key_press(KEY_E, 0)
    assert application.cursor_captured is True
    application.on_key_press(KEY_E, 0)
    assert application.cursor_captured is False


def test_resize_updates_display_manager(application):
    application.on_resize(800, 600)
    assert application.display_manager.width == 800
    assert application.display_manager.height == 600
    assert application.display_manager.is_window_resized is True


def test_scroll_narrows_field_of_view(application):
    application.on_mouse_scroll(0, 0, 0.0, 1.0)
    assert application.engine.camera.field_of_view == pytest.approx(Camera.FIELD_OF_VIEW - 1.0)


def test_scroll_is_clamped(application):
    application.on_mouse_scroll(0, 0, 0.0, 1000.0)
    assert application.engine.camera.field_of_view == Camera.FIELD_OF_VIEW_LIMITS[0]
    application.on_mouse_scroll(0, 0, 0.0, -1000.0)
    assert application.engine.camera.field_of_view == Camera.FIELD_OF_VIEW_LIMITS[1]


def test_first_mouse_motion_does_not_turn(application):
    application.on_mouse_motion(100, 100, 25, 25)
    assert application.engine.camera.yaw == 0.0
    assert application.engine.camera.pitch == 0.0


def test_mouse_motion_turns_camera(application):
    application.on_mouse_motion(0, 0, 0, 0)
    application.on_mouse_motion(40, 0, 40, 0)
    assert application.engine.camera.yaw == pytest.approx(40 * Camera.SENSITIVITY)
    application.on_mouse_motion(40, 40, 0, 40)
    assert application.engine.camera.pitch == pytest.approx(40 * Camera.SENSITIVITY)


def test_pitch_stays_within_limit(application):
    application.on_mouse_motion(0, 0, 0, 0)
    application.on_mouse_motion(0, 0, 0, 100000)
    assert application.engine.camera.pitch == Camera.PITCH_LIMIT


def test_load_requires_initialise(application):
    with pytest.raises(RuntimeError):
        application.load()


def test_run_requires_initialise(application):
    with pytest.raises(RuntimeError):
        application.run()


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--unexpected"])
    assert excinfo.value.code == 2