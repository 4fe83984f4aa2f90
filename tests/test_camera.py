import math

import numpy as np
import pytest

from crtscene.camera import Camera, Direction
from crtscene.shader import Shader


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_initial_orientation_and_field_of_view():
    camera = Camera()
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])
    assert np.allclose(camera.up, [0.0, 1.0, 0.0])
    assert camera.field_of_view == Camera.FIELD_OF_VIEW == 45.0


def test_forward_move_scales_with_speed_and_time():
    camera = Camera()
    camera.move(Direction.FORWARD, 0.5)
    assert np.allclose(camera.position, camera.front * Camera.SPEED * 0.5)


def test_opposite_moves_cancel():
    camera = Camera((1.0, 2.0, 3.0))
    camera.rotate(100.0, 100.0)
    camera.rotate(180.0, 60.0)
    start = camera.position.copy()
    camera.move(Direction.FORWARD, 0.3)
    camera.move(Direction.RIGHT, 0.2)
    camera.move(Direction.BACKWARD, 0.3)
    camera.move(Direction.LEFT, 0.2)
    assert np.allclose(camera.position, start)


def test_sideways_move_before_any_rotation_stays_put():
    camera = Camera()
    camera.move(Direction.RIGHT, 1.0)
    assert np.allclose(camera.position, np.zeros(3))


def test_view_maps_camera_position_to_origin():
    camera = Camera((4.0, -2.0, 7.0))
    camera.move(Direction.UP, 0.25)
    eye = np.append(camera.position, 1.0)
    assert np.allclose((camera.view @ eye)[:3], np.zeros(3))


def test_update_moves_for_held_keys_only():
    held = Camera()
    held.update({Direction.FORWARD, Direction.UP}, 0.1)
    manual = Camera()
    manual.move(Direction.FORWARD, 0.1)
    manual.move(Direction.UP, 0.1)
    assert np.allclose(held.position, manual.position)


def test_first_rotation_keeps_angles_and_gives_unit_front():
    camera = Camera()
    camera.rotate(640.0, 360.0)
    assert camera.yaw == 0.0 and camera.pitch == 0.0
    assert math.isclose(float(np.linalg.norm(camera.front)), 1.0)
    assert math.isclose(float(np.dot(camera.front, camera.right)), 0.0, abs_tol=1e-12)


def test_rotation_accumulates_scaled_cursor_offset():
    camera = Camera()
    camera.rotate(0.0, 0.0)
    camera.rotate(40.0, -20.0)
    assert math.isclose(camera.yaw, 40.0 * Camera.SENSITIVITY)
    assert math.isclose(camera.pitch, 20.0 * Camera.SENSITIVITY)


def test_pitch_is_clamped():
    camera = Camera()
    camera.rotate(0.0, 0.0)
    camera.rotate(0.0, -1e6)
    assert camera.pitch == Camera.PITCH_LIMIT
    camera.rotate(0.0, 1e7)
    assert camera.pitch == -Camera.PITCH_LIMIT


def test_scroll_clamps_field_of_view(in_tmp):
    camera = Camera()
    camera.scroll(0.0, 1000.0)
    assert camera.field_of_view == Camera.FIELD_OF_VIEW_LIMITS[0]
    camera.scroll(0.0, -1000.0)
    assert camera.field_of_view == Camera.FIELD_OF_VIEW_LIMITS[1]


def test_scroll_narrows_view_and_updates_projection(in_tmp):
    camera = Camera()
    camera.update_projection()
    before = camera.projection[1, 1]
    camera.scroll(0.0, 5.0)
    assert camera.field_of_view == Camera.FIELD_OF_VIEW - 5.0
    assert camera.projection[1, 1] > before


def test_uploads_send_matrices_and_position():
    camera = Camera((1.0, 2.0, 3.0))
    camera.update_projection()
    camera.update_view()
    shader = Shader()
    camera.upload_model_view_projection(shader)
    camera.upload_position(shader)
    assert set(shader.uniforms) == {"u_model", "u_view", "u_projection", "u_view_position"}
    assert np.allclose(shader.uniforms["u_projection"], camera.projection)
    assert np.allclose(shader.uniforms["u_view"], camera.view)
    assert shader.uniforms["u_view_position"] == (1.0, 2.0, 3.0)


def test_view_projection_upload_omits_model():
    shader = Shader()
    Camera().upload_view_projection(shader)
    assert set(shader.uniforms) == {"u_view", "u_projection"}


def test_move_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Camera().move("sideways", 1.0)