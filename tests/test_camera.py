import math

import numpy as np

from vibevj import linalg
from vibevj.camera import Camera, CameraUniform


def test_default_camera_settings():
    cam = Camera()
    assert cam.position == (0.0, 0.0, 3.0)
    assert cam.target == (0.0, 0.0, 0.0)
    assert math.isclose(cam.aspect, 16.0 / 9.0)
    assert math.isclose(cam.fov, math.radians(45.0))


def test_view_projection_is_product():
    cam = Camera(position=(2.0, 1.0, 4.0), target=(0.0, 0.5, 0.0), aspect=1.5)
    assert np.allclose(cam.view_projection_matrix(), cam.projection_matrix() @ cam.view_matrix())


def test_target_projects_to_screen_centre():
    cam = Camera(position=(3.0, 2.0, 5.0), target=(1.0, -1.0, 0.0))
    clip = cam.view_projection_matrix() @ np.array([*cam.target, 1.0])
    assert np.allclose(clip[:2] / clip[3], [0.0, 0.0])


def test_update_aspect_changes_projection():
    cam = Camera()
    cam.update_aspect(2.0)
    proj = cam.projection_matrix()
    assert cam.aspect == 2.0
    assert math.isclose(proj[0, 0] * 2.0, proj[1, 1])


def test_uniform_defaults_to_identity():
    assert CameraUniform().view_proj == linalg.to_cols_array_2d(linalg.identity())


def test_uniform_update_and_bytes_round_trip():
    cam = Camera()
    uniform = CameraUniform()
    uniform.update_view_proj(cam)
    assert np.allclose(uniform.view_proj, linalg.to_cols_array_2d(cam.view_projection_matrix()))
    raw = uniform.to_bytes()
    assert len(raw) == 64
    decoded = np.frombuffer(raw, dtype="<f4").reshape(4, 4)
    assert np.allclose(decoded.T, cam.view_projection_matrix(), atol=1e-6)