import pytest

from softrender.camera import Camera
from softrender.geometry import Vec3, dot


def _apply(matrix, v):
    vec = (v.x, v.y, v.z, 1.0)
    return tuple(sum(matrix[r][c] * vec[c] for c in range(4)) for r in range(4))


def test_defaults():
    cam = Camera()
    assert cam.position == Vec3(0, 0, 5)
    assert cam.target == Vec3(0, 0, 0)
    assert cam.up == Vec3(0, 1, 0)
    assert cam.size == 5.0


@pytest.mark.parametrize(
    "position",
    [Vec3(0, 0, 5), Vec3(3, 2, 4), Vec3(-1, 0.5, 2)],
)
def test_view_maps_position_to_origin(position):
    cam = Camera(position=position)
    view = cam.view_matrix()
    x, y, z, w = _apply(view, position)
    assert (x, y, z) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert w == 1.0


def test_view_rotation_rows_are_orthonormal():
    cam = Camera(position=Vec3(2, 3, 4), target=Vec3(1, 0, -1))
    view = cam.view_matrix()
    axes = [Vec3(*view[r][0:3]) for r in range(3)]
    for i, a in enumerate(axes):
        assert a.norm() == pytest.approx(1.0)
        for b in axes[i + 1:]:
            assert dot(a, b) == pytest.approx(0.0, abs=1e-9)


def test_view_puts_target_on_negative_z_axis():
    cam = Camera(position=Vec3(1, 2, 3), target=Vec3(0, 0, 0))
    view = cam.view_matrix()
    x, y, z, _ = _apply(view, cam.target)
    distance = (cam.position - cam.target).norm()
    assert (x, y) == pytest.approx((0.0, 0.0), abs=1e-9)
    assert z == pytest.approx(-distance)


def test_orthographic_maps_frustum_corners_to_unit_cube():
    cam = Camera(size=2.0, near=1.0, far=10.0)
    proj = cam.orthographic_matrix(200, 100)
    aspect = 200 / 100
    right_top_near = Vec3(cam.size * aspect, cam.size, -cam.near)
    left_bottom_far = Vec3(-cam.size * aspect, -cam.size, -cam.far)
    assert _apply(proj, right_top_near)[:3] == pytest.approx((1.0, 1.0, -1.0))
    assert _apply(proj, left_bottom_far)[:3] == pytest.approx((-1.0, -1.0, 1.0))


def test_orthographic_zero_height_raises():
    with pytest.raises(ZeroDivisionError):
        Camera().orthographic_matrix(100, 0)


def test_view_with_position_equal_target_raises():
    with pytest.raises(ValueError):
        Camera(position=Vec3(1, 1, 1), target=Vec3(1, 1, 1)).view_matrix()