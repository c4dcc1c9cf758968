import sys

import pytest

from softrender.camera import Camera
from softrender.geometry import Vec2, Vec3
from softrender.model import Face, Model
from softrender.render import Renderer, barycentric
from softrender.tgaimage import TGAColor, TGAImage


class Recorder:
    def __init__(self):
        self.pixels = {}

    def set_pixel(self, x, y, color):
        self.pixels[(x, y)] = color


def _texture(*colors):
    image = TGAImage(len(colors), 1, 3)
    for x, bgr in enumerate(colors):
        image.set(x, 0, TGAColor(bgr + (0,), 3))
    return image


def _renderer(size=40):
    cam = Camera(position=Vec3(0, 0, 2), target=Vec3(0, 0, 0), up=Vec3(0, 1, 0), size=1.0)
    return Renderer(size, size, cam)


A, B, C = Vec3(0, 0, 0), Vec3(10, 0, 0), Vec3(0, 10, 0)


@pytest.mark.parametrize(
    "point, expected",
    [(A, (1.0, 0.0, 0.0)), (B, (0.0, 1.0, 0.0)), (C, (0.0, 0.0, 1.0))],
)
def test_barycentric_at_vertices(point, expected):
    assert tuple(barycentric(A, B, C, point)) == pytest.approx(expected)


@pytest.mark.parametrize("p", [Vec3(1, 1, 0), Vec3(3, 4, 0), Vec3(2.5, 6.5, 0)])
def test_barycentric_sums_to_one_inside(p):
    bc = barycentric(A, B, C, p)
    assert sum(bc) == pytest.approx(1.0)
    assert min(bc) >= 0
    rebuilt_x = bc.x * A.x + bc.y * B.x + bc.z * C.x
    rebuilt_y = bc.x * A.y + bc.y * B.y + bc.z * C.y
    assert (rebuilt_x, rebuilt_y) == pytest.approx((p.x, p.y))


def test_barycentric_outside_has_negative_component():
    assert min(barycentric(A, B, C, Vec3(20, 20, 0))) < 0


def test_barycentric_degenerate():
    line = barycentric(Vec3(0, 0, 0), Vec3(1, 1, 0), Vec3(2, 2, 0), Vec3(1, 1, 0))
    assert line == Vec3(-1, 1, 1)


def test_world_to_screen_without_camera_is_identity():
    v = Vec3(1.5, -2.0, 3.0)
    assert Renderer(10, 10).world_to_screen(v) == v


def test_set_size():
    renderer = Renderer()
    renderer.set_size(64, 32)
    assert (renderer.width, renderer.height) == (64, 32)


def test_world_to_screen_origin_is_centre():
    renderer = _renderer(40)
    screen = renderer.world_to_screen(Vec3(0, 0, 0))
    assert (screen.x, screen.y) == pytest.approx((renderer.width / 2, renderer.height / 2))


def test_world_to_screen_clamps():
    renderer = _renderer(40)
    for v in (Vec3(100, 100, 0), Vec3(-100, -100, 0)):
        screen = renderer.world_to_screen(v)
        assert 0 <= screen.x <= renderer.width - 1
        assert 0 <= screen.y <= renderer.height - 1


def test_world_to_screen_y_points_down():
    renderer = _renderer(40)
    upper = renderer.world_to_screen(Vec3(0, 0.5, 0))
    lower = renderer.world_to_screen(Vec3(0, -0.5, 0))
    assert upper.y < lower.y


def _single_triangle_model(uv=Vec2(0, 0), z=0.0, offset=0):
    return Model(
        verts=[Vec3(0, 0, z), Vec3(1, 0, z), Vec3(0, 1, z)],
        uvs=[uv],
        faces=[Face([0, 1, 2], [0, 0, 0], [0, 0, 0])],
    )


def test_render_model_fully_lit_uses_texture_colour():
    renderer = _renderer(40)
    canvas = Recorder()
    texture = _texture((10, 20, 30))
    zbuffer = renderer.render_model(canvas, _single_triangle_model(), texture, Vec3(0, 0, -1))
    assert canvas.pixels
    assert set(canvas.pixels.values()) == {(30, 20, 10)}
    written = sum(1 for depth in zbuffer if depth > -sys.float_info.max)
    assert written == len(canvas.pixels)
    assert len(zbuffer) == renderer.width * renderer.height


def test_render_model_dim_light_is_darker_but_not_black():
    renderer = _renderer(40)
    lit, dim = Recorder(), Recorder()
    texture = _texture((100, 150, 200))
    renderer.render_model(lit, _single_triangle_model(), texture, Vec3(0, 0, -1))
    renderer.render_model(dim, _single_triangle_model(), texture, Vec3(0, 0, 1))
    assert lit.pixels.keys() == dim.pixels.keys()
    for pos, colour in dim.pixels.items():
        assert all(0 < d < l for d, l in zip(colour, lit.pixels[pos]))


def test_render_model_depth_independent_of_face_order():
    renderer = _renderer(40)
    texture = _texture((10, 20, 30), (40, 50, 60))
    verts = [
        Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0),
        Vec3(0, 0, 0.5), Vec3(1, 0, 0.5), Vec3(0, 1, 0.5),
    ]
    uvs = [Vec2(0, 0), Vec2(0.5, 0)]
    first = Face([0, 1, 2], [0, 0, 0], [])
    second = Face([3, 4, 5], [1, 1, 1], [])
    forward, backward = Recorder(), Recorder()
    renderer.render_model(forward, Model(verts, uvs, [first, second]), texture, Vec3(0, 0, -1))
    renderer.render_model(backward, Model(verts, uvs, [second, first]), texture, Vec3(0, 0, -1))
    assert forward.pixels == backward.pixels
    assert len(set(forward.pixels.values())) == 1


def test_triangle_respects_existing_depth():
    renderer = Renderer(20, 20)
    canvas = Recorder()
    points = [Vec3(0, 0, 0), Vec3(10, 0, 0), Vec3(0, 10, 0)]
    uv = [Vec2(0, 0)] * 3
    zbuffer = [1.0] * (20 * 20)
    renderer.triangle(canvas, points, uv, zbuffer, _texture((1, 2, 3)), 1.0)
    assert canvas.pixels == {}
    assert set(zbuffer) == {1.0}