"""Z-buffered, textured and flat-shaded triangle rasteriser."""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from .camera import Camera
from .geometry import Vec2, Vec3, cross, dot
from .model import Model
from .tgaimage import TGAImage

_log = logging.getLogger(__name__)

_FLOAT_MAX = sys.float_info.max


class _Canvas(Protocol):
    def set_pixel(self, x: int, y: int, color: Any) -> None:
        ...


def barycentric(a: Vec3, b: Vec3, c: Vec3, p: Vec3) -> Vec3:
    """Barycentric coordinates of ``p`` in the screen-space triangle ``abc``.

    A degenerate triangle yields a result with a negative component.
    """
    sx = Vec3(c.x - a.x, b.x - a.x, a.x - p.x)
    sy = Vec3(c.y - a.y, b.y - a.y, a.y - p.y)
    u = cross(sx, sy)
    if abs(u.z) > 1e-2:
        return Vec3(1.0 - (u.x + u.y) / u.z, u.y / u.z, u.x / u.z)
    return Vec3(-1, 1, 1)


def _clamp(value, low, high):
    return max(low, min(high, value))


class Renderer:
    """Draws models onto a canvas of ``width`` by ``height`` pixels."""

    def __init__(self, width: int = 0, height: int = 0, camera: Optional[Camera] = None) -> None:
        self.width = width
        self.height = height
        self.camera = camera

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def world_to_screen(self, v: Vec3) -> Vec3:
        """Project a world point to screen pixels; depth goes in ``z``.

        Without a camera the point is returned unchanged.
        """
        if self.camera is None:
            return v
        view = self.camera.view_matrix()
        proj = self.camera.orthographic_matrix(self.width, self.height)

        world = (v.x, v.y, v.z, 1.0)
        camera_space = [sum(view[r][c] * world[c] for c in range(4)) for r in range(3)]
        camera_space.append(1.0)
        projected = [sum(proj[r][c] * camera_space[c] for c in range(4)) for r in range(4)]

        w = projected[3]
        if w != 0.0:
            projected[:3] = [value / w for value in projected[:3]]

        x = (projected[0] + 1.0) * self.width / 2.0
        y = self.height - (projected[1] + 1.0) * self.height / 2.0
        x = _clamp(x, 0.0, float(self.width - 1))
        y = _clamp(y, 0.0, float(self.height - 1))

        _log.debug("world %r -> screen (%g, %g, %g)", v, x, y, projected[2])
        return Vec3(x, y, projected[2])

    def _shade(self, texture: TGAImage, u: float, v: float, intensity: float) -> Tuple[int, int, int]:
        texel = texture.get(int(u * texture.width), int(v * texture.height))
        b, g, r = texel.bgra[0], texel.bgra[1], texel.bgra[2]
        return (
            _clamp(int(r * intensity), 0, 255),
            _clamp(int(g * intensity), 0, 255),
            _clamp(int(b * intensity), 0, 255),
        )

    def triangle(
        self,
        canvas: _Canvas,
        points: Sequence[Vec3],
        uv: Sequence[Vec2],
        zbuffer: List[float],
        texture: TGAImage,
        intensity: float,
    ) -> None:
        """Rasterise one triangle, writing (r, g, b) colours to ``canvas``."""
        a, b, c = points
        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        x = min_x
        while x <= max_x:
            y = min_y
            while y < max_y:
                self._fill(canvas, a, b, c, x, y, uv, zbuffer, texture, intensity)
                y += 1
            x += 1

    def _fill(self, canvas, a, b, c, x, y, uv, zbuffer, texture, intensity) -> None:
        bc = barycentric(a, b, c, Vec3(x, y, 0))
        if bc.x < 0 or bc.y < 0 or bc.z < 0:
            return
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        depth = a.z * bc.x + b.z * bc.y + c.z * bc.z
        index = int(x + y * self.width)
        if zbuffer[index] >= depth:
            return
        zbuffer[index] = depth
        u = bc.x * uv[0].x + bc.y * uv[1].x + bc.z * uv[2].x
        v = bc.x * uv[0].y + bc.y * uv[1].y + bc.z * uv[2].y
        canvas.set_pixel(int(x), int(y), self._shade(texture, u, v, intensity))

    def render_model(self, canvas: _Canvas, model: Model, texture: TGAImage, light: Vec3) -> List[float]:
        """Draw every triangle of ``model`` and return the final depth buffer."""
        _log.debug("model: %d vertices, %d faces", model.nverts(), model.nfaces())
        zbuffer = [-_FLOAT_MAX] * (self.width * self.height)

        for face in model.faces:
            world = [model.vert(face.vert(j)) for j in range(3)]
            screen = [self.world_to_screen(p) for p in world]
            uv = [model.uv(face.texcoord(j)) for j in range(3)]

            normal = cross(world[2] - world[0], world[1] - world[0])
            if normal.norm() == 0:
                intensity = 1.0
            else:
                intensity = _clamp(dot(normal.normalize(), light), 0.0, 1.0)
            intensity = 0.2 + 0.8 * intensity

            self.triangle(canvas, screen, uv, zbuffer, texture, intensity)
        return zbuffer