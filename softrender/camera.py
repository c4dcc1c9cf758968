"""A look-at camera with an orthographic projection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .geometry import Matrix, Vec3, cross, dot

_log = logging.getLogger(__name__)


def _log_matrix(title: str, matrix: Matrix) -> None:
    if _log.isEnabledFor(logging.DEBUG):
        rows = "\n".join(" ".join(f"{value:g}" for value in row) for row in matrix)
        _log.debug("%s:\n%s", title, rows)


@dataclass
class Camera:
    """Camera placed at ``position`` looking at ``target``."""

    position: Vec3 = field(default_factory=lambda: Vec3(0, 0, 5))
    target: Vec3 = field(default_factory=lambda: Vec3(0, 0, 0))
    up: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))
    near: float = 0.1
    far: float = 100.0
    size: float = 5.0

    def view_matrix(self) -> Matrix:
        """World-to-camera transform."""
        z = (self.position - self.target).normalize()
        x = cross(self.up, z).normalize()
        y = cross(z, x).normalize()

        view = Matrix(4, 4)
        for row, axis in enumerate((x, y, z)):
            view[row][0:3] = [axis.x, axis.y, axis.z]
            view[row][3] = -dot(axis, self.position)
        view[3][3] = 1.0

        _log_matrix("View Matrix", view)
        return view

    def orthographic_matrix(self, width: float, height: float) -> Matrix:
        """Orthographic projection for a viewport of the given size."""
        aspect = width / height
        proj = Matrix.orthographic(
            -self.size * aspect,
            self.size * aspect,
            -self.size,
            self.size,
            self.near,
            self.far,
        )
        _log_matrix("Projection Matrix", proj)
        return proj