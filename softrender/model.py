"""Mesh data: vertices, texture coordinates and faces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .geometry import Vec2, Vec3


@dataclass
class Face:
    """A polygon given by indices into a model's vertex, uv and normal lists."""

    v_idx: List[int] = field(default_factory=list)
    vt_idx: List[int] = field(default_factory=list)
    vn_idx: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.v_idx)

    def vert(self, index: int) -> int:
        """Vertex index of the face's ``index``-th corner."""
        return self.v_idx[index]

    def texcoord(self, index: int) -> int:
        """Texture coordinate index of the face's ``index``-th corner."""
        return self.vt_idx[index]

    def normal(self, index: int) -> int:
        """Normal index of the face's ``index``-th corner."""
        return self.vn_idx[index]


@dataclass
class Model:
    """A triangle mesh with per-corner texture coordinates."""

    verts: List[Vec3] = field(default_factory=list)
    uvs: List[Vec2] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)

    def nverts(self) -> int:
        return len(self.verts)

    def nfaces(self) -> int:
        return len(self.faces)

    def face(self, index: int) -> Face:
        return self.faces[index]

    def vert(self, index: int) -> Vec3:
        return self.verts[index]

    def uv(self, index: int) -> Vec2:
        return self.uvs[index]