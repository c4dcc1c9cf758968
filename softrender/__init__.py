"""A small software rasteriser: vectors, TGA images, a camera, lines and textured triangles."""

__version__ = "0.1.0"

__all__ = ["camera", "drawline", "geometry", "model", "render", "tgaimage"]