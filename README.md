# softrender

A small, dependency-free software rasteriser in pure Python.

## Modules

- `softrender.geometry`: frozen `Vec2` and `Vec3` vectors (addition,
  subtraction, scalar multiplication and division, indexing), `Vec3.norm()`
  and `Vec3.normalize(length=1)`, the `dot` and `cross` functions, and a
  zero-filled row-major `Matrix` with the static constructor
  `Matrix.orthographic(left, right, bottom, top, near, far)`.
- `softrender.tgaimage`: `TGAImage` for reading and writing uncompressed and
  RLE-compressed TGA images with 1, 3 or 4 bytes per pixel (`TGAFormat`
  `GRAYSCALE`, `RGB`, `RGBA`), pixel access through `get`/`set` using
  `TGAColor` values in blue, green, red, alpha order, and
  `flip_horizontally`/`flip_vertically`. Decoding problems raise `TGAError`.
- `softrender.camera`: a look-at `Camera` dataclass (`position`, `target`,
  `up`, `near`, `far`, `size`) with `view_matrix()` and
  `orthographic_matrix(width, height)`.
- `softrender.drawline`: Bresenham line drawing with `draw_line` (integer
  end points, both included) and `draw_segment` (two `Vec2`s, coordinates
  truncated).
- `softrender.model`: `Model`, holding lists of vertices (`verts`), texture
  coordinates (`uvs`) and `Face`s, each face holding vertex, texture and
  normal indices.
- `softrender.render`: `Renderer`, which projects vertices to screen space
  through its camera and fills textured, flat-lit triangles against a
  z-buffer, and the `barycentric` helper.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Writing and reading a TGA image

```python
from softrender.tgaimage import TGAImage, TGAColor, TGAFormat

image = TGAImage(64, 64, TGAFormat.RGB)
image.set(10, 10, TGAColor(bgra=(0, 0, 255, 255)))
image.write("out.tga", vflip=True, rle=True)

loaded = TGAImage.read("out.tga")
print(loaded.get(10, 10))   # TGAColor(bgra=(0, 0, 255, 0), bytespp=3)
```

`TGAImage.from_bytes` and `to_bytes` do the same in memory. `get` outside
the image returns a blank `TGAColor`; `set` outside the image does nothing.

## Vector maths and a camera

```python
from softrender.geometry import Vec3, cross, dot
from softrender.camera import Camera

normal = cross(Vec3(1, 0, 0), Vec3(0, 1, 0))   # Vec3(0, 0, 1)
camera = Camera(position=Vec3(0, 0, 2), size=1.0)
view = camera.view_matrix()
projection = camera.orthographic_matrix(800, 600)
```

`Vec3.normalize` raises `ValueError` for a zero-length vector.

## Drawing and rendering

Lines and triangles are drawn onto a *canvas*: any object with a
`set_pixel(x, y, color)` method. `draw_line` and `draw_segment` pass the
colour through unchanged; `Renderer` passes an `(r, g, b)` tuple.

```python
from softrender.camera import Camera
from softrender.drawline import draw_line
from softrender.geometry import Vec2, Vec3
from softrender.model import Face, Model
from softrender.render import Renderer
from softrender.tgaimage import TGAColor, TGAImage, TGAFormat


class Canvas:
    def __init__(self, width, height):
        self.image = TGAImage(width, height, TGAFormat.RGB)

    def set_pixel(self, x, y, color):
        r, g, b = color
        self.image.set(x, y, TGAColor((b, g, r, 255)))


canvas = Canvas(200, 200)
draw_line(canvas, 0, 0, 199, 120, (255, 255, 255))

texture = TGAImage(1, 1, TGAFormat.RGB)
texture.set(0, 0, TGAColor((0, 128, 255, 255)))

model = Model(
    verts=[Vec3(-0.5, -0.5, 0), Vec3(0.5, -0.5, 0), Vec3(0, 0.5, 0)],
    uvs=[Vec2(0, 0), Vec2(0, 0), Vec2(0, 0)],
    faces=[Face(v_idx=[0, 1, 2], vt_idx=[0, 1, 2])],
)
renderer = Renderer(200, 200, Camera(position=Vec3(0, 0, 2), size=1.0))
zbuffer = renderer.render_model(canvas, model, texture, Vec3(0, 0, -1))
canvas.image.write("triangle.tga")
```

`render_model` lights each face with `0.2 + 0.8 * clamp(dot(normal, light))`,
where the normal is `cross(v2 - v0, v1 - v0)` normalised, and returns the
final depth buffer as a flat list of `width * height` floats. Without a
camera, `world_to_screen` returns points unchanged. The camera and renderer
log their matrices and transforms at `DEBUG` level through `logging`.

## What this package does not do

- It does not load mesh files: a `Model` is built from lists of vertices,
  texture coordinates and faces that you supply.
- It opens no window and has no command-line program; rendering goes to
  whatever canvas object you provide, for example one backed by a
  `TGAImage` that you then write to disk.