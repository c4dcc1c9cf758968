"""Reading and writing of Truevision TGA images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import List, Tuple, Union

_HEADER = struct.Struct("<BBBHHBHHHHBB")
_DEVELOPER_AREA_REF = bytes(4)
_EXTENSION_AREA_REF = bytes(4)
_FOOTER = b"TRUEVISION-XFILE.\0"
_MAX_CHUNK_LENGTH = 128

_UNCOMPRESSED = (2, 3)
_RLE = (10, 11)


class TGAError(Exception):
    """Raised when a TGA file cannot be decoded or encoded."""


class TGAFormat(IntEnum):
    """Supported bytes per pixel."""

    GRAYSCALE = 1
    RGB = 3
    RGBA = 4


@dataclass(frozen=True)
class TGAColor:
    """A pixel colour in blue, green, red, alpha order."""

    bgra: Tuple[int, int, int, int] = (0, 0, 0, 0)
    bytespp: int = 4

    def __getitem__(self, index: int) -> int:
        return self.bgra[index]


def _decode_rle(body: bytes, pixel_count: int, bpp: int) -> bytearray:
    out = bytearray()
    pixels = 0
    pos = 0
    while pixels < pixel_count:
        if pos >= len(body):
            raise TGAError("an error occurred while reading the data")
        chunk_header = body[pos]
        pos += 1
        if chunk_header < 128:
            count = chunk_header + 1
            chunk = body[pos:pos + count * bpp]
            if len(chunk) < count * bpp:
                raise TGAError("an error occurred while reading the data")
            pos += count * bpp
        else:
            count = chunk_header - 127
            pixel = body[pos:pos + bpp]
            if len(pixel) < bpp:
                raise TGAError("an error occurred while reading the data")
            pos += bpp
            chunk = pixel * count
        if pixels + count > pixel_count:
            raise TGAError("too many pixels read")
        out += chunk
        pixels += count
    return out


class TGAImage:
    """An in-memory image with 1, 3 or 4 bytes per pixel."""

    def __init__(self, width: int = 0, height: int = 0, bpp: int = 0) -> None:
        if width < 0 or height < 0 or bpp < 0:
            raise ValueError("image dimensions must not be negative")
        self._width = width
        self._height = height
        self._bpp = int(bpp)
        self._data = bytearray(width * height * self._bpp)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bpp(self) -> int:
        return self._bpp

    @property
    def data(self) -> bytes:
        """Raw pixel bytes, row by row."""
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TGAImage):
            return NotImplemented
        return (self._width, self._height, self._bpp, self._data) == (
            other._width,
            other._height,
            other._bpp,
            other._data,
        )

    def __repr__(self) -> str:
        return f"TGAImage(width={self._width}, height={self._height}, bpp={self._bpp})"

    @classmethod
    def from_bytes(cls, data: bytes) -> "TGAImage":
        """Decode a TGA file held in memory."""
        raw = bytes(data)
        if len(raw) < _HEADER.size:
            raise TGAError("an error occurred while reading the header")
        fields = _HEADER.unpack_from(raw)
        datatype, width, height, bits, descriptor = (
            fields[2],
            fields[8],
            fields[9],
            fields[10],
            fields[11],
        )
        bpp = bits >> 3
        if width <= 0 or height <= 0 or bpp not in {f.value for f in TGAFormat}:
            raise TGAError("bad bpp (or width/height) value")
        image = cls(width, height, bpp)
        body = raw[_HEADER.size:]
        nbytes = width * height * bpp
        if datatype in _UNCOMPRESSED:
            if len(body) < nbytes:
                raise TGAError("an error occurred while reading the data")
            image._data[:] = body[:nbytes]
        elif datatype in _RLE:
            image._data[:] = _decode_rle(body, width * height, bpp)
        else:
            raise TGAError(f"unknown file format {datatype}")
        if not descriptor & 0x20:
            image.flip_vertically()
        if descriptor & 0x10:
            image.flip_horizontally()
        return image

    @classmethod
    def read(cls, path: Union[str, PathLike]) -> "TGAImage":
        """Load a TGA file from disk."""
        return cls.from_bytes(Path(path).read_bytes())

    def _pixels(self) -> List[bytes]:
        if not self._bpp:
            return []
        bpp = self._bpp
        return [bytes(self._data[i:i + bpp]) for i in range(0, len(self._data), bpp)]

    def _encode_rle(self) -> bytes:
        pixels = self._pixels()
        total = len(pixels)
        out = bytearray()
        current = 0
        while current < total:
            run_length = 1
            raw = True
            while current + run_length < total and run_length < _MAX_CHUNK_LENGTH:
                same = pixels[current + run_length - 1] == pixels[current + run_length]
                if run_length == 1:
                    raw = not same
                if raw and same:
                    run_length -= 1
                    break
                if not raw and not same:
                    break
                run_length += 1
            if raw:
                out.append(run_length - 1)
                out += b"".join(pixels[current:current + run_length])
            else:
                out.append(run_length + 127)
                out += pixels[current]
            current += run_length
        return bytes(out)

    def to_bytes(self, vflip: bool = True, rle: bool = True) -> bytes:
        """Encode the image as a TGA file.

        With ``vflip`` the header declares a bottom-left origin.
        """
        if self._bpp == TGAFormat.GRAYSCALE:
            datatype = 11 if rle else 3
        else:
            datatype = 10 if rle else 2
        try:
            header = _HEADER.pack(
                0, 0, datatype, 0, 0, 0, 0, 0,
                self._width, self._height, self._bpp << 3,
                0x00 if vflip else 0x20,
            )
        except struct.error as exc:
            raise TGAError("image too large for a TGA header") from exc
        body = self._encode_rle() if rle else bytes(self._data)
        return header + body + _DEVELOPER_AREA_REF + _EXTENSION_AREA_REF + _FOOTER

    def write(self, path: Union[str, PathLike], vflip: bool = True, rle: bool = True) -> None:
        """Write the image to disk as a TGA file."""
        Path(path).write_bytes(self.to_bytes(vflip, rle))

    def flip_horizontally(self) -> None:
        """Mirror the image left to right."""
        stride = self._width * self._bpp
        if not stride:
            return
        bpp = self._bpp
        flipped = bytearray()
        for start in range(0, len(self._data), stride):
            row = self._data[start:start + stride]
            pixels = [row[i:i + bpp] for i in range(0, stride, bpp)]
            flipped += b"".join(reversed(pixels))
        self._data = flipped

    def flip_vertically(self) -> None:
        """Mirror the image top to bottom."""
        stride = self._width * self._bpp
        if not stride:
            return
        rows = [self._data[i:i + stride] for i in range(0, len(self._data), stride)]
        self._data = bytearray(b"".join(reversed(rows)))

    def _offset(self, x: int, y: int) -> int:
        if not self._data or not (0 <= x < self._width and 0 <= y < self._height):
            return -1
        return (x + y * self._width) * self._bpp

    def get(self, x: int, y: int) -> TGAColor:
        """Colour at (x, y); a blank colour outside the image."""
        offset = self._offset(x, y)
        if offset < 0:
            return TGAColor()
        pixel = tuple(self._data[offset:offset + self._bpp])
        return TGAColor(pixel + (0,) * (4 - self._bpp), self._bpp)

    def set(self, x: int, y: int, color: TGAColor) -> None:
        """Set the colour at (x, y); positions outside the image are ignored."""
        offset = self._offset(x, y)
        if offset < 0:
            return
        self._data[offset:offset + self._bpp] = bytes(color.bgra[: self._bpp])