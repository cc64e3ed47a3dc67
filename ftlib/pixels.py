"""RGBA pixel buffers and writing packed colours into them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["BPP", "Texture", "draw_pixel"]

BPP = 4


def draw_pixel(buffer: bytearray, offset: int, color: int) -> None:
    """Write ``color`` as R, G, B, A bytes (most significant first) at ``offset``."""
    if offset < 0 or offset + BPP > len(buffer):
        raise IndexError(f"pixel at offset {offset} does not fit in {len(buffer)} bytes")
    buffer[offset:offset + BPP] = (color & 0xFFFFFFFF).to_bytes(BPP, "big")


@dataclass
class Texture:
    """A ``width`` by ``height`` image of four-byte RGBA pixels, row by row."""

    width: int
    height: int
    pixels: Optional[bytearray] = field(default=None, repr=False)
    bytes_per_pixel: int = field(default=BPP, init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid dimensions {self.width}x{self.height}")
        size = self.width * self.height * BPP
        if self.pixels is None:
            self.pixels = bytearray(size)
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} bytes of pixels, got {len(self.pixels)}")

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is out of bounds")
        return (y * self.width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y`` to a packed RGBA colour."""
        draw_pixel(self.pixels, self._offset(x, y), color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the packed RGBA colour at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + BPP], "big")