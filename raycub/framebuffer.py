"""An in-memory image of packed 0xRRGGBB pixels."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Image:
    """A width x height grid of colours stored row by row."""

    width: int
    height: int
    data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        size = self.width * self.height
        if not self.data:
            self.data = [0] * size
        elif len(self.data) != size:
            raise ValueError(
                f"image data holds {len(self.data)} pixels, expected {size}"
            )
        else:
            self.data = list(self.data)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if self._contains(x, y):
            self.data[y * self.width + x] = color

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.data[y * self.width + x]