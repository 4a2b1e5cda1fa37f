"""
Crop Regions

Screen regions are measured once at a reference resolution and scaled to
whatever size the captured screenshot actually is.
"""

from dataclasses import dataclass
from typing import Tuple


# Reference dimensions the built-in regions are calibrated for
REFERENCE_WIDTH = 1920
REFERENCE_HEIGHT = 1080
REFERENCE_SIZE = (REFERENCE_WIDTH, REFERENCE_HEIGHT)


@dataclass(frozen=True)
class Region:
    """Rectangle in pixel coordinates: (x, y) is the top-left corner."""
    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) as expected by PIL's Image.crop."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def scaled(
        self,
        image_size: Tuple[int, int],
        reference_size: Tuple[int, int] = REFERENCE_SIZE
    ) -> "Region":
        """Scale from reference_size to image_size (both (width, height))."""
        scale_x = image_size[0] / reference_size[0]
        scale_y = image_size[1] / reference_size[1]
        return Region(
            x=int(self.x * scale_x),
            y=int(self.y * scale_y),
            width=max(1, int(self.width * scale_x)),
            height=max(1, int(self.height * scale_y))
        )

    def expanded(self, padding: int) -> "Region":
        """Grow (or shrink, for negative padding) by padding pixels on every side."""
        return Region(
            x=self.x - padding,
            y=self.y - padding,
            width=max(1, self.width + 2 * padding),
            height=max(1, self.height + 2 * padding)
        )

    def clamped(self, image_size: Tuple[int, int]) -> "Region":
        """Clip to the image bounds, keeping at least one pixel."""
        img_width, img_height = image_size
        x1 = min(max(0, self.x), img_width - 1)
        y1 = min(max(0, self.y), img_height - 1)
        x2 = min(max(x1 + 1, self.x + self.width), img_width)
        y2 = min(max(y1 + 1, self.y + self.height), img_height)
        return Region(x=x1, y=y1, width=x2 - x1, height=y2 - y1)
