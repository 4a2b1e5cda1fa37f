"""
Image Enhancement

Turns a cropped screenshot region into a high-contrast image for OCR.

The steps always run in this order:
    1. grayscale (colour-space conversion, no thresholding)
    2. 3x nearest-neighbour upscale
    3. RGB inversion
    4. linear contrast rescale: out = clamp(in * 1.8 - 30, 0, 255)

Each step returns a new image; the input is never modified.
"""

import math

import cv2
import numpy as np
from PIL import Image

from .errors import EnhancementError


UPSCALE_FACTOR = 3
CONTRAST_SCALE = 1.8
CONTRAST_OFFSET = -30.0


def _to_rgb_array(image: Image.Image) -> np.ndarray:
    """Return an HxWx3 uint8 array, discarding any alpha channel."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.array(image, dtype=np.uint8)


def to_grayscale(image: Image.Image) -> Image.Image:
    """Convert to grayscale, keeping a 3-channel RGB canvas."""
    rgb = _to_rgb_array(image)
    gray = cv2.cvtColor(rgb, cv2.COLOR_RGB2GRAY)
    return Image.fromarray(cv2.cvtColor(gray, cv2.COLOR_GRAY2RGB))


def upscale(image: Image.Image, factor: int = UPSCALE_FACTOR) -> Image.Image:
    """Stretch the image to exactly factor x width and factor x height."""
    rgb = _to_rgb_array(image)
    height, width = rgb.shape[:2]
    big = cv2.resize(
        rgb,
        (width * factor, height * factor),
        interpolation=cv2.INTER_NEAREST
    )
    return Image.fromarray(big)


def invert(image: Image.Image) -> Image.Image:
    """Invert the red, green and blue channels (c' = 255 - c)."""
    rgb = _to_rgb_array(image)
    return Image.fromarray(255 - rgb)


def rescale_contrast(
    image: Image.Image,
    scale: float = CONTRAST_SCALE,
    offset: float = CONTRAST_OFFSET
) -> Image.Image:
    """
    Apply out = in * scale + offset to every channel, clamped to 0-255.

    Fractional results are truncated after clamping, so 100 -> 150,
    16 -> 0 and 200 -> 255 with the default parameters.

    Raises:
        EnhancementError: If the parameters are unusable or the rescale fails
    """
    try:
        if not (math.isfinite(scale) and math.isfinite(offset)):
            raise ValueError(f"scale and offset must be finite (got {scale}, {offset})")
        rgb = _to_rgb_array(image).astype(np.float64)
        scaled = np.clip(rgb * scale + offset, 0, 255)
        return Image.fromarray(scaled.astype(np.uint8))
    except Exception as e:
        raise EnhancementError("Error rescaling OCR image") from e


def enhance(image: Image.Image) -> Image.Image:
    """
    Run the full enhancement sequence on a cropped image.

    Args:
        image: Cropped PIL Image (any mode)

    Returns:
        New RGB image, 3x the input size

    Raises:
        EnhancementError: If the contrast rescale fails
    """
    grayscale = to_grayscale(image)
    big = upscale(grayscale)
    grayscale.close()

    inverted = invert(big)
    big.close()

    try:
        return rescale_contrast(inverted)
    finally:
        inverted.close()
