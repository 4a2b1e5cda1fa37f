"""
Base Variant Module - Abstract base classes for text variants.

A variant describes one kind of on-screen text (a number, a name...) and
supplies the hooks the extraction pipeline calls on every iteration.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from PIL import Image

from .region import Region, REFERENCE_SIZE


class TextVariant(ABC):
    """
    Abstract base class for all text variants.

    Subclasses implement crop(), normalize() and should_retry() and
    define name, description and filename class attributes.

    Note the iteration numbering: crop() and normalize() receive the
    zero-based index of the current iteration, while should_retry()
    receives the one-based count of iterations already completed.

    Attributes:
        name: Short identifier for the variant
        description: Human-readable description
        filename: Debug image name (without extension); one per variant
    """
    name: str = "base"
    description: str = "Base variant"
    filename: str = "ocr"

    @abstractmethod
    def crop(self, image: Image.Image, iteration: int) -> Image.Image:
        """
        Cut out the part of the screenshot that holds the text.

        Args:
            image: Full screenshot (must not be modified)
            iteration: Zero-based iteration index

        Returns:
            Cropped image
        """
        pass

    @abstractmethod
    def normalize(self, text: str, iteration: int) -> str:
        """
        Fix obvious OCR mistakes, such as 'I' instead of '1' in a number.

        Args:
            text: Trimmed OCR output
            iteration: Zero-based iteration index

        Returns:
            Corrected text
        """
        pass

    @abstractmethod
    def should_retry(self, text: str, iteration: int) -> bool:
        """
        Decide whether another crop/enhance/recognize cycle should run.

        Args:
            text: Normalized text from the iteration that just finished
            iteration: Number of completed iterations (one-based)

        Returns:
            True to run another iteration, False to accept this text
        """
        pass


class RegionVariant(TextVariant):
    """
    Variant that reads a fixed screen region.

    The region is given at reference_size and scaled to the screenshot.
    Each retry widens the crop by retry_padding pixels on every side.
    should_retry() asks for another pass while the text is empty and
    fewer than max_iterations passes have run.

    Attributes:
        max_iterations: Upper bound on iterations for one extraction
    """
    max_iterations: int = 1
    retry_padding: int = 0

    def __init__(
        self,
        region: Region,
        reference_size: Tuple[int, int] = REFERENCE_SIZE,
        max_iterations: Optional[int] = None,
        retry_padding: Optional[int] = None
    ):
        if max_iterations is not None:
            if max_iterations < 1:
                raise ValueError(f"max_iterations must be at least 1 (got {max_iterations})")
            self.max_iterations = max_iterations
        if retry_padding is not None:
            self.retry_padding = retry_padding
        self.region = region
        self.reference_size = reference_size

    def region_for(self, image_size: Tuple[int, int], iteration: int) -> Region:
        """Region to crop for a given screenshot size and zero-based iteration."""
        region = self.region.scaled(image_size, self.reference_size)
        if iteration and self.retry_padding:
            region = region.expanded(self.retry_padding * iteration)
        return region.clamped(image_size)

    def crop(self, image: Image.Image, iteration: int) -> Image.Image:
        return image.crop(self.region_for(image.size, iteration).box)

    def should_retry(self, text: str, iteration: int) -> bool:
        return not text and iteration < self.max_iterations
