"""
Numeric Variant - Reads a number such as a rank or a counter.
"""

import re
from typing import Optional, Tuple

from .base import RegionVariant
from .factory import register_variant
from .region import Region, REFERENCE_SIZE


# Characters Tesseract commonly returns for digits in game fonts
DIGIT_LOOKALIKES = str.maketrans({
    "O": "0", "o": "0", "D": "0", "Q": "0",
    "I": "1", "l": "1", "|": "1", "i": "1", "!": "1", "L": "1",
    "Z": "2", "z": "2",
    "S": "5", "s": "5",
    "G": "6", "b": "6",
    "T": "7",
    "B": "8",
    "g": "9", "q": "9",
})


_NON_DIGITS = re.compile(r"[^0-9]")


@register_variant
class NumericLabelVariant(RegionVariant):
    """
    Reads a non-negative integer.

    Letter look-alikes are mapped to digits and anything else is dropped.
    A value outside [min_value, max_value] is treated as unreadable (empty).
    An empty result is retried with a wider crop until max_iterations.
    """
    name = "numeric"
    description = "Numeric label - digits only, retries once with a wider crop"
    filename = "numeric"
    max_iterations = 2
    retry_padding = 4

    def __init__(
        self,
        region: Region,
        reference_size: Tuple[int, int] = REFERENCE_SIZE,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
        max_iterations: Optional[int] = None,
        retry_padding: Optional[int] = None,
        filename: Optional[str] = None
    ):
        super().__init__(region, reference_size, max_iterations, retry_padding)
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
        self.min_value = min_value
        self.max_value = max_value
        if filename:
            self.filename = filename

    def normalize(self, text: str, iteration: int) -> str:
        digits = _NON_DIGITS.sub("", text.translate(DIGIT_LOOKALIKES))
        if not digits:
            return ""

        value = int(digits)
        if self.min_value is not None and value < self.min_value:
            return ""
        if self.max_value is not None and value > self.max_value:
            return ""
        return digits
