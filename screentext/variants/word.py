"""
Word Variant - Reads a name or label made of letters.
"""

import re
from typing import Optional, Tuple

from .base import RegionVariant
from .factory import register_variant
from .region import Region, REFERENCE_SIZE


# Digits Tesseract commonly returns for letters in game fonts
LETTER_LOOKALIKES = str.maketrans({
    "0": "O",
    "1": "I",
    "2": "Z",
    "5": "S",
    "6": "G",
    "8": "B",
})

_DISALLOWED = re.compile(r"[^\w\s'\-]|\d")
_WHITESPACE = re.compile(r"\s+")


@register_variant
class WordLabelVariant(RegionVariant):
    """
    Reads one or more words.

    Digits inside a word that also contains letters become the letters
    they resemble; standalone digits and punctuation other than
    apostrophes, hyphens and underscores are dropped. Never retries.
    """
    name = "word"
    description = "Word label - letters only, single pass"
    filename = "word"
    max_iterations = 1

    def __init__(
        self,
        region: Region,
        reference_size: Tuple[int, int] = REFERENCE_SIZE,
        max_iterations: Optional[int] = None,
        retry_padding: Optional[int] = None,
        filename: Optional[str] = None
    ):
        super().__init__(region, reference_size, max_iterations, retry_padding)
        if filename:
            self.filename = filename

    def normalize(self, text: str, iteration: int) -> str:
        words = []
        for word in text.split():
            if any(c.isalpha() for c in word):
                word = word.translate(LETTER_LOOKALIKES)
            words.append(_DISALLOWED.sub("", word))
        return _WHITESPACE.sub(" ", " ".join(words)).strip()
