"""
Tesseract OCR Engine

Recognition engine backed by the Tesseract binary through pytesseract.
"""

import logging
from typing import Optional

import pytesseract
from PIL import Image

from .base import RecognitionEngine


logger = logging.getLogger(__name__)

# Single text line; screen labels are never paragraphs
DEFAULT_CONFIG = "--psm 7"
DEFAULT_LANG = "eng"

# Binary pytesseract uses when no path is configured (looked up on PATH)
DEFAULT_TESSERACT_CMD = pytesseract.pytesseract.tesseract_cmd


class TesseractEngine(RecognitionEngine):
    """
    OCR engine using the Tesseract command line tool.

    The binary is located through PATH unless tesseract_cmd is given.
    """

    def __init__(
        self,
        tesseract_cmd: Optional[str] = None,
        lang: str = DEFAULT_LANG,
        config: str = DEFAULT_CONFIG
    ):
        """
        Initialize the Tesseract engine.

        Args:
            tesseract_cmd: Optional path to the tesseract executable
            lang: Tesseract language code(s), e.g. "eng" or "eng+fra"
            config: Extra command line options passed to tesseract
        """
        self._tesseract_cmd = tesseract_cmd
        self._lang = lang
        self._config = config

    @property
    def name(self) -> str:
        return "tesseract"

    @property
    def lang(self) -> str:
        return self._lang

    @property
    def config(self) -> str:
        return self._config

    def image_to_text(self, image: Image.Image) -> str:
        # pytesseract keeps the binary path in a module global shared by every engine
        pytesseract.pytesseract.tesseract_cmd = self._tesseract_cmd or DEFAULT_TESSERACT_CMD
        return pytesseract.image_to_string(image, lang=self._lang, config=self._config)

    def configure(self, **kwargs) -> None:
        """
        Configure engine parameters.

        Args:
            tesseract_cmd: Path to the tesseract executable
            lang: Tesseract language code(s)
            config: Extra command line options
        """
        if 'tesseract_cmd' in kwargs:
            self._tesseract_cmd = kwargs['tesseract_cmd']
        if 'lang' in kwargs:
            self._lang = kwargs['lang']
        if 'config' in kwargs:
            self._config = kwargs['config']
        logger.debug(f"Tesseract configured: cmd={self._tesseract_cmd}, lang={self._lang}, config={self._config!r}")
