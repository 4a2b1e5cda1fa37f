"""
OCR Debug Output

Writes the enhanced image handed to the OCR engine to disk so inaccurate
recognition can be inspected later. Debug output is never load-bearing:
every failure is logged and reported, never raised.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from .result import SaveOutcome


logger = logging.getLogger(__name__)

# Default debug folder
DEBUG_DIR = Path("./debug")


class DebugSink:
    """
    Best-effort writer for enhanced OCR images.

    Each variant writes to one fixed file name, so repeated iterations
    overwrite the same PNG and only the last one is kept.
    """

    def __init__(self, folder: Optional[Union[str, Path]] = DEBUG_DIR):
        """
        Args:
            folder: Output folder. None disables debug output.
        """
        self._folder = Path(folder) if folder is not None else None

    @property
    def folder(self) -> Optional[Path]:
        return self._folder

    @property
    def enabled(self) -> bool:
        return self._folder is not None

    def path_for(self, name: str) -> Optional[Path]:
        """Return the PNG path used for a debug name, or None when disabled."""
        if self._folder is None:
            return None
        return self._folder / f"{name}.png"

    def save(self, image: Image.Image, name: str) -> SaveOutcome:
        """
        Save a copy of an enhanced image as <folder>/<name>.png.

        Args:
            image: Image that was (or will be) passed to the OCR engine
            name: File name without extension, supplied by the variant

        Returns:
            SaveOutcome describing what happened
        """
        path = self.path_for(name)
        if path is None:
            return SaveOutcome(saved=False)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path, "PNG")
        except Exception as e:
            logger.warning(f"Error writing OCR image {name}: {e}")
            return SaveOutcome(saved=False, path=path, error=str(e))

        return SaveOutcome(saved=True, path=path)
