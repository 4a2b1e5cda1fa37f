"""
OCR settings stored as JSON.

The file only needs the keys a user wants to change; everything missing
falls back to DEFAULT_SETTINGS. A broken file is logged and ignored so a
typo never stops an extraction.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

# Looked up relative to the working directory
SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "extraction_folder": "debug",  # None disables debug images
    "engine": "tesseract",
    "tesseract_cmd": None,         # None uses tesseract from PATH
    "tesseract_lang": "eng",
    "tesseract_config": "--psm 7"
}


def _settings_path(path: Optional[Union[str, Path]]) -> Path:
    return Path(path) if path is not None else SETTINGS_FILE


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Read OCR settings, layered over the defaults.

    Args:
        path: Settings file to read instead of SETTINGS_FILE

    Returns:
        A fresh dictionary holding every key of DEFAULT_SETTINGS
    """
    settings_file = _settings_path(path)

    if not settings_file.exists():
        logger.debug(f"No settings at {settings_file}, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            raise ValueError("settings file must contain a JSON object")
    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Ignoring unreadable settings {settings_file}: {e}")
        return DEFAULT_SETTINGS.copy()

    settings = {**DEFAULT_SETTINGS, **stored}
    logger.debug(f"Settings read from {settings_file}: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Union[str, Path]] = None) -> None:
    """
    Write OCR settings as indented JSON.

    Write errors are logged, not raised.
    """
    settings_file = _settings_path(path)
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings written to {settings_file}")
    except IOError as e:
        logger.error(f"Could not write settings {settings_file}: {e}")
