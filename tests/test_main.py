"""
Tests for the developer entry point.

pytesseract is monkeypatched, so no Tesseract binary is needed.

Usage:
    pytest tests/test_main.py
"""

import sys
from pathlib import Path

import pytest
import pytesseract
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def main_module(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    import main
    return main


@pytest.fixture
def opened(main_module, monkeypatch):
    """Record every image main() opens."""
    images = []
    real_open = Image.open

    def tracking_open(path):
        image = real_open(path)
        images.append(image)
        return image

    monkeypatch.setattr(main_module.Image, "open", tracking_open)
    return images


@pytest.fixture
def screenshot_file(tmp_path):
    path = tmp_path / "shot.png"
    Image.new("RGB", (1920, 1080), (220, 220, 220)).save(path)
    return path


def test_invalid_arguments_fail_before_opening_image(main_module, opened, screenshot_file):
    argv = [
        "numeric", "--region", "0", "0", "10", "10",
        "--image", str(screenshot_file), "--max-iterations", "0", "--no-debug",
    ]
    with pytest.raises(ValueError):
        main_module.main(argv)
    assert opened == []


def test_prints_result_and_closes_image(main_module, opened, screenshot_file, monkeypatch, capsys):
    monkeypatch.setattr(pytesseract, "image_to_string", lambda *a, **k: " 7\n")

    argv = [
        "numeric", "--region", "100", "100", "40", "20",
        "--image", str(screenshot_file), "--no-debug",
    ]
    assert main_module.main(argv) == 0
    assert capsys.readouterr().out.strip() == "7"
    assert len(opened) == 1
    # Closed images refuse pixel access
    with pytest.raises(ValueError):
        opened[0].getpixel((0, 0))
