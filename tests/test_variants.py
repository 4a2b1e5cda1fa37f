"""
Tests for crop regions and the built-in text variants.

Usage:
    pytest tests/test_variants.py
"""

import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from screentext.variants import (
    NumericLabelVariant,
    Region,
    RegionVariant,
    WordLabelVariant,
    available_variants,
    create_variant,
    get_variant_info,
    register_variant,
)


# --- Region ---

def test_region_box():
    assert Region(10, 20, 30, 40).box == (10, 20, 40, 60)


def test_region_scales_to_image_size():
    region = Region(960, 540, 100, 50).scaled((960, 540))
    assert region == Region(480, 270, 50, 25)


def test_region_scaling_keeps_one_pixel():
    assert Region(0, 0, 1, 1).scaled((100, 100)) == Region(0, 0, 1, 1)


def test_region_expanded():
    assert Region(10, 10, 20, 5).expanded(3) == Region(7, 7, 26, 11)


def test_region_clamped_to_image():
    assert Region(-5, 90, 30, 30).clamped((50, 100)) == Region(0, 90, 25, 10)


def test_region_clamped_outside_image_keeps_one_pixel():
    region = Region(500, 500, 10, 10).clamped((50, 40))
    assert region == Region(49, 39, 1, 1)


# --- Numeric variant ---

@pytest.fixture
def numeric():
    return NumericLabelVariant(Region(100, 100, 40, 20))


@pytest.mark.parametrize("raw,expected", [
    ("12", "12"),
    ("I2", "12"),
    ("lO", "10"),
    ("S8", "58"),
    ("2 5", "25"),
    ("Rank: 7.", "7"),
    ("", ""),
    ("---", ""),
    ("1²", "1"),
    ("１２", ""),
    ("٣4", "4"),
])
def test_numeric_normalize(numeric, raw, expected):
    assert numeric.normalize(raw, 0) == expected


def test_numeric_range_blanks_out_of_range_values():
    variant = NumericLabelVariant(Region(0, 0, 10, 10), min_value=1, max_value=25)
    assert variant.normalize("26", 0) == ""
    assert variant.normalize("0", 0) == ""
    assert variant.normalize("25", 0) == "25"


def test_numeric_rejects_inverted_range():
    with pytest.raises(ValueError):
        NumericLabelVariant(Region(0, 0, 10, 10), min_value=10, max_value=1)


def test_numeric_retries_empty_once(numeric):
    assert numeric.should_retry("", 1) is True
    assert numeric.should_retry("", 2) is False
    assert numeric.should_retry("14", 1) is False


def test_numeric_retry_widens_crop(numeric):
    screenshot = Image.new("RGB", (1920, 1080))
    assert numeric.crop(screenshot, 0).size == (40, 20)
    assert numeric.crop(screenshot, 1).size == (48, 28)
    assert numeric.crop(screenshot, 2).size == (56, 36)


def test_numeric_crop_scales_with_screenshot(numeric):
    screenshot = Image.new("RGB", (960, 540))
    assert numeric.region_for(screenshot.size, 0) == Region(50, 50, 20, 10)


def test_custom_filename_and_iterations():
    variant = NumericLabelVariant(Region(0, 0, 5, 5), filename="rank", max_iterations=4)
    assert variant.filename == "rank"
    assert variant.should_retry("", 3) is True
    assert variant.should_retry("", 4) is False
    # Class defaults are untouched
    assert NumericLabelVariant.filename == "numeric"
    assert NumericLabelVariant.max_iterations == 2


def test_max_iterations_must_be_positive():
    with pytest.raises(ValueError):
        NumericLabelVariant(Region(0, 0, 5, 5), max_iterations=0)


# --- Word variant ---

@pytest.fixture
def word():
    return WordLabelVariant(Region(0, 0, 200, 30))


@pytest.mark.parametrize("raw,expected", [
    ("Innkeeper", "Innkeeper"),
    ("J0HN", "JOHN"),
    ("8OB  the  Builder", "BOB the Builder"),
    ("Ragnaros!", "Ragnaros"),
    ("O'Brien-Smith", "O'Brien-Smith"),
    ("Player 42", "Player"),
    ("  ", ""),
])
def test_word_normalize(word, raw, expected):
    assert word.normalize(raw, 0) == expected


def test_word_never_retries(word):
    assert word.should_retry("", 1) is False
    assert word.should_retry("Name", 1) is False


# --- Registry ---

def test_builtin_variants_registered():
    assert {"numeric", "word"} <= set(available_variants())
    names = {info["name"] for info in get_variant_info()}
    assert {"numeric", "word"} <= names


def test_create_variant_by_name():
    variant = create_variant("numeric", region=Region(1, 2, 3, 4), max_value=9)
    assert isinstance(variant, NumericLabelVariant)
    assert variant.max_value == 9


def test_create_variant_unknown():
    with pytest.raises(ValueError, match="Unknown variant"):
        create_variant("hieroglyphs", region=Region(0, 0, 1, 1))


def test_register_custom_variant():
    @register_variant
    class UpperVariant(RegionVariant):
        name = "upper_test"
        description = "Upper-cases everything"

        def normalize(self, text, iteration):
            return text.upper()

    variant = create_variant("upper_test", region=Region(0, 0, 1, 1))
    assert variant.normalize("abc", 0) == "ABC"


def test_numeric_ignores_non_ascii_digits_through_pipeline():
    from screentext.ocr import ExtractionPipeline, RecognitionEngine

    class SuperscriptEngine(RecognitionEngine):
        @property
        def name(self) -> str:
            return "superscript"

        def image_to_text(self, image):
            return "2¹"

    variant = NumericLabelVariant(Region(0, 0, 10, 10))
    pipeline = ExtractionPipeline(variant, SuperscriptEngine())
    assert pipeline.process(Image.new("RGB", (1920, 1080))) == "2"
