"""
Variants Package - Text variants for the extraction pipeline.

A variant knows where a piece of text lives on screen and how to clean up
what the OCR engine reads there.

Public API:
    - Region: Crop rectangle at a reference resolution
    - TextVariant: Abstract base for variants
    - RegionVariant: Base for variants reading a fixed region
    - create_variant(): Factory function
    - available_variants(): List available variants
    - get_variant_info(): Get variant metadata

Usage:
    from screentext.variants import create_variant, Region

    variant = create_variant("numeric", region=Region(880, 40, 160, 48), max_value=25)
"""

# Core data structures
from .region import Region, REFERENCE_SIZE, REFERENCE_WIDTH, REFERENCE_HEIGHT

# Variant framework
from .base import TextVariant, RegionVariant
from .factory import (
    create_variant,
    available_variants,
    get_variant_info,
    register_variant,
)

# Built-in variants (importing registers them)
from .numeric import NumericLabelVariant
from .word import WordLabelVariant

__all__ = [
    # Data structures
    "Region",
    "REFERENCE_SIZE",
    "REFERENCE_WIDTH",
    "REFERENCE_HEIGHT",
    # Variant framework
    "TextVariant",
    "RegionVariant",
    "create_variant",
    "available_variants",
    "get_variant_info",
    "register_variant",
    # Built-in variants
    "NumericLabelVariant",
    "WordLabelVariant",
]
