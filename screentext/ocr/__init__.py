"""
OCR Module for Screen Text Extraction

Enhances a cropped screenshot region and hands it to a pluggable OCR
engine.

Usage:
    from screentext.ocr import ExtractionPipeline, create_engine, DebugSink
    from screentext.variants import create_variant, Region

    variant = create_variant("numeric", region=Region(880, 40, 160, 48))
    pipeline = ExtractionPipeline(variant, create_engine("tesseract"), DebugSink("./debug"))

    text = pipeline.process(screenshot)
"""

# Public API - Errors
from .errors import (
    OcrPipelineError,
    EnhancementError,
    RecognitionError,
)

# Public API - Result types
from .result import SaveOutcome, ExtractionResult

# Public API - Base class for custom engines
from .base import RecognitionEngine

# Public API - Factory functions
from .factory import (
    create_engine,
    register_engine,
    available_engines,
)

# Public API - Image enhancement
from .enhancer import (
    enhance,
    to_grayscale,
    upscale,
    invert,
    rescale_contrast,
    UPSCALE_FACTOR,
    CONTRAST_SCALE,
    CONTRAST_OFFSET,
)

# Debug output
from .debug import DEBUG_DIR, DebugSink

# Pipeline
from .pipeline import ExtractionPipeline

__all__ = [
    # Errors
    "OcrPipelineError",
    "EnhancementError",
    "RecognitionError",
    # Result types
    "SaveOutcome",
    "ExtractionResult",
    # Base class
    "RecognitionEngine",
    # Factory
    "create_engine",
    "register_engine",
    "available_engines",
    # Enhancement
    "enhance",
    "to_grayscale",
    "upscale",
    "invert",
    "rescale_contrast",
    "UPSCALE_FACTOR",
    "CONTRAST_SCALE",
    "CONTRAST_OFFSET",
    # Debug
    "DEBUG_DIR",
    "DebugSink",
    # Pipeline
    "ExtractionPipeline",
]
