"""
Screen Text Extraction

Reads a text value (a label, a counter, a name) from a region of a
screenshot by enhancing the region, running OCR on it and cleaning up
the result.

Usage:
    from PIL import Image
    from screentext import create_pipeline, Region

    pipeline = create_pipeline("numeric", region=Region(880, 40, 160, 48))
    value = pipeline.process(Image.open("screenshot.png"))
"""

from .ocr import (
    OcrPipelineError,
    EnhancementError,
    RecognitionError,
    ExtractionPipeline,
    ExtractionResult,
)
from .variants import Region, create_variant
from .extraction import create_pipeline

__version__ = "0.1.0"

__all__ = [
    "OcrPipelineError",
    "EnhancementError",
    "RecognitionError",
    "ExtractionPipeline",
    "ExtractionResult",
    "Region",
    "create_variant",
    "create_pipeline",
]
