"""
Extraction Pipeline

Runs a text variant's hooks around the shared enhancement and recognition
steps:

    crop -> enhance -> debug save -> recognize -> normalize -> retry?

The loop always runs at least once and stops when the variant's
should_retry() hook returns False. There is no built-in iteration cap;
each variant bounds its own retries.
"""

import logging
import time
from typing import Optional

from PIL import Image

from .base import RecognitionEngine
from .debug import DebugSink
from .enhancer import enhance
from .result import ExtractionResult, SaveOutcome
from ..variants.base import TextVariant


logger = logging.getLogger(__name__)


class ExtractionPipeline:
    """
    Extracts one text value from a screenshot.

    The pipeline keeps no per-call state, so a single instance can be
    shared between threads as long as the variant and engine allow it.
    """

    def __init__(
        self,
        variant: TextVariant,
        engine: RecognitionEngine,
        debug_sink: Optional[DebugSink] = None
    ):
        """
        Args:
            variant: Supplies the crop/normalize/should_retry hooks and debug filename
            engine: OCR engine used for recognition
            debug_sink: Where enhanced images are written. None disables debug output.
        """
        self._variant = variant
        self._engine = engine
        self._debug_sink = debug_sink if debug_sink is not None else DebugSink(None)

    @property
    def variant(self) -> TextVariant:
        return self._variant

    @property
    def engine(self) -> RecognitionEngine:
        return self._engine

    @property
    def debug_sink(self) -> DebugSink:
        return self._debug_sink

    def process(self, image: Image.Image) -> str:
        """
        Extract the variant's text from a screenshot.

        Args:
            image: Full screenshot. It is read, never modified.

        Returns:
            Normalized text from the final iteration

        Raises:
            EnhancementError: If filtering the crop fails
            RecognitionError: If the OCR engine fails
        """
        return self.run(image).text

    def run(self, image: Image.Image) -> ExtractionResult:
        """
        Extract text and report how the extraction went.

        Same contract as process(), but returns an ExtractionResult with
        the iteration count, final raw text and debug outcome.
        """
        start_time = time.perf_counter()
        variant = self._variant

        iteration = 0
        while True:
            raw_text, debug = self._recognize_once(image, iteration)
            text = variant.normalize(raw_text, iteration)
            iteration += 1
            # should_retry counts completed iterations, starting at 1
            if not variant.should_retry(text, iteration):
                break

        logger.debug(f"OCR recognised \"{text}\"")

        return ExtractionResult(
            text=text,
            raw_text=raw_text,
            iterations=iteration,
            debug=debug,
            processing_time_ms=(time.perf_counter() - start_time) * 1000
        )

    def _recognize_once(self, image: Image.Image, iteration: int) -> tuple[str, SaveOutcome]:
        """Crop, enhance, save and recognize for one zero-based iteration."""
        cropped = self._variant.crop(image, iteration)
        try:
            enhanced = enhance(cropped)
        finally:
            if cropped is not image:
                cropped.close()

        try:
            debug = self._debug_sink.save(enhanced, self._variant.filename)
            raw_text = self._engine.recognize(enhanced)
        finally:
            enhanced.close()

        return raw_text, debug
