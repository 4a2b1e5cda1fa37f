"""
OCR Pipeline Errors

Exceptions raised by the extraction pipeline. Each error records the
pipeline stage that failed so callers can tell enhancement problems from
recognition problems without inspecting the message.
"""


class OcrPipelineError(Exception):
    """Base class for failures that abort an extraction."""

    stage: str = "pipeline"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is not None:
            return f"[{self.stage}] {self.message}: {cause}"
        return f"[{self.stage}] {self.message}"


class EnhancementError(OcrPipelineError):
    """Image filtering (contrast rescale) failed."""

    stage = "enhance"


class RecognitionError(OcrPipelineError):
    """The OCR engine failed or could not be reached."""

    stage = "recognize"
