"""
Recognition Engine Base Interface

Abstract base class defining the OCR engine contract.
"""

from abc import ABC, abstractmethod
from PIL import Image

from .errors import RecognitionError


class RecognitionEngine(ABC):
    """
    Abstract base class for OCR engines.

    Concrete engines implement image_to_text(); callers use recognize(),
    which trims the engine output and turns any engine failure into a
    RecognitionError. Engines never retry on their own.
    """

    @abstractmethod
    def image_to_text(self, image: Image.Image) -> str:
        """
        Run the underlying OCR engine on an enhanced image.

        Args:
            image: Cropped and enhanced PIL Image

        Returns:
            Text exactly as produced by the engine
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Engine identifier.

        Returns:
            String name identifying this engine type (e.g., "tesseract")
        """
        pass

    def recognize(self, image: Image.Image) -> str:
        """
        Recognize the text in an image.

        Args:
            image: Cropped and enhanced PIL Image

        Returns:
            Recognized text with leading/trailing whitespace removed

        Raises:
            RecognitionError: If the engine fails for any reason
        """
        try:
            text = self.image_to_text(image)
        except RecognitionError:
            raise
        except Exception as e:
            raise RecognitionError(f"Error performing OCR with {self.name} engine") from e

        if text is None:
            raise RecognitionError(f"{self.name} engine returned no text")
        return text.strip()

    def configure(self, **kwargs) -> None:
        """
        Configure engine parameters.

        Override in subclasses to support runtime configuration.
        Default implementation does nothing.

        Args:
            **kwargs: Engine-specific configuration options
        """
        pass
