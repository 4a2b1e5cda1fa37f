"""
OCR Result Dataclasses

Shared data structures for extraction results and debug output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SaveOutcome:
    """Result of a best-effort debug image write."""
    saved: bool
    path: Optional[Path] = None   # Target file, None when the sink is disabled
    error: Optional[str] = None   # Failure description when saved is False

    @property
    def skipped(self) -> bool:
        """True when nothing was attempted (no debug folder configured)."""
        return not self.saved and self.error is None


@dataclass
class ExtractionResult:
    """Complete result of one pipeline run."""
    text: str                      # Normalized text from the final iteration
    raw_text: str                  # Trimmed engine output from the final iteration
    iterations: int                # Completed crop/enhance/recognize cycles
    debug: Optional[SaveOutcome]   # Outcome of the last debug save
    processing_time_ms: float      # Time taken for the whole run
