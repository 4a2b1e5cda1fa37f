"""
Pipeline construction from settings.

Wires a named variant, the configured OCR engine and the debug folder
into an ExtractionPipeline.
"""

import logging
from typing import Any, Dict, Optional, Union

from .ocr import DebugSink, ExtractionPipeline, create_engine
from .settings import DEFAULT_SETTINGS, load_settings
from .variants import TextVariant, create_variant

logger = logging.getLogger(__name__)


def create_pipeline(
    variant: Union[str, TextVariant],
    settings: Optional[Dict[str, Any]] = None,
    **variant_kwargs: Any
) -> ExtractionPipeline:
    """
    Build an extraction pipeline.

    Args:
        variant: Variant instance, or registered variant name
        settings: Settings dictionary (loaded from config.json if None)
        **variant_kwargs: Constructor arguments when variant is a name

    Returns:
        ExtractionPipeline ready to process screenshots

    Raises:
        ValueError: If the variant or engine name is unknown

    Example:
        pipeline = create_pipeline("numeric", region=Region(880, 40, 160, 48))
        rank = pipeline.process(screenshot)
    """
    if settings is None:
        settings = load_settings()
    merged = DEFAULT_SETTINGS.copy()
    merged.update(settings)

    if isinstance(variant, str):
        variant = create_variant(variant, **variant_kwargs)
    elif variant_kwargs:
        raise TypeError("variant_kwargs can only be used with a variant name")

    engine_config: Dict[str, Any] = {}
    if merged["engine"] == "tesseract":
        engine_config = {
            "tesseract_cmd": merged["tesseract_cmd"],
            "lang": merged["tesseract_lang"],
            "config": merged["tesseract_config"],
        }
    engine = create_engine(merged["engine"], **engine_config)

    debug_sink = DebugSink(merged["extraction_folder"])

    logger.debug(
        f"Pipeline created: variant={variant.name}, engine={engine.name}, "
        f"debug={debug_sink.folder}"
    )
    return ExtractionPipeline(variant, engine, debug_sink)
