"""
Screen Text Extraction - Developer Entry Point

Runs one text variant against a screenshot file (or a fresh grab of the
primary monitor) and prints what was read. Useful for calibrating crop
regions: the enhanced image the OCR engine saw is written to the debug
folder under the variant's file name.

Example:
    python main.py numeric --region 880 40 160 48 --image shot.png
    python main.py word --region 700 980 520 40 --max-iterations 2
    python main.py numeric --region 880 40 160 48 --no-debug  # Grabs the screen
"""

import sys
import logging
import argparse
from typing import Optional

import mss
from PIL import Image

from screentext.extraction import create_pipeline
from screentext.ocr import OcrPipelineError
from screentext.settings import load_settings
from screentext.variants import Region, available_variants


# Configure logging - output to both console and file
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler("screentext.log", mode='w', encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)


def grab_screen(monitor_index: int = 1) -> Optional[Image.Image]:
    """
    Capture a whole monitor using mss.

    Args:
        monitor_index: mss monitor index (1 = primary monitor)

    Returns:
        PIL Image or None if failed
    """
    try:
        with mss.mss() as sct:
            screenshot = sct.grab(sct.monitors[monitor_index])
            return Image.frombytes(
                "RGB",
                (screenshot.width, screenshot.height),
                screenshot.rgb
            )
    except Exception as e:
        logger.error(f"Screen capture failed: {e}")
        return None


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Screen Text Extraction - read a text value from a screenshot region"
    )
    parser.add_argument(
        "variant",
        choices=available_variants(),
        help="Text variant to run"
    )
    parser.add_argument(
        "--region", "-r",
        nargs=4,
        type=int,
        required=True,
        metavar=("X", "Y", "WIDTH", "HEIGHT"),
        help="Crop region at 1920x1080 reference resolution"
    )
    parser.add_argument(
        "--image", "-i",
        help="Screenshot file (default: capture the primary monitor)"
    )
    parser.add_argument(
        "--max-iterations", "-n",
        type=int,
        default=None,
        help="Override the variant's iteration limit"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--no-debug",
        action="store_true",
        help="Do not write the enhanced image to the debug folder"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run a single extraction and print the result."""
    args = parse_args(argv)

    settings = load_settings(args.config)
    if args.no_debug:
        settings["extraction_folder"] = None

    # Build the pipeline first so bad arguments fail before any image is opened
    pipeline = create_pipeline(
        args.variant,
        settings,
        region=Region(*args.region),
        max_iterations=args.max_iterations
    )

    if args.image:
        image = Image.open(args.image)
    else:
        image = grab_screen()
        if image is None:
            return 1

    try:
        result = pipeline.run(image)
    except OcrPipelineError as e:
        logger.error(f"Extraction failed: {e}")
        return 2
    finally:
        image.close()

    logger.info(
        f"Read {result.text!r} (raw {result.raw_text!r}) in {result.iterations} "
        f"iteration(s), {result.processing_time_ms:.1f}ms"
    )
    if result.debug is not None and result.debug.saved:
        logger.info(f"Debug image saved: {result.debug.path}")

    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
