"""
Run the fingerspelling recognizer on still images.

Example:
    python scripts/classify_image.py photos/*.jpg --output-dir annotated/
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

import cv2

from jsl_fingerspelling import FramePipeline, FrameResult
from jsl_fingerspelling.recognition import romanize
from jsl_fingerspelling.utils import ImageProcessingError, setup_logging
from jsl_fingerspelling.utils.visualization import draw_hand_contour, draw_prediction, draw_skin_pixels

logger = logging.getLogger(__name__)


def classify_image(pipeline: FramePipeline, image_path: Path,
                   output_dir: Optional[Path] = None) -> FrameResult:
    """
    Classify one image file and optionally write an annotated copy.

    Raises:
        ImageProcessingError: If the image cannot be read
    """
    image = cv2.imread(str(image_path))
    if image is None:
        raise ImageProcessingError(f"read {image_path}")

    frame_result = pipeline.process_bgr(image)
    result = frame_result.result

    if frame_result.contour is None:
        logger.info(f"{image_path.name}: no hand detected")
    elif result.matched:
        logger.info(f"{image_path.name}: {result.label} ({romanize(result.label)}) "
                    f"confidence={result.confidence:.3f}")
    else:
        logger.info(f"{image_path.name}: hand found, no confident match")

    if frame_result.contour is not None:
        logger.debug(f"{image_path.name}: bounds={tuple(frame_result.contour.bounds)} "
                     f"regions={dict(frame_result.contour.regions)}")

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        annotated = image.copy()
        draw_skin_pixels(annotated, frame_result.skin_mask)
        draw_hand_contour(annotated, frame_result.contour)
        draw_prediction(annotated, result, frame_result.hand_detected)
        cv2.imwrite(str(output_dir / image_path.name), annotated)

    return frame_result


def main():
    parser = argparse.ArgumentParser(description='Classify fingerspelling in still images')
    parser.add_argument('images', nargs='+', type=Path, help='Image files')
    parser.add_argument('--output-dir', type=Path, default=None,
                        help='Write annotated images to this directory')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args()

    setup_logging(args.log_level)

    pipeline = FramePipeline()
    failures = 0
    for image_path in args.images:
        try:
            classify_image(pipeline, image_path, args.output_dir)
        except ImageProcessingError as e:
            logger.error(str(e))
            failures += 1

    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
