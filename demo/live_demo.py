"""
Live demo application for JSL fingerspelling recognition.

Captures webcam frames, runs the rule-based recognition pipeline on each
frame and shows the skin overlay, hand bounds and recognized label. A
short recognition history is kept on screen; it belongs to this demo only,
the pipeline itself is stateless.

Keys: q / ESC quit, c clear history, o toggle overlay.
"""

import argparse
import logging
import time
from collections import deque
from pathlib import Path

import cv2
import numpy as np

from jsl_fingerspelling import FramePipeline, FrameResult
from jsl_fingerspelling.config import RECOGNITION_CONFIG, REALTIME_CONFIG, VISUALIZATION_CONFIG
from jsl_fingerspelling.recognition import romanize
from jsl_fingerspelling.utils import CameraError, FPSCounter, setup_logging
from jsl_fingerspelling.utils.visualization import draw_hand_contour, draw_prediction, draw_skin_pixels

logger = logging.getLogger(__name__)


class LiveDemo:
    """
    Webcam driver for the recognition pipeline.

    Owns the capture device, the frame loop and the recognition history.
    """

    def __init__(self, camera_id: int = REALTIME_CONFIG['camera']['device_id'],
                 width: int = REALTIME_CONFIG['camera']['width'],
                 height: int = REALTIME_CONFIG['camera']['height'],
                 mirror: bool = False, show_overlay: bool = True):
        """
        Initialize demo system.

        Args:
            camera_id: Camera device index
            width: Requested capture width
            height: Requested capture height
            mirror: Flip frames horizontally before processing
            show_overlay: Draw skin pixels and hand bounds
        """
        self.camera_id = camera_id
        self.width = width
        self.height = height
        self.mirror = mirror
        self.show_overlay = show_overlay

        self.pipeline = FramePipeline()
        self.fps_counter = FPSCounter(REALTIME_CONFIG['fps_window'])
        self.current_fps = 0.0

        self.history = deque(maxlen=RECOGNITION_CONFIG['history_length'])
        self.history_min_confidence = RECOGNITION_CONFIG['history_min_confidence']
        self.started_at = time.time()

    def open_camera(self) -> cv2.VideoCapture:
        """
        Open and configure the capture device.

        Raises:
            CameraError: If the camera cannot be opened
        """
        cap = cv2.VideoCapture(self.camera_id)
        if not cap.isOpened():
            raise CameraError(self.camera_id, operation="open")

        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        logger.info(f"Camera {self.camera_id} opened")
        return cap

    def record(self, frame_result: FrameResult) -> None:
        """Append confident, changed recognitions to the history."""
        result = frame_result.result
        if not result.matched or result.confidence <= self.history_min_confidence:
            return
        if self.history and self.history[-1][0] == result.label:
            return

        self.history.append((result.label, result.confidence, time.time()))
        logger.info(f"Recognized {result.label} ({romanize(result.label)}) "
                    f"confidence={result.confidence:.2f}")

    def render(self, frame: np.ndarray, frame_result: FrameResult) -> np.ndarray:
        """Draw overlay, prediction, history and FPS onto the frame."""
        if self.show_overlay:
            draw_skin_pixels(frame, frame_result.skin_mask)
            draw_hand_contour(frame, frame_result.contour)

        draw_prediction(frame, frame_result.result, frame_result.hand_detected)

        color = VISUALIZATION_CONFIG['colors']['text']
        history_text = " ".join(romanize(label) for label, _, _ in self.history)
        cv2.putText(frame, history_text, (10, frame.shape[0] - 15),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1)

        elapsed = int(time.time() - self.started_at)
        status = f"FPS: {self.current_fps:.1f}  {elapsed // 60:02d}:{elapsed % 60:02d}"
        cv2.putText(frame, status, (frame.shape[1] - 200, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1)
        return frame

    def handle_key_input(self, key: int) -> bool:
        """
        Handle keyboard input.

        Returns:
            False when the demo should stop
        """
        key &= 0xFF
        if key in (ord('q'), 27):
            return False
        if key == ord('c'):
            self.history.clear()
            logger.info("History cleared")
        elif key == ord('o'):
            self.show_overlay = not self.show_overlay
        return True

    def process(self, frame: np.ndarray) -> np.ndarray:
        if self.mirror:
            frame = cv2.flip(frame, 1)

        frame_result = self.pipeline.process_bgr(frame)
        self.record(frame_result)
        self.current_fps = self.fps_counter.update()
        return self.render(frame, frame_result)

    def run(self):
        """Run the capture loop until the user quits."""
        cap = self.open_camera()
        window_name = VISUALIZATION_CONFIG['window_name']

        logger.info("Starting live demo. Press 'q' to quit")
        try:
            while True:
                ret, frame = cap.read()
                if not ret:
                    logger.error("Failed to read from camera")
                    break

                cv2.imshow(window_name, self.process(frame))

                if not self.handle_key_input(cv2.waitKey(1)):
                    break

        except KeyboardInterrupt:
            logger.info("Demo interrupted by user")

        finally:
            cap.release()
            cv2.destroyAllWindows()
            logger.info(f"Session recognitions: {len(self.history)}")


def main():
    """Main entry point for the demo application."""
    parser = argparse.ArgumentParser(description='Live JSL Fingerspelling Recognition Demo')

    parser.add_argument('--camera', type=int, default=REALTIME_CONFIG['camera']['device_id'],
                        help='Camera device ID (default: 0)')
    parser.add_argument('--width', type=int, default=REALTIME_CONFIG['camera']['width'],
                        help='Capture width (default: 640)')
    parser.add_argument('--height', type=int, default=REALTIME_CONFIG['camera']['height'],
                        help='Capture height (default: 480)')
    parser.add_argument('--mirror', action='store_true',
                        help='Mirror frames horizontally')
    parser.add_argument('--no-overlay', action='store_true',
                        help='Do not draw skin pixels and hand bounds')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    parser.add_argument('--log-dir', type=Path, default=None,
                        help='Also write a session log file to this directory')

    args = parser.parse_args()

    log_file = setup_logging(args.log_level, args.log_dir)
    if log_file is not None:
        logger.info(f"Writing session log to {log_file}")

    demo = LiveDemo(
        camera_id=args.camera,
        width=args.width,
        height=args.height,
        mirror=args.mirror,
        show_overlay=not args.no_overlay,
    )
    demo.run()


if __name__ == "__main__":
    main()
