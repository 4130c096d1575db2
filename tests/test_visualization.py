import numpy as np
import pytest

from jsl_fingerspelling.classical import Bounds, HandContour, Point
from jsl_fingerspelling.recognition import ClassificationResult
from jsl_fingerspelling.utils import FPSCounter
from jsl_fingerspelling.utils import visualization
from jsl_fingerspelling.utils.visualization import draw_hand_contour, draw_prediction, draw_skin_pixels


@pytest.fixture
def image():
    return np.zeros((60, 80, 3), dtype=np.uint8)


class TestSkinOverlay:
    def test_marker_grows_right_and_down(self):
        image = np.zeros((6, 6, 3), dtype=np.uint8)
        mask = np.zeros((6, 6), dtype=bool)
        mask[1, 1] = True

        draw_skin_pixels(image, mask, color=(0, 255, 0), marker_size=2)

        tinted = image[:, :, 1] > 0
        expected = np.zeros((6, 6), dtype=bool)
        expected[1:3, 1:3] = True
        assert np.array_equal(tinted, expected)
        assert not image[:, :, 0].any()
        assert not image[:, :, 2].any()

    def test_single_pixel_marker(self):
        image = np.zeros((4, 4, 3), dtype=np.uint8)
        mask = np.zeros((4, 4), dtype=bool)
        mask[2, 3] = True
        draw_skin_pixels(image, mask, marker_size=1)
        assert np.count_nonzero(image.any(axis=2)) == 1

    def test_empty_mask_leaves_image(self, image):
        image[:] = 40
        draw_skin_pixels(image, np.zeros(image.shape[:2], dtype=bool))
        assert (image == 40).all()


class TestContourOverlay:
    def test_none_is_noop(self, image):
        assert draw_hand_contour(image, None) is image
        assert not image.any()

    def test_draws_box_and_center(self, image):
        contour = HandContour(Bounds(10, 50, 5, 45), Point(30.0, 25.0), 40, 40, {}, 500)
        draw_hand_contour(image, contour, color=(0, 255, 0), center_color=(0, 0, 255))
        assert image[5, 30, 1] == 255      # top edge
        assert image[25, 30, 2] == 255     # center dot
        assert not image[15:35, 15:20].any()


class TestPrediction:
    def test_draws_text(self, image):
        draw_prediction(image, ClassificationResult("さ", 0.8))
        assert image.any()

    def test_texts(self, monkeypatch, image):
        texts = []
        monkeypatch.setattr(visualization.cv2, "putText",
                            lambda img, text, *args: texts.append(text))

        draw_prediction(image, ClassificationResult("さ", 0.8))
        draw_prediction(image, ClassificationResult.empty())
        draw_prediction(image, ClassificationResult.empty(), hand_detected=False)

        assert texts == ["sa  80%", "-", "no hand"]


class TestFPSCounter:
    def test_average_over_window(self, monkeypatch):
        ticks = iter([0.0, 0.1, 0.2, 0.5])
        monkeypatch.setattr("time.perf_counter", lambda: next(ticks, 0.5))

        counter = FPSCounter(window_size=2)
        assert counter.update() == pytest.approx(10.0)
        assert counter.update() == pytest.approx(10.0)
        # Window holds the last two frame times (0.1, 0.3)
        assert counter.update() == pytest.approx(5.0)

    def test_reset(self):
        counter = FPSCounter()
        counter.update()
        counter.reset()
        assert len(counter.frame_times) == 0
