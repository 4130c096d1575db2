import pytest

from jsl_fingerspelling.classical import Bounds, HandContour, Point, SkinPixel, extract_contour
from jsl_fingerspelling.recognition import HandFeatures, derive_features

from conftest import make_features


@pytest.fixture
def contour():
    pixels = [SkinPixel(x, y) for y in range(21) for x in range(11)]
    return extract_contour(pixels)


def test_aspect_ratio(contour):
    assert derive_features(contour).aspect_ratio == pytest.approx(0.5)


def test_densities_are_counts_over_total(contour):
    features = derive_features(contour)
    assert features.top_density == pytest.approx(66 / 231)
    assert features.top_top_density == pytest.approx(44 / 231)
    assert features.top_middle_density == pytest.approx(33 / 231)
    assert features.finger_tips_density == pytest.approx(55 / 231)
    assert features.palm_density == pytest.approx(21 / 231)
    assert features.thumb_density == pytest.approx(27 / 231)


def test_center_density_can_go_negative(contour):
    # Directional regions overlap, so their densities may sum past 1
    features = derive_features(contour)
    assert features.center_density == pytest.approx(1 - 258 / 231)
    assert features.center_density < 0


def test_zero_height_is_degenerate():
    contour = extract_contour([SkinPixel(x, 5) for x in range(100)])
    assert derive_features(contour) is None


def test_zero_pixels_is_degenerate():
    contour = HandContour(Bounds(0, 1, 0, 1), Point(0.5, 0.5), 1, 1, {}, 0)
    assert derive_features(contour) is None


def test_zero_width_is_allowed():
    contour = extract_contour([SkinPixel(3, y) for y in range(100)])
    assert derive_features(contour).aspect_ratio == 0.0


class TestThumb:
    def test_thumb_density_takes_larger_side(self):
        features = make_features(thumb_left=0.02, thumb_right=0.11)
        assert features.thumb_density == pytest.approx(0.11)
        assert not features.is_thumb_left

    def test_thumb_left(self):
        assert make_features(thumb_left=0.2, thumb_right=0.1).is_thumb_left

    def test_tie_is_not_left(self):
        assert not make_features(thumb_left=0.1, thumb_right=0.1).is_thumb_left


def test_missing_region_reads_zero():
    features = HandFeatures(aspect_ratio=1.0)
    assert features.palm_density == 0.0
    assert features.center_density == 1.0


def test_features_immutable():
    features = make_features(palm=0.3)
    with pytest.raises(TypeError):
        features.densities["palm"] = 0.0
