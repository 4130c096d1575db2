import pytest

from jsl_fingerspelling.recognition import (
    DEFAULT_RULES, FINGERSPELLING_LABELS, ROMAJI, ROW_LABELS,
    reachable_labels, romanize, rules_for_shape, shadowed_labels,
)
from jsl_fingerspelling.recognition import rules

from conftest import make_features


class TestTable:
    def test_covers_all_labels_in_order(self):
        assert len(DEFAULT_RULES) == 46
        assert tuple(rule.label for rule in DEFAULT_RULES) == FINGERSPELLING_LABELS

    def test_labels_unique(self):
        assert len(set(FINGERSPELLING_LABELS)) == 46

    def test_reachable_labels(self):
        assert reachable_labels() == list("あいうえおかきくけこさ")

    def test_shadowed_labels(self):
        shadowed = shadowed_labels()
        assert len(shadowed) == 35
        assert "し" in shadowed
        assert "ん" in shadowed
        assert "さ" not in shadowed

    def test_rules_for_shape(self):
        assert rules_for_shape(rules.FIST) == ["さ", "て", "ひ", "も", "ろ"]
        assert rules_for_shape(rules.FOUR_FINGERS) == ["え"]
        assert rules_for_shape(rules.OPEN_HAND) == ["お"]

    def test_open_hand_variants_are_distinct_rules(self):
        assert rules.OPEN_HAND.predicate is rules.OPEN_HAND_WIDE.predicate
        assert rules.OPEN_HAND != rules.OPEN_HAND_WIDE


class TestLabels:
    def test_rows(self):
        assert list(ROW_LABELS) == ["あ行", "か行", "さ行", "た行", "な行",
                                    "は行", "ま行", "や行", "ら行", "わ行"]
        assert ROW_LABELS["や行"] == ("や", "ゆ", "よ")

    def test_every_label_has_romaji(self):
        assert set(ROMAJI) == set(FINGERSPELLING_LABELS)

    def test_romanize(self):
        assert romanize("し") == "shi"
        assert romanize("") == ""


class TestShapes:
    def test_thumb_up(self):
        f = make_features(aspect_ratio=1.0, thumb_left=0.12, palm=0.2, finger_tips=0.1)
        assert rules.THUMB_UP.predicate(f)
        assert rules.THUMB_UP.confidence(f) == pytest.approx(0.8)

    def test_thumb_up_confidence_cap(self):
        f = make_features(aspect_ratio=1.0, thumb_right=0.3, palm=0.4)
        assert rules.THUMB_UP.confidence(f) == 0.85

    @pytest.mark.parametrize("aspect_ratio", [0.8, 1.4])
    def test_thumb_up_aspect_bounds_exclusive(self, aspect_ratio):
        f = make_features(aspect_ratio=aspect_ratio, thumb_left=0.12, palm=0.2)
        assert not rules.THUMB_UP.predicate(f)

    def test_little_finger(self):
        f = make_features(aspect_ratio=0.9, finger_tips=0.15, palm=0.2)
        assert rules.LITTLE_FINGER.predicate(f)
        assert rules.LITTLE_FINGER.confidence(f) == pytest.approx(0.6)

    def test_index_finger(self):
        f = make_features(aspect_ratio=0.9, finger_tips=0.15, palm=0.2)
        assert rules.INDEX_FINGER.predicate(f)
        assert rules.INDEX_FINGER.confidence(f) == pytest.approx(0.675)

    def test_four_fingers_requires_folded_thumb(self):
        f = make_features(aspect_ratio=1.0, finger_tips=0.4, palm=0.1, thumb_left=0.08)
        assert not rules.FOUR_FINGERS.predicate(f)

    def test_open_hand(self):
        f = make_features(aspect_ratio=1.2, finger_tips=0.3, palm=0.1, thumb_right=0.1)
        assert rules.OPEN_HAND.predicate(f)
        assert rules.OPEN_HAND.confidence(f) == pytest.approx(0.72)
        assert rules.OPEN_HAND_WIDE.confidence(f) == pytest.approx(0.76)

    def test_fist(self):
        f = make_features(aspect_ratio=1.0, palm=0.25, finger_tips=0.01)
        assert rules.FIST.predicate(f)
        assert rules.FIST.confidence(f) == 0.8

    def test_fist_rejects_thumb(self):
        f = make_features(aspect_ratio=1.0, palm=0.25, thumb_left=0.05)
        assert not rules.FIST.predicate(f)
