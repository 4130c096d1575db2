"""
Heuristic rule table for JSL fingerspelling.

Eleven hand-shape rules cover the whole alphabet; each of the 46 labels is
bound to one of them. Several labels share a shape, and because the
classifier keeps the first entry on tied confidence, only the earliest
label of each shared shape can ever be returned. Table order is therefore
part of the behavior and is kept as an ordered tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .features import HandFeatures


@dataclass(frozen=True)
class ShapeRule:
    """A hand-shape predicate with its capped linear confidence."""

    name: str
    predicate: Callable[[HandFeatures], bool]
    confidence: Callable[[HandFeatures], float]
    description: str = ""


@dataclass(frozen=True)
class FingerspellingRule:
    """One row of the table: a label bound to a shape rule."""

    label: str
    shape: ShapeRule

    def matches(self, features: HandFeatures) -> bool:
        return self.shape.predicate(features)

    def confidence(self, features: HandFeatures) -> float:
        return self.shape.confidence(features)


def _thumb_up(f: HandFeatures) -> bool:
    return (0.8 < f.aspect_ratio < 1.4 and f.thumb_density > 0.1
            and f.palm_density > 0.15 and f.finger_tips_density < 0.15)


def _little_finger(f: HandFeatures) -> bool:
    return 0.1 < f.finger_tips_density < 0.2 and f.aspect_ratio < 1.0 and f.palm_density > 0.1


def _two_fingers_narrow(f: HandFeatures) -> bool:
    return 0.2 < f.finger_tips_density < 0.35 and f.aspect_ratio < 1.0 and f.palm_density > 0.08


def _four_fingers(f: HandFeatures) -> bool:
    return (f.finger_tips_density > 0.35 and f.aspect_ratio < 1.2
            and f.palm_density > 0.05 and f.thumb_density < 0.08)


def _open_hand(f: HandFeatures) -> bool:
    return (f.aspect_ratio > 1.0 and f.finger_tips_density > 0.25
            and f.thumb_density > 0.08 and f.palm_density > 0.05)


def _index_finger(f: HandFeatures) -> bool:
    return 0.08 < f.finger_tips_density < 0.18 and f.aspect_ratio < 1.0 and f.palm_density > 0.1


def _two_fingers(f: HandFeatures) -> bool:
    return 0.18 < f.finger_tips_density < 0.3 and f.aspect_ratio < 1.0 and f.palm_density > 0.08


def _three_fingers(f: HandFeatures) -> bool:
    return 0.28 < f.finger_tips_density < 0.4 and f.aspect_ratio < 1.1 and f.palm_density > 0.06


def _four_fingers_compact(f: HandFeatures) -> bool:
    return (f.finger_tips_density > 0.35 and f.aspect_ratio < 1.1
            and f.palm_density > 0.05 and f.thumb_density < 0.08)


def _fist(f: HandFeatures) -> bool:
    return (0.7 < f.aspect_ratio < 1.3 and f.palm_density > 0.2
            and f.finger_tips_density < 0.1 and f.thumb_density < 0.05)


THUMB_UP = ShapeRule(
    "thumb_up", _thumb_up,
    lambda f: min(0.85, (f.thumb_density + f.palm_density) * 2.5),
    "closed hand with the thumb raised")

LITTLE_FINGER = ShapeRule(
    "little_finger", _little_finger,
    lambda f: min(0.8, f.finger_tips_density * 4.0),
    "little finger raised")

TWO_FINGERS_NARROW = ShapeRule(
    "two_fingers_narrow", _two_fingers_narrow,
    lambda f: min(0.75, f.finger_tips_density * 2.8),
    "index and middle fingers raised together")

FOUR_FINGERS = ShapeRule(
    "four_fingers", _four_fingers,
    lambda f: min(0.8, f.finger_tips_density * 2.0),
    "four fingers raised, thumb folded")

OPEN_HAND = ShapeRule(
    "open_hand", _open_hand,
    lambda f: min(0.85, (f.finger_tips_density + f.thumb_density) * 1.8),
    "all fingers spread")

INDEX_FINGER = ShapeRule(
    "index_finger", _index_finger,
    lambda f: min(0.8, f.finger_tips_density * 4.5),
    "index finger raised")

TWO_FINGERS = ShapeRule(
    "two_fingers", _two_fingers,
    lambda f: min(0.75, f.finger_tips_density * 3.2),
    "index and middle fingers raised")

THREE_FINGERS = ShapeRule(
    "three_fingers", _three_fingers,
    lambda f: min(0.75, f.finger_tips_density * 2.5),
    "index, middle and ring fingers raised")

FOUR_FINGERS_COMPACT = ShapeRule(
    "four_fingers_compact", _four_fingers_compact,
    lambda f: min(0.77, f.finger_tips_density * 2.1),
    "four fingers raised on a narrower hand")

OPEN_HAND_WIDE = ShapeRule(
    "open_hand_wide", _open_hand,
    lambda f: min(0.8, (f.finger_tips_density + f.thumb_density) * 1.9),
    "all fingers spread")

FIST = ShapeRule(
    "fist", _fist,
    lambda f: min(0.8, f.palm_density * 3.5),
    "closed fist")


_TABLE: Tuple[Tuple[str, ShapeRule], ...] = (
    # あ行
    ("あ", THUMB_UP),
    ("い", LITTLE_FINGER),
    ("う", TWO_FINGERS_NARROW),
    ("え", FOUR_FINGERS),
    ("お", OPEN_HAND),
    # か行
    ("か", INDEX_FINGER),
    ("き", TWO_FINGERS),
    ("く", THREE_FINGERS),
    ("け", FOUR_FINGERS_COMPACT),
    ("こ", OPEN_HAND_WIDE),
    # さ行
    ("さ", FIST),
    ("し", THUMB_UP),
    ("す", LITTLE_FINGER),
    ("せ", INDEX_FINGER),
    ("そ", TWO_FINGERS),
    # た行
    ("た", THREE_FINGERS),
    ("ち", FOUR_FINGERS_COMPACT),
    ("つ", OPEN_HAND_WIDE),
    ("て", FIST),
    ("と", THUMB_UP),
    # な行
    ("な", LITTLE_FINGER),
    ("に", INDEX_FINGER),
    ("ぬ", TWO_FINGERS),
    ("ね", THREE_FINGERS),
    ("の", FOUR_FINGERS_COMPACT),
    # は行
    ("は", OPEN_HAND_WIDE),
    ("ひ", FIST),
    ("ふ", THUMB_UP),
    ("へ", LITTLE_FINGER),
    ("ほ", INDEX_FINGER),
    # ま行
    ("ま", TWO_FINGERS),
    ("み", THREE_FINGERS),
    ("む", FOUR_FINGERS_COMPACT),
    ("め", OPEN_HAND_WIDE),
    ("も", FIST),
    # や行
    ("や", THUMB_UP),
    ("ゆ", LITTLE_FINGER),
    ("よ", INDEX_FINGER),
    # ら行
    ("ら", TWO_FINGERS),
    ("り", THREE_FINGERS),
    ("る", FOUR_FINGERS_COMPACT),
    ("れ", OPEN_HAND_WIDE),
    ("ろ", FIST),
    # わ行
    ("わ", THUMB_UP),
    ("を", LITTLE_FINGER),
    ("ん", INDEX_FINGER),
)

DEFAULT_RULES: Tuple[FingerspellingRule, ...] = tuple(
    FingerspellingRule(label, shape) for label, shape in _TABLE
)


def shadowed_labels(rules: Sequence[FingerspellingRule] = DEFAULT_RULES) -> List[str]:
    """
    Labels that can never be returned because an earlier entry uses the
    same shape rule and therefore always ties with them.
    """
    seen = set()
    shadowed = []
    for rule in rules:
        if rule.shape in seen:
            shadowed.append(rule.label)
        else:
            seen.add(rule.shape)
    return shadowed


def reachable_labels(rules: Sequence[FingerspellingRule] = DEFAULT_RULES) -> List[str]:
    """Labels that own the first occurrence of their shape rule."""
    hidden = set(shadowed_labels(rules))
    return [rule.label for rule in rules if rule.label not in hidden]


def rules_for_shape(shape: ShapeRule,
                    rules: Sequence[FingerspellingRule] = DEFAULT_RULES) -> List[str]:
    """Labels bound to ``shape``, in table order."""
    return [rule.label for rule in rules if rule.shape is shape]
