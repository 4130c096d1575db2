"""The 46 JSL fingerspelling labels in gojuon order."""

from typing import Dict, Tuple

ROW_LABELS: Dict[str, Tuple[str, ...]] = {
    "あ行": ("あ", "い", "う", "え", "お"),
    "か行": ("か", "き", "く", "け", "こ"),
    "さ行": ("さ", "し", "す", "せ", "そ"),
    "た行": ("た", "ち", "つ", "て", "と"),
    "な行": ("な", "に", "ぬ", "ね", "の"),
    "は行": ("は", "ひ", "ふ", "へ", "ほ"),
    "ま行": ("ま", "み", "む", "め", "も"),
    "や行": ("や", "ゆ", "よ"),
    "ら行": ("ら", "り", "る", "れ", "ろ"),
    "わ行": ("わ", "を", "ん"),
}

FINGERSPELLING_LABELS: Tuple[str, ...] = tuple(
    label for row in ROW_LABELS.values() for label in row
)

# Hershey fonts in OpenCV have no kana glyphs
ROMAJI: Dict[str, str] = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "を": "wo", "ん": "n",
}


def romanize(label: str) -> str:
    """Romanized form of a label; empty string for the empty label."""
    return ROMAJI.get(label, label)
