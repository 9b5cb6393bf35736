"""Reading-time estimate for mixed Japanese/English HTML content."""

import math
import re

_TAG = re.compile(r"<[^>]*>")
# Hiragana, katakana, CJK ideographs, full-width forms
_JAPANESE_CHAR = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF\uFF00-\uFFEF]")
_ENGLISH_WORD = re.compile(r"[a-zA-Z]+")

JAPANESE_CHARS_PER_MINUTE = 400
ENGLISH_WORDS_PER_MINUTE = 200


def calculate_reading_time(content: str | None) -> int:
    """Return estimated reading time in whole minutes (at least 1).

    Japanese is counted per character and English per word; the two
    rates are summed before rounding up.
    """
    if not content:
        return 1

    text = _TAG.sub("", content)
    japanese_chars = len(_JAPANESE_CHAR.findall(text))
    english_words = len(_ENGLISH_WORD.findall(text))

    minutes = (
        japanese_chars / JAPANESE_CHARS_PER_MINUTE
        + english_words / ENGLISH_WORDS_PER_MINUTE
    )
    return max(1, math.ceil(minutes))
