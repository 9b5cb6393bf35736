import pytest

from cedarsite.reading_time import calculate_reading_time


@pytest.mark.parametrize("content", ["", None])
def test_empty_is_one_minute(content):
    assert calculate_reading_time(content) == 1


def test_short_text_is_one_minute():
    assert calculate_reading_time("<p>Hello world</p>") == 1


def test_japanese_rate():
    assert calculate_reading_time("あ" * 400) == 1
    assert calculate_reading_time("あ" * 401) == 2
    assert calculate_reading_time("漢" * 1200) == 3


def test_english_rate():
    assert calculate_reading_time(" ".join(["word"] * 600)) == 3


def test_mixed_rates_are_summed():
    # 200 chars (0.5 min) + 100 words (0.5 min) -> exactly 1, then 1 more word tips it over
    text = "カ" * 200 + " " + " ".join(["go"] * 100)
    assert calculate_reading_time(text) == 1
    assert calculate_reading_time(text + " more") == 2


def test_tags_are_not_counted():
    body = "<div class='article'><span>x</span></div>\n" * 500
    assert calculate_reading_time(body) == 3  # 500 "x" words only
