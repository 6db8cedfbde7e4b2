import pytest

from ingest.parser import ParsedVerse, _to_int, parse_verse_line


def test_parses_genesis_1_1():
    line = "Genesis 1:1 In the beginning God created the heavens and the earth."
    assert parse_verse_line(line) == ParsedVerse(
        book="Genesis",
        chapter=1,
        verse=1,
        text="In the beginning God created the heavens and the earth.",
    )


@pytest.mark.parametrize("line", ["", "In the beginning", "Genesis 1 1 no colon here"])
def test_lines_without_colon_yield_nothing(line):
    assert parse_verse_line(line) is None


@pytest.mark.parametrize("line", [
    "not a verse: line",
    "Genesis 1:1",
    "Genesis one:1 text",
    "Chapter 1: The Creation",
    " Genesis 1:1 leading space before the book",
])
def test_colon_lines_with_wrong_shape_yield_nothing(line):
    assert parse_verse_line(line) is None


def test_leading_whitespace_in_text_is_trimmed():
    parsed = parse_verse_line("John 3:16     For God so loved the world.")
    assert parsed.text == "For God so loved the world."


def test_multi_digit_chapter_and_verse():
    parsed = parse_verse_line("Psalms 119:176 I have gone astray like a lost sheep;")
    assert (parsed.book, parsed.chapter, parsed.verse) == ("Psalms", 119, 176)


def test_book_token_may_contain_punctuation():
    parsed = parse_verse_line("Song_of_Solomon 2:1 I am the rose of Sharon")
    assert parsed.book == "Song_of_Solomon"


def test_text_keeps_later_colons():
    parsed = parse_verse_line("Genesis 1:3 And God said: Let there be light")
    assert parsed.text == "And God said: Let there be light"


def test_whitespace_only_text_yields_nothing():
    assert parse_verse_line("Genesis 1:1    ") is None


def test_parsing_is_repeatable():
    line = "John 11:35 Jesus wept."
    assert parse_verse_line(line) == parse_verse_line(line)


@pytest.mark.parametrize("value, expected", [("12", 12), ("x", 0), ("", 0)])
def test_unconvertible_numbers_become_zero(value, expected):
    assert _to_int(value) == expected
