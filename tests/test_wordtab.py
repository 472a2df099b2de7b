import pytest

from minixpm.wordtab import find_substring, find_unquoted, split_words


@pytest.mark.parametrize(
    "text, needle",
    [
        ("hello world", "world"),
        ("abcabc", "ca"),
        ("xyz", "x"),
        ("a*/b*/", "*/"),
    ],
)
def test_find_substring_locates_first_occurrence(text, needle):
    pos = find_substring(text, needle, len(text))
    assert text[pos : pos + len(needle)] == needle
    assert needle not in text[: pos + len(needle) - 1]


def test_find_substring_missing_needle():
    assert find_substring("hello", "xyz", 5) == -1


def test_find_substring_needle_longer_than_limit():
    assert find_substring("hello world", "world", 3) == -1


def test_find_unquoted_skips_quoted_region():
    text = '"ab" ab'
    pos = find_unquoted(text, "ab", len(text))
    assert text[pos : pos + 2] == "ab"
    assert pos > text.rindex('"')


def test_find_unquoted_all_quoted_is_missing():
    text = '"/* inside */"'
    assert find_unquoted(text, "/*", len(text)) == -1


def test_find_unquoted_matches_plain_text_like_find_substring():
    text = "x = 1; /* note */"
    assert find_unquoted(text, "/*", len(text)) == find_substring(text, "/*", len(text))


def test_find_unquoted_after_closed_quote():
    text = '"a" // b'
    pos = find_unquoted(text, "//", len(text))
    assert text[pos:].startswith("// b")


def test_find_unquoted_limit():
    assert find_unquoted("abc", "abc", 2) == -1


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_other_characters():
    assert split_words("16 16 2 1") == ["16", "16", "2", "1"]