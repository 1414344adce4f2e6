import pytest

from pushswap.strings import (
    CopyResult,
    strcat,
    strchr,
    strcmp,
    strcpy,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strndup,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "push swap"])
def test_strlen_matches_len_without_nul(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


def test_strchr_finds_first():
    assert strchr("banana", "a") == "banana".index("a")


def test_strchr_accepts_code():
    assert strchr("banana", ord("n")) == "banana".index("n")


def test_strchr_missing():
    assert strchr("banana", "z") is None


def test_strchr_nul_gives_terminator():
    assert strchr("abc", 0) == len("abc")
    assert strchr("abc", "\0") == len("abc")


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0c", "c") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    assert strrchr("banana", "a") == "banana".rindex("a")


def test_strrchr_missing_and_terminator():
    assert strrchr("banana", "q") is None
    assert strrchr("banana", 0) == len("banana")


def test_strnstr_found_within_limit():
    assert strnstr("lorem ipsum", "ipsum", len("lorem ipsum")) == "lorem ipsum".index("ipsum")


def test_strnstr_match_crossing_limit_is_not_found():
    assert strnstr("lorem ipsum", "ipsum", len("lorem ipsu")) is None


def test_strnstr_empty_needle():
    assert strnstr("", "", 0) == 0
    assert strnstr("abc", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_difference():
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("abd", "abc") == ord("d") - ord("c")


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


@pytest.mark.parametrize("a,b", [("apple", "apples"), ("b", "a"), ("x", "x"), ("", "z")])
def test_strcmp_sign_agrees_with_ordering(a, b):
    result = strcmp(a, b)
    assert (result > 0) == (a > b)
    assert (result < 0) == (a < b)


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", len("abc")) == 0
    assert strncmp("abcX", "abcY", len("abcX")) == ord("X") - ord("Y")


def test_strncmp_zero_and_negative():
    assert strncmp("a", "b", 0) == 0
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strlcpy_truncates():
    result = strlcpy("", "hello", 3)
    assert result == CopyResult("he", len("hello"))


def test_strlcpy_full_copy():
    assert strlcpy("old", "hi", 10) == CopyResult("hi", len("hi"))


def test_strlcpy_zero_size_keeps_dest():
    assert strlcpy("old", "hello", 0) == CopyResult("old", len("hello"))


def test_strlcat_appends_within_room():
    result = strlcat("ab", "cdef", 5)
    assert result.text == "abcd"
    assert result.length == len("ab") + len("cdef")


def test_strlcat_no_room():
    result = strlcat("abc", "de", 2)
    assert result.text == "abc"
    assert result.length == 2 + len("de")


def test_strlcat_large_size_is_plain_concat():
    result = strlcat("ab", "cd", 100)
    assert result.text == "ab" + "cd"


def test_strcpy_replaces():
    assert strcpy("anything", "new") == CopyResult("new", len("new"))


def test_strcat_appends():
    assert strcat("push", "_swap") == CopyResult("push_swap", len("_swap"))


def test_strdup_round_trip():
    assert strdup("hello") == "hello"
    assert strdup("he\0llo") == "he"


def test_strndup_copies_prefix():
    assert strndup("hello", 3) == "hel"
    assert strndup("hello", 0) == ""


def test_strndup_errors():
    with pytest.raises(ValueError):
        strndup("hi", 5)
    with pytest.raises(ValueError):
        strndup("hi", -1)