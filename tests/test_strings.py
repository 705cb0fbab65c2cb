import pytest

from minish.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strchr_finds_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1 :]
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strncmp_equal_and_sign():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0
    assert strncmp("same", "same", 100) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("apple", "apricot", 4) == -strncmp("apricot", "apple", 4)


def test_strnstr_within_limit():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index : index + len("bar")] == "bar"


def test_strnstr_match_must_fit_in_limit():
    haystack = "foo bar baz"
    start = haystack.index("bar")
    assert strnstr(haystack, "bar", start + 2) is None
    assert strnstr(haystack, "bar", start + 3) == start


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strlcpy_truncates_and_reports_length():
    src = "hello"
    assert strlcpy(src, 3) == ("he", len(src))
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_appends_within_room():
    text, total = strlcat("ab", "cdef", 5)
    assert text == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_full_fit():
    text, total = strlcat("ab", "cd", 10)
    assert text == "ab" + "cd"
    assert total == len(text)


def test_strlcat_size_smaller_than_dest():
    text, total = strlcat("abcdef", "xy", 3)
    assert text == "abcdef"
    assert total == len("xy") + 3


def test_strlcat_zero_size():
    assert strlcat("ab", "cdef", 0) == ("ab", len("cdef"))


def test_strdup_returns_equal_string():
    assert strdup("copy me") == "copy me"
    assert strdup("") == ""


def test_substr_ranges():
    s = "minishell"
    assert substr(s, 4, 5) == "shell"
    assert substr(s, 4, 100) == "shell"
    assert substr(s, len(s), 3) == ""
    assert substr(s, 0, 0) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("mini", "shell") == "minishell"
    assert strjoin("", "x") == "x"


def test_strjoin_rejects_none():
    with pytest.raises(ValueError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("  -hello-  ", " -") == "hello"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("keep", "") == "keep"
    assert strtrim("a b", " ") == "a b"


def test_split_drops_empty_words():
    assert split("  a b  c ", " ") == ["a", "b", "c"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_join_round_trip():
    words = ["echo", "hello", "world"]
    assert split(",".join(words), ",") == words


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_uses_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("abcd", lambda i, c: c if i % 2 == 0 else "_") == "a_c_"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("hello")
    seen = []

    def visit(index, char):
        seen.append(index)
        return char.upper() if index == 0 else None

    striteri(chars, visit)
    assert "".join(chars) == "Hello"
    assert seen == list(range(len("hello")))