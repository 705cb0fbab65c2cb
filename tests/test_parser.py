import pytest

from minish.parser import Segment, Token, TokenType, build_segments, build_tokens


def test_types_of_plain_words():
    tokens = build_tokens(["ls", "-l", "dir"], env={})
    assert [t.type for t in tokens] == [TokenType.CMD, TokenType.FLAG, TokenType.ARG]
    assert [t.text for t in tokens] == ["ls", "-l", "dir"]


def test_first_word_is_command_even_with_dash():
    tokens = build_tokens(["-x", "y"], env={})
    assert tokens[0].type is TokenType.CMD
    assert tokens[1].type is TokenType.ARG


def test_dollar_word_is_expanded():
    env = {"HOME": "/home/user"}
    tokens = build_tokens(["echo", "$HOME"], env=env)
    assert tokens[1] == Token("/home/user", TokenType.ARG)


def test_flag_decided_from_original_word():
    tokens = build_tokens(["echo", "$X"], env={"X": "-n"})
    assert tokens[1].text == "-n"
    assert tokens[1].type is TokenType.ARG


def test_undefined_variable_gives_empty_token():
    tokens = build_tokens(["echo", "$MISSING", "z"], env={})
    assert tokens[1] == Token(None, TokenType.NO)
    assert tokens[2].type is TokenType.ARG


def test_single_quoted_dollar_not_expanded():
    tokens = build_tokens(["echo", "'$HOME'"], env={"HOME": "/h"})
    assert tokens[1].text == "'$HOME'"


def test_empty_words():
    assert build_tokens([], env={}) == []


def test_segments_pair_parts_with_pipes():
    segments = build_segments(["ls ", " wc", " cat"], [0, 1, 2])
    assert segments == [Segment("ls ", 0), Segment(" wc", 1), Segment(" cat", 2)]
    assert all(seg.tokens == [] for seg in segments)


def test_extra_pipes_are_ignored():
    segments = build_segments(["a"], [0, 1])
    assert [s.pipe for s in segments] == [0]


def test_missing_pipe_kinds_raise():
    with pytest.raises(ValueError):
        build_segments(["a", "b"], [0])