"""Command tokens and pipe segments built from split command lines."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from minish.expansion import expand_variables
from minish.quotes import has_char, has_dollar


class TokenType(enum.Enum):
    """Role of a word within a command."""

    NO = 0
    CMD = 1
    FLAG = 2
    ARG = 3


@dataclass
class Token:
    """One word of a command and its role.

    ``text`` is None when the word referenced an undefined variable; such a
    token has type ``NO``.
    """

    text: Optional[str]
    type: TokenType = TokenType.NO


@dataclass
class Segment:
    """The text of one pipeline stage and the pipe operator in front of it.

    ``pipe`` is 0 for the first stage, 1 after ``|`` and 2 after ``||``.
    """

    input: str
    pipe: int
    tokens: list[Token] = field(default_factory=list)


def _classify(index: int, word: str, text: Optional[str]) -> TokenType:
    if text is None:
        return TokenType.NO
    if index == 0:
        return TokenType.CMD
    if has_char(word, "-"):
        return TokenType.FLAG
    return TokenType.ARG


def build_tokens(
    words: Iterable[str], env: Optional[Mapping[str, str]] = None
) -> list[Token]:
    """Turn split words into tokens, expanding ``$NAME`` references.

    The first word is the command; a later word containing ``-`` (before
    expansion) is a flag; anything else is an argument. A word whose
    expansion fails becomes a token with no text and type ``NO``.
    """
    tokens: list[Token] = []
    for index, word in enumerate(words):
        text = expand_variables(word, env) if has_dollar(word) else word
        tokens.append(Token(text, _classify(index, word, text)))
    return tokens


def build_segments(parts: Sequence[str], pipes: Sequence[int]) -> list[Segment]:
    """Pair each pipeline part with the pipe kind that precedes it.

    Raises ValueError when there are fewer pipe kinds than parts.
    """
    if len(pipes) < len(parts):
        raise ValueError(
            f"{len(parts)} segments but only {len(pipes)} pipe kinds"
        )
    return [Segment(part, pipe) for part, pipe in zip(parts, pipes)]