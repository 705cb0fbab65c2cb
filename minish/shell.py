"""The interactive prompt loop that parses and echoes command lines."""

from __future__ import annotations

import signal
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Optional, TextIO

from minish.output import format_printf
from minish.parser import Token, build_tokens
from minish.quotes import has_quote, has_unclosed_quote, strip_quotes
from minish.splitting import microsplit

try:
    import readline  # noqa: F401  (enables line editing and history for input())
except ImportError:  # pragma: no cover - platform without readline
    readline = None

PROMPT = "minishell $ "
UNCLOSED_MESSAGE = "Quote is not closed"
EXIT_MESSAGE = "exit"


def remove_quotes(tokens: Sequence[Token]) -> list[Token]:
    """Return the tokens with delimiting quotes stripped from their text.

    Processing stops at the first token without text; it and every token
    after it are returned unchanged.
    """
    result: list[Token] = []
    for position, token in enumerate(tokens):
        if token.text is None:
            result.extend(tokens[position:])
            break
        if has_quote(token.text):
            token = Token(strip_quotes(token.text), token.type)
        result.append(token)
    return result


def process_line(line: str, env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Parse one command line and return the lines it displays.

    The first split word is shown, then the text of each token after
    expansion and quote removal, stopping at a token whose expansion failed.
    Raises ValueError for a malformed line.
    """
    words = microsplit(line)
    shown = [format_printf("%s", words[0] if words else None)]
    tokens = remove_quotes(build_tokens(words, env))
    for token in tokens:
        if token.text is None:
            break
        shown.append(token.text)
    return shown


def run(
    lines: Iterable[str], out: TextIO, env: Optional[Mapping[str, str]] = None
) -> None:
    """Process each input line, writing results to out, then write ``exit``."""
    for line in lines:
        if has_unclosed_quote(line):
            out.write(UNCLOSED_MESSAGE + "\n")
            continue
        try:
            shown = process_line(line, env)
        except ValueError as error:
            out.write(f"minishell: {error}\n")
            continue
        out.writelines(text + "\n" for text in shown)
    out.write(EXIT_MESSAGE + "\n")


def _prompt_lines() -> Iterator[str]:
    """Read lines at the prompt until end of input; Ctrl-C gives a fresh prompt."""
    while True:
        try:
            yield input(PROMPT)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell on standard input and output."""
    sigquit = getattr(signal, "SIGQUIT", None)
    previous = signal.signal(sigquit, signal.SIG_IGN) if sigquit is not None else None
    try:
        run(_prompt_lines(), sys.stdout)
        sys.stdout.flush()
    finally:
        if sigquit is not None:
            signal.signal(sigquit, previous)
    return 0