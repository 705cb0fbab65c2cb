# minish

`minish` is a small interactive shell front end. It reads command lines,
checks that quotes are balanced, splits each line into words and
redirection/pipe operators while keeping quoted text together, expands
`$NAME` environment variables (except inside single quotes), removes
delimiting quotes and classifies each word as a command, a flag or an
argument.

## Installing

```
pip install .
```

## Running the shell

```
minish
```

The prompt is `minishell $ `. For each line you type, the shell prints the
first split word, then the text of every word after expansion and quote
removal, one per line. Printing stops at a word that refers to an undefined
variable.

- A line with an unclosed quote prints `Quote is not closed`.
- A malformed line (for example an operator run such as `>>>`) prints
  `minishell: ` followed by the reason.
- Ctrl-C starts a fresh prompt; SIGQUIT is ignored while the shell runs.
- End of input (Ctrl-D) prints `exit` and leaves the shell.

## What it does not do

The shell only parses and echoes what you type. It does not run programs,
has no built-in commands, and does not carry out pipes or redirections:
`|`, `||`, `<`, `>`, `<<` and `>>` are recognised as tokens and nothing
more.

## Using it as a library

```python
from minish.splitting import minisplit, microsplit
from minish.quotes import has_unclosed_quote, strip_quotes
from minish.expansion import expand_variables
from minish.parser import build_tokens
from minish.shell import process_line

microsplit("ls -l 'my dir'|wc")        # ['ls', '-l', "'my dir'", '|', 'wc']
minisplit("a|b|c", "|")                # ['a', 'b', 'c']
has_unclosed_quote("echo 'oops")       # True
strip_quotes("'hello'")                # 'hello'
expand_variables("$HOME/bin", {"HOME": "/home/user"})  # '/home/user/bin'
expand_variables("$NOPE", {})          # None (undefined variable)
```

`minish.parser.build_tokens` turns split words into `Token` objects whose
`TokenType` is `CMD` for the first word, `FLAG` for later words holding a
`-`, `ARG` otherwise, and `NO` for a word whose expansion failed.
`build_segments` pairs pipeline parts with the pipe kinds returned by
`minish.pipes.pipe_kinds` (0 for the first stage, 1 after `|`, 2 after
`||`) as `Segment` objects.

`minish.shell.process_line` runs the whole parse on one line and returns the
lines it would display; `remove_quotes` strips quotes from a list of tokens;
`run(lines, out, env)` drives the read loop over any iterable of lines,
writing to the given stream and finishing with `exit`.

Supporting modules:

- `minish.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`.
- `minish.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, `atoi`, `itoa`.
- `minish.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on `bytearray` and `memoryview` buffers.
- `minish.linked`: `LinkedList`.
- `minish.output`: `format_printf` and `printf` (conversions `%c %s %p %d %i
  %u %x %X %%`, raising `FormatError` otherwise) and the `put_char_fd`,
  `put_str_fd`, `put_endl_fd`, `put_nbr_fd` writers.
- `minish.lines`: `LineReader` and `MultiLineReader` for reading file
  descriptors line by line.

## Running the tests

```
pip install .[test]
pytest
```