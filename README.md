# minishell

The front end of a small shell. It has four parts:

- a lexer for command lines;
- checks that reject malformed input;
- pipe splitting that respects quotes;
- types that describe a command and its redirections.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Tokens

`minishell.tokens.tokenize(text)` turns a command line into a list of
`Token` objects. Each token has a `type` (a `TokenType`) and a `value`.
The types are:

| `TokenType` | What it is |
| --- | --- |
| `STRING_UNQUOTED` | an unquoted word |
| `STRING_DQ_CLOSED` | a closed double-quoted string |
| `STRING_DQ_UNCLOSED` | a double-quoted string that runs to the end of the line |
| `STRING_SQ_CLOSED` | a closed single-quoted string |
| `STRING_SQ_UNCLOSED` | a single-quoted string that runs to the end of the line |
| `INFILE` | `<` |
| `INFILE_HEREDOC` | `<<` |
| `OUTFILE` | `>` |
| `OUTFILE_APPEND` | `>>` |
| `PIPE` | `\|` |

```python
from minishell.tokens import tokenize

for token in tokenize('grep "a b" < in.txt | wc -l'):
    print(token.type, token.to_str())
```

Spaces between tokens are skipped. An unquoted word ends at a space, a
quote, `<`, `>` or `|`. The `value` of a quoted string is the text between
the quotes.

`Token.to_str()` gives back the text as it was written, with its quotes.
`Token.is_infile()` is true for `<` and `<<`, and `Token.is_outfile()` for
`>` and `>>`. `Token.is_string()` is true for unquoted words and closed
quoted strings. `TokenType.expands_vars()` says whether `$NAME` should be
expanded inside that kind of token. It is true for unquoted and
double-quoted text and false for single-quoted text.

`next_token(text, pos=0)` reads one token at a time. It returns the token
and the position just after it. When nothing is left it returns `None`
and the end position.

## Syntax checks and pipes

```python
from minishell.syntax import validate, split_pipes, ShellSyntaxError

try:
    if validate("ls -l | wc -l"):
        print("ok")
except ShellSyntaxError as exc:
    print(exc, exc.exit_status)

split_pipes("echo 'a|b' | cat")   # ["echo 'a|b' ", " cat"]
```

`validate(prompt)` returns `False` for a blank line and `True` for a line
that may be run. It raises `ShellSyntaxError` (with `exit_status` 2) for
any of these:

- unclosed quotes;
- a leading pipe;
- doubled pipes;
- a redirection with no target, or followed by another operator;
- `&`, which is not supported.

Operators inside quotes are ignored.

`split_pipes(prompt)` splits on the pipes outside quotes. It drops empty
pieces and keeps the spaces around each piece. `quotes_closed(text)` tells
whether every quotation mark is matched. `mask_quoted(prompt)` replaces
each character inside quotes with `*` and keeps the quotes themselves.

## Command types

`minishell.types` has three types:

- `FileType`, with the members `COMMON_FILE_IN`, `COMMON_FILE_OUT`,
  `HEREDOC_FILE` and `APPEND_FILE`.
- `RedirectFile`, with the fields `path`, `type` and `fd`. `fd` defaults to 0.
- `Command`, with the fields `command`, `args`, `infile` and `outfile`.

`Command.create(command, args, infile=None, outfile=None)` builds a
command that keeps its own copy of `args`.

## Helpers

`minishell.utils` has small helpers for string lists. A missing (`None`)
list counts as empty.

- `array_size(array)` counts the items.
- `array_dup(array)` copies the list, or returns `None` when the list is
  missing.
- `array_append(array, value)` returns a new list with `value` at the end.
- `array_print(array, stream=None)` writes one item per line. It writes to
  standard output unless a stream is given.
- `str_equal(first, second)` is true only when both strings are given and
  equal.

## What this package does not do

This package has no command to start and no interactive prompt, and it
does not run commands. It does not expand `$NAME` variables, provide
builtins such as `cd` or `export`, open redirection files or read
here-documents. It checks command lines, splits them into tokens and
pipeline pieces, and holds the types a runner would use.