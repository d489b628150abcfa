# minishell

The pieces of a small interactive shell, each usable on its own, and a set
of text, formatting and data-structure helpers that follow C library rules.

## Shell pieces

- `minishell.state` holds the session. `init_shell(environ=None)` builds a
  `ShellState` with the base name of the working directory, `USER`, the
  host name, the directories of `PATH` and an empty `History`.
  `ShellState.prompt_text()` returns the coloured `user@host:dir$ ` prompt,
  and `ShellState.refresh_cwd()` updates the directory name.
- `minishell.prompt.read_command(state, stream=None, out=None)` writes the
  prompt, reads one line of at most 128 characters and returns it without
  its last character, recording it in the history. A line of only spaces
  gives `None`; end of input raises `EOFError`.
- `minishell.history.History` numbers entered lines from 1; `add()` returns
  a `HistoryEntry(number, command)`, and `last`, iteration and `len()` are
  supported.
- `minishell.paths` has `split_path(value)` (split on `:`, dropping empty
  fields), `find_bin_path(cmd, paths)` (returns `dir/cmd` for the first
  directory that lists `cmd`, or `None`) and `is_valid_input(text)`.
- `minishell.lineedit.LineEditor` keeps a bounded input buffer and echoes
  edits to a terminal stream with cursor and clear-to-end-of-line escapes.

## Helpers

- `minishell.formatter`: `format_printf(fmt, *args)` and `printf(fmt, *args)`
  support `%c %s %p %d %i %u %x %X %o %n %f %%` with the `- + # 0 space`
  flags, width, precision, `*` and `l`/`h` lengths. A bad conversion raises
  `FormatError`, whose `partial` holds the text produced before it.
- `minishell.numconv`: `ftoa_rnd`, `ullitoa_base`, `itoa`, `atoi` (wraps to
  32 bits) and `atof`.
- `minishell.strutil`: `split`, `split_del`, `strtrim`, `substr`, `strjoin`,
  `strmapi`, `strnstr`, `strstr`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnrcmp`. Search functions return an index or `None`.
- `minishell.ctype`: ASCII classification (`isalpha`, `isdigit`, `isspace`,
  ...) and `tolower`/`toupper`, taking a character or a code.
- `minishell.linereader.LineReader`: reads a stream in fixed-size chunks
  and yields lines without their newline.
- `minishell.linkedlist.LinkedList`: `add_front`, `add_back`, `last`,
  `clear`, `iterate`, `map`.
- `minishell.mathutil`: `power(n, exponent)` and `int_sqrt(x)` (the root of
  a perfect square, else 0).
- `minishell.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.

## Installation

Install the package with pip. It has no runtime dependencies and needs
Python 3.10 or later.

## Examples

```python
import io
from minishell.state import init_shell
from minishell.prompt import read_command

state = init_shell({"USER": "demo", "PATH": "/usr/bin:/bin"})
line = read_command(state, io.StringIO("ls -l\n"), io.StringIO())
print(line)                          # "ls -l"
print(state.history.last)            # HistoryEntry(number=1, command='ls -l')
```

```python
import os
from minishell.paths import split_path, find_bin_path

paths = split_path(os.environ.get("PATH"))
print(find_bin_path("ls", paths))    # e.g. "/bin/ls", or None
```

```python
from minishell.formatter import format_printf
from minishell.strutil import split, strtrim

format_printf("%-6s|%05d|%.2f", "ab", 42, 3.14159)   # "ab    |00042|3.14"
split("a::b:c", ":")                                 # ["a", "b", "c"]
strtrim("--name--", "-")                             # "name"
```

## What the package does not do

There is no tokenizer or parser for command lines, no pipes or
redirections, no built-in commands and nothing that runs programs. The
package provides no command to start an interactive shell; it reads and
records command lines, but turning them into running processes is left to
the caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.