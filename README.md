# shellkit

Building blocks for a small shell. The package has an ordered environment
table and the usual built-in commands. It also has a buffered line reader and
a minimal C-style formatter.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Environment

`shellkit.environment.build_environment(envp, cwd)` turns `NAME=value`
strings, or a mapping, into an `Environment`. With no `envp` it reads
`os.environ`. It raises `SHLVL` by one. It sets `SHLVL` to `1` when the
variable is missing, longer than three characters, or outside 1–998. When
`envp` is empty, it builds a minimal environment with `PATH` and `PWD`. `PWD`
is `cwd`, or the process working directory if `cwd` is not given.

```python
from shellkit.environment import build_environment

env = build_environment(["HOME=/home/user", "SHLVL=2"], "/tmp")
env.get("SHLVL")           # "3"
env.set_or_add("EDITOR", "vi")
env.append("EDITOR", "m")  # EDITOR is now "vim"
env.env_lines()            # NAME=value lines in insertion order, as `env` prints
env.export_lines()         # `declare -x` lines sorted by name, as `export` prints
env.to_envp()              # ["HOME=/home/user", "SHLVL=3", "EDITOR=vim"]
```

A variable may exist without a value (`env.add("X", None)`). Such a variable
is left out of `to_envp()` and `env_lines()`. It is listed by
`export_lines()` without `=`.

The `Environment` class provides:

- `get`
- `in`
- `len`
- `names`
- `add`
- `set`
- `set_or_add`
- `append`
- `remove`

`is_valid_identifier(text)` checks the rules for variable names: a letter or
an underscore first, then letters, digits and underscores.

`split_assignment(entry)` splits at the first `=`. It raises `ValueError`
when there is no `=`.

`next_shlvl(value)` computes the new `SHLVL` on its own.

## Built-in commands

Every built-in takes a `Session` and the command's arguments, and returns the
exit status. The `Session` is defined in `shellkit.session`. It holds:

- the `Environment`;
- the last `status`;
- an `in_pipeline` flag;
- the `stdout` and `stderr` streams.

```python
import io

from shellkit.builtins import is_builtin, run_builtin
from shellkit.environment import build_environment
from shellkit.session import Session

session = Session(env=build_environment(["HOME=/home/user"], "/tmp"),
                  stdout=io.StringIO(), stderr=io.StringIO())

is_builtin("cd")                                    # True
run_builtin(session, ["export", "A=1", "B+=2"])     # 0
run_builtin(session, ["echo", "-nnn", "hello"])     # writes "hello" with no newline
run_builtin(session, ["ls"])                        # 1: not a built-in
```

Error messages are written to `session.stderr` with the prefix
`write_on_me: `.

The commands:

- **`echo`** (`shellkit.echo.echo`) joins its arguments with spaces. Leading
  arguments made of `-n` followed only by more `n`s suppress the trailing
  newline.
- **`cd`** (`shellkit.cd.cd`) changes the process working directory and keeps
  `PWD` and `OLDPWD` up to date. It takes no argument or `~` (go to `HOME`),
  `-` (go to `OLDPWD`), `..` (cut `PWD` at its last `/`), or a path. More
  than one argument is an error with status 1.
- **`pwd`** (`shellkit.session.pwd`) prints `PWD`, or the process working
  directory when `PWD` is unset.
- **`env`** (`shellkit.builtins.env_builtin`) prints every variable that has a
  value. Any argument is reported as `No such file or directory`, with
  status 127.
- **`export`** (`shellkit.export.export`) takes `NAME`, `NAME=value` and
  `NAME+=value`. With no arguments it lists the sorted `declare -x` lines.
  An invalid name is reported and gives status 1; the other arguments are
  still applied. `export_one` applies a single argument.
- **`unset`** (`shellkit.unset.unset`) removes the named variables.
- **`exit`** (`shellkit.shell_exit.exit_builtin`) raises
  `shellkit.session.ShellExit`, whose `status` is the status the shell should
  end with.
  - With no argument it uses the last status.
  - A numeric argument is reduced modulo 256.
  - A non-numeric argument, or one outside the signed 64-bit range, gives
    status 2.
  - With more than one numeric argument it reports `too many arguments`,
    sets the status to 1 and returns 1 without raising.
  - Unless `in_pipeline` is set, it writes `exit` to stderr first.

The helpers `is_numeric`, `fits_long_long` and `parse_long_long` are in
`shellkit.shell_exit`. `strip_trailing_slashes` and `parent_directory` are in
`shellkit.cd`. `split_n_flags` is in `shellkit.echo`.

## Reading lines

```python
from shellkit.linereader import LineReader, read_lines

with open("script.sh", "rb") as handle:
    for line in read_lines(handle.fileno(), 10):
        ...
```

`LineReader(fd, buffer_size)` reads `buffer_size` bytes at a time (10 by
default). `read_line()` returns one line with its newline kept. If the input
does not end in a newline, the last line is returned without one. At end of
input it returns `None`.

- A negative descriptor or a non-positive buffer size raises `ValueError`.
- A read error drops the buffered data and is raised again.
- Iterating over a `LineReader` yields the lines one by one.

## Formatting

`shellkit.cformat.format_string(fmt, *args)` handles the conversions
`%c %s %d %i %u %p %x %X %%`.

- `%s` of `None` gives `(null)`.
- `%p` of 0 gives `(nil)`.
- Integers are wrapped to 32 bits.
- An unknown conversion or a trailing lone `%` raises `ValueError`.
- Too few arguments raise `TypeError`.

`print_formatted(fmt, *args)` writes the result to standard output and
returns the number of characters written.

```python
from shellkit.cformat import format_string

format_string("%s has %d items (%x)", "list", 255, 255)
# "list has 255 items (ff)"
```

## What is not included

shellkit is a library. It has:

- no command-line program and no interactive prompt;
- no parser for command lines (quoting, variable expansion, redirections,
  here-documents);
- no pipelines;
- no way of running external programs.

`run_builtin` only dispatches already-split argument lists to the built-in
commands listed above.