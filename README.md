# pipex

`pipex` does what this shell line does:

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` and feeds it to the first command. It pipes that
command's output into the second command and writes the result to
`outfile`. The output file is created with mode `0644` if it does not
exist, and truncated if it does.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "grep foo" "wc -l" outfile
```

- It takes exactly four arguments. With any other count it prints
  `Error: Invalid argument` to standard error.
- Each command is split on spaces into words, and empty words are dropped.
- The program name is looked up in every directory listed in `PATH`, in
  order, and then as given. The first executable candidate that starts is
  used.
- If the input file cannot be opened, the output file cannot be opened, or
  the second command cannot be found, a message of the form
  `Error: No such file or directory` is printed to standard error.
- If the first command cannot be found, the error is reported and the
  second command still runs, reading empty input.
- When the second command runs, the exit status is that command's status.
  After any error the exit status is 0.

## Library use

```python
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep foo", "wc -l", "output.txt")
```

`run_pipeline(infile, first_command, second_command, outfile, environ=None)`
returns the second command's exit status. Without an `environ` it uses
`os.environ`. It raises `pipex.cli.PipelineError`, an `OSError`, when:

- the input file is missing,
- the output file cannot be opened, or
- the second command cannot be found.

`pipex.cli.main(argv=None)` is the command-line entry point.

`pipex.command` holds the pieces for running a single command:

- `extract_path(environ)`: the `PATH` directories, each ending in `/`.
  It returns an empty list when `PATH` is unset.
- `make_args(command)`: the command string split on spaces.
- `resolve_command(command, environ)`: the path of the executable file the
  command would run. It raises `CommandNotFoundError`, a
  `FileNotFoundError`, when there is none.
- `execute(command, environ, stdin=None, stdout=None)`: starts the command
  with the given streams and returns the running `subprocess.Popen`. It
  raises `CommandNotFoundError` if no candidate could be started.

## Helper modules

- `pipex.chars`: ASCII classification and case conversion. The functions
  are `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower`. Each accepts an int code or a one-character
  string.
- `pipex.memory`: byte-buffer operations. The functions are `memset`,
  `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc`.
  `memmove` works within a single buffer, taking a destination offset and a
  source offset.
- `pipex.text`: string operations. The functions are `strlen`, `strlcpy`,
  `strlcat`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `atoi`, `strdup`,
  `substr`, `strjoin`, `strtrim`, `split`, `itoa`, `strmapi` and
  `striteri`.
  - `strlcpy` and `strlcat` return a tuple of the new content and the
    length the full result would have had.
  - The search functions return an index or `None`.
  - `atoi` wraps to a signed 32-bit value.
  - `itoa` raises `OverflowError` outside that range.
- `pipex.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write to a text stream.
- `pipex.linkedlist`: a singly linked `LinkedList` of `Node` cells, with
  the following operations:
  - `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`,
  - `len()` and iteration over contents,
  - `delete_node`.

## Limitations

- Only two commands are joined. There is no support for longer pipelines
  or here-documents.
- Commands are split on plain spaces. Quotes, escapes, globs and variables
  are not interpreted.

## Running the tests

```sh
pip install ".[test]"
pytest
```