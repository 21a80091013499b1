# pipechain

`pipechain` runs a sequence of programs. It feeds the standard output of each program into the standard input of the next, the way a shell pipeline `a | b | c` does. Each program is described by a compact specification of five fields.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Each argument describes one command as five fields separated by spaces:

```
<program> <argument> <heredoc-delimiter> <open-fd> <append-fd>
```

- A field that begins with `NULL` is left unset.
- When the last two fields are set, they are read as integers. Unset integer fields become `-1`.
- A specification with fewer than five fields is an error. `pipechain` then reports it on standard error and exits with status 1.

Before anything runs, `pipechain` prints the parsed job. The output has a `CURRENT` header, followed by one block per command with its `Av`, `Arg`, `Eof`, `Open_fd` and `Append_fd` values. An unset delimiter is shown as `(null)`.

The commands then run in order, joined by pipes. The last command writes to the terminal.

```
pipechain "/usr/bin/cat notes.txt NULL NULL NULL" "/usr/bin/wc -l NULL NULL NULL"
pipechain "/usr/bin/ls -l NULL NULL NULL" "/usr/bin/wc -c NULL NULL NULL"
```

How programs are run:

- Each program is run with exactly one argument.
- The program is run by its path. A bare name is looked for in the current directory, not on `PATH`.
- If a program cannot be started, `execve: <reason>` is printed on standard error.
- `pipechain` exits with 0 once the job has been run, whatever the commands' own exit statuses.

## Library use

Parsing and running a job:

```python
from pipechain.command import parse_job, format_job
from pipechain.pipeline import run_pipeline

job = parse_job(["/usr/bin/ls -l NULL NULL NULL", "/usr/bin/wc -c NULL NULL NULL"])
print(format_job(job), end="")
statuses = run_pipeline(job)   # exit status of every command, in order
```

The `pipechain.command` module:

- `parse_command` turns one specification into a `Command` dataclass with the fields `program`, `arg`, `eof`, `open_fd` and `append_fd`, plus an `eof_length` property.
- `optional_field` and `optional_int` handle the `NULL` markers.

The `pipechain.pipeline` module:

- `run_command` starts a single command with the given input and output descriptors and environment. It waits for the command and returns its exit status, or 1 if the command could not be started.
- `main(argv=None)` is the command-line entry point.

Heredocs and files, in `pipechain.heredoc`:

- `collect_heredoc(delimiter, source=None, prompt=None, path="tmp_heredoc")` copies lines into `path` until it meets a line that is exactly the delimiter followed by a newline. It writes the prompt `"> "` before each line. By default it reads standard input and prompts on standard output.
- `replay_heredoc(output_fd, path="tmp_heredoc")` writes the saved file to a descriptor, deletes it, and returns the number of bytes written. It returns 0 if the file is missing.
- `open_file` and `open_append` open a file for reading and writing, creating it if needed. `open_append` opens it in append mode.

Reading lines from a raw file descriptor, in `pipechain.lines`:

```python
from pipechain.lines import LineReader

for line in LineReader(fd, 10):
    ...
```

- Lines keep their trailing newline.
- `readline()` returns `None` at end of input.
- Descriptors outside 0–4096 and buffer sizes below 1 raise `ValueError`.

## Helper modules

| Module | What it provides |
| --- | --- |
| `pipechain.chars` | `is_alpha`, `is_digit`, `is_digit_str`, `is_alnum`, `is_alnum_str`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. They take an integer code or a one-character string and follow ASCII rules. |
| `pipechain.numbers` | `atoi` and `atol` use C-style lenient parsing and wrap at 32 and 64 bits. `itoa` and `ltoa` format numbers at those widths. |
| `pipechain.memory` | Byte buffer operations: `memset`, `bzero`, `memcpy`, `memmove` (within one buffer, by offsets), `memchr`, `memcmp`, `calloc`. |
| `pipechain.strings` | `strncmp`, `strchr`, `strrchr`, `strnstr`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat`. The search functions return indices or `None`. `strlcpy` and `strlcat` return the text and the length they tried to create. |
| `pipechain.linked` | `LinkedList` of `Node` cells, with `push_front`, `push_back`, `last`, `remove`, `clear`, `for_each`, `map`, `len()` and iteration. |
| `pipechain.output` | `put_char`, `put_str`, `put_endl` and `put_number` write to a stream (standard output by default). `format_hex`, `format_pointer` and `format_unsigned` format numbers. `format_printf` and `printf` support `%c %s %p %d %i %u %x %X %%`. |

## What it does not do

- `pipechain` is not a shell. There is no quoting, no globbing, no `PATH` lookup, and only one argument per program.
- The heredoc delimiter and the two descriptor fields of a specification are parsed and printed, but running a job does not act on them. No heredoc is read and no file redirection is applied.
- The helpers in `pipechain.heredoc` exist for use on their own.