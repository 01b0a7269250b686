# pipex

`pipex` runs commands joined by pipes. It reads from an input file and writes
to an output file, like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

It works on POSIX systems.

## Installation

```sh
pip install .
```

## Two commands

```sh
pipex infile "grep error" "wc -l" outfile
```

This takes exactly four arguments: the input file, the first command, the
second command and the output file. The output file is created with mode
`0644` if it does not exist and truncated if it does; this happens even when
the input file cannot be opened. Any other number of arguments is an error:

```
Error: Invalid arguments. Usage: ./pipex file1 cmd1 cmd2 file2
```

## Any number of commands

```sh
pipex-bonus infile "cat" "sort" "uniq -c" "sort -rn" outfile
```

Every argument between the input file and the output file is a command, and
each one's output feeds the next. At least four arguments are needed;
fewer gives:

```
Error: Too few arguments. Usage: ./pipex file1 cmd1 cmd2 file2
```

### Here-documents

If the first argument starts with `here_doc`, the second argument is a
limiter. Lines are read from standard input until a line that is exactly the
limiter (or until end of input), and those lines are fed into the pipeline.
The output file is truncated in this mode as well.

In this mode the first command after the limiter is **not run**: the
here-document goes straight to the second command. So in

```sh
pipex-bonus here_doc END "ignored" "tr a-z A-Z" outfile
```

only `tr a-z A-Z` runs, reading the here-document and writing to `outfile`.

## How commands are run

A command string is split on spaces, and empty words are dropped. Quotes are
not interpreted, so `"grep 'a b'"` gives the arguments `grep`, `'a` and `b'`.
The first word is looked up in each directory listed in `PATH` (empty entries
are skipped), and the first executable match is run with the current
environment. Names are always looked up this way, so a command given with a
path of its own, such as `/bin/ls`, is not found. If no match is found, or
`PATH` is not set, that command is not started and this line goes to
standard error:

```
Failed to obtain command path: No such file or directory
```

The other commands in the pipeline still run.

## Errors and exit status

The commands exit with status 1 when the argument count is wrong
(message on standard output) and when the input file cannot be opened or the
output file cannot be created (`Error: ` followed by the system's explanation,
on standard output). Once the pipeline has been started the commands exit
with status 0, whatever the exit statuses of the commands that were run.

## Library use

The parts are plain Python modules:

- `pipex.config`: `parse_pipex` and `parse_npipex` turn an argument list
  (without the program name) into a `Pipex` or `NPipex` configuration, both of
  which can be closed or used as context managers; `extract_path_dirs` reads
  `PATH` from an environment mapping.
- `pipex.command`: `split_command`, `find_executable` and `resolve_command`.
- `pipex.pipeline`: `run_pipe` and `run_npipe` run a configuration and return
  the exit status of each command that was run (1 for one that could not be
  started); `read_heredoc` collects a here-document from a stream of lines.
- `pipex.errors`: `PipexError`, `UsageError` and `SystemFailure`, and
  `report`, which writes an error's report line.
- `pipex.report`: `describe_pipex`, `describe_npipex` and `describe_tokens`
  return text dumps of configurations and token lists.
- `pipex.printf`: `format_printf` and `printf`, a small formatter for the
  `%c %s %p %d %i %u %x %X %%` conversions with the `- + space 0 #` flags,
  width and precision; also `utohex` and `ptoa`. Specifiers it cannot
  understand are written out as they stand.
- `pipex.fmtspec` and `pipex.render`: the specifier parser (`parse_spec`,
  `FormatSpec`) and the renderers (`render_int`, `render_ptr`, `render_str`)
  behind `format_printf`.

```python
from pipex.printf import format_printf

format_printf("[%-5d|%05.3x]", 42, 255)   # '[42   |000ff]'
```

## Running the tests

```sh
pip install ".[test]"
pytest
```