# pipex

`pipex` reads an input file, passes it through a chain of commands and writes
the output of the last command to an output file. It does the same job as this
shell line:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" [... "cmdN args"] outfile
```

You must give at least two commands. Each command is split on spaces, and runs
of spaces are treated as one. A command name that names an existing file is
used as it is. Otherwise `pipex` looks for it in each directory of the search
path in turn.

Examples:

```sh
pipex text.txt "grep k" "cat" out.txt
pipex text.txt "grep 5" "cat -e" "wc -l" out.txt
```

The output file is created with mode `0644`, or truncated if it already exists.
The exit status is the exit status of the last command in the chain; a last
command that was killed by a signal counts as status 0.

### Errors

These messages are printed to standard error:

- `Invalid number of arguments`: fewer than two commands were given. `pipex`
  exits with status 1.
- `Infile or outfile error`: one of the files could not be opened. `pipex`
  exits with status 1.
- `Path error`: no environment entry contains `PATH=`. `pipex` exits with
  status 1.
- `command not found`: a command could not be found. That stage ends with
  status 127. The other stages still run, and the stage after it reads an
  empty input.
- `Execve error`: a command was found but could not be started. That stage
  ends with status 1.

If the failing stage is the last one, its status becomes the exit status of
`pipex`.

## Library use

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("text.txt", ["grep is", "wc -l"], "count.txt", os.environ)
```

`run_pipeline(infile, commands, outfile, env=None)` returns the exit status of
the last command. `env` is the environment that the commands get and that is
searched for the path. When it is left out, the current process environment is
used. If there are no commands, if a file cannot be opened, or if there is no
path, it raises `pipex.paths.PipexError`. The exception has `message` and
`status` attributes.

`pipex.pipeline.main(argv=None)` is the command-line entry. It returns the exit
status instead of exiting.

`pipex.paths` provides these:

- `find_path(env)` takes a mapping or a sequence of `KEY=VALUE` strings. It
  finds the first entry whose text contains `PATH=` and returns the non-empty
  directories that follow, split on `:`.
- `find_cmd_path(root_paths, cmd)` returns `cmd` itself if such a file exists.
  Otherwise it returns the first `root/cmd` that exists, or raises
  `PipexError` with status 127.
- The message constants `ERR_FILE`, `ERR_FORK`, `ERR_INPUT`, `ERR_PIPE`,
  `ERR_CMD`, `ERR_DUP`, `ERR_EXEC` and `ERR_PATH`.

`pipex.strutil` has string helpers: `split`, `substr`, `strtrim`, `strnstr`,
`strlcpy` and `strlcat`. `pipex.numbers` has number helpers: `atoi`, `itoa`,
`ull_base`, `hexlen` and `number_in_base`.

## What it does not do

`pipex` is not a shell. Commands are split on spaces only, so there is no
quoting, escaping, globbing, variable expansion or redirection inside a
command. There is no here-document mode and no appending to the output file.
The output file is always truncated.