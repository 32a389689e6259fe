# hubwrap

Building blocks for a command-line tool that wraps `git`. The package
parses a git command line into global flags, a command and its
parameters, rewrites GitHub-style shorthands in those parameters, and
runs the resulting chain of commands. It has no third-party
dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Shell alias helper

The package installs one command, `hubwrap-alias`, which prints how to
wrap `git` in your shell:

```
hubwrap-alias bash
hubwrap-alias -s zsh
```

Without a shell name the value of `$SHELL` is used; if that is empty too,
an error is printed and the exit status is 1. Supported shells are bash,
zsh, sh, ksh, csh, tcsh and fish; any other shell is an error. Without
`-s` the output names the profile file to edit and the `eval` line to add
to it. With `-s` the output is the alias line itself (`alias git=hub`, or
`alias git hub` for csh and tcsh). `-h` prints the help text.

## Library overview

- `hubwrap.cmd`: `Cmd`, a program name plus arguments. `with_arg()` and
  `with_args()` append and chain; `combined_output()`, `success()`,
  `spawn()` and `exec()` run it; `run()` replaces the current process
  (spawns on Windows). `new()` splits a shell-quoted string,
  `new_with_array()` takes a sequence.
- `hubwrap.args`: `new_args()` splits a raw argument list into global
  flags (`-c`/`-C` take a value; `--noop` is removed and sets `noop`),
  the command and its parameters. `Args` edits the parameters
  (`insert_param()`, `remove_param()`, `replace_param()`, `words()` …),
  queues commands with `before()` and `after()`, and gives the whole
  chain with `commands()`.
- `hubwrap.flags`: `FlagSet` with long and short flags of type bool,
  string, unsigned integer or a custom value, flags mixed with plain
  arguments, and `--` ending flag parsing. Value types `StringSliceValue`,
  `MapValue` and `ListValue`. Errors raise `FlagError`; `-h`/`--help`
  with no such flag defined raises `HelpRequested`.
- `hubwrap.commands`: `Command`, with its own `FlagSet`, sub-commands
  (`use()`, `lookup_sub_command()`), `synopsis()` and `help_text()`.
- `hubwrap.runner`: `Runner` registers commands and `call()` runs one,
  then prints the command chain (when `noop` is set) or executes it,
  returning an `ExecError` with an `exit_code`. `split_alias_cmd()` splits
  a git alias expansion.
- `hubwrap.templates`: `render_pull_request_tpl()` and
  `render_release_tpl()` build editor messages.
- `hubwrap.messages`: `read_msg()` splits a message into a one-line title
  and a body; `read_msg_from_file()` reads one from a file or from
  standard input (`"-"`).
- `hubwrap.transforms`: helpers for rewriting arguments:
  `parse_compare_range()`, `range_query_escape()`,
  `parse_repo_name_owner()`, `parse_remote_names()`,
  `sanitize_checkout_flags()`, `replace_checkout_param()`,
  `parse_clone_name_and_owner()` and the `-p`/`-g` flag takers.
- `hubwrap.help`: `run_help()`, `lookup_cmd()`, `custom_commands()` and
  local man page lookup under `man/` or `share/man/man1/` of the install
  prefix.
- `hubwrap.updater`: `Updater.time_to_update()` with an RFC 3339
  timestamp file, `download_file()` and `unzip_executable()`.

## Examples

```python
from hubwrap.args import new_args

args = new_args(["-c", "key=value", "status"])
print(args.to_cmd())           # git -c key=value status
```

```python
from hubwrap.messages import read_msg

title, body = read_msg("my pull\ntitle\n\nmy description")
# title == "my pull title", body == "my description"
```

```python
from hubwrap.transforms import parse_compare_range

parse_compare_range("1.0..2.0")  # "1.0...2.0"
```

```python
from hubwrap.templates import render_release_tpl

print(render_release_tpl("Creating", "#", "1.0", "owner/project", "master"))
```

Set `HUB_VERBOSE` to any non-empty value to have every command echoed to
standard error before it runs.

## What this package does not do

- It does not talk to the GitHub API. There are no commands that create
  pull requests, issues, releases, forks or repositories, and none that
  open pages in a browser or report CI status, even though the help text
  in `hubwrap.help` lists them.
- The argument helpers in `hubwrap.transforms` only rewrite parameters;
  nothing here looks up pull requests or repositories to complete a
  checkout, merge, clone, fetch, remote or init.
- There is no top-level wrapper command that replaces `git`; the registry
  in `hubwrap.help` holds only the help and alias commands, and the only
  installed command is `hubwrap-alias`.
- The updater checks timestamps, downloads and unpacks archives, but
  does not install a new executable or read auto-update settings from git
  configuration.