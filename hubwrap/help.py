"""The help command: man pages, plain help text and hub's own command list."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

from hubwrap import cmd as cmdmod
from hubwrap.alias import CMD_ALIAS
from hubwrap.args import Args
from hubwrap.commands import Command
from hubwrap.runner import Runner

USAGE = """
help hub
help <COMMAND>
help hub-<COMMAND> [--plain-text]
"""

LONG = """Show the help page for a command.

## Options:
	hub-<COMMAND>
		Use this format to view help for hub extensions to an existing git command.

	--plain-text
		Skip man page lookup mechanism and display plain help text.

## Man lookup mechanism:

On systems that have 'man', help pages are looked up in these directories
relative to 'hub' install prefix:

* 'man/<command>.1'
* 'share/man/man1/<command>.1'

On systems without 'man', same help pages are looked up with a '.txt' suffix.

## See also:

hub(1), git-help(1)
"""

HELP_TEXT = """
These GitHub commands are provided by hub:

   pull-request   Open a pull request on GitHub
   fork           Make a fork of a remote repository on GitHub and add as remote
   create         Create this repository on GitHub and add GitHub as origin
   browse         Open a GitHub page in the default browser
   compare        Open a compare page on GitHub
   release        List or create releases (beta)
   issue          List or create issues (beta)
   ci-status      Show the CI status of a commit
"""


def lookup_cmd(name: str, runner=None):
    """The command whose help to show, or None to defer to git's help."""
    runner = runner if runner is not None else CMD_RUNNER
    if name.startswith("hub-"):
        return runner.lookup(name[len("hub-"):])
    command = runner.lookup(name)
    if command is not None and not command.git_extension:
        return command
    return None


def custom_commands(runner=None) -> list[str]:
    """Sorted names of commands that hub adds on top of git."""
    runner = runner if runner is not None else CMD_RUNNER
    return sorted(
        name
        for name, command in runner.all().items()
        if not command.git_extension and not name.startswith("--")
    )


def local_man_page(name: str, install_prefix: str) -> str:
    """Path of the man page under the install prefix; raises if absent."""
    man_path = os.path.join(install_prefix, "man", name)
    try:
        os.stat(man_path)
        return man_path
    except OSError:
        pass
    man_path = os.path.join(install_prefix, "share", "man", "man1", name)
    os.stat(man_path)
    return man_path


def _command_path(program: str) -> str:
    if not program:
        raise FileNotFoundError("no program path given")
    if os.sep in program or (os.altsep and os.altsep in program):
        if not os.path.exists(program):
            raise FileNotFoundError(f"executable file not found: {program}")
        return os.path.abspath(program)
    found = shutil.which(program)
    if found is None:
        raise FileNotFoundError(f"executable file not found in $PATH: {program}")
    return os.path.abspath(found)


def display_man_page(man_page: str, args: Args) -> None:
    """Show a local man page and exit; raises OSError when none is found."""
    man_program = shutil.which("man") or ""
    if not man_program:
        man_page += ".txt"
        man_program = os.environ.get("PAGER") or "less -R"

    program_path = _command_path(args.program_path)
    install_prefix = os.path.join(os.path.dirname(program_path), "..")
    man_file = local_man_page(man_page, install_prefix)

    man = cmdmod.new(man_program).with_arg(man_file)
    try:
        man.run()
    except (OSError, subprocess.CalledProcessError):
        raise SystemExit(1) from None
    raise SystemExit(0)


def _print_usage() -> None:
    try:
        cmdmod.Cmd("git", ["help"]).spawn()
    except (OSError, subprocess.CalledProcessError) as err:
        print(err, file=sys.stderr)
        raise SystemExit(1) from err
    print(HELP_TEXT, end="")


def run_help(help_cmd: Command, args: Args) -> None:
    """Show help for hub or one of its commands, or leave args to git help."""
    if args.is_params_empty():
        _print_usage()
        raise SystemExit(0)

    if args.has_flags("-a", "--all"):
        args.after("echo", "\nhub custom commands\n")
        args.after("echo", " ", "  ".join(custom_commands()))
        return

    command = args.first_param()

    if command == "hub":
        try:
            display_man_page("hub.1", args)
        except OSError as err:
            print(err, file=sys.stderr)
            raise SystemExit(1) from err

    found = lookup_cmd(command)
    if found is not None:
        if not args.has_flags("--plain-text"):
            try:
                display_man_page(f"hub-{found.name()}.1", args)
            except OSError:
                pass
        print(found.help_text())
        raise SystemExit(0)


CMD_HELP = Command(run=run_help, git_extension=True, usage=USAGE, long=LONG)

CMD_RUNNER = Runner()
CMD_RUNNER.use(CMD_HELP, "--help")
CMD_RUNNER.use(CMD_ALIAS)