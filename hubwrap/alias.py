"""Shell instructions for wrapping git with hub."""

from __future__ import annotations

import os
import sys

from hubwrap.args import Args
from hubwrap.commands import Command
from hubwrap.flags import FlagError, FlagSet, HelpRequested

SUPPORTED_SHELLS = ("bash", "zsh", "sh", "ksh", "csh", "tcsh", "fish")

_PROFILES = {
    "bash": "~/.bash_profile",
    "zsh": "~/.zshrc",
    "ksh": "~/.profile",
    "fish": "~/.config/fish/config.fish",
    "csh": "~/.cshrc",
    "tcsh": "~/.tcshrc",
}

USAGE = "alias [-s] [<SHELL>]"

LONG = """Show shell instructions for wrapping git.

## Options
	-s
		Output shell script suitable for 'eval'.

	<SHELL>
		Specify the type of shell (default: "$SHELL" environment variable).

## See also:

hub(1)
"""


class AliasError(Exception):
    """Shell instructions could not be produced."""


class ShellNotDetected(AliasError):
    """No shell was given and none could be found in the environment."""

    def __init__(self, script: bool = False) -> None:
        cmd = "hub alias -s <shell>" if script else "hub alias <shell>"
        super().__init__(
            f"Error: couldn't detect shell type. Please specify your shell with `{cmd}`"
        )


class UnsupportedShell(AliasError):
    """The shell is not one hub knows how to configure."""

    def __init__(self, shell: str) -> None:
        super().__init__(
            "hub alias: unsupported shell\nsupported shells: " + " ".join(SUPPORTED_SHELLS)
        )
        self.shell = shell


def detect_shell(shell) -> str:
    """The supported shell's base name; None falls back to $SHELL."""
    if shell is None:
        shell = os.environ.get("SHELL", "")
    if not shell:
        raise ShellNotDetected()
    name = os.path.basename(shell)
    if name not in SUPPORTED_SHELLS:
        raise UnsupportedShell(name)
    return name


def alias_script(shell: str) -> str:
    """The alias line suitable for eval in the given shell."""
    name = detect_shell(shell)
    if name in ("csh", "tcsh"):
        return "alias git hub"
    return "alias git=hub"


def alias_instructions(shell: str) -> str:
    """Instructions telling the user what to add to their profile."""
    name = detect_shell(shell)
    profile = _PROFILES.get(name, "your profile")
    if name == "fish":
        evaluation = "eval (hub alias -s)"
    elif name in ("csh", "tcsh"):
        evaluation = 'eval "`hub alias -s`"'
    else:
        evaluation = 'eval "$(hub alias -s)"'
    return (
        f"# Wrap git automatically by adding the following to {profile}:\n\n"
        f"{evaluation}"
    )


def _render(shell, script: bool) -> str:
    resolved = shell if shell is not None else os.environ.get("SHELL", "")
    if not resolved:
        raise ShellNotDetected(script)
    return alias_script(resolved) if script else alias_instructions(resolved)


def _run_alias(command: Command, args: Args) -> None:
    shell = args.first_param() if not args.is_params_empty() else None
    try:
        output = _render(shell, bool(command.flag.get("script")))
    except AliasError as err:
        print(err, file=sys.stderr)
        raise SystemExit(1) from err
    print(output)
    raise SystemExit(0)


CMD_ALIAS = Command(run=_run_alias, usage=USAGE, long=LONG)
CMD_ALIAS.flag.add_bool("script", "s", False, "SCRIPT")


def main(argv=None) -> int:
    """Print alias instructions or script; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    flags = FlagSet("alias")
    flags.add_bool("script", "s", False, "SCRIPT")
    try:
        flags.parse(argv)
    except HelpRequested:
        print(CMD_ALIAS.help_text())
        return 0
    except FlagError as err:
        print(err, file=sys.stderr)
        print(CMD_ALIAS.synopsis(), file=sys.stderr)
        return 1

    rest = flags.args()
    shell = rest[0] if rest else None
    try:
        output = _render(shell, bool(flags.get("script")))
    except AliasError as err:
        print(err, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())