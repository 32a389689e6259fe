"""Commands and sub-commands with their own flags and help text."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from hubwrap.args import Args
from hubwrap.flags import FlagError, FlagSet

NAME_RE = r"[\w.][\w.-]*"
OWNER_RE = r"[a-zA-Z0-9][a-zA-Z0-9-]*"
NAME_WITH_OWNER_RE = rf"^(?:{NAME_RE}|{OWNER_RE}\/{NAME_RE})$"


class CommandError(Exception):
    """A command could not be dispatched."""


class UnknownSubcommandError(CommandError):
    """The first parameter names no known sub-command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"error: Unknown subcommand: {name}")
        self.subcommand = name


RunFunc = Callable[["Command", Args], None]


@dataclass(eq=False)
class Command:
    """A hub command: what it runs, how it is used and its flags."""

    run: Optional[RunFunc] = None
    usage: str = ""
    long: str = ""
    key: str = ""
    git_extension: bool = False
    flag: FlagSet = field(init=False, repr=False)
    _sub_commands: dict[str, "Command"] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.flag = FlagSet(self.name())

    def call(self, args: Args) -> None:
        """Dispatch to the matching sub-command, parse its flags and run it.

        Raises UnknownSubcommandError or FlagError when dispatch fails.
        """
        try:
            run_command = self.lookup_sub_command(args)
        except CommandError as err:
            print(err, file=sys.stderr)
            raise

        if not self.git_extension:
            run_command.parse_arguments(args)

        if run_command.run is not None:
            run_command.run(run_command, args)

    def _show_usage(self, err: FlagError) -> None:
        """Write a blank line and the synopsis to stderr after a flag error."""
        sys.stderr.write(f"\n{self.synopsis()}\n")

    def parse_arguments(self, args: Args) -> None:
        """Parse flags out of the params, leaving only plain arguments."""
        self.flag.name = self.name()
        self.flag.usage = self._show_usage
        self.flag.parse(args.params)
        if "--" in args.params:
            args.terminator = True
        args.params = self.flag.args()

    def flag_passed(self, name: str) -> bool:
        return self.flag.passed(name)

    def arg(self, idx: int) -> str:
        """The idx-th plain argument after parsing, or "" if there is none."""
        remaining = self.flag.args()
        return remaining[idx] if idx < len(remaining) else ""

    def use(self, sub_command: Command) -> None:
        self._sub_commands[sub_command.name()] = sub_command

    def synopsis(self) -> str:
        lines = []
        prefix = "Usage:"
        for line in self.usage.split("\n"):
            if line:
                lines.append(f"{prefix} hub {line}")
                prefix = "      "
        return "\n".join(lines)

    def help_text(self) -> str:
        return f"{self.synopsis()}\n\n{self.long.replace(chr(39), '`')}"

    def name(self) -> str:
        if self.key:
            return self.key
        usage_line = self.usage.strip().split("\n")[0]
        return usage_line.split(" ")[0]

    def runnable(self) -> bool:
        return self.run is not None

    def lookup_sub_command(self, args: Args) -> Command:
        """The command to run for args, consuming a sub-command name if given."""
        if self._sub_commands and args.has_subcommand():
            sub_name = args.first_param()
            sub = self._sub_commands.get(sub_name)
            if sub is None:
                raise UnknownSubcommandError(sub_name)
            args.params = args.params[1:]
            return sub
        return self