"""Dispatching commands and executing the command chains they produce."""

from __future__ import annotations

import shlex
import subprocess
from typing import Callable, Optional, Sequence

from hubwrap.args import Args
from hubwrap.cmd import Cmd
from hubwrap.commands import Command, CommandError
from hubwrap.flags import FlagError, HelpRequested


class ExecError(Exception):
    """The outcome of running a command chain, with its exit code."""

    def __init__(self, err: Optional[BaseException] = None, exit_code: int = 0) -> None:
        super().__init__(str(err) if err is not None else "")
        self.err = err
        self.exit_code = exit_code

    @classmethod
    def from_error(cls, err: Optional[BaseException]) -> ExecError:
        """Wrap err, taking the exit code from a failed process where possible."""
        if err is None:
            return cls(None, 0)
        exit_code = 1
        if isinstance(err, subprocess.CalledProcessError):
            exit_code = err.returncode
        return cls(err, exit_code)


def print_commands(cmds: Sequence[Cmd]) -> None:
    for c in cmds:
        print(c)


def execute_commands(cmds: Sequence[Cmd]) -> None:
    """Run each command in turn; the last one replaces this process."""
    for i, c in enumerate(cmds):
        if i == len(cmds) - 1:
            c.run()
        else:
            c.spawn()


def split_alias_cmd(cmd: str) -> list[str]:
    """Split a git alias expansion into words."""
    if not cmd:
        raise ValueError("alias can't be empty")
    if cmd.startswith("!"):
        raise ValueError("alias starting with ! can't be split")
    return shlex.split(cmd)


class Runner:
    """A registry of commands that runs the chains they build."""

    def __init__(self, execute: Optional[Callable[[Sequence[Cmd]], None]] = None) -> None:
        self._commands: dict[str, Command] = {}
        self._execute = execute if execute is not None else execute_commands

    def all(self) -> dict[str, Command]:
        return self._commands

    def use(self, command: Command, *args: str) -> None:
        """Register command under its name and, if given, its first alias."""
        self._commands[command.name()] = command
        if args:
            self._commands[args[0]] = command

    def lookup(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def call(self, command: Command, args: Args) -> ExecError:
        """Run command against args, then print or execute the resulting chain."""
        try:
            command.call(args)
        except HelpRequested:
            return ExecError.from_error(None)
        except (CommandError, FlagError) as err:
            return ExecError.from_error(err)

        cmds = args.commands()
        if args.noop:
            print_commands(cmds)
            return ExecError.from_error(None)
        try:
            self._execute(cmds)
        except (OSError, subprocess.CalledProcessError) as err:
            return ExecError.from_error(err)
        return ExecError.from_error(None)