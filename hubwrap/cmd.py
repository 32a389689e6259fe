"""External commands: building, logging and running them."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass, field


@dataclass
class Cmd:
    """A program name together with its arguments."""

    name: str
    args: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name} {' '.join(self.args)}"

    @property
    def argv(self) -> list[str]:
        return [self.name, *self.args]

    def with_arg(self, arg: str) -> Cmd:
        """Append one argument and return the command for chaining."""
        self.args.append(arg)
        return self

    def with_args(self, *args: str) -> Cmd:
        """Append several arguments and return the command for chaining."""
        self.args.extend(args)
        return self

    def combined_output(self) -> str:
        """Run the command and return stdout and stderr together.

        Raises CalledProcessError (carrying the output) on a non-zero exit.
        """
        _verbose_log(self)
        result = subprocess.run(
            self.argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        if result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode, self.argv, output=result.stdout
            )
        return result.stdout

    def success(self) -> bool:
        """Run the command and report whether it exited cleanly."""
        _verbose_log(self)
        try:
            result = subprocess.run(self.argv)
        except OSError:
            return False
        return result.returncode == 0

    def run(self) -> None:
        """Replace the current process with the command, or spawn it on Windows."""
        if sys.platform == "win32":
            self.spawn()
        else:
            self.exec()

    def spawn(self) -> None:
        """Run the command attached to this process's standard streams."""
        _verbose_log(self)
        subprocess.run(self.argv, check=True)

    def exec(self) -> None:
        """Replace the current process image with the command."""
        binary = shutil.which(self.name)
        if binary is None:
            raise FileNotFoundError(f"command not found: {self.name}")
        _verbose_log(self)
        os.execve(binary, [binary, *self.args], os.environ)


def new(cmd: str) -> Cmd:
    """Build a command from a shell-quoted string."""
    words = shlex.split(cmd)
    if not words:
        raise ValueError("command can't be empty")
    return Cmd(name=words[0], args=words[1:])


def new_with_array(cmd) -> Cmd:
    """Build a command from a sequence whose first item is the program."""
    words = list(cmd)
    if not words:
        raise ValueError("command can't be empty")
    return Cmd(name=words[0], args=words[1:])


def _verbose_log(cmd: Cmd) -> None:
    if not os.environ.get("HUB_VERBOSE"):
        return
    msg = f"$ {cmd.name} {' '.join(cmd.args)}"
    if sys.stderr.isatty():
        msg = f"\033[35m{msg}\033[0m"
    print(msg, file=sys.stderr)