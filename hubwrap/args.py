"""The arguments of one invocation and the commands they turn into."""

from __future__ import annotations

from dataclasses import dataclass, field

from hubwrap import cmd as cmdmod
from hubwrap.cmd import Cmd

NOOP_FLAG = "--noop"
VERSION_FLAG = "--version"
HELP_FLAG = "--help"
CONFIG_FLAG = "-c"
CHDIR_FLAG = "-C"
FLAG_PREFIX = "-"


def looks_like_flag(value: str) -> bool:
    return value.startswith(FLAG_PREFIX)


def _out_of_bound(i: int) -> IndexError:
    return IndexError(f"Index {i} is out of bound")


@dataclass
class Args:
    """A git-style invocation: executable, global flags, command and params."""

    executable: str = "git"
    global_flags: list[str] = field(default_factory=list)
    command: str = ""
    program_path: str = ""
    params: list[str] = field(default_factory=list)
    noop: bool = False
    terminator: bool = False
    _before_chain: list[Cmd] = field(default_factory=list, init=False, repr=False)
    _after_chain: list[Cmd] = field(default_factory=list, init=False, repr=False)

    def words(self) -> list[str]:
        """Params that do not look like flags."""
        return [p for p in self.params if not looks_like_flag(p)]

    def before(self, *args: str) -> None:
        """Queue a command to run before the main one."""
        self._before_chain.append(cmdmod.new_with_array(args))

    def after(self, *args: str) -> None:
        """Queue a command to run after the main one."""
        self._after_chain.append(cmdmod.new_with_array(args))

    def replace(self, executable: str, command: str, *args: str) -> None:
        """Swap the main command for another one, dropping global flags."""
        self.executable = executable
        self.command = command
        self.params = list(args)
        self.global_flags = []

    def commands(self) -> list[Cmd]:
        """All commands in the order they run."""
        return [*self._before_chain, self.to_cmd(), *self._after_chain]

    def to_cmd(self) -> Cmd:
        """The main command; empty params are left out."""
        c = cmdmod.new(self.executable)
        c.with_args(*self.global_flags)
        if self.command:
            c.with_arg(self.command)
        c.with_args(*(p for p in self.params if p))
        return c

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self.params):
            raise _out_of_bound(i)

    def get_param(self, i: int) -> str:
        self._check_index(i)
        return self.params[i]

    def first_param(self) -> str:
        if not self.params:
            raise _out_of_bound(0)
        return self.params[0]

    def last_param(self) -> str:
        if not self.params:
            raise _out_of_bound(-1)
        return self.params[-1]

    def has_subcommand(self) -> bool:
        return bool(self.params) and not self.params[0].startswith("-")

    def insert_param(self, i: int, *args: str) -> None:
        """Insert items at i; an index past the end appends."""
        if i < 0:
            raise _out_of_bound(i)
        i = min(i, len(self.params))
        self.params[i:i] = args

    def remove_param(self, i: int) -> str:
        self._check_index(i)
        return self.params.pop(i)

    def replace_param(self, i: int, item: str) -> None:
        self._check_index(i)
        self.params[i] = item

    def index_of_param(self, param: str) -> int:
        """Position of param, or -1 when absent (like str.find)."""
        try:
            return self.params.index(param)
        except ValueError:
            return -1

    def params_size(self) -> int:
        return len(self.params)

    def is_params_empty(self) -> bool:
        return not self.params

    def prepend_params(self, *args: str) -> None:
        self.params[0:0] = args

    def append_params(self, *args: str) -> None:
        self.params.extend(args)

    def has_flags(self, *args: str) -> bool:
        return any(f in self.params for f in args)


def _slurp_global_flags(args: list[str]) -> tuple[list[str], list[str]]:
    slurp_next_value = False
    command_index = 0
    for i, arg in enumerate(args):
        if slurp_next_value:
            command_index = i + 1
            slurp_next_value = False
        elif arg in (VERSION_FLAG, HELP_FLAG) or not looks_like_flag(arg):
            break
        else:
            command_index = i + 1
            slurp_next_value = arg in (CONFIG_FLAG, CHDIR_FLAG)
    return args[:command_index], args[command_index:]


def new_args(args) -> Args:
    """Split a raw argument list into global flags, command and params."""
    global_flags, rest = _slurp_global_flags(list(args))
    noop = NOOP_FLAG in global_flags
    global_flags = [f for f in global_flags if f != NOOP_FLAG]
    command, params = (rest[0], rest[1:]) if rest else ("", [])
    return Args(
        executable="git",
        global_flags=global_flags,
        command=command,
        params=params,
        noop=noop,
    )