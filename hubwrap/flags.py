"""Parsing of long (--name) and short (-n) command-line flags."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_UINT_MAX = 2**64 - 1


class FlagError(ValueError):
    """A command line could not be parsed against a flag set."""


class HelpRequested(FlagError):
    """-h or --help was given but no such flag is defined."""

    def __init__(self) -> None:
        super().__init__("pflag: help requested")


class StringSliceValue(list):
    """A flag value that collects every occurrence."""

    def set(self, val: str) -> None:
        self.append(val)

    def __str__(self) -> str:
        return "[" + " ".join(self) + "]"


class MapValue(dict):
    """A flag value that collects name=value pairs."""

    def set(self, val: str) -> None:
        name, sep, value = val.partition("=")
        if not sep:
            raise FlagError("Flag should be in the format of <name>=<value>")
        self[name] = value

    def __str__(self) -> str:
        return ",".join(f"{k}={v}" for k, v in self.items())


class ListValue(list):
    """A flag value that collects comma-separated items."""

    def set(self, value: str) -> None:
        self.extend(value.split(","))

    def __str__(self) -> str:
        return ",".join(self)


class _Kind(enum.Enum):
    BOOL = "bool"
    STRING = "string"
    UINT = "uint"
    VALUE = "value"


@dataclass
class _Flag:
    name: str
    shorthand: str
    kind: _Kind
    default: Any
    usage: str
    value: Any

    def reset(self) -> None:
        if self.kind is not _Kind.VALUE:
            self.value = self.default

    def assign(self, text: str) -> None:
        if self.kind is _Kind.BOOL:
            if text in _TRUE:
                self.value = True
            elif text in _FALSE:
                self.value = False
            else:
                raise self._invalid(text)
        elif self.kind is _Kind.STRING:
            self.value = text
        elif self.kind is _Kind.UINT:
            try:
                number = int(text, 0)
            except ValueError:
                raise self._invalid(text) from None
            if not 0 <= number <= _UINT_MAX:
                raise self._invalid(text)
            self.value = number
        else:
            try:
                self.value.set(text)
            except FlagError as err:
                raise FlagError(f'invalid argument "{text}" for --{self.name}: {err}') from err

    def _invalid(self, text: str) -> FlagError:
        return FlagError(f'invalid argument "{text}" for --{self.name}')


class FlagSet:
    """A named set of flags; parsing leaves non-flag arguments in args()."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.usage: Callable[[FlagError], None] | None = None
        self._flags: dict[str, _Flag] = {}
        self._shorthands: dict[str, _Flag] = {}
        self._actual: set[str] = set()
        self._args: list[str] = []

    def _add(self, flag: _Flag) -> None:
        if flag.name in self._flags:
            raise ValueError(f"{self.name} flag redefined: {flag.name}")
        if flag.shorthand:
            if len(flag.shorthand) != 1:
                raise ValueError(f"{flag.shorthand!r} shorthand is more than one character")
            if flag.shorthand in self._shorthands:
                raise ValueError(f"{self.name} shorthand redefined: {flag.shorthand}")
            self._shorthands[flag.shorthand] = flag
        self._flags[flag.name] = flag

    def add_bool(self, name, shorthand, default, usage) -> None:
        self._add(_Flag(name, shorthand, _Kind.BOOL, bool(default), usage, bool(default)))

    def add_string(self, name, shorthand, default, usage) -> None:
        self._add(_Flag(name, shorthand, _Kind.STRING, default, usage, default))

    def add_uint(self, name, shorthand, default, usage) -> None:
        self._add(_Flag(name, shorthand, _Kind.UINT, default, usage, default))

    def add_value(self, name, shorthand, value, usage) -> None:
        """Register an object with a set(str) method as a flag's value."""
        self._add(_Flag(name, shorthand, _Kind.VALUE, None, usage, value))

    def parse(self, arguments) -> None:
        """Parse arguments, allowing flags and plain arguments to mix."""
        self._args = []
        self._actual = set()
        for flag in self._flags.values():
            flag.reset()
        try:
            self._parse(deque(arguments))
        except FlagError as err:
            if self.usage is not None:
                self.usage(err)
            raise

    def _parse(self, queue: deque) -> None:
        while queue:
            arg = queue.popleft()
            if len(arg) < 2 or not arg.startswith("-"):
                self._args.append(arg)
            elif arg == "--":
                self._args.extend(queue)
                return
            elif arg.startswith("--"):
                self._parse_long(arg, queue)
            else:
                self._parse_short(arg, queue)

    def _parse_long(self, arg: str, queue: deque) -> None:
        body = arg[2:]
        if body.startswith(("-", "=")):
            raise FlagError(f"bad flag syntax: {arg}")
        name, has_value, value = body.partition("=")
        flag = self._flags.get(name)
        if flag is None:
            if name == "help":
                raise HelpRequested()
            raise FlagError(f"unknown flag: --{name}")
        if flag.kind is _Kind.BOOL:
            self._set(flag, value if has_value else "true")
        elif has_value:
            self._set(flag, value)
        elif queue:
            self._set(flag, queue.popleft())
        else:
            raise FlagError(f"flag needs an argument: {arg}")

    def _parse_short(self, arg: str, queue: deque) -> None:
        rest = arg[1:]
        while rest:
            char, rest = rest[0], rest[1:]
            flag = self._shorthands.get(char)
            if flag is None:
                if char == "h":
                    raise HelpRequested()
                raise FlagError(f"unknown shorthand flag: {char!r} in {arg}")
            if flag.kind is _Kind.BOOL:
                if rest.startswith("="):
                    self._set(flag, rest[1:])
                    return
                self._set(flag, "true")
                continue
            if rest:
                self._set(flag, rest[1:] if rest.startswith("=") else rest)
            elif queue:
                self._set(flag, queue.popleft())
            else:
                raise FlagError(f"flag needs an argument: {char!r} in {arg}")
            return

    def _set(self, flag: _Flag, text: str) -> None:
        flag.assign(text)
        self._actual.add(flag.name)

    def args(self) -> list[str]:
        """Arguments left over after the last parse."""
        return list(self._args)

    def get(self, name: str) -> Any:
        """The current value of the named flag."""
        return self._flags[name].value

    def passed(self, name: str) -> bool:
        """Whether the named flag was given in the last parse."""
        return name in self._actual