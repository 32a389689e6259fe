import subprocess
import sys

import pytest

from hubwrap.args import new_args
from hubwrap.cmd import Cmd
from hubwrap.commands import Command
from hubwrap.runner import (
    ExecError,
    Runner,
    execute_commands,
    print_commands,
    split_alias_cmd,
)


def test_split_alias_cmd_bang():
    with pytest.raises(ValueError):
        split_alias_cmd("!source ~/.zshrc")


def test_split_alias_cmd_words():
    words = split_alias_cmd("log --pretty=oneline --abbrev-commit --graph --decorate")
    assert len(words) == 5
    assert words[0] == "log"


def test_split_alias_cmd_empty():
    with pytest.raises(ValueError):
        split_alias_cmd("")


def test_runner_use_commands():
    r = Runner(execute=lambda cmds: None)
    c = Command(usage="foo")
    r.use(c)
    assert r.lookup("foo") is c
    assert r.lookup("bar") is None


def test_runner_use_alias():
    r = Runner(execute=lambda cmds: None)
    c = Command(usage="version")
    r.use(c, "--version")
    assert r.lookup("--version") is c
    assert set(r.all()) == {"version", "--version"}


def test_runner_call_commands():
    result = []
    executed = []

    def f(c, args):
        result.append(args.first_param())
        args.replace("git", "version", "")

    r = Runner(execute=executed.extend)
    c = Command(usage="foo", run=f)
    r.use(c)
    err = r.call(c, new_args(["foo", "bar"]))
    assert err.exit_code == 0
    assert result == ["bar"]
    assert [str(x) for x in executed] == ["git version"]


def test_runner_call_noop_prints(capsys):
    executed = []
    r = Runner(execute=executed.extend)
    c = Command(usage="foo", run=lambda c, a: None)
    err = r.call(c, new_args(["--noop", "foo", "bar"]))
    assert err.exit_code == 0
    assert executed == []
    assert capsys.readouterr().out == "git foo bar\n"


def test_runner_call_help_is_not_an_error():
    executed = []
    r = Runner(execute=executed.extend)
    c = Command(usage="foo", run=lambda c, a: None)
    err = r.call(c, new_args(["foo", "-h"]))
    assert err.exit_code == 0
    assert executed == []


def test_runner_call_unknown_subcommand():
    r = Runner(execute=lambda cmds: None)
    c = Command(usage="foo", run=lambda c, a: None)
    c.use(Command(usage="bar", run=lambda c, a: None))
    err = r.call(c, new_args(["foo", "baz"]))
    assert err.exit_code == 1
    assert str(err) == "error: Unknown subcommand: baz"


def test_runner_call_failing_before_command():
    def f(c, args):
        args.before(sys.executable, "-c", "import sys; sys.exit(3)")

    r = Runner()
    c = Command(usage="foo", run=f)
    err = r.call(c, new_args(["foo"]))
    assert err.exit_code == 3


def test_exec_error_from_error():
    assert ExecError.from_error(None).exit_code == 0
    assert ExecError.from_error(ValueError("boom")).exit_code == 1
    failed = subprocess.CalledProcessError(4, ["git"])
    assert ExecError.from_error(failed).exit_code == 4
    assert str(ExecError.from_error(ValueError("boom"))) == "boom"


def test_execute_commands_stops_on_failure():
    failing = Cmd(sys.executable, ["-c", "import sys; sys.exit(3)"])
    never = Cmd("definitely-not-a-real-program-xyz")
    with pytest.raises(subprocess.CalledProcessError) as info:
        execute_commands([failing, never])
    assert info.value.returncode == 3


def test_print_commands(capsys):
    print_commands([Cmd("git", ["status"]), Cmd("echo", ["hi"])])
    assert capsys.readouterr().out == "git status\necho hi\n"