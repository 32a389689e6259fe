import pytest

from hubwrap.args import new_args
from hubwrap.commands import Command, UnknownSubcommandError
from hubwrap.flags import HelpRequested


def test_command_use_self():
    c = Command(usage="foo")
    args = new_args(["foo"])
    assert c.lookup_sub_command(args) is c


def test_command_use_subcommand():
    c = Command(usage="foo")
    s = Command(usage="bar")
    c.use(s)
    args = new_args(["foo", "bar"])
    assert c.lookup_sub_command(args) is s


def test_command_use_error_when_missing_subcommand():
    c = Command(usage="foo")
    c.use(Command(usage="bar"))
    args = new_args(["foo", "baz"])
    with pytest.raises(UnknownSubcommandError) as info:
        c.lookup_sub_command(args)
    assert str(info.value) == "error: Unknown subcommand: baz"


def test_args_for_command():
    c = Command(usage="foo")
    args = new_args(["foo", "bar", "baz"])
    c.lookup_sub_command(args)
    assert len(args.params) == 2


def test_args_for_sub_command():
    c = Command(usage="foo")
    c.use(Command(usage="bar"))
    args = new_args(["foo", "bar", "baz"])
    c.lookup_sub_command(args)
    assert len(args.params) == 1


def test_flags_after_arguments():
    c = Command(usage="foo -m MESSAGE ARG1")
    c.flag.add_string("message", "m", "", "MESSAGE")
    args = new_args(["foo", "bar", "-m", "baz"])
    c.parse_arguments(args)
    assert c.flag.get("message") == "baz"
    assert len(args.params) == 1
    assert args.last_param() == "bar"


def test_command_name_take_key():
    c = Command(key="bar", usage="foo -t -v --foo")
    assert c.name() == "bar"


def test_command_name_from_usage():
    c = Command(usage="\nrelease [--include-drafts]\nrelease show <TAG>\n")
    assert c.name() == "release"


def test_command_call():
    result = []
    c = Command(usage="foo", run=lambda cmd, args: result.append(args.first_param()))
    c.call(new_args(["foo", "bar"]))
    assert result == ["bar"]


def test_command_help():
    result = []
    c = Command(usage="foo", run=lambda cmd, args: result.append(args.first_param()))
    with pytest.raises(HelpRequested):
        c.call(new_args(["foo", "-h"]))
    assert result == []


def test_sub_command_call():
    result = []
    c = Command(usage="foo", run=lambda cmd, args: result.append("noop"))
    s = Command(key="bar", usage="foo bar", run=lambda cmd, args: result.append(args.last_param()))
    c.use(s)
    c.call(new_args(["foo", "bar", "baz"]))
    assert result == ["baz"]


def test_git_extension_skips_flag_parsing():
    seen = []
    c = Command(usage="foo", git_extension=True, run=lambda cmd, args: seen.extend(args.params))
    c.call(new_args(["foo", "-x", "bar"]))
    assert seen == ["-x", "bar"]


def test_flag_passed_and_arg():
    c = Command(usage="foo")
    c.flag.add_bool("verbose", "v", False, "VERBOSE")
    c.parse_arguments(new_args(["foo", "-v", "tag"]))
    assert c.flag_passed("verbose") is True
    assert c.arg(0) == "tag"
    assert c.arg(1) == ""


def test_terminator_is_recorded():
    c = Command(usage="foo")
    args = new_args(["foo", "--", "issues"])
    c.parse_arguments(args)
    assert args.terminator is True
    assert args.params == ["issues"]


def test_synopsis_multiline():
    c = Command(usage="\nfoo a\nfoo b\n")
    assert c.synopsis() == "Usage: hub foo a\n       hub foo b"


def test_help_text_replaces_quotes():
    c = Command(usage="foo", long="Use 'bar' here.")
    assert c.help_text() == "Usage: hub foo\n\nUse `bar` here."


def test_runnable():
    assert Command(usage="foo").runnable() is False
    assert Command(usage="foo", run=lambda c, a: None).runnable() is True