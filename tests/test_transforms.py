import pytest

from hubwrap.args import new_args
from hubwrap.transforms import (
    CheckoutError,
    parse_clone_name_and_owner,
    parse_clone_private_flag,
    parse_compare_range,
    parse_init_flag,
    parse_remote_names,
    parse_remote_private_flag,
    parse_repo_name_owner,
    range_query_escape,
    replace_checkout_param,
    sanitize_checkout_flags,
)


def test_parse_range():
    assert parse_compare_range("1.0..2.0") == "1.0...2.0"
    assert parse_compare_range("1.0...2.0") == "1.0...2.0"


def test_parse_range_with_owner():
    assert parse_compare_range("mislav:v1.0..v1.1") == "mislav:v1.0...v1.1"


def test_parse_range_leaves_single_ref():
    assert parse_compare_range("feature") == "feature"


def test_range_query_escape_keeps_ranges():
    assert range_query_escape("v1.0...v1.1") == "v1.0...v1.1"


def test_range_query_escape_unescapes_allowed_characters():
    assert range_query_escape("feature/foo") == "feature/foo"
    assert range_query_escape("owner:branch") == "owner:branch"
    assert range_query_escape("HEAD^") == "HEAD^"


def test_range_query_escape_escapes_others():
    assert range_query_escape("a b") == "a+b"
    assert range_query_escape("a#b") == "a%23b"


def test_parse_repo_name_owner():
    assert parse_repo_name_owner("jingweno") == ("jingweno", "")
    assert parse_repo_name_owner("jingweno/gh") == ("jingweno", "gh")


def test_parse_repo_name_owner_rejects_invalid():
    assert parse_repo_name_owner("-bad") == ("", "")
    assert parse_repo_name_owner("[email]:jingweno/gh.git") == ("", "")


def test_parse_remote_names_comma_separated():
    args = new_args(["fetch", "jingweno,foo"])
    names = parse_remote_names(args)
    assert names == ["jingweno", "foo"]
    assert str(args.to_cmd()) == "git fetch --multiple jingweno foo"


def test_parse_remote_names_multiple():
    args = new_args(["fetch", "--multiple", "jingweno", "foo"])
    assert parse_remote_names(args) == ["jingweno", "foo"]


def test_parse_remote_names_multiple_without_names():
    args = new_args(["fetch", "--multiple"])
    assert parse_remote_names(args) == []


def test_parse_remote_names_single():
    args = new_args(["fetch", "origin"])
    assert parse_remote_names(args) == ["origin"]
    assert args.params == ["origin"]


def test_replace_checkout_param():
    checkout_url = "https://github.com/github/hub/pull/12"
    args = new_args(["checkout", checkout_url])
    replace_checkout_param(args, checkout_url, "jingweno", "origin/master")
    assert str(args.to_cmd()) == "git checkout --track -B jingweno origin/master"


def test_sanitize_checkout_flags_rejects_b():
    args = new_args(["checkout", "-b", "https://github.com/github/hub/pull/12"])
    with pytest.raises(CheckoutError) as exc:
        sanitize_checkout_flags(args)
    assert str(exc.value) == "Unsupported flag -b when checking out pull request"


def test_sanitize_checkout_flags_rejects_orphan():
    args = new_args(["checkout", "--orphan", "https://github.com/github/hub/pull/12"])
    with pytest.raises(CheckoutError) as exc:
        sanitize_checkout_flags(args)
    assert str(exc.value) == "Unsupported flag --orphan when checking out pull request"


def test_sanitize_checkout_flags_accepts_plain():
    args = new_args(["checkout", "https://github.com/github/hub/pull/12"])
    sanitize_checkout_flags(args)
    assert args.params == ["https://github.com/github/hub/pull/12"]


def test_parse_clone_private_flag():
    args = new_args(["clone", "-p", "jingweno/gh"])
    assert parse_clone_private_flag(args) is True
    assert args.params == ["jingweno/gh"]
    assert parse_clone_private_flag(args) is False


def test_parse_clone_name_and_owner():
    assert parse_clone_name_and_owner("jingweno/gh") == ("gh", "jingweno")
    assert parse_clone_name_and_owner("gh") == ("gh", "")
    assert parse_clone_name_and_owner("a/b/c") == ("b/c", "a")


def test_parse_remote_private_flag():
    args = new_args(["remote", "add", "-p", "mislav"])
    assert parse_remote_private_flag(args) is True
    assert args.params == ["add", "mislav"]


def test_parse_init_flag_absent():
    args = new_args(["init"])
    assert parse_init_flag(args) is False
    assert args.is_params_empty()


def test_parse_init_flag_present():
    args = new_args(["init", "-g", "--quiet"])
    assert parse_init_flag(args) is True
    assert str(args.commands()[0]) == "git init --quiet"