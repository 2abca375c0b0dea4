import pytest

from shellkit.environment import (
    DEFAULT_PATH,
    Environment,
    build_environment,
    is_valid_identifier,
    next_shlvl,
    split_assignment,
)


@pytest.mark.parametrize("name", ["A", "_", "_x1", "abc_DEF9", "Z"])
def test_valid_identifiers(name):
    assert is_valid_identifier(name) is True


@pytest.mark.parametrize("name", ["", None, "1A", "A-B", "a b", "é", "A=", "+"])
def test_invalid_identifiers(name):
    assert is_valid_identifier(name) is False


def test_split_assignment_first_equals():
    assert split_assignment("A=b=c") == ("A", "b=c")
    assert split_assignment("EMPTY=") == ("EMPTY", "")


def test_split_assignment_without_equals():
    with pytest.raises(ValueError):
        split_assignment("NOEQUALS")


@pytest.mark.parametrize("value", [None, "0", "-3", "999", "1000", "abc", ""])
def test_next_shlvl_resets(value):
    assert next_shlvl(value) == "1"


def test_next_shlvl_increments():
    assert next_shlvl("5") == "6"
    assert int(next_shlvl("998")) == 999
    assert int(next_shlvl(" 7")) == int(next_shlvl("7"))


def test_get_and_contains():
    env = Environment([("A", "1"), ("B", None)])
    assert env.get("A") == "1"
    assert env.get("B") is None
    assert "B" in env
    assert "C" not in env
    assert env.get("C") is None
    assert len(env) == 2


def test_set_existing_and_missing():
    env = Environment([("A", "1")])
    assert env.set("A", "x") is True
    assert env.get("A") == "x"
    assert env.set("B", "y") is False
    assert "B" not in env
    env.set("A", None)
    assert env.get("A") == ""


def test_set_or_add_appends_at_end():
    env = Environment([("A", "1")])
    env.set_or_add("B", "2")
    env.set_or_add("A", "3")
    assert env.names() == ["A", "B"]
    assert env.get("A") == "3"
    assert env.get("B") == "2"


def test_append_joins_values():
    env = Environment([("A", "foo"), ("N", None)])
    assert env.append("A", "bar") is True
    assert env.get("A") == "foo" + "bar"
    env.append("N", "v")
    assert env.get("N") == "v"
    assert env.append("MISSING", "v") is False
    assert "MISSING" not in env


def test_remove():
    env = Environment([("A", "1"), ("B", "2"), ("C", "3")])
    assert env.remove("B") is True
    assert env.names() == ["A", "C"]
    assert env.remove("B") is False
    assert env.remove("A") is True
    assert env.names() == ["C"]


def test_envp_skips_valueless():
    env = Environment([("A", "1"), ("B", None), ("C", "")])
    assert env.to_envp() == ["A=1", "C="]
    assert env.env_lines() == env.to_envp()


def test_export_lines_sorted_and_quoted():
    env = Environment([("B", "2"), ("A", None), ("_Z", "z")])
    lines = env.export_lines()
    assert lines == ['declare -x A', 'declare -x B="2"', 'declare -x _Z="z"']
    assert all(line.startswith("declare -x ") for line in lines)


def test_export_lines_do_not_reorder_environment():
    env = Environment([("B", "2"), ("A", "1")])
    env.export_lines()
    assert env.names() == ["B", "A"]


def test_build_minimal_environment():
    env = build_environment([], cwd="/tmp/somewhere")
    assert env.names() == ["PATH", "PWD", "SHLVL"]
    assert env.get("PATH") == DEFAULT_PATH
    assert env.get("PATH") == "/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin"
    assert env.get("PWD") == "/tmp/somewhere"
    assert env.get("SHLVL") == "1"


def test_build_environment_increments_shlvl():
    env = build_environment(["HOME=/home/user", "SHLVL=3"], cwd="/")
    assert env.get("HOME") == "/home/user"
    assert env.get("SHLVL") == next_shlvl("3")
    assert env.names() == ["HOME", "SHLVL"]


def test_build_environment_adds_missing_shlvl():
    env = build_environment(["X=y"], cwd="/")
    assert env.names() == ["X", "SHLVL"]
    assert env.get("SHLVL") == "1"


def test_build_environment_from_mapping():
    env = build_environment({"A": "1", "SHLVL": "999"}, cwd="/")
    assert env.get("A") == "1"
    assert env.get("SHLVL") == "1"


def test_build_environment_rejects_malformed_entry():
    with pytest.raises(ValueError):
        build_environment(["BROKEN"], cwd="/")