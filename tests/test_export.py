import io

from shellkit.environment import Environment
from shellkit.export import export, export_one
from shellkit.session import Session


def make_session(entries=()):
    return Session(
        env=Environment(entries),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


def test_export_without_args_lists_sorted():
    session = make_session([("B", "2"), ("A", None)])
    assert export(session, []) == 0
    assert session.stdout.getvalue() == 'declare -x A\ndeclare -x B="2"\n'


def test_export_adds_new_variable():
    session = make_session()
    assert export(session, ["X=1"]) == 0
    assert session.env.get("X") == "1"


def test_export_replaces_existing():
    session = make_session([("X", "old")])
    export(session, ["X=new"])
    assert session.env.get("X") == "new"
    assert session.env.names() == ["X"]


def test_export_empty_value():
    session = make_session()
    export(session, ["X="])
    assert "X" in session.env
    assert session.env.get("X") == ""


def test_export_value_keeps_later_equals():
    session = make_session()
    export(session, ["X=a=b"])
    assert session.env.get("X") == "a=b"


def test_export_name_only_creates_valueless():
    session = make_session()
    assert export_one(session, "X") is True
    assert "X" in session.env
    assert session.env.get("X") is None


def test_export_name_only_keeps_existing_value():
    session = make_session([("X", "kept")])
    export(session, ["X"])
    assert session.env.get("X") == "kept"
    assert len(session.env) == 1


def test_export_append_to_existing():
    session = make_session([("X", "abc")])
    export(session, ["X+=def"])
    assert session.env.get("X") == "abcdef"


def test_export_append_creates_missing():
    session = make_session()
    export(session, ["X+=def"])
    assert session.env.get("X") == "def"


def test_export_invalid_identifier():
    session = make_session()
    assert export(session, ["1abc"]) == 1
    assert session.status == 1
    assert session.stderr.getvalue() == (
        "write_on_me: export: `1abc': not a valid identifier\n"
    )
    assert "1abc" not in session.env


def test_export_missing_name_is_error():
    session = make_session()
    assert export_one(session, "=x") is False
    assert len(session.env) == 0


def test_export_append_without_name_is_error():
    session = make_session()
    assert export_one(session, "+=x") is False
    assert len(session.env) == 0


def test_export_mixed_arguments():
    session = make_session()
    assert export(session, ["A=1", "9bad=2", "C=3"]) == 1
    assert session.env.get("A") == "1"
    assert session.env.get("C") == "3"
    assert "9bad" not in session.env


def test_exported_values_show_in_listing():
    session = make_session()
    export(session, ["Z=9", "Y"])
    export(session, [])
    assert session.stdout.getvalue() == 'declare -x Y\ndeclare -x Z="9"\n'