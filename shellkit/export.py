"""The ``export`` builtin."""

from __future__ import annotations

from collections.abc import Sequence

from shellkit.environment import is_valid_identifier
from shellkit.session import Session


def _invalid(session: Session, arg: str) -> bool:
    session.error(f"export: `{arg}': not a valid identifier")
    session.status = 1
    return False


def _export_append(session: Session, arg: str) -> bool:
    eq = arg.find("=")
    if eq <= 0 or arg[eq - 1] != "+":
        # A "+=" that is not right before the first "=" is ignored.
        return True
    name = arg[: eq - 1]
    if not is_valid_identifier(name):
        return _invalid(session, arg)
    value = arg[eq + 1 :]
    if name in session.env:
        session.env.append(name, value)
    else:
        session.env.add(name, value)
    return True


def _export_assign(session: Session, arg: str) -> bool:
    eq = arg.find("=")
    if eq == 0:
        return _invalid(session, arg)
    name = arg[:eq]
    if not is_valid_identifier(name):
        return _invalid(session, arg)
    value = arg[eq + 1 :]
    if name in session.env:
        session.env.set(name, value)
    else:
        session.env.add(name, value)
    return True


def _export_name(session: Session, arg: str) -> bool:
    if not is_valid_identifier(arg):
        return _invalid(session, arg)
    if arg not in session.env:
        session.env.add(arg, None)
    return True


def export_one(session: Session, arg: str) -> bool:
    """Apply one ``export`` argument; return False if it was rejected."""
    if "+=" in arg:
        return _export_append(session, arg)
    if "=" in arg:
        return _export_assign(session, arg)
    return _export_name(session, arg)


def export(session: Session, args: Sequence[str] = ()) -> int:
    """List exported variables, or add and update the given ones."""
    if not args:
        for line in session.env.export_lines():
            session.write(f"{line}\n")
        return 0
    results = [export_one(session, arg) for arg in args]
    return 0 if all(results) else 1