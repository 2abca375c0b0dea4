"""The ``unset`` builtin."""

from __future__ import annotations

from collections.abc import Sequence

from shellkit.session import Session


def unset(session: Session, args: Sequence[str] = ()) -> int:
    """Remove each named variable; unknown names are ignored."""
    for name in args:
        session.env.remove(name)
    return 0