"""The ``cd`` builtin."""

from __future__ import annotations

import os
from collections.abc import Sequence

from shellkit.session import Session


def strip_trailing_slashes(path: str) -> str:
    """Remove every trailing ``/`` from *path*."""
    return path.rstrip("/")


def parent_directory(path: str) -> str | None:
    """Return *path* cut at its last ``/``, ``"/"`` for top-level entries.

    Returns None when no parent can be derived.
    """
    path = strip_trailing_slashes(path)
    cut = path.rfind("/")
    if cut > 0:
        return path[:cut]
    if path.startswith("/"):
        return "/"
    return None


def _enter(session: Session, path: str) -> int:
    """Change directory after the environment has been updated."""
    if path == "":
        return 0
    path = strip_trailing_slashes(path)
    try:
        os.chdir(path)
    except OSError as exc:
        session.error(f"cd:{path}: {exc.strerror}")
        session.status = 1
        return 1
    return 0


def _cd_home(session: Session) -> int:
    home = session.env.get("HOME")
    if home is None:
        session.error("cd: HOME not set")
        return 0
    session.env.set_or_add("OLDPWD", session.current_directory())
    session.env.set_or_add("PWD", home)
    _enter(session, home)
    return 0


def _cd_parent(session: Session) -> int:
    current = session.current_directory()
    if current is None:
        return 0
    parent = parent_directory(current)
    session.env.set_or_add("OLDPWD", current)
    session.env.set_or_add("PWD", parent)
    if parent is not None:
        _enter(session, parent)
    return 0


def _cd_previous(session: Session) -> int:
    previous = session.env.get("OLDPWD")
    if previous is None:
        session.error("cd: OLDPWD not set")
        if "OLDPWD" not in session.env:
            current = session.current_directory()
            session.env.set_or_add("OLDPWD", current)
            session.env.set_or_add("PWD", current)
        return 0
    session.env.set_or_add("OLDPWD", session.current_directory())
    session.env.set_or_add("PWD", previous)
    _enter(session, previous)
    return 0


def _cd_path(session: Session, path: str) -> int:
    current = session.current_directory()
    if not current or path == "":
        return 0
    try:
        os.chdir(path)
    except OSError as exc:
        session.error(f"cd: {path}: {exc.strerror}")
        session.status = 1
        return 1
    session.env.set_or_add("OLDPWD", current)
    if path.startswith("/"):
        session.env.set_or_add("PWD", path)
    else:
        base = session.env.get("PWD") or ""
        session.env.set_or_add("PWD", f"{base}/{path}")
    return 0


def cd(session: Session, args: Sequence[str] = ()) -> int:
    """Change the working directory and keep PWD and OLDPWD in step."""
    if len(args) > 1:
        session.error("cd: too many arguments")
        session.status = 1
        return 1
    target = strip_trailing_slashes(args[0]) if args else None
    if target is None or target == "~":
        return _cd_home(session)
    if target == "-":
        return _cd_previous(session)
    if target == "..":
        return _cd_parent(session)
    return _cd_path(session, target)