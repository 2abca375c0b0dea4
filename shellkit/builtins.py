"""Dispatch of the builtin commands and the ``env`` builtin."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from shellkit.cd import cd
from shellkit.echo import echo
from shellkit.export import export
from shellkit.session import Session, pwd
from shellkit.shell_exit import exit_builtin
from shellkit.unset import unset

ENV_NOT_FOUND_STATUS = 127


def env_builtin(session: Session, args: Sequence[str] = ()) -> int:
    """Print every variable that has a value; arguments are rejected."""
    if len(session.env) == 0:
        return ENV_NOT_FOUND_STATUS
    if args:
        session.stderr.write(f"env: {args[0]}: No such file or directory\n")
        session.status = ENV_NOT_FOUND_STATUS
        return ENV_NOT_FOUND_STATUS
    for line in session.env.env_lines():
        session.write(f"{line}\n")
    return 0


_BUILTINS: dict[str, Callable[[Session, Sequence[str]], int]] = {
    "echo": echo,
    "cd": cd,
    "env": env_builtin,
    "exit": exit_builtin,
    "export": export,
    "pwd": pwd,
    "unset": unset,
}


def is_builtin(name: str | None) -> bool:
    """Return True if *name* is one of the shell's builtin commands."""
    return name is not None and name in _BUILTINS


def run_builtin(session: Session, argv: Sequence[str]) -> int:
    """Run the builtin named by ``argv[0]``; return 1 if there is none.

    ``exit`` may raise ShellExit instead of returning.
    """
    if not argv or not argv[0]:
        return 1
    handler = _BUILTINS.get(argv[0])
    if handler is None:
        return 1
    return handler(session, list(argv[1:]))