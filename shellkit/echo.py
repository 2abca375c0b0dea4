"""The ``echo`` builtin."""

from __future__ import annotations

from collections.abc import Sequence

from shellkit.session import Session


def _is_n_flag(arg: str) -> bool:
    return arg.startswith("-n") and set(arg[2:]) <= {"n"}


def split_n_flags(args: Sequence[str]) -> tuple[bool, list[str]]:
    """Consume leading ``-n`` options.

    Returns whether a trailing newline is printed, and the words to print.
    An argument that starts like ``-n`` but holds another letter stops the
    scan and turns the newline back on.
    """
    newline = True
    index = 0
    while index < len(args) and args[index].startswith("-n"):
        if _is_n_flag(args[index]):
            newline = False
            index += 1
        else:
            newline = True
            break
    return newline, list(args[index:])


def echo(session: Session, args: Sequence[str] = ()) -> int:
    """Print the arguments separated by spaces."""
    if not args:
        session.write("\n")
        return 0
    newline, words = split_n_flags(args)
    session.write(" ".join(words) + ("\n" if newline else ""))
    return 0