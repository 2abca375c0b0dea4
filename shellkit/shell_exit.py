"""The ``exit`` builtin and the numeric checks it relies on."""

from __future__ import annotations

from collections.abc import Sequence

from shellkit.session import Session, ShellExit

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = 2**63 - 1
_LLONG_MIN_MAGNITUDE = 2**63


def _split_sign(text: str) -> tuple[bool, str]:
    body = text.lstrip(_WHITESPACE)
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    return negative, body


def _leading_digits(body: str) -> str:
    digits = []
    for ch in body:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return "".join(digits)


def is_numeric(text: str | None) -> bool:
    """Return True for optional whitespace, an optional sign, then only digits."""
    if text is None:
        return False
    _, body = _split_sign(text)
    return body != "" and all("0" <= ch <= "9" for ch in body)


def fits_long_long(text: str) -> bool:
    """Return True if the leading number in *text* fits a signed 64-bit integer."""
    negative, body = _split_sign(text)
    digits = _leading_digits(body)
    magnitude = int(digits) if digits else 0
    limit = _LLONG_MIN_MAGNITUDE if negative else _LLONG_MAX
    return magnitude <= limit


def parse_long_long(text: str | None) -> int:
    """Parse the leading signed integer of *text*; 0 when there is none."""
    if text is None:
        return 0
    negative, body = _split_sign(text)
    digits = _leading_digits(body)
    value = int(digits) if digits else 0
    return -value if negative else value


def _announce(session: Session) -> None:
    """Only the top-level shell prints ``exit`` before leaving."""
    if not session.in_pipeline:
        session.stderr.write("exit\n")


def exit_builtin(session: Session, args: Sequence[str] = ()) -> int:
    """Leave the shell, raising ShellExit with the requested status.

    With more than one numeric argument nothing is left: an error is
    reported and 1 is returned.
    """
    if not args:
        _announce(session)
        raise ShellExit(session.status)
    first = args[0]
    if not is_numeric(first) or not fits_long_long(first):
        _announce(session)
        session.error(f"exit: {first}: numeric argument required")
        raise ShellExit(2)
    if len(args) > 1:
        _announce(session)
        session.error("exit: too many arguments")
        session.status = 1
        return 1
    _announce(session)
    raise ShellExit(parse_long_long(first) % 256)