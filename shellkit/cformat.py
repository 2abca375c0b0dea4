"""A small printf-style formatter supporting %c %s %d %i %u %p %x %X %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _next(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("'%c' needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = int(value or 0) & _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next(args, spec))
    if spec == "s":
        value = _next(args, spec)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_to_int32(int(_next(args, spec))))
    if spec == "u":
        return str(int(_next(args, spec)) & _UINT32)
    if spec == "p":
        return _pointer(_next(args, spec))
    if spec == "x":
        return format(int(_next(args, spec)) & _UINT32, "x")
    if spec == "X":
        return format(int(_next(args, spec)) & _UINT32, "X")
    raise ValueError(f"unsupported conversion: '%{spec}'")


def format_string(fmt: str, *args: Any) -> str:
    """Expand *fmt* with *args*; an unknown or dangling ``%`` raises ValueError."""
    values = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "":
            raise ValueError("format ends with a lone '%'")
        out.append(_convert(spec, values))
    return "".join(out)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the expanded format to stdout and return the characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)