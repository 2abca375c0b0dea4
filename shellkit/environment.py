"""Ordered shell environment with the lookups and updates the builtins need."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

DEFAULT_PATH = "/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin"

_WHITESPACE = " \t\n\v\f\r"


@dataclass
class _Variable:
    name: str
    value: str | None


def is_valid_identifier(text: str | None) -> bool:
    """Return True if *text* is a valid variable name: [A-Za-z_][A-Za-z0-9_]*."""
    if not text:
        return False
    first, rest = text[0], text[1:]
    if not (first == "_" or (first.isascii() and first.isalpha())):
        return False
    return all(ch == "_" or (ch.isascii() and ch.isalnum()) for ch in rest)


def split_assignment(entry: str) -> tuple[str, str]:
    """Split ``NAME=VALUE`` at the first ``=``."""
    name, sep, value = entry.partition("=")
    if not sep:
        raise ValueError(f"environment entry without '=': {entry!r}")
    return name, value


def _atoi(text: str) -> int:
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def next_shlvl(value: str | None) -> str:
    """Compute the SHLVL a new shell starts with, given the inherited one."""
    if value is None or len(value) > 3:
        return "1"
    level = _atoi(value)
    if level <= 0 or level >= 999:
        return "1"
    return str(level + 1)


class Environment:
    """An ordered list of variables; a variable may exist without a value."""

    def __init__(self, entries: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars = [_Variable(name, value) for name, value in entries]

    def _find(self, name: str) -> _Variable | None:
        return next((var for var in self._vars if var.name == name), None)

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or None if unset or valueless."""
        return next(
            (var.value for var in self._vars if var.name == name and var.value is not None),
            None,
        )

    def __contains__(self, name: object) -> bool:
        return any(var.name == name for var in self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def names(self) -> list[str]:
        """Return the variable names in insertion order."""
        return [var.name for var in self._vars]

    def add(self, name: str, value: str | None) -> None:
        """Append a new variable at the end."""
        self._vars.append(_Variable(name, value))

    def set(self, name: str, value: str | None) -> bool:
        """Replace the value of an existing variable; return whether it existed."""
        var = self._find(name)
        if var is None:
            return False
        var.value = value if value is not None else ""
        return True

    def set_or_add(self, name: str, value: str | None) -> None:
        """Replace the value of *name*, adding the variable if it is missing."""
        if not self.set(name, value):
            self.add(name, value)

    def append(self, name: str, value: str | None) -> bool:
        """Append *value* to an existing variable (``NAME+=VALUE``)."""
        var = self._find(name)
        if var is None:
            return False
        if value is None:
            var.value = ""
        else:
            var.value = (var.value or "") + value
        return True

    def remove(self, name: str) -> bool:
        """Remove *name*; return whether it was present."""
        before = len(self._vars)
        self._vars = [var for var in self._vars if var.name != name]
        return len(self._vars) != before

    def to_envp(self) -> list[str]:
        """Return ``NAME=VALUE`` strings for every variable that has a value."""
        return [f"{var.name}={var.value}" for var in self._vars if var.value is not None]

    def env_lines(self) -> list[str]:
        """Return the lines the ``env`` builtin prints, in insertion order."""
        return self.to_envp()

    def export_lines(self) -> list[str]:
        """Return the lines ``export`` prints with no arguments, sorted by name."""
        lines = []
        for var in sorted(self._vars, key=lambda v: v.name):
            if var.value is None:
                lines.append(f"declare -x {var.name}")
            else:
                lines.append(f'declare -x {var.name}="{var.value}"')
        return lines


def build_environment(
    envp: Iterable[str] | Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> Environment:
    """Build the startup environment from *envp* and adjust SHLVL.

    With an empty *envp* a minimal environment holding PATH and PWD is made.
    """
    if envp is None:
        envp = os.environ
    if isinstance(envp, Mapping):
        entries = list(envp.items())
    else:
        entries = [split_assignment(entry) for entry in envp]

    if entries:
        env = Environment(entries)
    else:
        env = Environment()
        env.add("PATH", DEFAULT_PATH)
        env.add("PWD", cwd if cwd is not None else os.getcwd())

    if "SHLVL" in env:
        env.set("SHLVL", next_shlvl(env.get("SHLVL")))
    else:
        env.add("SHLVL", "1")
    return env