"""Per-shell state shared by the builtins, and the ``pwd`` builtin."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from shellkit.environment import Environment

SHELL_NAME = "write_on_me"


class ShellExit(Exception):
    """Raised when the shell has to terminate with a given status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


@dataclass
class Session:
    """The environment, last exit status and output streams of one shell."""

    env: Environment = field(default_factory=Environment)
    status: int = 0
    in_pipeline: bool = False
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def current_directory(self) -> str | None:
        """Return PWD if set, otherwise the process working directory."""
        pwd_value = self.env.get("PWD")
        if pwd_value is not None:
            return pwd_value
        try:
            return os.getcwd()
        except OSError:
            return None

    def error(self, message: str) -> None:
        """Write a diagnostic prefixed with the shell name to stderr."""
        self.stderr.write(f"{SHELL_NAME}: {message}\n")

    def write(self, text: str) -> None:
        """Write *text* to standard output."""
        self.stdout.write(text)


def pwd(session: Session, args: Sequence[str] = ()) -> int:
    """Print the current directory; arguments are ignored."""
    directory = session.current_directory()
    if directory is not None:
        session.write(f"{directory}\n")
    session.status = 0
    return 0