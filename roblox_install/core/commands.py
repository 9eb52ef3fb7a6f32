"""External command execution, injectable so probes can be faked in tests."""

from __future__ import annotations

import subprocess
from typing import Protocol


class CommandRunner(Protocol):
    def run(self, args: list[str]) -> str:
        """
        Run ``args`` and return its decoded standard output.

        Raises ``OSError`` when the program cannot be started,
        ``subprocess.SubprocessError`` when it exits with a non-zero status
        and ``UnicodeDecodeError`` when the output is not UTF-8.
        """
        ...


class SubprocessRunner:
    """Blocking runner backed by :func:`subprocess.run`. There is no timeout."""

    def run(self, args: list[str]) -> str:
        result = subprocess.run(  # noqa: S603
            args,
            capture_output=True,
            check=True,
        )
        return result.stdout.decode("utf-8")
