"""Abstract base class for running git commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Buffered output of a successful command."""

    stdout: str


class CommandRunner(ABC):
    """Abstract interface for executing git.

    Implementations run the command to completion and return its full
    standard output. Cancellation, if needed, belongs to the implementation.
    """

    @abstractmethod
    def run(
        self,
        args: Sequence[str],
        cwd: Path,
        context: str,
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        """Run git with the given arguments.

        Args:
            args: Arguments after the git executable (e.g. ["tag", "-l"])
            cwd: Working directory, normally the repository root
            context: Label identifying the calling operation in errors and logs
            timeout: Seconds before the command is abandoned, None for the
                implementation default

        Returns:
            CommandResult holding the complete stdout

        Raises:
            ToolInvocationError: If git exits non-zero
        """
        ...
