"""Exceptions raised when git cannot complete a tag operation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class ToolInvocationError(RuntimeError):
    """A git command exited with failure.

    The message leads with the operation context so callers can tell which
    query failed, followed by git's own diagnostic output.

    Attributes:
        operation_context: Label of the operation that ran the command
        cmd: Full command line that was executed
        returncode: Exit status, or None if the process never started
        stdout: Captured standard output
        stderr: Captured standard error (git's diagnostic)
    """

    def __init__(
        self,
        *,
        operation_context: str,
        cmd: Sequence[str],
        returncode: int | None,
        stdout: str,
        stderr: str,
    ) -> None:
        self.operation_context = operation_context
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

        message = f"Failed to {operation_context}"
        detail = stderr.strip() or stdout.strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        # Keyword-only __init__ cannot be replayed from self.args
        return (
            _rebuild_error,
            (
                type(self),
                self.operation_context,
                self.cmd,
                self.returncode,
                self.stdout,
                self.stderr,
            ),
        )

    @classmethod
    def from_error(cls, error: ToolInvocationError) -> ToolInvocationError:
        """Re-create an error as this class, keeping all of its fields."""
        return cls(
            operation_context=error.operation_context,
            cmd=error.cmd,
            returncode=error.returncode,
            stdout=error.stdout,
            stderr=error.stderr,
        )


def _rebuild_error(
    cls: type[ToolInvocationError],
    operation_context: str,
    cmd: list[str],
    returncode: int | None,
    stdout: str,
    stderr: str,
) -> ToolInvocationError:
    return cls(
        operation_context=operation_context,
        cmd=cmd,
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


class TagConflictError(ToolInvocationError):
    """Tag creation failed because a tag with that name already exists."""
