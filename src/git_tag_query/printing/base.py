"""Shared behavior for the printing gateway wrappers."""

from typing import Any

import click

from git_tag_query.output.output import user_output


class PrintingBase:
    """Base class for wrappers that echo commands before delegating.

    Subclasses also inherit from the gateway ABC they wrap and delegate every
    operation to ``self._wrapped``.
    """

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: Implementation to delegate to (real or dry-run)
            script_mode: Suppress all output (for machine-consumed runs)
            dry_run: Mark printed commands as not actually executed
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        user_output(message)

    def _format_command(self, command: str) -> str:
        styled = click.style(f"$ {command}", dim=True)
        if self._dry_run:
            return f"{styled} {click.style('(dry run)', fg='yellow')}"
        return styled
