"""Fake command runner for testing."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from git_tag_query.gateway.command_runner.abc import CommandResult, CommandRunner


class FakeCommandRunner(CommandRunner):
    """Returns canned stdout for exact argument lists.

    Constructor Injection:
    ---------------------
    - responses: Mapping of argument tuple -> stdout text
    - errors: Mapping of argument tuple -> exception to raise

    Commands with no configured response return empty stdout, which every
    listing parses as an empty result.

    Mutation Tracking:
    -----------------
    - calls: List of (args, cwd, context) tuples, in call order
    - timeouts: List of the timeout passed with each call, in call order
    """

    def __init__(
        self,
        *,
        responses: dict[tuple[str, ...], str] | None = None,
        errors: dict[tuple[str, ...], Exception] | None = None,
    ) -> None:
        self._responses = responses if responses is not None else {}
        self._errors = errors if errors is not None else {}
        self._calls: list[tuple[tuple[str, ...], Path, str]] = []
        self._timeouts: list[float | None] = []

    def run(
        self,
        args: Sequence[str],
        cwd: Path,
        context: str,
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        key = tuple(args)
        self._calls.append((key, cwd, context))
        self._timeouts.append(timeout)
        if key in self._errors:
            raise self._errors[key]
        return CommandResult(stdout=self._responses.get(key, ""))

    @property
    def calls(self) -> list[tuple[tuple[str, ...], Path, str]]:
        """Get the commands run during the test.

        This property is for test assertions only.
        """
        return self._calls.copy()

    @property
    def timeouts(self) -> list[float | None]:
        """Get the timeout of each command run during the test.

        This property is for test assertions only.
        """
        return self._timeouts.copy()
