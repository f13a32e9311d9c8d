"""Production command runner using subprocess."""

from collections.abc import Sequence
from pathlib import Path

from git_tag_query.gateway.command_runner.abc import CommandResult, CommandRunner
from git_tag_query.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


class RealCommandRunner(CommandRunner):
    """Runs the git executable found on PATH."""

    def __init__(self, *, git_executable: str = "git", timeout: float | None = None) -> None:
        """Create a runner.

        Args:
            git_executable: Name or path of the git binary
            timeout: Default seconds before a command is killed, None for no limit
        """
        self._git_executable = git_executable
        self._timeout = timeout

    def run(
        self,
        args: Sequence[str],
        cwd: Path,
        context: str,
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        """Run git and return its stdout.

        ``timeout`` overrides the runner's default for this call only.
        """
        result = run_subprocess_with_context(
            cmd=[self._git_executable, *args],
            operation_context=context,
            cwd=cwd,
            timeout=timeout if timeout is not None else self._timeout,
            env=copied_env_for_git_subprocess(),
        )
        return CommandResult(stdout=result.stdout)
