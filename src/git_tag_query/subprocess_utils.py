"""Subprocess helpers shared by the production gateways.

Every git invocation goes through run_subprocess_with_context so that a
failing command always surfaces as a ToolInvocationError labelled with the
operation that issued it.
"""

import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from git_tag_query.debug_timing import timed_operation
from git_tag_query.errors import ToolInvocationError


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of os.environ suitable for non-interactive git commands.

    GIT_TERMINAL_PROMPT=0 makes git fail instead of blocking on a credential
    prompt nobody can answer. Messages are forced to the C locale because
    callers match on git's English diagnostics; LANGUAGE would otherwise
    still select a translation.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    env["LC_ALL"] = "C"
    env.pop("LANGUAGE", None)
    return env


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing its output in full.

    Args:
        cmd: Command and arguments
        operation_context: Short description of what the command is for,
            used in log lines and error messages
        cwd: Working directory
        timeout: Seconds before the command is killed, or None for no limit
        env: Environment for the child process, or None to inherit

    Returns:
        The completed process with text stdout/stderr

    Raises:
        ToolInvocationError: If the command exits non-zero, times out, or
            cannot be started
    """
    with timed_operation(" ".join(cmd)):
        try:
            return subprocess.run(
                list(cmd),
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
                timeout=timeout,
                env=dict(env) if env is not None else None,
            )
        except subprocess.CalledProcessError as e:
            raise ToolInvocationError(
                operation_context=operation_context,
                cmd=cmd,
                returncode=e.returncode,
                stdout=e.stdout or "",
                stderr=e.stderr or "",
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ToolInvocationError(
                operation_context=operation_context,
                cmd=cmd,
                returncode=None,
                stdout="",
                stderr=f"Command timed out after {timeout} seconds",
            ) from e
        except FileNotFoundError as e:
            raise ToolInvocationError(
                operation_context=operation_context,
                cmd=cmd,
                returncode=None,
                stdout="",
                stderr=f"Executable not found: {cmd[0]}",
            ) from e
