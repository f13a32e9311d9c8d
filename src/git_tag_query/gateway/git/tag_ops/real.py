"""Production Git tag operations on top of a command runner."""

import logging
from pathlib import Path

from git_tag_query.errors import TagConflictError, ToolInvocationError
from git_tag_query.gateway.command_runner.abc import CommandRunner
from git_tag_query.gateway.git.tag_ops.abc import GitTagOps
from git_tag_query.gateway.git.tag_ops.parsing import (
    BRANCH_FORMAT,
    LOCAL_TAG_FORMAT,
    filter_branches_for_remote,
    parse_annotated_tags,
    parse_remote_tags,
    parse_tag_list,
)
from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote
from git_tag_query.gateway.network_args.abc import NetworkArgumentProvider

logger = logging.getLogger(__name__)

# Timeout in seconds for network-touching git operations (ls-remote).
# Prevents indefinite hangs on network issues or credential prompts.
_GIT_NETWORK_TIMEOUT = 120

_TAG_EXISTS_MARKER = "already exists"


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations."""

    def __init__(self, runner: CommandRunner, network_args: NetworkArgumentProvider) -> None:
        """Initialize RealGitTagOps with its collaborators.

        Args:
            runner: Executes git and returns its stdout
            network_args: Supplies transport arguments for remote queries
        """
        self._runner = runner
        self._network_args = network_args

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_local_tags(self, repo_root: Path) -> list[str]:
        """List all local tag names."""
        result = self._runner.run(["tag"], repo_root, "list local tags")
        return parse_tag_list(result.stdout)

    def list_annotated_tags(self, repo_root: Path) -> list[str]:
        """List local annotated tags using git's object type for each tag."""
        result = self._runner.run(
            ["tag", f"--format={LOCAL_TAG_FORMAT}"], repo_root, "list annotated tags"
        )
        return parse_annotated_tags(result.stdout)

    def fetch_remote_tags(
        self, repo_root: Path, account: GitAccount | None, remote: GitRemote
    ) -> list[str]:
        """List tags on a remote via ls-remote."""
        args = [*self._network_args.build(account), "ls-remote", "--tags", remote.name]
        result = self._runner.run(
            args,
            repo_root,
            f"fetch tags from remote '{remote.name}'",
            timeout=_GIT_NETWORK_TIMEOUT,
        )
        tags = parse_remote_tags(result.stdout)
        logger.debug("Remote '%s' has %d tags", remote.name, len(tags))
        return tags

    def is_tag_reachable_by_remote(self, repo_root: Path, tag_name: str, remote: GitRemote) -> bool:
        """Check the remote's tracking branches that contain the tag."""
        result = self._runner.run(
            ["branch", "--remote", "--contains", tag_name, f"--format={BRANCH_FORMAT}"],
            repo_root,
            f"check whether tag '{tag_name}' is reachable by remote '{remote.name}'",
        )
        branches = filter_branches_for_remote(result.stdout, remote.name)
        logger.debug(
            "Tag '%s' is contained in %d branches of remote '%s'",
            tag_name,
            len(branches),
            remote.name,
        )
        return len(branches) > 0

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists among the local tags."""
        return tag_name in self.list_local_tags(repo_root)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, target_commit: str) -> None:
        """Create an annotated git tag with an empty message."""
        try:
            self._runner.run(
                ["tag", "-a", "-m", "", tag_name, target_commit],
                repo_root,
                f"create tag '{tag_name}'",
            )
        except ToolInvocationError as e:
            if _TAG_EXISTS_MARKER in e.stderr:
                raise TagConflictError.from_error(e) from e
            raise
        logger.debug("Created tag '%s' at %s", tag_name, target_commit)
