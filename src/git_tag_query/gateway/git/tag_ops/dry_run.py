"""No-op Git tag operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of destructive
tag operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from git_tag_query.gateway.git.tag_ops.abc import GitTagOps
from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote
from git_tag_query.output.output import user_output


class DryRunGitTagOps(GitTagOps):
    """No-op wrapper that prevents execution of destructive tag operations.

    This wrapper intercepts create_tag and prints what would happen. All
    queries, including the remote ones, are delegated to the wrapped
    implementation.

    Usage:
        real_ops = RealGitTagOps(RealCommandRunner(), RealNetworkArgumentProvider())
        noop_ops = DryRunGitTagOps(real_ops)

        # Query operations work normally
        tags = noop_ops.list_local_tags(repo_root)

        # Mutation operations print dry-run message
        noop_ops.create_tag(repo_root, "v1.0.0", "abc123")
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        """Create a dry-run wrapper around a GitTagOps implementation.

        Args:
            wrapped: The GitTagOps implementation to wrap (usually RealGitTagOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def list_local_tags(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_tags(repo_root)

    def list_annotated_tags(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_annotated_tags(repo_root)

    def fetch_remote_tags(
        self, repo_root: Path, account: GitAccount | None, remote: GitRemote
    ) -> list[str]:
        return self._wrapped.fetch_remote_tags(repo_root, account, remote)

    def is_tag_reachable_by_remote(self, repo_root: Path, tag_name: str, remote: GitRemote) -> bool:
        return self._wrapped.is_tag_reachable_by_remote(repo_root, tag_name, remote)

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if tag exists (read-only, delegates to wrapped)."""
        return self._wrapped.tag_exists(repo_root, tag_name)

    # ============================================================================
    # Mutation Operations (print dry-run message)
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, target_commit: str) -> None:
        """Print dry-run message instead of creating tag."""
        user_output(f"[DRY RUN] Would run: git tag -a -m '' {tag_name} {target_commit}")
