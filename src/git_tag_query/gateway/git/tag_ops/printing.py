"""Printing Git tag operations wrapper for verbose output.

This module provides a wrapper that prints styled output for tag operations
before delegating to the wrapped implementation.
"""

from pathlib import Path

from git_tag_query.gateway.git.tag_ops.abc import GitTagOps
from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote
from git_tag_query.printing.base import PrintingBase


class PrintingGitTagOps(PrintingBase, GitTagOps):
    """Wrapper that prints tag operations before delegating to inner implementation.

    Commands that create tags or reach the network are printed; local
    queries are delegated silently.

    Usage:
        # For production
        printing_ops = PrintingGitTagOps(real_ops, script_mode=False, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitTagOps(real_ops)
        printing_ops = PrintingGitTagOps(noop_inner, script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_local_tags(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_tags(repo_root)

    def list_annotated_tags(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_annotated_tags(repo_root)

    def fetch_remote_tags(
        self, repo_root: Path, account: GitAccount | None, remote: GitRemote
    ) -> list[str]:
        """Fetch remote tags with printed output."""
        self._emit(self._format_command(f"git ls-remote --tags {remote.name}"))
        return self._wrapped.fetch_remote_tags(repo_root, account, remote)

    def is_tag_reachable_by_remote(self, repo_root: Path, tag_name: str, remote: GitRemote) -> bool:
        return self._wrapped.is_tag_reachable_by_remote(repo_root, tag_name, remote)

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if tag exists (read-only, no printing)."""
        return self._wrapped.tag_exists(repo_root, tag_name)

    # ============================================================================
    # Mutation Operations (print before delegating)
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, target_commit: str) -> None:
        """Create tag with printed output."""
        self._emit(self._format_command(f"git tag -a -m '' {tag_name} {target_commit}"))
        self._wrapped.create_tag(repo_root, tag_name, target_commit)
