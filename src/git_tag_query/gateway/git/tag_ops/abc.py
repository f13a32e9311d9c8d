"""Abstract base class for Git tag operations.

Covers creating annotated tags and the listing and reachability queries
over local and remote tags.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    This interface contains both query and mutation operations for tags.
    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_local_tags(self, repo_root: Path) -> list[str]:
        """List all local tag names, lightweight and annotated.

        Args:
            repo_root: Path to the repository root

        Returns:
            Tag names in the order git lists them (empty if there are none)

        Raises:
            ToolInvocationError: If git command fails
        """
        ...

    @abstractmethod
    def list_annotated_tags(self, repo_root: Path) -> list[str]:
        """List the local tags that are annotated.

        Never touches the network.

        Args:
            repo_root: Path to the repository root

        Returns:
            Names of annotated tags; lightweight tags are excluded

        Raises:
            ToolInvocationError: If git command fails
        """
        ...

    @abstractmethod
    def fetch_remote_tags(
        self, repo_root: Path, account: GitAccount | None, remote: GitRemote
    ) -> list[str]:
        """List the tags that exist on a remote (network request).

        The result includes lightweight tags; remote tags are not classified
        by kind.

        Args:
            repo_root: Path to the repository root
            account: Account to authenticate with, or None
            remote: Remote to query

        Returns:
            Tag names in the order the remote lists them, one entry per tag

        Raises:
            ToolInvocationError: If git command fails
        """
        ...

    @abstractmethod
    def is_tag_reachable_by_remote(self, repo_root: Path, tag_name: str, remote: GitRemote) -> bool:
        """Check whether a tag is contained in any of a remote's tracking branches.

        Only the remote-tracking branches of ``remote`` count. A tag reachable
        solely from another remote's branches is not reachable by this one.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag to look for
            remote: Remote whose tracking branches are searched

        Returns:
            True if at least one ``<remote>/...`` branch contains the tag

        Raises:
            ToolInvocationError: If git command fails (e.g. unknown tag)
        """
        ...

    @abstractmethod
    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a local git tag exists.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to check (e.g., 'v1.0.0')

        Returns:
            True if the tag exists, False otherwise
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, target_commit: str) -> None:
        """Create an annotated tag with an empty message at a commit.

        The caller is responsible for making sure the name is free; no
        existence check is made beforehand.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., 'v1.0.0')
            target_commit: Commit the tag points at

        Raises:
            TagConflictError: If a tag with this name already exists
            ToolInvocationError: If git command fails for any other reason
        """
        ...
