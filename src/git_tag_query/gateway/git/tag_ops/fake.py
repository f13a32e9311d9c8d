"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

from pathlib import Path

from git_tag_query.errors import TagConflictError
from git_tag_query.gateway.git.tag_ops.abc import GitTagOps
from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote, TagKind


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - local_tags: Mapping of tag name -> TagKind, in listing order
    - remote_tags: Mapping of remote name -> tag names on that remote
    - containing_branches: Mapping of tag name -> remote-tracking branches
      (short names like "origin/main") whose history contains the tag
    - create_tag_raises: Exception to raise when create_tag() is called

    Mutation Tracking:
    -----------------
    This fake tracks mutations for test assertions via read-only properties:
    - created_tags: List of (tag_name, target_commit) tuples from create_tag()
    - fetched_remotes: List of (remote_name, account) tuples from fetch_remote_tags()
    """

    def __init__(
        self,
        *,
        local_tags: dict[str, TagKind] | None = None,
        remote_tags: dict[str, list[str]] | None = None,
        containing_branches: dict[str, list[str]] | None = None,
        create_tag_raises: Exception | None = None,
    ) -> None:
        """Create FakeGitTagOps with pre-configured state.

        Args:
            local_tags: Mapping of tag name -> TagKind
            remote_tags: Mapping of remote name -> tag names on that remote
            containing_branches: Mapping of tag name -> branches containing it
            create_tag_raises: Exception to raise when create_tag() is called
        """
        self._local_tags: dict[str, TagKind] = dict(local_tags) if local_tags is not None else {}
        self._remote_tags = remote_tags if remote_tags is not None else {}
        self._containing_branches = containing_branches if containing_branches is not None else {}
        self._create_tag_raises = create_tag_raises

        # Mutation tracking
        self._created_tags: list[tuple[str, str]] = []  # (tag_name, target_commit)
        self._fetched_remotes: list[tuple[str, GitAccount | None]] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_local_tags(self, repo_root: Path) -> list[str]:
        return list(self._local_tags)

    def list_annotated_tags(self, repo_root: Path) -> list[str]:
        return [name for name, kind in self._local_tags.items() if kind == TagKind.ANNOTATED]

    def fetch_remote_tags(
        self, repo_root: Path, account: GitAccount | None, remote: GitRemote
    ) -> list[str]:
        self._fetched_remotes.append((remote.name, account))
        return list(self._remote_tags.get(remote.name, []))

    def is_tag_reachable_by_remote(self, repo_root: Path, tag_name: str, remote: GitRemote) -> bool:
        prefix = f"{remote.name}/"
        branches = self._containing_branches.get(tag_name, [])
        return any(branch.startswith(prefix) for branch in branches)

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists in the fake state."""
        return tag_name in self._local_tags

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, target_commit: str) -> None:
        """Create an annotated tag (mutates internal state).

        Raises TagConflictError for a name that already exists, as git does.
        """
        if self._create_tag_raises is not None:
            raise self._create_tag_raises
        if tag_name in self._local_tags:
            raise TagConflictError(
                operation_context=f"create tag '{tag_name}'",
                cmd=["git", "tag", "-a", "-m", "", tag_name, target_commit],
                returncode=128,
                stdout="",
                stderr=f"fatal: tag '{tag_name}' already exists",
            )
        self._local_tags[tag_name] = TagKind.ANNOTATED
        self._created_tags.append((tag_name, target_commit))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def created_tags(self) -> list[tuple[str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, target_commit) tuples.
        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def fetched_remotes(self) -> list[tuple[str, GitAccount | None]]:
        """Get list of remote tag fetches made during test.

        Returns list of (remote_name, account) tuples.
        This property is for test assertions only.
        """
        return self._fetched_remotes.copy()
