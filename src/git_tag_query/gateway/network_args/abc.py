"""Abstract base class for building git network arguments."""

from __future__ import annotations

from abc import ABC, abstractmethod

from git_tag_query.gateway.git.tag_ops.types import GitAccount


class NetworkArgumentProvider(ABC):
    """Produces arguments to prepend before network-touching git commands."""

    @abstractmethod
    def build(self, account: GitAccount | None) -> list[str]:
        """Build transport arguments for the given account.

        Args:
            account: Account to authenticate as, or None for anonymous access

        Returns:
            Arguments to place before the git subcommand (e.g. ["-c", "k=v"])
        """
        ...
