"""Fake network argument provider for testing."""

from __future__ import annotations

from git_tag_query.gateway.git.tag_ops.types import GitAccount
from git_tag_query.gateway.network_args.abc import NetworkArgumentProvider


class FakeNetworkArgumentProvider(NetworkArgumentProvider):
    """Returns fixed arguments and records which accounts were requested."""

    def __init__(self, *, args: list[str] | None = None) -> None:
        self._args = args if args is not None else []
        self._requested_accounts: list[GitAccount | None] = []

    def build(self, account: GitAccount | None) -> list[str]:
        self._requested_accounts.append(account)
        return list(self._args)

    @property
    def requested_accounts(self) -> list[GitAccount | None]:
        """Get accounts passed to build(), for test assertions only."""
        return self._requested_accounts.copy()
