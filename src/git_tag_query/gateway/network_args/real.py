"""Production network arguments as git -c overrides."""

from git_tag_query.gateway.git.tag_ops.types import GitAccount
from git_tag_query.gateway.network_args.abc import NetworkArgumentProvider

DEFAULT_PROTOCOL_VERSION = 2


class RealNetworkArgumentProvider(NetworkArgumentProvider):
    """Builds ``-c`` overrides for credentials and wire protocol."""

    def __init__(self, *, protocol_version: int | None = DEFAULT_PROTOCOL_VERSION) -> None:
        """Create a provider.

        Args:
            protocol_version: Wire protocol version to request, or None to
                leave the repository's own setting in effect
        """
        self._protocol_version = protocol_version

    def build(self, account: GitAccount | None) -> list[str]:
        # Clear configured helpers so credentials come only from the caller's account
        args = ["-c", "credential.helper="]
        if account is not None:
            args.extend(["-c", f"credential.username={account.login}"])
        if self._protocol_version is not None:
            args.extend(["-c", f"protocol.version={self._protocol_version}"])
        return args
