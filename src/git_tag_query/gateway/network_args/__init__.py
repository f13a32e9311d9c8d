"""Network argument gateway.

Builds the transport configuration git needs before any command that talks
to a remote.

Import from submodules:
- abc: NetworkArgumentProvider
- real: RealNetworkArgumentProvider
- fake: FakeNetworkArgumentProvider
"""
