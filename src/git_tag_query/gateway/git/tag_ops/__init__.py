"""Git tag operations sub-gateway.

This module provides the gateway for tag operations: creating annotated
tags, listing local and annotated tags, listing a remote's tags, and
checking whether a tag is reachable from a remote's branches.

Import from submodules:
- abc: GitTagOps
- real: RealGitTagOps
- fake: FakeGitTagOps
- dry_run: DryRunGitTagOps
- printing: PrintingGitTagOps
- parsing: pure parsers for git's tag listing formats
- types: TagKind, LocalTag, RemoteRef, GitRemote, GitAccount
"""
