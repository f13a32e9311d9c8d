"""Command runner gateway.

Executes git and returns its buffered stdout.

Import from submodules:
- abc: CommandRunner, CommandResult
- real: RealCommandRunner
- fake: FakeCommandRunner
"""
