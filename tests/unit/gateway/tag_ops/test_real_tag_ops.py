"""Tests for RealGitTagOps against a fake command runner."""

from pathlib import Path

import pytest

from git_tag_query.errors import TagConflictError, ToolInvocationError
from git_tag_query.gateway.command_runner.fake import FakeCommandRunner
from git_tag_query.gateway.git.tag_ops.real import RealGitTagOps
from git_tag_query.gateway.git.tag_ops.types import GitAccount, GitRemote
from git_tag_query.gateway.network_args.fake import FakeNetworkArgumentProvider

REPO = Path("/repo")
ORIGIN = GitRemote(name="origin")

LIST_TAGS = ("tag",)
LIST_ANNOTATED = ("tag", "--format=%(refname:strip=2)%00%(objecttype)")
LS_REMOTE = ("ls-remote", "--tags", "origin")


def _reachability_args(tag_name: str) -> tuple[str, ...]:
    return ("branch", "--remote", "--contains", tag_name, "--format=%(refname:short)")


def _make_error(context: str, stderr: str) -> ToolInvocationError:
    return ToolInvocationError(
        operation_context=context,
        cmd=["git"],
        returncode=128,
        stdout="",
        stderr=stderr,
    )


def _make_ops(
    runner: FakeCommandRunner, network_args: FakeNetworkArgumentProvider | None = None
) -> RealGitTagOps:
    if network_args is None:
        network_args = FakeNetworkArgumentProvider()
    return RealGitTagOps(runner, network_args)


class TestListLocalTags:
    def test_returns_tag_names(self) -> None:
        runner = FakeCommandRunner(responses={LIST_TAGS: "v1\nv2\n"})
        assert _make_ops(runner).list_local_tags(REPO) == ["v1", "v2"]

    def test_runs_git_tag_in_repo(self) -> None:
        runner = FakeCommandRunner()
        _make_ops(runner).list_local_tags(REPO)
        assert runner.calls == [(LIST_TAGS, REPO, "list local tags")]

    def test_local_queries_have_no_timeout(self) -> None:
        runner = FakeCommandRunner()
        ops = _make_ops(runner)
        ops.list_local_tags(REPO)
        ops.list_annotated_tags(REPO)
        ops.is_tag_reachable_by_remote(REPO, "v1", ORIGIN)
        ops.create_tag(REPO, "v1", "abc123")
        assert runner.timeouts == [None, None, None, None]

    def test_empty_output_is_empty_list(self) -> None:
        runner = FakeCommandRunner(responses={LIST_TAGS: ""})
        assert _make_ops(runner).list_local_tags(REPO) == []

    def test_repeated_reads_are_identical(self) -> None:
        runner = FakeCommandRunner(responses={LIST_TAGS: "a\nb\n"})
        ops = _make_ops(runner)
        assert ops.list_local_tags(REPO) == ops.list_local_tags(REPO)


class TestListAnnotatedTags:
    def test_filters_lightweight_tags(self) -> None:
        runner = FakeCommandRunner(responses={LIST_ANNOTATED: "v1\0tag\nv2\0commit\n"})
        assert _make_ops(runner).list_annotated_tags(REPO) == ["v1"]

    def test_does_not_touch_network(self) -> None:
        network_args = FakeNetworkArgumentProvider(args=["-c", "x=y"])
        runner = FakeCommandRunner()
        _make_ops(runner, network_args).list_annotated_tags(REPO)
        assert network_args.requested_accounts == []
        assert runner.calls == [(LIST_ANNOTATED, REPO, "list annotated tags")]


class TestFetchRemoteTags:
    def test_prepends_network_arguments(self) -> None:
        network_args = FakeNetworkArgumentProvider(args=["-c", "credential.helper="])
        runner = FakeCommandRunner()
        account = GitAccount(login="octocat")

        _make_ops(runner, network_args).fetch_remote_tags(REPO, account, ORIGIN)

        assert network_args.requested_accounts == [account]
        args, cwd, context = runner.calls[0]
        assert args == ("-c", "credential.helper=", *LS_REMOTE)
        assert cwd == REPO
        assert context == "fetch tags from remote 'origin'"

    def test_ls_remote_uses_network_timeout(self) -> None:
        runner = FakeCommandRunner()
        _make_ops(runner).fetch_remote_tags(REPO, None, ORIGIN)
        assert runner.timeouts == [120]

    def test_suppresses_peeled_entries(self) -> None:
        stdout = "aaa\trefs/tags/v1\nbbb\trefs/tags/v1^{}\nccc\trefs/tags/v2\n"
        runner = FakeCommandRunner(responses={LS_REMOTE: stdout})
        assert _make_ops(runner).fetch_remote_tags(REPO, None, ORIGIN) == ["v1", "v2"]

    def test_empty_output_is_empty_list(self) -> None:
        runner = FakeCommandRunner(responses={LS_REMOTE: ""})
        assert _make_ops(runner).fetch_remote_tags(REPO, None, ORIGIN) == []

    def test_propagates_failure(self) -> None:
        error = _make_error("fetch tags from remote 'origin'", "fatal: could not read")
        runner = FakeCommandRunner(errors={LS_REMOTE: error})
        with pytest.raises(ToolInvocationError) as exc_info:
            _make_ops(runner).fetch_remote_tags(REPO, None, ORIGIN)
        assert exc_info.value is error


class TestIsTagReachableByRemote:
    def test_true_when_remote_branch_contains_tag(self) -> None:
        runner = FakeCommandRunner(
            responses={_reachability_args("v1"): "origin/main\nupstream/main\n"}
        )
        assert _make_ops(runner).is_tag_reachable_by_remote(REPO, "v1", ORIGIN) is True

    def test_false_when_only_other_remote_contains_tag(self) -> None:
        runner = FakeCommandRunner(responses={_reachability_args("v1"): "upstream/main\n"})
        assert _make_ops(runner).is_tag_reachable_by_remote(REPO, "v1", ORIGIN) is False

    def test_false_when_no_branch_contains_tag(self) -> None:
        runner = FakeCommandRunner(responses={_reachability_args("v1"): ""})
        assert _make_ops(runner).is_tag_reachable_by_remote(REPO, "v1", ORIGIN) is False

    def test_uses_context_naming_tag_and_remote(self) -> None:
        runner = FakeCommandRunner()
        _make_ops(runner).is_tag_reachable_by_remote(REPO, "v1", ORIGIN)
        assert runner.calls == [
            (
                _reachability_args("v1"),
                REPO,
                "check whether tag 'v1' is reachable by remote 'origin'",
            )
        ]


class TestTagExists:
    def test_true_for_listed_tag(self) -> None:
        runner = FakeCommandRunner(responses={LIST_TAGS: "v1\nv2\n"})
        assert _make_ops(runner).tag_exists(REPO, "v2") is True

    def test_false_for_prefix_of_listed_tag(self) -> None:
        runner = FakeCommandRunner(responses={LIST_TAGS: "v1.0\n"})
        assert _make_ops(runner).tag_exists(REPO, "v1") is False


class TestCreateTag:
    def test_creates_annotated_tag_with_empty_message(self) -> None:
        runner = FakeCommandRunner()
        _make_ops(runner).create_tag(REPO, "v1", "abc123")
        assert runner.calls == [
            (("tag", "-a", "-m", "", "v1", "abc123"), REPO, "create tag 'v1'")
        ]

    def test_existing_tag_raises_conflict(self) -> None:
        stderr = "fatal: tag 'v1' already exists\n"
        error = _make_error("create tag 'v1'", stderr)
        runner = FakeCommandRunner(errors={("tag", "-a", "-m", "", "v1", "abc123"): error})
        with pytest.raises(TagConflictError) as exc_info:
            _make_ops(runner).create_tag(REPO, "v1", "abc123")
        assert exc_info.value.stderr == stderr
        assert "already exists" in str(exc_info.value)

    def test_other_failures_are_not_conflicts(self) -> None:
        error = _make_error("create tag 'v1'", "fatal: Failed to resolve 'nope' as a valid ref.")
        runner = FakeCommandRunner(errors={("tag", "-a", "-m", "", "v1", "nope"): error})
        with pytest.raises(ToolInvocationError) as exc_info:
            _make_ops(runner).create_tag(REPO, "v1", "nope")
        assert not isinstance(exc_info.value, TagConflictError)
        assert exc_info.value is error
