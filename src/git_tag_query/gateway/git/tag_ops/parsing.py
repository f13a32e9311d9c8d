"""Parsers for the text git prints when listing tags.

Each function takes the complete stdout of one command and returns a
structured result. Blank or malformed lines are skipped, never raised: one
bad line must not fail a whole listing.
"""

from git_tag_query.gateway.git.tag_ops.types import LocalTag, RemoteRef, TagKind

# Separates the fields of `git tag --format=%(refname:strip=2)%00%(objecttype)`
LOCAL_TAG_FIELD_SEPARATOR = "\0"
LOCAL_TAG_FORMAT = "%(refname:strip=2)%00%(objecttype)"
BRANCH_FORMAT = "%(refname:short)"


def parse_tag_list(stdout: str) -> list[str]:
    """Parse ``git tag`` output into tag names, in git's order."""
    return [line for line in stdout.split("\n") if line != ""]


def parse_local_tag_kinds(stdout: str) -> list[LocalTag]:
    """Parse ``git tag --format=LOCAL_TAG_FORMAT`` output into classified tags.

    Lines without the NUL-separated object type, and tags whose object type
    is neither ``tag`` nor ``commit``, are skipped.
    """
    tags: list[LocalTag] = []
    for line in stdout.split("\n"):
        if line == "":
            continue
        fields = line.split(LOCAL_TAG_FIELD_SEPARATOR)
        if len(fields) < 2 or fields[0] == "":
            continue
        kind = TagKind.from_object_type(fields[1])
        if kind is None:
            continue
        tags.append(LocalTag(name=fields[0], kind=kind))
    return tags


def parse_annotated_tags(stdout: str) -> list[str]:
    """Return the names of annotated tags in formatted ``git tag`` output.

    Lightweight tags report an object type of ``commit`` and are dropped.
    """
    return [tag.name for tag in parse_local_tag_kinds(stdout) if tag.kind == TagKind.ANNOTATED]


def parse_ls_remote_refs(stdout: str) -> list[RemoteRef]:
    """Parse ``git ls-remote`` output into refs, peeled entries included."""
    refs: list[RemoteRef] = []
    for line in stdout.split("\n"):
        fields = line.split("\t")
        if len(fields) < 2 or fields[1] == "":
            continue
        refs.append(RemoteRef(object_id=fields[0], full_ref=fields[1]))
    return refs


def parse_remote_tags(stdout: str) -> list[str]:
    """Parse ``git ls-remote --tags`` output into tag names.

    An annotated tag is listed twice: once for the tag object and once, with
    a ``^{}`` suffix, for the commit it peels to. The peeled line is dropped
    so each tag appears once. Lightweight tags have a single line and are
    kept, so the result is not limited to annotated tags.
    """
    return [ref.tag_name for ref in parse_ls_remote_refs(stdout) if not ref.is_peeled]


def filter_branches_for_remote(stdout: str, remote_name: str) -> list[str]:
    """Keep the ``%(refname:short)`` branch lines that belong to ``remote_name``."""
    prefix = f"{remote_name}/"
    return [line for line in stdout.split("\n") if line.startswith(prefix)]
