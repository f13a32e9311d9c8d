"""Value types for Git tag operations."""

from dataclasses import dataclass
from enum import Enum

TAG_REF_PREFIX = "refs/tags/"
PEELED_SUFFIX = "^{}"


class TagKind(Enum):
    """Whether a tag points at a tag object or directly at a commit."""

    LIGHTWEIGHT = "lightweight"
    ANNOTATED = "annotated"

    @classmethod
    def from_object_type(cls, object_type: str) -> "TagKind | None":
        """Map git's %(objecttype) to a kind.

        Returns None for object types that are neither a tag object nor a
        commit (e.g. a tag pointing at a tree or blob).
        """
        if object_type == "tag":
            return cls.ANNOTATED
        if object_type == "commit":
            return cls.LIGHTWEIGHT
        return None


@dataclass(frozen=True)
class LocalTag:
    """A local tag and its kind."""

    name: str
    kind: TagKind


@dataclass(frozen=True)
class RemoteRef:
    """One ``<object id>\\t<full ref>`` line reported by ls-remote.

    Attributes:
        object_id: Object the ref points at
        full_ref: Full ref path, e.g. ``refs/tags/v1.0`` or ``refs/tags/v1.0^{}``
    """

    object_id: str
    full_ref: str

    @property
    def is_peeled(self) -> bool:
        """True for the synthetic entry ls-remote adds after each annotated tag."""
        return self.full_ref.endswith(PEELED_SUFFIX)

    @property
    def tag_name(self) -> str:
        """Tag name without the ``refs/tags/`` namespace."""
        name = self.full_ref.removeprefix(TAG_REF_PREFIX)
        return name.removeprefix(PEELED_SUFFIX)


@dataclass(frozen=True)
class GitRemote:
    """Identity of a git remote, supplied by the caller."""

    name: str


@dataclass(frozen=True)
class GitAccount:
    """Account used to authenticate network operations."""

    login: str
