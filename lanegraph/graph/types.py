"""Types for commit graph layout."""

from dataclasses import dataclass, field
from enum import Enum


class InvariantViolation(Exception):
    """
    Raised when the commit stream contradicts the render order contract.

    The layout engine expects every commit to arrive after all of its
    children. A duplicate hash, a parent that was already emitted, or a lane
    operation on a column that is not live all mean the upstream ordering is
    broken. The whole layout pass has to be treated as failed.

    ``hash`` names the offending commit or parent. It is None when the
    offence is a lane operation on a column that holds no lane; ``column``
    is set instead.
    """

    def __init__(self, commit_hash: str | None, message: str, column: int | None = None) -> None:
        self.hash = commit_hash
        self.column = column
        if commit_hash is not None:
            message = f"{message} (commit {commit_hash})"
        super().__init__(message)


@dataclass(frozen=True)
class CommitRef:
    """A commit as seen by the layout engine: its hash and ordered parents."""

    hash: str
    parent_hashes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence from callers, store an immutable tuple
        if not isinstance(self.parent_hashes, tuple):
            object.__setattr__(self, "parent_hashes", tuple(self.parent_hashes))


@dataclass(frozen=True)
class CommitInfo(CommitRef):
    """A commit with the metadata shown next to its graph row."""

    short_hash: str = ""
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    timestamp: int = 0


class LineKind(Enum):
    """How a line segment sits within its row."""

    PASS_THROUGH = "pass_through"  # lane not touched by this row
    FROM_ABOVE = "from_above"  # edge arriving into this row's node
    TO_PARENT = "to_parent"  # edge leaving this row's node downward


@dataclass(frozen=True)
class LineSegment:
    """One connector line drawn within a single row."""

    from_column: int
    to_column: int
    is_merge: bool
    kind: LineKind


@dataclass(frozen=True)
class LayoutRow:
    """Layout for one commit: its column, tip flag and connector lines."""

    column: int
    is_tip: bool
    lines: tuple[LineSegment, ...] = ()


class RefKind(Enum):
    BRANCH = "branch"
    REMOTE_BRANCH = "remotebranch"
    TAG = "tag"


@dataclass(frozen=True)
class RefInfo:
    """A branch or tag pointing at a commit."""

    name: str
    kind: RefKind
    is_head: bool = False


@dataclass(frozen=True)
class GraphCommit:
    """A laid out commit together with the refs that point at it."""

    commit: CommitRef
    layout: LayoutRow
    refs: tuple[RefInfo, ...] = field(default_factory=tuple)

    @property
    def hash(self) -> str:
        return self.commit.hash

    @property
    def column(self) -> int:
        return self.layout.column

    @property
    def is_tip(self) -> bool:
        return self.layout.is_tip

    @property
    def lines(self) -> tuple[LineSegment, ...]:
        return self.layout.lines
