"""Commit graph layout - turns an ordered commit stream into graph rows."""

from collections.abc import Iterable, Iterator, Mapping, Sequence

from lanegraph.graph.lanes import LaneTracker
from lanegraph.graph.types import (
    CommitRef,
    GraphCommit,
    InvariantViolation,
    LayoutRow,
    LineKind,
    LineSegment,
    RefInfo,
)


class GraphLayoutBuilder:
    """
    Lays out commits one row at a time.

    Commits must be pushed in render order: every commit after all of its
    children (newest first, as a topological git log produces them). Each
    push returns the row for that commit and mutates the lane state for the
    rows that follow. Nothing looks ahead, so rows can be consumed as they
    are produced and layout can stop at any point.

    Row anatomy, in order:
    1. PASS_THROUGH for every open lane the commit does not sit on
    2. FROM_ABOVE on the commit's column if a child was waiting for it
    3. TO_PARENT for each parent, in parent order

    The first parent continues straight down in the commit's own column
    unless another lane is already waiting for it, in which case the edge
    converges into that lane. Further parents are merge edges into an
    existing lane or a newly allocated one.
    """

    def __init__(self, tracker: LaneTracker | None = None) -> None:
        self._tracker = tracker if tracker is not None else LaneTracker()
        self._emitted: set[str] = set()
        self._failure: InvariantViolation | None = None

    @property
    def tracker(self) -> LaneTracker:
        return self._tracker

    @property
    def rows_emitted(self) -> int:
        return len(self._emitted)

    @property
    def width(self) -> int:
        """Number of columns the graph has needed so far."""
        return self._tracker.width

    def push(self, commit: CommitRef) -> LayoutRow:
        """Lay out the next commit and return its row."""
        if self._failure is not None:
            raise InvariantViolation(self._failure.hash, "Layout pass already failed") from self._failure

        try:
            return self._place(commit)
        except InvariantViolation as e:
            self._failure = e
            raise

    def layout(self, commits: Iterable[CommitRef]) -> Iterator[LayoutRow]:
        """Lazily lay out commits, pulling one input commit per row."""
        for commit in commits:
            yield self.push(commit)

    def _check_order(self, commit: CommitRef) -> None:
        if commit.hash in self._emitted:
            raise InvariantViolation(commit.hash, "Commit appears twice in the input")

        for parent_hash in commit.parent_hashes:
            if parent_hash == commit.hash:
                raise InvariantViolation(parent_hash, "Commit lists itself as a parent")
            if parent_hash in self._emitted:
                raise InvariantViolation(
                    parent_hash, f"Parent was emitted before its child {commit.hash}"
                )

    def _place(self, commit: CommitRef) -> LayoutRow:
        # Validate before touching lanes so a bad row leaves no half-applied state
        self._check_order(commit)

        tracker = self._tracker
        column = tracker.find_lane_for(commit.hash)
        is_tip = column is None

        lines: list[LineSegment] = [
            LineSegment(lane, lane, False, LineKind.PASS_THROUGH)
            for lane in sorted(tracker.active_columns())
            if lane != column
        ]

        if column is None:
            # New branch head: claim the lowest free column for the node itself
            column = tracker.allocate_lane(commit.hash)
        else:
            lines.append(LineSegment(column, column, False, LineKind.FROM_ABOVE))

        continued = False
        parents = commit.parent_hashes
        if parents:
            primary = parents[0]
            target = tracker.find_lane_for(primary)
            if target is None:
                tracker.retarget_lane(column, primary)
                continued = True
                target = column
            lines.append(LineSegment(column, target, False, LineKind.TO_PARENT))

            for parent_hash in parents[1:]:
                target = tracker.find_lane_for(parent_hash)
                if target is None:
                    target = tracker.allocate_lane(parent_hash)
                lines.append(LineSegment(column, target, True, LineKind.TO_PARENT))

        # Released after merge parents are placed so they never take the node's column
        if not continued:
            tracker.release_lane(column)

        self._emitted.add(commit.hash)
        return LayoutRow(column=column, is_tip=is_tip, lines=tuple(lines))


def layout_commits(commits: Iterable[CommitRef]) -> Iterator[LayoutRow]:
    """Lay out commits with a fresh builder, yielding one row per commit."""
    builder = GraphLayoutBuilder()
    yield from builder.layout(commits)


def build_commit_graph(
    commits: Iterable[CommitRef],
    refs: Mapping[str, Sequence[RefInfo]] | None = None,
    builder: GraphLayoutBuilder | None = None,
) -> Iterator[GraphCommit]:
    """
    Lay out commits and attach the refs pointing at each one.

    Args:
        commits: Commits in render order (children before parents)
        refs: Commit hash -> refs pointing at that commit
        builder: Builder to continue; a fresh one is used when omitted

    Yields:
        GraphCommit for each input commit, in input order
    """
    if builder is None:
        builder = GraphLayoutBuilder()
    refs = refs or {}

    for commit in commits:
        row = builder.push(commit)
        yield GraphCommit(commit=commit, layout=row, refs=tuple(refs.get(commit.hash, ())))
