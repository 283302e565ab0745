"""Lane allocation for the commit graph."""

import heapq

from lanegraph.graph.types import InvariantViolation


class LaneTracker:
    """
    Owns the set of open lanes while a commit graph is laid out.

    An open lane is a pending edge from a commit that has already been
    emitted down to a parent that has not been emitted yet. Lanes live in an
    arena indexed by column; released columns go onto a min-heap so the
    lowest free column is always reused first. This keeps the graph narrow
    instead of leaking a new column for every branch ever seen.

    Invariants:
    - no two live lanes share a column
    - at most one live lane targets a given hash
    """

    def __init__(self) -> None:
        # column -> target hash (None for a free slot below the high-water mark)
        self._lanes: list[str | None] = []
        # free slots in self._lanes, lowest first
        self._free: list[int] = []
        self._by_target: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._by_target)

    def __contains__(self, target_hash: object) -> bool:
        return target_hash in self._by_target

    @property
    def width(self) -> int:
        """Number of columns ever needed at once (high-water mark)."""
        return len(self._lanes)

    def find_lane_for(self, target_hash: str) -> int | None:
        """Return the column of the lane waiting for target_hash, if any."""
        return self._by_target.get(target_hash)

    def target_of(self, column: int) -> str | None:
        """Return the hash the lane at column is waiting for, if it is live."""
        if 0 <= column < len(self._lanes):
            return self._lanes[column]
        return None

    def allocate_lane(self, target_hash: str) -> int:
        """Open a lane for target_hash at the lowest free column."""
        if target_hash in self._by_target:
            raise InvariantViolation(
                target_hash,
                "A lane is already waiting for this hash",
                self._by_target[target_hash],
            )

        if self._free:
            column = heapq.heappop(self._free)
            self._lanes[column] = target_hash
        else:
            column = len(self._lanes)
            self._lanes.append(target_hash)

        self._by_target[target_hash] = column
        return column

    def release_lane(self, column: int) -> None:
        """Close the lane at column, making the column available again."""
        target_hash = self._require_live(column)
        del self._by_target[target_hash]
        self._lanes[column] = None
        heapq.heappush(self._free, column)

    def retarget_lane(self, column: int, new_hash: str) -> None:
        """Point the lane at column to a new hash without moving it."""
        old_hash = self._require_live(column)
        if old_hash == new_hash:
            return

        existing = self._by_target.get(new_hash)
        if existing is not None:
            raise InvariantViolation(
                new_hash, f"Cannot retarget column {column}: lane {existing} already waits for this hash", column
            )

        del self._by_target[old_hash]
        self._by_target[new_hash] = column
        self._lanes[column] = new_hash

    def active_columns(self) -> set[int]:
        """Return all live columns."""
        return set(self._by_target.values())

    def _require_live(self, column: int) -> str:
        """Return the target at column. A dead column has no hash to report, only the column."""
        target_hash = self.target_of(column)
        if target_hash is None:
            raise InvariantViolation(None, f"No open lane at column {column}", column)
        return target_hash
