"""Graph Serialization - export laid out rows to JSON-compatible dicts."""

import json
from collections.abc import Iterable
from typing import Any

from lanegraph.graph.types import CommitInfo, GraphCommit, LayoutRow, LineSegment, RefInfo


def serialize_segment(segment: LineSegment) -> dict[str, Any]:
    return {
        "from_column": segment.from_column,
        "to_column": segment.to_column,
        "is_merge": segment.is_merge,
        "line_type": segment.kind.value,
    }


def serialize_row(row: LayoutRow) -> dict[str, Any]:
    """Serialize a LayoutRow to a JSON-compatible dict."""
    return {
        "column": row.column,
        "is_tip": row.is_tip,
        "lines": [serialize_segment(line) for line in row.lines],
    }


def serialize_ref(ref: RefInfo) -> dict[str, Any]:
    return {
        "name": ref.name,
        "ref_type": ref.kind.value,
        "is_head": ref.is_head,
    }


def serialize_graph_commit(graph_commit: GraphCommit) -> dict[str, Any]:
    """Serialize a GraphCommit to a JSON-compatible dict.

    Commit fields are flattened into the top level next to the layout, so a
    renderer gets one flat record per row.

    Args:
        graph_commit: The laid out commit to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    commit = graph_commit.commit
    result: dict[str, Any] = {
        "hash": commit.hash,
        "parent_hashes": list(commit.parent_hashes),
    }

    # Metadata is only present when the commit came from a repository walk
    if isinstance(commit, CommitInfo):
        result.update(
            {
                "short_hash": commit.short_hash,
                "message": commit.message,
                "author_name": commit.author_name,
                "author_email": commit.author_email,
                "timestamp": commit.timestamp,
            }
        )

    result.update(serialize_row(graph_commit.layout))
    result["refs"] = [serialize_ref(ref) for ref in graph_commit.refs]
    return result


def dumps_graph(graph_commits: Iterable[GraphCommit], indent: int | None = None) -> str:
    """Serialize laid out commits to a JSON array string."""
    return json.dumps([serialize_graph_commit(gc) for gc in graph_commits], indent=indent)
