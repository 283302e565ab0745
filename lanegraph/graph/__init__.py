"""Commit graph layout engine."""

from lanegraph.graph.builder import GraphLayoutBuilder, build_commit_graph, layout_commits
from lanegraph.graph.lanes import LaneTracker
from lanegraph.graph.types import (
    CommitInfo,
    CommitRef,
    GraphCommit,
    InvariantViolation,
    LayoutRow,
    LineKind,
    LineSegment,
    RefInfo,
    RefKind,
)

__all__ = [
    "CommitInfo",
    "CommitRef",
    "GraphCommit",
    "GraphLayoutBuilder",
    "InvariantViolation",
    "LaneTracker",
    "LayoutRow",
    "LineKind",
    "LineSegment",
    "RefInfo",
    "RefKind",
    "build_commit_graph",
    "layout_commits",
]
