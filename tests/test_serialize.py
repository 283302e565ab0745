"""Tests for graph serialization."""

import json

from lanegraph.graph.builder import build_commit_graph
from lanegraph.graph.serialize import dumps_graph, serialize_graph_commit, serialize_ref, serialize_row
from lanegraph.graph.types import CommitInfo, CommitRef, RefInfo, RefKind


def sample_commits() -> list[CommitInfo]:
    return [
        CommitInfo(
            hash="merge1",
            parent_hashes=("main1", "feat1"),
            short_hash="merge1"[:7],
            message="Merge branch 'feature'",
            author_name="Test User",
            author_email="test@example.com",
            timestamp=1700000300,
        ),
        CommitInfo(hash="feat1", parent_hashes=("base",), message="Feature"),
        CommitInfo(hash="main1", parent_hashes=("base",), message="Main"),
        CommitInfo(hash="base", message="Initial commit"),
    ]


class TestSerializeRow:
    def test_row(self):
        graph = list(build_commit_graph(sample_commits()))

        data = serialize_row(graph[0].layout)

        assert data == {
            "column": 0,
            "is_tip": True,
            "lines": [
                {"from_column": 0, "to_column": 0, "is_merge": False, "line_type": "to_parent"},
                {"from_column": 0, "to_column": 1, "is_merge": True, "line_type": "to_parent"},
            ],
        }


class TestSerializeGraphCommit:
    def test_commit_fields_are_flattened(self):
        refs = {"merge1": [RefInfo("main", RefKind.BRANCH, is_head=True)]}
        graph = list(build_commit_graph(sample_commits(), refs))

        data = serialize_graph_commit(graph[0])

        assert data["hash"] == "merge1"
        assert data["parent_hashes"] == ["main1", "feat1"]
        assert data["message"] == "Merge branch 'feature'"
        assert data["timestamp"] == 1700000300
        assert data["column"] == 0
        assert data["is_tip"] is True
        assert data["refs"] == [{"name": "main", "ref_type": "branch", "is_head": True}]

    def test_plain_commit_ref(self):
        graph = list(build_commit_graph([CommitRef("a")], {"a": [RefInfo("origin/a", RefKind.REMOTE_BRANCH)]}))

        data = serialize_graph_commit(graph[0])

        assert data == {
            "hash": "a",
            "parent_hashes": [],
            "column": 0,
            "is_tip": True,
            "lines": [],
            "refs": [{"name": "origin/a", "ref_type": "remotebranch", "is_head": False}],
        }


class TestDumpsGraph:
    def test_valid_json(self):
        text = dumps_graph(build_commit_graph(sample_commits()))

        data = json.loads(text)
        assert [entry["hash"] for entry in data] == ["merge1", "feat1", "main1", "base"]
        assert data[2]["lines"][-1] == {
            "from_column": 0,
            "to_column": 1,
            "is_merge": False,
            "line_type": "to_parent",
        }

    def test_replay_is_byte_identical(self):
        first = dumps_graph(build_commit_graph(sample_commits()))
        second = dumps_graph(build_commit_graph(sample_commits()))

        assert first == second


class TestSerializeRef:
    def test_ref_types_match_renderer_names(self):
        kinds = [RefKind.BRANCH, RefKind.REMOTE_BRANCH, RefKind.TAG]

        types = [serialize_ref(RefInfo("x", kind))["ref_type"] for kind in kinds]

        assert types == ["branch", "remotebranch", "tag"]
