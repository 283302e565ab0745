"""
Commit and ref retrieval using pygit2
"""

import itertools
from collections.abc import Iterator
from pathlib import Path

import pygit2
from pygit2.enums import SortMode

from lanegraph.constants import SHORT_HASH_LENGTH
from lanegraph.graph.builder import build_commit_graph
from lanegraph.graph.types import CommitInfo, GraphCommit, RefInfo, RefKind


def commit_to_info(commit: pygit2.Commit) -> CommitInfo:
    """Convert a pygit2 commit to the value the layout engine consumes."""
    oid = str(commit.id)
    full_message = commit.message.strip()
    return CommitInfo(
        hash=oid,
        parent_hashes=tuple(str(parent_id) for parent_id in commit.parent_ids),
        short_hash=oid[:SHORT_HASH_LENGTH],
        message=full_message.split("\n")[0],
        author_name=commit.author.name,
        author_email=commit.author.email,
        timestamp=commit.commit_time,
    )


class GraphRepository:
    """Supplies commits in render order and the refs that decorate them"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Initialize repository"""
        if repo_path is None:
            repo_path = self._find_repo()

        self.repo = pygit2.Repository(repo_path)

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        current = Path.cwd()
        while current != current.parent:
            if (current / ".git").exists():
                return str(current)
            current = current.parent
        raise ValueError("Not in a git repository")

    def head_hash(self) -> str | None:
        """Hash of the commit HEAD points at, or None for an unborn HEAD"""
        if self.repo.head_is_unborn:
            return None
        return str(self.repo.head.target)

    def _peel_commit(self, ref: pygit2.Reference, name: str) -> pygit2.Commit | None:
        """Resolve a ref to its commit, reporting refs that don't point at one"""
        try:
            return ref.peel(pygit2.Commit)
        except (pygit2.GitError, ValueError, KeyError) as e:
            print(f"[Graph] Skipping ref {name}: {e}")
            return None

    def _walk_tips(self) -> list[pygit2.Oid]:
        """Starting points for the history walk: HEAD, then every branch tip"""
        tips: list[pygit2.Oid] = []
        seen: set[str] = set()

        def add(oid: pygit2.Oid) -> None:
            if str(oid) not in seen:
                seen.add(str(oid))
                tips.append(oid)

        if not self.repo.head_is_unborn:
            add(self.repo.head.target)

        for branches in (self.repo.branches.local, self.repo.branches.remote):
            for branch_name in branches:
                if branch_name.endswith("/HEAD"):
                    continue
                commit = self._peel_commit(branches[branch_name], branch_name)
                if commit is not None:
                    add(commit.id)

        return tips

    def iter_commits(self, skip: int = 0, limit: int | None = None) -> Iterator[CommitInfo]:
        """
        Walk history in render order.

        Commits come out topologically sorted (every commit after all of its
        children), ties broken by commit time. The walk is lazy, so paging
        with skip/limit only touches the commits it needs.

        Args:
            skip: Number of commits to skip from the start of the walk
            limit: Maximum number of commits to yield (None for all)
        """
        tips = self._walk_tips()
        if not tips:
            return

        walker = self.repo.walk(tips[0], SortMode.TOPOLOGICAL | SortMode.TIME)
        for oid in tips[1:]:
            walker.push(oid)

        stop = None if limit is None else skip + limit
        for commit in itertools.islice(walker, skip, stop):
            yield commit_to_info(commit)

    def collect_refs(
        self, include_remote_branches: bool = True, include_tags: bool = True
    ) -> dict[str, list[RefInfo]]:
        """Map commit hash -> branches and tags pointing at it"""
        refs_map: dict[str, list[RefInfo]] = {}

        def add(commit: pygit2.Commit | None, ref_info: RefInfo) -> None:
            if commit is not None:
                refs_map.setdefault(str(commit.id), []).append(ref_info)

        for branch_name in self.repo.branches.local:
            branch = self.repo.branches.local[branch_name]
            add(
                self._peel_commit(branch, branch_name),
                RefInfo(name=branch_name, kind=RefKind.BRANCH, is_head=branch.is_head()),
            )

        if include_remote_branches:
            for branch_name in self.repo.branches.remote:
                # origin/HEAD is a symbolic alias of another remote branch
                if branch_name.endswith("/HEAD"):
                    continue
                add(
                    self._peel_commit(self.repo.branches.remote[branch_name], branch_name),
                    RefInfo(name=branch_name, kind=RefKind.REMOTE_BRANCH),
                )

        if include_tags:
            for ref_name in self.repo.references:
                if not ref_name.startswith("refs/tags/"):
                    continue
                tag_name = ref_name[len("refs/tags/") :]
                add(
                    self._peel_commit(self.repo.references[ref_name], tag_name),
                    RefInfo(name=tag_name, kind=RefKind.TAG),
                )

        return refs_map

    def load_commit_graph(self, skip: int = 0, limit: int | None = None) -> Iterator[GraphCommit]:
        """Lay out a page of history in one fresh pass"""
        refs = self.collect_refs()
        return build_commit_graph(self.iter_commits(skip, limit), refs)
