"""Shared fixtures: throwaway git repositories built with pygit2."""

import pygit2
import pytest


class RepoFactory:
    """Builds commits with controlled parents and increasing commit times."""

    def __init__(self, path) -> None:
        self.path = path
        self.repo = pygit2.init_repository(str(path), initial_head="main")
        self._tree = self.repo.TreeBuilder().write()
        self._time = 1_700_000_000

    def commit(self, message: str, parents: list[str] | None = None, branch: str | None = None) -> str:
        self._time += 60
        sig = pygit2.Signature("Test User", "test@example.com", self._time, 0)
        parent_oids = [pygit2.Oid(hex=p) for p in parents or []]
        oid = self.repo.create_commit(None, sig, sig, message, self._tree, parent_oids)
        if branch:
            self.branch(branch, str(oid))
        return str(oid)

    def branch(self, name: str, oid: str) -> None:
        self.repo.references.create(f"refs/heads/{name}", pygit2.Oid(hex=oid), force=True)

    def linear(self, count: int, branch: str = "main") -> list[str]:
        """Create a linear chain; returns hashes oldest first."""
        hashes: list[str] = []
        for i in range(count):
            hashes.append(self.commit(f"Commit {i}", hashes[-1:]))
        self.branch(branch, hashes[-1])
        return hashes


@pytest.fixture
def repo_factory(tmp_path):
    return RepoFactory(tmp_path / "repo")
