"""
Paged history loading.

The history view shows a page of commits at a time and loads more as the
user scrolls. Laying out every page from scratch would turn each commit
whose children sit on an earlier page into a spurious branch tip, so the
loader keeps one layout builder alive across pages. Reloading (e.g. after
the repository changed) throws all of that state away.
"""

from collections.abc import Iterator

from PySide6.QtGui import QColor

from lanegraph.config.settings import Settings
from lanegraph.constants import DEFAULT_PAGE_SIZE
from lanegraph.git_backend.repository import GraphRepository
from lanegraph.graph.builder import GraphLayoutBuilder
from lanegraph.graph.colors import LANE_COLORS, make_palette
from lanegraph.graph.types import CommitInfo, GraphCommit, RefInfo


class HistoryLoader:
    """Loads laid out history page by page from one repository walk."""

    def __init__(self, repository: GraphRepository, settings: Settings | None = None) -> None:
        self.repository = repository
        self.settings = settings
        self.reload()

    @property
    def page_size(self) -> int:
        if self.settings is None:
            return DEFAULT_PAGE_SIZE
        return self.settings.get_page_size()

    @property
    def palette(self) -> list[QColor]:
        """Lane colors configured for this view."""
        return list(self._palette)

    @property
    def loaded(self) -> list[GraphCommit]:
        """All rows loaded since the last reload, in order."""
        return list(self._loaded)

    @property
    def width(self) -> int:
        """Number of graph columns needed by the rows loaded so far."""
        return self._builder.width

    @property
    def has_more(self) -> bool:
        return self._peek() is not None

    def reload(self) -> None:
        """Start over with a fresh walk and fresh lanes, re-reading refs and the palette."""
        self._palette: list[QColor]
        if self.settings is None:
            include_remote_branches = include_tags = True
            self._palette = list(LANE_COLORS)
        else:
            include_remote_branches = self.settings.get_include_remote_branches()
            include_tags = self.settings.get_include_tags()
            self._palette = make_palette(self.settings.get_palette())

        self._refs: dict[str, list[RefInfo]] = self.repository.collect_refs(
            include_remote_branches=include_remote_branches, include_tags=include_tags
        )
        self._commits: Iterator[CommitInfo] = self.repository.iter_commits()
        self._pending: CommitInfo | None = None
        self._builder = GraphLayoutBuilder()
        self._loaded: list[GraphCommit] = []

    def next_page(self, count: int | None = None) -> list[GraphCommit]:
        """Lay out and return the next page of history (empty when exhausted)."""
        if count is None:
            count = self.page_size

        page: list[GraphCommit] = []
        while len(page) < count:
            commit = self._take()
            if commit is None:
                break
            row = self._builder.push(commit)
            page.append(GraphCommit(commit=commit, layout=row, refs=tuple(self._refs.get(commit.hash, ()))))

        self._loaded.extend(page)
        return page

    def _peek(self) -> CommitInfo | None:
        if self._pending is None:
            self._pending = next(self._commits, None)
        return self._pending

    def _take(self) -> CommitInfo | None:
        commit = self._peek()
        self._pending = None
        return commit
