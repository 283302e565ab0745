"""Git backend supplying commits and refs to the graph layout"""

from lanegraph.git_backend.history import HistoryLoader
from lanegraph.git_backend.repository import GraphRepository, commit_to_info

__all__ = ["GraphRepository", "HistoryLoader", "commit_to_info"]
