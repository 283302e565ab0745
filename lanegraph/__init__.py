"""lanegraph - commit graph lane layout for git history views"""

__version__ = "0.1.0"
