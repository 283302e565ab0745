"""Configuration for lanegraph"""

from lanegraph.config.settings import Settings

__all__ = ["Settings"]
