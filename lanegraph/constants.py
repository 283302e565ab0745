"""
Centralized constants for lanegraph.

Defaults that are shared between the settings layer, the repository
adapter and the palette live here so they are easy to find and modify.
"""

# Settings file location (relative to the user's home directory)
SETTINGS_DIR = ".config/lanegraph"
SETTINGS_FILE = "settings.json"

# History paging
DEFAULT_PAGE_SIZE = 200

# Commit summary shown next to a graph row
SHORT_HASH_LENGTH = 7

# Lane colors, indexed by column modulo palette size
DEFAULT_PALETTE = [
    "#4CAF50",  # Green
    "#2196F3",  # Blue
    "#FF9800",  # Orange
    "#9C27B0",  # Purple
    "#F44336",  # Red
    "#00BCD4",  # Cyan
    "#E91E63",  # Pink
    "#795548",  # Brown
]
