"""Archive person lookup: provider layer for historical-person search."""

__version__ = "0.1.0"
