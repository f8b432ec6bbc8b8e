"""Norwegian beer sale closing-time reminder."""

__version__ = "0.1.0"
