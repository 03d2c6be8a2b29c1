"""prstats - ready-for-review to merge duration statistics for GitHub pull requests."""

__version__ = "0.1.0"
