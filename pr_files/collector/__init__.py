"""Per-PR file collection."""

from .core import PullRequestFilesCollector, MAX_CHANGED_FILES

__all__ = ['PullRequestFilesCollector', 'MAX_CHANGED_FILES']
