"""GitHub PR Files - list the files changed and deleted by pull requests."""

__version__ = '0.1.0'

from .models import FileBucket, AggregateBucket, classify_status
from .api_client import GitHubAPIClient
from .collector import PullRequestFilesCollector

__all__ = [
    'FileBucket',
    'AggregateBucket',
    'classify_status',
    'GitHubAPIClient',
    'PullRequestFilesCollector',
]
