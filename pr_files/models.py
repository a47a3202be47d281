"""Data models for pull request file classification."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# File classifications
CHANGED = 'changed'
DELETED = 'deleted'

# Output file suffixes
SUFFIX_ALL = 'all'
SUFFIX_CHANGED = 'chg'
SUFFIX_DELETED = 'del'

_STATUS_CLASSIFICATION = {
    'modified': CHANGED,
    'added': CHANGED,
    'deleted': DELETED,
}


def classify_status(status: str) -> Optional[str]:
    """Map a GitHub file status onto a classification.

    Args:
        status: The `status` field of a PR file record

    Returns:
        CHANGED, DELETED, or None for statuses that are not tracked (renamed, copied, ...)
    """
    return _STATUS_CLASSIFICATION.get(status)


@dataclass
class FileBucket:
    """Files touched by a single pull request, grouped by classification."""
    all_files: List[str] = field(default_factory=list)
    changed_files: List[str] = field(default_factory=list)
    deleted_files: List[str] = field(default_factory=list)

    @classmethod
    def from_status_map(cls, files_map: Dict[str, str]) -> 'FileBucket':
        """Partition a path -> classification mapping, keeping its order."""
        bucket = cls()
        for filename, status in files_map.items():
            if status == CHANGED:
                bucket.changed_files.append(filename)
            elif status == DELETED:
                bucket.deleted_files.append(filename)
            bucket.all_files.append(filename)
        return bucket

    def outputs(self) -> Dict[str, List[str]]:
        """Return the output files to write, keyed by suffix.

        `all` is always present; `chg` and `del` only when non-empty.
        """
        files = {SUFFIX_ALL: self.all_files}
        if self.changed_files:
            files[SUFFIX_CHANGED] = self.changed_files
        if self.deleted_files:
            files[SUFFIX_DELETED] = self.deleted_files
        return files


@dataclass
class AggregateBucket(FileBucket):
    """Files from every processed pull request, in arrival order."""
    pull_requests: List[int] = field(default_factory=list)

    def add(self, pr: int, bucket: FileBucket):
        self.pull_requests.append(pr)
        self.all_files.extend(bucket.all_files)
        self.changed_files.extend(bucket.changed_files)
        self.deleted_files.extend(bucket.deleted_files)

    def outputs(self) -> Dict[str, List[str]]:
        # Aggregate files are always written, even when empty
        return {
            SUFFIX_ALL: self.all_files,
            SUFFIX_CHANGED: self.changed_files,
            SUFFIX_DELETED: self.deleted_files,
        }
