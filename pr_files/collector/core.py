"""Collects the files touched by pull requests of a repository."""

import logging
from typing import Dict, List, Optional

from ..api_client import GitHubAPIClient, GITHUB_API_URL
from ..models import AggregateBucket, classify_status
from ..output import output_path, write_file_list

# PRs reporting more changed files than this are skipped
MAX_CHANGED_FILES = 3000


class PullRequestFilesCollector:
    """Fetches, classifies and writes the files changed by pull requests."""

    def __init__(
        self,
        repo: str,
        token: str = None,
        output_dir: str = '.',
        max_workers: Optional[int] = None,
        api_url: str = GITHUB_API_URL,
        max_changed_files: int = MAX_CHANGED_FILES
    ):
        """Initialize the collector.

        Args:
            repo: Repository name in format 'owner/name'
            token: GitHub access token
            output_dir: Directory the output files are written to
            max_workers: Maximum number of PRs processed at once (None = one worker per PR)
            api_url: Root URL of the GitHub REST API
            max_changed_files: PRs with more changed files than this are skipped
        """
        self.repo = repo
        self.api_client = GitHubAPIClient(token, base_url=api_url)
        self.output_dir = output_dir
        self.max_workers = max_workers
        self.max_changed_files = max_changed_files

        logging.info(f"Initialized collector for repository '{repo}'")

    def get_changed_files_count(self, pr: int) -> int:
        """Read the number of changed files from the PR metadata.

        Args:
            pr: Pull request number

        Returns:
            The `changed_files` count, or 0 if the field is missing or not numeric
        """
        url = self.api_client.url(f"/repos/{self.repo}/pulls/{pr}")
        body = self.api_client.get_json(url)

        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object for pull request {pr}, got {type(body).__name__}")

        changed_files = body.get('changed_files')
        if isinstance(changed_files, (int, float)) and not isinstance(changed_files, bool):
            return int(changed_files)

        logging.warning(f"No changed files in pull request {pr}")
        return 0

    def get_files_in_pr(self, pr: int) -> Dict[str, str]:
        """Fetch every file touched by a PR and classify it.

        Files whose status is neither added, modified nor deleted are left out.
        If a path is reported twice the last classification wins.

        Args:
            pr: Pull request number

        Returns:
            Dictionary mapping file paths to 'changed' or 'deleted', in first-seen order
        """
        url = self.api_client.url(f"/repos/{self.repo}/pulls/{pr}/files")
        files = self.api_client.get_paginated(url)

        files_map = {}
        for file in files:
            if not isinstance(file, dict):
                raise ValueError(f"Unexpected file record in pull request {pr}: {file!r}")

            # null decodes to an empty string, any other non-string is malformed
            filename = file.get('filename')
            filename = '' if filename is None else filename
            status = file.get('status')
            status = '' if status is None else status
            if not isinstance(filename, str) or not isinstance(status, str):
                raise ValueError(f"Unexpected file record in pull request {pr}: {file!r}")

            classification = classify_status(status)

            if classification is not None:
                previous = files_map.get(filename)
                if previous is not None and previous != classification:
                    logging.warning(
                        f"File {filename} in PR {pr} reclassified from {previous} to {classification}"
                    )
                files_map[filename] = classification

            logging.debug(f"File in PR {pr}: {filename} (Status: {status})")

        return files_map

    def collect(self, prs: List[int]) -> AggregateBucket:
        """Process every PR concurrently and merge the results.

        Args:
            prs: Pull request numbers

        Returns:
            Files of all successfully processed PRs
        """
        logging.debug(f"Repository: {self.repo}, Pull Requests: {prs}")
        aggregate = self._process_prs_parallel(prs)
        logging.info(f"Collected files from {len(aggregate.pull_requests)}/{len(prs)} pull requests")
        return aggregate

    def write_aggregate(self, aggregate: AggregateBucket):
        """Write all_all.txt, all_chg.txt and all_del.txt.

        Raises:
            OSError: If any aggregate file cannot be written
        """
        for name, content in aggregate.outputs().items():
            write_file_list(output_path(self.output_dir, 'all', name), content)

        logging.info(f"All files saved to all_all.txt, all_chg.txt, and all_del.txt in {self.output_dir}")


# Import and attach methods from submodules
from .pr_processing import process_pr, _write_pr_files, _process_prs_parallel

# Attach methods to class
PullRequestFilesCollector.process_pr = process_pr
PullRequestFilesCollector._write_pr_files = _write_pr_files
PullRequestFilesCollector._process_prs_parallel = _process_prs_parallel
