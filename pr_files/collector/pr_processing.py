"""PR processing methods for PullRequestFilesCollector."""

import logging
from typing import List, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..models import AggregateBucket, FileBucket
from ..output import output_path, write_file_list


def process_pr(self, pr: int) -> Optional[FileBucket]:
    """Fetch, classify and write the files of a single PR.

    Args:
        pr: Pull request number

    Returns:
        The PR's file bucket, or None if the PR was skipped
    """
    logging.info(f"Processing pull request {pr}")

    try:
        count = self.get_changed_files_count(pr)
    except Exception as e:
        logging.error(f"Failed to process PR {pr}: {e}")
        return None

    if count > self.max_changed_files:
        logging.error(f"Failed to process PR {pr}: {count} changed files exceeds the limit of {self.max_changed_files}")
        return None

    try:
        files_map = self.get_files_in_pr(pr)
    except Exception as e:
        logging.error(f"Failed to get files in PR {pr}: {e}")
        return None

    bucket = FileBucket.from_status_map(files_map)
    self._write_pr_files(pr, bucket)

    logging.info(f"Files in pull request {pr} saved to {self.output_dir}")
    return bucket


def _write_pr_files(self, pr: int, bucket: FileBucket):
    """Write `{pr}_{suffix}.txt` for each populated output.

    A failed write is logged and does not stop the remaining writes.
    """
    for name, content in bucket.outputs().items():
        file_path = output_path(self.output_dir, pr, name)
        try:
            write_file_list(file_path, content)
        except OSError as e:
            logging.error(f"Failed to write file {file_path}: {e}")


def _process_prs_parallel(self, prs: List[int]) -> AggregateBucket:
    """Process PRs in parallel and merge buckets in completion order.

    Args:
        prs: Pull request numbers

    Returns:
        Aggregated files of every PR that was not skipped
    """
    aggregate = AggregateBucket()
    if not prs:
        return aggregate

    max_workers = self.max_workers or len(prs)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_pr = {
            executor.submit(self.process_pr, pr): pr
            for pr in prs
        }

        for future in as_completed(future_to_pr):
            pr = future_to_pr[future]
            try:
                bucket = future.result()
            except Exception as e:
                logging.error(f"Error processing PR {pr}: {e}", exc_info=True)
                continue

            if bucket is not None:
                aggregate.add(pr, bucket)

    return aggregate
