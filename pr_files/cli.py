"""Command-line entry point for GitHub PR Files."""

import os
import re
import sys
import logging
import argparse
from typing import List, Optional
from dotenv import load_dotenv

from .api_client import GITHUB_API_URL
from .collector import PullRequestFilesCollector
from .output import ensure_output_dir

PULL_NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+')


def configure_logging():
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Defaults come from the environment."""
    parser = argparse.ArgumentParser(
        prog='github-pr-files',
        description='List the files changed and deleted by GitHub pull requests.'
    )
    parser.add_argument('--repo', default=os.environ.get('GITHUB_REPO', ''),
                        help="Full name of the repository in the format 'owner/name'")
    parser.add_argument('--pulls', default=os.environ.get('GITHUB_PULLS', ''),
                        help='Comma-separated list of pull request numbers')
    parser.add_argument('--token', default=os.environ.get('GITHUB_TOKEN', ''),
                        help='GitHub API token')
    parser.add_argument('--output-dir', default=os.environ.get('OUTPUT_DIR', '.'),
                        help='Directory to save output files (default is current directory)')
    parser.add_argument('--max-workers', type=int, default=os.environ.get('MAX_WORKERS'),
                        help='Maximum number of pull requests processed at once (default: all at once)')
    parser.add_argument('--api-url', default=os.environ.get('GITHUB_API_URL', GITHUB_API_URL),
                        help='Root URL of the GitHub REST API')
    return parser


def parse_pull_numbers(pulls: str) -> List[int]:
    """Parse a comma-separated list of pull request numbers.

    Args:
        pulls: e.g. "12,34,56"

    Returns:
        List of pull request numbers

    Raises:
        ValueError: If any entry is not an integer
    """
    prs = []
    for p in pulls.split(','):
        # Plain ASCII digits with an optional sign; int() alone also accepts '1_000'
        if not PULL_NUMBER_PATTERN.fullmatch(p.strip()):
            raise ValueError(f"Invalid pull request number: {p}")
        prs.append(int(p.strip()))
    return prs


def main(argv: Optional[List[str]] = None):
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.repo or not args.pulls or not args.token:
        logging.error("Missing required flags: --repo, --pulls and --token")
        parser.print_help(sys.stderr)
        sys.exit(1)

    if args.max_workers is not None and args.max_workers < 1:
        logging.error(f"Invalid max workers: {args.max_workers} (must be at least 1)")
        sys.exit(1)

    try:
        ensure_output_dir(args.output_dir)
    except OSError as e:
        logging.error(f"Failed to create output directory: {e}")
        sys.exit(1)

    try:
        prs = parse_pull_numbers(args.pulls)
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)

    collector = PullRequestFilesCollector(
        args.repo,
        args.token,
        output_dir=args.output_dir,
        max_workers=args.max_workers,
        api_url=args.api_url
    )
    aggregate = collector.collect(prs)

    try:
        collector.write_aggregate(aggregate)
    except OSError as e:
        logging.error(f"Failed to write aggregate files: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
