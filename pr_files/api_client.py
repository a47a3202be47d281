"""GitHub API client for making requests and handling pagination."""

import os
import json
import logging
from typing import Any, Dict, List, Optional
import requests
from requests.adapters import HTTPAdapter

from . import __version__

GITHUB_API_URL = 'https://api.github.com'
ACCEPT_HEADER = 'application/vnd.github+json'
USER_AGENT = f'github-pr-files/{__version__}'
API_VERSION = '2022-11-28'
PER_PAGE = 100


def github_headers(token: str) -> Dict[str, str]:
    """Build the header set sent with every GitHub API request.

    Args:
        token: GitHub access token

    Returns:
        Dictionary of HTTP headers
    """
    return {
        'Accept': ACCEPT_HEADER,
        'Authorization': f'Bearer {token}',
        'User-Agent': USER_AGENT,
        'X-GitHub-Api-Version': API_VERSION,
    }


class GitHubAPIClient:
    """Handles GitHub API requests and pagination."""

    def __init__(self, token: str = None, base_url: str = GITHUB_API_URL,
                 timeout: Optional[float] = None, pool_size: int = 50):
        """Initialize the GitHub API client.

        Args:
            token: GitHub access token (falls back to GITHUB_TOKEN)
            base_url: Root URL of the GitHub REST API
            timeout: Request timeout in seconds; None waits indefinitely
            pool_size: Maximum number of pooled connections per host
        """
        self.token = token or os.environ.get('GITHUB_TOKEN', '')
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        # Connection pool sized for one worker thread per pull request.
        # Failed requests are not retried.
        adapter = HTTPAdapter(
            pool_connections=pool_size,
            pool_maxsize=pool_size,
            max_retries=0
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        self.session.headers.update(github_headers(self.token))

        if not self.token:
            logging.warning("No GitHub token provided. Requests will be unauthenticated.")

    def url(self, path: str) -> str:
        """Resolve an API path such as `/repos/owner/name` against the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, url: str, params: Dict = None) -> bytes:
        """Make a single GET request to the GitHub API.

        Args:
            url: The API endpoint URL
            params: Query parameters

        Returns:
            Raw response body

        Raises:
            requests.exceptions.RequestException: If the request could not be sent
            requests.exceptions.HTTPError: If the response status is not 200
        """
        response = self.session.get(url, params=params, timeout=self.timeout)

        if response.status_code != 200:
            raise requests.exceptions.HTTPError(
                f"Unexpected response status: {response.status_code} {response.reason} for {url}",
                response=response
            )

        return response.content

    def get_json(self, url: str, params: Dict = None) -> Any:
        """GET an endpoint and decode its JSON body.

        Raises:
            ValueError: If the body is not valid JSON
        """
        body = self.get(url, params)
        try:
            return json.loads(body)
        except ValueError as e:
            raise ValueError(f"Failed to decode response from {url}: {e}") from e

    def get_paginated(self, url: str, params: Dict = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Pagination stops at the first page that decodes to an empty list.
        Any failure discards the pages fetched so far.

        Args:
            url: The API endpoint URL
            params: Query parameters

        Returns:
            List of all items from all pages
        """
        results = []
        page = 1

        while True:
            page_params = dict(params or {})
            page_params['page'] = page
            page_params['per_page'] = PER_PAGE

            logging.debug(f"Fetching page {page} from {url}")
            data = self.get_json(url, page_params)

            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array from {url}, got {type(data).__name__}")

            if not data:
                break

            results.extend(data)
            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url} ({page} requests)")
        return results
