"""
Unit tests for API client functionality
"""

import json
import pytest
import requests
from unittest.mock import Mock
from pr_files.api_client import GitHubAPIClient, github_headers, PER_PAGE, USER_AGENT


def _response(payload, status_code=200, reason='OK'):
    """Build a mocked requests.Response carrying a JSON payload."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.content = json.dumps(payload).encode()
    return response


class TestHeaders:
    """Test cases for the fixed request headers."""

    def test_github_headers(self):
        headers = github_headers('secret')
        assert headers['Accept'] == 'application/vnd.github+json'
        assert headers['Authorization'] == 'Bearer secret'
        assert headers['User-Agent'] == USER_AGENT
        assert headers['X-GitHub-Api-Version'] == '2022-11-28'

    def test_session_uses_headers(self):
        client = GitHubAPIClient(token='secret')
        assert client.session.headers['Authorization'] == 'Bearer secret'
        assert client.session.headers['X-GitHub-Api-Version'] == '2022-11-28'

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv('GITHUB_TOKEN', 'env_token')
        client = GitHubAPIClient()
        assert client.token == 'env_token'


class TestGet:
    """Test cases for single GET requests."""

    @pytest.fixture
    def client(self):
        client = GitHubAPIClient(token='test_token')
        client.session = Mock()
        return client

    def test_returns_raw_body(self, client):
        client.session.get.return_value = _response({'a': 1})
        assert client.get('https://api.github.com/test') == b'{"a": 1}'

    def test_no_timeout_by_default(self, client):
        client.session.get.return_value = _response({})
        client.get('https://api.github.com/test')
        assert client.session.get.call_args.kwargs['timeout'] is None

    @pytest.mark.parametrize('status_code', [201, 304, 404, 500])
    def test_non_200_raises(self, client, status_code):
        client.session.get.return_value = _response({}, status_code=status_code, reason='Nope')

        with pytest.raises(requests.exceptions.HTTPError):
            client.get('https://api.github.com/test')

    def test_network_error_propagates(self, client):
        client.session.get.side_effect = requests.exceptions.ConnectionError("Network error")

        with pytest.raises(requests.exceptions.ConnectionError):
            client.get('https://api.github.com/test')

    def test_get_json_invalid_body(self, client):
        response = _response({})
        response.content = b'not json'
        client.session.get.return_value = response

        with pytest.raises(ValueError):
            client.get_json('https://api.github.com/test')

    def test_url_joins_base(self):
        client = GitHubAPIClient(token='t', base_url='https://ghe.example.com/api/v3/')
        assert client.url('/repos/a/b') == 'https://ghe.example.com/api/v3/repos/a/b'


class TestPagination:
    """Test cases for paginated requests."""

    @pytest.fixture
    def client(self):
        client = GitHubAPIClient(token='test_token')
        client.session = Mock()
        return client

    def test_stops_on_empty_page(self, client):
        """Full pages 1-2 and an empty page 3 means exactly 3 requests."""
        page1 = [{'filename': f'a{i}'} for i in range(PER_PAGE)]
        page2 = [{'filename': f'b{i}'} for i in range(PER_PAGE)]
        client.session.get.side_effect = [_response(page1), _response(page2), _response([])]

        results = client.get_paginated('https://api.github.com/test')

        assert client.session.get.call_count == 3
        assert results == page1 + page2

    def test_short_page_does_not_stop(self, client):
        """Only an empty page ends pagination."""
        client.session.get.side_effect = [
            _response([{'id': 1}]),
            _response([{'id': 2}]),
            _response([]),
        ]

        results = client.get_paginated('https://api.github.com/test')

        assert client.session.get.call_count == 3
        assert results == [{'id': 1}, {'id': 2}]

    def test_page_params(self, client):
        client.session.get.side_effect = [_response([{'id': 1}]), _response([])]

        client.get_paginated('https://api.github.com/test')

        pages = [c.kwargs['params'] for c in client.session.get.call_args_list]
        assert pages == [
            {'page': 1, 'per_page': 100},
            {'page': 2, 'per_page': 100},
        ]

    def test_error_discards_earlier_pages(self, client):
        client.session.get.side_effect = [
            _response([{'id': 1}]),
            _response({}, status_code=502, reason='Bad Gateway'),
        ]

        with pytest.raises(requests.exceptions.HTTPError):
            client.get_paginated('https://api.github.com/test')

    def test_non_list_page_raises(self, client):
        client.session.get.return_value = _response({'message': 'Not Found'})

        with pytest.raises(ValueError):
            client.get_paginated('https://api.github.com/test')
