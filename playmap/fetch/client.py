"""Blocking HTTP client for the GitHub contents API."""

import logging
from typing import Any

import requests

from ..config import PlaymapConfig
from ..errors import FetchError

log = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class GitHubClient:
    """Thin wrapper around a requests session.

    Every request carries the GitHub v3 Accept header and the configured
    timeout. Failures of any kind surface as FetchError.
    """

    def __init__(
        self,
        config: PlaymapConfig | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or PlaymapConfig()
        self._session = session
        self.headers = {
            "Accept": GITHUB_ACCEPT,
            "User-Agent": self.config.user_agent,
        }

    @property
    def session(self) -> requests.Session:
        """HTTP session, opened on first use."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, url: str) -> requests.Response:
        log.debug("GET %s", url)
        try:
            resp = self.session.get(url, headers=self.headers, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Error fetching data: {e}", url=url) from e

        if resp.status_code // 100 != 2:
            raise FetchError(resp.text[:500] or "request failed", url=url, status_code=resp.status_code)

        log.debug("GET %s -> %d", url, resp.status_code)
        return resp

    def get_bytes(self, url: str) -> bytes:
        """GET a URL and return the raw response body.

        Raises:
            FetchError: On connection errors, timeouts or non-2xx responses
        """
        return self._get(url).content

    def get_json(self, url: str) -> Any:
        """GET a URL and decode the body as JSON.

        Raises:
            FetchError: On request failure or undecodable JSON
        """
        resp = self._get(url)
        try:
            return resp.json()
        except ValueError as e:
            raise FetchError(f"Error parsing JSON: {e}", url=url) from e
