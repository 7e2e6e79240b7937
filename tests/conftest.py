import json
from pathlib import Path

import pytest

from playmap.config import PlaymapConfig
from playmap.fetch import GitHubClient


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b""):
        self.status_code = status_code
        self.content = content

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes: dict | None = None):
        self.routes = dict(routes or {})
        self.calls: list[dict] = []
        self.closed = False

    def add_json(self, url: str, payload, status_code: int = 200) -> None:
        self.routes[url] = FakeResponse(status_code, json.dumps(payload).encode())

    def add_bytes(self, url: str, content: bytes, status_code: int = 200) -> None:
        self.routes[url] = FakeResponse(status_code, content)

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return FakeResponse(404, b'{"message": "Not Found"}')
        return route

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> GitHubClient:
    return GitHubClient(PlaymapConfig(timeout=5), session=session)


@pytest.fixture
def listing_url() -> str:
    return "https://api.github.com/repos/PlayCover/keymaps/contents/keymapping/com.example.game"


@pytest.fixture
def listing() -> list[dict]:
    return [
        {"name": "A.playmap", "download_url": "http://x/A.playmap", "type": "file", "size": 12},
        {"name": "README.md", "download_url": "http://x/README.md", "type": "file", "size": 7},
    ]
