from pathlib import Path

import pytest

from playmap.config import PlaymapConfig
from playmap.errors import PlaymapValidationError
from playmap.fetch import SourceKind, resolve_source


def test_default_repository():
    source = resolve_source("com.example.game")
    assert source.kind is SourceKind.REMOTE
    assert source.location == "https://api.github.com/repos/PlayCover/keymaps/contents/keymapping/com.example.game"


def test_custom_repository():
    source = resolve_source("com.example.game", "someone/forked-keymaps")
    assert source.location == "https://api.github.com/repos/someone/forked-keymaps/contents/keymapping/com.example.game"


def test_empty_bundle_lists_root():
    source = resolve_source("")
    assert source.location == "https://api.github.com/repos/PlayCover/keymaps/contents/keymapping"


def test_config_overrides_api_and_root():
    config = PlaymapConfig(repository="me/maps", api_base="https://ghe.local/api/v3", keymap_root="layouts")
    source = resolve_source("com.example.game", config=config)
    assert source.location == "https://ghe.local/api/v3/repos/me/maps/contents/layouts/com.example.game"


@pytest.mark.parametrize("bad", ["no-slash", "a/b/c", "https://github.com/a/b", "a b/c"])
def test_invalid_repository(bad):
    with pytest.raises(PlaymapValidationError, match="Invalid GitHub repository"):
        resolve_source("com.example.game", bad)


def test_local_source(tmp_path: Path):
    source = resolve_source("com.example.game", f"file://{tmp_path}")
    assert source.is_local
    assert source.path == tmp_path / "com.example.game"


def test_local_source_with_escaped_path(tmp_path: Path):
    source = resolve_source("com.example.game", f"file://{tmp_path}/My%20Keymaps/")
    assert source.path == tmp_path / "My Keymaps" / "com.example.game"


def test_local_source_without_path():
    with pytest.raises(PlaymapValidationError, match="Invalid local directory URL"):
        resolve_source("com.example.game", "file://")
