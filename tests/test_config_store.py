"""Tests for .borrowrrc discovery, validation and saving."""

import json
from pathlib import Path

import pytest

from borrowr.core.config import BorrowrConfig, RemoteConfig, RepositoryConfig
from borrowr.core.errors import ConfigurationInvalidError, ConfigurationMissingError
from borrowr.integrations.config_store import RealConfigStore
from borrowr.integrations.config_store.real import _read_candidate, find_config_file


def test_no_config_returns_none(tmp_path: Path) -> None:
    assert RealConfigStore().load(tmp_path) is None


def test_loads_json_rc(tmp_path: Path) -> None:
    (tmp_path / ".borrowrrc").write_text(
        json.dumps({"repository": {"mode": "raw-github", "url": "https://github.com/a/b"}}),
        encoding="utf-8",
    )

    config = RealConfigStore().load(tmp_path)

    assert config is not None
    assert config.repository == RepositoryConfig(mode="raw-github", url="https://github.com/a/b")


def test_loads_yaml_rc(tmp_path: Path) -> None:
    (tmp_path / ".borrowrrc.yaml").write_text(
        "remotes:\n  acme:\n    type: github-raw\n    url: https://example.com/r.json\n",
        encoding="utf-8",
    )

    config = RealConfigStore().load(tmp_path)

    assert config is not None
    assert config.remotes == {
        "acme": RemoteConfig(type="github-raw", url="https://example.com/r.json")
    }


def test_discovers_config_in_parent(tmp_path: Path) -> None:
    (tmp_path / ".borrowrrc").write_text("{}", encoding="utf-8")
    nested = tmp_path / "packages" / "web"
    nested.mkdir(parents=True)

    found = find_config_file(nested)

    assert found is not None
    assert found[0] == tmp_path / ".borrowrrc"


def test_package_json_key_is_used(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "app",
                "borrowr": {"repository": {"mode": "raw-github", "url": "https://github.com/a/b"}},
            }
        ),
        encoding="utf-8",
    )

    config = RealConfigStore().load(tmp_path)

    assert config is not None
    assert config.repository is not None


def test_package_json_without_key_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(json.dumps({"name": "app"}), encoding="utf-8")
    (tmp_path / ".borrowrrc").write_text('{"remotes": {}}', encoding="utf-8")

    found = find_config_file(tmp_path)

    assert found is not None
    assert found[0].name == ".borrowrrc"


def test_nearest_directory_wins(tmp_path: Path) -> None:
    (tmp_path / ".borrowrrc").write_text("{}", encoding="utf-8")
    child = tmp_path / "child"
    child.mkdir()
    (child / ".borrowrrc.yml").write_text("{}", encoding="utf-8")

    found = find_config_file(child)

    assert found is not None
    assert found[0] == child / ".borrowrrc.yml"


@pytest.mark.parametrize(
    "content",
    [
        '{"repository": {"mode": "svn", "url": "x"}}',
        '{"unknown": true}',
        '{"remotes": {"acme": {"url": "https://x"}}}',
        "{broken: [",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".borrowrrc").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationInvalidError):
        RealConfigStore().load(tmp_path)


def test_save_writes_pretty_json(tmp_path: Path) -> None:
    config = BorrowrConfig(
        repository=RepositoryConfig(mode="raw-github", url="https://github.com/a/b")
    )

    written = RealConfigStore().save(tmp_path, config)

    assert written == tmp_path / ".borrowrrc"
    text = written.read_text(encoding="utf-8")
    assert json.loads(text) == {
        "repository": {"mode": "raw-github", "url": "https://github.com/a/b"}
    }
    assert "\n  " in text


def test_save_round_trips_through_load(tmp_path: Path) -> None:
    config = BorrowrConfig(schema_url="https://example.com/schema.json").with_remote(
        "acme", RemoteConfig(type="github-raw", url="https://example.com/r.json")
    )

    store = RealConfigStore()
    store.save(tmp_path, config)

    assert store.load(tmp_path) == config
    assert "$schema" in json.loads((tmp_path / ".borrowrrc").read_text(encoding="utf-8"))


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationMissingError):
        RealConfigStore().save(tmp_path / "missing", BorrowrConfig())


def test_tab_indented_package_json_is_parsed_as_json(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "app", "version": "1.0.0"}, indent="\t"), encoding="utf-8"
    )
    (tmp_path / ".borrowrrc").write_text(
        '{"remotes": {"acme": {"type": "github-raw", "url": "https://example.com/r.json"}}}',
        encoding="utf-8",
    )

    config = RealConfigStore().load(tmp_path)

    assert config is not None
    assert config.remotes is not None
    assert list(config.remotes) == ["acme"]


def test_tab_indented_json_rc(tmp_path: Path) -> None:
    (tmp_path / ".borrowrrc.json").write_text(
        json.dumps(
            {"repository": {"mode": "raw-github", "url": "https://github.com/a/b"}}, indent="\t"
        ),
        encoding="utf-8",
    )

    config = RealConfigStore().load(tmp_path)

    assert config is not None
    assert config.repository is not None


def test_undecodable_config_raises_invalid(tmp_path: Path) -> None:
    rc = tmp_path / ".borrowrrc"
    rc.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(ConfigurationInvalidError, match=".borrowrrc"):
        RealConfigStore().load(tmp_path)


def test_unreadable_config_raises_invalid(tmp_path: Path) -> None:
    unreadable = tmp_path / ".borrowrrc.json"
    unreadable.mkdir()

    with pytest.raises(ConfigurationInvalidError, match="borrowrrc.json"):
        _read_candidate(unreadable)


@pytest.mark.parametrize("name", ["../escape", "/tmp/abs", "a:b", ".hidden", ""])
def test_invalid_remote_name_in_config_raises(tmp_path: Path, name: str) -> None:
    (tmp_path / ".borrowrrc").write_text(
        json.dumps({"remotes": {name: {"type": "github-raw", "url": "https://x.example/r.json"}}}),
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationInvalidError, match="invalid remote name"):
        RealConfigStore().load(tmp_path)
