"""Tests for the remote command group."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from borrowr.cli.cli import cli
from borrowr.cli.commands.remote.add_cmd import default_remote_name
from borrowr.core.config import BorrowrConfig, RemoteConfig
from borrowr.core.context import BorrowrContext
from borrowr.integrations.config_store import FakeConfigStore
from borrowr.integrations.prompter import FakePrompter
from tests.test_utils.registry import REMOTE_INDEX_URL


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (REMOTE_INDEX_URL, "blocks"),
        ("https://example.com/team/ui-kit/index.json", "ui-kit"),
        ("https://example.com/index.json", None),
    ],
)
def test_default_remote_name(url: str, expected: str | None) -> None:
    assert default_remote_name(url) == expected


def test_remote_add_with_name(tmp_path: Path) -> None:
    config_store = FakeConfigStore()
    ctx = BorrowrContext.for_test(config_store=config_store, cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL, "acme", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    saved = config_store.saved[0][1]
    assert saved.remotes == {"acme": RemoteConfig(type="github-raw", url=REMOTE_INDEX_URL)}


def test_remote_add_prompts_for_name(tmp_path: Path) -> None:
    config_store = FakeConfigStore(config=BorrowrConfig())
    prompter = FakePrompter()
    ctx = BorrowrContext.for_test(config_store=config_store, prompter=prompter, cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL], obj=ctx)

    assert result.exit_code == 0, result.output
    assert prompter.text_messages == ["What is the name of the remote repository?"]
    saved = config_store.saved[0][1]
    assert saved.remotes is not None
    assert list(saved.remotes) == ["blocks"]


def test_remote_add_blank_name_exits_cleanly(tmp_path: Path) -> None:
    config_store = FakeConfigStore(config=BorrowrConfig())
    ctx = BorrowrContext.for_test(
        config_store=config_store,
        prompter=FakePrompter(texts=[""]),
        cwd=tmp_path,
    )

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL], obj=ctx)

    assert result.exit_code == 0
    assert config_store.saved == []


def test_remote_add_replaces_existing_remote(tmp_path: Path, remote_config: BorrowrConfig) -> None:
    config_store = FakeConfigStore(config=remote_config)
    ctx = BorrowrContext.for_test(config_store=config_store, cwd=tmp_path)
    new_url = "https://example.com/acme/v2/index.json"

    result = CliRunner().invoke(cli, ["remote", "add", new_url, "acme"], obj=ctx)

    assert result.exit_code == 0, result.output
    remotes = config_store.saved[0][1].remotes
    assert remotes is not None
    assert remotes["acme"].url == new_url


def test_remote_add_without_config_asks_first(tmp_path: Path) -> None:
    config_store = FakeConfigStore()
    prompter = FakePrompter(confirms=[False])
    ctx = BorrowrContext.for_test(config_store=config_store, prompter=prompter, cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL, "acme"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No configuration found" in prompter.confirm_messages[0]
    assert config_store.saved == []


def test_remote_add_rejects_non_http_url(tmp_path: Path) -> None:
    config_store = FakeConfigStore()
    ctx = BorrowrContext.for_test(config_store=config_store, cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "add", "file:///tmp/index.json", "local"], obj=ctx)

    assert result.exit_code == 1
    assert config_store.saved == []


def test_remote_list(tmp_path: Path, remote_config: BorrowrConfig) -> None:
    ctx = BorrowrContext.for_test(config_store=FakeConfigStore(config=remote_config), cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "acme" in result.output
    assert "github-raw" in result.output


def test_remote_list_empty(tmp_path: Path) -> None:
    ctx = BorrowrContext.for_test(cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "list"], obj=ctx)

    assert result.exit_code == 0
    assert "No remote repositories configured." in result.output


@pytest.mark.parametrize("name", ["../x", "/tmp/abs", "acme:ui", ".hidden"])
def test_remote_add_rejects_unsafe_name(tmp_path: Path, name: str) -> None:
    config_store = FakeConfigStore(config=BorrowrConfig())
    ctx = BorrowrContext.for_test(config_store=config_store, cwd=tmp_path)

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL, name], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid remote name" in result.output
    assert config_store.saved == []


def test_remote_add_rejects_unsafe_prompted_name(tmp_path: Path) -> None:
    config_store = FakeConfigStore(config=BorrowrConfig())
    ctx = BorrowrContext.for_test(
        config_store=config_store, prompter=FakePrompter(texts=["../x"]), cwd=tmp_path
    )

    result = CliRunner().invoke(cli, ["remote", "add", REMOTE_INDEX_URL], obj=ctx)

    assert result.exit_code == 1
    assert config_store.saved == []
