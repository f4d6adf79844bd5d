#
# This file is distributed under the MIT License. See LICENSE.md for details.
#
# pylint: disable=redefined-outer-name

from pathlib import Path

import pytest

from gitstream.config import CONFIG_ENV, PROTOCOL_ENV
from gitstream.repository import FileSystemRepositoryLocator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(PROTOCOL_ENV, raising=False)


@pytest.fixture
def repository_root(tmp_path) -> Path:
    """A fake repository with a couple of files, laid out as:
    repo/.git/, repo/README.md, repo/dir/file.txt"""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    (root / "dir").mkdir()
    (root / "README.md").write_text("readme\n")
    (root / "dir" / "file.txt").write_text("content\n")
    return root


@pytest.fixture
def locator() -> FileSystemRepositoryLocator:
    return FileSystemRepositoryLocator()
