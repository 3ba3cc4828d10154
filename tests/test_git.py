from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from git_semv.errors import SourceUnavailable, TagPushFailed
from git_semv.git import GitTagSource

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture(autouse=True)
def git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for who in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{who}_NAME", "Test")
        monkeypatch.setenv(f"GIT_{who}_EMAIL", "test@example.com")


def _git(cwd: Path, *args: str) -> str:
    return subprocess.run(
        ["git", *args], cwd=cwd, check=True, stdout=subprocess.PIPE, text=True
    ).stdout.strip()


def _commit(repo: Path, name: str) -> None:
    (repo / name).write_text(name, encoding="utf-8")
    _git(repo, "add", name)
    _git(repo, "commit", "-q", "-m", name)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    _git(path, "init", "-q")
    return path


def test_list_tags(repo: Path) -> None:
    _commit(repo, "a")
    for tag in ("v1.0.0", "v1.1.0-rc.1", "nightly"):
        _git(repo, "tag", tag)
    assert sorted(GitTagSource(cwd=repo).list_tags()) == ["nightly", "v1.0.0", "v1.1.0-rc.1"]


def test_latest_tag_is_nearest_ancestor(repo: Path) -> None:
    _commit(repo, "a")
    _git(repo, "tag", "v1.0.0")
    _commit(repo, "b")
    _git(repo, "tag", "v1.1.0")
    _git(repo, "checkout", "-q", "HEAD~1")
    assert GitTagSource(cwd=repo).latest_tag() == "v1.0.0"


def test_latest_tag_none_without_tags(repo: Path) -> None:
    _commit(repo, "a")
    assert GitTagSource(cwd=repo).latest_tag() is None


def test_latest_tag_none_in_empty_repository(repo: Path) -> None:
    assert GitTagSource(cwd=repo).latest_tag() is None


def test_outside_repository(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    source = GitTagSource(cwd=plain)
    with pytest.raises(SourceUnavailable):
        source.list_tags()
    with pytest.raises(SourceUnavailable):
        source.latest_tag()


def test_missing_git_executable(repo: Path) -> None:
    source = GitTagSource(git="git-semv-no-such-git", cwd=repo)
    with pytest.raises(SourceUnavailable):
        source.list_tags()
    with pytest.raises(TagPushFailed):
        source.create_and_push_tag("v1.0.0")


def test_short_commit(repo: Path) -> None:
    _commit(repo, "a")
    assert GitTagSource(cwd=repo).short_commit() == _git(repo, "rev-parse", "--short", "HEAD")


def test_create_and_push_tag(repo: Path, tmp_path: Path) -> None:
    remote = tmp_path / "remote.git"
    _git(tmp_path, "init", "-q", "--bare", str(remote))
    _git(repo, "remote", "add", "origin", str(remote))
    _commit(repo, "a")

    GitTagSource(cwd=repo).create_and_push_tag("v0.1.0")

    assert _git(repo, "tag", "--list") == "v0.1.0"
    assert _git(remote, "tag", "--list") == "v0.1.0"


def test_create_and_push_tag_without_remote(repo: Path) -> None:
    _commit(repo, "a")
    with pytest.raises(TagPushFailed) as excinfo:
        GitTagSource(remote="upstream", cwd=repo).create_and_push_tag("v0.1.0")
    assert "push upstream v0.1.0" in str(excinfo.value)
