"""Tag sources: where version tags come from and where new ones go."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Union

from git_semv.errors import SourceUnavailable, TagPushFailed

logger = logging.getLogger(__name__)

# git describe exits non-zero with one of these when there is simply no tag to report.
_NO_TAG_MARKERS = ("No names found", "No tags can describe")


class TagSource(Protocol):
    def list_tags(self) -> List[str]:
        """Every tag name in the repository."""

    def latest_tag(self) -> Optional[str]:
        """Nearest tag reachable from HEAD, or None when there is none."""

    def short_commit(self) -> str:
        """Abbreviated hash of HEAD."""

    def create_and_push_tag(self, tag: str) -> None:
        """Create ``tag`` at HEAD and push it to the remote."""


class GitTagSource:
    """TagSource backed by the ``git`` command line."""

    def __init__(
        self,
        git: str = "git",
        remote: str = "origin",
        cwd: Optional[Union[str, Path]] = None,
    ) -> None:
        self.git = git
        self.remote = remote
        self.cwd = cwd

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        cmd = [self.git, *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise SourceUnavailable(f"cannot run {self.git}: {e}") from e

    def _read(self, *args: str) -> str:
        result = self._run(*args)
        if result.returncode != 0:
            raise SourceUnavailable(_failure(result))
        return result.stdout

    def list_tags(self) -> List[str]:
        return [line.strip() for line in self._read("tag", "--list").splitlines() if line.strip()]

    def latest_tag(self) -> Optional[str]:
        result = self._run("describe", "--tags", "--abbrev=0")
        if result.returncode == 0:
            return result.stdout.strip() or None
        # Fails outside a repository; an empty tag list means there is nothing to describe.
        tags = self.list_tags()
        if not tags or any(marker in result.stderr for marker in _NO_TAG_MARKERS):
            logger.debug("no tag reachable from HEAD")
            return None
        raise SourceUnavailable(_failure(result))

    def short_commit(self) -> str:
        return self._read("rev-parse", "--short", "HEAD").strip()

    def create_and_push_tag(self, tag: str) -> None:
        for args in (("tag", tag), ("push", self.remote, tag)):
            try:
                result = self._run(*args)
            except SourceUnavailable as e:
                raise TagPushFailed(str(e)) from e
            if result.returncode != 0:
                raise TagPushFailed(_failure(result))
        logger.info("created tag %s and pushed it to %s", tag, self.remote)


def _failure(result: subprocess.CompletedProcess) -> str:
    detail = (result.stderr or result.stdout or "").strip()
    cmd = " ".join(result.args)
    if detail:
        return f"{cmd} failed: {detail}"
    return f"{cmd} exited with status {result.returncode}"
