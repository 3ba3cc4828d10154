from __future__ import annotations

from typing import List, Optional

import pytest

from git_semv.errors import SourceUnavailable, TagPushFailed


class FakeTagSource:
    def __init__(
        self,
        tags: Optional[List[str]] = None,
        latest: Optional[str] = None,
        commit: str = "3222d31",
        unavailable: bool = False,
        push_fails: bool = False,
    ) -> None:
        self.tags = list(tags or [])
        self.latest = latest
        self.commit = commit
        self.unavailable = unavailable
        self.push_fails = push_fails
        self.pushed: List[str] = []

    def _check(self) -> None:
        if self.unavailable:
            raise SourceUnavailable("fatal: not a git repository")

    def list_tags(self) -> List[str]:
        self._check()
        return list(self.tags)

    def latest_tag(self) -> Optional[str]:
        self._check()
        return self.latest

    def short_commit(self) -> str:
        self._check()
        return self.commit

    def create_and_push_tag(self, tag: str) -> None:
        if self.push_fails:
            raise TagPushFailed(f"git push origin {tag} failed: rejected")
        self.tags.append(tag)
        self.pushed.append(tag)


@pytest.fixture
def tag_source() -> FakeTagSource:
    return FakeTagSource(
        tags=["v1.0.0", "v1.1.0-rc.1", "vbadtag", "v0.9.0"],
        latest="v1.0.0",
    )
