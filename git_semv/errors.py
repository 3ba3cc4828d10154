"""Exceptions raised by git-semv."""

from __future__ import annotations


class SemvError(Exception):
    """Base class for every error git-semv reports to the user."""


class InvalidFormat(SemvError, ValueError):
    def __init__(self, tag: str, reason: str = "not a semantic version") -> None:
        super().__init__(f"{tag!r}: {reason}")
        self.tag = tag
        self.reason = reason


class SourceUnavailable(SemvError):
    """The tag source could not be queried (no git, not a repository, ...)."""


class NoVersionFound(SemvError):
    def __init__(self, message: str = "no version tag found") -> None:
        super().__init__(message)


class InvalidBumpKind(SemvError, ValueError):
    def __init__(self, kind: object) -> None:
        super().__init__(f"unknown bump kind {kind!r}, expected major, minor or patch")
        self.kind = kind


class TagPushFailed(SemvError):
    """Creating or pushing a tag failed."""
