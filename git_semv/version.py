"""Semantic versions parsed from tags.

Versions are plain :class:`semver.Version` values. The library supplies
precedence (numeric core, then pre-release identifiers, build metadata
ignored) and bumping; this module adds the tag-oriented pieces on top:
prefix handling, a permissive core parser and pre-release/build labels.
"""

from __future__ import annotations

import re
from typing import Optional

import semver

from git_semv.errors import InvalidBumpKind, InvalidFormat

DEFAULT_PREFIX = "v"
BUMP_KINDS = ("major", "minor", "patch")

_NUMERIC = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


def _check_identifiers(tag: str, text: str, what: str) -> str:
    if not text:
        raise InvalidFormat(tag, f"empty {what}")
    for ident in text.split("."):
        if not _IDENTIFIER.fullmatch(ident):
            raise InvalidFormat(tag, f"invalid {what} identifier {ident!r}")
    return text


def parse_version(tag: str, prefix: str = DEFAULT_PREFIX) -> semver.Version:
    """Parse ``tag`` into a version.

    ``prefix`` is stripped when the tag starts with it; otherwise the raw
    tag is parsed as is. Core components only have to be non-negative
    integers, so ``v01.2.3`` reads as ``1.2.3``.
    """
    text = tag[len(prefix):] if prefix and tag.startswith(prefix) else tag

    build = None
    if "+" in text:
        text, build = text.split("+", 1)
        build = _check_identifiers(tag, build, "build metadata")

    prerelease = None
    if "-" in text:
        text, prerelease = text.split("-", 1)
        prerelease = _check_identifiers(tag, prerelease, "pre-release")

    parts = text.split(".")
    if len(parts) != 3:
        raise InvalidFormat(tag, "expected MAJOR.MINOR.PATCH")
    for part in parts:
        if not _NUMERIC.fullmatch(part):
            raise InvalidFormat(tag, f"{part!r} is not a non-negative integer")

    major, minor, patch = (int(p) for p in parts)
    return semver.Version(major, minor, patch, prerelease=prerelease, build=build)


def compare_versions(a: semver.Version, b: semver.Version) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, level with or after ``b``."""
    return a.compare(b)


def next_version(current: semver.Version, kind: str) -> semver.Version:
    """Bump ``kind`` of ``current``; pre-release and build are always dropped."""
    if kind == "major":
        return current.bump_major()
    if kind == "minor":
        return current.bump_minor()
    if kind == "patch":
        return current.bump_patch()
    raise InvalidBumpKind(kind)


def with_pre_release(version: semver.Version, name: Optional[str] = None) -> semver.Version:
    """Start a pre-release series: ``<name>.0``, or just ``0`` without a name."""
    label = f"{name}.0" if name else "0"
    return version.replace(prerelease=_check_identifiers(label, label, "pre-release"))


def with_build(version: semver.Version, name: str) -> semver.Version:
    return version.replace(build=_check_identifiers(name, name, "build metadata"))


def format_version(version: semver.Version, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{prefix}{version}"
