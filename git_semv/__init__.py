"""Inspect git tags as semantic versions and compute the next one."""

from __future__ import annotations

from git_semv.errors import (
    InvalidBumpKind,
    InvalidFormat,
    NoVersionFound,
    SemvError,
    SourceUnavailable,
    TagPushFailed,
)
from git_semv.semv import build_version_list, current_version, list_versions
from git_semv.version import (
    BUMP_KINDS,
    compare_versions,
    format_version,
    next_version,
    parse_version,
    with_build,
    with_pre_release,
)

__version__ = "0.4.0"

__all__ = [
    "BUMP_KINDS",
    "InvalidBumpKind",
    "InvalidFormat",
    "NoVersionFound",
    "SemvError",
    "SourceUnavailable",
    "TagPushFailed",
    "__version__",
    "build_version_list",
    "compare_versions",
    "current_version",
    "format_version",
    "list_versions",
    "next_version",
    "parse_version",
    "with_build",
    "with_pre_release",
]
