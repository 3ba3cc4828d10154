"""Version lists and the current version, read from a TagSource."""

from __future__ import annotations

import logging
from typing import Iterable, List

import semver

from git_semv.errors import InvalidFormat, NoVersionFound
from git_semv.git import TagSource
from git_semv.version import DEFAULT_PREFIX, parse_version

logger = logging.getLogger(__name__)


def build_version_list(
    tags: Iterable[str], prefix: str = DEFAULT_PREFIX, strict: bool = True
) -> List[semver.Version]:
    """Parse ``tags`` and return the versions among them, highest first.

    Tags that are not versions are skipped. In strict mode versions with
    pre-release or build metadata are skipped too.
    """
    versions = []
    for tag in tags:
        try:
            version = parse_version(tag, prefix)
        except InvalidFormat as e:
            logger.debug("skipping tag %s", e)
            continue
        if strict and (version.prerelease or version.build):
            logger.debug("skipping non-release tag %r", tag)
            continue
        versions.append(version)
    return sorted(versions, reverse=True)


def list_versions(
    source: TagSource, prefix: str = DEFAULT_PREFIX, strict: bool = True
) -> List[semver.Version]:
    return build_version_list(source.list_tags(), prefix, strict)


def current_version(source: TagSource, prefix: str = DEFAULT_PREFIX) -> semver.Version:
    """Version of the nearest tag reachable from HEAD."""
    tag = source.latest_tag()
    if not tag:
        raise NoVersionFound()
    logger.debug("current tag is %r", tag)
    return parse_version(tag, prefix)
