"""Run-time settings: built-in defaults, then environment, then flags."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from git_semv.version import DEFAULT_PREFIX

ENV_PREFIX = "GIT_SEMV_PREFIX"
ENV_REMOTE = "GIT_SEMV_REMOTE"
ENV_GIT = "GIT_SEMV_GIT"
ENV_LOG_LEVEL = "GIT_SEMV_LOG_LEVEL"


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown log level {name!r}")
    return level


@dataclass(frozen=True)
class Settings:
    prefix: str = DEFAULT_PREFIX
    remote: str = "origin"
    git: str = "git"
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        settings = cls()
        if ENV_PREFIX in env:
            settings = replace(settings, prefix=env[ENV_PREFIX])
        if env.get(ENV_REMOTE):
            settings = replace(settings, remote=env[ENV_REMOTE])
        if env.get(ENV_GIT):
            settings = replace(settings, git=env[ENV_GIT])
        if env.get(ENV_LOG_LEVEL):
            settings = replace(settings, log_level=_log_level(env[ENV_LOG_LEVEL]))
        return settings
