"""Command line entry point for git-semv."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Mapping, Optional, Sequence, TextIO

from git_semv import __version__
from git_semv.config import Settings
from git_semv.errors import SemvError
from git_semv.git import GitTagSource, TagSource
from git_semv.semv import current_version, list_versions
from git_semv.version import (
    BUMP_KINDS,
    format_version,
    next_version,
    with_build,
    with_pre_release,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERR = 1

HELP = """\
Usage: git-semv [--version] [--help] command <options>

Commands:
  list               Sorted versions
  now, current       Current version
  major              Next major version: vX.0.0
  minor              Next minor version: v0.X.0
  patch              Next patch version: v0.0.X

Options:
  -p, --pre          Pre-Release version indicates(ex: 0.0.1-rc.0)
      --pre-name     Specify pre-release version name
  -b, --build        Build version indicates(ex: 0.0.1+3222d31.foo)
      --build-name   Specify build version name
  -a, --all          Include everything such as pre-release and build versions in list
  -B, --bump         Create tag and Push to origin
  -x, --prefix       Prefix for version and tag(default: v)
  -V, --verbose      Log git commands and skipped tags to stderr
  -h, --help         Show this help message and exit
  -v, --version      Prints the version number
"""


class UsageError(SemvError):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="git-semv", add_help=False)
    parser.add_argument("command", nargs="?", default="list")
    parser.add_argument("args", nargs="*")
    parser.add_argument("-p", "--pre", action="store_true")
    parser.add_argument("--pre-name")
    parser.add_argument("-b", "--build", action="store_true")
    parser.add_argument("--build-name")
    parser.add_argument("-a", "--all", action="store_true")
    parser.add_argument("-B", "--bump", action="store_true")
    parser.add_argument("-x", "--prefix")
    parser.add_argument("-V", "--verbose", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    return parser


def _next(args: argparse.Namespace, source: TagSource, prefix: str) -> str:
    version = next_version(current_version(source, prefix), args.command)
    if args.pre:
        version = with_pre_release(version, args.pre_name)
    if args.build:
        build = source.short_commit()
        if args.build_name:
            build = f"{build}.{args.build_name}"
        version = with_build(version, build)
    tag = format_version(version, prefix)
    if args.bump:
        source.create_and_push_tag(tag)
    return tag


def run(args: argparse.Namespace, source: TagSource, settings: Settings) -> List[str]:
    """Execute the parsed command and return the lines to print."""
    prefix = settings.prefix if args.prefix is None else args.prefix
    if args.command == "list":
        versions = list_versions(source, prefix, strict=not args.all)
        return [format_version(v, prefix) for v in versions]
    if args.command in ("now", "current"):
        return [format_version(current_version(source, prefix), prefix)]
    if args.command in BUMP_KINDS:
        return [_next(args, source, prefix)]
    raise UsageError(f"command is not available: {args.command}")


def main(
    argv: Optional[Sequence[str]] = None,
    tag_source: Optional[TagSource] = None,
    environ: Optional[Mapping[str, str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr

    try:
        settings = Settings.from_env(environ)
        args = build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    except (SemvError, ValueError) as e:
        print(f"Error: {e}", file=err)
        print(HELP, end="", file=err)
        return EXIT_ERR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        stream=err,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.help:
        print(HELP, end="", file=out)
        return EXIT_OK
    if args.version:
        print(f"git-semv version {__version__}", file=out)
        return EXIT_OK

    source = tag_source or GitTagSource(git=settings.git, remote=settings.remote)
    try:
        lines = run(args, source, settings)
    except UsageError as e:
        print(f"Error: {e}", file=err)
        print(HELP, end="", file=err)
        return EXIT_ERR
    except SemvError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=err)
        return EXIT_ERR

    for line in lines:
        print(line, file=out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
