"""Unified CLI for leetup solution files.

Usage:
    leetup pick <slug> [--lang L] [--dir D] [--no-definition] [--no-hooks] [--strict] [--print]
    leetup pick --stub <file> [--lang L] [--dir D] ...
    leetup extract <file> [--comment PREFIX]
    leetup inspect <file> [--comment PREFIX]
    leetup config show
    leetup config validate
    leetup cache invalidate <key>
"""

import argparse
import logging
import sys

from leetup_engine import __version__
from leetup_engine.cli.cache import cmd_cache_invalidate
from leetup_engine.cli.config import cmd_config_show, cmd_config_validate
from leetup_engine.cli.pick import cmd_pick
from leetup_engine.cli.template import cmd_extract, cmd_inspect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetup",
        description="Generate, edit and extract leetup solution files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default=None,
        help="Path to config file (default: ~/.leetup/config.json)",
    )
    parser.add_argument(
        "--cache", default=None,
        help="Path to cache file (default: ~/.leetup/cache.json)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # pick
    pk = sub.add_parser("pick", help="Generate a solution file")
    pk.add_argument("slug", nargs="?", default=None, help="Cached problem slug")
    pk.add_argument("--stub", default=None, help="Problem stub file (JSON or YAML)")
    pk.add_argument("-l", "--lang", default=None, help="Override the stub language")
    pk.add_argument("--dir", default=None, help="Output directory (default: cwd)")
    pk.add_argument(
        "--no-definition", action="store_true",
        help="Omit the problem statement comment block",
    )
    pk.add_argument("--no-hooks", action="store_true", help="Skip pick hooks")
    pk.add_argument(
        "--strict", action="store_true",
        help="Abort the pick on the first failing hook",
    )
    pk.add_argument(
        "--print", action="store_true",
        help="Print the generated file instead of writing it",
    )

    # extract / inspect
    ex = sub.add_parser("extract", help="Print the submittable code of a solution file")
    ex.add_argument("file")
    ex.add_argument("--comment", default=None, help="Comment prefix (default: detected)")

    ins = sub.add_parser("inspect", help="List the marker regions of a solution file")
    ins.add_argument("file")
    ins.add_argument("--comment", default=None, help="Comment prefix (default: detected)")

    # config
    cfg = sub.add_parser("config", help="Configuration operations")
    cfg_sub = cfg.add_subparsers(dest="subcommand")
    cfg_sub.add_parser("show", help="Show injection and hook settings")
    cfg_sub.add_parser("validate", help="Validate the config file")

    # cache
    ca = sub.add_parser("cache", help="Local cache operations")
    ca_sub = ca.add_subparsers(dest="subcommand")
    inv = ca_sub.add_parser("invalidate", help="Drop a cache entry")
    inv.add_argument("key", help="Cache key, e.g. problem:two-sum")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("config", "show"): cmd_config_show,
        ("config", "validate"): cmd_config_validate,
        ("cache", "invalidate"): cmd_cache_invalidate,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "pick":
        return cmd_pick(args)
    if args.command == "extract":
        return cmd_extract(args)
    if args.command == "inspect":
        return cmd_inspect(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
