"""Cache CLI commands."""

import argparse


def cmd_cache_invalidate(args: argparse.Namespace) -> int:
    from leetup_engine.cache import ProblemCache
    from leetup_engine.errors import LeetupError

    try:
        removed = ProblemCache(args.cache).invalidate(args.key)
    except (LeetupError, ValueError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    if removed:
        print(f"Invalidated {args.key}")
    else:
        print(f"Not cached: {args.key}")
    return 0
