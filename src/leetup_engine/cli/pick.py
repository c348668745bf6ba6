"""Pick CLI command."""

import argparse
from pathlib import Path


def _load_stub(args: argparse.Namespace):
    import yaml

    from leetup_engine.cache import ProblemCache, problem_key
    from leetup_engine.errors import ProblemNotCached
    from leetup_engine.models import ProblemStub, kebab_case

    cache = ProblemCache(args.cache)
    if args.stub:
        with open(args.stub) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{args.stub}: problem stub is not a mapping")
        if args.lang:
            data["lang"] = args.lang
        stub = ProblemStub.from_dict(data)
        cache.put(problem_key(stub.slug), stub.to_dict())
        return stub

    data = cache.get(problem_key(kebab_case(args.slug)))
    if data is None:
        raise ProblemNotCached(f"Problem '{args.slug}' is not cached; pick it with --stub first")
    if args.lang:
        data["lang"] = args.lang
    return ProblemStub.from_dict(data)


def cmd_pick(args: argparse.Namespace) -> int:
    import yaml

    from leetup_engine.config import load_config
    from leetup_engine.errors import LeetupError
    from leetup_engine.pick import pick

    if not args.stub and not args.slug:
        print("ERROR: give a problem slug or --stub FILE")
        return 1

    try:
        stub = _load_stub(args)
        result = pick(
            stub,
            load_config(args.config),
            include_definition=not args.no_definition,
            directory=Path(args.dir) if args.dir else None,
            run_hook_scripts=not args.no_hooks,
            strict=args.strict,
            dry_run=args.print,
        )
    except (LeetupError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return 1

    if args.print:
        print(result.content, end="")
        return 0

    print(f"Generated: {result.path}")
    if result.hooks_run:
        print(
            "Note: File path can be wrong if you used: `mkdir`, `cd`, `mv` to move "
            "around the generated file. Find the right path used in your script!"
        )
    for failure in result.hook_failures:
        print(f"  FAIL hook (exit {failure.exit_code}): {failure.command}")
    return 1 if result.hook_failures else 0
