"""Config CLI commands."""

import argparse


def cmd_config_show(args: argparse.Namespace) -> int:
    from leetup_engine.config import load_config
    from leetup_engine.errors import ConfigInvalid

    try:
        cfg = load_config(args.config)
    except ConfigInvalid as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Config: {cfg.path or '(none, using defaults)'}")
    print("\n  Injection")
    print(f"  {'─' * 40}")
    if not cfg.inject_code:
        print("  (none)")
    for lang, inject in sorted(cfg.inject_code.items()):
        print(
            f"  {lang:<12} before_code={len(inject.before_code)} "
            f"before_code_exclude={len(inject.before_code_exclude)} "
            f"after_code={'yes' if inject.after_code else 'no'} "
            f"before_function_definition={'yes' if inject.before_function_definition else 'no'}"
        )

    print("\n  Pick hooks")
    print(f"  {'─' * 40}")
    if not cfg.pick_hook:
        print("  (none)")
    for lang, hook in sorted(cfg.pick_hook.items()):
        print(f"  {lang:<12} working_dir={hook.working_dir or '.'}")
        for cmd in hook.pre_generation:
            print(f"    pre:  {cmd}")
        for cmd in hook.post_generation:
            print(f"    post: {cmd}")
    return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
    from leetup_engine.config import load_config
    from leetup_engine.errors import ConfigInvalid
    from leetup_engine.lang import LANGUAGES

    try:
        cfg = load_config(args.config)
    except ConfigInvalid as e:
        print(f"  FAIL {e}")
        return 1

    unknown = sorted(
        lang for lang in set(cfg.inject_code) | set(cfg.pick_hook) if lang not in LANGUAGES
    )
    for lang in unknown:
        print(f"  WARN {lang}: no language definition, entry is never used")
    print(f"  PASS {cfg.path or 'no config file'}")
    return 0
