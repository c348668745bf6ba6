"""Solution file CLI commands."""

import argparse


def cmd_extract(args: argparse.Namespace) -> int:
    from leetup_engine.errors import LeetupError
    from leetup_engine.template.extract import extract_file

    try:
        code = extract_file(args.file, args.comment)
    except (LeetupError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    print(code, end="" if code.endswith("\n") else "\n")
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    from leetup_engine.errors import LeetupError
    from leetup_engine.template.document import INFO
    from leetup_engine.template.parser import parse

    try:
        with open(args.file, encoding="utf-8") as f:
            doc = parse(f.read(), args.comment)
    except (LeetupError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    if not doc.segments:
        print("No @leetup markers found.")
        return 0

    for seg in doc.segments:
        if seg.kind == INFO:
            fields = ", ".join(f"{k}={v}" for k, v in seg.fields.items())
            print(f"  {seg.kind:<24}{fields}")
            continue
        print(f"  {seg.kind:<24}{len(seg.content.splitlines())} line(s)")
        for child in seg.children:
            print(f"    {child.kind:<22}{len(child.content.splitlines())} line(s)")
    return 0
