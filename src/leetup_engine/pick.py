"""Pick flow — generate a solution file and run the language's hooks.

The sequence is:
1. Generate the file content from the stub and injection config
2. Create the hook's working directory, if one is configured
3. Run ``pre_generation`` commands
4. Write ``<dir>/<slug>.<ext>``
5. Run ``post_generation`` commands

A failing hook command stops only the rest of its own sequence. By
default the failure is recorded and the pick continues; ``strict=True``
raises instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from leetup_engine.config import LeetupConfig
from leetup_engine.errors import HookFailed
from leetup_engine.hooks.runner import HookSubstitutions, resolve_working_dir, run_hooks
from leetup_engine.lang import get_language
from leetup_engine.models import ProblemStub
from leetup_engine.template.generator import generate

logger = logging.getLogger(__name__)


@dataclass
class PickResult:
    """Outcome of a pick."""

    path: Path
    content: str
    hooks_run: list[str] = field(default_factory=list)
    hook_failures: list[HookFailed] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.hook_failures


def pick(
    stub: ProblemStub,
    config: LeetupConfig | None = None,
    include_definition: bool = True,
    directory: Path | str | None = None,
    run_hook_scripts: bool = True,
    strict: bool = False,
    dry_run: bool = False,
) -> PickResult:
    """Generate and write the solution file for ``stub``.

    Args:
        stub: Fetched problem stub.
        config: User config; None means no injection and no hooks.
        include_definition: Include the problem statement as a comment block.
        directory: Output directory when no hook working_dir is configured.
            Defaults to the current directory.
        run_hook_scripts: Run the language's pick hooks.
        strict: Raise HookFailed instead of recording it.
        dry_run: Generate only; no hooks, no file writes.

    Returns:
        PickResult with the written path, content and any hook failures.
    """
    config = config or LeetupConfig()
    lang = get_language(stub.lang)
    content = generate(stub, config.injection_for(lang.name), include_definition)

    hook = config.hook_for(lang.name) if run_hook_scripts and not dry_run else None
    target_dir = Path(directory) if directory else Path.cwd()
    if hook and hook.working_dir:
        target_dir = resolve_working_dir(hook.working_dir)

    result = PickResult(path=target_dir / f"{stub.slug}.{lang.extension}", content=content)
    if dry_run:
        return result

    target_dir.mkdir(parents=True, exist_ok=True)
    subs = HookSubstitutions(working_dir=target_dir, problem=stub.slug)

    if hook:
        _run_stage("pre_generation", hook.pre_generation, subs, result, strict)

    result.path.write_text(content, encoding="utf-8")
    logger.info("Generated %s", result.path)

    if hook:
        _run_stage("post_generation", hook.post_generation, subs, result, strict)

    return result


def _run_stage(
    stage: str,
    commands: tuple[str, ...],
    subs: HookSubstitutions,
    result: PickResult,
    strict: bool,
) -> None:
    if not commands:
        return
    logger.info("Executing %s script...", stage)
    try:
        run_hooks(commands, subs, executed=result.hooks_run)
    except HookFailed as e:
        if strict:
            raise
        logger.warning("%s hook failed: %s", stage, e)
        result.hook_failures.append(e)
