"""Hook runner.

Each command template has its ``@leetup=working_dir`` and
``@leetup=problem`` placeholders substituted, then runs through the
shell, one at a time, blocking until it exits. The first non-zero exit
stops the sequence; commands that already ran are not undone.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from leetup_engine.errors import HookFailed
from leetup_engine.models import kebab_case
from leetup_engine.template import PROBLEM_PLACEHOLDER, WORKING_DIR_PLACEHOLDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HookSubstitutions:
    """Values substituted into hook command templates."""

    working_dir: Path | str
    problem: str

    @property
    def resolved_working_dir(self) -> Path:
        return resolve_working_dir(self.working_dir)

    @property
    def problem_slug(self) -> str:
        return kebab_case(self.problem)


def resolve_working_dir(working_dir: Path | str) -> Path:
    """Tilde-expand and absolutize a working directory."""
    return Path(working_dir).expanduser().absolute()


def substitute(template: str, subs: HookSubstitutions) -> str:
    """Replace every hook placeholder occurrence in ``template``."""
    command = template.replace(WORKING_DIR_PLACEHOLDER, str(subs.resolved_working_dir))
    return command.replace(PROBLEM_PLACEHOLDER, subs.problem_slug)


def run_hooks(
    commands: list[str] | tuple[str, ...],
    subs: HookSubstitutions,
    executed: list[str] | None = None,
) -> list[str]:
    """Run hook command templates in order.

    Args:
        commands: Command templates, executed in the given order.
        subs: Placeholder values.
        executed: List to append each substituted command to as it runs.

    Returns:
        The substituted commands that ran.

    Raises:
        HookFailed: On the first command exiting non-zero; later commands
            are not run.
    """
    if executed is None:
        executed = []
    for template in commands:
        command = substitute(template, subs)
        logger.info("Running hook: %s", command)
        result = subprocess.run(
            command,
            shell=True,
            stderr=subprocess.PIPE,
            text=True,
        )
        executed.append(command)
        if result.stderr:
            sys.stderr.write(result.stderr)
        if result.returncode != 0:
            raise HookFailed(command, result.returncode, result.stderr or "")
    return executed
