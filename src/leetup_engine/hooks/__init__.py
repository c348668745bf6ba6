"""Pick hooks — shell commands run before and after file generation."""

from leetup_engine.hooks.runner import HookSubstitutions, run_hooks, substitute

__all__ = [
    "HookSubstitutions",
    "run_hooks",
    "substitute",
]
