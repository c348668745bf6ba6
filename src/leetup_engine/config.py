"""Load and validate the leetup user configuration.

The config file (``~/.leetup/config.json`` by default) is parsed with
``yaml.safe_load`` so JSON and YAML documents are both accepted:

    {
      "inject_code": {
        "rust": {
          "before_code": ["use std::rc::Rc;", "use std::cell::RefCell;"],
          "before_code_exclude": ["struct Solution;"],
          "after_code": "fn main() { Solution::$func(); }",
          "before_function_definition": "#[allow(dead_code)]"
        }
      },
      "pick_hook": {
        "rust": {
          "working_dir": "~/lc/rust",
          "script": {
            "pre_generation": ["cd @leetup=working_dir; mkdir -p @leetup=problem"],
            "post_generation": ["mv @leetup=working_dir/@leetup=problem.rs @leetup=working_dir/@leetup=problem/main.rs"]
          }
        }
      }
    }

Values may be a single string or a list of strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from leetup_engine.errors import ConfigInvalid
from leetup_engine.lang import normalize_lang
from leetup_engine.paths import config_path
from leetup_engine.template import HOOK_PLACEHOLDERS, MARKER_PREFIX, WORKING_DIR_PLACEHOLDER

_PLACEHOLDER_RE = re.compile(re.escape(MARKER_PREFIX) + r"[\w:]+")


@dataclass(frozen=True)
class InjectionConfig:
    """Per-language code injected around a generated stub."""

    before_code: tuple[str, ...] = ()
    before_code_exclude: tuple[str, ...] = ()
    after_code: str | None = None
    before_function_definition: str | None = None


@dataclass(frozen=True)
class HookConfig:
    """Per-language shell commands run around file generation."""

    working_dir: str | None = None
    pre_generation: tuple[str, ...] = ()
    post_generation: tuple[str, ...] = ()


@dataclass(frozen=True)
class LeetupConfig:
    """Loaded configuration, keyed by canonical language name."""

    inject_code: dict[str, InjectionConfig] = field(default_factory=dict)
    pick_hook: dict[str, HookConfig] = field(default_factory=dict)
    path: Path | None = None

    def injection_for(self, lang: str) -> InjectionConfig | None:
        return self.inject_code.get(normalize_lang(lang))

    def hook_for(self, lang: str) -> HookConfig | None:
        return self.pick_hook.get(normalize_lang(lang))


def load_config(path: Path | str | None = None) -> LeetupConfig:
    """Load the user config from disk.

    Args:
        path: Config file. Defaults to ``paths.config_path()``.

    Returns:
        Parsed, validated LeetupConfig. A missing file yields an empty config.

    Raises:
        ConfigInvalid: If the file is not a mapping or any entry is malformed.
    """
    cfg_path = Path(path).expanduser() if path else config_path()
    if not cfg_path.is_file():
        return LeetupConfig(path=None)

    try:
        with open(cfg_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigInvalid(f"{cfg_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigInvalid(f"{cfg_path}: config is not a mapping")

    config = parse_config(data)
    return LeetupConfig(config.inject_code, config.pick_hook, path=cfg_path)


def parse_config(data: dict[str, Any]) -> LeetupConfig:
    """Build a LeetupConfig from an already-parsed mapping."""
    inject_code = {
        normalize_lang(lang): parse_injection(entry, lang)
        for lang, entry in _section(data, "inject_code").items()
    }
    pick_hook = {
        normalize_lang(lang): parse_hook(entry, lang)
        for lang, entry in _section(data, "pick_hook").items()
    }
    return LeetupConfig(inject_code=inject_code, pick_hook=pick_hook)


def parse_injection(entry: Any, lang: str = "?") -> InjectionConfig:
    """Parse one ``inject_code.<lang>`` entry."""
    where = f"inject_code.{lang}"
    if not isinstance(entry, dict):
        raise ConfigInvalid(f"{where}: expected a mapping")
    return InjectionConfig(
        before_code=_lines(entry.get("before_code"), f"{where}.before_code"),
        before_code_exclude=_lines(entry.get("before_code_exclude"), f"{where}.before_code_exclude"),
        after_code=_block(entry.get("after_code"), f"{where}.after_code"),
        before_function_definition=_block(
            entry.get("before_function_definition"), f"{where}.before_function_definition",
        ),
    )


def parse_hook(entry: Any, lang: str = "?") -> HookConfig:
    """Parse one ``pick_hook.<lang>`` entry and validate its placeholders."""
    where = f"pick_hook.{lang}"
    if not isinstance(entry, dict):
        raise ConfigInvalid(f"{where}: expected a mapping")

    script = entry.get("script") or {}
    if not isinstance(script, dict):
        raise ConfigInvalid(f"{where}.script: expected a mapping")

    working_dir = entry.get("working_dir")
    if working_dir is not None and not isinstance(working_dir, str):
        raise ConfigInvalid(f"{where}.working_dir: expected a string")

    hook = HookConfig(
        working_dir=working_dir or None,
        pre_generation=_lines(
            script.get("pre_generation", entry.get("pre_generation")), f"{where}.pre_generation",
        ),
        post_generation=_lines(
            script.get("post_generation", entry.get("post_generation")), f"{where}.post_generation",
        ),
    )
    validate_hook(hook, where)
    return hook


def validate_hook(hook: HookConfig, where: str = "pick_hook") -> None:
    """Reject unknown placeholders and working_dir references without a working_dir."""
    for command in hook.pre_generation + hook.post_generation:
        for placeholder in _PLACEHOLDER_RE.findall(command):
            if placeholder not in HOOK_PLACEHOLDERS:
                raise ConfigInvalid(f"{where}: unknown placeholder '{placeholder}' in: {command}")
        if WORKING_DIR_PLACEHOLDER in command and not hook.working_dir:
            raise ConfigInvalid(
                f"{where}: command uses {WORKING_DIR_PLACEHOLDER} but no working_dir is set"
            )


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigInvalid(f"{key}: expected a mapping of language → settings")
    return section


def _lines(value: Any, where: str) -> tuple[str, ...]:
    """String → one line, list → ordered lines. Order is preserved as given."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigInvalid(f"{where}: expected a string or a list of strings")


def _block(value: Any, where: str) -> str | None:
    lines = _lines(value, where)
    return "\n".join(lines) if lines else None
