"""Tests for the pick hook runner."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from leetup_engine.errors import HookFailed
from leetup_engine.hooks.runner import (
    HookSubstitutions,
    kebab_case,
    resolve_working_dir,
    run_hooks,
    substitute,
)


class TestSubstitute:
    def test_tilde_working_dir_and_problem(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/u")
        subs = HookSubstitutions(working_dir="~/lc/rust", problem="two-sum")
        command = substitute("cd @leetup=working_dir; mkdir -p @leetup=problem", subs)
        assert command == "cd /home/u/lc/rust; mkdir -p two-sum"

    def test_every_occurrence_replaced(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        command = substitute("@leetup=problem @leetup=problem @leetup=working_dir", subs)
        assert command == f"two-sum two-sum {tmp_path}"

    def test_problem_is_kebab_cased(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="Two Sum")
        assert substitute("@leetup=problem", subs) == "two-sum"

    def test_relative_working_dir_is_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_working_dir("lc") == Path.cwd() / "lc"

    @pytest.mark.parametrize("raw,slug", [
        ("two-sum", "two-sum"),
        ("Two Sum", "two-sum"),
        ("  3Sum Closest ", "3sum-closest"),
        ("Pow(x, n)", "pow-x-n"),
    ])
    def test_kebab_case(self, raw, slug):
        assert kebab_case(raw) == slug


class TestRunHooks:
    def test_runs_in_order(self, tmp_path):
        log = tmp_path / "log"
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        executed = run_hooks(
            [
                "echo first >> @leetup=working_dir/log",
                "echo @leetup=problem >> @leetup=working_dir/log",
            ],
            subs,
        )
        assert log.read_text() == "first\ntwo-sum\n"
        assert executed == [
            f"echo first >> {tmp_path}/log",
            f"echo two-sum >> {tmp_path}/log",
        ]

    def test_creates_problem_dir(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        run_hooks(["mkdir -p @leetup=working_dir/@leetup=problem"], subs)
        assert (tmp_path / "two-sum").is_dir()

    def test_stops_at_first_failure(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        with pytest.raises(HookFailed) as exc:
            run_hooks(["false", "touch @leetup=working_dir/ran"], subs)
        assert exc.value.command == "false"
        assert exc.value.exit_code == 1
        assert not (tmp_path / "ran").exists()

    def test_second_command_never_invoked(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        failed = subprocess.CompletedProcess("false", 1, stderr="")
        with patch("leetup_engine.hooks.runner.subprocess.run", return_value=failed) as run:
            with pytest.raises(HookFailed) as exc:
                run_hooks(["false", "echo should-not-run"], subs)
        assert run.call_count == 1
        assert run.call_args.args[0] == "false"
        assert exc.value.exit_code == 1

    def test_captures_stderr_and_exit_code(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        with pytest.raises(HookFailed) as exc:
            run_hooks(["echo boom >&2; exit 3"], subs)
        assert exc.value.exit_code == 3
        assert "boom" in exc.value.stderr
        assert "boom" in str(exc.value)

    def test_earlier_side_effects_are_kept(self, tmp_path):
        subs = HookSubstitutions(working_dir=tmp_path, problem="two-sum")
        executed: list[str] = []
        with pytest.raises(HookFailed):
            run_hooks(["touch @leetup=working_dir/made", "exit 2"], subs, executed=executed)
        assert (tmp_path / "made").exists()
        assert executed == [f"touch {tmp_path}/made", "exit 2"]

    def test_empty_sequence(self, tmp_path):
        assert run_hooks([], HookSubstitutions(working_dir=tmp_path, problem="a")) == []
