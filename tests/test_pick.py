"""Tests for the pick flow."""

import pytest

from leetup_engine.config import parse_config
from leetup_engine.errors import HookFailed
from leetup_engine.models import ProblemStub
from leetup_engine.pick import pick
from leetup_engine.template.extract import extract
from leetup_engine.template.generator import generate


def _hook_config(working_dir, pre=(), post=()):
    return parse_config({
        "pick_hook": {
            "rust": {
                "working_dir": str(working_dir),
                "script": {"pre_generation": list(pre), "post_generation": list(post)},
            },
        },
    })


class TestPick:
    def test_writes_file_without_config(self, tmp_path, two_sum):
        result = pick(two_sum, directory=tmp_path)
        assert result.path == tmp_path / "two-sum.rs"
        assert result.path.read_text() == generate(two_sum, None, True)
        assert result.ok
        assert result.hooks_run == []

    def test_uses_injection_config(self, tmp_path, two_sum):
        no_hooks = parse_config({"inject_code": {"rust": {"before_code": ["use a;"]}}})
        result = pick(two_sum, no_hooks, directory=tmp_path)
        assert "use a;" in result.content
        assert extract(result.content) == two_sum.code

    def test_defaults_to_cwd(self, tmp_path, monkeypatch, two_sum):
        monkeypatch.chdir(tmp_path)
        result = pick(two_sum)
        assert (tmp_path / "two-sum.rs").is_file()
        assert result.path.name == "two-sum.rs"

    def test_dry_run_writes_nothing(self, tmp_path, two_sum):
        cfg = _hook_config(tmp_path / "lc", pre=["touch @leetup=working_dir/pre"])
        result = pick(two_sum, cfg, directory=tmp_path, dry_run=True)
        assert not result.path.exists()
        assert not (tmp_path / "lc").exists()
        assert result.content == generate(two_sum, None, True)

    def test_hooks_run_around_generation(self, tmp_path, two_sum):
        lc = tmp_path / "lc"
        cfg = _hook_config(
            lc,
            pre=["mkdir -p @leetup=working_dir/@leetup=problem"],
            post=["mv @leetup=working_dir/@leetup=problem.rs @leetup=working_dir/@leetup=problem/main.rs"],
        )
        result = pick(two_sum, cfg, directory=tmp_path / "ignored")
        assert result.ok
        assert result.path == lc / "two-sum.rs"
        assert not result.path.exists()
        assert extract((lc / "two-sum" / "main.rs").read_text()) == two_sum.code
        assert result.hooks_run == [
            f"mkdir -p {lc}/two-sum",
            f"mv {lc}/two-sum.rs {lc}/two-sum/main.rs",
        ]

    def test_pre_hook_sees_no_file_yet(self, tmp_path, two_sum):
        lc = tmp_path / "lc"
        cfg = _hook_config(lc, pre=["test ! -e @leetup=working_dir/@leetup=problem.rs"])
        assert pick(two_sum, cfg).ok

    def test_failed_pre_hook_is_recorded(self, tmp_path, two_sum):
        lc = tmp_path / "lc"
        cfg = _hook_config(
            lc,
            pre=["false", "touch @leetup=working_dir/never"],
            post=["touch @leetup=working_dir/post-ran"],
        )
        result = pick(two_sum, cfg)
        assert not result.ok
        assert len(result.hook_failures) == 1
        assert result.hook_failures[0].command == "false"
        assert result.path.is_file()
        assert not (lc / "never").exists()
        assert (lc / "post-ran").exists()

    def test_strict_raises(self, tmp_path, two_sum):
        lc = tmp_path / "lc"
        cfg = _hook_config(lc, pre=["exit 4"])
        with pytest.raises(HookFailed) as exc:
            pick(two_sum, cfg, strict=True)
        assert exc.value.exit_code == 4
        assert not (lc / "two-sum.rs").exists()

    def test_hooks_can_be_skipped(self, tmp_path, two_sum):
        cfg = _hook_config(tmp_path / "lc", pre=["false"])
        result = pick(two_sum, cfg, directory=tmp_path, run_hook_scripts=False)
        assert result.ok
        assert result.path == tmp_path / "two-sum.rs"

    def test_title_slug_matches_hook_problem(self, tmp_path, two_sum):
        stub = ProblemStub.from_dict({**two_sum.to_dict(), "slug": "Two Sum"})
        lc = tmp_path / "lc"
        cfg = _hook_config(lc, post=["mv @leetup=working_dir/@leetup=problem.rs @leetup=working_dir/moved.rs"])
        result = pick(stub, cfg)
        assert result.ok
        assert result.path == lc / "two-sum.rs"
        assert "slug=two-sum" in (lc / "moved.rs").read_text()
