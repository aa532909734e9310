# SPDX-License-Identifier: MIT
"""
Tests for the pre-tool-use hook.
"""

import io
import json

from aicodesafe.hooks import EXIT_ALLOW, EXIT_DENY
from aicodesafe.hooks.common import run_hook
from aicodesafe.hooks.pre_tool_use import handle, resolve_paths

GITHUB_PAT = "ghp_" + "A1b2C3d4E5" * 3 + "f6G7h8"


def _payload(tmp_path, tool="Read", **tool_input):
    return {"tool_name": tool, "tool_input": tool_input, "cwd": str(tmp_path)}


class TestResolvePaths:
    def test_single_and_list_keys(self, tmp_path):
        paths = resolve_paths(
            str(tmp_path),
            {"file_path": "a.txt", "paths": ["b.txt", str(tmp_path / "c.txt")], "files": ["d.txt"]},
        )
        assert paths == [tmp_path / "a.txt", tmp_path / "b.txt", tmp_path / "c.txt", tmp_path / "d.txt"]

    def test_ignores_non_strings(self, tmp_path):
        paths = resolve_paths(str(tmp_path), {"path": 12, "file_paths": [None, "", 3, "ok.txt"]})
        assert paths == [tmp_path / "ok.txt"]

    def test_non_mapping_input(self, tmp_path):
        assert resolve_paths(str(tmp_path), "a.txt") == []
        assert resolve_paths(str(tmp_path), None) == []

    def test_relative_parts_normalised(self, tmp_path):
        (path,) = resolve_paths(str(tmp_path / "sub"), {"file_path": "../x.txt"})
        assert path == tmp_path / "x.txt"


class TestHandle:
    def test_uninteresting_tool_allowed(self, tmp_path):
        (tmp_path / "secret.env").write_text(f"TOKEN={GITHUB_PAT}\n")
        outcome = handle(_payload(tmp_path, tool="Write", file_path="secret.env"))
        assert outcome.exit_code == EXIT_ALLOW
        assert outcome.message == ""

    def test_no_paths_allowed(self, tmp_path):
        assert handle(_payload(tmp_path)).exit_code == EXIT_ALLOW

    def test_clean_file_allowed(self, tmp_path):
        (tmp_path / "README.md").write_text("# Project\n\nNothing to see here.\n")
        assert handle(_payload(tmp_path, file_path="README.md")).exit_code == EXIT_ALLOW

    def test_unreadable_file_skipped(self, tmp_path):
        assert handle(_payload(tmp_path, file_path="missing.env")).exit_code == EXIT_ALLOW

    def test_high_finding_denied(self, tmp_path):
        (tmp_path / "secret.env").write_text(f"# config\nTOKEN={GITHUB_PAT}\n")
        outcome = handle(_payload(tmp_path, file_path="secret.env"))
        assert outcome.exit_code == EXIT_DENY
        assert "HIGH severity" in outcome.message
        assert "GitHub PAT (ghp_)@2:7" in outcome.message
        assert str(tmp_path / "secret.env") in outcome.message
        assert GITHUB_PAT not in outcome.message

    def test_low_findings_denied(self, tmp_path):
        (tmp_path / "contacts.txt").write_text("ops@example.com\n")
        outcome = handle(_payload(tmp_path, file_path="contacts.txt"))
        assert outcome.exit_code == EXIT_DENY
        assert "medium/low" in outcome.message
        assert "Totals: high=0 medium=0 low=1" in outcome.message

    def test_counts_summed_across_files(self, tmp_path):
        (tmp_path / "a.txt").write_text("a@example.com\n")
        (tmp_path / "b.txt").write_text("b@example.com c@example.com\n")
        (tmp_path / "clean.txt").write_text("nothing\n")
        outcome = handle(
            _payload(tmp_path, tool="MultiRead", paths=["a.txt", "b.txt", "clean.txt"])
        )
        assert outcome.exit_code == EXIT_DENY
        assert "Totals: high=0 medium=0 low=3" in outcome.message
        assert "clean.txt" not in outcome.message

    def test_summary_lists_at_most_configured_findings(self, tmp_path):
        (tmp_path / ".aicodesafe.yml").write_text("report:\n  max_findings_per_file: 2\n")
        (tmp_path / "many.txt").write_text(" ".join(f"u{i}@example.com" for i in range(5)))
        outcome = handle(_payload(tmp_path, file_path="many.txt"))
        assert outcome.message.count("[LOW] Email") == 2
        assert "3 more omitted" in outcome.message

    def test_byte_cap_from_config(self, tmp_path):
        (tmp_path / ".aicodesafe.yml").write_text("max_bytes: 16\n")
        (tmp_path / "late.txt").write_text("x" * 32 + " a@example.com\n")
        assert handle(_payload(tmp_path, file_path="late.txt")).exit_code == EXIT_ALLOW

    def test_interesting_tools_from_config(self, tmp_path):
        (tmp_path / ".aicodesafe.yml").write_text("interesting_tools: [Grep]\n")
        (tmp_path / "a.txt").write_text("a@example.com\n")
        assert handle(_payload(tmp_path, file_path="a.txt")).exit_code == EXIT_ALLOW
        assert handle(_payload(tmp_path, tool="Grep", path="a.txt")).exit_code == EXIT_DENY


class TestRunHook:
    def _run(self, raw):
        stderr = io.StringIO()
        code = run_hook(handle, stdin=io.StringIO(raw), stderr=stderr)
        return code, stderr.getvalue()

    def test_malformed_json_denied(self):
        code, err = self._run("{not json")
        assert code == EXIT_DENY
        assert "Cannot parse hook input as JSON" in err

    def test_non_object_json_denied(self):
        code, err = self._run("[1, 2]")
        assert code == EXIT_DENY
        assert "JSON object" in err

    def test_empty_input_allowed(self):
        assert self._run("") == (EXIT_ALLOW, "")

    def test_bad_config_denied(self, tmp_path):
        (tmp_path / ".aicodesafe.yml").write_text("max_bytes: nope\n")
        code, err = self._run(json.dumps(_payload(tmp_path, file_path="a.txt")))
        assert code == EXIT_DENY
        assert "max_bytes" in err

    def test_findings_written_to_stderr(self, tmp_path):
        (tmp_path / "a.txt").write_text(f"{GITHUB_PAT}\n")
        code, err = self._run(json.dumps(_payload(tmp_path, file_path="a.txt")))
        assert code == EXIT_DENY
        assert "[HIGH] GitHub PAT (ghp_)@1:1: gh***h8" in err
