import json
from pathlib import Path

from doclinks.api.config.LinkCheckConfig import LinkCheckConfig
from doclinks.api.link.cmd_check import cmd_check
from tests.conftest import run_cmd, write_tree


def test_cmd_check_valid_tree(project):
    result = run_cmd(cmd_check, root=project)
    assert result.success is True
    assert result.output["is_valid"] is True
    assert result.output["documents_checked"] == 4
    assert result.output["links_checked"] == 8
    assert result.output["broken_links"] == []
    assert result.output["docs_root"] == "docs"
    assert result.result == "All links valid (8 links in 4 files)"


def test_cmd_check_progress_reports_counts(project):
    result = cmd_check(root=project)
    messages = [message for _, message in result.progress_callback(result)]
    assert "Found 4 markdown files" in messages
    assert "Found 8 links" in messages


def test_cmd_check_broken_links(tmp_path):
    write_tree(tmp_path, {"docs/index.md": "[x](/missing)\n[y](sub/)", "docs/a.md": "[y](./index)"})
    result = run_cmd(cmd_check, root=tmp_path)
    assert result.success is False
    assert result.output["broken_count"] == 2
    assert result.output["broken_links"] == [
        {
            "source_document": "docs/index.md",
            "target": "/missing",
            "resolved_path": "docs/missing.md",
            "line_number": 1,
        },
        {
            "source_document": "docs/index.md",
            "target": "sub/",
            "resolved_path": "docs/sub/index.md",
            "line_number": 2,
        },
    ]
    assert result.result == "Found 2 broken links"


def test_cmd_check_missing_docs_dir(tmp_path):
    result = run_cmd(cmd_check, root=tmp_path)
    assert result.success is False
    assert result.output["is_valid"] is False
    assert "Cannot read documentation tree" in result.output["errors"][0]


def test_cmd_check_docs_dir_override(tmp_path):
    write_tree(tmp_path, {"site/index.md": "[x](./other)", "site/other.md": ""})
    result = run_cmd(cmd_check, root=tmp_path, docs_dir="site")
    assert result.success is True
    assert result.output["docs_root"] == "site"


def test_cmd_check_reads_project_config(tmp_path):
    write_tree(tmp_path, {"pages/index.md": "[m](mailto:me@example.com)"})
    (tmp_path / ".doclinks.json").write_text(
        json.dumps({"docs_dir": "pages", "external_prefixes": ["mailto:"]}), encoding="utf-8"
    )
    result = run_cmd(cmd_check, root=tmp_path)
    assert result.success is True
    assert result.output["links_checked"] == 1


def test_cmd_check_invalid_config(tmp_path):
    config_file = tmp_path / "broken.json"
    config_file.write_text("{not json", encoding="utf-8")
    result = run_cmd(cmd_check, root=tmp_path, config_path=config_file)
    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]


def test_cmd_check_preloaded_config(tmp_path):
    write_tree(tmp_path, {"docs/index.md": "[g](./guide#intro)", "docs/guide.md": ""})
    result = run_cmd(cmd_check, root=tmp_path, config=LinkCheckConfig(strip_fragments=True))
    assert result.success is True


def test_cmd_check_unreadable_document(tmp_path, monkeypatch):
    write_tree(tmp_path, {"docs/index.md": "[a](./a)", "docs/a.md": ""})
    original_read_text = Path.read_text

    def fake_read_text(self, *args, **kwargs):
        if self.name == "a.md":
            raise PermissionError(13, "Permission denied", str(self))
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", fake_read_text)
    result = run_cmd(cmd_check, root=tmp_path)
    assert result.success is False
    assert result.output["is_valid"] is False
    assert "Cannot read documentation tree" in result.output["errors"][0]


def test_cmd_check_overlong_target_does_not_abort(tmp_path):
    write_tree(tmp_path, {"docs/index.md": f"[x](./{'a' * 300}) [y](/missing)"})
    result = run_cmd(cmd_check, root=tmp_path)
    assert result.success is False
    assert result.output["errors"] == []
    assert [entry["target"] for entry in result.output["broken_links"]] == [f"./{'a' * 300}", "/missing"]
