from pathlib import Path

from click.testing import CliRunner

from mdpress import __version__
from mdpress.cli import cli


def write_site(root: Path) -> None:
    (root / "content" / "notes").mkdir(parents=True)
    (root / "content" / "index.md").write_text(
        "---\ntitle: Home\n---\n# Hi\n", encoding="utf-8"
    )
    (root / "content" / "notes" / "todo.md").write_text("- milk\n", encoding="utf-8")
    (root / "content" / "notes" / "data.csv").write_text("a,b\n1,2\n", encoding="utf-8")


def test_build_with_defaults(monkeypatch, tmp_path):
    write_site(tmp_path)
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "Built 2 pages and copied 1 files into public" in result.output
    assert (tmp_path / "public" / "index.html").exists()
    assert (tmp_path / "public" / "notes" / "todo.html").exists()
    assert (tmp_path / "public" / "notes" / "data.csv").read_text(
        encoding="utf-8"
    ) == "a,b\n1,2\n"


def test_build_with_custom_directories_and_verbose(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "content").rename(tmp_path / "docs")
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(
        cli, ["build", "-i", "docs", "-o", "site", "--verbose"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert f"Processing: {Path('docs') / 'index.md'}" in result.output
    assert f"Processing: {Path('docs') / 'notes' / 'todo.md'}" in result.output
    assert (tmp_path / "site" / "index.html").exists()


def test_build_failure_exits_non_zero(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "content" / "index.md").write_text(
        "---\ntitle: Home\n# Hi\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"])
    assert result.exit_code == 1
    assert "Build failed:" in result.output
    assert f"File: {Path('content') / 'index.md'}" in result.output
    assert "Unterminated front matter" in result.output


def test_build_missing_template_exits_non_zero(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "content" / "index.md").write_text(
        "---\ntemplate: home\n---\n# Hi\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"])
    assert result.exit_code == 1
    assert "Template not found: home" in result.output


def test_build_missing_content_exits_non_zero(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"])
    assert result.exit_code == 1
    assert "Content directory does not exist" in result.output


def test_build_no_clean_keeps_existing_files(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "CNAME").write_text("example.com", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build", "--no-clean"], catch_exceptions=False)
    assert result.exit_code == 0
    assert (tmp_path / "public" / "CNAME").exists()


def test_new_scaffolds_buildable_project(monkeypatch, tmp_path):
    runner = CliRunner()
    target = tmp_path / "mysite"
    result = runner.invoke(cli, ["new", str(target)])
    assert result.exit_code == 0
    assert (target / "content" / "index.md").exists()
    assert (target / "templates" / "default.html").exists()
    assert (target / "static" / "style.css").exists()
    assert (target / "mdpress.yaml").exists()

    monkeypatch.chdir(target)
    result = runner.invoke(cli, ["build"], catch_exceptions=False)
    assert result.exit_code == 0
    html = (target / "public" / "index.html").read_text(encoding="utf-8")
    assert "<title>Welcome</title>" in html
    assert '<link rel="stylesheet" href="style.css">' in html
    assert (target / "public" / "style.css").exists()

    # fails on non-empty directory
    result = runner.invoke(cli, ["new", str(target)])
    assert result.exit_code != 0


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_module_main_entrypoint():
    from mdpress.__main__ import main

    assert callable(main)


def test_build_reports_output_collision(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "content" / "index.markdown").write_text("# Again\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"])
    assert result.exit_code == 1
    assert "Build failed:" in result.output
    assert "index.html is produced by both" in result.output


def test_build_with_numeric_front_matter_key(monkeypatch, tmp_path):
    write_site(tmp_path)
    (tmp_path / "content" / "index.md").write_text(
        "---\n2024: released\n---\n# Hi\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["build"], catch_exceptions=False)
    assert result.exit_code == 0
