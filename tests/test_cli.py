"""Unit tests for the ``mint-migrate`` command handlers.

The Cyclopts command functions are called directly with keyword arguments so
the tests exercise argument handling, error reporting, and printed output
without going through token parsing.

Usage
-----
Run ``pytest tests/test_cli.py -v``. Tests change into ``tmp_path`` so
auto-detection and relative output paths stay inside the sandbox.
"""

from __future__ import annotations

import typing as typ

import pytest

from mint_migrate import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import TreeWriter


@pytest.fixture
def site(
    tmp_path: Path, write_tree: TreeWriter, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Return a minimal Docusaurus project and make it the working directory."""
    root = write_tree(
        tmp_path / "site",
        {
            "docusaurus.config.js": "module.exports = {\n  title: 'Acme Docs',\n};\n",
            "static/img/logo.svg": "<svg/>",
            "docs/intro.md": "# Introduction\n",
            "docs/android-core/setup.mdx": ":::tip\nUse caching\n:::\n",
        },
    )
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def log_levels(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Record requested log levels instead of reconfiguring the root logger."""
    levels: list[str] = []
    monkeypatch.setattr(cli, "_configure_logging", levels.append)
    return levels


def test_migrate_reports_progress(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """A default run detects the docs and prints the manifest and next step."""
    cli.migrate()
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "detected docs at docs",
        "wrote mintlify-output/docs.json",
        "Migrated Acme Docs (2 pages) to mintlify-output.",
        "Next: cd mintlify-output && mint dev",
    ]
    assert (site / "mintlify-output" / "android-core" / "setup.mdx").is_file()
    assert (site / "mintlify-output" / "images" / "logo.svg").is_file()
    assert log_levels == ["WARNING"]


def test_output_dir_override_and_log_level(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """Command-line options replace configured values."""
    cli.migrate(output_dir=site / "dist", log_level="debug")
    assert "wrote dist/docs.json" in capsys.readouterr().out
    assert (site / "dist" / "docs.json").is_file()
    assert log_levels == ["debug"]


def test_no_clean_keeps_existing_files(site: Path, log_levels: list[str]) -> None:
    """Disabling cleaning leaves unrelated output in place."""
    stale = site / "mintlify-output" / "keep.txt"
    stale.parent.mkdir()
    stale.write_text("keep", encoding="utf-8")
    cli.migrate(clean=False)
    assert stale.read_text(encoding="utf-8") == "keep"


def test_clean_run_removes_previous_output(site: Path, log_levels: list[str]) -> None:
    """Cleaning is the default and wipes earlier results."""
    stale = site / "mintlify-output" / "stale.mdx"
    stale.parent.mkdir()
    stale.write_text("old", encoding="utf-8")
    cli.migrate()
    assert not stale.exists()


def test_missing_docs_exits_with_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    log_levels: list[str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Detection failures exit with status 1 before any output is written."""
    workdir = tmp_path / "nested" / "empty"
    workdir.mkdir(parents=True)
    monkeypatch.chdir(workdir)
    with pytest.raises(SystemExit) as excinfo:
        cli.migrate()
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error: Could not automatically detect")
    assert not (workdir / "mintlify-output").exists()


def test_output_containing_docs_is_rejected(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """The output folder may not be a parent of the docs being converted."""
    with pytest.raises(SystemExit) as excinfo:
        cli.migrate(docs_dir=site / "docs", output_dir=site)
    assert excinfo.value.code == 1
    assert "must not contain the docs input" in capsys.readouterr().err
    assert (site / "docs" / "intro.md").is_file()


def test_missing_explicit_config_exits(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """A config path given on the command line must exist."""
    with pytest.raises(SystemExit) as excinfo:
        cli.migrate(config=site / "absent.yaml")
    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_classify_prints_tabs(capsys: pytest.CaptureFixture[str]) -> None:
    """Each name is printed with its tab, and the platform for SDKs."""
    cli.classify("android-core", "cli-tools", "billing")
    assert capsys.readouterr().out.splitlines() == [
        "android-core: SDKs / Mobile",
        "cli-tools: Tools",
        "billing: Guides",
    ]


def test_classify_uses_config_tables(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Keyword tables from the config file replace the defaults."""
    config = tmp_path / "mint-migrate.yaml"
    config.write_text(
        "classification:\n  sdk_categories:\n    Desktop: [electron]\n",
        encoding="utf-8",
    )
    cli.classify("electron-shell", config=config)
    assert capsys.readouterr().out == "electron-shell: SDKs / Desktop\n"


def test_malformed_config_exits_with_error(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """YAML syntax errors are reported as an error line, not a traceback."""
    config = site / "mint-migrate.yaml"
    config.write_text("defaults:\n  output_dir: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.migrate(config=config)
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error: ")
    assert not (site / "mintlify-output").exists()


def test_badly_encoded_page_is_migrated(
    site: Path, log_levels: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """A Latin-1 page is converted alongside the rest of the site."""
    (site / "docs" / "cafe.md").write_bytes(b"# Caf\xe9\n")
    cli.migrate()
    assert "Migrated Acme Docs (3 pages)" in capsys.readouterr().out
    assert (site / "mintlify-output" / "docs.json").is_file()
    assert (site / "mintlify-output" / "cafe.mdx").is_file()
