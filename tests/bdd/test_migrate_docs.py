"""Behaviour tests for end-to-end docs migration.

These pytest-bdd scenarios build a temporary Docusaurus ``docs`` tree, run
:class:`mint_migrate.migrator.DocsMigrator` against it, and inspect the
written ``.mdx`` pages and ``docs.json`` manifest. They cover sibling ordering,
index page titles, admonition conversion, pruning of document-less folders,
and platform placement of SDK folders.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_migrate_docs.py -v

Prerequisites:
    - pytest-bdd installed via the ``test`` extra.
    - Access to the feature file at ``features/migrate_docs.feature`` within
      this repository.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from pytest_bdd import given, scenarios, then, when

from mint_migrate.config import MigrationConfig
from mint_migrate.migrator import DocsMigrator, MigrationResult

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "migrate_docs.feature"
)
scenarios(FEATURE_FILE)

RANKED_PAGES = {
    "index.md": "# Getting Started\n\nStart here.\n",
    "advanced.md": "---\nsidebar_position: 2\n---\n# Advanced\n",
    "basics.md": "---\nsidebar_position: 1\n---\n# Basics\n",
}


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _docs_root(tmp_path: Path, scenario_state: dict[str, object]) -> Path:
    docs_root = tmp_path / "site" / "docs"
    docs_root.mkdir(parents=True, exist_ok=True)
    scenario_state["docs_root"] = docs_root
    scenario_state["output_dir"] = tmp_path / "out"
    return docs_root


def _write_folder(folder: Path, label: str) -> None:
    folder.mkdir(parents=True)
    (folder / "_category_.json").write_text(f'{{"label": "{label}"}}', encoding="utf-8")
    for name, text in RANKED_PAGES.items():
        (folder / name).write_text(text, encoding="utf-8")


def _find_group(entries: list[typ.Any], label: str) -> dict[str, typ.Any] | None:
    """Return the first manifest group called ``label``, searching depth-first."""
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        if entry.get("group") == label:
            return entry
        found = _find_group(entry.get("pages", []), label)
        if found is not None:
            return found
    return None


def _page_title(scenario_state: dict[str, object], slug: str) -> str:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    text = (output_dir / f"{slug}.mdx").read_text(encoding="utf-8")
    return text.splitlines()[1]


@given('a "Getting Started" docs folder with ranked pages')
def given_getting_started_folder(
    tmp_path: Path, scenario_state: dict[str, object]
) -> None:
    """Create a folder whose label matches its index page heading."""
    docs_root = _docs_root(tmp_path, scenario_state)
    _write_folder(docs_root / "getting-started", "Getting Started")
    scenario_state["folder"] = "getting-started"


@given('an "Onboarding" docs folder with ranked pages')
def given_onboarding_folder(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Create a folder whose label differs from its index page heading."""
    docs_root = _docs_root(tmp_path, scenario_state)
    _write_folder(docs_root / "onboarding", "Onboarding")
    scenario_state["folder"] = "onboarding"


@given("a page containing a tip admonition")
def given_tip_page(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a top-level page holding a bare tip block."""
    docs_root = _docs_root(tmp_path, scenario_state)
    tip = ":::tip\nUse caching\n:::\n"
    (docs_root / "caching.md").write_text(tip, encoding="utf-8")


@given("a docs folder containing only empty nested folders")
def given_hollow_folder(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Create a hollow folder next to one real page."""
    docs_root = _docs_root(tmp_path, scenario_state)
    (docs_root / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (docs_root / "reference" / "v1" / "drafts").mkdir(parents=True)
    (docs_root / "reference" / "v2").mkdir()


@given('a docs folder named "android-core"')
def given_android_folder(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Create an SDK folder for the mobile platform."""
    docs_root = _docs_root(tmp_path, scenario_state)
    folder = docs_root / "android-core"
    folder.mkdir()
    (folder / "setup.md").write_text("# Set up the SDK\n", encoding="utf-8")


@when("I migrate the docs")
def when_migrate(scenario_state: dict[str, object]) -> None:
    """Run the migrator and keep the result and decoded manifest."""
    docs_root: Path = scenario_state["docs_root"]  # type: ignore[assignment]
    config = MigrationConfig(
        output_dir=scenario_state["output_dir"],  # type: ignore[arg-type]
        docs_dir=docs_root,
        search_root=docs_root.parent,
    )
    result = DocsMigrator(config).run()
    scenario_state["result"] = result
    manifest = msgspec_json.decode(result.manifest_path.read_bytes())
    scenario_state["manifest"] = manifest


@then("the group lists the index, basics, and advanced pages in order")
def then_pages_in_order(scenario_state: dict[str, object]) -> None:
    """Verify that ranks order the group's pages."""
    manifest: dict[str, typ.Any] = scenario_state["manifest"]  # type: ignore[assignment]
    guides = manifest["navigation"]["tabs"][0]["groups"]
    group = _find_group(guides, "Getting Started")
    assert group is not None, "expected a Getting Started group in the Guides tab"
    assert group["pages"] == [
        "getting-started/index",
        "getting-started/basics",
        "getting-started/advanced",
    ], f"unexpected page order {group['pages']!r}"


@then('the index page is titled "Overview"')
def then_index_is_overview(scenario_state: dict[str, object]) -> None:
    """Verify the index title collapses to Overview."""
    folder = scenario_state["folder"]
    title = _page_title(scenario_state, f"{folder}/index")
    assert title == 'title: "Overview"', f"expected Overview title, got {title!r}"


@then("the index page is titled after its heading")
def then_index_keeps_heading(scenario_state: dict[str, object]) -> None:
    """Verify the index title comes from its first heading."""
    folder = scenario_state["folder"]
    title = _page_title(scenario_state, f"{folder}/index")
    assert title == 'title: "Getting Started"', (
        f"expected the heading to supply the title, got {title!r}"
    )


@then("the converted page wraps the tip text in a Tip callout")
def then_tip_callout(scenario_state: dict[str, object]) -> None:
    """Verify the admonition became a typed callout."""
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    page = (output_dir / "caching.mdx").read_text(encoding="utf-8")
    assert "<Tip>\n\nUse caching\n\n</Tip>" in page, (
        f"expected a Tip callout in the converted page, got {page!r}"
    )
    assert ":::" not in page, "admonition fences should not survive conversion"


@then("the manifest does not mention the empty folder")
def then_hollow_folder_absent(scenario_state: dict[str, object]) -> None:
    """Verify hollow folders leave no trace in navigation or output."""
    result: MigrationResult = scenario_state["result"]  # type: ignore[assignment]
    manifest_text = result.manifest_path.read_text(encoding="utf-8")
    assert "reference" not in manifest_text.lower(), (
        "hollow folder should not appear in docs.json"
    )
    assert not (result.output_dir / "reference").exists(), (
        "hollow folder should not be mirrored in the output"
    )
    assert [page.name for page in result.pages] == ["intro.mdx"]


@then("the folder is listed under the Mobile group of the SDKs tab")
def then_android_in_mobile(scenario_state: dict[str, object]) -> None:
    """Verify platform placement of the SDK folder."""
    manifest: dict[str, typ.Any] = scenario_state["manifest"]  # type: ignore[assignment]
    tabs = {tab["tab"]: tab["groups"] for tab in manifest["navigation"]["tabs"]}
    assert set(tabs) == {"SDKs"}, f"expected only an SDKs tab, got {sorted(tabs)!r}"
    mobile = _find_group(tabs["SDKs"], "Mobile")
    assert mobile is not None, "expected a Mobile platform group"
    assert mobile["pages"] == [
        {"group": "Android Core", "expanded": False, "pages": ["android-core/setup"]}
    ]
