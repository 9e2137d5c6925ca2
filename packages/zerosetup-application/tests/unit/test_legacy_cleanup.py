import json

from zerosetup.analysis import FORMATTER, LINTER
from zerosetup.app.services import BIOME_SCRIPTS, LegacyCleanup
from zerosetup.common.transaction import TransactionManager


def test_legacy_files_by_family(workspace_factory):
    root = (
        workspace_factory.with_file(".eslintrc.cjs", "module.exports = {}")
        .with_file(".eslintignore", "dist\n")
        .with_file(".prettierrc", "{}")
        .with_file(".prettierignore", "dist\n")
        .with_file("eslint-rules.md", "unrelated")
        .build()
    )
    cleanup = LegacyCleanup(root)

    assert cleanup.legacy_files() == [
        ".eslintrc.cjs",
        ".eslintignore",
        ".prettierrc",
        ".prettierignore",
    ]
    assert cleanup.legacy_files([FORMATTER]) == [".prettierrc", ".prettierignore"]
    assert cleanup.legacy_files([]) == []


def test_legacy_dependencies_by_family(tmp_path):
    manifest = {
        "dependencies": {"react": "^18"},
        "devDependencies": {
            "eslint": "^8",
            "eslint-config-prettier": "^9",
            "prettier": "^3",
            "@biomejs/biome": "^1.9.4",
        },
    }
    cleanup = LegacyCleanup(tmp_path)

    assert cleanup.legacy_dependencies(manifest) == [
        "eslint",
        "eslint-config-prettier",
        "prettier",
    ]
    assert cleanup.legacy_dependencies(manifest, [LINTER]) == [
        "eslint",
        "eslint-config-prettier",
    ]


def test_remove_files_only_touches_listed_files(workspace_factory):
    root = (
        workspace_factory.with_file(".prettierrc", "{}")
        .with_file("src/index.ts", "")
        .build()
    )

    removed = LegacyCleanup(root).remove_files([".prettierrc"])

    assert removed == [".prettierrc"]
    assert not (root / ".prettierrc").exists()
    assert (root / "src/index.ts").exists()


def test_update_scripts_merges_into_existing_scripts(workspace_factory):
    root = workspace_factory.with_manifest(
        scripts={"lint": "eslint .", "build": "vite build"}
    ).build()

    assert LegacyCleanup(root).update_scripts() is True

    scripts = json.loads((root / "package.json").read_text())["scripts"]
    assert scripts == {"lint": "biome check .", "build": "vite build", **BIOME_SCRIPTS}


def test_update_scripts_without_manifest(tmp_path):
    assert LegacyCleanup(tmp_path).update_scripts() is False
    assert not (tmp_path / "package.json").exists()


def test_planned_cleanup_is_only_previewed(workspace_factory):
    root = (
        workspace_factory.with_manifest(scripts={"lint": "eslint ."})
        .with_file(".prettierrc", "{}")
        .build()
    )
    cleanup = LegacyCleanup(root)
    tm = TransactionManager(root)

    cleanup.plan_file_removal(tm, cleanup.legacy_files())
    assert cleanup.plan_scripts(tm) is True

    assert tm.pending_count == 2
    assert tm.preview() == ["[DELETE] .prettierrc", "[WRITE] package.json"]
    assert (root / ".prettierrc").exists()
    scripts = json.loads((root / "package.json").read_text())["scripts"]
    assert scripts == {"lint": "eslint ."}
