from pathlib import Path
from typing import Any, Collection, Dict, List, Mapping, Optional

from zerosetup.analysis import (
    ESLINT_CONFIGS,
    ESLINT_IGNORE,
    FORMATTER,
    LINTER,
    MANIFEST,
    PRETTIER_CONFIGS,
    PRETTIER_IGNORE,
    DependencyClassifier,
)
from zerosetup.common.adapters import JsonAdapter
from zerosetup.common.transaction import TransactionManager

BIOME_SCRIPTS: Dict[str, str] = {
    "lint": "biome check .",
    "lint:fix": "biome check --write .",
    "format": "biome format --write .",
}

LEGACY_FILES = {
    LINTER: [*ESLINT_CONFIGS, ESLINT_IGNORE],
    FORMATTER: [*PRETTIER_CONFIGS, PRETTIER_IGNORE],
}

ALL_FAMILIES = (LINTER, FORMATTER)


class LegacyCleanup:
    """
    Finds and removes ESLint/Prettier leftovers. Only names from the fixed
    config-file lists and packages matched by the classifier are touched.
    """

    def __init__(self, root: Path, classifier: Optional[DependencyClassifier] = None):
        self.root = root
        self.classifier = classifier or DependencyClassifier()
        self.json = JsonAdapter()

    def load_manifest(self) -> Optional[Dict[str, Any]]:
        return self.json.load(self.root / MANIFEST)

    def legacy_dependencies(
        self,
        manifest: Mapping[str, Any],
        families: Collection[str] = ALL_FAMILIES,
    ) -> List[str]:
        return [
            name
            for name in self.classifier.classify(manifest)
            if self.classifier.family(name) in families
        ]

    def legacy_files(self, families: Collection[str] = ALL_FAMILIES) -> List[str]:
        found: List[str] = []
        for family in ALL_FAMILIES:
            if family not in families:
                continue
            found.extend(
                name for name in LEGACY_FILES[family] if (self.root / name).exists()
            )
        return found

    def plan_file_removal(self, tm: TransactionManager, files: List[str]) -> None:
        for name in files:
            tm.add_delete_file(name)

    def remove_files(self, files: List[str]) -> List[str]:
        tm = TransactionManager(self.root)
        self.plan_file_removal(tm, files)
        removed = tm.touched_paths()
        tm.commit()
        return removed

    def plan_scripts(self, tm: TransactionManager) -> bool:
        """Plans the Biome scripts merge into package.json. False if there is no manifest."""
        manifest = self.load_manifest()
        if manifest is None:
            return False
        scripts = manifest.get("scripts")
        if not isinstance(scripts, dict):
            scripts = {}
        manifest["scripts"] = {**scripts, **BIOME_SCRIPTS}
        tm.add_write(MANIFEST, self.json.dump(manifest))
        return True

    def update_scripts(self) -> bool:
        tm = TransactionManager(self.root)
        if not self.plan_scripts(tm):
            return False
        tm.commit()
        return True
