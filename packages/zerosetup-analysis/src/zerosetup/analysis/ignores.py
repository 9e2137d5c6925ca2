from pathlib import Path
from typing import Iterable, List

from .legacy import LegacyConfigReader

GENERATED_FOLDER_CANDIDATES = [
    "src/api/gen",
    "src/generated",
    "generated",
    "gen",
    "src/types/generated",
]

BASELINE_EXCLUDES = [
    "!**/gen/**",
    "!**/generated/**",
    "!**/*.generated.*",
    "!**/*.d.ts",
    "!**/dist/**",
    "!**/build/**",
    "!**/node_modules/**",
]

WILDCARD_INCLUDES = ("**", "**/*")


def _dedupe(patterns: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(patterns))


def normalize_exclude(pattern: str) -> str:
    """Turns an ignore pattern into a Biome negated include."""
    if pattern.startswith("!"):
        return pattern
    return "!" + pattern.rstrip("/")


def merge_includes(existing: Iterable[str], excludes: Iterable[str]) -> List[str]:
    """
    Appends negated excludes to a `files.includes` list without duplicates.
    A wildcard include is put first when none exists, so the negations have
    something to exclude from.
    """
    current = list(existing)
    excludes = list(excludes)
    if not excludes:
        return _dedupe(current)
    if not any(p in WILDCARD_INCLUDES for p in current):
        current.insert(0, "**")
    return _dedupe([*current, *excludes])


class IgnorePatternAggregator:
    def __init__(self, root: Path):
        self.root = root
        self.reader = LegacyConfigReader(root)

    def generated_folder_excludes(self) -> List[str]:
        return [
            f"!**/{folder}/**"
            for folder in GENERATED_FOLDER_CANDIDATES
            if (self.root / folder).exists()
        ]

    def legacy_linter_excludes(self) -> List[str]:
        # ESLint "!pattern" lines re-include files. Biome has no way to
        # re-include inside an exclude, so those lines are dropped.
        return [
            normalize_exclude(p)
            for p in self.reader.read_linter_ignore_patterns()
            if not p.startswith("!")
        ]

    def aggregate(self) -> List[str]:
        return _dedupe(
            [
                *self.generated_folder_excludes(),
                *self.legacy_linter_excludes(),
                *BASELINE_EXCLUDES,
            ]
        )
