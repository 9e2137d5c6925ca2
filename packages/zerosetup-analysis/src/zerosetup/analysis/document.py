from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from zerosetup.common.adapters import JsonAdapter
from zerosetup.spec import TargetFormatterSettings

from .ignores import merge_includes

TEST_GLOBALS = [
    "jest",
    "describe",
    "it",
    "test",
    "expect",
    "beforeEach",
    "afterEach",
    "beforeAll",
    "afterAll",
    "vi",
]

RELAXED_RULES: Dict[str, Dict[str, str]] = {
    "suspicious": {"noExplicitAny": "off", "noConsole": "off"},
    "style": {"noNonNullAssertion": "off"},
    "a11y": {
        "noRedundantRoles": "off",
        "useSemanticElements": "off",
        "useAriaPropsSupportedByRole": "off",
    },
    "correctness": {"useExhaustiveDependencies": "warn"},
}


class BiomeDocument:
    """
    A biome.json held as a generic ordered tree. Only the paths this tool
    manages are addressed; everything else passes through untouched.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = data if data is not None else {}

    @classmethod
    def load(cls, path: Path) -> Optional["BiomeDocument"]:
        data = JsonAdapter().load(path)
        return cls(data) if data is not None else None

    def save(self, path: Path) -> None:
        JsonAdapter().save(path, self.data)

    def dumps(self) -> str:
        return JsonAdapter().dump(self.data)

    def section(self, *keys: str) -> Dict[str, Any]:
        node = self.data
        for key in keys:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        return node

    def get(self, *keys: str) -> Any:
        node: Any = self.data
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node

    # --- Managed paths ---

    @property
    def includes(self) -> List[str]:
        value = self.get("files", "includes")
        return [p for p in value if isinstance(p, str)] if isinstance(value, list) else []

    def merge_excludes(self, excludes: Iterable[str]) -> None:
        excludes = list(excludes)
        if not excludes:
            return
        self.section("files")["includes"] = merge_includes(self.includes, excludes)

    def apply_formatter_settings(self, settings: TargetFormatterSettings) -> None:
        """Writes every translated setting, replacing existing values."""
        self.section("formatter").update(settings.formatter_section())
        self.section("javascript", "formatter").update(
            settings.javascript_formatter_section()
        )

    def apply_relaxed_rules(self) -> None:
        rules = self.section("linter", "rules")
        for category, entries in RELAXED_RULES.items():
            group = rules.get(category)
            if not isinstance(group, dict):
                group = {}
                rules[category] = group
            group.update(entries)

    @property
    def globals(self) -> List[str]:
        value = self.get("javascript", "globals")
        return [g for g in value if isinstance(g, str)] if isinstance(value, list) else []

    def merge_globals(self, names: Iterable[str] = TEST_GLOBALS) -> None:
        merged = list(dict.fromkeys([*self.globals, *names]))
        self.section("javascript")["globals"] = merged

    def disable_organize_imports(self) -> None:
        self.section("assist", "actions", "source")["organizeImports"] = "off"
