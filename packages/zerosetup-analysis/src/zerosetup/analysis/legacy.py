import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from zerosetup.common.adapters import JsonAdapter, YamlAdapter
from zerosetup.spec import LegacyFormatterConfig

from .known_files import ESLINT_IGNORE, MANIFEST

log = logging.getLogger(__name__)

# Readable Prettier configs, in lookup order. JS configs cannot be evaluated.
PRETTIER_JSON_CONFIGS = [".prettierrc.json"]
PRETTIER_YAML_CONFIGS = [".prettierrc.yaml", ".prettierrc.yml"]
PRETTIER_READABLE = [".prettierrc", *PRETTIER_JSON_CONFIGS, *PRETTIER_YAML_CONFIGS]

ESLINT_JSON_CONFIGS = [".eslintrc", ".eslintrc.json"]


class LegacyConfigReader:
    def __init__(self, root: Path):
        self.root = root
        self.json = JsonAdapter()
        self.yaml = YamlAdapter()

    def _manifest(self) -> Dict[str, Any]:
        return self.json.load(self.root / MANIFEST) or {}

    # --- Prettier ---

    def _load_prettier_file(self, name: str) -> Optional[Dict[str, Any]]:
        path = self.root / name
        if name in PRETTIER_YAML_CONFIGS:
            return self.yaml.load(path)
        data = self.json.load(path)
        if data is None and name == ".prettierrc":
            # .prettierrc may be written in YAML as well.
            data = self.yaml.load(path)
        return data

    def read_formatter_config(self) -> Optional[LegacyFormatterConfig]:
        for name in PRETTIER_READABLE:
            if not (self.root / name).exists():
                continue
            data = self._load_prettier_file(name)
            if data is not None:
                return LegacyFormatterConfig.from_mapping(data)
            log.debug(f"Could not parse Prettier config {name}, trying next source")

        embedded = self._manifest().get("prettier")
        if isinstance(embedded, dict):
            return LegacyFormatterConfig.from_mapping(embedded)

        return None

    # --- ESLint ignores ---

    def _ignore_file_patterns(self) -> List[str]:
        path = self.root / ESLINT_IGNORE
        if not path.is_file():
            return []
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.debug(f"Could not read {ESLINT_IGNORE}: {e}")
            return []
        lines = (line.strip() for line in content.splitlines())
        return [line for line in lines if line and not line.startswith("#")]

    @staticmethod
    def _pattern_list(config: Optional[Dict[str, Any]]) -> List[str]:
        if not config:
            return []
        patterns = config.get("ignorePatterns")
        if not isinstance(patterns, list):
            return []
        return [p for p in patterns if isinstance(p, str) and p.strip()]

    def read_linter_ignore_patterns(self) -> List[str]:
        """
        Raw ESLint ignore patterns from the first non-empty source:
        .eslintignore, then a JSON .eslintrc, then package.json#eslintConfig.
        Sources are never merged.
        """
        patterns = self._ignore_file_patterns()
        if patterns:
            return patterns

        for name in ESLINT_JSON_CONFIGS:
            patterns = self._pattern_list(self.json.load(self.root / name))
            if patterns:
                return patterns

        embedded = self._manifest().get("eslintConfig")
        if isinstance(embedded, dict):
            return self._pattern_list(embedded)
        return []
