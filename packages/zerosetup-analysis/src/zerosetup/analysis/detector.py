from pathlib import Path
from typing import Any, Dict, List, Optional

from zerosetup.common.adapters import JsonAdapter
from zerosetup.spec import PackageManager, ProjectInfo

from .known_files import (
    BIOME_CONFIG,
    ESLINT_CONFIGS,
    LOCKFILES,
    MANIFEST,
    PRETTIER_CONFIGS,
    USER_AGENT_SIGNALS,
)


def detect_package_manager(
    root: Path, user_agent: Optional[str] = None
) -> PackageManager:
    # The invoking command outranks lockfile evidence.
    if user_agent:
        for signal, pm in USER_AGENT_SIGNALS:
            if signal in user_agent:
                return pm

    for lockfile, pm in LOCKFILES:
        if (root / lockfile).exists():
            return pm

    return PackageManager.NPM


def _first_existing(root: Path, candidates: List[str]) -> Optional[str]:
    for name in candidates:
        if (root / name).exists():
            return name
    return None


def _is_set(manifest: Optional[Dict[str, Any]], key: str) -> bool:
    if manifest is None or key not in manifest:
        return False
    return manifest[key] not in (None, False, "", 0)


class ProjectDetector:
    def __init__(self, user_agent: Optional[str] = None):
        self.user_agent = user_agent
        self.json = JsonAdapter()

    def detect(self, root: Path) -> ProjectInfo:
        manifest = self.json.load(root / MANIFEST)

        eslint_config = _first_existing(root, ESLINT_CONFIGS)
        prettier_config = _first_existing(root, PRETTIER_CONFIGS)

        return ProjectInfo(
            has_legacy_linter=eslint_config is not None
            or _is_set(manifest, "eslintConfig"),
            has_legacy_formatter=prettier_config is not None
            or _is_set(manifest, "prettier"),
            has_target_tool=(root / BIOME_CONFIG).exists(),
            has_manifest=manifest is not None,
            package_manager=detect_package_manager(root, self.user_agent),
            legacy_linter_config_path=eslint_config,
            legacy_formatter_config_path=prettier_config,
        )
