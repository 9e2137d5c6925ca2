from pathlib import Path

from zerosetup.analysis import BIOME_CONFIG, MANIFEST
from zerosetup.common.adapters import JsonAdapter
from zerosetup.config import TARGET_PACKAGE
from zerosetup.spec import ProcessError, ValidationReport

from .toolchain import BiomeToolchain


class MigrationValidator:
    """Post-migration sanity checks. Findings are reported, never raised."""

    def __init__(self, root: Path, toolchain: BiomeToolchain):
        self.root = root
        self.toolchain = toolchain

    def validate(self) -> ValidationReport:
        report = ValidationReport()

        if not (self.root / BIOME_CONFIG).exists():
            report.issues.append(f"{BIOME_CONFIG} not found")

        manifest = JsonAdapter().load(self.root / MANIFEST)
        if manifest is not None:
            declared = any(
                isinstance(manifest.get(section), dict)
                and TARGET_PACKAGE in manifest[section]
                for section in ("devDependencies", "dependencies")
            )
            if not declared:
                report.issues.append(f"{TARGET_PACKAGE} not found in dependencies")

            scripts = manifest.get("scripts")
            lint = scripts.get("lint") if isinstance(scripts, dict) else None
            if not isinstance(lint, str) or "biome" not in lint:
                report.issues.append(f'{MANIFEST} "lint" script does not use Biome')

        try:
            self.toolchain.check()
        except ProcessError:
            # Lint findings are expected right after a migration; only
            # whether Biome runs at all matters here.
            pass

        return report
