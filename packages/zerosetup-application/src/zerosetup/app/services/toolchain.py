import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from packaging.version import InvalidVersion, Version

from zerosetup.config import MINIMUM_BIOME_VERSION, TARGET_PACKAGE
from zerosetup.spec import ProcessError, ProcessResult, ProcessRunnerProtocol

VERSION_PATTERN = re.compile(r"(\d+\.\d+\.\d+)")


@dataclass(frozen=True)
class VersionCheck:
    valid: bool
    version: Optional[str]
    minimum: str


class BiomeToolchain:
    """Invokes the Biome binary through npx inside the project directory."""

    def __init__(self, runner: ProcessRunnerProtocol, root: Path):
        self.runner = runner
        self.root = root

    def _npx(self, *args: str) -> ProcessResult:
        return self.runner.run("npx", [TARGET_PACKAGE, *args], cwd=self.root)

    @staticmethod
    def _output(result: ProcessResult, fallback: str) -> str:
        return result.stdout.strip() or result.stderr.strip() or fallback

    def version(self) -> Optional[str]:
        try:
            result = self._npx("--version")
        except ProcessError:
            return None
        # "Version: 1.9.0" or just "1.9.0"
        match = VERSION_PATTERN.search(result.stdout)
        return match.group(1) if match else None

    def check_version(self, minimum: str = MINIMUM_BIOME_VERSION) -> VersionCheck:
        version = self.version()
        if version is None:
            return VersionCheck(valid=False, version=None, minimum=minimum)
        try:
            valid = Version(version) >= Version(minimum)
        except InvalidVersion:
            valid = False
        return VersionCheck(valid=valid, version=version, minimum=minimum)

    def init(self) -> ProcessResult:
        return self._npx("init")

    def migrate_eslint(self) -> str:
        result = self._npx("migrate", "eslint", "--include-inspired", "--write")
        return self._output(result, "ESLint configuration migrated")

    def migrate_prettier(self) -> str:
        result = self._npx("migrate", "prettier", "--write")
        return self._output(result, "Prettier configuration migrated")

    def check(self) -> ProcessResult:
        return self._npx("check", ".", "--max-diagnostics=0")

    def apply_fixes(self) -> ProcessResult:
        return self._npx("check", "--write", ".")
