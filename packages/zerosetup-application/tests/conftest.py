import json
from pathlib import Path

import pytest

from zerosetup.spec import ProcessResult
from zerosetup.test_utils import FakeProcessRunner

BIOME_INIT_CONFIG = {
    "$schema": "https://biomejs.dev/schemas/1.9.4/schema.json",
    "vcs": {"enabled": False, "clientKind": "git", "useIgnoreFile": False},
    "files": {"ignoreUnknown": False},
    "formatter": {"enabled": True, "indentStyle": "tab"},
    "linter": {"enabled": True, "rules": {"recommended": True}},
}


def _write_biome_config(cwd: Path) -> ProcessResult:
    (cwd / "biome.json").write_text(json.dumps(BIOME_INIT_CONFIG, indent=2))
    return ProcessResult(stdout="Welcome to Biome! Created biome.json")


@pytest.fixture
def biome_runner() -> FakeProcessRunner:
    """A process runner where a working Biome 1.9.4 is available through npx."""
    return (
        FakeProcessRunner()
        .respond("npx @biomejs/biome --version", stdout="Version: 1.9.4")
        .on("npx @biomejs/biome init", _write_biome_config)
    )


