from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

AUDIT_DIR_NAME = ".zero-setup-biome"


def _flag(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Process-level settings resolved once at the composition root and handed to
    components explicitly.
    """

    user_agent: Optional[str] = None
    debug: bool = False
    audit_enabled: bool = True
    audit_dir: Path = Path(AUDIT_DIR_NAME)


def load_runtime_config(
    environ: Mapping[str, str], cwd: Optional[Path] = None
) -> RuntimeConfig:
    base = cwd or Path.cwd()

    # Tests run with NODE_ENV=test; they opt back in explicitly.
    audit_enabled = environ.get("NODE_ENV") != "test" or _flag(
        environ.get("AUDIT_LOG_ENABLED")
    )

    return RuntimeConfig(
        user_agent=environ.get("npm_config_user_agent") or None,
        debug=_flag(environ.get("DEBUG")),
        audit_enabled=audit_enabled,
        audit_dir=base / AUDIT_DIR_NAME,
    )
