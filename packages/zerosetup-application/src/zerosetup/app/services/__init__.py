from .audit import AuditEvent, AuditLogger, create_audit_event
from .cleanup import BIOME_SCRIPTS, LegacyCleanup
from .git import GitService
from .package_manager import PackageManagerService, run_script_display
from .scaffold import (
    TemplateCopier,
    ensure_valid_project_name,
    to_valid_package_name,
    validate_project_name,
    validate_template,
)
from .toolchain import BiomeToolchain, VersionCheck
from .validation import MigrationValidator

__all__ = [
    "AuditEvent",
    "AuditLogger",
    "create_audit_event",
    "BIOME_SCRIPTS",
    "LegacyCleanup",
    "GitService",
    "PackageManagerService",
    "run_script_display",
    "TemplateCopier",
    "ensure_valid_project_name",
    "to_valid_package_name",
    "validate_project_name",
    "validate_template",
    "BiomeToolchain",
    "VersionCheck",
    "MigrationValidator",
]
