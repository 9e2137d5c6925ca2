import os
import re
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Dict, Optional

from zerosetup.common.transaction import TransactionManager
from zerosetup.spec import ProjectContext, SecurityViolation, TemplateError

INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
RESERVED_NAMES = ("node_modules", "favicon.ico")
MAX_NAME_LENGTH = 214

MAX_TEMPLATE_SIZE_MB = 100
MAX_FILE_COUNT = 10000
SKIPPED_DIRS = ("node_modules",)

# Files that carry {{placeholders}}.
DYNAMIC_FILES = ["package.json", "README.md", "index.html"]

# Stored under another name in the template so tooling run on this
# repository does not pick them up.
RENAMED_FILES = {"_gitignore": ".gitignore", "_biome.json": "biome.json"}


def validate_project_name(name: Optional[str]) -> Optional[str]:
    """Returns an error message for an unusable project name, None if it is fine."""
    if not name or not name.strip():
        return "Project name cannot be empty"

    trimmed = name.strip()

    if (
        PurePosixPath(trimmed).is_absolute()
        or PureWindowsPath(trimmed).is_absolute()
        or ".." in trimmed
    ):
        return "Path traversal not allowed"

    if trimmed.startswith((".", "_")):
        return "Project name cannot start with . or _"

    if INVALID_CHARS.search(trimmed):
        return "Project name contains invalid characters"

    if trimmed.lower() in RESERVED_NAMES:
        return f'"{trimmed}" is a reserved name'

    if len(trimmed) > MAX_NAME_LENGTH:
        return f"Project name must be less than {MAX_NAME_LENGTH} characters"

    return None


def ensure_valid_project_name(name: Optional[str]) -> str:
    error = validate_project_name(name)
    if error:
        raise SecurityViolation(error)
    return name.strip()  # type: ignore[union-attr]


def to_valid_package_name(name: str) -> str:
    result = name.strip().lower()
    result = re.sub(r"\s+", "-", result)
    result = re.sub(r"[^a-z0-9\-~]", "-", result)
    result = result.strip("-")
    return re.sub(r"-{2,}", "-", result)


@dataclass(frozen=True)
class TemplateSizeInfo:
    file_count: int
    total_size_mb: float


def validate_template(template_dir: Path) -> TemplateSizeInfo:
    """
    Rejects missing templates and templates over the file-count or size
    ceiling. node_modules folders are not counted.
    """
    if not template_dir.is_dir():
        raise TemplateError(f"Template not found at {template_dir}")

    total_size = 0
    file_count = 0
    for dirpath, dirnames, filenames in os.walk(template_dir):
        dirnames[:] = [d for d in dirnames if d not in SKIPPED_DIRS]
        for filename in filenames:
            path = Path(dirpath) / filename
            if not path.is_file():
                continue
            file_count += 1
            if file_count > MAX_FILE_COUNT:
                raise TemplateError(
                    f"Template contains too many files (>{MAX_FILE_COUNT}). "
                    "This may indicate a misconfigured template."
                )
            total_size += path.stat().st_size

    total_size_mb = total_size / (1024 * 1024)
    if total_size_mb > MAX_TEMPLATE_SIZE_MB:
        raise TemplateError(
            f"Template size ({total_size_mb:.2f}MB) exceeds maximum allowed size "
            f"of {MAX_TEMPLATE_SIZE_MB}MB"
        )

    return TemplateSizeInfo(file_count=file_count, total_size_mb=total_size_mb)


def interpolate(content: str, variables: Dict[str, str]) -> str:
    for key, value in variables.items():
        content = content.replace("{{" + key + "}}", value)
    return content


class TemplateCopier:
    def __init__(self, templates_root: Path):
        self.templates_root = templates_root

    def template_dir(self, template: str) -> Path:
        return self.templates_root / template

    def copy(self, context: ProjectContext) -> TemplateSizeInfo:
        ensure_valid_project_name(context.project_name)
        source = self.template_dir(context.template)
        info = validate_template(source)

        shutil.copytree(
            source,
            context.target_dir,
            ignore=shutil.ignore_patterns(*SKIPPED_DIRS),
            dirs_exist_ok=True,
        )

        variables = {
            "projectName": context.project_name,
            "packageName": to_valid_package_name(context.project_name),
        }

        tm = TransactionManager(context.target_dir)
        for filename in DYNAMIC_FILES:
            path = context.target_dir / filename
            if path.is_file():
                tm.add_write(filename, interpolate(tm.fs.read_text(path), variables))
        for stored, final in RENAMED_FILES.items():
            if (context.target_dir / stored).exists():
                tm.add_move(stored, final)
        tm.commit()

        return info
