import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._dirs_to_create: List[str] = []
        self._manifest: Dict[str, Any] = {}

    def with_manifest(self, **fields: Any) -> "WorkspaceFactory":
        self._manifest.setdefault("name", "test-project")
        self._manifest.setdefault("version", "1.0.0")
        self._manifest.update(fields)
        return self

    def with_dev_dependencies(self, deps: Dict[str, str]) -> "WorkspaceFactory":
        self.with_manifest()
        self._manifest.setdefault("devDependencies", {}).update(deps)
        return self

    def with_dependencies(self, deps: Dict[str, str]) -> "WorkspaceFactory":
        self.with_manifest()
        self._manifest.setdefault("dependencies", {}).update(deps)
        return self

    def with_json(self, path: str, data: Any) -> "WorkspaceFactory":
        self._files_to_create.append({"path": path, "content": data, "format": "json"})
        return self

    def with_file(self, path: str, content: str = "") -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_dir(self, path: str) -> "WorkspaceFactory":
        self._dirs_to_create.append(path)
        return self

    def build(self) -> Path:
        if self._manifest:
            self._files_to_create.append(
                {"path": "package.json", "content": self._manifest, "format": "json"}
            )

        for directory in self._dirs_to_create:
            (self.root_path / directory).mkdir(parents=True, exist_ok=True)

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            if file_spec["format"] == "json":
                content = json.dumps(file_spec["content"], indent=2)
            else:
                content = file_spec["content"]
            output_path.write_text(content, encoding="utf-8")

        return self.root_path


def snapshot_tree(root: Path) -> Dict[str, bytes]:
    """Relative path -> content for every file below root."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
