import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)


class JsonAdapter:
    """
    Reads and writes JSON documents as plain insertion-ordered dicts, so keys
    this tool does not know about survive a read-modify-write cycle.
    """

    def load(self, path: Path) -> Optional[Dict[str, Any]]:
        """Returns None when the file is missing, unreadable or not a JSON object."""
        if not path.is_file():
            return None

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            log.debug(f"Ignoring malformed JSON in {path}: {e}")
            return None

        return data if isinstance(data, dict) else None

    def dump(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    def save(self, path: Path, data: Dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dump(data), encoding="utf-8")
