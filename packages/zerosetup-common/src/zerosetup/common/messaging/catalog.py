import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

log = logging.getLogger(__name__)

ASSETS_ROOT = Path(__file__).parent.parent / "assets" / "messages"


class MessageCatalog:
    """
    Flat registry of message templates keyed by dotted id.

    Every *.json file below `<root>/<lang>/` contributes its keys. Later roots
    override earlier ones; a missing id resolves to the id itself.
    """

    def __init__(self, roots: Optional[List[Path]] = None, lang: str = "en"):
        self.roots = roots or [ASSETS_ROOT]
        self.lang = lang
        self._registry: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        registry: Dict[str, str] = {}
        for root in self.roots:
            lang_dir = root / self.lang
            if not lang_dir.is_dir():
                continue
            for json_file in sorted(lang_dir.rglob("*.json")):
                try:
                    data = json.loads(json_file.read_text(encoding="utf-8"))
                except (json.JSONDecodeError, OSError) as e:
                    log.warning(f"Could not load message file {json_file}: {e}")
                    continue
                if isinstance(data, dict):
                    registry.update({str(k): str(v) for k, v in data.items()})
        return registry

    def get(self, msg_id: str) -> str:
        if self._registry is None:
            self._registry = self._load()
        return self._registry.get(str(msg_id), str(msg_id))


default_catalog = MessageCatalog()
