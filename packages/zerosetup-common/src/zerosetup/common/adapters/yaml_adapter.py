import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)


class YamlAdapter:
    def load(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.is_file():
            return None

        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            log.debug(f"Ignoring malformed YAML in {path}: {e}")
            return None

        if not isinstance(content, dict):
            return None

        return {str(k): v for k, v in content.items() if v is not None}
