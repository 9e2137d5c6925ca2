import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from zerosetup.config import RuntimeConfig

log = logging.getLogger(__name__)

AUDIT_FILE = "audit.log"


@dataclass
class AuditEvent:
    timestamp: str
    event: str
    projectName: str
    success: bool
    metadata: Dict[str, Any] = field(default_factory=dict)


def create_audit_event(
    event: str,
    project_name: str,
    success: bool,
    metadata: Optional[Dict[str, Any]] = None,
) -> AuditEvent:
    return AuditEvent(
        timestamp=datetime.now(timezone.utc).isoformat(),
        event=event,
        projectName=project_name,
        success=success,
        metadata=metadata or {},
    )


class AuditLogger:
    """Appends one JSON line per event. Never fails the calling operation."""

    def __init__(self, config: RuntimeConfig):
        self.config = config

    def log(self, event: AuditEvent) -> None:
        if not self.config.audit_enabled:
            return
        try:
            self.config.audit_dir.mkdir(parents=True, exist_ok=True)
            with (self.config.audit_dir / AUDIT_FILE).open("a", encoding="utf-8") as f:
                f.write(json.dumps(asdict(event), default=str) + "\n")
        except OSError as e:
            log.debug(f"Failed to write audit log: {e}")
