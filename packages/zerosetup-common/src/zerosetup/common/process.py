import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence

from zerosetup.spec import ProcessError, ProcessResult

log = logging.getLogger(__name__)


class SubprocessRunner:
    """Blocking child-process invocation. No retries, no timeouts."""

    def __init__(self, extra_env: Optional[Dict[str, str]] = None):
        self.extra_env = extra_env or {}

    def run(
        self, command: str, args: Sequence[str], cwd: Optional[Path] = None
    ) -> ProcessResult:
        argv = [command, *args]
        log.debug(f"Running {' '.join(argv)} (cwd={cwd})")

        env = None
        if self.extra_env:
            env = {**os.environ, **self.extra_env}

        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
                env=env,
            )
        except OSError as e:
            # Typically the executable is not on PATH.
            raise ProcessError(command, args, exit_code=None, stderr=str(e)) from e

        if completed.returncode != 0:
            raise ProcessError(
                command,
                args,
                exit_code=completed.returncode,
                stdout=completed.stdout or "",
                stderr=completed.stderr or "",
            )

        return ProcessResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )
