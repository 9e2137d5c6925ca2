from pathlib import Path
from typing import Optional

from zerosetup.app.core import ZeroSetupApp
from zerosetup.config import RuntimeConfig
from zerosetup.spec import PromptHandler

from .process import FakeProcessRunner
from .prompts import ScriptedPrompter


def create_test_app(
    root_path: Path,
    prompter: Optional[PromptHandler] = None,
    process_runner: Optional[FakeProcessRunner] = None,
    user_agent: Optional[str] = None,
    audit_enabled: bool = False,
) -> ZeroSetupApp:
    config = RuntimeConfig(
        user_agent=user_agent,
        audit_enabled=audit_enabled,
        audit_dir=root_path / ".zero-setup-biome",
    )
    return ZeroSetupApp(
        root_path=root_path,
        prompter=prompter or ScriptedPrompter(),
        process_runner=process_runner or FakeProcessRunner(),
        config=config,
    )
