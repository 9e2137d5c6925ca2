import os
import sys
from pathlib import Path

from zerosetup.app import ZeroSetupApp
from zerosetup.common.process import SubprocessRunner
from zerosetup.config import RuntimeConfig, load_runtime_config
from zerosetup.spec import PromptHandler

from .handlers import DefaultsPromptHandler, TyperPromptHandler


def get_project_root() -> Path:
    return Path.cwd()


def get_runtime_config() -> RuntimeConfig:
    return load_runtime_config(os.environ, cwd=get_project_root())


def make_prompt_handler(assume_yes: bool = False) -> PromptHandler:
    if sys.stdin.isatty() and not assume_yes:
        return TyperPromptHandler()
    return DefaultsPromptHandler()


def make_app(handler: PromptHandler) -> ZeroSetupApp:
    # Composition Root: Assemble the dependencies
    return ZeroSetupApp(
        root_path=get_project_root(),
        prompter=handler,
        process_runner=SubprocessRunner(extra_env={"FORCE_COLOR": "0"}),
        config=get_runtime_config(),
    )
