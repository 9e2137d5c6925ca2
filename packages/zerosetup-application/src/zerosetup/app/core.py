from pathlib import Path
from typing import Optional

from zerosetup.common.process import SubprocessRunner
from zerosetup.config import RuntimeConfig
from zerosetup.spec import (
    CreateOptions,
    MigrateOptions,
    ProcessRunnerProtocol,
    PromptHandler,
    StepOutcome,
)

from .runners import CreateRunner, MigrateRunner, MigrationReport


class ZeroSetupApp:
    def __init__(
        self,
        root_path: Path,
        prompter: PromptHandler,
        process_runner: Optional[ProcessRunnerProtocol] = None,
        config: Optional[RuntimeConfig] = None,
        templates_root: Optional[Path] = None,
    ):
        self.root_path = root_path
        self.prompter = prompter
        self.process_runner = process_runner or SubprocessRunner()
        self.config = config or RuntimeConfig(audit_dir=root_path / ".zero-setup-biome")
        self.templates_root = templates_root

    def run_migrate(self, options: Optional[MigrateOptions] = None) -> MigrationReport:
        runner = MigrateRunner(
            self.root_path,
            self.prompter,
            self.process_runner,
            user_agent=self.config.user_agent,
        )
        return runner.run(options)

    def run_create(
        self, project_name: Optional[str] = None, options: Optional[CreateOptions] = None
    ) -> StepOutcome:
        runner = CreateRunner(
            self.root_path,
            self.prompter,
            self.process_runner,
            self.config,
            templates_root=self.templates_root,
        )
        return runner.run(project_name, options)
