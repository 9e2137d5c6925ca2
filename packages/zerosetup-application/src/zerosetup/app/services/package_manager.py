from pathlib import Path
from typing import List, Sequence, Tuple

from zerosetup.spec import PackageManager, ProcessResult, ProcessRunnerProtocol

Command = Tuple[str, List[str]]


def install_command(pm: PackageManager) -> Command:
    if pm == PackageManager.YARN:
        return "yarn", []
    return pm.value, ["install"]


def add_dev_command(pm: PackageManager, packages: Sequence[str]) -> Command:
    verb = "install" if pm == PackageManager.NPM else "add"
    return pm.value, [verb, "-D", *packages]


def remove_command(pm: PackageManager, packages: Sequence[str]) -> Command:
    verb = "uninstall" if pm == PackageManager.NPM else "remove"
    return pm.value, [verb, *packages]


def run_script_display(pm: PackageManager, script: str) -> str:
    if pm == PackageManager.BUN:
        return f"bun run {script}"
    if pm in (PackageManager.PNPM, PackageManager.YARN):
        return f"{pm.value} {script}"
    return f"npm run {script}"


class PackageManagerService:
    def __init__(self, runner: ProcessRunnerProtocol, pm: PackageManager, cwd: Path):
        self.runner = runner
        self.pm = pm
        self.cwd = cwd

    def install(self) -> ProcessResult:
        command, args = install_command(self.pm)
        return self.runner.run(command, args, cwd=self.cwd)

    def add_dev(self, packages: Sequence[str]) -> ProcessResult:
        command, args = add_dev_command(self.pm, packages)
        return self.runner.run(command, args, cwd=self.cwd)

    def remove(self, packages: Sequence[str]) -> ProcessResult:
        command, args = remove_command(self.pm, packages)
        return self.runner.run(command, args, cwd=self.cwd)
