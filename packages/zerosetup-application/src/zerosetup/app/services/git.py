from pathlib import Path

from zerosetup.spec import ProcessError, ProcessRunnerProtocol

SAFETY_COMMIT_MESSAGE = "chore: backup before Biome migration"
INITIAL_COMMIT_MESSAGE = "Initial commit from zero-setup-biome"


class GitService:
    def __init__(self, runner: ProcessRunnerProtocol, root: Path):
        self.runner = runner
        self.root = root

    def is_repo(self) -> bool:
        try:
            self.runner.run("git", ["rev-parse", "--is-inside-work-tree"], cwd=self.root)
        except ProcessError:
            return False
        return True

    def has_uncommitted_changes(self) -> bool:
        try:
            result = self.runner.run("git", ["status", "--porcelain"], cwd=self.root)
        except ProcessError:
            return False
        return bool(result.stdout.strip())

    def commit_all(self, message: str = SAFETY_COMMIT_MESSAGE) -> None:
        self.runner.run("git", ["add", "."], cwd=self.root)
        self.runner.run("git", ["commit", "-m", message, "--no-verify"], cwd=self.root)

    def init_repository(self, message: str = INITIAL_COMMIT_MESSAGE) -> None:
        self.runner.run("git", ["--version"])
        self.runner.run("git", ["init"], cwd=self.root)
        self.runner.run("git", ["add", "-A"], cwd=self.root)
        self.runner.run("git", ["commit", "-m", message, "--no-verify"], cwd=self.root)
