from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from zerosetup.analysis import (
    BIOME_CONFIG,
    FORMATTER,
    LINTER,
    BiomeDocument,
    IgnorePatternAggregator,
    LegacyConfigReader,
    ProjectDetector,
    translate,
)
from zerosetup.common import bus
from zerosetup.common.transaction import TransactionManager
from zerosetup.config import TARGET_PACKAGE
from zerosetup.spec import (
    Abort,
    Answered,
    Cancelled,
    Continue,
    LegacyFormatterConfig,
    MigrateOptions,
    MigrationResult,
    ProcessError,
    ProcessRunnerProtocol,
    ProjectInfo,
    PromptHandler,
    StepOutcome,
    Stop,
    TrailingCommas,
)
from zerosetup.app.services import (
    BIOME_SCRIPTS,
    BiomeToolchain,
    GitService,
    LegacyCleanup,
    MigrationValidator,
    PackageManagerService,
    run_script_display,
)

NOTHING_TO_MIGRATE = "nothing_to_migrate"
DRY_RUN = "dry_run"
CANCELLED_BY_USER = "cancelled"


@dataclass
class MigrationState:
    options: MigrateOptions
    result: MigrationResult = field(default_factory=MigrationResult)
    info: Optional[ProjectInfo] = None
    legacy_formatter: Optional[LegacyFormatterConfig] = None
    trailing_comma_resolution: Optional[TrailingCommas] = None
    relaxed_rules: bool = False


@dataclass
class MigrationReport:
    outcome: StepOutcome
    result: MigrationResult
    info: Optional[ProjectInfo] = None

    @property
    def success(self) -> bool:
        return not isinstance(self.outcome, Abort)


Step = Callable[[MigrationState], StepOutcome]


class MigrateRunner:
    """
    Sequences a single ESLint/Prettier -> Biome migration.

    Each step returns Continue (optionally carrying a warning), Stop (clean
    halt) or Abort (fatal). The run is a fold over the steps that ends at the
    first non-Continue outcome.
    """

    def __init__(
        self,
        root_path: Path,
        prompter: PromptHandler,
        process_runner: ProcessRunnerProtocol,
        user_agent: Optional[str] = None,
    ):
        self.root_path = root_path
        self.prompter = prompter
        self.process_runner = process_runner
        self.detector = ProjectDetector(user_agent=user_agent)
        self.toolchain = BiomeToolchain(process_runner, root_path)
        self.git = GitService(process_runner, root_path)
        self.cleanup = LegacyCleanup(root_path)
        self.validator = MigrationValidator(root_path, self.toolchain)

    @property
    def steps(self) -> List[Step]:
        return [
            self._detect,
            self._dry_run_report,
            self._confirm,
            self._safety_commit,
            self._install_target_tool,
            self._validate_version,
            self._init_target_config,
            self._migrate_legacy_linter,
            self._migrate_legacy_formatter,
            self._read_legacy_formatter_settings,
            self._resolve_trailing_commas,
            self._ask_relaxed_rules,
            self._apply_translated_config,
            self._validate_result,
            self._cleanup,
            self._update_scripts,
            self._reformat,
            self._summary,
        ]

    def run(self, options: Optional[MigrateOptions] = None) -> MigrationReport:
        state = MigrationState(options=options or MigrateOptions())
        outcome: StepOutcome = Continue()

        for step in self.steps:
            outcome = step(state)
            if isinstance(outcome, Continue):
                if outcome.warning:
                    state.result.warnings.append(outcome.warning)
                continue
            if isinstance(outcome, Abort):
                bus.error("migrate.run.aborted", reason=outcome.reason)
            break

        return MigrationReport(outcome=outcome, result=state.result, info=state.info)

    def _package_manager(self, state: MigrationState) -> PackageManagerService:
        assert state.info is not None
        return PackageManagerService(
            self.process_runner, state.info.package_manager, self.root_path
        )

    def _gate(self, message_id: str, default: bool = True, **kwargs) -> Optional[bool]:
        """Asks a yes/no question. None means the user cancelled the prompt."""
        outcome = self.prompter.confirm(bus.resolve(message_id, **kwargs), default=default)
        if isinstance(outcome, Cancelled):
            return None
        return outcome.value

    # --- Steps ---

    def _detect(self, state: MigrationState) -> StepOutcome:
        bus.info("migrate.detect.start")
        info = self.detector.detect(self.root_path)
        state.info = info

        if not info.needs_migration:
            bus.warning("migrate.detect.nothing")
            return Stop(NOTHING_TO_MIGRATE)

        if info.has_legacy_linter:
            bus.info(
                "migrate.detect.eslint",
                source=info.legacy_linter_config_path or "package.json",
            )
        if info.has_legacy_formatter:
            bus.info(
                "migrate.detect.prettier",
                source=info.legacy_formatter_config_path or "package.json",
            )
        if info.has_target_tool:
            bus.info("migrate.detect.biome")
        bus.info("migrate.detect.package_manager", pm=info.package_manager.value)
        return Continue()

    def _dry_run_report(self, state: MigrationState) -> StepOutcome:
        if not state.options.dry_run:
            return Continue()
        info = state.info
        assert info is not None

        bus.warning("migrate.dry_run.header")
        if info.has_legacy_linter:
            bus.info("migrate.dry_run.eslint")
        if info.has_legacy_formatter:
            bus.info("migrate.dry_run.prettier")
        if not state.options.skip_install and not info.has_target_tool:
            bus.info("migrate.dry_run.install", package=TARGET_PACKAGE)
        # Planned only; the transaction is never committed.
        tm = TransactionManager(self.root_path)
        if not state.options.skip_cleanup:
            manifest = self.cleanup.load_manifest() or {}
            deps = self.cleanup.legacy_dependencies(manifest)
            files = self.cleanup.legacy_files()
            state.result.dependencies_removed = deps
            state.result.files_removed = files
            bus.info("migrate.dry_run.dependencies", count=len(deps), names=", ".join(deps))
            self.cleanup.plan_file_removal(tm, files)
        self.cleanup.plan_scripts(tm)

        bus.info("migrate.dry_run.changes", count=tm.pending_count)
        for change in tm.preview():
            bus.info("migrate.dry_run.change", change=change)
        bus.info("migrate.dry_run.footer")
        return Stop(DRY_RUN)

    def _confirm(self, state: MigrationState) -> StepOutcome:
        if not self._gate("migrate.confirm.start"):
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)
        return Continue()

    def _safety_commit(self, state: MigrationState) -> StepOutcome:
        if state.options.skip_git:
            return Continue()
        if not self.git.is_repo() or not self.git.has_uncommitted_changes():
            return Continue()

        answer = self._gate("migrate.confirm.safety_commit")
        if answer is None:
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)
        if not answer:
            return Continue()

        try:
            self.git.commit_all()
        except ProcessError as e:
            return Continue(warning=f"Safety commit failed: {e}")
        state.result.safety_commit_created = True
        bus.info("migrate.git.committed")
        return Continue()

    def _install_target_tool(self, state: MigrationState) -> StepOutcome:
        assert state.info is not None
        if state.options.skip_install or state.info.has_target_tool:
            return Continue()

        bus.info("migrate.install.start", package=TARGET_PACKAGE)
        try:
            self._package_manager(state).add_dev([TARGET_PACKAGE])
        except ProcessError as e:
            return Abort(f"Failed to install {TARGET_PACKAGE}: {e}")
        bus.success("migrate.install.success", package=TARGET_PACKAGE)
        return Continue()

    def _validate_version(self, state: MigrationState) -> StepOutcome:
        check = self.toolchain.check_version()
        if check.version is None:
            return Abort("Biome is not installed or version could not be determined")
        if not check.valid:
            return Abort(
                f"Biome version {check.version} is too old. "
                f"Minimum required: {check.minimum}"
            )
        bus.debug("migrate.version.detected", version=check.version)
        return Continue()

    def _init_target_config(self, state: MigrationState) -> StepOutcome:
        assert state.info is not None
        if state.info.has_target_tool:
            return Continue()
        try:
            self.toolchain.init()
        except ProcessError as e:
            return Abort(f"Failed to initialize Biome: {e}")
        bus.success("migrate.init.success")
        return Continue()

    def _migrate_legacy_linter(self, state: MigrationState) -> StepOutcome:
        assert state.info is not None
        if not state.info.has_legacy_linter:
            return Continue()
        try:
            message = self.toolchain.migrate_eslint()
        except ProcessError as e:
            bus.warning("migrate.eslint.failed", error=str(e))
            return Continue(warning=f"ESLint migration failed: {e}")
        state.result.legacy_linter_migrated = True
        bus.success("migrate.eslint.success")
        bus.debug("migrate.tool.output", output=message)
        return Continue()

    def _migrate_legacy_formatter(self, state: MigrationState) -> StepOutcome:
        assert state.info is not None
        if not state.info.has_legacy_formatter:
            return Continue()
        try:
            message = self.toolchain.migrate_prettier()
        except ProcessError as e:
            bus.warning("migrate.prettier.failed", error=str(e))
            return Continue(warning=f"Prettier migration failed: {e}")
        state.result.legacy_formatter_migrated = True
        bus.success("migrate.prettier.success")
        bus.debug("migrate.tool.output", output=message)
        return Continue()

    def _read_legacy_formatter_settings(self, state: MigrationState) -> StepOutcome:
        # Must happen before cleanup deletes the Prettier files.
        state.legacy_formatter = LegacyConfigReader(self.root_path).read_formatter_config()
        if state.legacy_formatter is not None:
            bus.info("migrate.prettier.settings_read")
        return Continue()

    def _resolve_trailing_commas(self, state: MigrationState) -> StepOutcome:
        legacy = state.legacy_formatter
        if legacy is None or not legacy.needs_trailing_comma_resolution:
            return Continue()

        bus.warning("migrate.trailing_commas.unsupported")
        outcome = self.prompter.select(
            bus.resolve("migrate.trailing_commas.prompt"),
            [
                ("none", "No trailing commas", "Cleaner, no extra commas"),
                ("all", "All trailing commas", "Better git diffs"),
            ],
            default="none",
        )
        if not isinstance(outcome, Answered):
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)
        state.trailing_comma_resolution = TrailingCommas(outcome.value)
        return Continue()

    def _ask_relaxed_rules(self, state: MigrationState) -> StepOutcome:
        answer = self._gate("migrate.confirm.relaxed_rules")
        if answer is None:
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)
        state.relaxed_rules = answer
        return Continue()

    def _apply_translated_config(self, state: MigrationState) -> StepOutcome:
        config_path = self.root_path / BIOME_CONFIG
        document = BiomeDocument.load(config_path)
        if document is None:
            bus.warning("migrate.config.missing")
            return Continue(warning=f"{BIOME_CONFIG} not found, skipping customization")

        document.merge_excludes(IgnorePatternAggregator(self.root_path).aggregate())

        legacy = state.legacy_formatter
        if legacy is not None:
            settings = translate(legacy, state.trailing_comma_resolution)
            document.apply_formatter_settings(settings)

        if state.relaxed_rules:
            document.apply_relaxed_rules()
        document.merge_globals()
        document.disable_organize_imports()

        document.save(config_path)
        bus.success("migrate.config.customized")
        return Continue()

    def _validate_result(self, state: MigrationState) -> StepOutcome:
        report = self.validator.validate()
        state.result.validation_issues = list(report.issues)
        if report.success:
            bus.success("migrate.validate.success")
        else:
            bus.warning("migrate.validate.issues", count=len(report.issues))
            for issue in report.issues:
                bus.warning("migrate.validate.issue", issue=issue)
        return Continue()

    def _cleanup(self, state: MigrationState) -> StepOutcome:
        if state.options.skip_cleanup:
            return Continue()
        info = state.info
        assert info is not None

        # Leftovers of a tool whose migration failed still hold settings the
        # user has to port by hand.
        families = []
        if not (info.has_legacy_linter and not state.result.legacy_linter_migrated):
            families.append(LINTER)
        else:
            bus.warning("migrate.cleanup.kept", tool="ESLint")
        if not (info.has_legacy_formatter and not state.result.legacy_formatter_migrated):
            families.append(FORMATTER)
        else:
            bus.warning("migrate.cleanup.kept", tool="Prettier")

        manifest = self.cleanup.load_manifest() or {}
        deps = self.cleanup.legacy_dependencies(manifest, families)
        bus.info("migrate.cleanup.found", count=len(deps))

        warning = None
        if deps:
            bus.debug("migrate.cleanup.packages", names=", ".join(deps))
            answer = self._gate("migrate.confirm.remove_packages", count=len(deps))
            if answer is None:
                bus.warning("migrate.run.cancelled")
                return Stop(CANCELLED_BY_USER)
            if answer:
                try:
                    self._package_manager(state).remove(deps)
                except ProcessError as e:
                    bus.warning("migrate.cleanup.uninstall_failed", error=str(e))
                    warning = f"Failed to remove packages: {e}"
                else:
                    state.result.dependencies_removed = deps
                    bus.success("migrate.cleanup.removed_packages", count=len(deps))

        files = self.cleanup.legacy_files(families)
        state.result.files_removed = self.cleanup.remove_files(files)
        if state.result.files_removed:
            bus.info(
                "migrate.cleanup.removed_files",
                names=", ".join(state.result.files_removed),
            )
        return Continue(warning=warning)

    def _update_scripts(self, state: MigrationState) -> StepOutcome:
        answer = self._gate("migrate.confirm.scripts")
        if answer is None:
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)

        if answer and self.cleanup.update_scripts():
            state.result.scripts_updated = True
            bus.success("migrate.scripts.updated")
            return Continue()

        bus.info("migrate.scripts.manual")
        for name, command in BIOME_SCRIPTS.items():
            bus.info("migrate.scripts.entry", name=name, command=command)
        if answer:
            return Continue(warning="package.json not found, scripts were not updated")
        return Continue()

    def _reformat(self, state: MigrationState) -> StepOutcome:
        answer = self._gate("migrate.confirm.reformat")
        if answer is None:
            bus.warning("migrate.run.cancelled")
            return Stop(CANCELLED_BY_USER)
        if not answer:
            return Continue()

        bus.info("migrate.reformat.start")
        state.result.code_reformatted = True
        try:
            self.toolchain.apply_fixes()
        except ProcessError:
            # Unfixable lint findings make biome exit non-zero.
            bus.warning("migrate.reformat.partial")
            return Continue()
        bus.success("migrate.reformat.success")
        return Continue()

    def _summary(self, state: MigrationState) -> StepOutcome:
        result = state.result
        bus.info("migrate.summary.header")
        if result.legacy_linter_migrated:
            bus.success("migrate.summary.eslint")
        if result.legacy_formatter_migrated:
            bus.success("migrate.summary.prettier")
        if result.dependencies_removed:
            bus.success("migrate.summary.packages", count=len(result.dependencies_removed))
        if result.files_removed:
            bus.success("migrate.summary.files", count=len(result.files_removed))
        if result.scripts_updated:
            bus.success("migrate.summary.scripts")
        if result.code_reformatted:
            bus.success("migrate.summary.reformatted")
        for warning in result.warnings:
            bus.warning("migrate.summary.warning", warning=warning)

        assert state.info is not None
        bus.success(
            "migrate.run.complete",
            command=run_script_display(state.info.package_manager, "lint"),
        )
        return Continue()
