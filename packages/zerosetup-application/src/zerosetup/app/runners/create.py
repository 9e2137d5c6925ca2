from pathlib import Path
from typing import Optional

from zerosetup.analysis import detect_package_manager
from zerosetup.common import bus
from zerosetup.config import TEMPLATE_DESCRIPTIONS, TEMPLATES, RuntimeConfig
from zerosetup.spec import (
    Abort,
    Answered,
    Continue,
    CreateOptions,
    ProcessError,
    ProcessRunnerProtocol,
    ProjectContext,
    PromptHandler,
    StepOutcome,
    Stop,
    ZeroSetupError,
    is_yes,
)
from zerosetup.app.services import (
    AuditLogger,
    GitService,
    PackageManagerService,
    TemplateCopier,
    create_audit_event,
    run_script_display,
    validate_project_name,
)

TEMPLATES_ROOT = Path(__file__).parent.parent / "templates"


class CreateRunner:
    def __init__(
        self,
        cwd: Path,
        prompter: PromptHandler,
        process_runner: ProcessRunnerProtocol,
        config: RuntimeConfig,
        templates_root: Optional[Path] = None,
    ):
        self.cwd = cwd
        self.prompter = prompter
        self.process_runner = process_runner
        self.config = config
        self.copier = TemplateCopier(templates_root or TEMPLATES_ROOT)
        self.audit = AuditLogger(config)

    def _cancelled(self) -> Stop:
        bus.warning("create.run.cancelled")
        return Stop("cancelled")

    def _resolve_name(self, project_name: Optional[str]):
        if project_name is None:
            outcome = self.prompter.text(
                bus.resolve("create.prompt.name"),
                validator=validate_project_name,
                placeholder="my-app",
            )
            if not isinstance(outcome, Answered):
                return self._cancelled()
            project_name = outcome.value

        error = validate_project_name(project_name)
        if error:
            return Abort(error)
        return project_name.strip()

    def _resolve_template(self, template: Optional[str]):
        if template is None and len(TEMPLATES) > 1:
            outcome = self.prompter.select(
                bus.resolve("create.prompt.template"),
                [(t, t, TEMPLATE_DESCRIPTIONS.get(t, "")) for t in TEMPLATES],
                default=TEMPLATES[0],
            )
            if not isinstance(outcome, Answered):
                return self._cancelled()
            template = outcome.value

        template = template or TEMPLATES[0]
        if template not in TEMPLATES:
            return Abort(f"Invalid template: {template}. Available: {', '.join(TEMPLATES)}")
        return template

    def run(
        self, project_name: Optional[str] = None, options: Optional[CreateOptions] = None
    ) -> StepOutcome:
        options = options or CreateOptions()

        name = self._resolve_name(project_name)
        if isinstance(name, (Stop, Abort)):
            return name

        template = self._resolve_template(options.template)
        if isinstance(template, (Stop, Abort)):
            return template

        target_dir = self.cwd / name
        if target_dir.is_dir() and any(target_dir.iterdir()):
            outcome = self.prompter.confirm(
                bus.resolve("create.prompt.overwrite", name=name), default=False
            )
            if not is_yes(outcome):
                return self._cancelled()

        context = ProjectContext(
            project_name=name,
            target_dir=target_dir,
            template=template,
            package_manager=options.package_manager
            or detect_package_manager(self.cwd, self.config.user_agent),
            skip_install=options.skip_install,
            skip_git=options.skip_git,
        )

        try:
            self._generate(context)
        except ZeroSetupError as e:
            self.audit.log(
                create_audit_event(
                    "project_creation_failed",
                    name,
                    False,
                    {"error": str(e), "template": template},
                )
            )
            return Abort(f"Failed to create project: {e}")

        self._show_next_steps(context)
        self.audit.log(
            create_audit_event(
                "project_created",
                name,
                True,
                {
                    "template": template,
                    "packageManager": context.package_manager.value,
                    "skipInstall": context.skip_install,
                    "skipGit": context.skip_git,
                },
            )
        )
        return Continue()

    def _generate(self, context: ProjectContext) -> None:
        try:
            context.target_dir.mkdir(parents=True, exist_ok=True)
            info = self.copier.copy(context)
        except OSError as e:
            raise ZeroSetupError(f"Could not write project files: {e}") from e
        bus.debug(
            "create.template.validated",
            count=info.file_count,
            size=f"{info.total_size_mb:.2f}",
        )
        bus.success("create.template.copied", template=context.template)

        if not context.skip_install:
            pm = context.package_manager.value
            bus.info("create.install.start", pm=pm)
            try:
                PackageManagerService(
                    self.process_runner, context.package_manager, context.target_dir
                ).install()
            except ProcessError as e:
                raise ZeroSetupError(f"Installation failed: {e}") from e
            bus.success("create.install.success", pm=pm)

        if not context.skip_git:
            try:
                GitService(self.process_runner, context.target_dir).init_repository()
            except ProcessError as e:
                # Git is optional for a fresh project.
                bus.warning("create.git.skipped")
                bus.debug("create.git.error", error=str(e))
            else:
                bus.success("create.git.initialized")

    def _show_next_steps(self, context: ProjectContext) -> None:
        pm = context.package_manager
        bus.info("create.next.header")
        bus.info("create.next.step", command=f"cd {context.project_name}")
        if context.skip_install:
            bus.info("create.next.step", command=f"{pm.value} install")
        bus.info("create.next.step", command=run_script_display(pm, "dev"))
        bus.success("create.run.complete", command=run_script_display(pm, "lint"))
