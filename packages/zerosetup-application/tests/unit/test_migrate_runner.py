from zerosetup.app.runners.migrate import MigrateRunner
from zerosetup.app.services import BiomeToolchain, MigrationValidator
from zerosetup.spec import Abort, Continue, ProcessError, Stop
from zerosetup.test_utils import FakeProcessRunner, ScriptedPrompter, SpyBus


def test_fold_stops_at_first_non_continue(tmp_path, mocker, monkeypatch):
    """
    The runner collects warnings from Continue outcomes and stops at the
    first Stop/Abort without running later steps.
    """
    # 1. Arrange
    first = mocker.Mock(return_value=Continue(warning="partial"))
    second = mocker.Mock(return_value=Abort("boom"))
    third = mocker.Mock(return_value=Continue())
    mocker.patch.object(
        MigrateRunner,
        "steps",
        new_callable=mocker.PropertyMock,
        return_value=[first, second, third],
    )
    runner = MigrateRunner(tmp_path, ScriptedPrompter(), FakeProcessRunner())

    # 2. Act
    spy_bus = SpyBus()
    with spy_bus.patch(monkeypatch, "zerosetup.common.bus"):
        report = runner.run()

    # 3. Assert
    assert report.outcome == Abort("boom")
    assert report.success is False
    assert report.result.warnings == ["partial"]
    first.assert_called_once()
    second.assert_called_once()
    third.assert_not_called()
    spy_bus.assert_id_called("migrate.run.aborted", level="error")


def test_stop_is_a_successful_report(tmp_path, mocker):
    mocker.patch.object(
        MigrateRunner,
        "steps",
        new_callable=mocker.PropertyMock,
        return_value=[mocker.Mock(return_value=Stop("dry_run"))],
    )

    report = MigrateRunner(tmp_path, ScriptedPrompter(), FakeProcessRunner()).run()

    assert report.outcome == Stop("dry_run")
    assert report.success is True


def test_validator_ignores_lint_findings(tmp_path, mocker):
    toolchain = mocker.create_autospec(BiomeToolchain, instance=True)
    toolchain.check.side_effect = ProcessError("npx", ["@biomejs/biome", "check"], 1)
    (tmp_path / "biome.json").write_text("{}")

    report = MigrationValidator(tmp_path, toolchain).validate()

    toolchain.check.assert_called_once_with()
    assert report.success is True
