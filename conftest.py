import pytest
from zerosetup.test_utils.workspace import WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # Use a fixture to ensure a clean workspace and chdir for each test
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory


@pytest.fixture(autouse=True)
def _no_audit_by_default(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "test")
    monkeypatch.delenv("AUDIT_LOG_ENABLED", raising=False)
    monkeypatch.delenv("npm_config_user_agent", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
