from .bus import SpyBus
from .process import FakeProcessRunner
from .prompts import ScriptedPrompter
from .workspace import WorkspaceFactory, snapshot_tree
from .helpers import create_test_app

__all__ = [
    "SpyBus",
    "FakeProcessRunner",
    "ScriptedPrompter",
    "WorkspaceFactory",
    "snapshot_tree",
    "create_test_app",
]
