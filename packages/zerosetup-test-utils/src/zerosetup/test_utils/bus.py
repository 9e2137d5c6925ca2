from contextlib import contextmanager
from typing import Any, Dict, List, Optional

# Import the actual singleton to patch it in-place
import zerosetup.common


class SpyRenderer:
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: str, params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Spies on the global zerosetup.common.bus singleton.

    The instance methods are patched in place, so modules that imported the
    singleton with 'from zerosetup.common import bus' are covered too.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any, target: str = "zerosetup.common.bus"):
        """
        Args:
            monkeypatch: The pytest monkeypatch fixture.
            target: Informational only; the singleton found at
                    zerosetup.common.bus is always the one patched.
        """
        real_bus = zerosetup.common.bus

        def intercept_render(level: str, msg_id: str, **kwargs: Any) -> None:
            self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def ids(self, level: Optional[str] = None) -> List[str]:
        return [
            m["id"] for m in self.get_messages() if level is None or m["level"] == level
        ]

    def assert_id_called(self, msg_id: str, level: Optional[str] = None):
        if msg_id not in self.ids(level):
            raise AssertionError(
                f"Message with ID '{msg_id}' was not sent.\n"
                f"Captured IDs: {self.ids()}"
            )

    def assert_id_not_called(self, msg_id: str):
        if msg_id in self.ids():
            raise AssertionError(f"Message with ID '{msg_id}' was sent unexpectedly.")
