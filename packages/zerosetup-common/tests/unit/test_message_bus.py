import json

import zerosetup.common
from zerosetup.common import MessageBus, MessageCatalog
from zerosetup.test_utils import SpyBus


class ListRenderer:
    def __init__(self):
        self.lines = []

    def render(self, message: str, level: str) -> None:
        self.lines.append((level, message))


def _catalog(tmp_path, messages):
    lang_dir = tmp_path / "en"
    lang_dir.mkdir(parents=True, exist_ok=True)
    (lang_dir / "test.json").write_text(json.dumps(messages))
    return MessageCatalog(roots=[tmp_path])


def test_bus_forwards_to_renderer_with_spy(monkeypatch):
    # Arrange
    spy_bus = SpyBus()

    # Act
    with spy_bus.patch(monkeypatch):
        zerosetup.common.bus.info("migrate.detect.start")
        zerosetup.common.bus.warning("migrate.run.cancelled", reason="x")

    # Assert
    messages = spy_bus.get_messages()
    assert messages == [
        {"level": "info", "id": "migrate.detect.start", "params": {}},
        {"level": "warning", "id": "migrate.run.cancelled", "params": {"reason": "x"}},
    ]
    spy_bus.assert_id_called("migrate.run.cancelled", level="warning")


def test_bus_formats_templates(tmp_path):
    bus = MessageBus(catalog=_catalog(tmp_path, {"greeting": "Hello {name}"}))
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    bus.success("greeting", name="World")

    assert renderer.lines == [("success", "Hello World")]


def test_missing_id_falls_back_to_the_id(tmp_path):
    bus = MessageBus(catalog=_catalog(tmp_path, {}))

    assert bus.resolve("nonexistent.key") == "nonexistent.key"


def test_missing_parameter_does_not_raise(tmp_path):
    bus = MessageBus(catalog=_catalog(tmp_path, {"greeting": "Hello {name}"}))

    assert bus.resolve("greeting") == "<formatting_error for 'greeting'>"


def test_bus_does_not_fail_without_renderer(tmp_path):
    bus = MessageBus(catalog=_catalog(tmp_path, {"greeting": "Hello"}))

    bus.error("greeting")


def test_later_roots_override_earlier_ones(tmp_path):
    first = tmp_path / "first" / "en"
    second = tmp_path / "second" / "en"
    first.mkdir(parents=True)
    second.mkdir(parents=True)
    (first / "a.json").write_text(json.dumps({"k": "first", "only": "kept"}))
    (second / "a.json").write_text(json.dumps({"k": "second"}))

    catalog = MessageCatalog(roots=[tmp_path / "first", tmp_path / "second"])

    assert catalog.get("k") == "second"
    assert catalog.get("only") == "kept"


def test_broken_message_files_are_skipped(tmp_path):
    lang_dir = tmp_path / "en"
    lang_dir.mkdir()
    (lang_dir / "broken.json").write_text("{")
    (lang_dir / "good.json").write_text(json.dumps({"ok": "fine"}))

    catalog = MessageCatalog(roots=[tmp_path])

    assert catalog.get("ok") == "fine"


def test_shipped_catalog_covers_core_messages():
    catalog = MessageCatalog()

    for msg_id in (
        "migrate.detect.nothing",
        "migrate.confirm.start",
        "migrate.trailing_commas.prompt",
        "create.prompt.name",
        "error.unexpected",
        "cli.app.description",
    ):
        assert catalog.get(msg_id) != msg_id
