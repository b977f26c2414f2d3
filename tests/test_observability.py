"""Tests for catalog logging and event hooks."""

import json
import logging

import pytest

from catalog.observability.hooks import CatalogEvent, EventData, EventHookRegistry
from catalog.observability.logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def make_record(**extra):
    record = logging.LogRecord("catalog.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestEventHookRegistry:
    def test_specific_and_global_hooks(self):
        registry = EventHookRegistry()
        specific, everything = [], []
        registry.on(CatalogEvent.DEMO_START, specific.append)
        registry.on_all(everything.append)

        registry.trigger(CatalogEvent.DEMO_START, demo_name="observer")
        registry.trigger(CatalogEvent.DEMO_END, demo_name="observer")

        assert [e.event for e in specific] == [CatalogEvent.DEMO_START]
        assert [e.event for e in everything] == [CatalogEvent.DEMO_START, CatalogEvent.DEMO_END]

    def test_duplicate_subscription_ignored(self):
        registry = EventHookRegistry()
        calls = []
        registry.on(CatalogEvent.CUSTOM, calls.append)
        registry.on(CatalogEvent.CUSTOM, calls.append)

        registry.trigger(CatalogEvent.CUSTOM)

        assert len(calls) == 1

    def test_off(self):
        registry = EventHookRegistry()
        calls = []
        registry.on(CatalogEvent.CUSTOM, calls.append)
        registry.off(CatalogEvent.CUSTOM, calls.append)
        registry.off(CatalogEvent.DEMO_END, calls.append)

        registry.trigger(CatalogEvent.CUSTOM)

        assert calls == []

    def test_kwargs_split_into_fields_and_data(self):
        registry = EventHookRegistry()
        received = []
        registry.on_all(received.append)

        registry.trigger(
            CatalogEvent.DEMO_END,
            demo_name="proxy",
            duration_ms=1.5,
            data={"lines": 3},
            category="structural",
        )

        event = received[0]
        assert event.demo_name == "proxy"
        assert event.duration_ms == 1.5
        assert event.data == {"lines": 3, "category": "structural"}

    def test_failing_hook_does_not_break_others(self):
        registry = EventHookRegistry()
        received = []

        def broken(_):
            raise ValueError("hook failure")

        registry.on(CatalogEvent.CUSTOM, broken)
        registry.on(CatalogEvent.CUSTOM, received.append)

        registry.trigger(CatalogEvent.CUSTOM)

        assert len(received) == 1

    def test_disable(self):
        registry = EventHookRegistry()
        calls = []
        registry.on_all(calls.append)

        registry.disable()
        registry.trigger(CatalogEvent.CUSTOM)
        assert not registry.is_enabled
        registry.enable()
        registry.trigger(CatalogEvent.CUSTOM)

        assert len(calls) == 1

    def test_list_and_clear(self):
        registry = EventHookRegistry()
        registry.on(CatalogEvent.DEMO_START, print)
        registry.on_all(print)

        assert registry.list_hooks() == {"demo_start": 1, "_global": 1}
        assert registry.list_hooks(CatalogEvent.DEMO_END) == {"demo_end": 0}

        registry.clear()
        assert registry.list_hooks() == {"_global": 0}

    def test_event_data_to_dict(self):
        data = EventData(
            event=CatalogEvent.DEMO_ERROR,
            demo_name="broken",
            error=RuntimeError("boom"),
        )
        result = data.to_dict()

        assert result["event"] == "demo_error"
        assert result["error"] == "boom"
        assert "duration_ms" not in result


class TestLogging:
    def test_structured_formatter(self):
        record = make_record(demo_name="observer", duration_ms=2.5, extra_data={"lines": 3})
        payload = json.loads(StructuredFormatter(include_timestamp=False).format(record))

        assert payload == {
            "level": "INFO",
            "message": "hello",
            "logger": "catalog.test",
            "demo": "observer",
            "duration_ms": 2.5,
            "data": {"lines": 3},
        }

    def test_human_readable_formatter(self):
        record = make_record(demo_name="state", session_id="abcdef123456")
        line = HumanReadableFormatter(use_colors=False).format(record)

        assert line.endswith("| INFO     | [demo=state, session=abcdef12] hello")

    def test_logger_injects_context(self, caplog):
        logger = get_logger("runner", session_id="s1", demo_name="proxy")

        with caplog.at_level(logging.INFO, logger="catalog"):
            logger.info("Demo completed", duration_ms=1.23456, extra={"lines": 3})

        record = caplog.records[0]
        assert record.name == "catalog.runner"
        assert record.demo_name == "proxy"
        assert record.session_id == "s1"
        assert record.duration_ms == 1.23
        assert record.extra_data == {"lines": 3}

    def test_with_context(self):
        logger = get_logger("runner", session_id="s1").with_context(demo_name="bridge")
        assert logger.name == "catalog.runner"

    def test_configure_logging_writes_json_file(self, tmp_path):
        log_file = tmp_path / "logs" / "catalog.jsonl"
        configure_logging(level="debug", log_file=log_file, use_colors=False)

        get_logger("runner").debug("written", demo_name="visitor")
        for handler in logging.getLogger("catalog").handlers:
            handler.flush()

        payload = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert payload["message"] == "written"
        assert payload["demo"] == "visitor"

    def test_configure_logging_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="loud")

    def test_demo_logs_stay_off_stdout(self, catalog, capsys):
        configure_logging(level="DEBUG", use_colors=False)

        output = catalog.run_demo("factory_method", echo=False)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Demo completed" in captured.err
        assert "Demo completed" not in output

    def test_pretty_json_console(self, capsys):
        configure_logging(level="INFO", json_format=True, pretty_json=True)

        get_logger("runner").info("indented", category="structural")

        err = capsys.readouterr().err
        assert err.startswith("{\n  ")
        assert json.loads(err)["category"] == "structural"
