"""Tests for the catalog runner, registry and transcript."""

import logging
from unittest.mock import patch

import pytest

from catalog.catalog import Catalog
from catalog.observability.hooks import CatalogEvent
from catalog.patterns.base import PatternDemo
from catalog.registry import DemoDefinition, DemoRegistry, PatternCategory
from catalog.transcript import Transcript

EXPECTED_DEMOS = {
    PatternCategory.BEHAVIORAL: [
        "chain_of_responsibility",
        "command",
        "interpreter",
        "iterator",
        "mediator",
        "memento",
        "observer",
        "state",
        "strategy",
        "template_method",
        "visitor",
    ],
    PatternCategory.CREATIONAL: [
        "abstract_factory",
        "builder",
        "factory_method",
        "prototype",
        "singleton",
    ],
    PatternCategory.STRUCTURAL: [
        "adapter",
        "bridge",
        "composite",
        "decorator",
        "facade",
        "flyweight",
        "proxy",
    ],
}


class BrokenDemo(PatternDemo):
    """Demo that fails halfway through."""

    def run(self):
        print("about to fail")
        raise RuntimeError("boom")


class KeyErrorDemo(PatternDemo):
    """Demo that looks up a missing key."""

    def run(self):
        print({}["missing"])


def broken_definition():
    return DemoDefinition(
        name="broken",
        category=PatternCategory.BEHAVIORAL,
        description="Always fails.",
        demo_class=BrokenDemo,
    )


class TestDemoRegistry:
    def test_discovers_all_patterns(self, registry):
        assert len(registry) == 23
        assert registry.list_by_category() == EXPECTED_DEMOS

    def test_list_demos_groups_by_category(self, registry):
        expected = [name for names in EXPECTED_DEMOS.values() for name in names]
        assert registry.list_demos() == expected

    def test_unknown_demo_returns_none(self, registry):
        assert registry.get("no_such_pattern") is None
        assert "no_such_pattern" not in registry

    def test_definition_metadata(self, registry):
        definition = registry.get("chain_of_responsibility")

        assert definition.title == "Chain Of Responsibility"
        assert definition.category is PatternCategory.BEHAVIORAL
        assert definition.description
        assert isinstance(definition(), PatternDemo)

    def test_second_discovery_finds_nothing_new(self, registry):
        assert registry.discover_package("catalog.patterns") == 0

    def test_manual_registration(self):
        demo_registry = DemoRegistry()
        demo_registry.register(broken_definition())
        assert demo_registry.get("broken").demo_class is BrokenDemo

    def test_discovery_skips_modules_that_fail_to_import(self, tmp_path, monkeypatch, caplog):
        package = tmp_path / "half_broken_demos"
        package.mkdir()
        (package / "__init__.py").write_text("", encoding="utf-8")
        (package / "broken.py").write_text("raise RuntimeError('bad module')\n", encoding="utf-8")
        (package / "fine.py").write_text("VALUE = 1\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        demo_registry = DemoRegistry()
        with caplog.at_level(logging.WARNING, logger="catalog"):
            assert demo_registry.discover_package("half_broken_demos") == 0

        assert "half_broken_demos.broken" in caplog.text
        assert "bad module" in caplog.text


class TestCatalogRunDemo:
    def test_returns_and_records_output(self, catalog):
        output = catalog.run_demo("strategy", echo=False)

        assert output.startswith("Result of addition: 8\n")
        assert catalog.transcript.get_output("strategy") == output
        entry = catalog.transcript.get_entries("strategy")[0]
        assert entry.metadata["category"] == "behavioral"

    def test_echo_writes_to_stdout(self, catalog, capsys):
        output = catalog.run_demo("command")
        assert capsys.readouterr().out == output

    def test_no_echo_keeps_stdout_quiet(self, catalog, capsys):
        catalog.run_demo("command", echo=False)
        assert capsys.readouterr().out == ""

    def test_output_is_deterministic(self, catalog):
        for name in catalog.list_demos():
            if name == "prototype":
                continue
            assert catalog.run_demo(name, echo=False) == catalog.run_demo(name, echo=False)

    def test_unknown_demo_raises(self, catalog):
        with pytest.raises(ValueError, match="Demo 'nope' not found"):
            catalog.run_demo("nope")

    def test_lifecycle_events(self, catalog, hooks):
        events = []
        hooks.on_all(events.append)

        catalog.run_demo("state", echo=False)

        assert [e.event for e in events] == [CatalogEvent.DEMO_START, CatalogEvent.DEMO_END]
        assert events[0].demo_name == "state"
        assert events[0].session_id == "test-session"
        assert events[1].data["lines"] == 3
        assert events[1].duration_ms is not None

    def test_failing_demo_reports_and_reraises(self, registry, hooks):
        registry.register(broken_definition())
        catalog = Catalog(registry=registry, hook_registry=hooks)
        errors = []
        hooks.on(CatalogEvent.DEMO_ERROR, errors.append)

        with pytest.raises(RuntimeError, match="boom"):
            catalog.run_demo("broken")

        assert len(errors) == 1
        assert str(errors[0].error) == "boom"
        assert catalog.transcript.get_output("broken") is None

    def test_any_demo_exception_fires_error_hook(self, registry, hooks, caplog):
        registry.register(
            DemoDefinition(
                name="lookup_failure",
                category=PatternCategory.CREATIONAL,
                description="Fails with a KeyError.",
                demo_class=KeyErrorDemo,
            )
        )
        catalog = Catalog(registry=registry, hook_registry=hooks)
        errors = []
        hooks.on(CatalogEvent.DEMO_ERROR, errors.append)

        with caplog.at_level(logging.ERROR, logger="catalog"):
            with pytest.raises(KeyError):
                catalog.run_demo("lookup_failure")

        assert len(errors) == 1
        assert isinstance(errors[0].error, KeyError)
        assert "Demo failed" in caplog.text

    def test_describe(self, catalog):
        assert catalog.describe("proxy").startswith("Proxy (structural): ")
        with pytest.raises(ValueError):
            catalog.describe("nope")


class TestCatalogBatches:
    def test_run_category(self, catalog):
        outputs = catalog.run_category(PatternCategory.CREATIONAL, echo=False)
        assert list(outputs) == EXPECTED_DEMOS[PatternCategory.CREATIONAL]

    def test_run_category_by_value(self, catalog):
        outputs = catalog.run_category("Structural", echo=False)
        assert list(outputs) == EXPECTED_DEMOS[PatternCategory.STRUCTURAL]

    def test_run_unknown_category(self, catalog):
        with pytest.raises(ValueError, match="Unknown category"):
            catalog.run_category("functional")

    def test_run_all(self, catalog):
        outputs = catalog.run_all(echo=False)
        assert len(outputs) == 23
        assert catalog.transcript.list_runs() == catalog.list_demos()

    def test_run_all_validates_names_before_running(self, catalog):
        with pytest.raises(ValueError):
            catalog.run_all(["observer", "missing"], echo=False)
        assert len(catalog.transcript) == 0

    def test_banner_when_echoing(self, catalog, capsys):
        catalog.run_all(["adapter"])
        out = capsys.readouterr().out
        assert "Adapter Pattern (structural)" in out
        assert out.endswith("Adapter: (TRANSLATED) Adaptee's specific request\n")

    def test_batch_events(self, catalog, hooks):
        events = []
        hooks.on(CatalogEvent.CATALOG_START, events.append)
        hooks.on(CatalogEvent.CATALOG_END, events.append)

        catalog.run_all(["memento", "visitor"], echo=False)

        assert events[0].data == {"scope": "all", "demos": 2}
        assert events[1].data["demos_completed"] == 2

    def test_default_catalog_discovers_patterns(self):
        assert len(Catalog().list_demos()) == 23


class TestTranscript:
    def test_empty(self):
        transcript = Transcript()
        assert transcript.get_output("x") is None
        assert transcript.get_last_output() is None
        assert transcript.list_runs() == []

    def test_latest_output_wins(self):
        transcript = Transcript()
        transcript.set_output("a", "first\n")
        transcript.set_output("b", "other\n")
        transcript.set_output("a", "second\n")

        assert transcript.get_output("a") == "second\n"
        assert transcript.get_last_output() == "second\n"
        assert transcript.list_runs() == ["a", "b"]
        assert [e.output for e in transcript.get_entries("a")] == ["first\n", "second\n"]
        assert len(transcript) == 3

    def test_entry_to_dict(self):
        transcript = Transcript()
        transcript.set_output("a", "x\ny\n", category="behavioral")
        entry = transcript.get_entries()[0]

        data = entry.to_dict()
        assert data["demo_name"] == "a"
        assert data["metadata"] == {"category": "behavioral"}
        assert entry.lines == ["x", "y"]

    def test_clear(self):
        transcript = Transcript()
        transcript.set_output("a", "x")
        transcript.clear()
        assert len(transcript) == 0
        assert transcript.get_output("a") is None


class TestMain:
    def test_runs_named_demos(self, capsys):
        import main

        assert main.main(["decorator"]) == 0

        assert "Espresso, Milk, Mocha Rs.55" in capsys.readouterr().out

    def test_unknown_demo_returns_error(self, capsys):
        import main

        assert main.main(["nonexistent"]) == 1
        assert "Demo 'nonexistent' not found" in capsys.readouterr().out

    def test_interactive_quit(self, capsys):
        import main

        with patch("builtins.input", return_value="q"):
            assert main.main([]) == 0
        assert "Goodbye!" in capsys.readouterr().out

    def test_interactive_menu_number(self, capsys):
        import main

        with patch("builtins.input", return_value="1"):
            assert main.main([]) == 0
        assert "Request 5 handled by ConcreteHandler1." in capsys.readouterr().out

    def test_interactive_invalid_choice(self, capsys):
        import main

        with patch("builtins.input", return_value="zzz"):
            assert main.main([]) == 1
        assert "Invalid choice" in capsys.readouterr().out

    def test_malformed_config_returns_error(self, tmp_path, capsys):
        import main

        bad_config = tmp_path / "catalog.yaml"
        bad_config.write_text("log_level: [unclosed\n", encoding="utf-8")
        real_load_config = main.load_config

        with patch.object(main, "load_config", lambda: real_load_config(bad_config)):
            assert main.main(["decorator"]) == 1
        assert "Error:" in capsys.readouterr().out
