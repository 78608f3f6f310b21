"""Tests for curriculum.tools.registry."""
import logging
from types import ModuleType

import pytest
from pydantic import ValidationError

from curriculum.models.report import Finding
from curriculum.tools.registry import LoadError, Registry, RegistryHandle, build_registry, load


def make_topic(topic_id: str, **overrides) -> dict:
    topic = {
        "id": topic_id,
        "title": topic_id.replace("-", " ").title(),
        "explanation": f"About {topic_id}.",
        "codeExample": "",
        "exercise": "",
        "commonMistakes": [],
        "interviewQuestions": [{"type": "conceptual", "q": "Q?", "a": "A."}],
    }
    topic.update(overrides)
    return topic


def make_module(key: str, phase_id: str, *topic_ids: str) -> tuple[str, dict]:
    return key, {
        "id": phase_id,
        "title": phase_id.title(),
        "emoji": "🟢",
        "description": "",
        "topics": [make_topic(t) for t in topic_ids],
    }


MODULES = [
    make_module("js-phase1", "phase-1", "variables", "operators"),
    make_module("js-phase2", "phase-2", "closures", "this-keyword"),
    ("js-phase2b", [make_topic("iterators")]),
    make_module("js-phase3", "phase-3", "promises"),
]


def test_list_phases_preserves_input_order() -> None:
    registry = load(MODULES)
    assert [p.id for p in registry.list_phases()] == ["phase-1", "phase-2", "js-phase2b", "phase-3"]

    reversed_registry = load(list(reversed(MODULES)))
    assert [p.id for p in reversed_registry.list_phases()] == ["phase-3", "js-phase2b", "phase-2", "phase-1"]


def test_load_is_idempotent() -> None:
    assert load(MODULES) == load(MODULES)
    assert load(MODULES) != load(MODULES[:2])


def test_get_phase() -> None:
    registry = load(MODULES)
    assert registry.get_phase("phase-2").title == "Phase-2"
    assert registry.get_phase("phase-99") is None


def test_get_topic_resolves_owning_phase() -> None:
    registry = load(MODULES)
    ref = registry.get_topic("closures")
    assert ref.phase.id == "phase-2"
    assert ref.topic.title == "Closures"
    assert registry.get_topic("missing") is None
    assert registry.find_all_topics("missing") == []


def test_get_topic_round_trips_through_find_all_topics() -> None:
    registry = load(MODULES)
    for ref in registry.iter_topics():
        found = registry.get_topic(ref.topic.id)
        assert found.topic == ref.topic
        assert found in registry.find_all_topics(ref.topic.id)


def test_repeated_topic_id_returns_first_occurrence() -> None:
    modules = [
        make_module("android-phase1", "phase-1", "intro"),
        make_module("android-phase2", "phase-2", "intro"),
    ]
    registry = load(modules)
    assert registry.get_topic("intro").phase.id == "phase-1"
    assert [r.phase.id for r in registry.find_all_topics("intro")] == ["phase-1", "phase-2"]
    assert [f.code for f in registry.report.warnings] == ["duplicate-topic-id"]


def test_valid_registry_invariants() -> None:
    registry = load(MODULES)
    ids = [p.id for p in registry]
    assert len(ids) == len(set(ids))
    for ref in registry.iter_topics():
        assert ref.topic.title.strip()
        assert ref.topic.explanation.strip()


def test_duplicate_phase_ids_fail_load() -> None:
    modules = [
        make_module("js-phase1", "phase-1", "a"),
        make_module("android-phase1", "phase-1", "b"),
    ]
    with pytest.raises(LoadError) as exc_info:
        load(modules)

    report = exc_info.value.report
    assert len(report.errors) == 1
    assert report.errors[0].code == "duplicate-phase-id"
    assert report.errors[0].modules == ["js-phase1", "android-phase1"]


def test_unknown_question_type_fails_load() -> None:
    modules = [("m", {"id": "phase-1", "topics": [
        make_topic("a", interviewQuestions=[{"type": "made-up", "q": "...", "a": "..."}]),
    ]})]
    with pytest.raises(LoadError) as exc_info:
        load(modules)
    assert [f.code for f in exc_info.value.report.errors] == ["unknown-question-type"]

    registry = load(modules, question_types={"made-up"})
    assert registry.report.ok


def test_empty_module_list_fails_load() -> None:
    with pytest.raises(LoadError) as exc_info:
        load([])
    assert exc_info.value.report.errors[0].code == "empty-corpus"


def test_warnings_do_not_block_load(caplog: pytest.LogCaptureFixture) -> None:
    modules = [("m", {"id": "phase-1", "topics": [make_topic("a", codeExample="```js\nbroken")]})]
    with caplog.at_level(logging.WARNING, logger="curriculum.tools.registry"):
        registry = load(modules)
    assert len(registry) == 1
    assert [f.code for f in registry.report.warnings] == ["orphaned-code-fence"]
    assert "orphaned-code-fence" in caplog.text


def test_build_registry_keeps_errors_without_raising() -> None:
    registry = build_registry([("m", {"id": "phase-1", "topics": []})])
    assert not registry.report.ok
    assert [f.code for f in registry.report.errors] == ["empty-field"]


def test_domain_scoped_load() -> None:
    android = load([make_module("android-phase12", "phase-12", "a")], domain="android")
    assert android.get_phase("phase-12").domain == "android"


def test_python_modules_are_accepted() -> None:
    mod = ModuleType("curriculum.content.sample_phase1")
    mod.CONTENT = {"id": "phase-1", "title": "Phase 1", "topics": [make_topic("a")]}
    registry = load([mod])
    assert registry.get_phase("phase-1").sources == ("sample-phase1",)


def test_registry_records_are_immutable() -> None:
    registry = load(MODULES)
    phase = registry.get_phase("phase-1")
    with pytest.raises(ValidationError):
        phase.title = "changed"
    assert isinstance(phase.topics, tuple)


def test_registry_report_cannot_be_changed_from_outside() -> None:
    registry = load([make_module("a", "phase-1", "x"), ("b", [make_topic("x")])])
    warnings = len(registry.report.warnings)

    report = registry.report
    report.add(Finding(severity="error", code="injected", message="added later"))
    report.warnings.clear()

    assert registry.report.ok
    assert len(registry.report.warnings) == warnings > 0


def test_handle_swaps_in_rebuilt_registry() -> None:
    handle = RegistryHandle(load(MODULES[:1]))
    before = handle.current

    after = handle.reload(MODULES)

    assert handle.current is after
    assert len(before) == 1
    assert len(after) == 4


def test_handle_keeps_serving_when_reload_fails() -> None:
    handle = RegistryHandle(load(MODULES))
    before = handle.current

    with pytest.raises(LoadError):
        handle.reload([make_module("a", "phase-1", "x"), make_module("b", "phase-1", "y")])

    assert handle.current is before


def test_repr() -> None:
    assert repr(load(MODULES)) == "Registry(phases=4, topics=6)"
    assert isinstance(load(MODULES), Registry)
