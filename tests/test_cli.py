"""Tests for the lint_content and search_content CLIs."""
import importlib
import json
import sys
from pathlib import Path

import pytest

from curriculum.cli import lint_content, search_content
from curriculum.config import get_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CURRICULUM_CONTENT_PACKAGE", raising=False)
    monkeypatch.delenv("CURRICULUM_PHASE_ID_SCOPE", raising=False)
    monkeypatch.delenv("CURRICULUM_EXTRA_QUESTION_TYPES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _topic(topic_id: str, **overrides) -> dict:
    topic = {
        "id": topic_id,
        "title": topic_id.title(),
        "explanation": "Explained.",
        "commonMistakes": [],
        "interviewQuestions": [{"type": "conceptual", "q": "Q", "a": "A"}],
    }
    topic.update(overrides)
    return topic


def test_lint_bundled_content_passes() -> None:
    assert lint_content.main([]) == 0
    assert lint_content.main(["--roadmap", "dsa"]) == 0


def test_lint_unknown_roadmap() -> None:
    assert lint_content.main(["--roadmap", "cobol"]) == 2


def test_lint_json_dir_with_errors_fails(tmp_path: Path) -> None:
    (tmp_path / "phase1.json").write_text(json.dumps({"id": "phase-1", "topics": [_topic("a")]}))
    (tmp_path / "phase2.json").write_text(json.dumps({"id": "phase-1", "topics": [_topic("b")]}))

    assert lint_content.main(["--json-dir", str(tmp_path)]) == 1


def test_lint_json_dir_warnings_only_with_strict(tmp_path: Path) -> None:
    (tmp_path / "phase1.json").write_text(json.dumps({
        "id": "phase-1",
        "topics": [_topic("a", codeExample="```kotlin\nfun main() {}")],
    }))

    assert lint_content.main(["--json-dir", str(tmp_path)]) == 0
    assert lint_content.main(["--json-dir", str(tmp_path), "--strict"]) == 1


def test_lint_missing_json_dir(tmp_path: Path) -> None:
    assert lint_content.main(["--json-dir", str(tmp_path / "nope")]) == 2


def test_search_cli() -> None:
    assert search_content.main(["closure"]) == 0
    assert search_content.main(["closure", "--roadmap", "javascript"]) == 0
    assert search_content.main(["--type", "coding"]) == 0
    assert search_content.main(["--type", "made-up"]) == 0


def test_search_cli_unknown_roadmap() -> None:
    assert search_content.main(["closure", "--roadmap", "python"]) == 2


def test_search_cli_requires_term_or_type() -> None:
    with pytest.raises(SystemExit):
        search_content.main([])


@pytest.fixture
def broken_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """A content package whose supplement carries its own Phase envelope."""
    name = "cli_envelope_supplement_content"
    package = tmp_path / name
    package.mkdir()
    roadmaps = [{"slug": "demo", "title": "Demo", "modules": [
        {"module": "p1", "supplements": ["p1b"]},
        "p2_gone",
    ]}]
    modules = {
        "p1": {"id": "phase-1", "title": "Basics", "topics": [_topic("a")]},
        "p1b": {"id": "phase-1b", "title": "More", "topics": [_topic("b")]},
    }
    (package / "index.py").write_text(f"ROADMAPS = {roadmaps!r}\n", encoding="utf-8")
    for module, content in modules.items():
        (package / f"{module}.py").write_text(f"CONTENT = {content!r}\n", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()
    yield name
    for module_name in list(sys.modules):
        if module_name.split(".")[0] == name:
            del sys.modules[module_name]


def test_lint_reports_bad_supplement_and_missing_module(broken_package: str) -> None:
    assert lint_content.main(["--package", broken_package]) == 1


def test_search_cli_content_unavailable_for_bad_package(
    broken_package: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CURRICULUM_CONTENT_PACKAGE", broken_package)
    assert search_content.main(["closure"]) == 1


def test_invalid_phase_id_scope_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CURRICULUM_PHASE_ID_SCOPE", "glob")

    assert lint_content.main([]) == 2
    assert search_content.main(["closure"]) == 2
