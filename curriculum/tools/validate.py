"""Corpus-wide content checks run once at load time.

The validator never raises: every problem in the corpus is collected into a
single ValidationReport so authors see all of them in one run.
"""
import re
from collections.abc import Iterable
from typing import Literal

from curriculum.models.content import QUESTION_TYPES, Phase, Topic
from curriculum.models.report import Finding, ValidationReport


PhaseIdScope = Literal["global", "domain"]

# Structural heuristic only; fenced blocks are opaque text at this layer
FENCE_PATTERN = re.compile(r"```+")

_FENCED_FIELDS = ("code_example", "explanation", "exercise")


def validate(
    phases: Iterable[Phase],
    *,
    phase_id_scope: PhaseIdScope = "global",
    question_types: Iterable[str] = QUESTION_TYPES
) -> ValidationReport:
    """
    Run every check over the full set of phases.

    Args:
        phases: Phases in canonical order (a Registry iterates as its phases)
        phase_id_scope: "global" treats any repeated phase id as an error;
            "domain" only when the repeat is within the same roadmap slug
        question_types: Allowed InterviewQuestion.type values

    Returns:
        ValidationReport with errors and warnings
    """
    phases = list(phases)
    allowed_types = frozenset(question_types)
    report = ValidationReport()

    _check_duplicate_phase_ids(phases, phase_id_scope, report)
    _check_topic_ids(phases, report)

    for phase in phases:
        _check_phase_fields(phase, report)
        for topic in phase.topics:
            _check_topic_fields(phase, topic, report)
            _check_questions(phase, topic, allowed_types, report)
            _check_code_fences(phase, topic, report)

    return report


def count_fences(text: str) -> int:
    """Count triple-backtick fence markers in free text."""
    return len(FENCE_PATTERN.findall(text))


def _check_duplicate_phase_ids(phases: list[Phase], scope: PhaseIdScope, report: ValidationReport) -> None:
    groups: dict[tuple, list[Phase]] = {}
    for phase in phases:
        if not phase.id.strip():
            continue
        key = (phase.domain, phase.id) if scope == "domain" else (phase.id,)
        groups.setdefault(key, []).append(phase)

    for key, group in groups.items():
        if len(group) < 2:
            continue
        modules = [source for phase in group for source in phase.sources]
        where = f" in roadmap {key[0]!r}" if scope == "domain" and key[0] else ""
        report.add(Finding(
            severity="error",
            code="duplicate-phase-id",
            message=f"Phase id {group[0].id!r}{where} is declared by {len(group)} modules: {', '.join(modules)}",
            phase_id=group[0].id,
            modules=modules,
        ))


def _check_topic_ids(phases: list[Phase], report: ValidationReport) -> None:
    # topic id -> indices of the phases that contain it, first occurrence order
    owners: dict[str, list[int]] = {}

    for idx, phase in enumerate(phases):
        seen: dict[str, None] = {}  # ordered set
        reported: set[str] = set()
        for topic in phase.topics:
            if not topic.id.strip():
                continue
            if topic.id in seen and topic.id not in reported:
                reported.add(topic.id)
                report.add(Finding(
                    severity="error",
                    code="duplicate-topic-in-phase",
                    message=f"Topic id {topic.id!r} appears more than once in phase {phase.id!r}",
                    phase_id=phase.id,
                    topic_id=topic.id,
                    modules=list(phase.sources),
                ))
            seen[topic.id] = None
        for topic_id in seen:
            owners.setdefault(topic_id, []).append(idx)

    for topic_id, phase_indices in owners.items():
        if len(phase_indices) < 2:
            continue
        owning = [phases[i] for i in phase_indices]
        report.add(Finding(
            severity="warning",
            code="duplicate-topic-id",
            message=(
                f"Topic id {topic_id!r} is used by {len(owning)} phases: "
                f"{', '.join(repr(p.id) for p in owning)}"
            ),
            topic_id=topic_id,
            modules=[source for p in owning for source in p.sources],
        ))


def _check_phase_fields(phase: Phase, report: ValidationReport) -> None:
    if not phase.id.strip():
        report.add(_empty_field(phase, None, f"Phase from {', '.join(phase.sources)} has no 'id'"))
    if not phase.topics:
        report.add(_empty_field(phase, None, f"Phase {phase.id!r} has no topics"))


def _check_topic_fields(phase: Phase, topic: Topic, report: ValidationReport) -> None:
    label = topic.id or topic.title or "<unnamed>"
    for field in ("id", "title", "explanation"):
        if not getattr(topic, field).strip():
            report.add(_empty_field(
                phase, topic,
                f"Topic {label!r} in phase {phase.id!r} has an empty '{field}'",
            ))


def _check_questions(phase: Phase, topic: Topic, allowed: frozenset[str], report: ValidationReport) -> None:
    for idx, question in enumerate(topic.interview_questions):
        if question.type not in allowed:
            report.add(Finding(
                severity="error",
                code="unknown-question-type",
                message=(
                    f"interviewQuestions[{idx}] of topic {topic.id!r} has unknown type "
                    f"{question.type!r} (allowed: {', '.join(sorted(allowed))})"
                ),
                phase_id=phase.id,
                topic_id=topic.id,
                modules=list(phase.sources),
            ))
        for part in ("q", "a"):
            if not getattr(question, part).strip():
                report.add(Finding(
                    severity="error",
                    code="empty-question",
                    message=f"interviewQuestions[{idx}] of topic {topic.id!r} has an empty '{part}'",
                    phase_id=phase.id,
                    topic_id=topic.id,
                    modules=list(phase.sources),
                ))


def _check_code_fences(phase: Phase, topic: Topic, report: ValidationReport) -> None:
    for field in _FENCED_FIELDS:
        fences = count_fences(getattr(topic, field))
        if fences % 2:
            report.add(Finding(
                severity="warning",
                code="orphaned-code-fence",
                message=f"'{field}' of topic {topic.id!r} has {fences} code fence markers (unbalanced)",
                phase_id=phase.id,
                topic_id=topic.id,
                modules=list(phase.sources),
            ))


def _empty_field(phase: Phase, topic, message: str) -> Finding:
    return Finding(
        severity="error",
        code="empty-field",
        message=message,
        phase_id=phase.id or None,
        topic_id=topic.id if topic is not None and topic.id else None,
        modules=list(phase.sources),
    )
