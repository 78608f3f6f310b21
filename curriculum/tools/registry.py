"""Content registry: aggregate phase modules into one immutable, indexed corpus."""
import logging
import threading
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from curriculum.models.content import QUESTION_TYPES, Phase, Topic
from curriculum.models.report import Finding, ValidationReport
from curriculum.tools.normalize import ModuleInput, normalize_modules
from curriculum.tools.validate import PhaseIdScope, validate


logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the corpus has at least one error-severity finding."""

    def __init__(self, message: str, report: Optional[ValidationReport] = None):
        super().__init__(message)
        self.report = report if report is not None else ValidationReport()


@dataclass(frozen=True)
class TopicRef:
    """A topic together with the phase that owns it."""
    phase: Phase
    topic: Topic


class Registry:
    """
    Immutable aggregate of every phase and topic in a corpus.

    Built once by ``load()``; there are no mutators. A content change means
    building a new Registry (see RegistryHandle for swapping one in).
    """

    def __init__(self, phases: Sequence[Phase], report: Optional[ValidationReport] = None):
        self._phases: tuple[Phase, ...] = tuple(phases)
        self._report = report if report is not None else ValidationReport()

        self._phases_by_id: dict[str, Phase] = {}
        topics_by_id: dict[str, list[TopicRef]] = {}
        for phase in self._phases:
            # first registration wins, matching input module order
            self._phases_by_id.setdefault(phase.id, phase)
            for topic in phase.topics:
                topics_by_id.setdefault(topic.id, []).append(TopicRef(phase, topic))
        self._topics_by_id: dict[str, tuple[TopicRef, ...]] = {
            topic_id: tuple(refs) for topic_id, refs in topics_by_id.items()
        }

    @property
    def report(self) -> ValidationReport:
        """A copy of the findings recorded when the registry was built."""
        return self._report.model_copy(deep=True)

    def get_phase(self, phase_id: str) -> Optional[Phase]:
        return self._phases_by_id.get(phase_id)

    def get_topic(self, topic_id: str) -> Optional[TopicRef]:
        """Resolve a topic id to its first registered occurrence."""
        refs = self._topics_by_id.get(topic_id)
        return refs[0] if refs else None

    def find_all_topics(self, topic_id: str) -> list[TopicRef]:
        """Every occurrence of a topic id, in registration order."""
        return list(self._topics_by_id.get(topic_id, ()))

    def list_phases(self) -> tuple[Phase, ...]:
        """Phases in input module order (the canonical curriculum sequence)."""
        return self._phases

    def iter_topics(self) -> Iterator[TopicRef]:
        for phase in self._phases:
            for topic in phase.topics:
                yield TopicRef(phase, topic)

    def __iter__(self) -> Iterator[Phase]:
        return iter(self._phases)

    def __len__(self) -> int:
        return len(self._phases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return self._phases == other._phases

    __hash__ = None

    def __repr__(self) -> str:
        topics = sum(len(p.topics) for p in self._phases)
        return f"Registry(phases={len(self._phases)}, topics={topics})"


def build_registry(
    modules: Sequence[ModuleInput],
    *,
    domain: Optional[str] = None,
    phase_id_scope: PhaseIdScope = "global",
    question_types: Iterable[str] = QUESTION_TYPES,
    findings: Iterable[Finding] = ()
) -> Registry:
    """
    Normalize and validate modules without failing on errors.

    ``findings`` are problems already found while collecting the modules
    (see ``roadmap_modules``); they lead the report.

    The returned registry carries the full report; callers that must not
    serve a broken corpus use ``load()`` instead.
    """
    report = ValidationReport()
    for finding in findings:
        report.add(finding)

    if not modules:
        report.add(Finding(
            severity="error",
            code="empty-corpus",
            message="No phase modules were supplied",
        ))
        return Registry([], report)

    phases, normalize_report = normalize_modules(modules, domain)
    report = report.merge(normalize_report).merge(validate(
        phases,
        phase_id_scope=phase_id_scope,
        question_types=question_types,
    ))
    return Registry(phases, report)


def load(
    modules: Sequence[ModuleInput],
    *,
    domain: Optional[str] = None,
    phase_id_scope: PhaseIdScope = "global",
    question_types: Iterable[str] = QUESTION_TYPES,
    findings: Iterable[Finding] = ()
) -> Registry:
    """
    Build a Registry from the full ordered list of phase modules.

    Args:
        modules: ContentModules, Python data modules exporting ``CONTENT``,
            or ``(key, raw)`` pairs, in canonical curriculum order
        domain: Roadmap slug attached to phases that do not carry one
        phase_id_scope: See ``validate()``
        question_types: Allowed InterviewQuestion.type values
        findings: Problems found while collecting the modules

    Returns:
        Registry (warnings available on ``registry.report``)

    Raises:
        LoadError: If ``modules`` is empty or any error finding exists.
    """
    registry = build_registry(
        modules,
        domain=domain,
        phase_id_scope=phase_id_scope,
        question_types=question_types,
        findings=findings,
    )
    report = registry.report

    for warning in report.warnings:
        logger.warning(f"[{warning.code}] {warning.message}")

    if not report.ok:
        for error in report.errors:
            logger.error(f"[{error.code}] {error.message}")
        preview = "; ".join(e.message for e in report.errors[:3])
        more = f" (+{len(report.errors) - 3} more)" if len(report.errors) > 3 else ""
        raise LoadError(
            f"Content corpus has {len(report.errors)} error(s): {preview}{more}",
            report,
        )

    topics = sum(len(p.topics) for p in registry)
    logger.info(
        f"Loaded {len(registry)} phases and {topics} topics "
        f"({len(report.warnings)} warning(s))"
    )
    return registry


class RegistryHandle:
    """
    Holds the live Registry for a process and swaps in rebuilt ones.

    Readers take ``handle.current`` and keep using that instance; a reload
    never mutates it. If the rebuilt corpus fails to load, the previous
    registry stays live and the LoadError propagates.
    """

    def __init__(self, registry: Registry):
        self._registry = registry
        self._lock = threading.Lock()

    @property
    def current(self) -> Registry:
        return self._registry

    def reload(self, modules: Sequence[ModuleInput], **kwargs) -> Registry:
        with self._lock:
            registry = load(modules, **kwargs)
            self._registry = registry
        logger.info(f"Swapped in rebuilt registry: {registry!r}")
        return registry
