"""Resolve authored phase modules into Phase records.

A phase module is either a Phase envelope (``{id, title, emoji, description,
topics}``) or a bare array of topic records. The shape is resolved once here
into a ContentModule; bare arrays get a synthesized envelope keyed by the
module name. Structural problems are returned as findings, never raised.
"""
import string
from collections.abc import Mapping, Sequence
from types import ModuleType
from typing import Any, Optional, Union

from pydantic import ValidationError

from curriculum.models.content import ContentModule, Phase, Topic
from curriculum.models.report import Finding, ValidationReport


ModuleInput = Union[ContentModule, ModuleType, tuple[str, Any]]

# authored name -> attribute name
_SEQUENCE_FIELDS = {
    "commonMistakes": "common_mistakes",
    "interviewQuestions": "interview_questions",
}


def module_key(name: str) -> str:
    """Turn a dotted module name into a content key (``pkg.js_phase1`` -> ``js-phase1``)."""
    return name.rsplit(".", 1)[-1].replace("_", "-")


def module_from_python(mod: ModuleType) -> tuple[str, Any]:
    """Return ``(key, CONTENT)`` for a Python data module."""
    return module_key(mod.__name__), getattr(mod, "CONTENT", None)


def classify_module(
    key: str,
    raw: Any,
    domain: Optional[str] = None
) -> tuple[Optional[ContentModule], list[Finding]]:
    """
    Resolve the shape of one authored module.

    Args:
        key: Module filename/key, used as fallback id and in findings
        raw: The object the module exports
        domain: Roadmap slug to attach to the resulting phase

    Returns:
        (ContentModule or None, findings)
    """
    if isinstance(raw, Mapping):
        topics = raw.get("topics", ())
        if topics is None:
            topics = ()
        if not isinstance(topics, (list, tuple)):
            return None, [_malformed_module(key, f"'topics' must be a list, got {type(topics).__name__}")]
        envelope = {k: v for k, v in raw.items() if k != "topics"}
        return ContentModule(
            key=key,
            shape="phase",
            envelope=envelope,
            topics=tuple(topics),
            sources=(key,),
            domain=domain,
        ), []

    if isinstance(raw, (list, tuple)):
        return ContentModule(
            key=key,
            shape="topics",
            topics=tuple(raw),
            sources=(key,),
            domain=domain,
        ), []

    return None, [_malformed_module(
        key, f"expected a phase mapping or a list of topics, got {type(raw).__name__}"
    )]


def coerce_module(
    item: ModuleInput,
    domain: Optional[str] = None
) -> tuple[Optional[ContentModule], list[Finding]]:
    """Accept a ContentModule, a Python data module or a ``(key, raw)`` pair."""
    if isinstance(item, ContentModule):
        if domain is not None and item.domain is None:
            item = item.model_copy(update={"domain": domain})
        return item, []
    if isinstance(item, ModuleType):
        key, raw = module_from_python(item)
        return classify_module(key, raw, domain)
    key, raw = item
    return classify_module(key, raw, domain)


def merge_supplements(parent: ContentModule, supplements: Sequence[ContentModule]) -> ContentModule:
    """
    Append the topics of bare-array supplement modules to a parent module.

    The parent keeps its key and envelope; every merged key is recorded in
    ``sources`` so findings can name the file a topic came from.

    Raises:
        ValueError: If a supplement carries its own Phase envelope.
    """
    topics = list(parent.topics)
    sources = list(parent.sources or (parent.key,))
    for supplement in supplements:
        if supplement.shape != "topics":
            raise ValueError(
                f"Supplement module {supplement.key!r} has a Phase envelope; "
                f"only bare topic arrays can be merged into {parent.key!r}"
            )
        topics.extend(supplement.topics)
        sources.extend(supplement.sources or (supplement.key,))
    return parent.model_copy(update={"topics": tuple(topics), "sources": tuple(sources)})


def to_phase(module: ContentModule, domain: Optional[str] = None) -> tuple[Optional[Phase], list[Finding]]:
    """
    Build a Phase from a resolved module.

    Topics that fail structural validation are dropped from the phase and
    reported; the rest of the phase is still built.

    Returns:
        (Phase or None, findings)
    """
    sources = list(module.sources or (module.key,))
    if module.shape == "topics":
        envelope: dict[str, Any] = {"id": module.key, "title": title_from_key(module.key)}
    else:
        envelope = dict(module.envelope)

    phase_id = envelope.get("id") if isinstance(envelope.get("id"), str) else module.key

    findings: list[Finding] = []
    topics: list[Topic] = []
    for idx, raw_topic in enumerate(module.topics):
        topic, topic_findings = _to_topic(raw_topic, idx, phase_id, sources)
        findings.extend(topic_findings)
        if topic is not None:
            topics.append(topic)

    try:
        phase = Phase.model_validate({
            **envelope,
            "topics": topics,
            "domain": module.domain or domain,
            "sources": sources,
            "synthesized": module.shape == "topics",
        })
    except ValidationError as e:
        findings.append(Finding(
            severity="error",
            code="malformed-record",
            message=f"Phase envelope in module {module.key!r} is malformed: {describe_validation_error(e)}",
            phase_id=phase_id,
            modules=sources,
        ))
        return None, findings

    return phase, findings


def normalize_modules(
    items: Sequence[ModuleInput],
    domain: Optional[str] = None
) -> tuple[list[Phase], ValidationReport]:
    """Normalize every module in order, collecting structural findings."""
    report = ValidationReport()
    phases: list[Phase] = []
    for item in items:
        module, findings = coerce_module(item, domain)
        for finding in findings:
            report.add(finding)
        if module is None:
            continue
        phase, findings = to_phase(module, domain)
        for finding in findings:
            report.add(finding)
        if phase is not None:
            phases.append(phase)
    return phases, report


def title_from_key(key: str) -> str:
    """Fallback title for a synthesized phase (``android-phase2b`` -> ``Android Phase2b``)."""
    return string.capwords(key.replace("-", " ").replace("_", " "))


def describe_validation_error(e: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line."""
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _to_topic(
    raw: Any,
    idx: int,
    phase_id: str,
    sources: list[str]
) -> tuple[Optional[Topic], list[Finding]]:
    if not isinstance(raw, Mapping):
        return None, [Finding(
            severity="error",
            code="malformed-record",
            message=f"topics[{idx}] of phase {phase_id!r} must be a mapping, got {type(raw).__name__}",
            phase_id=phase_id,
            modules=sources,
        )]

    topic_id = raw.get("id") if isinstance(raw.get("id"), str) else None
    try:
        topic = Topic.model_validate(raw)
    except ValidationError as e:
        label = topic_id or f"topics[{idx}]"
        return None, [Finding(
            severity="error",
            code="malformed-record",
            message=(
                f"Topic {label!r} in phase {phase_id!r} is malformed: "
                f"{describe_validation_error(e)}"
            ),
            phase_id=phase_id,
            topic_id=topic_id,
            modules=sources,
        )]

    findings = []
    for authored, attr in _SEQUENCE_FIELDS.items():
        if authored not in raw and attr not in raw:
            findings.append(Finding(
                severity="warning",
                code="missing-sequence",
                message=f"Topic {topic.id!r} in phase {phase_id!r} has no '{authored}'; defaulted to empty",
                phase_id=phase_id,
                topic_id=topic.id,
                modules=sources,
            ))
    return topic, findings


def _malformed_module(key: str, detail: str) -> Finding:
    return Finding(
        severity="error",
        code="malformed-module",
        message=f"Module {key!r}: {detail}",
        modules=[key],
    )
