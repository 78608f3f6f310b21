"""Lookup and search over a loaded Registry."""
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from curriculum.models.content import InterviewQuestion, Phase, Topic
from curriculum.tools.registry import Registry, TopicRef


@dataclass(frozen=True)
class QuestionRef:
    """An interview question with the topic and phase it belongs to."""
    phase: Phase
    topic: Topic
    question: InterviewQuestion


@dataclass(frozen=True)
class Adjacent:
    """Neighbours of a topic in the canonical lesson sequence."""
    previous: Optional[TopicRef]
    next: Optional[TopicRef]


def search(registry: Registry, term: str) -> Iterator[Topic]:
    """
    Yield topics whose title or explanation contains ``term``.

    Matching is case-insensitive substring matching. The scan is lazy and
    holds no cursor state; call again to restart. A blank term matches
    nothing.
    """
    needle = term.strip().casefold()
    if not needle:
        return
    for ref in registry.iter_topics():
        if needle in ref.topic.title.casefold() or needle in ref.topic.explanation.casefold():
            yield ref.topic


def list_by_type(registry: Registry, question_type: str) -> list[QuestionRef]:
    """Question bank for one InterviewQuestion.type, in canonical order."""
    return [
        QuestionRef(ref.phase, ref.topic, question)
        for ref in registry.iter_topics()
        for question in ref.topic.interview_questions
        if question.type == question_type
    ]


def get_adjacent(registry: Registry, topic_id: str) -> Optional[Adjacent]:
    """
    Previous and next lesson for linear navigation.

    Navigation crosses phase boundaries: the last topic of a phase links to
    the first topic of the next one. A repeated topic id resolves to its
    first occurrence. Returns None for an unknown id.
    """
    sequence = list(registry.iter_topics())
    for idx, ref in enumerate(sequence):
        if ref.topic.id == topic_id:
            return Adjacent(
                previous=sequence[idx - 1] if idx > 0 else None,
                next=sequence[idx + 1] if idx + 1 < len(sequence) else None,
            )
    return None


def count_questions(registry: Registry) -> dict[str, int]:
    """Number of interview questions per type."""
    return dict(Counter(
        question.type
        for ref in registry.iter_topics()
        for question in ref.topic.interview_questions
    ))
