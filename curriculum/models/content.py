"""Curriculum content records: roadmaps, phases, topics and interview questions."""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Controlled vocabulary for InterviewQuestion.type. Consumers key UI badges off
# these values, so new types are registered explicitly via question_types=.
QUESTION_TYPES: frozenset[str] = frozenset({
    "conceptual",
    "coding",
    "tricky",
    "scenario",
    "meta",
    "behavioral",
})


class InterviewQuestion(BaseModel):
    """One Q&A pair attached to a topic."""
    model_config = ConfigDict(frozen=True)

    # Plain str so unknown types reach the validator instead of failing here
    type: str
    q: str = ""
    a: str = ""


class Topic(BaseModel):
    """A single lesson within a phase."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    title: str = ""
    explanation: str = ""
    code_example: str = Field(default="", alias="codeExample")  # may embed several fenced snippets
    exercise: str = ""
    common_mistakes: tuple[str, ...] = Field(default=(), alias="commonMistakes")
    interview_questions: tuple[InterviewQuestion, ...] = Field(default=(), alias="interviewQuestions")


class Phase(BaseModel):
    """A top-level curriculum unit grouping related topics."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    title: str = ""
    emoji: str = ""
    description: str = ""
    topics: tuple[Topic, ...] = ()
    domain: Optional[str] = None  # roadmap slug the phase was loaded under
    sources: tuple[str, ...] = ()  # module keys the phase was built from
    synthesized: bool = False  # envelope generated for a bare topic array


class RoadmapEntry(BaseModel):
    """One phase module in a roadmap, plus bare-array modules appended to it."""
    model_config = ConfigDict(frozen=True)

    module: str
    supplements: tuple[str, ...] = ()


class Roadmap(BaseModel):
    """An ordered group of phases published under one slug."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    emoji: str = ""
    color: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()
    coming_soon: bool = Field(default=False, alias="comingSoon")
    modules: tuple[RoadmapEntry, ...] = ()

    @field_validator("modules", mode="before")
    @classmethod
    def expand_module_names(cls, v: Any) -> Any:
        """Allow bare module names as shorthand for entries without supplements."""
        if isinstance(v, (list, tuple)):
            return [{"module": item} if isinstance(item, str) else item for item in v]
        return v


class ContentModule(BaseModel):
    """A phase module after its shape has been resolved.

    ``shape="phase"`` carries the authored envelope in ``envelope``;
    ``shape="topics"`` is a bare topic array with no envelope. Raw topic
    entries stay unvalidated here so the normalizer can report each one.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    shape: Literal["phase", "topics"]
    envelope: dict[str, Any] = Field(default_factory=dict)
    topics: tuple[Any, ...] = ()
    sources: tuple[str, ...] = ()
    domain: Optional[str] = None
