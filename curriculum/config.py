"""Settings for loading the content corpus, read from the environment (.env supported)."""
import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from curriculum.models.content import QUESTION_TYPES


class Settings(BaseModel):
    content_package: str = "curriculum.content"
    phase_id_scope: Literal["global", "domain"] = "global"
    extra_question_types: list[str] = Field(default_factory=list)
    log_level: str = "WARNING"

    @property
    def question_types(self) -> frozenset[str]:
        """Built-in vocabulary plus any types registered through the environment."""
        return QUESTION_TYPES | frozenset(self.extra_question_types)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env (if present) and build Settings once per process."""
    load_dotenv()
    extra = os.getenv("CURRICULUM_EXTRA_QUESTION_TYPES", "")
    return Settings(
        content_package=os.getenv("CURRICULUM_CONTENT_PACKAGE", "curriculum.content"),
        phase_id_scope=os.getenv("CURRICULUM_PHASE_ID_SCOPE", "global").lower(),
        extra_question_types=[t.strip() for t in extra.split(",") if t.strip()],
        log_level=os.getenv("CURRICULUM_LOG_LEVEL", "WARNING").upper(),
    )
