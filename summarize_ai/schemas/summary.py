import enum
from typing import Optional

from pydantic import BaseModel, field_validator


class ProviderName(str, enum.Enum):
    GEMINI = "gemini"
    OPENAI = "openai"


class SummaryLength(str, enum.Enum):
    BRIEF = "brief"
    MEDIUM = "medium"
    DETAILED = "detailed"


class SummaryTone(str, enum.Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ACADEMIC = "academic"
    SIMPLE = "simple"


class SummaryFormat(str, enum.Enum):
    PARAGRAPH = "paragraph"
    BULLETS = "bullets"


class SummarizationConfig(BaseModel):
    """Length, tone and output format chosen for one summary."""
    length: SummaryLength = SummaryLength.MEDIUM
    tone: SummaryTone = SummaryTone.PROFESSIONAL
    format: SummaryFormat = SummaryFormat.PARAGRAPH

    class Config:
        frozen = True


class SummaryRequest(BaseModel):
    """Text to summarize plus the options to apply (used internally)."""
    source_text: str
    config: SummarizationConfig = SummarizationConfig()

    @field_validator("source_text")
    @classmethod
    def source_text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("source_text must not be empty")
        return value

    class Config:
        frozen = True


class SummaryStats(BaseModel):
    original_words: int
    summary_words: int
    reduction_percent: int

    class Config:
        frozen = True


class SummaryResult(BaseModel):
    """One completed summarization, as kept in the session history."""
    id: str
    original_text: str
    summary_text: str
    timestamp: int  # epoch millis
    config: SummarizationConfig
    stats: SummaryStats

    class Config:
        frozen = True


class SummarizeBody(BaseModel):
    """Body for POST /summaries."""
    text: str
    config: SummarizationConfig = SummarizationConfig()


class StatsBody(BaseModel):
    original_text: str
    summary_text: str


class InstructionRead(BaseModel):
    instruction: str


class ErrorRead(BaseModel):
    detail: str
    error: Optional[str] = None
