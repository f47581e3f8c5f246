# models.py
from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

Sentiment = Literal["positive", "negative"]


class StarFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    situation: bool = False
    task: bool = False
    action: bool = False
    result: bool = False

    @property
    def hits(self) -> int:
        return sum((self.situation, self.task, self.action, self.result))


class AnalysisResult(BaseModel):
    """
    Heuristic metrics for one answer.
    Recomputed on every analysis run, never updated in place.
    """

    model_config = ConfigDict(frozen=True)

    kw_overlap: float = Field(0.0, ge=0.0, le=1.0)
    filler_count: int = Field(0, ge=0)
    star: StarFlags = StarFlags()
    star_score: float = Field(0.0, ge=0.0, le=1.0)
    sentiment: Sentiment = "positive"
    avg_words_per_sentence: float = Field(0.0, ge=0.0)
    score: int = Field(0, ge=0)


class AnswerAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    question: str
    answer: str
    analysis: AnalysisResult


class Report(BaseModel):
    """
    Aggregate of every per-answer analysis.
    A new report fully replaces the previous one.
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[AnswerAnalysis, ...] = ()
    overall_score: int = 0
    keyword_hits: int = 0
    keywords: Tuple[str, ...] = ()
