from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TITLE_LENGTH = 500
MAX_CONTENT_LENGTH = 10000

FeatureVector = Dict[str, float]


class AnalysisInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)
    source_url: str | None = None
    author: str | None = None
    language_hint: str | None = None

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("language_hint")
    @classmethod
    def _normalize_hint(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().lower()
        return value or None


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    is_fake: bool
    probability: float = Field(..., ge=0.0, le=1.0)
    confidence: float = Field(..., ge=0.1, le=0.95)
    model_id: str


class Explanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    explanation: str
    recommendation: str


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    source_url: str | None = None
    author: str | None = None
    detected_language: str
    language_name: str
    score: ScoreResult
    features: FeatureVector = Field(default_factory=dict)
    feature_names: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    explanation: str
    recommendation: str
    duration_ms: float = Field(0.0, ge=0.0)

    @property
    def is_fake(self) -> bool:
        return self.score.is_fake

    @property
    def confidence(self) -> float:
        return self.score.confidence


class LanguageInfo(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    code: str
    name: str
    model_id: str
    model_available: bool
    accuracy: float = Field(..., ge=0.0, le=1.0)


class LanguageCount(BaseModel):
    total: int = 0
    fake: int = 0


class AnalysisSummary(BaseModel):
    total: int = 0
    fake_count: int = 0
    real_count: int = 0
    fake_percentage: float = 0.0
    by_language: Dict[str, LanguageCount] = Field(default_factory=dict)
