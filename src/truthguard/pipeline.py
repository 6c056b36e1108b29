from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from . import languages
from .config import get_settings
from .explanation import ExplanationGenerator
from .features import FEATURE_NAMES, FeatureExtractor
from .language_detector import LanguageDetector
from .models import AnalysisInput, AnalysisResult
from .normalizer import TextNormalizer
from .profiles import ProfileRegistry, default_registry
from .scoring import HeuristicScorer, Scorer

logger = logging.getLogger(__name__)


class AnalysisError(RuntimeError):
    """Raised when an analysis cannot be attempted at all."""


@dataclass
class AnalysisPipeline:
    detector: LanguageDetector
    normalizer: TextNormalizer
    extractor: FeatureExtractor
    scorer: Scorer
    explainer: ExplanationGenerator
    keyword_limit: int = 5
    clock: Callable[[], float] = field(default=time.perf_counter)

    def analyze(self, payload: AnalysisInput) -> AnalysisResult:
        if payload is None:
            raise AnalysisError("Analysis input is required")
        if not isinstance(payload, AnalysisInput):
            raise AnalysisError(f"Expected AnalysisInput, got {type(payload).__name__}")

        try:
            return self._run(payload)
        except Exception as exc:
            logger.error("Error analyzing news: %s", exc, exc_info=True)
            raise AnalysisError("Failed to analyze news content") from exc

    def _run(self, payload: AnalysisInput) -> AnalysisResult:
        started = self.clock()
        language = languages.canonical_code(payload.language_hint) or self.detector.detect(
            f"{payload.title} {payload.content}"
        )

        title = self.normalizer.normalize(payload.title, language)
        content = self.normalizer.normalize(payload.content, language)

        features = self.extractor.extract(title, content, language)
        score = self.scorer.score(features, language)
        explanation = self.explainer.explain(features, score, language)
        keywords = self.normalizer.extract_keywords(f"{title} {content}", language, limit=self.keyword_limit)

        duration_ms = max(0.0, (self.clock() - started) * 1000)
        logger.info(
            "Analysis completed: language=%s fake=%s confidence=%.2f in %.1f ms",
            language,
            score.is_fake,
            score.confidence,
            duration_ms,
        )
        return AnalysisResult(
            title=payload.title,
            content=payload.content,
            source_url=payload.source_url,
            author=payload.author,
            detected_language=language,
            language_name=languages.display_name(language),
            score=score,
            features=features,
            feature_names=[name for name in FEATURE_NAMES if name in features],
            keywords=keywords,
            explanation=explanation.explanation,
            recommendation=explanation.recommendation,
            duration_ms=duration_ms,
        )


def build_pipeline(
    *,
    registry: Optional[ProfileRegistry] = None,
    detector: Optional[LanguageDetector] = None,
    scorer: Optional[Scorer] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> AnalysisPipeline:
    """Wire the default components around one shared profile registry."""
    settings = get_settings()
    registry = registry or default_registry()
    return AnalysisPipeline(
        detector=detector or LanguageDetector(),
        normalizer=TextNormalizer(registry),
        extractor=FeatureExtractor(registry),
        scorer=scorer or HeuristicScorer(registry=registry),
        explainer=ExplanationGenerator(registry),
        keyword_limit=settings.keyword_limit,
        clock=clock,
    )
