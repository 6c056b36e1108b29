from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from .models import Explanation, ScoreResult
from .profiles import ProfileRegistry, default_registry

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6
EXCLAMATION_LIMIT = 3
CAPITAL_RATIO_LIMIT = 0.3


def key_factors(features: Mapping[str, float]) -> List[str]:
    """String keys of the factors worth pointing out to the reader."""
    factors: List[str] = []
    if features.get("sensational_words", 0.0) > 0:
        factors.append("factor_sensational")
    if features.get("clickbait_phrases", 0.0) > 0:
        factors.append("factor_clickbait")
    if features.get("exclamation_count", 0.0) > EXCLAMATION_LIMIT:
        factors.append("factor_exclamation")
    if features.get("capital_ratio", 0.0) > CAPITAL_RATIO_LIMIT:
        factors.append("factor_capitals")
    return factors


def recommendation_key(confidence: float) -> str:
    if confidence > HIGH_CONFIDENCE:
        return "high_confidence_recommendation"
    if confidence > MEDIUM_CONFIDENCE:
        return "medium_confidence_recommendation"
    return "low_confidence_recommendation"


class ExplanationGenerator:
    def __init__(self, registry: Optional[ProfileRegistry] = None) -> None:
        self._registry = registry or default_registry()

    def _text(self, key: str, language: str | None) -> str:
        strings = self._registry.get(language).strings
        return strings.get(key) or self._registry.get("en").strings.get(key, key)

    def explain(self, features: Mapping[str, float], score: ScoreResult, language: str | None) -> Explanation:
        verdict = self._text("likely_fake" if score.is_fake else "likely_real", language)
        recommendation = self._text(recommendation_key(score.confidence), language)
        try:
            parts = [f"{verdict} ({score.confidence * 100:.1f}% {self._text('confidence', language)})"]
            factors = key_factors(features)
            if factors:
                parts.append(f"\n\n{self._text('key_factors', language)}:\n")
                parts.extend(f"• {self._text(factor, language)}\n" for factor in factors)
            explanation = "".join(parts)
        except Exception:  # noqa: BLE001
            logger.exception("Error building explanation for language %s", language)
            explanation = verdict
        return Explanation(explanation=explanation, recommendation=recommendation)
