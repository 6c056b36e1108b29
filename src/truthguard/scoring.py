from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Mapping, Protocol

import numpy as np

from . import languages
from .config import get_settings
from .models import ScoreResult
from .profiles import ProfileRegistry, default_registry

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95
DECISION_BOUNDARY = 0.5

DEFAULT_SCORE = ScoreResult(is_fake=False, probability=0.5, confidence=0.5, model_id="default-model")


class Scorer(Protocol):
    def score(self, features: Mapping[str, float], language: str | None) -> ScoreResult:
        ...


def _sigmoid(value: float) -> float:
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    exp_value = math.exp(value)
    return exp_value / (1.0 + exp_value)


def confidence_from_probability(probability: float) -> float:
    distance = abs(probability - DECISION_BOUNDARY) * 2
    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, distance))


@dataclass
class HeuristicScorer:
    """
    Linear-weight heuristic: per-language weights, logistic squash, then
    re-centred around the base fake rate.
    """

    registry: ProfileRegistry = field(default_factory=default_registry)
    base_rate: float | None = None
    steepness: float | None = None
    spread: float | None = None

    def __post_init__(self) -> None:
        settings = get_settings()
        if self.base_rate is None:
            self.base_rate = settings.base_rate
        if self.steepness is None:
            self.steepness = settings.score_steepness
        if self.spread is None:
            self.spread = settings.score_spread

    def score(self, features: Mapping[str, float], language: str | None) -> ScoreResult:
        try:
            probability = self.probability(features, language)
            is_fake = probability > DECISION_BOUNDARY
            confidence = confidence_from_probability(probability)
            model = languages.model_id(language)
        except Exception:  # noqa: BLE001
            logger.exception("Error scoring features for language %s; returning default score", language)
            return DEFAULT_SCORE

        logger.info(
            "Prediction result - fake: %s, probability: %.3f, confidence: %.2f, model: %s",
            is_fake,
            probability,
            confidence,
            model,
        )
        return ScoreResult(is_fake=is_fake, probability=probability, confidence=confidence, model_id=model)

    def probability(self, features: Mapping[str, float], language: str | None) -> float:
        weights = self.registry.get(language).feature_weights
        names = [name for name in weights if name in features]
        if not names:
            return float(self.base_rate)

        weight_vector = np.array([weights[name] for name in names], dtype=float)
        total_weight = float(np.abs(weight_vector).sum())
        if total_weight == 0:
            return float(self.base_rate)

        values = np.nan_to_num(
            np.array([features[name] for name in names], dtype=float),
            nan=0.0,
            posinf=0.0,
            neginf=0.0,
        )
        with np.errstate(over="ignore", invalid="ignore"):
            normalized = float(np.dot(values, weight_vector)) / total_weight
        if math.isnan(normalized):
            normalized = 0.0

        squashed = _sigmoid(self.steepness * normalized)
        probability = self.base_rate + (squashed - 0.5) * self.spread
        return min(1.0, max(0.0, probability))
