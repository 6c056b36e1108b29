"""
Numeric signals computed from a normalized title and body.

The readability and sentiment values are deliberately simple proxies: the
weight tables in the language profiles are tuned against exactly these
definitions, so they are kept as-is rather than replaced by real linguistic
models.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from .models import FeatureVector
from .profiles import LanguageProfile, ProfileRegistry, default_registry

logger = logging.getLogger(__name__)

FEATURE_NAMES: tuple[str, ...] = (
    "title_length",
    "content_length",
    "title_word_count",
    "content_word_count",
    "title_sentiment",
    "content_sentiment",
    "title_readability",
    "content_readability",
    "exclamation_count",
    "question_count",
    "capital_ratio",
    "number_count",
    "has_url",
    "has_author",
    "sensational_words",
    "clickbait_phrases",
)

URL_MARKERS = ("http://", "https://", "www.")
AUTHOR_INDICATORS = ("by", "author", "written by", "reported by")

SENTENCE_SPLIT = re.compile(r"[.!?]+")
VOWEL_RUNS = re.compile(r"[aeiou]+")

# Flesch Reading Ease constants
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6


def empty_vector() -> FeatureVector:
    return {name: 0.0 for name in FEATURE_NAMES}


def _segments(pattern: re.Pattern, text: str) -> List[str]:
    """Split on ``pattern`` keeping a leading empty segment and dropping trailing ones."""
    if not text:
        return []
    parts = pattern.split(text)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def word_count(text: str) -> int:
    return len(text.split())


def sentiment(text: str, positive: Iterable[str], negative: Iterable[str]) -> float:
    positive_set = {word.lower() for word in positive}
    negative_set = {word.lower() for word in negative}
    positive_hits = 0
    negative_hits = 0
    for token in text.lower().split():
        if token in positive_set:
            positive_hits += 1
        if token in negative_set:
            negative_hits += 1
    total = positive_hits + negative_hits
    if total == 0:
        return 0.0
    return (positive_hits - negative_hits) / total


def readability(text: str) -> float:
    sentences = len(_segments(SENTENCE_SPLIT, text))
    words = word_count(text)
    if sentences == 0 or words == 0:
        return 0.0
    syllables = len(_segments(VOWEL_RUNS, text.lower()))
    return (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * (words / sentences)
        - FLESCH_SYLLABLE_WEIGHT * (syllables / words)
    )


def capital_ratio(text: str) -> float:
    if not text:
        return 0.0
    return sum(1 for ch in text if ch.isupper()) / len(text)


def count_contained(text: str, entries: Sequence[str]) -> float:
    """Number of entries that occur at least once in ``text`` (case-insensitive)."""
    lowered = text.lower()
    return float(sum(1 for entry in entries if entry and entry.lower() in lowered))


class FeatureExtractor:
    def __init__(self, registry: Optional[ProfileRegistry] = None) -> None:
        self._registry = registry or default_registry()

    def extract(self, title: str | None, content: str | None, language: str | None) -> FeatureVector:
        title = title or ""
        content = content or ""
        try:
            return self._extract(title, content, self._registry.get(language))
        except Exception:  # noqa: BLE001
            logger.exception("Feature extraction failed for language %s; using zero vector", language)
            return empty_vector()

    def _extract(self, title: str, content: str, profile: LanguageProfile) -> FeatureVector:
        combined = f"{title} {content}"
        lowered = combined.lower()

        features = empty_vector()
        features["title_length"] = float(len(title))
        features["content_length"] = float(len(content))
        features["title_word_count"] = float(word_count(title))
        features["content_word_count"] = float(word_count(content))

        features["title_sentiment"] = sentiment(title, profile.positive_words, profile.negative_words)
        features["content_sentiment"] = sentiment(content, profile.positive_words, profile.negative_words)

        features["title_readability"] = readability(title)
        features["content_readability"] = readability(content)

        features["exclamation_count"] = float(combined.count("!"))
        features["question_count"] = float(combined.count("?"))
        features["capital_ratio"] = capital_ratio(combined)
        features["number_count"] = float(sum(1 for ch in combined if ch.isdigit()))

        features["has_url"] = 1.0 if any(marker in lowered for marker in URL_MARKERS) else 0.0
        features["has_author"] = 1.0 if any(marker in lowered for marker in AUTHOR_INDICATORS) else 0.0

        features["sensational_words"] = count_contained(combined, profile.sensational_words)
        features["clickbait_phrases"] = count_contained(combined, profile.clickbait_phrases)

        logger.debug("Extracted %d features for language %s", len(features), profile.code)
        return features
