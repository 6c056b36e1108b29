"""
Thin adaptation layer around the langdetect n-gram classifier.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory

from . import languages
from .config import get_settings

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

Classifier = Callable[[str], List[Any]]


@lru_cache(maxsize=None)
def shared_factory(seed: int = 0) -> DetectorFactory:
    """Load the classifier profiles once per process; the factory is only read afterwards."""
    factory = DetectorFactory()
    factory.load_profile(PROFILES_DIRECTORY)
    factory.set_seed(seed)
    logger.info("Language classifier loaded with %d profiles", len(factory.get_lang_list()))
    return factory


def clean_for_detection(text: str) -> str:
    """Keep letters (with their combining marks) and whitespace only."""
    # Category M is kept: Devanagari and Arabic vowel signs count towards the minimum length.
    kept = [
        ch
        for ch in text
        if ch.isalpha() or ch.isspace() or unicodedata.category(ch).startswith("M")
    ]
    return _WHITESPACE.sub(" ", "".join(kept)).strip()


class LanguageDetector:
    """Classify text into a language code, falling back to English when unsure."""

    def __init__(
        self,
        *,
        classifier: Optional[Classifier] = None,
        fallback: str | None = None,
        min_length: int | None = None,
        min_probability: float | None = None,
    ) -> None:
        settings = get_settings()
        self._fallback = fallback or settings.fallback_language
        self._min_length = settings.min_detection_length if min_length is None else min_length
        self._min_probability = (
            settings.detection_min_probability if min_probability is None else min_probability
        )
        self._classifier = classifier or self._langdetect_classifier(settings.detection_seed)

    @staticmethod
    def _langdetect_classifier(seed: int) -> Classifier:
        factory = shared_factory(seed)

        def classify(text: str) -> List[Any]:
            detector = factory.create()
            detector.append(text)
            return detector.get_probabilities()

        return classify

    @property
    def fallback(self) -> str:
        return self._fallback

    def detect(self, text: str | None) -> str:
        if not text or not text.strip():
            return self._fallback
        try:
            cleaned = clean_for_detection(text)
            if len(cleaned) < self._min_length:
                logger.debug("Text too short for detection (%d chars), using %s", len(cleaned), self._fallback)
                return self._fallback

            candidates = self._classifier(cleaned)
            if not candidates:
                logger.warning("Language classifier returned no candidates, defaulting to %s", self._fallback)
                return self._fallback

            best = candidates[0]
            if best.prob < self._min_probability:
                logger.warning(
                    "Language detection not reliable (%s=%.3f), defaulting to %s",
                    best.lang,
                    best.prob,
                    self._fallback,
                )
                return self._fallback

            code = languages.canonical_code(best.lang) or self._fallback
            logger.info("Detected language: %s with confidence: %.3f", code, best.prob)
            return code
        except Exception:  # noqa: BLE001
            logger.exception("Error detecting language, defaulting to %s", self._fallback)
            return self._fallback

    @staticmethod
    def is_supported(code: str | None) -> bool:
        return languages.is_supported(code)

    @staticmethod
    def display_name(code: str | None) -> str:
        return languages.display_name(code)

    def describe(self, text: str | None) -> Dict[str, Any]:
        code = self.detect(text)
        info = languages.language_info(code)
        return {
            "detected_language": code,
            "language_name": info.name,
            "is_supported": self.is_supported(code),
            "model_available": info.model_available,
            "model_id": info.model_id,
            "accuracy": info.accuracy,
        }
