from __future__ import annotations

import logging
import re
from collections import Counter
from typing import List, Optional

from .profiles import ProfileRegistry, default_registry

logger = logging.getLogger(__name__)

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
URL_PATTERN = re.compile(r"\b[A-Za-z][A-Za-z0-9+.\-]*:+//\S+")
EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b")
WHITESPACE_PATTERN = re.compile(r"\s+")
REPEATED_PUNCTUATION = re.compile(r"([!?.,;:])\1+")

MIN_KEYWORD_LENGTH = 4


class TextNormalizer:
    """Language-aware canonicalization applied before feature extraction."""

    def __init__(self, registry: Optional[ProfileRegistry] = None) -> None:
        self._registry = registry or default_registry()

    def normalize(self, text: str | None, language: str | None) -> str:
        if not text or not text.strip():
            return ""
        try:
            processed = HTML_TAG_PATTERN.sub(" ", text)
            processed = URL_PATTERN.sub(" ", processed)
            processed = EMAIL_PATTERN.sub(" ", processed)
            for rule in self._registry.get(language).normalization_rules:
                processed = rule.apply(processed)
            processed = WHITESPACE_PATTERN.sub(" ", processed)
            processed = REPEATED_PUNCTUATION.sub(r"\1", processed)
            processed = processed.strip()
        except Exception:  # noqa: BLE001
            logger.exception("Error normalizing text, keeping original")
            return text

        logger.debug("Text normalized. Original length: %d, normalized length: %d", len(text), len(processed))
        return processed

    def extract_keywords(self, text: str | None, language: str | None, limit: int = 5) -> List[str]:
        """Most frequent non-stop-word tokens; ties keep first-occurrence order."""
        if not text or limit <= 0:
            return []
        stop_words = {word.lower() for word in self._registry.get(language).stop_words}
        counts: Counter[str] = Counter()
        for token in text.lower().split():
            token = token.strip("!?.,;:\"'()[]{}«»“”‘’")
            if len(token) >= MIN_KEYWORD_LENGTH and token not in stop_words:
                counts[token] += 1
        return [word for word, _ in counts.most_common(limit)]
