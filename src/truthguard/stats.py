from __future__ import annotations

from typing import Dict, Iterable

from .models import AnalysisResult, AnalysisSummary, LanguageCount


def summarize(results: Iterable[AnalysisResult]) -> AnalysisSummary:
    """Fake/real counts over a batch of results, overall and per detected language."""
    total = 0
    fake = 0
    by_language: Dict[str, LanguageCount] = {}
    for result in results:
        total += 1
        bucket = by_language.setdefault(result.detected_language, LanguageCount())
        bucket.total += 1
        if result.is_fake:
            fake += 1
            bucket.fake += 1

    percentage = round(fake / total * 100, 2) if total else 0.0
    return AnalysisSummary(
        total=total,
        fake_count=fake,
        real_count=total - fake,
        fake_percentage=percentage,
        by_language=dict(sorted(by_language.items())),
    )
