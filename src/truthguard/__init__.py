"""Multilingual fake news heuristics: detection, normalization, features, scoring and explanations."""

from .models import AnalysisInput, AnalysisResult, Explanation, ScoreResult
from .pipeline import AnalysisError, AnalysisPipeline, build_pipeline

__all__ = [
    "AnalysisError",
    "AnalysisInput",
    "AnalysisPipeline",
    "AnalysisResult",
    "Explanation",
    "ScoreResult",
    "build_pipeline",
]

__version__ = "1.0.0"
