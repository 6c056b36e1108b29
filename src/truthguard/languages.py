"""
Static catalog of the languages the analysis pipeline knows about.
"""

from __future__ import annotations

from enum import Enum

from .models import LanguageInfo


class LanguageCode(str, Enum):
    EN = "en"
    HI = "hi"
    ES = "es"
    FR = "fr"
    AR = "ar"
    DE = "de"
    ZH = "zh"
    JA = "ja"
    KO = "ko"
    PT = "pt"
    RU = "ru"
    IT = "it"


SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(code.value for code in LanguageCode)

UNKNOWN_NAME = "Unknown"
GENERIC_MODEL_ID = "truthguard-generic-v1.0"
DEFAULT_ACCURACY = 0.85

DISPLAY_NAMES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "es": "Spanish",
    "fr": "French",
    "ar": "Arabic",
    "de": "German",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "pt": "Portuguese",
    "ru": "Russian",
    "it": "Italian",
}

MODEL_ACCURACY: dict[str, float] = {
    "en": 0.92,
    "hi": 0.89,
    "es": 0.91,
    "fr": 0.90,
    "ar": 0.88,
    "de": 0.91,
    "zh": 0.87,
    "ja": 0.86,
    "ko": 0.85,
    "pt": 0.90,
    "ru": 0.89,
    "it": 0.91,
}


def canonical_code(code: str | None) -> str:
    """Lower-case a language tag and drop its region part (``zh-CN`` -> ``zh``)."""
    if not code:
        return ""
    return code.strip().lower().replace("_", "-").split("-", 1)[0]


def is_supported(code: str | None) -> bool:
    return canonical_code(code) in DISPLAY_NAMES


def display_name(code: str | None) -> str:
    return DISPLAY_NAMES.get(canonical_code(code), UNKNOWN_NAME)


def model_id(code: str | None) -> str:
    canonical = canonical_code(code)
    if canonical not in DISPLAY_NAMES:
        return GENERIC_MODEL_ID
    return f"truthguard-bert-{canonical}-v1.0"


def model_accuracy(code: str | None) -> float:
    return MODEL_ACCURACY.get(canonical_code(code), DEFAULT_ACCURACY)


def language_info(code: str) -> LanguageInfo:
    return LanguageInfo(
        code=canonical_code(code) or code,
        name=display_name(code),
        model_id=model_id(code),
        model_available=is_supported(code),
        accuracy=model_accuracy(code),
    )


def language_catalog() -> list[LanguageInfo]:
    return [language_info(code) for code in SUPPORTED_LANGUAGES]
