"""
Language profile loader.

Each supported language ships a JSON file under ``data/profiles`` bundling the
word lists, normalization rules, feature weights and UI strings that drive all
language-specific behaviour. ``_generic.json`` provides the defaults every
other file is merged over.
"""

from __future__ import annotations

import json
import logging
import math
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .config import get_settings
from .languages import canonical_code

logger = logging.getLogger(__name__)

GENERIC_KEY = "generic"
GENERIC_FILE = "_generic.json"
STRINGS_FALLBACK = "en"
DEFAULT_PROFILES_DIR = Path(__file__).resolve().parent / "data" / "profiles"

# Languages expected to carry their own word lists and weight tables.
DEDICATED_LANGUAGES = ("en", "hi", "es", "fr", "ar")

REQUIRED_STRINGS = (
    "likely_fake",
    "likely_real",
    "confidence",
    "key_factors",
    "factor_sensational",
    "factor_clickbait",
    "factor_exclamation",
    "factor_capitals",
    "high_confidence_recommendation",
    "medium_confidence_recommendation",
    "low_confidence_recommendation",
)


class ProfileError(RuntimeError):
    """Raised when the profile data set cannot be loaded at all."""


@dataclass(frozen=True)
class NormalizationRule:
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class LanguageProfile:
    code: str
    positive_words: Tuple[str, ...] = ()
    negative_words: Tuple[str, ...] = ()
    sensational_words: Tuple[str, ...] = ()
    clickbait_phrases: Tuple[str, ...] = ()
    stop_words: Tuple[str, ...] = ()
    normalization_rules: Tuple[NormalizationRule, ...] = ()
    feature_weights: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    strings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ProfileRegistry:
    generic: LanguageProfile
    profiles: Mapping[str, LanguageProfile] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, code: str | None) -> LanguageProfile:
        return self.profiles.get(canonical_code(code), self.generic)

    def has_profile(self, code: str | None) -> bool:
        return canonical_code(code) in self.profiles

    def codes(self) -> List[str]:
        return sorted(self.profiles)


def load_json(path: Path) -> Any:
    """Load a JSON file with UTF-8 encoding."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _compile_rules(value: Any, source: str) -> Tuple[NormalizationRule, ...]:
    rules: List[NormalizationRule] = []
    if not isinstance(value, list):
        return ()
    for item in value:
        if not isinstance(item, dict) or not isinstance(item.get("pattern"), str):
            logger.warning("Skip malformed normalization rule in %s: %r", source, item)
            continue
        flags = re.U | (re.I if item.get("ignore_case") else 0)
        try:
            compiled = re.compile(item["pattern"], flags)
        except re.error as exc:
            logger.warning("Skip invalid pattern %s in %s: %s", item["pattern"], source, exc)
            continue
        rules.append(NormalizationRule(compiled, str(item.get("replacement", ""))))
    return tuple(rules)


def _words(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(word) for word in value if str(word).strip())


def _weights(value: Any, source: str) -> Mapping[str, float]:
    weights: Dict[str, float] = {}
    if isinstance(value, dict):
        for name, weight in value.items():
            try:
                weights[str(name)] = float(weight)
            except (TypeError, ValueError):
                logger.warning("Skip non-numeric weight %s=%r in %s", name, weight, source)
    return MappingProxyType(weights)


def build_profile(
    code: str,
    raw: Mapping[str, Any],
    defaults: Mapping[str, Any],
    strings: Mapping[str, str],
) -> LanguageProfile:
    """Merge ``raw`` over ``defaults`` and freeze the result."""
    merged = {**defaults, **raw}
    return LanguageProfile(
        code=code,
        positive_words=_words(merged.get("positive_words")),
        negative_words=_words(merged.get("negative_words")),
        sensational_words=_words(merged.get("sensational_words")),
        clickbait_phrases=_words(merged.get("clickbait_phrases")),
        stop_words=_words(merged.get("stop_words")),
        normalization_rules=_compile_rules(merged.get("normalization_rules"), code),
        feature_weights=_weights(merged.get("feature_weights"), code),
        strings=MappingProxyType({**strings, **(raw.get("strings") or {})}),
    )


def load_profiles(profiles_dir: str | os.PathLike[str] | None = None) -> ProfileRegistry:
    """
    Load every ``*.json`` profile in ``profiles_dir`` into a read-only registry.
    Files that fail to parse are skipped with a warning.
    """
    data_path = Path(profiles_dir) if profiles_dir else DEFAULT_PROFILES_DIR
    generic_path = data_path / GENERIC_FILE
    if not generic_path.exists():
        raise ProfileError(f"Generic profile {generic_path} does not exist")

    try:
        generic_raw = load_json(generic_path)
    except (OSError, ValueError) as exc:
        raise ProfileError(f"Failed to load generic profile {generic_path}: {exc}") from exc

    raw_profiles: Dict[str, Dict[str, Any]] = {}
    for fname in sorted(data_path.glob("*.json")):
        if fname.name == GENERIC_FILE:
            continue
        try:
            data = load_json(fname)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load profile %s: %s", fname, exc)
            continue
        if not isinstance(data, dict):
            logger.warning("Profile %s is not a JSON object; skipped", fname)
            continue
        code = canonical_code(data.get("code") or fname.stem)
        raw_profiles[code] = data

    base_strings = dict((raw_profiles.get(STRINGS_FALLBACK) or {}).get("strings") or {})
    generic = build_profile(GENERIC_KEY, {}, generic_raw, base_strings)
    profiles = {
        code: build_profile(code, raw, generic_raw, base_strings)
        for code, raw in raw_profiles.items()
    }

    logger.info(
        "Loaded %d language profiles from %s (%s)",
        len(profiles),
        data_path,
        ", ".join(sorted(profiles)) or "none",
    )
    return ProfileRegistry(generic=generic, profiles=MappingProxyType(profiles))


@lru_cache(1)
def default_registry() -> ProfileRegistry:
    """Process-wide registry, loaded on first use and never mutated."""
    return load_profiles(get_settings().profiles_dir)


def validate_profiles(registry: ProfileRegistry) -> Dict[str, List[str]]:
    """Return the problems found per profile; an empty dict means the data set is sound."""
    problems: Dict[str, List[str]] = {}
    for profile in [registry.generic, *(registry.get(code) for code in registry.codes())]:
        issues: List[str] = []
        missing = [key for key in REQUIRED_STRINGS if key not in profile.strings]
        if missing:
            issues.append(f"missing strings: {', '.join(missing)}")
        bad_weights = [name for name, weight in profile.feature_weights.items() if not math.isfinite(weight)]
        if bad_weights:
            issues.append(f"non-finite weights: {', '.join(bad_weights)}")
        if profile.code in DEDICATED_LANGUAGES:
            for attr in ("positive_words", "negative_words", "sensational_words", "clickbait_phrases"):
                if not getattr(profile, attr):
                    issues.append(f"empty {attr}")
        if issues:
            problems[profile.code] = issues
    for code in DEDICATED_LANGUAGES:
        if not registry.has_profile(code):
            problems.setdefault(code, []).append("profile file missing")
    return problems
