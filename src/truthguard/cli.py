"""
Command line entry point for running analyses and inspecting language data.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from . import languages
from .config import configure_logging, get_settings
from .language_detector import LanguageDetector
from .models import AnalysisInput, AnalysisResult
from .pipeline import build_pipeline
from .profiles import default_registry, load_profiles, validate_profiles
from .stats import summarize

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def _emit(payload: Any, *, compact: bool = False) -> None:
    indent = None if compact else 2
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=indent) + "\n")


def _cmd_analyze(args: argparse.Namespace) -> int:
    try:
        payload = AnalysisInput(
            title=args.title,
            content=args.content,
            source_url=args.source_url,
            author=args.author,
            language_hint=args.language,
        )
    except ValidationError as exc:
        logger.error("Invalid analysis input: %s", exc)
        _emit({"error": "invalid-input", "details": json.loads(exc.json())})
        return EXIT_INVALID
    result = build_pipeline().analyze(payload)
    _emit(result.model_dump(mode="json"), compact=args.compact)
    return EXIT_OK


def _cmd_detect(args: argparse.Namespace) -> int:
    if not args.text.strip():
        _emit({"error": "Text is required"})
        return EXIT_INVALID
    _emit(LanguageDetector().describe(args.text))
    return EXIT_OK


def _cmd_languages(args: argparse.Namespace) -> int:
    catalog = languages.language_catalog()
    _emit(
        {
            "languages": {info.code: info.model_dump() for info in catalog},
            "total_supported": len(catalog),
        }
    )
    return EXIT_OK


def _cmd_stats(args: argparse.Namespace) -> int:
    results = []
    with open(args.results, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                results.append(AnalysisResult.model_validate_json(line))
            except ValidationError as exc:
                logger.error("Invalid result on line %d of %s: %s", lineno, args.results, exc)
                _emit({"error": "invalid-result", "line": lineno})
                return EXIT_INVALID
    _emit(summarize(results).model_dump())
    return EXIT_OK


def _cmd_profiles(args: argparse.Namespace) -> int:
    registry = load_profiles(args.profiles_dir) if args.profiles_dir else default_registry()
    problems = validate_profiles(registry)
    _emit(
        {
            "profiles": {
                code: {
                    "positive_words": len(profile.positive_words),
                    "negative_words": len(profile.negative_words),
                    "sensational_words": len(profile.sensational_words),
                    "clickbait_phrases": len(profile.clickbait_phrases),
                    "normalization_rules": len(profile.normalization_rules),
                    "feature_weights": len(profile.feature_weights),
                }
                for code, profile in ((code, registry.get(code)) for code in registry.codes())
            },
            "problems": problems,
        }
    )
    return EXIT_INVALID if problems else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="truthguard", description="Multilingual fake news heuristics.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: TRUTHGUARD_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze a news item")
    analyze.add_argument("--title", required=True)
    analyze.add_argument("--content", required=True)
    analyze.add_argument("--language", default=None, help="Language hint; detected when omitted")
    analyze.add_argument("--source-url", default=None)
    analyze.add_argument("--author", default=None)
    analyze.add_argument("--compact", action="store_true", help="Print the result on a single line")
    analyze.set_defaults(handler=_cmd_analyze)

    detect = sub.add_parser("detect", help="Detect the language of a text")
    detect.add_argument("text")
    detect.set_defaults(handler=_cmd_detect)

    catalog = sub.add_parser("languages", help="List supported languages")
    catalog.set_defaults(handler=_cmd_languages)

    stats = sub.add_parser("stats", help="Summarize a JSON-lines file of analysis results")
    stats.add_argument("results", help="File with one result per line, as printed by `analyze --compact`")
    stats.set_defaults(handler=_cmd_stats)

    profiles = sub.add_parser("profiles", help="Load and validate language profiles")
    profiles.add_argument("--profiles-dir", default=None, help="Profile directory (default: bundled data)")
    profiles.set_defaults(handler=_cmd_profiles)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
