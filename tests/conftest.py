import sys
from pathlib import Path

import pytest


# Ensure project src is on path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from truthguard.language_detector import LanguageDetector  # noqa: E402
from truthguard.pipeline import build_pipeline  # noqa: E402
from truthguard.profiles import default_registry  # noqa: E402


@pytest.fixture(scope="session")
def registry():
    return default_registry()


@pytest.fixture(scope="session")
def detector():
    return LanguageDetector()


@pytest.fixture(scope="session")
def pipeline(registry, detector):
    # Pinned clock keeps repeated analyses byte-identical
    return build_pipeline(registry=registry, detector=detector, clock=lambda: 0.0)
