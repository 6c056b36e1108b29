from types import SimpleNamespace

import pytest

from truthguard.language_detector import LanguageDetector, clean_for_detection


def _fixed(lang, prob):
    return lambda text: [SimpleNamespace(lang=lang, prob=prob)]


def test_clean_for_detection_keeps_letters_only():
    assert clean_for_detection("Hello, world 2024!!  <b>ok</b>") == "Hello world bokb"
    assert clean_for_detection("नमस्ते, दुनिया 123") == "नमस्ते दुनिया"


@pytest.mark.parametrize("text", ["", "   ", None, "Hi there", "1234567890 !!! ???", "ab12 cd34 ef"])
def test_short_or_empty_text_defaults_to_english(detector, text):
    assert detector.detect(text) == "en"


def test_short_text_never_reaches_classifier():
    def explode(text):
        raise AssertionError("classifier should not be called")

    detector = LanguageDetector(classifier=explode)
    assert detector.detect("Hola tío") == "en"


def test_unreliable_detection_defaults_to_english():
    detector = LanguageDetector(classifier=_fixed("fr", 0.55))
    assert detector.detect("Ceci est un texte assez long pour la detection") == "en"


def test_reliable_detection_is_canonicalized():
    detector = LanguageDetector(classifier=_fixed("zh-cn", 0.999))
    assert detector.detect("this text is long enough for the classifier") == "zh"


def test_unsupported_language_still_gets_a_code():
    detector = LanguageDetector(classifier=_fixed("nl", 0.99))
    code = detector.detect("Dit is een Nederlandse zin over de gemeenteraad")
    assert code == "nl"
    assert not detector.is_supported(code)


def test_classifier_errors_degrade_to_english():
    def broken(text):
        raise RuntimeError("boom")

    detector = LanguageDetector(classifier=broken)
    assert detector.detect("A perfectly ordinary English sentence here") == "en"


def test_empty_candidate_list_defaults_to_english():
    detector = LanguageDetector(classifier=lambda text: [])
    assert detector.detect("A perfectly ordinary English sentence here") == "en"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("The city council approved the new budget after a long debate on Tuesday evening.", "en"),
        ("El consejo municipal aprobó el nuevo presupuesto después de un largo debate el martes.", "es"),
        ("Le conseil municipal a approuvé le nouveau budget après un long débat mardi soir.", "fr"),
        ("नगर परिषद ने मंगलवार शाम को लंबी बहस के बाद नए बजट को मंजूरी दी है और यह फैसला सभी के लिए महत्वपूर्ण है।", "hi"),
    ],
)
def test_detects_real_languages(detector, text, expected):
    assert detector.detect(text) == expected


def test_detection_is_deterministic(detector):
    text = "The city council approved the new budget after a long debate on Tuesday evening."
    assert {detector.detect(text) for _ in range(5)} == {"en"}


def test_describe_reports_catalog_data():
    detector = LanguageDetector(classifier=_fixed("es", 0.99))
    info = detector.describe("El consejo municipal aprobó el presupuesto")
    assert info == {
        "detected_language": "es",
        "language_name": "Spanish",
        "is_supported": True,
        "model_available": True,
        "model_id": "truthguard-bert-es-v1.0",
        "accuracy": 0.91,
    }
