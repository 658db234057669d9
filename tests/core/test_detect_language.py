"""Language detection tests — pure tests for detect_locale.

Tests cover:
    - Correct detection for Arabic and English (long text)
    - Short or empty text returns the default locale
    - Unsupported languages fall back to the default locale
    - Deterministic results (same input -> same output)
"""

from triz_master.core.detect_language import detect_locale
from triz_master.core.domain_types import Locale


ARABIC_TEXT = (
    "أريد زيادة سرعة محرك الطائرة، ولكن هذا يؤدي إلى زيادة هائلة في استهلاك "
    "الوقود وزيادة وزن المحرك بشكل كبير."
)
ENGLISH_TEXT = (
    "I want to increase aircraft engine speed, but this leads to massive fuel "
    "consumption and increased engine weight."
)


def test_detects_arabic_from_long_text():
    locale, confidence = detect_locale(ARABIC_TEXT)
    assert locale == Locale.AR
    assert confidence > 0.5


def test_detects_english_from_long_text():
    locale, confidence = detect_locale(ENGLISH_TEXT)
    assert locale == Locale.EN
    assert confidence > 0.5


def test_short_text_returns_default():
    assert detect_locale("Hello") == (Locale.AR, 0.0)
    assert detect_locale("Hello", default=Locale.EN) == (Locale.EN, 0.0)


def test_empty_text_returns_default():
    assert detect_locale("") == (Locale.AR, 0.0)


def test_symbols_only_returns_default():
    assert detect_locale("12345 67890 !!!! ???? ....") == (Locale.AR, 0.0)


def test_unsupported_language_falls_back_to_default():
    text = (
        "Die Entwicklung der kuenstlichen Intelligenz hat grundlegend veraendert "
        "wie wir komplexe Problemloesungen in modernen Organisationen angehen."
    )
    locale, confidence = detect_locale(text, default=Locale.EN)
    assert locale == Locale.EN
    assert confidence == 0.0


def test_detection_is_deterministic():
    assert detect_locale(ENGLISH_TEXT) == detect_locale(ENGLISH_TEXT)
