"""Language Detection — deterministic text-to-locale mapping.

Invariants:
    - Always returns a valid Locale (never None)
    - Short text (<20 chars) returns the default locale with confidence 0.0
    - Languages other than Arabic/English return the default locale with confidence 0.0

Design Decisions:
    - langdetect over lingua-py: lighter dependency, pure Python, no binary wheels
    - DetectorFactory.seed fixed at import: langdetect is otherwise non-deterministic
    - Thread safety: asyncio single-thread-per-event-loop serializes detect() calls
"""

import logging

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from triz_master.core.domain_types import Locale, PRIMARY_LOCALE

logger = logging.getLogger(__name__)

DetectorFactory.seed = 0  # Deterministic: must be set BEFORE any detect() call

_MIN_TEXT_LENGTH = 20

# langdetect code -> Locale mapping
_CODE_TO_LOCALE: dict[str, Locale] = {
    "ar": Locale.AR,
    "en": Locale.EN,
}


def detect_locale(
    text: str, default: Locale = PRIMARY_LOCALE,
) -> tuple[Locale, float]:
    """Detect the locale of the given text.

    Returns (Locale, confidence) where confidence is 0.0-1.0.
    """
    if not text or len(text.strip()) < _MIN_TEXT_LENGTH:
        return default, 0.0

    try:
        results = detect_langs(text)
    except LangDetectException as e:
        logger.debug(f"Language detection failed: {e}")
        return default, 0.0

    if not results:
        return default, 0.0

    top = results[0]
    locale = _CODE_TO_LOCALE.get(top.lang)
    if locale is None:
        return default, 0.0

    return locale, round(top.prob, 4)
