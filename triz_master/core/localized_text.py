"""Localized Text — one locale-keyed mapping per display field.

Invariants:
    - Every LocalizedText built via lt() is read-only and holds both locales
    - localize() never raises: missing locale falls back to PRIMARY_LOCALE

Design Decisions:
    - Single mapping over parallel name/nameEn fields: removes the scattered
      "use field A unless field B is absent" logic from callers
"""

from collections.abc import Mapping
from types import MappingProxyType

from triz_master.core.domain_types import Locale, PRIMARY_LOCALE

LocalizedText = Mapping[Locale, str]


def lt(ar: str, en: str) -> LocalizedText:
    """Build an immutable bilingual text."""
    return MappingProxyType({Locale.AR: ar, Locale.EN: en})


def localize(text: LocalizedText, locale: Locale) -> str:
    """Render text in the requested locale, falling back to the primary one."""
    value = text.get(locale)
    if value:
        return value
    return text.get(PRIMARY_LOCALE, "")
