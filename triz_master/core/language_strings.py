"""Language Strings — centralized locale-specific text returned by the API.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Covers every locale in the Locale enum
    - Used by contradictions route (matrix explanation), analyst and draft writer (failures)

Design Decisions:
    - Server-side strings only: UI chrome translations belong to the front-end
    - Failure messages are user-facing and never include provider error details
"""

from triz_master.core.domain_types import Locale


# --- Manual lookup explanation ------------------------------------------------

_MATRIX_EXPLANATION: dict[Locale, str] = {
    Locale.AR: "تم تحديد المبادئ بناءً على مصفوفة التناقضات المدمجة.",
    Locale.EN: "Principles identified based on the built-in contradiction matrix.",
}

_FALLBACK_EXPLANATION: dict[Locale, str] = {
    Locale.AR: (
        "لا يوجد إدخال منسق لهذا التناقض في المصفوفة؛ تم اقتراح المبادئ "
        "باستخدام قاعدة استنتاج ثابتة."
    ),
    Locale.EN: (
        "This contradiction has no curated matrix entry; principles were "
        "inferred with a deterministic rule."
    ),
}

_NO_PRINCIPLES: dict[Locale, str] = {
    Locale.AR: "لا توجد مبادئ معروفة أو مستنتجة لهذا التناقض.",
    Locale.EN: "No known or inferable principle for this contradiction.",
}


# --- AI collaborator failures -------------------------------------------------

_ANALYSIS_FAILED: dict[Locale, str] = {
    Locale.AR: "تعذر تحليل المشكلة حالياً. يرجى مراجعة الوصف والمحاولة مرة أخرى.",
    Locale.EN: "Failed to analyze the problem. Please review the description and try again.",
}

_DRAFT_FAILED: dict[Locale, str] = {
    Locale.AR: "تعذر صياغة التقرير حالياً. يرجى مراجعة المدخلات والمحاولة مرة أخرى.",
    Locale.EN: "Failed to draft the report. Please review your inputs and try again.",
}


# --- Public API ---------------------------------------------------------------


def get_matrix_explanation(locale: Locale, curated: bool, empty: bool = False) -> str:
    """Explain where a manual-lookup result came from."""
    if empty:
        return _NO_PRINCIPLES[locale]
    if curated:
        return _MATRIX_EXPLANATION[locale]
    return _FALLBACK_EXPLANATION[locale]


def get_analysis_failed_message(locale: Locale) -> str:
    return _ANALYSIS_FAILED[locale]


def get_draft_failed_message(locale: Locale) -> str:
    return _DRAFT_FAILED[locale]
