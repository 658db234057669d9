"""Report Prompts — locale-specific prompt text for contradiction analysis and drafting.

Invariants:
    - Every Locale has an analysis template and a draft template
    - Analysis prompt lists all 39 parameters as "id: name" in the request locale
    - Draft prompt lists the requested principle names and the full principle guide
    - Builders are pure: same inputs, same prompt

Design Decisions:
    - Whole-prompt translation (two locales only) over a prefix pattern
    - System prompt carries role + output language; user message carries the problem
"""

from triz_master.core.domain_types import Locale
from triz_master.core.parameters import parameters_context
from triz_master.core.principles import principles_guide

_ANALYSIS_SYSTEM: dict[Locale, str] = {
    Locale.AR: (
        "بصفتك خبيراً في منهجية TRIZ، مهمتك تحديد التناقض التقني في مشكلة "
        "هندسية. أجب باللغة العربية واستخدم أداة report_contradiction فقط."
    ),
    Locale.EN: (
        "As a TRIZ expert, your task is to identify the technical contradiction "
        "in an engineering problem. Answer in English and use only the "
        "report_contradiction tool."
    ),
}

_ANALYSIS_USER: dict[Locale, str] = {
    Locale.AR: (
        'قم بتحليل المشكلة التالية: "{problem}"\n'
        "يجب عليك تحديد التناقض التقني باستخدام المعايير الـ 39 التالية حصراً: "
        "[{parameters}]\n"
        "المطلوب:\n"
        "1. اختيار ID المعيار الذي نريد تحسينه.\n"
        "2. اختيار ID المعيار الذي سيتأثر سلباً.\n"
        "3. شرح هندسي منطقي باللغة العربية."
    ),
    Locale.EN: (
        'Analyze this problem: "{problem}"\n'
        "You must identify the technical contradiction using exclusively the "
        "following 39 parameters: [{parameters}]\n"
        "Required:\n"
        "1. Select the ID of the Improving Parameter.\n"
        "2. Select the ID of the Worsening Parameter.\n"
        "3. Provide a logical engineering explanation in English."
    ),
}

_DRAFT_SYSTEM: dict[Locale, str] = {
    Locale.AR: (
        "أنت مهندس ابتكار رائد تستخدم منهجية TRIZ. اكتب باللغة العربية "
        "واستخدم أداة write_innovation_report فقط."
    ),
    Locale.EN: (
        "You are a leading innovation engineer using TRIZ. Write in English "
        "and use only the write_innovation_report tool."
    ),
}

_DRAFT_USER: dict[Locale, str] = {
    Locale.AR: (
        'المشكلة: "{problem}"\n'
        "المبادئ: [{principles}]\n"
        "دليل المبادئ:\n{guide}\n"
        "المطلوب توليد تقرير حلول ابتكاري احترافي باللغة العربية يتضمن:\n"
        "1. مقدمة تحليلية. 2. {solution_count} حلول هندسية. 3. خطوات تنفيذية."
    ),
    Locale.EN: (
        'Problem: "{problem}"\n'
        "Principles: [{principles}]\n"
        "Principles Guide:\n{guide}\n"
        "Generate a professional innovation report in English including:\n"
        "1. Analytical introduction. 2. {solution_count} engineering solutions. "
        "3. Action plan steps."
    ),
}

DEFAULT_SOLUTION_COUNT = 3


def build_analysis_prompt(problem: str, locale: Locale) -> tuple[str, str]:
    """Return (system, user) prompt for contradiction diagnosis."""
    user = _ANALYSIS_USER[locale].format(
        problem=problem, parameters=parameters_context(locale),
    )
    return _ANALYSIS_SYSTEM[locale], user


def build_draft_prompt(
    problem: str,
    principle_names: list[str],
    locale: Locale,
    solution_count: int = DEFAULT_SOLUTION_COUNT,
) -> tuple[str, str]:
    """Return (system, user) prompt for innovation report drafting."""
    user = _DRAFT_USER[locale].format(
        problem=problem,
        principles=", ".join(principle_names),
        guide=principles_guide(locale),
        solution_count=solution_count,
    )
    return _DRAFT_SYSTEM[locale], user
