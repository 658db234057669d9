"""Parameter Catalog — the 39 classical TRIZ engineering parameters.

Invariants:
    - Exactly 39 entries, ids 1..39, dense and in ascending order
    - Catalog is immutable after import (tuple + MappingProxyType index)
    - get_parameter() returns None for unknown ids, never raises

Design Decisions:
    - Frozen dataclass over dict rows: attribute access + hashability
    - Index built once at import: O(1) lookup by id
"""

from dataclasses import dataclass
from types import MappingProxyType

from triz_master.core.domain_types import Locale, ParameterId
from triz_master.core.localized_text import LocalizedText, localize, lt


@dataclass(frozen=True)
class Parameter:
    """An engineering characteristic that can improve or worsen."""
    id: ParameterId
    name: LocalizedText

    def display_name(self, locale: Locale) -> str:
        return localize(self.name, locale)


def _p(pid: int, ar: str, en: str) -> Parameter:
    return Parameter(id=ParameterId(pid), name=lt(ar, en))


TRIZ_PARAMETERS: tuple[Parameter, ...] = (
    _p(1, "وزن الجسم المتحرك", "Weight of moving object"),
    _p(2, "وزن الجسم الثابت", "Weight of stationary object"),
    _p(3, "طول الجسم المتحرك", "Length of moving object"),
    _p(4, "طول الجسم الثابت", "Length of stationary object"),
    _p(5, "مساحة الجسم المتحرك", "Area of moving object"),
    _p(6, "مساحة الجسم الثابت", "Area of stationary object"),
    _p(7, "حجم الجسم المتحرك", "Volume of moving object"),
    _p(8, "حجم الجسم الثابت", "Volume of stationary object"),
    _p(9, "السرعة", "Speed"),
    _p(10, "القوة", "Force"),
    _p(11, "الإجهاد أو الضغط", "Stress or pressure"),
    _p(12, "الشكل", "Shape"),
    _p(13, "استقرار تكوين الجسم", "Stability of object composition"),
    _p(14, "المقاومة (القوة)", "Strength"),
    _p(15, "زمن عمل الجسم المتحرك", "Duration of action of moving object"),
    _p(16, "زمن عمل الجسم الثابت", "Duration of action of stationary object"),
    _p(17, "درجة الحرارة", "Temperature"),
    _p(18, "السطوع (الإنارة)", "Illumination"),
    _p(19, "الطاقة التي يستهلكها الجسم المتحرك", "Energy consumed by moving object"),
    _p(20, "الطاقة التي يستهلكها الجسم الثابت", "Energy consumed by stationary object"),
    _p(21, "القدرة (القوة/الزمن)", "Power"),
    _p(22, "فقدان الطاقة", "Loss of Energy"),
    _p(23, "فقدان المادة", "Loss of substance"),
    _p(24, "فقدان المعلومات", "Loss of Information"),
    _p(25, "فقدان الوقت", "Loss of Time"),
    _p(26, "كمية المادة", "Quantity of substance"),
    _p(27, "الموثوقية", "Reliability"),
    _p(28, "دقة التصنيع", "Precision of manufacturing"),
    _p(29, "دقة القياس", "Precision of measurement"),
    _p(30, "عوامل الضرر الخارجية", "External harm affects the object"),
    _p(31, "عوامل الضرر الداخلية", "Object-generated harmful factors"),
    _p(32, "سهولة التصنيع", "Ease of manufacture"),
    _p(33, "سهولة الاستخدام", "Ease of operation"),
    _p(34, "سهولة الإصلاح", "Ease of repair"),
    _p(35, "التكيف (المرونة)", "Adaptability or versatility"),
    _p(36, "تعقيد الجهاز", "Device complexity"),
    _p(37, "صعوبة الكشف والقياس", "Difficulty of detecting and measuring"),
    _p(38, "درجة التشغيل الآلي", "Extent of automation"),
    _p(39, "الإنتاجية", "Productivity"),
)

_BY_ID = MappingProxyType({p.id: p for p in TRIZ_PARAMETERS})


def get_parameter(parameter_id: int) -> Parameter | None:
    """Look up a parameter by id. Unknown ids return None."""
    return _BY_ID.get(parameter_id)


def is_valid_parameter_id(parameter_id: int) -> bool:
    return parameter_id in _BY_ID


def parameters_context(locale: Locale) -> str:
    """Render the catalog as "id: name" pairs, comma-separated (prompt context)."""
    return ", ".join(f"{p.id}: {p.display_name(locale)}" for p in TRIZ_PARAMETERS)
