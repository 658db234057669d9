"""Principle Catalog — the TRIZ inventive principles (ids 1..15 populated).

Invariants:
    - Ids are unique, ascending and stable; nominal id space is 1..40
    - MAX_POPULATED_PRINCIPLE_ID == highest populated id (drives resolver ceiling)
    - get_principle() returns None for unpopulated ids, never raises

Design Decisions:
    - Catalog is deliberately incomplete (15 of 40): a lookup miss is a known
      data gap, callers render it as "unknown principle", not as an error
    - Examples are LocalizedText tuples: one entry per illustration, both locales
"""

from dataclasses import dataclass
from types import MappingProxyType

from triz_master.core.domain_types import Locale, PrincipleId
from triz_master.core.localized_text import LocalizedText, localize, lt


@dataclass(frozen=True)
class Principle:
    """A generic inventive strategy for resolving a technical contradiction."""
    id: PrincipleId
    name: LocalizedText
    description: LocalizedText
    examples: tuple[LocalizedText, ...]

    def display_name(self, locale: Locale) -> str:
        return localize(self.name, locale)

    def display_description(self, locale: Locale) -> str:
        return localize(self.description, locale)

    def display_examples(self, locale: Locale) -> list[str]:
        return [localize(e, locale) for e in self.examples]


INVENTIVE_PRINCIPLES: tuple[Principle, ...] = (
    Principle(
        id=PrincipleId(1),
        name=lt("التجزئة", "Segmentation"),
        description=lt(
            "تقسيم الجسم إلى أجزاء مستقلة، أو جعل الجسم سهل التفكيك، أو زيادة درجة التجزئة.",
            "Divide an object into independent parts, make an object easy to "
            "disassemble, or increase the degree of fragmentation.",
        ),
        examples=(
            lt("الستائر المعدنية المكونة من شرائح", "Slatted metal blinds"),
            lt("أثاث ايكيا القابل للتفكيك", "IKEA flat-pack furniture"),
        ),
    ),
    Principle(
        id=PrincipleId(2),
        name=lt("الاستخلاص", "Extraction"),
        description=lt(
            "فصل الجزء 'المزعج' أو الخاصية 'المزعجة' عن الجسم، أو استخلاص الجزء الضروري فقط.",
            "Separate an interfering part or property from an object, or single "
            "out the only necessary part.",
        ),
        examples=(
            lt("وضع ضاغط المكيف خارج الغرفة", "Air conditioner compressor outside the room"),
            lt("الفلتر لاستخلاص الشوائب", "Filters to extract impurities"),
        ),
    ),
    Principle(
        id=PrincipleId(3),
        name=lt("الجودة الموضعية", "Local Quality"),
        description=lt(
            "تغيير هيكل الجسم من متجانس إلى غير متجانس، أو جعل كل جزء يعمل في أفضل ظروفه.",
            "Change an object's structure from uniform to non-uniform, or make "
            "each part function in its best conditions.",
        ),
        examples=(
            lt("قلم رصاص مع ممحاة في نهايته", "Pencil with an eraser on the end"),
            lt("تقوية حواف أدوات القطع بالألماس", "Reinforcing tool edges with diamond"),
        ),
    ),
    Principle(
        id=PrincipleId(4),
        name=lt("عدم التماثل", "Asymmetry"),
        description=lt(
            "تغيير شكل الجسم من متماثل إلى غير متماثل لزيادة كفاءته.",
            "Change the shape of an object from symmetrical to asymmetrical.",
        ),
        examples=(
            lt("الفأرة (الماوس) المريحة لليد", "Ergonomic computer mouse"),
            lt("إطارات سيارات بنقوش غير متماثلة", "Asymmetrical tire treads"),
        ),
    ),
    Principle(
        id=PrincipleId(5),
        name=lt("الدمج", "Merging"),
        description=lt(
            "دمج أجسام متماثلة أو متجاورة لتعمل معاً بشكل متزامن أو متتالي.",
            "Combine identical or similar objects, assemble identical or similar "
            "parts to perform parallel operations.",
        ),
        examples=(
            lt("شفرات الحلاقة المتعددة", "Multi-blade razors"),
            lt("الدوائر المتكاملة", "Integrated circuits"),
        ),
    ),
    Principle(
        id=PrincipleId(6),
        name=lt("الشمولية", "Universality"),
        description=lt(
            "جعل الجسم يؤدي وظائف متعددة بحيث نستغني عن أجسام أخرى.",
            "Make an object or system perform multiple functions; eliminate the "
            "need for other parts.",
        ),
        examples=(
            lt("الأريكة التي تتحول إلى سرير", "Sofa bed"),
            lt("الهاتف الذكي", "Smartphone"),
        ),
    ),
    Principle(
        id=PrincipleId(7),
        name=lt("التداخل", "Nesting"),
        description=lt(
            "وضع جسم داخل جسم آخر، أو تمرير جسم عبر تجويف جسم آخر.",
            "Place one object inside another; place each object, in turn, "
            "inside the other.",
        ),
        examples=(
            lt("الهوائي التلسكوبي", "Telescopic antenna"),
            lt("صناديق بأحجام متفاوتة داخل بعضها", "Nesting measuring cups"),
        ),
    ),
    Principle(
        id=PrincipleId(8),
        name=lt("الوزن المضاد", "Counterweight"),
        description=lt(
            "تعويض وزن الجسم بدمجه مع أجسام أخرى توفر قوة رفع أو موازنة.",
            "To compensate for the weight of an object, merge it with other "
            "objects that provide lift.",
        ),
        examples=(
            lt("بالونات الهيليوم للرفع", "Helium balloons for lift"),
            lt("أوزان المصاعد لموازنة الثقل", "Elevator counterweights"),
        ),
    ),
    Principle(
        id=PrincipleId(9),
        name=lt("التفعيل التمهيدي المضاد", "Prior Counteraction"),
        description=lt(
            "القيام بعمل مضاد مسبق للسيطرة على الضغوط الناجمة.",
            "If it is necessary to do an action with both harmful and useful "
            "effects, this action should be replaced by anti-actions to control "
            "ill effects.",
        ),
        examples=(
            lt("الخرسانة سابقة الإجهاد", "Prestressed concrete"),
            lt("اللقاحات الطبية", "Medical vaccines"),
        ),
    ),
    Principle(
        id=PrincipleId(10),
        name=lt("الفعل التمهيدي", "Prior Action"),
        description=lt(
            "إنجاز العمل المطلوب كلياً أو جزئياً قبل الحاجة إليه.",
            "Perform, before it is needed, the required change of an object "
            "(either fully or partially).",
        ),
        examples=(
            lt("تقطيع الخضروات قبل الطهي", "Pre-cut vegetables"),
            lt("قوالب العقود الجاهزة", "Pre-designed contract templates"),
        ),
    ),
    Principle(
        id=PrincipleId(11),
        name=lt("الوقاية المسبقة", "Cushion in Advance"),
        description=lt(
            "التعويض عن الموثوقية المنخفضة للجسم بإجراءات وقائية مسبقة للطوارئ.",
            "Prepare emergency means beforehand to compensate for the relatively "
            "low reliability of an object.",
        ),
        examples=(
            lt("الوسائد الهوائية في السيارات", "Airbags"),
            lt("أحزمة الأمان", "Safety belts"),
        ),
    ),
    Principle(
        id=PrincipleId(12),
        name=lt("تساوي الجهد", "Equipotentiality"),
        description=lt(
            "تغيير ظروف العمل بحيث لا يحتاج الجسم للرفع أو الخفض.",
            "In a potential field, limit condition changes (e.g. change operating "
            "conditions so an object need not be raised or lowered).",
        ),
        examples=(
            lt("أقفال القنوات المائية للسفن", "Canal locks"),
            lt("أحواض بناء السفن الجافة", "Dry docks"),
        ),
    ),
    Principle(
        id=PrincipleId(13),
        name=lt("العكس", "The Other Way Around"),
        description=lt(
            "عكس الإجراء المستخدم أو جعل الأجزاء المتحركة ثابتة والعكس.",
            "Invert the action used to solve the problem (e.g. instead of "
            "cooling an object, heat it).",
        ),
        examples=(
            lt("جهاز المشي الرياضي", "Treadmill"),
            lt("قلب زجاجات الكاتشب", "Upside-down ketchup bottles"),
        ),
    ),
    Principle(
        id=PrincipleId(14),
        name=lt("الانحناء", "Spheroidality"),
        description=lt(
            "استخدام الأشكال المنحنية والكرات بدلاً من الخطوط المستقيمة.",
            "Instead of using rectilinear parts, surfaces, or forms, use "
            "curvilinear ones; move from flat surfaces to spherical ones.",
        ),
        examples=(
            lt("الأقواس في العمارة", "Architectural arches"),
            lt("كرات المحامل لتقليل الاحتكاك", "Ball bearings"),
        ),
    ),
    Principle(
        id=PrincipleId(15),
        name=lt("الديناميكية", "Dynamicity"),
        description=lt(
            "جعل الجسم أو خصائصه تتغير لتكون في الوضع الأمثل في كل مرحلة.",
            "Allow (or design) the characteristics of an object, external "
            "environment, or process to change to be optimal at each stage of "
            "operation.",
        ),
        examples=(
            lt("مقاعد السيارات القابلة للتعديل", "Adjustable car seats"),
            lt("التصميم المتجاوب للمواقع", "Responsive web design"),
        ),
    ),
)

_BY_ID = MappingProxyType({p.id: p for p in INVENTIVE_PRINCIPLES})

MAX_POPULATED_PRINCIPLE_ID: int = max(_BY_ID)


def get_principle(principle_id: int) -> Principle | None:
    """Look up a principle by id. Unpopulated ids return None."""
    return _BY_ID.get(principle_id)


def principle_names(principle_ids: list[int], locale: Locale) -> list[str]:
    """Render display names for ids, skipping ids missing from the catalog."""
    names = []
    for pid in principle_ids:
        principle = _BY_ID.get(pid)
        if principle is not None:
            names.append(principle.display_name(locale))
    return names


def principles_guide(locale: Locale) -> str:
    """Render "id: name - description" lines for the whole catalog (prompt context)."""
    return "\n".join(
        f"{p.id}: {p.display_name(locale)} - {p.display_description(locale)}"
        for p in INVENTIVE_PRINCIPLES
    )
