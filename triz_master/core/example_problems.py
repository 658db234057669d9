"""Example Problems — bilingual starter problems a user can load into the analyzer."""

from dataclasses import dataclass

from triz_master.core.domain_types import Locale
from triz_master.core.localized_text import LocalizedText, localize, lt


@dataclass(frozen=True)
class ExampleProblem:
    title: LocalizedText
    description: LocalizedText

    def render(self, locale: Locale) -> dict:
        return {
            "title": localize(self.title, locale),
            "description": localize(self.description, locale),
        }


TRIZ_EXAMPLES: tuple[ExampleProblem, ...] = (
    ExampleProblem(
        title=lt("محرك الطائرة", "Aircraft Engine"),
        description=lt(
            "أريد زيادة سرعة محرك الطائرة (السرعة)، ولكن هذا يؤدي إلى زيادة هائلة "
            "في استهلاك الوقود (فقدان الطاقة) وزيادة وزن المحرك.",
            "I want to increase aircraft engine speed, but this leads to massive "
            "fuel consumption (energy loss) and increased engine weight.",
        ),
    ),
    ExampleProblem(
        title=lt("مبنى شاهق", "High-rise Building"),
        description=lt(
            "أريد بناء برج سكني بارتفاع شاهق (حجم الجسم الثابت)، ولكن تزداد المشكلة "
            "في استقرار المبنى ضد الرياح والزلازل (استقرار تكوين الجسم).",
            "I want to build a very tall residential tower (object volume), but "
            "stability against wind and earthquakes (object stability) becomes a "
            "major issue.",
        ),
    ),
    ExampleProblem(
        title=lt("تطبيق هاتف", "Mobile App"),
        description=lt(
            "أريد إضافة ميزات ذكاء اصطناعي متطورة للتطبيق (الشمولية/القدرة)، ولكن "
            "هذا يجعل حجم التطبيق ضخماً ويستهلك البطارية بسرعة (فقدان الطاقة).",
            "I want to add advanced AI features to the app (versatility), but this "
            "makes the app size huge and drains battery fast (energy loss).",
        ),
    ),
    ExampleProblem(
        title=lt("علبة تعبئة", "Packaging Box"),
        description=lt(
            "أريد جعل علبة العصير أكثر متانة لتحمل الشحن (المقاومة/القوة)، ولكن هذا "
            "يزيد من تكلفة المادة المستخدمة ووزن العلبة (كمية المادة/الوزن).",
            "I want to make a juice box more durable for shipping (strength), but "
            "this increases material cost and box weight.",
        ),
    ),
)
