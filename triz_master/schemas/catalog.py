"""Catalog Schemas — locale-rendered views of parameters, principles and resolutions.

Invariants:
    - Every view is rendered for exactly one locale
    - ResolutionResponse lists curated ids missing from the catalog in unknown_principle_ids

Design Decisions:
    - Builders live beside the schemas: routes stay thin, rendering stays testable
"""

from pydantic import BaseModel

from triz_master.core.domain_types import Locale, ResolutionSource
from triz_master.core.example_problems import ExampleProblem
from triz_master.core.parameters import Parameter
from triz_master.core.principles import Principle, get_principle


class ParameterView(BaseModel):
    id: int
    name: str


class PrincipleView(BaseModel):
    id: int
    name: str
    description: str
    examples: list[str]


class ExampleView(BaseModel):
    title: str
    description: str


class ResolutionResponse(BaseModel):
    improving_param_id: int
    worsening_param_id: int
    improving_param_name: str
    worsening_param_name: str
    principle_ids: list[int]
    source: ResolutionSource
    principles: list[PrincipleView]
    unknown_principle_ids: list[int]
    explanation: str
    locale: Locale


def parameter_view(parameter: Parameter, locale: Locale) -> ParameterView:
    return ParameterView(id=parameter.id, name=parameter.display_name(locale))


def principle_view(principle: Principle, locale: Locale) -> PrincipleView:
    return PrincipleView(
        id=principle.id,
        name=principle.display_name(locale),
        description=principle.display_description(locale),
        examples=principle.display_examples(locale),
    )


def example_view(example: ExampleProblem, locale: Locale) -> ExampleView:
    return ExampleView(**example.render(locale))


def split_known_principles(
    principle_ids: list[int], locale: Locale,
) -> tuple[list[PrincipleView], list[int]]:
    """Render known principles; collect ids the catalog does not populate."""
    known: list[PrincipleView] = []
    unknown: list[int] = []
    for pid in principle_ids:
        principle = get_principle(pid)
        if principle is None:
            unknown.append(pid)
        else:
            known.append(principle_view(principle, locale))
    return known, unknown
