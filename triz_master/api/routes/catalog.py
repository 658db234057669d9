"""Catalog Routes — read-only views of parameters, principles and example problems.

Invariants:
    - Catalogs are rendered per request locale (default from settings)
    - GET /principles/{id} returns 404 for ids the catalog does not populate

Design Decisions:
    - No DB access: catalogs are static core data
"""

from fastapi import APIRouter, Path, Query

from triz_master.api.dependencies import resolve_locale
from triz_master.core.domain_types import Locale, NOMINAL_PRINCIPLE_COUNT
from triz_master.core.errors import ResourceNotFoundError
from triz_master.core.example_problems import TRIZ_EXAMPLES
from triz_master.core.parameters import TRIZ_PARAMETERS
from triz_master.core.principles import INVENTIVE_PRINCIPLES, get_principle
from triz_master.schemas.catalog import (
    ExampleView, ParameterView, PrincipleView,
    example_view, parameter_view, principle_view,
)

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/parameters", response_model=list[ParameterView])
async def list_parameters(locale: Locale | None = Query(None)):
    """The 39 engineering parameters, ordered by id."""
    loc = resolve_locale(locale)
    return [parameter_view(p, loc) for p in TRIZ_PARAMETERS]


@router.get("/principles", response_model=list[PrincipleView])
async def list_principles(locale: Locale | None = Query(None)):
    """All populated inventive principles, ordered by id."""
    loc = resolve_locale(locale)
    return [principle_view(p, loc) for p in INVENTIVE_PRINCIPLES]


@router.get("/principles/{principle_id}", response_model=PrincipleView)
async def get_principle_by_id(
    principle_id: int = Path(ge=1, le=NOMINAL_PRINCIPLE_COUNT),
    locale: Locale | None = Query(None),
):
    """One principle. Ids in 1..40 missing from the catalog return 404."""
    principle = get_principle(principle_id)
    if principle is None:
        raise ResourceNotFoundError("Principle", str(principle_id))
    return principle_view(principle, resolve_locale(locale))


@router.get("/examples", response_model=list[ExampleView])
async def list_examples(locale: Locale | None = Query(None)):
    """Starter problems for the analyzer."""
    loc = resolve_locale(locale)
    return [example_view(e, loc) for e in TRIZ_EXAMPLES]
