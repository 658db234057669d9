"""Contradiction Routes — manual matrix lookup for a chosen parameter pair.

Invariants:
    - Both ids validated against the parameter catalog HERE (the resolver does not validate)
    - Empty resolver output is a 200 with an empty principle list, never an error
    - Curated ids missing from the principle catalog are listed in unknown_principle_ids

Design Decisions:
    - GET with query params: lookup is pure and cacheable
"""

import logging

from fastapi import APIRouter, Query

from triz_master.api.dependencies import resolve_locale
from triz_master.core.domain_types import Locale, ResolutionSource
from triz_master.core.errors import InvalidParameterError
from triz_master.core.language_strings import get_matrix_explanation
from triz_master.core.parameters import get_parameter
from triz_master.core.resolve_contradiction import resolve_contradiction_detailed
from triz_master.schemas.catalog import ResolutionResponse, split_known_principles

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/contradictions", tags=["contradictions"])


@router.get("/resolve", response_model=ResolutionResponse)
async def resolve(
    improving: int = Query(...),
    worsening: int = Query(...),
    locale: Locale | None = Query(None),
):
    """Resolve (improving, worsening) to inventive principles."""
    improving_param = get_parameter(improving)
    if improving_param is None:
        raise InvalidParameterError("improving", improving)
    worsening_param = get_parameter(worsening)
    if worsening_param is None:
        raise InvalidParameterError("worsening", worsening)

    loc = resolve_locale(locale)
    resolution = resolve_contradiction_detailed(improving, worsening)
    principle_ids = list(resolution.principle_ids)
    known, unknown = split_known_principles(principle_ids, loc)

    logger.info(
        "Manual contradiction lookup",
        extra={
            "improving": improving,
            "worsening": worsening,
            "source": resolution.source.value,
        },
    )
    return ResolutionResponse(
        improving_param_id=improving,
        worsening_param_id=worsening,
        improving_param_name=improving_param.display_name(loc),
        worsening_param_name=worsening_param.display_name(loc),
        principle_ids=principle_ids,
        source=resolution.source,
        principles=known,
        unknown_principle_ids=unknown,
        explanation=get_matrix_explanation(
            loc,
            curated=resolution.source == ResolutionSource.CURATED,
            empty=resolution.is_empty,
        ),
        locale=loc,
    )
