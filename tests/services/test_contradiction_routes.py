"""Manual contradiction lookup route tests.

Invariants:
    - Curated pairs return the curated ids; ids the catalog lacks are reported separately
    - Uncurated pairs return fallback ids with a fallback explanation
    - Parameter ids outside 1..39 return 400 INVALID_PARAMETER
"""

import pytest

from triz_master.core.domain_types import Locale
from triz_master.core.language_strings import get_matrix_explanation

RESOLVE = "/api/v1/contradictions/resolve"


async def test_curated_lookup(client):
    res = await client.get(
        RESOLVE, params={"improving": 1, "worsening": 10, "locale": "en"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["principle_ids"] == [1, 8, 15, 35]
    assert body["source"] == "curated"
    assert [p["id"] for p in body["principles"]] == [1, 8, 15]
    assert body["unknown_principle_ids"] == [35]
    assert body["improving_param_name"] == "Weight of moving object"
    assert body["worsening_param_name"] == "Force"
    assert body["explanation"] == get_matrix_explanation(Locale.EN, curated=True)


async def test_fallback_lookup(client):
    res = await client.get(RESOLVE, params={"improving": 20, "worsening": 20})
    body = res.json()
    assert body["principle_ids"] == [1, 13, 15]
    assert body["source"] == "fallback"
    assert body["unknown_principle_ids"] == []
    assert body["locale"] == "ar"
    assert body["explanation"] == get_matrix_explanation(Locale.AR, curated=False)


async def test_lookup_is_directional(client):
    forward = await client.get(RESOLVE, params={"improving": 1, "worsening": 27})
    reverse = await client.get(RESOLVE, params={"improving": 27, "worsening": 1})
    assert forward.json()["source"] == "curated"
    assert reverse.json()["source"] == "fallback"


@pytest.mark.parametrize("improving,worsening", [(0, 5), (40, 5), (5, 0), (5, 40)])
async def test_out_of_range_parameter_is_400(client, improving, worsening):
    res = await client.get(
        RESOLVE, params={"improving": improving, "worsening": worsening},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_PARAMETER"


async def test_missing_parameter_is_400(client):
    res = await client.get(RESOLVE, params={"improving": 5})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
