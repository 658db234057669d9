"""Catalog tests — parameters, principles, curated matrix and example problems.

Tests cover:
    - Parameter catalog is dense 1..39 and bilingual
    - Principle catalog populates 1..15 with examples; 16..40 are known gaps
    - Matrix keys are valid parameter pairs with non-empty values
    - Prompt-context renderers include every catalog entry
"""

import pytest

from triz_master.core.contradiction_matrix import CONTRADICTION_MATRIX, curated_entry
from triz_master.core.domain_types import Locale, PARAMETER_COUNT
from triz_master.core.example_problems import TRIZ_EXAMPLES
from triz_master.core.parameters import (
    TRIZ_PARAMETERS, get_parameter, is_valid_parameter_id, parameters_context,
)
from triz_master.core.principles import (
    INVENTIVE_PRINCIPLES, MAX_POPULATED_PRINCIPLE_ID,
    get_principle, principle_names, principles_guide,
)


# --- Parameters ---------------------------------------------------------------

def test_parameters_are_dense_and_ordered():
    assert [p.id for p in TRIZ_PARAMETERS] == list(range(1, PARAMETER_COUNT + 1))


def test_every_parameter_has_both_names():
    for p in TRIZ_PARAMETERS:
        assert p.display_name(Locale.AR)
        assert p.display_name(Locale.EN)


def test_get_parameter_known_and_unknown():
    assert get_parameter(9).display_name(Locale.EN) == "Speed"
    assert get_parameter(0) is None
    assert get_parameter(40) is None


def test_is_valid_parameter_id_bounds():
    assert is_valid_parameter_id(1)
    assert is_valid_parameter_id(39)
    assert not is_valid_parameter_id(0)
    assert not is_valid_parameter_id(40)


def test_parameters_context_lists_all():
    ctx = parameters_context(Locale.EN)
    assert ctx.startswith("1: Weight of moving object, ")
    assert ctx.endswith("39: Productivity")
    assert ctx.count(", ") >= PARAMETER_COUNT - 1


# --- Principles ---------------------------------------------------------------

def test_principles_populated_one_to_fifteen():
    assert [p.id for p in INVENTIVE_PRINCIPLES] == list(range(1, 16))
    assert MAX_POPULATED_PRINCIPLE_ID == 15


def test_every_principle_has_examples_in_both_locales():
    for p in INVENTIVE_PRINCIPLES:
        assert p.display_examples(Locale.AR)
        assert len(p.display_examples(Locale.AR)) == len(p.display_examples(Locale.EN))


@pytest.mark.parametrize("pid", [16, 35, 36, 40])
def test_unpopulated_principle_is_none(pid):
    assert get_principle(pid) is None


def test_principle_names_skip_unknown_ids():
    assert principle_names([1, 35, 15], Locale.EN) == ["Segmentation", "Dynamicity"]


def test_principle_names_keep_order():
    assert principle_names([2, 1], Locale.EN) == ["Extraction", "Segmentation"]


def test_principles_guide_renders_every_principle():
    guide = principles_guide(Locale.EN)
    lines = guide.split("\n")
    assert len(lines) == len(INVENTIVE_PRINCIPLES)
    assert lines[0].startswith("1: Segmentation - ")


# --- Matrix -------------------------------------------------------------------

def test_matrix_keys_are_parameter_pairs():
    for improving, worsening in CONTRADICTION_MATRIX:
        assert is_valid_parameter_id(improving)
        assert is_valid_parameter_id(worsening)


def test_matrix_values_non_empty():
    assert all(len(v) > 0 for v in CONTRADICTION_MATRIX.values())


def test_matrix_is_read_only():
    with pytest.raises(TypeError):
        CONTRADICTION_MATRIX[(2, 3)] = (1,)


def test_curated_entry_miss_returns_none():
    assert curated_entry(2, 3) is None
    assert curated_entry(9, 39) == (10, 19, 20, 38)


# --- Example problems ---------------------------------------------------------

def test_examples_render_in_both_locales():
    assert len(TRIZ_EXAMPLES) == 4
    rendered = TRIZ_EXAMPLES[0].render(Locale.EN)
    assert rendered["title"] == "Aircraft Engine"
    assert TRIZ_EXAMPLES[0].render(Locale.AR)["title"] == "محرك الطائرة"
