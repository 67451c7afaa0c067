from __future__ import annotations

from datetime import date

import pytest

from app.schemas.common import Category, UnknownCategoryError
from app.services.reporting.accumulator import (
    CategoryAccumulator,
    add_total,
    collect_pair,
    new_count_accumulator,
    new_pair_accumulator,
)
from app.services.reporting.records import RatingRow, ScoredValue


def _row(category: str, value: int = 3, weight: float = 1.0, total: int = 1) -> RatingRow:
    return RatingRow(day=date(2025, 1, 1), category=category, value=value, weight=weight, total=total)


def test_category_parse_is_closed_and_case_sensitive() -> None:
    assert Category.parse('GDPR') is Category.gdpr
    assert Category.parse(Category.spelling) is Category.spelling
    with pytest.raises(UnknownCategoryError):
        Category.parse('gdpr')
    with pytest.raises(UnknownCategoryError) as exc_info:
        Category.parse('Punctuality')
    assert exc_info.value.category == 'Punctuality'


def test_update_routes_rows_to_their_slot() -> None:
    totals = new_count_accumulator()
    totals.update(_row('Spelling', total=2), add_total)
    totals.update(_row('Spelling', total=3), add_total)
    totals.update(_row('GDPR', total=4), add_total)

    assert totals == CategoryAccumulator(spelling=5, grammar=0, gdpr=4, randomness=0)
    assert totals.gdpr == 4


def test_pair_slots_start_empty_and_independent() -> None:
    pairs = new_pair_accumulator()
    pairs.update(_row('Grammar', value=4, weight=0.5), collect_pair)

    assert pairs.grammar == [ScoredValue(value=4, weight=0.5)]
    assert pairs.spelling == []
    assert pairs.spelling is not pairs.gdpr


def test_unknown_category_leaves_slots_untouched() -> None:
    totals = new_count_accumulator()
    totals.update(_row('Randomness'), add_total)

    with pytest.raises(UnknownCategoryError):
        totals.update(_row('Punctuality'), add_total)

    assert totals.map(int) == (0, 0, 0, 1)
