from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from app.schemas.common import Category
from app.services.reporting.records import RatingRow, ScoredValue

T = TypeVar('T')

_SLOTS: dict[Category, str] = {
    Category.spelling: 'spelling',
    Category.grammar: 'grammar',
    Category.gdpr: 'gdpr',
    Category.randomness: 'randomness',
}


@dataclass(slots=True)
class CategoryAccumulator(Generic[T]):
    """Running per-category aggregate with one slot per known category."""

    spelling: T
    grammar: T
    gdpr: T
    randomness: T

    @classmethod
    def empty(cls, factory: Callable[[], T]) -> CategoryAccumulator[T]:
        return cls(
            spelling=factory(),
            grammar=factory(),
            gdpr=factory(),
            randomness=factory(),
        )

    def update(self, row: RatingRow, fn: Callable[[T, RatingRow], T]) -> None:
        """Replace the slot for ``row.category`` with ``fn(slot, row)``.

        Raises ``UnknownCategoryError`` when the row's category is not one of
        the four known ones; the slot values are left untouched in that case.
        """
        slot = _SLOTS[Category.parse(row.category)]
        setattr(self, slot, fn(getattr(self, slot), row))

    def map(self, fn: Callable[[T], int]) -> tuple[int, int, int, int]:
        return (fn(self.spelling), fn(self.grammar), fn(self.gdpr), fn(self.randomness))


def new_pair_accumulator() -> CategoryAccumulator[list[ScoredValue]]:
    return CategoryAccumulator.empty(list)


def new_count_accumulator() -> CategoryAccumulator[int]:
    return CategoryAccumulator.empty(int)


def collect_pair(values: list[ScoredValue], row: RatingRow) -> list[ScoredValue]:
    values.append(ScoredValue(value=row.value, weight=row.weight))
    return values


def add_total(current: int, row: RatingRow) -> int:
    return current + row.total
