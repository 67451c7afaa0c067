from __future__ import annotations

from enum import Enum


class UnknownCategoryError(ValueError):
    def __init__(self, category: object) -> None:
        super().__init__(f'unknown category: {category}')
        self.category = category


class Category(str, Enum):
    spelling = 'Spelling'
    grammar = 'Grammar'
    gdpr = 'GDPR'
    randomness = 'Randomness'

    @classmethod
    def parse(cls, raw: str | Category) -> Category:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError as exc:
            raise UnknownCategoryError(raw) from exc


class ScoreKind(str, Enum):
    totals = 'TOTALS'
    daily = 'DAILY'
    weekly = 'WEEKLY'


class Granularity(str, Enum):
    daily = 'daily'
    weekly = 'weekly'


class ScoreFormula(str, Enum):
    weighted = 'weighted'
    average = 'average'
