"""Predation table: what an eaten cell turns into.

The table is closed over the six cell kinds. Rules are matched in order and
the first match wins; a pair with no rule leaves the eaten cell unchanged.
"""

from __future__ import annotations

from ecofield.domain.cell import Cell

# (eater, eaten) -> replacement for the eaten cell
CombinationRuleTable = tuple[tuple[tuple[Cell, Cell], Cell], ...]

COMBINATION_RULES: CombinationRuleTable = (
    ((Cell.PLANT, Cell.FOOD), Cell.FOOD),
    ((Cell.VIRUS, Cell.FOOD), Cell.VIRUS),
    ((Cell.VIRUS, Cell.PLANT), Cell.VIRUS),
    ((Cell.WATER, Cell.VIRUS), Cell.WATER),
    ((Cell.PLANT, Cell.WATER), Cell.PLANT),
    ((Cell.WATER, Cell.FOOD), Cell.FUNGUS),
    ((Cell.FUNGUS, Cell.FUNGUS), Cell.FUNGUS),
    ((Cell.PLANT, Cell.FUNGUS), Cell.PLANT),
    ((Cell.FUNGUS, Cell.PLANT), Cell.FOOD),
)


def _build_lookup(rules: CombinationRuleTable) -> dict[tuple[Cell, Cell], Cell]:
    """Flatten ordered rules into a dict, keeping the first rule per pair."""
    lookup: dict[tuple[Cell, Cell], Cell] = {}
    for pair, result in rules:
        lookup.setdefault(pair, result)
    return lookup


_LOOKUP = _build_lookup(COMBINATION_RULES)


def combine(eater: Cell, eaten: Cell) -> Cell:
    """Return what ``eaten`` becomes after ``eater`` eats it."""
    return _LOOKUP.get((Cell(eater), Cell(eaten)), Cell(eaten))
