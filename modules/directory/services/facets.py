"""
Filter Facet Computation.

Derives the hometown, generation, education level and education type
options shown on the explorer page, together with how many officials each
option selects. Every count filters the full officials list independently.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key

from modules.directory.schemas import UNKNOWN, FacetOption, Facets, OfficialSchema
from modules.directory.services.matching import (
    format_generation,
    matches_education_level,
    matches_education_type,
    matches_generation,
    matches_hometown,
    normalize_education_level,
    normalize_education_type,
)


def _as_number(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _compare(a: str, b: str, numeric: bool) -> int:
    if a == UNKNOWN:
        return 0 if b == UNKNOWN else 1
    if b == UNKNOWN:
        return -1
    if numeric:
        num_a, num_b = _as_number(a), _as_number(b)
        if num_a is not None and num_b is not None:
            return (num_a > num_b) - (num_a < num_b)
    key_a, key_b = (a.casefold(), a), (b.casefold(), b)
    return (key_a > key_b) - (key_a < key_b)


def sort_facet_values(values: Iterable[str], numeric: bool = False) -> list[str]:
    """
    Sort facet values alphabetically with "Unknown" always last.

    Args:
        values: Distinct facet values.
        numeric: Compare numerically when both values parse as numbers.
    """
    return sorted(values, key=cmp_to_key(lambda a, b: _compare(a, b, numeric)))


def _distinct(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(v for v in values if v and v.strip()))


def _options(
    values: Sequence[str],
    officials: Sequence[OfficialSchema],
    predicate: Callable[[OfficialSchema, str], bool],
) -> list[FacetOption]:
    return [
        FacetOption(value=value, count=sum(1 for o in officials if predicate(o, value)))
        for value in values
    ]


def hometown_values(officials: Sequence[OfficialSchema]) -> list[str]:
    return sort_facet_values(_distinct(o.home_province or UNKNOWN for o in officials))


def generation_values(officials: Sequence[OfficialSchema]) -> list[str]:
    return sort_facet_values(
        _distinct(format_generation(o.generation) or UNKNOWN for o in officials),
        numeric=True,
    )


def education_level_values(officials: Sequence[OfficialSchema]) -> list[str]:
    levels: list[str] = []
    for official in officials:
        if not official.degrees:
            levels.append(UNKNOWN)
            continue
        levels.extend(normalize_education_level(d.level) for d in official.degrees)
    return sort_facet_values(_distinct(levels))


def education_type_values(officials: Sequence[OfficialSchema]) -> list[str]:
    types: list[str] = []
    for official in officials:
        if not official.degrees:
            types.append(UNKNOWN)
            continue
        types.extend(normalize_education_type(d.type) for d in official.degrees)
    return sort_facet_values(_distinct(types))


def compute_facets(officials: Sequence[OfficialSchema]) -> Facets:
    """Derive every facet and its per-option counts from the officials list."""
    return Facets(
        hometowns=_options(hometown_values(officials), officials, matches_hometown),
        education_levels=_options(
            education_level_values(officials), officials, matches_education_level
        ),
        education_types=_options(
            education_type_values(officials), officials, matches_education_type
        ),
        generations=_options(generation_values(officials), officials, matches_generation),
    )
