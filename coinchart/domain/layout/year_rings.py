# coinchart/domain/layout/year_rings.py
"""
Year Radius Mapper: год основания -> радиус кольца.
"""
from __future__ import annotations

from typing import Iterable, List

from ..models import EnrichedRecord, YearRing
from .config import DEFAULT_CONFIG, LayoutConfig
from .scales import LinearScale


def distinct_years(records: Iterable[EnrichedRecord]) -> List[int]:
    return sorted({r.year for r in records})


def build_year_scale(years: List[int], config: LayoutConfig = DEFAULT_CONFIG) -> LinearScale:
    """Линейная шкала [min_year, max_year] -> [min_ring, max_ring]. Один год -> min_ring."""
    if not years:
        raise ValueError("build_year_scale: no years")
    return LinearScale(
        (years[0], years[-1]),
        (config.min_ring, config.max_ring),
        name="year",
    )


def map_year_rings(years: List[int], scale: LinearScale) -> List[YearRing]:
    return [YearRing(year=y, radius=scale(y)) for y in years]
