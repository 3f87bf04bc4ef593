# coinchart/domain/layout/geometry.py
"""
Bubble Geometry Resolver: центр, радиус и дуги score для каждого пузыря.

Экранные координаты: y растёт вниз, поэтому полярный угол a (против часовой)
даёт точку (mid_x + R*cos a, mid_y - R*sin a).
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..models import (
    BubbleGeometry,
    Categorized,
    Centered,
    CategorySector,
    EnrichedRecord,
    LayoutSubject,
    ScoreArc,
)
from .config import DEFAULT_CONFIG, LayoutConfig
from .scales import LinearScale

logger = logging.getLogger("coinchart.layout.geometry")


def resolve_subjects(center: EnrichedRecord, sectors: Sequence[CategorySector]) -> List[LayoutSubject]:
    """Центральная монета первой, дальше монеты секторов в порядке секторов."""
    subjects: List[LayoutSubject] = [Centered(center)]
    for sector in sectors:
        for slot, record in enumerate(sector.members):
            subjects.append(Categorized(record=record, sector=sector, slot=slot))
    return subjects


def slot_angle(sector: CategorySector, slot: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """
    Угол центра пузыря внутри сектора.

    По краям сектора отступ sector_padding от ширины, остаток делится поровну,
    пузырь ставится в середину своего под-слота.
    """
    sweep = sector.sweep
    min_angle = sector.start_angle + sweep * config.sector_padding
    usable = sweep * (1 - 2 * config.sector_padding)
    per_bubble = usable / len(sector.members)
    return min_angle + slot * per_bubble + 0.5 * per_bubble


def polar_to_screen(angle: float, radius: float, config: LayoutConfig = DEFAULT_CONFIG) -> Tuple[float, float]:
    return (
        config.mid_x + radius * math.cos(angle),
        config.mid_y - radius * math.sin(angle),
    )


def build_bubble_scale(config: LayoutConfig = DEFAULT_CONFIG) -> LinearScale:
    return LinearScale((0.0, 1.0), (config.min_bubble, config.max_bubble), name="bubble")


def score_arcs(
    radius: float,
    cap_score: float,
    vol_score: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Tuple[ScoreArc, ScoreArc]:
    """
    Дуги cap и vol: обе от низа пузыря, cap идёт вверх по правой стороне,
    vol - по левой. Полный score = полкруга.
    """
    anchor = config.arc_anchor_angle
    inner = config.arc_inner_ratio * radius
    cap_arc = ScoreArc(
        start_angle=anchor,
        end_angle=anchor + math.pi * cap_score,
        inner_radius=inner,
        outer_radius=radius,
    )
    vol_arc = ScoreArc(
        start_angle=anchor,
        end_angle=anchor - math.pi * vol_score,
        inner_radius=inner,
        outer_radius=radius,
    )
    return cap_arc, vol_arc


def resolve_geometry(
    subject: LayoutSubject,
    year_scale: Optional[LinearScale],
    bubble_scale: LinearScale,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Tuple[Optional[float], float, BubbleGeometry]:
    """
    Геометрия одного пузыря.

    Returns:
        (угол или None для центра, радиус кольца года, BubbleGeometry)
    """
    record = subject.record
    radius = bubble_scale(record.overall_score)

    if isinstance(subject, Centered):
        # Центр холста независимо от года
        angle = None
        ring_radius = 0.0
        x, y = config.mid_x, config.mid_y
    else:
        angle = slot_angle(subject.sector, subject.slot, config)
        ring_radius = year_scale(record.year)
        x, y = polar_to_screen(angle, ring_radius, config)

    cap_arc, vol_arc = score_arcs(radius, record.cap_score, record.vol_score, config)
    logger.debug("geometry %s: (%.2f, %.2f) r=%.2f", record.code, x, y, radius)
    return angle, ring_radius, BubbleGeometry(
        center_x=x,
        center_y=y,
        radius=radius,
        cap_arc=cap_arc,
        vol_arc=vol_arc,
    )
