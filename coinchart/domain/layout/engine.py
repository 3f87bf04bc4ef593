# coinchart/domain/layout/engine.py
"""
Layout Engine: один проход от сырых записей до полной раскладки графика.

Никакого глобального состояния: шкалы и центральная монета живут в LayoutContext,
который передаётся в чистые функции. Повторный вызов на тех же данных даёт
идентичный результат.
"""
from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import EmptyDataset, InvalidDataset, MissingCenterRecord
from ..models import (
    BubbleLayout,
    CategorySector,
    ChartLayout,
    CurrencyRecord,
    EnrichedRecord,
    LegendClearance,
    YearLabel,
    YearLegend,
    YearRing,
)
from .config import DEFAULT_CONFIG, LayoutConfig
from .geometry import build_bubble_scale, resolve_geometry, resolve_subjects
from .partitioner import partition_categories
from .scales import LinearScale
from .scorer import enrich_records
from .text_layout import build_font_scale, resolve_text
from .year_rings import build_year_scale, distinct_years, map_year_rings

logger = logging.getLogger("coinchart.layout.engine")


@dataclass(frozen=True)
class LayoutContext:
    """Всё, что вычисляется один раз на датасет и нужно при раскладке пузырей."""
    config: LayoutConfig
    center: EnrichedRecord
    others: Tuple[EnrichedRecord, ...]
    sectors: Tuple[CategorySector, ...]
    rings: Tuple[YearRing, ...]
    year_scale: Optional[LinearScale]
    bubble_scale: LinearScale
    font_scale: LinearScale


def validate_records(records: Sequence[CurrencyRecord], config: LayoutConfig = DEFAULT_CONFIG) -> None:
    """Проверки входа до любых вычислений."""
    if not records:
        raise EmptyDataset()

    dupes = [code for code, n in Counter(r.code for r in records).items() if n > 1]
    if dupes:
        raise InvalidDataset(f"duplicate codes: {', '.join(sorted(dupes))}")

    for r in records:
        if not (math.isfinite(r.market_cap) and math.isfinite(r.volume_30d)):
            raise InvalidDataset(f"{r.code}: market cap or volume is not a finite number")
        if r.market_cap < 0 or r.volume_30d < 0:
            raise InvalidDataset(f"{r.code}: negative market cap or volume")

    if not any(r.code == config.center_code for r in records):
        raise MissingCenterRecord(config.center_code)


def build_context(records: Sequence[CurrencyRecord], config: LayoutConfig = DEFAULT_CONFIG) -> LayoutContext:
    validate_records(records, config)
    enriched = enrich_records(records, config)

    center = next(r for r in enriched if r.code == config.center_code)
    others = tuple(r for r in enriched if r.code != config.center_code)

    sectors = tuple(partition_categories(others, config))

    years = distinct_years(others)
    year_scale = build_year_scale(years, config) if years else None
    rings = tuple(map_year_rings(years, year_scale)) if years else ()

    return LayoutContext(
        config=config,
        center=center,
        others=others,
        sectors=sectors,
        rings=rings,
        year_scale=year_scale,
        bubble_scale=build_bubble_scale(config),
        font_scale=build_font_scale(config),
    )


def layout_bubbles(ctx: LayoutContext) -> List[BubbleLayout]:
    bubbles: List[BubbleLayout] = []
    for subject in resolve_subjects(ctx.center, ctx.sectors):
        angle, ring_radius, geometry = resolve_geometry(
            subject, ctx.year_scale, ctx.bubble_scale, ctx.config,
        )
        text = resolve_text(
            subject.record, geometry.center_y, geometry.radius, ctx.font_scale, ctx.config,
        )
        bubbles.append(BubbleLayout(
            subject=subject,
            angle=angle,
            ring_radius=ring_radius,
            geometry=geometry,
            text=text,
        ))
    return bubbles


def legend_clearance(config: LayoutConfig = DEFAULT_CONFIG) -> LegendClearance:
    """Полоса справа от центра высотой в два минимальных пузыря."""
    return LegendClearance(
        x=config.mid_x,
        y=config.mid_y - config.min_bubble,
        width=config.mid_x,
        height=config.min_bubble * 2,
    )


def year_legend(rings: Sequence[YearRing], config: LayoutConfig = DEFAULT_CONFIG) -> Optional[YearLegend]:
    if not rings:
        return None
    labels = tuple(YearLabel(year=r.year, x=config.mid_x + r.radius, y=config.mid_y) for r in rings)
    return YearLegend(
        labels=labels,
        caption=config.year_caption,
        caption_x=labels[-1].x + config.year_caption_offset,
        caption_y=config.mid_y,
    )


def compute_layout(records: Sequence[CurrencyRecord], config: LayoutConfig = DEFAULT_CONFIG) -> ChartLayout:
    """
    Полная раскладка графика.

    Args:
        records: Сырые записи (ровно одна с кодом config.center_code)
        config: Конфигурация

    Returns:
        ChartLayout: секторы, кольца лет, пузыри (центр первым), легенда
    """
    ctx = build_context(records, config)
    bubbles = layout_bubbles(ctx)
    logger.info("layout: %d bubbles, %d sectors, %d year rings",
                len(bubbles), len(ctx.sectors), len(ctx.rings))
    return ChartLayout(
        width=config.width,
        height=config.height,
        center_x=config.mid_x,
        center_y=config.mid_y,
        sector_outer_radius=config.sector_outer_radius,
        sectors=ctx.sectors,
        rings=ctx.rings,
        bubbles=tuple(bubbles),
        clearance=legend_clearance(config),
        legend=year_legend(ctx.rings, config),
    )
