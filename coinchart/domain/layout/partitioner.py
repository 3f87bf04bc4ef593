# coinchart/domain/layout/partitioner.py
"""
Category Partitioner: делит круг на секторы пропорционально числу монет в категории.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence

from ..models import CategorySector, EnrichedRecord
from .config import DEFAULT_CONFIG, LayoutConfig

logger = logging.getLogger("coinchart.layout.partitioner")


def group_by_category(records: Sequence[EnrichedRecord]) -> Dict[str, List[EnrichedRecord]]:
    """Группировка по категории в порядке первого появления (dict хранит порядок вставки)."""
    groups: Dict[str, List[EnrichedRecord]] = {}
    for r in records:
        groups.setdefault(r.category, []).append(r)
    return groups


def partition_categories(
    records: Sequence[EnrichedRecord],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[CategorySector]:
    """
    Построить секторы категорий.

    Args:
        records: Записи без центральной монеты
        config: Конфигурация (year_clearance, rotation_offset)

    Returns:
        Секторы подряд от rotation_offset; суммарная ширина 2pi - year_clearance
    """
    if not records:
        return []

    per_bubble = (2 * math.pi - config.year_clearance) / len(records)
    angle = config.rotation_offset

    sectors: List[CategorySector] = []
    for category, members in group_by_category(records).items():
        end = angle + per_bubble * len(members)
        sectors.append(CategorySector(
            category=category,
            members=tuple(members),
            start_angle=angle,
            end_angle=end,
        ))
        angle = end

    logger.info("partitioner: %d sectors for %d records", len(sectors), len(records))
    return sectors
