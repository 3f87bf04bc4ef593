# coinchart/domain/layout/scorer.py
"""
Scorer: нормализация капитализации и объёма в сравнимые score [0, 1].

Шаги:
1. стабильная сортировка по году (при равных годах сохраняется входной порядок);
2. cap/vol делятся на максимум по датасету (включая центральную монету);
3. overall = 2 * cap + vol, затем лог-шкала (base 1.1) по min/max самого датасета;
4. cap/vol прогоняются через лог-шкалу с фиксированным доменом [0.01, 1] и clamp.

Сжатие малых значений в п.4 намеренное: всё, что меньше 1% от лидера,
становится 0 и визуально не различается.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ..errors import EmptyDataset, InvalidDataset
from ..models import CurrencyRecord, EnrichedRecord
from .config import DEFAULT_CONFIG, LayoutConfig
from .scales import LogScale

logger = logging.getLogger("coinchart.layout.scorer")

CAP_WEIGHT = 2.0
VOL_WEIGHT = 1.0


def sort_by_year(records: Sequence[CurrencyRecord]) -> List[CurrencyRecord]:
    """Сортировка по году. sorted() стабилен: при равных годах порядок входа."""
    return sorted(records, key=lambda r: r.year)


def _max_positive(values: np.ndarray, field: str) -> float:
    top = float(values.max())
    if top <= 0:
        raise InvalidDataset(f"all records have zero {field}")
    return top


def enrich_records(
    records: Sequence[CurrencyRecord],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[EnrichedRecord]:
    """
    Посчитать cap/vol/overall score для всех записей.

    Args:
        records: Записи о монетах (не пустые)
        config: Конфигурация (база логарифма, фиксированный домен score)

    Returns:
        Список EnrichedRecord, отсортированный по году
    """
    if not records:
        raise EmptyDataset()

    ordered = sort_by_year(records)

    caps = np.array([r.market_cap for r in ordered], dtype=float)
    vols = np.array([r.volume_30d for r in ordered], dtype=float)

    cap_raw = caps / _max_positive(caps, "market cap")
    vol_raw = vols / _max_positive(vols, "volume")
    overall_raw = CAP_WEIGHT * cap_raw + VOL_WEIGHT * vol_raw

    # Нулевые cap и vol одновременно - логарифма нет, такая монета получает overall 0
    positive = overall_raw > 0
    for r, ok in zip(ordered, positive):
        if not ok:
            logger.warning("scorer: %s has zero market cap and volume", r.code)

    overall_scale = LogScale(
        (float(overall_raw[positive].min()), float(overall_raw[positive].max())),
        (0.0, 1.0),
        base=config.log_base,
        clamp=True,
        name="overall",
    )
    score_scale = LogScale(
        config.score_log_domain,
        (0.0, 1.0),
        base=config.log_base,
        clamp=True,
        name="score",
    )

    overall = overall_scale(overall_raw)
    cap_score = score_scale(cap_raw)
    vol_score = score_scale(vol_raw)

    enriched = [
        EnrichedRecord(
            record=r,
            cap_score=float(c),
            vol_score=float(v),
            overall_score=float(o),
        )
        for r, c, v, o in zip(ordered, cap_score, vol_score, overall)
    ]
    logger.info("scorer: enriched %d records (max cap %.4g, max vol %.4g)",
                len(enriched), caps.max(), vols.max())
    return enriched
