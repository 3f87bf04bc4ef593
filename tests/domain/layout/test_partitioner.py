"""
Тесты для Category Partitioner.
"""

import math

import pytest

from coinchart.domain.layout.config import DEFAULT_CONFIG
from coinchart.domain.layout.partitioner import group_by_category, partition_categories
from coinchart.domain.layout.scorer import enrich_records


def _others(records):
    return [r for r in enrich_records(records) if r.code != "BTC"]


def test_group_by_category_keeps_first_seen_order(sample_records):
    groups = group_by_category(_others(sample_records))
    # После сортировки по году: LTC(2011), XRP, DOGE(2013), ETH(2015), BAT, ADA(2017)
    assert list(groups) == ["Currency", "Payments", "Platform"]
    assert [r.code for r in groups["Currency"]] == ["LTC", "DOGE"]
    assert [r.code for r in groups["Platform"]] == ["ETH", "BAT", "ADA"]


def test_sectors_cover_circle_minus_clearance(sample_records):
    sectors = partition_categories(_others(sample_records))
    total = sum(s.sweep for s in sectors)
    assert total == pytest.approx(2 * math.pi - DEFAULT_CONFIG.year_clearance)
    assert sectors[0].start_angle == pytest.approx(DEFAULT_CONFIG.rotation_offset)
    assert sectors[-1].end_angle == pytest.approx(2 * math.pi - DEFAULT_CONFIG.rotation_offset)


def test_sectors_are_contiguous_and_proportional(sample_records):
    sectors = partition_categories(_others(sample_records))
    per_bubble = (2 * math.pi - DEFAULT_CONFIG.year_clearance) / 6
    for prev, cur in zip(sectors, sectors[1:]):
        assert cur.start_angle == prev.end_angle
    for s in sectors:
        assert s.sweep == pytest.approx(per_bubble * len(s.members))


def test_single_category(two_records):
    sectors = partition_categories(_others(two_records))
    assert len(sectors) == 1
    assert sectors[0].category == "Platform"
    assert sectors[0].sweep == pytest.approx(2 * math.pi - math.pi / 16)


def test_no_records_no_sectors():
    assert partition_categories([]) == []
