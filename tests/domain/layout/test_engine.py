"""
Тесты для полной раскладки (compute_layout).
"""

import math
from dataclasses import replace

import pytest

from coinchart.domain.errors import EmptyDataset, InvalidDataset, MissingCenterRecord
from coinchart.domain.layout import DEFAULT_CONFIG, build_context, compute_layout


def test_two_record_scenario(two_records):
    layout = compute_layout(two_records)

    btc = layout.bubble("BTC")
    assert btc.is_centered
    assert (btc.geometry.center_x, btc.geometry.center_y) == (600, 450)

    eth = layout.bubble("ETH")
    sector = layout.sectors[0]
    assert eth.angle == pytest.approx(DEFAULT_CONFIG.rotation_offset + sector.sweep / 2)
    assert eth.ring_radius == pytest.approx(DEFAULT_CONFIG.min_ring)
    # ETH - минимальный overall, пузырь 15 < 18, поэтому только код
    assert eth.geometry.radius == pytest.approx(15)
    assert eth.text.line_count == 1


def test_three_line_label_for_large_bubble(record_factory):
    records = [
        record_factory("BTC", "Bitcoin", 2009, "", 100, 50),
        record_factory("ETH", "Ether Classic", 2015, "Platform", 90, 50),
        record_factory("DOGE", "Dogecoin", 2013, "Currency", 1, 1),
    ]
    eth = compute_layout(records).bubble("ETH")
    assert eth.geometry.radius >= 18
    assert eth.text.line_count == 3
    assert [l.text for l in eth.text.lines] == ["ETH", "Ether", "Classic"]


def test_center_bubble_first_then_sector_order(sample_records):
    layout = compute_layout(sample_records)
    assert [b.record.code for b in layout.bubbles] == ["BTC", "LTC", "DOGE", "XRP", "ETH", "BAT", "ADA"]


def test_sector_sum_property(sample_records):
    layout = compute_layout(sample_records)
    assert sum(s.sweep for s in layout.sectors) == pytest.approx(2 * math.pi - math.pi / 16)
    assert all("BTC" not in [m.code for m in s.members] for s in layout.sectors)


def test_bubbles_stay_inside_their_sector(sample_records):
    layout = compute_layout(sample_records)
    for b in layout.bubbles:
        if b.is_centered:
            continue
        sector = b.subject.sector
        assert sector.start_angle < b.angle < sector.end_angle
        assert DEFAULT_CONFIG.min_bubble <= b.geometry.radius <= DEFAULT_CONFIG.max_bubble


def test_small_bubbles_have_single_line(sample_records):
    layout = compute_layout(sample_records)
    for b in layout.bubbles:
        if b.geometry.radius < 18 or b.record.code == b.record.name.upper():
            assert b.text.line_count == 1


def test_year_legend_and_clearance(sample_records):
    layout = compute_layout(sample_records)
    assert [r.year for r in layout.rings] == [2011, 2013, 2015, 2017]
    labels = layout.legend.labels
    assert labels[0].x == pytest.approx(700)
    assert labels[-1].x == pytest.approx(1000)
    assert layout.legend.caption == "Inception"
    assert layout.legend.caption_x == pytest.approx(1050)
    c = layout.clearance
    assert (c.x, c.y, c.width, c.height) == (600, 435, 600, 30)
    assert layout.sector_outer_radius == pytest.approx(500)


def test_layout_is_deterministic(sample_records):
    assert compute_layout(sample_records) == compute_layout(list(sample_records))


def test_context_holds_scales(sample_records):
    ctx = build_context(sample_records)
    assert ctx.center.code == "BTC"
    assert len(ctx.others) == len(sample_records) - 1
    assert ctx.year_scale(2011) == pytest.approx(100)


def test_only_center_record():
    """Только центральная монета: без секторов, колец и легенды."""
    from coinchart.domain.models import CurrencyRecord
    layout = compute_layout([CurrencyRecord("BTC", "Bitcoin", 2009, "", 1.0, 1.0)])
    assert layout.sectors == ()
    assert layout.rings == ()
    assert layout.legend is None
    assert len(layout.bubbles) == 1


def test_custom_center_code(sample_records):
    config = replace(DEFAULT_CONFIG, center_code="ETH")
    layout = compute_layout(sample_records, config)
    assert layout.bubble("ETH").is_centered
    assert not layout.bubble("BTC").is_centered


def test_missing_center(sample_records):
    records = [r for r in sample_records if r.code != "BTC"]
    with pytest.raises(MissingCenterRecord) as exc:
        compute_layout(records)
    assert exc.value.code == "BTC"


def test_empty_dataset():
    with pytest.raises(EmptyDataset):
        compute_layout([])


def test_duplicate_codes(sample_records):
    with pytest.raises(InvalidDataset):
        compute_layout(sample_records + [sample_records[0]])


def test_negative_values(record_factory, two_records):
    with pytest.raises(InvalidDataset):
        compute_layout(two_records + [record_factory("BAD", "Bad", 2018, "x", -1, 1)])


@pytest.mark.parametrize("cap, vol", [
    (float("nan"), 50.0),
    (float("inf"), 50.0),
    (50.0, float("nan")),
    (50.0, float("-inf")),
])
def test_non_finite_values_are_rejected(record_factory, cap, vol):
    """NaN/inf в капе или объёме - InvalidDataset до скоринга."""
    records = [
        record_factory("BTC", "Bitcoin", 2009, "", 100, 50),
        record_factory("ETH", "Ethereum", 2015, "Platform", cap, vol),
        record_factory("LTC", "Litecoin", 2011, "Currency", 10, 5),
    ]
    with pytest.raises(InvalidDataset) as exc:
        compute_layout(records)
    assert "ETH" in str(exc.value)


def test_scale_builders_are_exported(two_records):
    """resolve_text/resolve_geometry используются через пакет без импорта подмодулей."""
    from coinchart.domain.layout import (
        build_bubble_scale, build_font_scale, build_year_scale, partition_categories,
        enrich_records, resolve_geometry, resolve_text,
    )
    from coinchart.domain.models import Categorized

    eth = next(r for r in enrich_records(two_records) if r.code == "ETH")
    sector = partition_categories([eth])[0]
    _, _, g = resolve_geometry(Categorized(eth, sector, 0), build_year_scale([2015]), build_bubble_scale())
    placement = resolve_text(eth, g.center_y, g.radius, build_font_scale())
    assert g.radius == pytest.approx(15)
    assert placement.font_size == pytest.approx(10)
