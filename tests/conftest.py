"""
Конфигурация pytest для тестов.
"""

import pytest

from coinchart.domain.models import CurrencyRecord


def make_record(code, name, year, category, cap, vol, **extra):
    return CurrencyRecord(
        code=code, name=name, year=year, category=category,
        market_cap=float(cap), volume_30d=float(vol), **extra,
    )


@pytest.fixture
def two_records():
    """Минимальный датасет: BTC в центре и одна монета в категории."""
    return [
        make_record("BTC", "Bitcoin", 2009, "", 100, 50),
        make_record("ETH", "Ether Classic", 2015, "Platform", 50, 50),
    ]


@pytest.fixture
def sample_records():
    """Датасет на несколько категорий и лет (порядок как в CSV)."""
    return [
        make_record("ETH", "Ethereum", 2015, "Platform", 30_000, 12_000),
        make_record("BTC", "Bitcoin", 2009, "", 100_000, 40_000),
        make_record("LTC", "Litecoin", 2011, "Currency", 3_000, 2_500),
        make_record("XRP", "xrp", 2013, "Payments", 20_000, 9_000),
        make_record("BAT", "Basic Attention Token", 2017, "Platform", 300, 40),
        make_record("DOGE", "Dogecoin", 2013, "Currency", 400, 300),
        make_record("ADA", "Cardano", 2017, "Platform", 5_000, 1_000),
    ]


@pytest.fixture
def sample_csv(tmp_path):
    """CSV в формате исходной таблицы (числа с разделителями тысяч)."""
    text = (
        "Code,Name,Inception,Category,Type,Market Cap,30 Day Trade Volume,Hard-Fork Of,Similar To\n"
        'BTC,Bitcoin,2009,,Coin,"100,000,000","40,000,000",,\n'
        'ETH,Ethereum,2015,Platform,Coin,"30,000,000","12,000,000",,\n'
        'ETC,Ethereum Classic,2016,Platform,Coin,"1,500,000","800,000",ETH,\n'
        'LTC,Litecoin,2011,Currency,Coin,"3,000,000","2,500,000",,BTC\n'
    )
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def record_factory():
    """Фабрика CurrencyRecord для тестов с собственными датасетами."""
    return make_record
