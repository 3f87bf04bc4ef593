# coinchart/infrastructure/csv_loader.py
"""
Загрузка списка монет из CSV.

Числа в CSV приходят с разделителями тысяч ("1,234,567"), их снимаем до парсинга.
Непарсящееся число - MalformedNumber, до ядра такая запись не доходит.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from ..domain.errors import EmptyDataset, InvalidDataset, MalformedNumber
from ..domain.models import CurrencyRecord

logger = logging.getLogger("coinchart.loader")

# Колонка CSV -> поле CurrencyRecord
COLUMNS: Dict[str, str] = {
    "Code": "code",
    "Name": "name",
    "Inception": "year",
    "Category": "category",
    "Type": "type",
    "Market Cap": "market_cap",
    "30 Day Trade Volume": "volume_30d",
    "Hard-Fork Of": "fork_of",
    "Similar To": "similar_to",
}

REQUIRED = ("Code", "Name", "Inception", "Category", "Market Cap", "30 Day Trade Volume")


def parse_number(raw: object, *, code: str = "?", field: str = "?") -> float:
    """'1,234.5' -> 1234.5. Пустое или мусор - MalformedNumber."""
    text = str(raw).strip().replace(",", "")
    try:
        value = float(text)
    except ValueError:
        raise MalformedNumber(code, field, raw) from None
    if not math.isfinite(value):
        raise MalformedNumber(code, field, raw)
    return value


def parse_year(raw: object, *, code: str = "?") -> int:
    value = parse_number(raw, code=code, field="Inception")
    if value != int(value):
        raise MalformedNumber(code, "Inception", raw)
    return int(value)


def records_from_frame(df: pd.DataFrame) -> List[CurrencyRecord]:
    """DataFrame (все колонки строками) -> список CurrencyRecord в порядке строк."""
    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise InvalidDataset(f"missing CSV columns: {', '.join(missing)}")

    df = df.fillna("")
    records: List[CurrencyRecord] = []
    for row in df.to_dict(orient="records"):
        code = str(row["Code"]).strip()
        records.append(CurrencyRecord(
            code=code,
            name=str(row["Name"]).strip(),
            year=parse_year(row["Inception"], code=code),
            category=str(row["Category"]).strip(),
            market_cap=parse_number(row["Market Cap"], code=code, field="Market Cap"),
            volume_30d=parse_number(row["30 Day Trade Volume"], code=code, field="30 Day Trade Volume"),
            type=str(row.get("Type", "")).strip(),
            fork_of=str(row.get("Hard-Fork Of", "")).strip(),
            similar_to=str(row.get("Similar To", "")).strip(),
        ))
    return records


def load_currencies(path: Union[str, Path]) -> List[CurrencyRecord]:
    """
    Прочитать CSV с монетами.

    Args:
        path: Путь к CSV

    Returns:
        Записи в порядке файла
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        # Пустой файл - даже без заголовка
        raise EmptyDataset(f"CSV file is empty: {path}") from None
    df.columns = [str(c).strip() for c in df.columns]
    records = records_from_frame(df)
    logger.info("loader: %d records from %s", len(records), path)
    return records
