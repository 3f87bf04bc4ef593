# coinchart/domain/errors.py
"""
Ошибки входных данных для построения раскладки графика.

Все ошибки поднимаются синхронно до любого рендеринга или записи файлов.
Вырожденная шкала (все значения домена равны) ошибкой не считается:
шкала отдаёт начало диапазона и пишет warning в лог.
"""
from __future__ import annotations


class LayoutError(ValueError):
    """Базовая ошибка раскладки."""


class EmptyDataset(LayoutError):
    """Нет ни одной записи - рисовать нечего."""

    def __init__(self, message: str = "dataset is empty"):
        super().__init__(message)


class MissingCenterRecord(LayoutError):
    """В данных нет монеты, которая должна стоять в центре."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"no record with centered code {code!r}")


class MalformedNumber(LayoutError):
    """Поле cap/volume не парсится как число даже после удаления разделителей тысяч."""

    def __init__(self, code: str, field: str, raw: object):
        self.code = code
        self.field = field
        self.raw = raw
        super().__init__(f"{code}: field {field!r} is not a number: {raw!r}")


class InvalidDataset(LayoutError):
    """Структурно некорректные данные (дубли кодов, отрицательные значения, нулевая капа и т.п.)."""


__all__ = [
    "LayoutError",
    "EmptyDataset",
    "MissingCenterRecord",
    "MalformedNumber",
    "InvalidDataset",
]
