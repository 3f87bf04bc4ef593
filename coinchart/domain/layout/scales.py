# coinchart/domain/layout/scales.py
"""
Шкалы domain -> range (линейная и логарифмическая).

Работают и со скалярами, и с numpy-массивами.
Вырожденный домен (d0 == d1) не ошибка: все значения уходят в начало диапазона.
"""
from __future__ import annotations

import logging
import math
from typing import Tuple, Union

import numpy as np

logger = logging.getLogger("coinchart.layout.scales")

Number = Union[float, np.ndarray]


class LinearScale:
    """Линейное отображение [d0, d1] -> [r0, r1]."""

    def __init__(
        self,
        domain: Tuple[float, float],
        range_: Tuple[float, float] = (0.0, 1.0),
        clamp: bool = False,
        name: str = "linear",
    ):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))
        self.clamp = clamp
        self.name = name
        if self.is_degenerate:
            logger.warning("scale %s: degenerate domain %s, mapping to %s", name, self.domain, self.range[0])

    @property
    def is_degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def _normalize(self, x: np.ndarray) -> np.ndarray:
        d0, d1 = self.domain
        if self.is_degenerate:
            return np.zeros_like(x, dtype=float)
        return (x - d0) / (d1 - d0)

    def __call__(self, x: Number) -> Number:
        arr = np.asarray(x, dtype=float)
        t = self._normalize(arr)
        if self.clamp:
            t = np.clip(t, 0.0, 1.0)
        r0, r1 = self.range
        out = r0 + t * (r1 - r0)
        if np.ndim(out) == 0:
            return float(out)
        return out


class LogScale(LinearScale):
    """
    Логарифмическое отображение: линейная шкала над log_base(x).

    Домен должен быть строго положительным. Значения <= 0 логарифма не имеют:
    при clamp они прижимаются к началу диапазона, без clamp - ValueError.
    """

    def __init__(
        self,
        domain: Tuple[float, float],
        range_: Tuple[float, float] = (0.0, 1.0),
        base: float = 10.0,
        clamp: bool = False,
        name: str = "log",
    ):
        if domain[0] <= 0 or domain[1] <= 0:
            raise ValueError(f"scale {name}: log domain must be positive, got {domain}")
        if base <= 0 or base == 1:
            raise ValueError(f"scale {name}: invalid log base {base}")
        self.base = float(base)
        super().__init__(domain, range_, clamp=clamp, name=name)

    def _log(self, x: np.ndarray) -> np.ndarray:
        return np.log(x) / math.log(self.base)

    def _normalize(self, x: np.ndarray) -> np.ndarray:
        if self.is_degenerate:
            return np.zeros_like(x, dtype=float)
        positive = x > 0
        if not np.all(positive):
            if not self.clamp:
                raise ValueError(f"scale {self.name}: non-positive input for log scale")
        # Неположительные значения подменяем началом домена - после clamp это 0
        safe = np.where(positive, x, self.domain[0])
        lo, hi = self._log(np.asarray(self.domain, dtype=float))
        t = (self._log(safe) - lo) / (hi - lo)
        return np.where(positive, t, 0.0)
