# coinchart/domain/layout/config.py
"""
Конфигурация раскладки графика.

Все размеры холста, диапазоны пузырей/шрифтов и параметры шкал в одном месте.
Значения по умолчанию подобраны под холст 1200x900 - менять их стоит вместе.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class LayoutConfig:
    """Конфигурация Layout Engine."""

    # Холст
    width: int = 1200
    height: int = 900

    # Радиус пузыря и размер шрифта (линейно от overall score)
    min_bubble: float = 15.0
    max_bubble: float = 50.0
    min_font: float = 10.0
    max_font: float = 20.0

    # Зазор под легенду лет (справа, по оси X)
    year_clearance: float = math.pi / 16

    # Монета в центре
    center_code: str = "BTC"

    # Лог-шкалы для скоринга
    log_base: float = 1.1
    # Фиксированный домен для cap/vol score; всё, что ниже 0.01, прижимается к 0
    score_log_domain: Tuple[float, float] = (0.01, 1.0)

    # Доля сектора, отдаваемая под отступ с каждого края
    sector_padding: float = 0.1

    # Внутренний радиус дуг cap/vol относительно радиуса пузыря
    arc_inner_ratio: float = 0.85
    # Дуги начинаются снизу пузыря (6 часов)
    arc_anchor_angle: float = -math.pi / 2

    # Текст
    name_font_ratio: float = 0.8
    min_legible_radius: float = 18.0
    max_name_words: int = 2
    # Вертикальная позиция строки: 0 - верх пузыря, 1 - низ
    text_layout_map: Dict[int, Tuple[float, ...]] = field(default_factory=lambda: {
        1: (0.5,),
        2: (0.35, 0.6),
        3: (0.3, 0.55, 0.75),
    })

    # Легенда лет
    year_caption: str = "Inception"
    year_caption_offset: float = 50.0

    @property
    def mid_x(self) -> float:
        return self.width / 2

    @property
    def mid_y(self) -> float:
        return self.height / 2

    @property
    def rotation_offset(self) -> float:
        return self.year_clearance / 2

    @property
    def min_ring(self) -> float:
        return self.max_bubble * 2

    @property
    def max_ring(self) -> float:
        return (min(self.width, self.height) / 2) - self.max_bubble

    @property
    def sector_outer_radius(self) -> float:
        return self.max_ring + 2 * self.max_bubble

    @property
    def max_line_count(self) -> int:
        return max(self.text_layout_map)


DEFAULT_CONFIG = LayoutConfig()
