# coinchart/domain/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

# --- Типы и алиасы ---

TextKind = Literal["code", "name"]

# --- Входные данные ---

@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """Сырая запись о монете. code уникален в пределах датасета."""
    code: str
    name: str
    year: int
    category: str
    market_cap: float
    volume_30d: float
    # Поля из CSV, которые ядро не использует
    type: str = ""
    fork_of: str = ""
    similar_to: str = ""


@dataclass(frozen=True, slots=True)
class EnrichedRecord:
    """Запись после скоринга. Все score в [0, 1]."""
    record: CurrencyRecord
    cap_score: float
    vol_score: float
    overall_score: float

    @property
    def code(self) -> str:
        return self.record.code

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def year(self) -> int:
        return self.record.year

    @property
    def category(self) -> str:
        return self.record.category

# --- Раскладка ---

@dataclass(frozen=True, slots=True)
class CategorySector:
    """Угловой сектор категории. Углы в радианах, против часовой стрелки."""
    category: str
    members: Tuple[EnrichedRecord, ...]
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True, slots=True)
class YearRing:
    year: int
    radius: float


@dataclass(frozen=True, slots=True)
class Centered:
    """Монета в центре холста (вне секторов)."""
    record: EnrichedRecord


@dataclass(frozen=True, slots=True)
class Categorized:
    """Монета внутри сектора своей категории; slot - индекс внутри сектора."""
    record: EnrichedRecord
    sector: CategorySector
    slot: int


LayoutSubject = Union[Centered, Categorized]


@dataclass(frozen=True, slots=True)
class ScoreArc:
    """Декоративное кольцо внутри пузыря. Углы как у секторов (0 - вправо, против часовой)."""
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float

    @property
    def sweep(self) -> float:
        return abs(self.end_angle - self.start_angle)


@dataclass(frozen=True, slots=True)
class BubbleGeometry:
    center_x: float
    center_y: float
    radius: float
    cap_arc: ScoreArc
    vol_arc: ScoreArc


@dataclass(frozen=True, slots=True)
class TextLine:
    text: str
    vertical_y: float
    font_size: float
    kind: TextKind


@dataclass(frozen=True, slots=True)
class TextPlacement:
    line_count: int
    font_size: float
    lines: Tuple[TextLine, ...]


@dataclass(frozen=True, slots=True)
class BubbleLayout:
    """Всё, что нужно рендереру для одного пузыря."""
    subject: LayoutSubject
    angle: Optional[float]  # None для центральной монеты
    ring_radius: float
    geometry: BubbleGeometry
    text: TextPlacement

    @property
    def record(self) -> EnrichedRecord:
        return self.subject.record

    @property
    def is_centered(self) -> bool:
        return isinstance(self.subject, Centered)


@dataclass(frozen=True, slots=True)
class LegendClearance:
    """Прямоугольник, разрывающий кольца лет, чтобы подписи читались."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class YearLabel:
    year: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class YearLegend:
    labels: Tuple[YearLabel, ...]
    caption: str
    caption_x: float
    caption_y: float


@dataclass(frozen=True, slots=True)
class ChartLayout:
    """Полная раскладка графика - единственный результат ядра."""
    width: int
    height: int
    center_x: float
    center_y: float
    sector_outer_radius: float
    sectors: Tuple[CategorySector, ...]
    rings: Tuple[YearRing, ...]
    bubbles: Tuple[BubbleLayout, ...]
    clearance: LegendClearance
    legend: Optional[YearLegend]

    def bubble(self, code: str) -> BubbleLayout:
        for b in self.bubbles:
            if b.record.code == code:
                return b
        raise KeyError(code)


__all__ = [
    "TextKind",
    "CurrencyRecord", "EnrichedRecord",
    "CategorySector", "YearRing",
    "Centered", "Categorized", "LayoutSubject",
    "ScoreArc", "BubbleGeometry", "TextLine", "TextPlacement", "BubbleLayout",
    "LegendClearance", "YearLabel", "YearLegend", "ChartLayout",
]
