# coinchart/application/dto/chart_dto.py
"""
DTO для экспорта раскладки графика (контракт для внешнего рендерера).
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from ...domain.models import BubbleLayout, ChartLayout


@dataclass
class TextLineDTO:
    text: str
    vertical_y: float
    font_size: float


@dataclass
class BubbleDTO:
    """Пузырь одной монеты."""
    code: str
    centered: bool
    center_x: float
    center_y: float
    bubble_radius: float
    cap_arc_sweep: float
    vol_arc_sweep: float
    font_size: float
    text_lines: List[TextLineDTO]

    @classmethod
    def from_layout(cls, bubble: BubbleLayout) -> "BubbleDTO":
        g = bubble.geometry
        return cls(
            code=bubble.record.code,
            centered=bubble.is_centered,
            center_x=g.center_x,
            center_y=g.center_y,
            bubble_radius=g.radius,
            cap_arc_sweep=g.cap_arc.sweep,
            vol_arc_sweep=g.vol_arc.sweep,
            font_size=bubble.text.font_size,
            text_lines=[TextLineDTO(l.text, l.vertical_y, l.font_size) for l in bubble.text.lines],
        )


@dataclass
class SectorDTO:
    category: str
    start_angle: float
    end_angle: float
    codes: List[str]


@dataclass
class YearRingDTO:
    year: int
    radius: float


@dataclass
class ChartDTO:
    """Раскладка целиком."""
    width: int
    height: int
    center_x: float
    center_y: float
    bubbles: List[BubbleDTO]
    sectors: List[SectorDTO]
    year_rings: List[YearRingDTO]
    legend_clearance: Dict[str, float]
    year_caption: Optional[Dict[str, Any]] = None

    @classmethod
    def from_layout(cls, layout: ChartLayout) -> "ChartDTO":
        caption = None
        if layout.legend is not None:
            caption = {
                "text": layout.legend.caption,
                "x": layout.legend.caption_x,
                "y": layout.legend.caption_y,
            }
        c = layout.clearance
        return cls(
            width=layout.width,
            height=layout.height,
            center_x=layout.center_x,
            center_y=layout.center_y,
            bubbles=[BubbleDTO.from_layout(b) for b in layout.bubbles],
            sectors=[
                SectorDTO(s.category, s.start_angle, s.end_angle, [m.code for m in s.members])
                for s in layout.sectors
            ],
            year_rings=[YearRingDTO(r.year, r.radius) for r in layout.rings],
            legend_clearance={"x": c.x, "y": c.y, "width": c.width, "height": c.height},
            year_caption=caption,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
