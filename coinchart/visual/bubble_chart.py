# coinchart/visual/bubble_chart.py
"""
Рендер радиального графика монет в PNG по готовой раскладке (ChartLayout).

Вся геометрия уже посчитана в Layout Engine, здесь только рисование.
"""
from __future__ import annotations

import io
import logging
import math

import matplotlib
matplotlib.use("Agg")  # без GUI
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle, Wedge

from ..domain.models import BubbleLayout, ChartLayout, ScoreArc
from .style import (
    BG_COLOR,
    CAP_ARC_COLOR,
    OUTLINE_COLOR,
    RING_COLOR,
    TEXT_COLOR,
    VOL_ARC_COLOR,
    apply_chart_style,
    category_colors,
)

logger = logging.getLogger("coinchart.visual")


def _px_to_pt(px: float, dpi: int) -> float:
    """Размеры шрифта в раскладке в пикселях холста, matplotlib ждёт пункты."""
    return px * 72.0 / dpi


def _arc_degrees(start: float, end: float):
    """
    Полярные углы (против часовой, y вверх) -> углы Wedge в данных.
    Ось Y перевёрнута, поэтому угол меняет знак.
    """
    a, b = -math.degrees(start), -math.degrees(end)
    return min(a, b), max(a, b)


def _draw_score_arc(ax, cx: float, cy: float, arc: ScoreArc, color: str, zorder: float):
    if arc.sweep <= 0:
        return
    theta1, theta2 = _arc_degrees(arc.start_angle, arc.end_angle)
    ax.add_patch(Wedge(
        (cx, cy), arc.outer_radius, theta1, theta2,
        width=arc.outer_radius - arc.inner_radius,
        facecolor=color, edgecolor="none", zorder=zorder,
    ))


def _draw_bubble(ax, bubble: BubbleLayout, dpi: int, zorder: float):
    g = bubble.geometry
    # Белая подложка
    ax.add_patch(Circle((g.center_x, g.center_y), g.radius, facecolor=BG_COLOR, edgecolor="none", zorder=zorder))
    # Дуги cap/vol
    _draw_score_arc(ax, g.center_x, g.center_y, g.cap_arc, CAP_ARC_COLOR, zorder + 0.1)
    _draw_score_arc(ax, g.center_x, g.center_y, g.vol_arc, VOL_ARC_COLOR, zorder + 0.1)
    # Контур
    ax.add_patch(Circle(
        (g.center_x, g.center_y), g.radius,
        fill=False, edgecolor=OUTLINE_COLOR, linewidth=0.8, zorder=zorder + 0.2,
    ))
    for line in bubble.text.lines:
        ax.text(
            g.center_x, line.vertical_y, line.text,
            ha="center", va="center",
            fontsize=_px_to_pt(line.font_size, dpi),
            weight="bold" if line.kind == "code" else "normal",
            color=TEXT_COLOR,
            zorder=zorder + 0.3,
        )


def render_chart(layout: ChartLayout, dpi: int = 100) -> io.BytesIO:
    """
    Нарисовать PNG.

    Args:
        layout: Раскладка из compute_layout
        dpi: Разрешение; размер картинки в пикселях равен размеру холста

    Returns:
        BytesIO с PNG
    """
    apply_chart_style()
    W, H = layout.width, layout.height
    cx, cy = layout.center_x, layout.center_y

    fig = plt.figure(figsize=(W / dpi, H / dpi), dpi=dpi)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_axis_off()
    # Экранные координаты: y вниз
    ax.set_xlim(0, W)
    ax.set_ylim(H, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.set_autoscale_on(False)

    # 1) секторы категорий
    colors = category_colors([s.category for s in layout.sectors])
    for sector in layout.sectors:
        theta1, theta2 = _arc_degrees(sector.start_angle, sector.end_angle)
        ax.add_patch(Wedge(
            (cx, cy), layout.sector_outer_radius, theta1, theta2,
            facecolor=colors[sector.category], edgecolor="white", linewidth=1.0, zorder=1,
        ))

    # 2) кольца лет
    for ring in layout.rings:
        ax.add_patch(Circle((cx, cy), ring.radius, fill=False, edgecolor=RING_COLOR, linewidth=0.8, zorder=2))

    # 3) разрыв колец под подписи лет
    c = layout.clearance
    ax.add_patch(Rectangle((c.x, c.y), c.width, c.height, facecolor=BG_COLOR, edgecolor="none", zorder=3))

    # 4) подписи лет
    if layout.legend is not None:
        for label in layout.legend.labels:
            ax.text(label.x, label.y, str(label.year), ha="center", va="center",
                    fontsize=_px_to_pt(10, dpi), color=TEXT_COLOR, zorder=4)
        ax.text(layout.legend.caption_x, layout.legend.caption_y, layout.legend.caption,
                ha="center", va="center", fontsize=_px_to_pt(11, dpi),
                weight="bold", color=TEXT_COLOR, zorder=4)

    # 5) пузыри: центр первым, затем по секторам
    for idx, bubble in enumerate(layout.bubbles):
        _draw_bubble(ax, bubble, dpi, zorder=5 + idx)

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor=BG_COLOR)
    plt.close(fig)
    buf.seek(0)
    logger.info("visual: rendered %d bubbles (%dx%d @ %d dpi)", len(layout.bubbles), W, H, dpi)
    return buf
