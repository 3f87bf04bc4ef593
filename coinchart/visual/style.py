# coinchart/visual/style.py
from typing import Dict, List, Sequence

import matplotlib as mpl

BG_COLOR = "#FFFFFF"
RING_COLOR = "#C8D0D9"
TEXT_COLOR = "#1A1A2E"
CAP_ARC_COLOR = "#00B85C"
VOL_ARC_COLOR = "#FF8A8A"
OUTLINE_COLOR = "#4A5568"

# Пастельные заливки секторов, по кругу
CATEGORY_PALETTE: List[str] = [
    "#E3F2FD",  # голубой
    "#FFF3E0",  # персиковый
    "#E8F5E9",  # мятный
    "#F3E5F5",  # лавандовый
    "#FFFDE7",  # лимонный
    "#E0F7FA",  # бирюзовый
    "#FCE4EC",  # розовый
    "#EFEBE9",  # бежевый
]


def category_colors(categories: Sequence[str]) -> Dict[str, str]:
    """Цвет сектора по порядку категорий (порядок секторов стабилен)."""
    return {c: CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)] for i, c in enumerate(categories)}


def apply_chart_style():
    mpl.rcParams.update({
        "savefig.bbox": "standard",
        "axes.facecolor": BG_COLOR,
        "figure.facecolor": BG_COLOR,
        "font.family": "sans-serif",
        "font.size": 9,
    })
