# coinchart/domain/layout/__init__.py
"""
Layout Engine - раскладка радиального графика монет.
"""

from .config import LayoutConfig, DEFAULT_CONFIG
from .scales import LinearScale, LogScale
from .scorer import enrich_records, sort_by_year
from .partitioner import group_by_category, partition_categories
from .year_rings import build_year_scale, distinct_years, map_year_rings
from .geometry import build_bubble_scale, resolve_subjects, resolve_geometry, score_arcs, slot_angle
from .text_layout import build_font_scale, resolve_text
from .engine import LayoutContext, build_context, compute_layout, validate_records

__all__ = [
    "LayoutConfig",
    "DEFAULT_CONFIG",
    "LinearScale",
    "LogScale",
    "enrich_records",
    "sort_by_year",
    "group_by_category",
    "partition_categories",
    "build_year_scale",
    "distinct_years",
    "map_year_rings",
    "build_bubble_scale",
    "resolve_subjects",
    "resolve_geometry",
    "score_arcs",
    "slot_angle",
    "build_font_scale",
    "resolve_text",
    "LayoutContext",
    "build_context",
    "compute_layout",
    "validate_records",
]
