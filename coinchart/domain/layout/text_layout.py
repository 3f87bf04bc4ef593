# coinchart/domain/layout/text_layout.py
"""
Text Layout Resolver: сколько строк текста влезает в пузырь и где они стоят.
"""
from __future__ import annotations

import logging
from typing import List

from ..models import EnrichedRecord, TextLine, TextPlacement
from .config import DEFAULT_CONFIG, LayoutConfig
from .scales import LinearScale

logger = logging.getLogger("coinchart.layout.text")


def build_font_scale(config: LayoutConfig = DEFAULT_CONFIG) -> LinearScale:
    return LinearScale((0.0, 1.0), (config.min_font, config.max_font), name="font")


def name_words(name: str) -> List[str]:
    return name.split()


def shows_name(record: EnrichedRecord, radius: float, config: LayoutConfig = DEFAULT_CONFIG) -> bool:
    """Имя не пишем, если оно совпадает с кодом или пузырь слишком мал."""
    if record.code == record.name.upper():
        return False
    if radius < config.min_legible_radius:
        return False
    return bool(name_words(record.name))


def resolve_text(
    record: EnrichedRecord,
    center_y: float,
    radius: float,
    font_scale: LinearScale,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> TextPlacement:
    """
    Строки текста для пузыря: код и до max_name_words слов имени.

    Args:
        record: Запись со score
        center_y: Y центра пузыря
        radius: Радиус пузыря
        font_scale: Шкала overall score -> размер шрифта
        config: Конфигурация

    Returns:
        TextPlacement с вертикальными позициями из text_layout_map
    """
    font_size = font_scale(record.overall_score)
    name_font = font_size * config.name_font_ratio

    words: List[str] = []
    if shows_name(record, radius, config):
        all_words = name_words(record.name)
        words = all_words[:config.max_name_words]
        if len(all_words) > len(words):
            logger.warning("text: %s name %r truncated to %d words",
                           record.code, record.name, len(words))

    line_count = min(1 + len(words), config.max_line_count)
    fractions = config.text_layout_map[line_count]
    top = center_y - radius

    def line_y(i: int) -> float:
        # 0 - верх пузыря, 1 - низ
        return top + fractions[i] * 2 * radius

    lines = [TextLine(text=record.code, vertical_y=line_y(0), font_size=font_size, kind="code")]
    for i, word in enumerate(words[:line_count - 1], start=1):
        lines.append(TextLine(text=word, vertical_y=line_y(i), font_size=name_font, kind="name"))

    return TextPlacement(line_count=line_count, font_size=font_size, lines=tuple(lines))
