# coinchart/application/services/chart_service.py
"""
Service for the inception bubble chart.
"""

import io
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ...domain.layout import DEFAULT_CONFIG, LayoutConfig, compute_layout
from ...domain.models import ChartLayout, CurrencyRecord
from ..dto.chart_dto import ChartDTO

logger = logging.getLogger("coinchart.services.chart")


class ChartService:
    """Сервис: загрузка данных -> раскладка -> PNG/JSON."""

    def __init__(self, config: LayoutConfig = DEFAULT_CONFIG, dpi: int = 100):
        """
        Args:
            config: Конфигурация раскладки
            dpi: Разрешение PNG
        """
        self.config = config
        self.dpi = dpi

    def load(self, path: Union[str, Path]) -> List[CurrencyRecord]:
        from ...infrastructure.csv_loader import load_currencies
        return load_currencies(path)

    def build_layout(self, records: Sequence[CurrencyRecord]) -> ChartLayout:
        return compute_layout(records, self.config)

    def render(self, layout: ChartLayout) -> io.BytesIO:
        from ...visual.bubble_chart import render_chart
        return render_chart(layout, dpi=self.dpi)

    def export(self, layout: ChartLayout) -> Dict:
        return ChartDTO.from_layout(layout).to_dict()

    def generate(
        self,
        data_path: Union[str, Path],
        png_path: Union[str, Path],
        json_path: Optional[Union[str, Path]] = None,
    ) -> ChartLayout:
        """
        Полный цикл: CSV -> раскладка -> файлы.

        Ошибки данных поднимаются до записи чего-либо на диск.

        Args:
            data_path: CSV с монетами
            png_path: Куда сохранить PNG
            json_path: Куда сохранить JSON (None - не сохранять)

        Returns:
            ChartLayout: посчитанная раскладка
        """
        records = self.load(data_path)
        layout = self.build_layout(records)
        png = self.render(layout)
        payload = self.export(layout) if json_path is not None else None

        png_path = Path(png_path)
        png_path.parent.mkdir(parents=True, exist_ok=True)
        png_path.write_bytes(png.getvalue())
        logger.info("chart: PNG saved to %s", png_path)

        if payload is not None:
            json_path = Path(json_path)
            json_path.parent.mkdir(parents=True, exist_ok=True)
            json_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            logger.info("chart: layout JSON saved to %s", json_path)

        return layout
