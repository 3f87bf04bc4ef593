# coinchart/main.py
from __future__ import annotations

import logging
import sys
from dataclasses import replace

from .application.services.chart_service import ChartService
from .config import settings
from .domain.errors import LayoutError
from .domain.layout import DEFAULT_CONFIG

log = logging.getLogger("coinchart.main")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = replace(DEFAULT_CONFIG, center_code=settings.center_code)
    service = ChartService(config=config, dpi=settings.dpi)
    try:
        service.generate(
            settings.data_path,
            settings.png_path,
            settings.json_path if settings.export_json else None,
        )
    except LayoutError as e:
        log.error("chart: bad input data: %s", e)
        return 1
    except FileNotFoundError as e:
        log.error("chart: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
