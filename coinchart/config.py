# coinchart/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() not in ("0", "false", "no", "off", "")

def _env_int(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    v = os.getenv(name)
    try:
        x = int(v) if v is not None else default
    except ValueError:
        x = default
    if min_value is not None:
        x = max(min_value, x)
    if max_value is not None:
        x = min(max_value, x)
    return x

@dataclass
class Settings:
    # Входные данные (CSV с монетами)
    data_path: str = os.getenv("CHART_DATA_PATH", "data.csv")

    # Куда складываем PNG и JSON
    output_dir: str = os.getenv("CHART_OUTPUT_DIR", "output")

    # Монета, которая всегда рисуется в центре
    center_code: str = os.getenv("CHART_CENTER_CODE", "BTC")

    # Рендер
    dpi: int = _env_int("CHART_DPI", 100, min_value=50, max_value=600)
    export_json: bool = _env_bool("CHART_EXPORT_JSON", True)

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def png_path(self) -> str:
        return os.path.join(self.output_dir, "chart.png")

    @property
    def json_path(self) -> str:
        return os.path.join(self.output_dir, "chart.json")

# Единый экземпляр
settings = Settings()
