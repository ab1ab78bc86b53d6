from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from gedcom_chart.utils.pathing import project_root

CONFIG_PATH = project_root() / "config" / "gedcom_chart.yml"


class ChartConfig:
    def __init__(self, data: Dict[str, Any]):
        self.chart = data.get("chart") or {}
        self.logging = data.get("logging") or {}
        self.debug = bool(data.get("debug", False))
        self.source: Optional[Path] = None


def load_config(path: Union[str, Path, None] = None) -> ChartConfig:
    """
    Load a YAML config file.

    An explicitly requested file must exist. When the default file is
    missing (e.g. an installed copy without the repo's config/), the
    built-in defaults are used.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return ChartConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    cfg = ChartConfig(data)
    cfg.source = config_path
    return cfg


_config_cache: Optional[ChartConfig] = None


def get_config() -> ChartConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def set_config(cfg: ChartConfig) -> ChartConfig:
    """Replace the cached config (used by the CLI's --config option and tests)."""
    global _config_cache
    _config_cache = cfg
    return cfg
