from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from chaosgame.chaos import LARGE_POINT_SIZE, LENGTH_STEP, POINT_SIZE
from chaosgame.errors import ConfigError

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

DEFAULT_CONFIG_PATH = pathlib.Path(__file__).resolve().parent / "chaos.yaml"


@dataclass
class GameConfig:
    view_width: int = 800
    view_height: int = 640
    toolbar_height: int = 40
    font_size: int = 22
    fps: int = 60
    bg: Color = (255, 255, 255)   # canvas background
    fg: Color = (0, 0, 0)         # plotted points
    ui_bg: Color = (30, 30, 50)
    ui_fg: Color = (220, 230, 240)
    ui_dim: Color = (120, 130, 150)
    ui_sel: Color = (255, 230, 120)
    point_size: int = POINT_SIZE
    large_point_size: int = LARGE_POINT_SIZE
    length_step: int = LENGTH_STEP
    speed: float = 200.0          # ms between steps; not validated
    speed_step: float = 25.0      # spinner increment
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("view_width", "view_height", "font_size", "fps",
                     "point_size", "large_point_size", "length_step"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.toolbar_height, int) or not 0 <= self.toolbar_height < self.view_height:
            raise ConfigError(
                f"toolbar_height must be in [0, view_height), got {self.toolbar_height!r}"
            )
        for name in ("bg", "fg", "ui_bg", "ui_fg", "ui_dim", "ui_sel"):
            setattr(self, name, _coerce_color(name, getattr(self, name)))

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.view_width, self.view_height - self.toolbar_height


def _coerce_color(name: str, raw: Any) -> Color:
    try:
        color = tuple(int(c) for c in raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an RGB triple, got {raw!r}") from exc
    if len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise ConfigError(f"{name} must be an RGB triple in 0..255, got {raw!r}")
    return color  # type: ignore[return-value]


def config_from_dict(data: Dict[str, Any]) -> GameConfig:
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    return GameConfig(**data)


def load_config(path: Union[str, pathlib.Path, None] = None) -> GameConfig:
    """
    Load a GameConfig from a YAML mapping.

    With no path the packaged chaos.yaml is used. A missing or empty file
    gives the defaults.
    """
    path = pathlib.Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.info("Config %s not found; using defaults", path)
        return GameConfig()
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    logger.info("Loaded config from %s", path)
    return config_from_dict(data)
