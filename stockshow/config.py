"""Reading and writing the window position and watched codes."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]

CONFIG_SUFFIX = ".json"


@dataclass
class Geometry:
    """Position and size of the main window."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Config:
    """Saved state: the last window geometry and the watched stock codes."""

    geometry: Geometry | None = None
    codes: list[str] = field(default_factory=list)


def config_path(program: PathLike) -> Path:
    """Path of the configuration file kept next to the program."""
    return Path(os.fspath(program) + CONFIG_SUFFIX)


def _to_int(value: Any) -> int:
    """Integer value of a JSON value, 0 when it is not an integral number."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _geometry_from(value: Any) -> Geometry:
    position = value if isinstance(value, dict) else {}
    # Older files spelled the height key as "heigth".
    height = position.get("height", position.get("heigth"))
    return Geometry(
        x=_to_int(position.get("x")),
        y=_to_int(position.get("y")),
        width=_to_int(position.get("width")),
        height=_to_int(height),
    )


def load_config(path: PathLike) -> Config:
    """Read the configuration; a missing, empty or invalid file gives defaults."""
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return Config()
    if not raw:
        return Config()
    try:
        document = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return Config()
    if not isinstance(document, dict):
        return Config()

    geometry = _geometry_from(document["position"]) if "position" in document else None
    codes_value = document.get("codes", [])
    codes = [_to_str(code) for code in codes_value] if isinstance(codes_value, list) else []
    return Config(geometry=geometry, codes=codes)


def save_config(path: PathLike, config: Config) -> None:
    """Write the configuration as an indented JSON document."""
    geometry = config.geometry or Geometry()
    document = {
        "codes": list(config.codes),
        "position": {
            "height": geometry.height,
            "width": geometry.width,
            "x": geometry.x,
            "y": geometry.y,
        },
    }
    text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False) + "\n"
    Path(path).write_text(text, encoding="utf-8")