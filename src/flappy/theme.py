"""
theme.py: Cosmetic environment records (colors and decorations).

A theme never influences physics. Parsing is lenient: any value that cannot
be understood drops the element it belongs to instead of raising.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

Color = Tuple[int, ...]

_HEX_RE = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")
_RGB_RE = re.compile(r"rgba?\(([^)]*)\)")
_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b|rgba?\([^)]*\)")


def _channel(value: Any, scale: float = 1) -> Optional[int]:
    """One 0..255 color channel, None for anything non-numeric or non-finite."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value) * scale
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return max(0, min(255, round(number)))


def parse_color(value: Any) -> Optional[Color]:
    """'#RRGGBB', '#RGB', 'rgb(r, g, b)' or 'rgba(r, g, b, a)' -> tuple."""
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = [_channel(c) for c in value]
        return None if None in channels else tuple(channels)
    if not isinstance(value, str):
        return None

    value = value.strip()
    match = _HEX_RE.fullmatch(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))

    match = _RGB_RE.fullmatch(value)
    if match:
        parts = [p.strip() for p in match.group(1).split(",")]
        if len(parts) not in (3, 4):
            return None
        channels = [_channel(p) for p in parts[:3]]
        if len(parts) == 4:
            channels.append(_channel(parts[3], scale=255))
        return None if None in channels else tuple(channels)
    return None


def parse_gradient(value: Any) -> List[Color]:
    """Color stops of a CSS-like gradient, or a single plain color."""
    if not isinstance(value, str):
        color = parse_color(value)
        return [color] if color else []
    stops = [parse_color(m.group(0)) for m in _COLOR_RE.finditer(value)]
    return [c for c in stops if c is not None]


def parse_length(value: Any, unit: str) -> Optional[float]:
    """'20%' with unit '%' -> 20.0; plain numbers pass through."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if unit and value.endswith(unit):
            value = value[:-len(unit)]
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class Cloud:
    """Cloud centre as playfield fractions, size in pixels."""
    x: float
    y: float
    width: float
    height: float
    opacity: float = 1.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Cloud"]:
        top = parse_length(data.get("top"), "%")
        width = parse_length(data.get("width"), "px")
        height = parse_length(data.get("height"), "px")
        left = parse_length(data.get("left"), "%")
        right = parse_length(data.get("right"), "%")
        if top is None or width is None or height is None:
            return None
        if left is not None:
            x = left / 100
        elif right is not None:
            x = 1 - right / 100
        else:
            return None
        opacity = parse_length(data.get("opacity", 1.0), "")
        if opacity is None:
            opacity = 1.0
        return cls(x=x, y=top / 100, width=width, height=height,
                   opacity=max(0.0, min(1.0, opacity)))


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    size: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Star"]:
        top = parse_length(data.get("top"), "%")
        left = parse_length(data.get("left"), "%")
        size = parse_length(data.get("size"), "px")
        if top is None or left is None or size is None:
            return None
        return cls(x=left / 100, y=top / 100, size=size)


def _items(data: Mapping[str, Any], key: str, factory) -> Tuple:
    raw = data.get(key)
    if not isinstance(raw, (list, tuple)):
        return ()
    parsed = (factory(item) for item in raw if isinstance(item, Mapping))
    return tuple(item for item in parsed if item is not None)


@dataclass(frozen=True)
class Theme:
    """Everything the renderer needs to paint an environment."""
    name: str = "day"
    background: Tuple[Color, ...] = ((135, 206, 235),)
    ground_color: Optional[Color] = (143, 188, 143)
    cloud_color: Optional[Color] = (255, 255, 255, 204)
    text_color: Optional[Color] = (45, 80, 22)
    pipe_color: Optional[Color] = (34, 139, 34)
    pipe_border_color: Optional[Color] = (0, 100, 0)
    sun_color: Optional[Color] = (255, 215, 0)
    clouds: Tuple[Cloud, ...] = ()
    has_stars: bool = False
    stars: Tuple[Star, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Theme":
        """Builds a theme from an environment record; unknown values are omitted."""
        if not isinstance(data, Mapping):
            data = {}
        name = data.get("name")
        name = name if isinstance(name, str) and name else "custom"
        default_sun = (255, 215, 0) if name == "day" else (245, 245, 220)
        return cls(
            name=name,
            background=tuple(parse_gradient(data.get("background"))),
            ground_color=parse_color(data.get("groundColor")),
            cloud_color=parse_color(data.get("cloudColor")),
            text_color=parse_color(data.get("textColor")),
            pipe_color=parse_color(data.get("pipeColor")),
            pipe_border_color=parse_color(data.get("pipeBorderColor")),
            sun_color=parse_color(data.get("sunColor", default_sun)),
            clouds=_items(data, "cloudPositions", Cloud.from_dict),
            has_stars=data.get("hasStars") is True,
            stars=_items(data, "starPositions", Star.from_dict),
        )


DAY_ENVIRONMENT: Dict[str, Any] = {
    "name": "day",
    "background": "linear-gradient(to bottom, #87CEEB 0%, #98D8E8 50%, #B0E0E6 100%)",
    "groundColor": "#8FBC8F",
    "cloudColor": "rgba(255, 255, 255, 0.8)",
    "textColor": "#2D5016",
    "pipeColor": "#228B22",
    "pipeBorderColor": "#006400",
    "cloudPositions": [
        {"top": "20%", "left": "5%", "width": "80px", "height": "48px", "opacity": 0.6},
        {"top": "32%", "right": "8%", "width": "64px", "height": "40px", "opacity": 0.6},
        {"top": "40%", "left": "50%", "width": "96px", "height": "56px", "opacity": 0.6},
        {"top": "15%", "left": "70%", "width": "72px", "height": "44px", "opacity": 0.5},
        {"top": "45%", "right": "25%", "width": "88px", "height": "52px", "opacity": 0.4},
    ],
    "hasStars": False,
}

NIGHT_ENVIRONMENT: Dict[str, Any] = {
    "name": "night",
    "background": "linear-gradient(to bottom, #0B1026 0%, #1B2A4A 60%, #2E3F66 100%)",
    "groundColor": "#2F4F2F",
    "cloudColor": "rgba(200, 200, 220, 0.3)",
    "textColor": "#E0E6FF",
    "pipeColor": "#1E5631",
    "pipeBorderColor": "#0F2E1A",
    "cloudPositions": [
        {"top": "25%", "left": "12%", "width": "70px", "height": "40px", "opacity": 0.3},
        {"top": "38%", "right": "15%", "width": "90px", "height": "50px", "opacity": 0.25},
    ],
    "hasStars": True,
    "starPositions": [
        {"top": "5%", "left": "10%", "size": "2px"},
        {"top": "12%", "left": "25%", "size": "3px"},
        {"top": "8%", "left": "42%", "size": "2px"},
        {"top": "18%", "left": "58%", "size": "2px"},
        {"top": "6%", "left": "66%", "size": "3px"},
        {"top": "22%", "left": "78%", "size": "2px"},
        {"top": "30%", "left": "35%", "size": "2px"},
        {"top": "28%", "left": "5%", "size": "3px"},
    ],
}

DAY_THEME = Theme.from_dict(DAY_ENVIRONMENT)
NIGHT_THEME = Theme.from_dict(NIGHT_ENVIRONMENT)

THEMES = {theme.name: theme for theme in (DAY_THEME, NIGHT_THEME)}


def get_theme(name: Optional[str]) -> Theme:
    """Built-in theme by name; unknown names fall back to day."""
    return THEMES.get((name or "").lower(), DAY_THEME)
