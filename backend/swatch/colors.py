# swatch/colors.py
import re
from typing import Optional

FALLBACK_COLOR = "#000000"

OKLCH_PATTERN = re.compile(
    r"^oklch\((?P<light>\d+\.?\d*),(?P<chroma>\d+\.?\d*),(?P<hue>\d+\.?\d*),(?P<alpha>\d+\.?\d*)\)",
    re.ASCII,
)
OKLCH_DEFAULTS = {"light": "0", "chroma": "0", "hue": "0", "alpha": "1"}

HEX_PATTERN = re.compile(r"#?(?:[0-9a-f]{6}|[0-9a-f]{3})", re.IGNORECASE)


def _normalize_oklch(color: str) -> str:
    match = OKLCH_PATTERN.match(color)
    parts = match.groupdict() if match else OKLCH_DEFAULTS
    return f"oklch({parts['light']} {parts['chroma']} {parts['hue']} / {parts['alpha']})"


def _normalize_hex(color: str) -> str:
    digits = color.lstrip("#").upper()
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return f"#{digits}"


def normalize_color(color: Optional[str]) -> str:
    """
    Normalizes a raw color parameter. Never fails:
      'oklch(0.7,0.1,180,1)' -> 'oklch(0.7 0.1 180 / 1)'
      'abc' / '#abc'          -> '#AABBCC'
      anything else           -> '#000000'
    """
    if not color:
        return FALLBACK_COLOR
    if color.startswith("oklch"):
        return _normalize_oklch(color)
    if HEX_PATTERN.fullmatch(color):
        return _normalize_hex(color)
    return FALLBACK_COLOR
