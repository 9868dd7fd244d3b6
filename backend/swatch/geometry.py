# swatch/geometry.py
import math
import re
from decimal import Decimal
from typing import Literal, Tuple

SwatchStyle = Literal["square", "round", "circle"]
STYLES: Tuple[str, ...] = ("square", "round", "circle")

# === Swatch dimensions ===
CHAR_WIDTH = 8
TEXT_HEIGHT = 15
ROUND_RADIUS_DIVISOR = 5

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")

# WhiteSpace and LineTerminator code points trimmed by Number()
JS_WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def resolve_style(value: str, fallback: SwatchStyle) -> SwatchStyle:
    return value if value in STYLES else fallback


def parse_number(raw: str) -> float:
    """
    Parses a numeric parameter the way a browser-side Number() call would:
    blank -> 0, '0x1f' -> 31, 'Infinity' -> inf, anything unparseable -> NaN.
    """
    s = raw.strip(JS_WHITESPACE)
    if not s:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(s):
        return float(s)
    if _RADIX_LITERAL.fullmatch(s):
        try:
            return float(int(s, 0))
        except OverflowError:
            return math.inf
    if _INFINITY_LITERAL.fullmatch(s):
        return -math.inf if s.startswith("-") else math.inf
    return math.nan


def format_number(value: float) -> str:
    """Shortest round-trip text for an attribute value: 20 -> '20', 2.5 -> '2.5', nan -> 'NaN'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the first digit

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        body = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + body


def text_length(text: str) -> int:
    # UTF-16 code units, so characters outside the BMP count twice
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


class SwatchBox:
    """Padded bounding box of a swatch; label text overrides `size` on both axes."""

    def __init__(self, size: float, text: str = "", top: float = 0, bottom: float = 0,
                 left: float = 0, right: float = 0):
        self.size, self.text = size, text
        self.top, self.bottom, self.left, self.right = top, bottom, left, right

    @property
    def has_text(self) -> bool:
        return bool(self.text)

    @property
    def inner_width(self) -> float:
        return text_length(self.text) * CHAR_WIDTH if self.has_text else self.size

    @property
    def inner_height(self) -> float:
        return TEXT_HEIGHT if self.has_text else self.size

    @property
    def width(self) -> float:
        return self.left + self.inner_width + self.right

    @property
    def height(self) -> float:
        return self.top + self.inner_height + self.bottom

    def corner_radius(self, style: SwatchStyle) -> float:
        return self.size / ROUND_RADIUS_DIVISOR if style == "round" else 0

    def __repr__(self):
        return f"SwatchBox(width={format_number(self.width)}, height={format_number(self.height)})"
