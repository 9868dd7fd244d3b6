# swatch/renderer.py
# Swatch parameters -> SVG document
import re
from xml.sax.saxutils import escape

from swatch.geometry import SwatchBox, SwatchStyle, format_number as _n

SVG_NAMESPACES = "xmlns='http://www.w3.org/2000/svg' xmlns:xlink='http://www.w3.org/1999/xlink'"
TEXT_ATTRS = "font-family='monospace' dominant-baseline='middle' text-anchor='middle'"

# Code points XML 1.0 does not allow in character data, escaped or not
_XML_FORBIDDEN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _label(x: float, y: float, text: str, text_color: str) -> str:
    content = escape(_XML_FORBIDDEN.sub("", text))
    return f"<text x='{_n(x)}' y='{_n(y)}' fill='{text_color}' {TEXT_ATTRS}>{content}</text>"


def shape_markup(color: str, style: SwatchStyle, text_color: str, box: SwatchBox) -> str:
    """
    Picks one of four shapes by (style, has_text):
      square/round        -> padded <rect>, rx = size/5 when round
      square/round + text -> full-size <rect> with a centered label
      circle              -> padded <circle>
      circle + text       -> size x size <rect> with rx = width/2 and a label
    """
    width, height = box.width, box.height

    if style != "circle":
        rx = _n(box.corner_radius(style))
        if box.has_text:
            return (
                f"<rect fill='{color}' x='0' y='0' width='{_n(width)}' height='{_n(height)}' rx='{rx}'/>"
                + _label(width / 2, height / 2, box.text, text_color)
            )
        return f"<rect fill='{color}' x='{_n(box.left)}' y='{_n(box.top)}' width='{_n(width)}' height='{_n(height)}' rx='{rx}'/>"

    half = box.size / 2
    if box.has_text:
        return (
            f"<rect fill='{color}' x='0' y='0' width='{_n(box.size)}' height='{_n(box.size)}' rx='{_n(width / 2)}'/>"
            + _label(box.left + half, height / 2, box.text, text_color)
        )
    return f"<circle fill='{color}' cx='{_n(box.left + half)}' cy='{_n(box.top + half)}' r='{_n(half)}'/>"


def render_swatch_svg(color: str, style: SwatchStyle, text_color: str, box: SwatchBox) -> str:
    width, height = _n(box.width), _n(box.height)
    svg = []
    svg.append(f"<svg {SVG_NAMESPACES} width='{width}' height='{height}' viewBox='0 0 {width} {height}'>")
    svg.append(shape_markup(color, style, text_color, box))
    svg.append("</svg>")
    return "".join(svg)
