# swatch_api/services/params.py
# Raw query parameters -> SwatchRequest
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from swatch.colors import normalize_color
from swatch.geometry import parse_number, resolve_style
from swatch_api.models.requests import SwatchRequest

# A query parameter arrives once (str) or repeated (sequence, in request order)
QueryValue = Union[str, Sequence[str]]
QueryParams = Mapping[str, QueryValue]


class FallbackChain(NamedTuple):
    names: Tuple[str, ...]
    default: Optional[str] = None
    inherit: Optional[str] = None  # field whose resolved value is the default


# Resolution order matters: 'bottom' and 'right' inherit from fields above them
FIELD_CHAINS: Dict[str, FallbackChain] = {
    "color": FallbackChain(("color",)),
    "style": FallbackChain(("style",), "square"),
    "size": FallbackChain(("size",), "20"),
    "text": FallbackChain(("text",), ""),
    "text_color": FallbackChain(("textColor", "tc"), "#FFF"),
    "top": FallbackChain(("top", "t"), "0"),
    "bottom": FallbackChain(("bottom", "b"), inherit="top"),
    "left": FallbackChain(("left", "l"), "0"),
    "right": FallbackChain(("right", "r"), inherit="left"),
}

NUMERIC_FIELDS = ("size", "top", "bottom", "left", "right")


def query_value(value: Optional[QueryValue]) -> Optional[str]:
    """First value of a possibly repeated parameter; None when absent."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value[0] if len(value) > 0 else None


def collect_params(query_params) -> Dict[str, List[str]]:
    """Flattens a Starlette multi-dict into {name: [values...]}."""
    return {key: query_params.getlist(key) for key in query_params.keys()}


def resolve(params: QueryParams, names: Sequence[str], default: Optional[str] = None) -> Optional[str]:
    # present-but-empty counts as present
    for name in names:
        value = query_value(params.get(name))
        if value is not None:
            return value
    return default


def build_swatch_request(params: QueryParams) -> SwatchRequest:
    raw: Dict[str, Optional[str]] = {}
    numbers: Dict[str, float] = {}

    for field, chain in FIELD_CHAINS.items():
        value = resolve(params, chain.names, chain.default)
        if field in NUMERIC_FIELDS:
            if value is None and chain.inherit:
                numbers[field] = numbers[chain.inherit]
            else:
                numbers[field] = parse_number(value)
        else:
            raw[field] = value

    return SwatchRequest(
        color=normalize_color(raw["color"]),
        style=resolve_style(raw["style"].lower(), "square"),
        text=raw["text"],
        text_color=normalize_color(raw["text_color"]),
        **numbers,
    )
