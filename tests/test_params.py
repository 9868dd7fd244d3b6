import math

from swatch_api.services.params import build_swatch_request, query_value, resolve


def test_query_value_takes_first_of_repeated():
    assert query_value("a") == "a"
    assert query_value(["x", "y"]) == "x"
    assert query_value(("only",)) == "only"


def test_query_value_absent():
    assert query_value(None) is None
    assert query_value([]) is None


def test_resolve_walks_names_in_order():
    params = {"tc": "000", "textColor": ["fff"]}
    assert resolve(params, ("textColor", "tc"), "#FFF") == "fff"
    assert resolve({"tc": "000"}, ("textColor", "tc"), "#FFF") == "000"
    assert resolve({}, ("textColor", "tc"), "#FFF") == "#FFF"


def test_resolve_treats_empty_value_as_present():
    assert resolve({"size": ""}, ("size",), "20") == ""


def test_defaults():
    req = build_swatch_request({"color": "f00"})
    assert req.color == "#FF0000"
    assert req.style == "square"
    assert req.size == 20
    assert req.text == ""
    assert req.text_color == "#FFFFFF"
    assert (req.top, req.bottom, req.left, req.right) == (0, 0, 0, 0)
    assert (req.width, req.height) == (20, 20)


def test_missing_color_is_black():
    assert build_swatch_request({}).color == "#000000"


def test_right_and_bottom_inherit_left_and_top():
    req = build_swatch_request({"color": "f00", "left": "5", "top": "3"})
    assert req.right == 5
    assert req.bottom == 3


def test_explicit_right_and_bottom_win():
    req = build_swatch_request({"color": "f00", "l": "5", "r": "1", "t": "3", "b": "2"})
    assert (req.left, req.right, req.top, req.bottom) == (5, 1, 3, 2)


def test_short_aliases():
    req = build_swatch_request({"t": "4", "l": "6", "tc": "0f0"})
    assert (req.top, req.bottom, req.left, req.right) == (4, 4, 6, 6)
    assert req.text_color == "#00FF00"


def test_long_names_beat_aliases():
    req = build_swatch_request({"top": "1", "t": "9", "textColor": "00f", "tc": "0f0"})
    assert req.top == 1
    assert req.text_color == "#0000FF"


def test_style_is_lowercased_then_resolved():
    assert build_swatch_request({"style": "CIRCLE"}).style == "circle"
    assert build_swatch_request({"style": "Round"}).style == "round"
    assert build_swatch_request({"style": "triangle"}).style == "square"


def test_repeated_values_use_first():
    req = build_swatch_request({"color": ["00f", "f00"], "size": ["30", "40"]})
    assert req.color == "#0000FF"
    assert req.size == 30


def test_empty_size_parses_to_zero():
    assert build_swatch_request({"size": ""}).size == 0


def test_non_numeric_input_becomes_nan():
    req = build_swatch_request({"size": "abc", "top": "x"})
    assert math.isnan(req.size)
    assert math.isnan(req.top)
    assert math.isnan(req.bottom)
    assert math.isnan(req.width)


def test_text_changes_dimensions():
    req = build_swatch_request({"color": "000", "text": "Hi", "size": "20"})
    assert (req.width, req.height) == (16, 15)
