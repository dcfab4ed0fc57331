"""Tests for background and gradient mappers."""

import pytest

from brickify.errors import MapperError
from brickify.ids import IdGenerator
from brickify.mappers.background import (
    background_mappers,
    parse_gradient,
    split_background,
)


@pytest.fixture
def ids():
    return IdGenerator(seed=1)


@pytest.fixture
def table(ids):
    return background_mappers(ids)


class TestShorthand:
    def test_split(self):
        props = split_background("#fff url(a.png) no-repeat center/cover fixed")
        assert props == {
            "background-color": "#fff",
            "background-image": "url(a.png)",
            "background-repeat": "no-repeat",
            "background-position": "center",
            "background-size": "cover",
            "background-attachment": "fixed",
        }

    def test_position_words_join(self):
        assert split_background("left top")["background-position"] == "left top"

    def test_background_shorthand_maps(self, table):
        settings = {}
        table["background"]("red url('hero.jpg') no-repeat", settings)
        assert settings == {
            "_background": {
                "color": {"hex": "#ff0000"},
                "image": {"url": "hero.jpg"},
                "repeat": "no-repeat",
            }
        }

    def test_unrecognised_shorthand_raises(self, table):
        with pytest.raises(MapperError):
            table["background"]("inherit", {})

    def test_background_color_unknown_name(self, table):
        with pytest.raises(MapperError):
            table["background-color"]("papayawhip", {})


class TestGradients:
    def test_linear_direction(self, ids):
        gradient = parse_gradient("linear-gradient(to right, #ff0000, #0000ff 100%)", ids)
        assert gradient["gradientType"] == "linear"
        assert gradient["angle"] == "90"
        assert [c["color"] for c in gradient["colors"]] == [{"hex": "#ff0000"}, {"hex": "#0000ff"}]
        assert "stop" not in gradient["colors"][0]
        assert gradient["colors"][1]["stop"] == "100"

    def test_stop_ids_are_unique(self, ids):
        gradient = parse_gradient("linear-gradient(red, blue, green)", ids)
        stop_ids = [c["id"] for c in gradient["colors"]]
        assert len(set(stop_ids)) == 3

    def test_angle(self, ids):
        gradient = parse_gradient("linear-gradient(135deg, #000 0%, #fff 100%)", ids)
        assert gradient["angle"] == "135"
        assert [c["stop"] for c in gradient["colors"]] == ["0", "100"]

    def test_radial_has_no_angle(self, ids):
        gradient = parse_gradient("radial-gradient(circle, red, blue)", ids)
        assert gradient["gradientType"] == "radial"
        assert "angle" not in gradient

    def test_transparent_stop(self, ids):
        gradient = parse_gradient("linear-gradient(transparent, #000)", ids)
        assert gradient["colors"][0]["color"] == {
            "hex": "transparent",
            "rgb": "rgba(255, 255, 255, 0)",
            "hsl": "hsla(0, 0%, 100%, 0)",
        }

    def test_alpha_hex_stop(self, ids):
        gradient = parse_gradient("linear-gradient(#ff000080, #000)", ids)
        assert gradient["colors"][0]["color"] == {
            "hex": "#ff000080",
            "rgb": "rgba(255, 0, 0, 0.502)",
            "hsl": "hsla(0, 0%, 33%, 0.502)",
        }

    def test_rgba_stop(self, ids):
        gradient = parse_gradient("linear-gradient(rgba(0, 0, 0, 0.5), #000)", ids)
        assert gradient["colors"][0]["color"] == {
            "hex": "rgba(0, 0, 0, 0.5)",
            "rgb": "rgba(0, 0, 0, 0.5)",
        }

    def test_no_colours(self, ids):
        assert parse_gradient("linear-gradient(to right)", ids) is None

    def test_image_gradient_goes_to_gradient_setting(self, table):
        settings = {}
        table["background-image"]("linear-gradient(red, blue)", settings)
        assert "_background" not in settings
        assert settings["_gradient"]["gradientType"] == "linear"

    def test_clip_text_marks_gradient(self, table):
        settings = {}
        table["background-image"]("linear-gradient(red, blue)", settings)
        table["-webkit-background-clip"]("text", settings)
        assert settings["_gradient"]["applyTo"] == "text"

    def test_clip_text_without_gradient(self, table):
        with pytest.raises(MapperError):
            table["background-clip"]("text", {})
