"""Tests for border, radius and shadow mappers."""

import pytest

from brickify.errors import MapperError
from brickify.mappers.border import BORDER_MAPPERS, parse_box_shadow


def _map(prop, value, settings=None):
    settings = {} if settings is None else settings
    BORDER_MAPPERS[prop](value, settings)
    return settings


class TestBorder:
    def test_shorthand(self):
        assert _map("border", "1px solid #ccc") == {
            "_border": {"width": 1, "style": "solid", "color": {"hex": "#ccc"}}
        }

    def test_named_colour(self):
        assert _map("border", "2px dashed red")["_border"]["color"] == {"hex": "#ff0000"}

    def test_radius_single(self):
        assert _map("border-radius", "4px") == {
            "_border": {"radius": {"top": 4, "right": 4, "bottom": 4, "left": 4}}
        }

    def test_radius_elliptical_kept(self):
        assert _map("border-radius", "50% / 10%") == {"_border": {"radius": "50% / 10%"}}

    def test_width_expands_to_sides(self):
        assert _map("border-width", "1px 2px") == {
            "_border": {"width": {"top": 1, "right": 2, "bottom": 1, "left": 2}}
        }

    def test_width_single(self):
        assert _map("border-width", "3px")["_border"]["width"] == {"top": 3, "right": 3, "bottom": 3, "left": 3}

    def test_side_width(self):
        assert _map("border-top-width", "3px") == {"_border": {"top": {"width": 3}}}

    def test_border_color_invalid(self):
        with pytest.raises(MapperError):
            _map("border-color", "#ff000080")


class TestBoxShadow:
    def test_rgba_shadow(self):
        assert parse_box_shadow("0 4px 6px rgba(0, 0, 0, 0.1)") == {
            "values": {"offsetX": "0", "offsetY": "4", "blur": "6", "spread": "0"},
            "color": {"rgb": "rgba(0,0,0,0.1)"},
        }

    def test_hex_shadow_with_spread(self):
        assert parse_box_shadow("2px 2px 4px 1px #333") == {
            "values": {"offsetX": "2", "offsetY": "2", "blur": "4", "spread": "1"},
            "color": {"hex": "#333"},
        }

    def test_default_colour(self):
        shadow = parse_box_shadow("1px 1px")
        assert shadow["color"] == {"rgb": "rgba(0,0,0,0.2)"}
        assert shadow["values"]["blur"] == "0"

    def test_inset_ignored(self):
        assert parse_box_shadow("inset 0 1px 2px #000")["values"]["offsetY"] == "1"

    def test_none(self):
        assert parse_box_shadow("none") is None

    def test_mapper_rejects_none(self):
        with pytest.raises(MapperError):
            _map("box-shadow", "none")
