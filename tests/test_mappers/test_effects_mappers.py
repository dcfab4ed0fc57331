"""Tests for transform, filter and transition mappers."""

import pytest

from brickify.errors import MapperError
from brickify.mappers.effects import FILTER_MAPPERS, TRANSFORM_MAPPERS, TRANSITION_MAPPERS


def _map(table, prop, value, settings=None):
    settings = {} if settings is None else settings
    table[prop](value, settings)
    return settings


class TestTransform:
    def test_combined(self):
        settings = _map(TRANSFORM_MAPPERS, "transform", "translate(10px, 20px) rotate(45deg) scale(1.5)")
        assert settings == {
            "_transform": {
                "translateX": 10,
                "translateY": 20,
                "rotate": {"z": "45deg"},
                "scale": {"x": 1.5, "y": 1.5},
            }
        }

    def test_single_axis(self):
        settings = _map(TRANSFORM_MAPPERS, "transform", "translateY(-50%) skewX(10deg)")
        assert settings == {"_transform": {"translateY": "-50%", "skew": {"x": "10deg"}}}

    def test_matrix_kept(self):
        settings = _map(TRANSFORM_MAPPERS, "transform", "matrix(1, 0, 0, 1, 0, 0)")
        assert settings["_transform"]["matrix"] == "matrix(1, 0, 0, 1, 0, 0)"

    def test_none_rejected(self):
        with pytest.raises(MapperError):
            _map(TRANSFORM_MAPPERS, "transform", "none")

    def test_origin(self):
        assert _map(TRANSFORM_MAPPERS, "transform-origin", "center") == {
            "_transform": {"origin": "center"}
        }


class TestFilter:
    def test_functions(self):
        assert _map(FILTER_MAPPERS, "filter", "blur(5px) brightness(120%)") == {
            "_cssFilters": {"blur": "5", "brightness": "120%"}
        }

    def test_drop_shadow_rejected(self):
        with pytest.raises(MapperError):
            _map(FILTER_MAPPERS, "filter", "blur(2px) drop-shadow(0 0 2px #000)")

    def test_unknown_function_rejected(self):
        with pytest.raises(MapperError):
            _map(FILTER_MAPPERS, "filter", "url(#svg-filter)")


class TestTransition:
    def test_shorthand(self):
        assert _map(TRANSITION_MAPPERS, "transition", " all 0.3s ease ") == {
            "_cssTransition": "all 0.3s ease"
        }

    def test_longhand_fills_defaults(self):
        assert _map(TRANSITION_MAPPERS, "transition-duration", "0.3s") == {
            "_cssTransition": "all 0.3s ease 0s"
        }

    def test_longhand_updates_existing(self):
        settings = {"_cssTransition": "opacity 1s linear 0s"}
        _map(TRANSITION_MAPPERS, "transition-delay", "2s", settings)
        assert settings == {"_cssTransition": "opacity 1s linear 2s"}
