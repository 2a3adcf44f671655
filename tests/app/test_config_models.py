# tests/app/test_config_models.py
import pytest
from pydantic import ValidationError

from mapview.app.build import make_pyramid
from mapview.config.models import GraphModel, MapModel, RasterModel
from mapview.domain.raster.tiles import DEFAULT_PYRAMID


def test_defaults_reproduce_default_pyramid():
    m = MapModel.model_validate({"name": "x"})
    assert m.graph.oneway_values == ["yes"]
    assert m.graph.allowed_highways is None
    assert make_pyramid(m.raster) == DEFAULT_PYRAMID


@pytest.mark.parametrize("v", [[], "", None])
def test_empty_highway_filter_means_none(v):
    assert GraphModel(allowed_highways=v).allowed_highways is None


@pytest.mark.parametrize(
    "raster",
    [
        {"root": {"ullon": 1.0, "lrlon": 0.0}},
        {"root": {"ullat": 0.0, "lrlat": 1.0}},
        {"levels": 0},
        {"tile_px": 0},
        {"tile_name": "tile_{x}_{y}.png"},
    ],
)
def test_bad_raster_config_rejected(raster):
    with pytest.raises(ValidationError):
        RasterModel.model_validate(raster)


def test_unknown_keys_forbidden():
    with pytest.raises(ValidationError):
        MapModel.model_validate({"name": "x", "cache": {"dir": "/tmp"}})


def test_custom_root_box():
    m = RasterModel.model_validate(
        {"root": {"ullon": 0.0, "ullat": 1.0, "lrlon": 1.0, "lrlat": 0.0}, "levels": 4, "tile_px": 512}
    )
    p = make_pyramid(m)
    assert p.max_depth == 3
    assert p.lon_dpp[0] == pytest.approx(1.0 / 512)
