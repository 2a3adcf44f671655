# mapview/app/service.py
import math
from collections.abc import Mapping

from mapview.domain.entities.geography import BoundingBox
from mapview.domain.errors import MalformedInput
from mapview.domain.graph.spatial_graph import SpatialGraph
from mapview.domain.names.trie import PrefixIndex
from mapview.domain.raster.tiles import DEFAULT_PYRAMID, TilePyramid, select_tiles

RASTER_PARAMS = ("ullon", "ullat", "lrlon", "lrlat", "w", "h")


def _number(params: Mapping, key: str) -> float:
    try:
        v = float(params[key])
    except KeyError:
        raise MalformedInput(f"missing parameter {key!r}") from None
    except (TypeError, ValueError):
        raise MalformedInput(f"parameter {key!r} is not a number: {params[key]!r}") from None
    if not math.isfinite(v):
        raise MalformedInput(f"parameter {key!r} must be finite")
    return v


class MapService:
    """
    Read-only query handle handed to the front end after the build phase.

    Holds no mutable state of its own; concurrent calls are safe once built.
    """

    def __init__(
        self,
        graph: SpatialGraph,
        names: PrefixIndex,
        pyramid: TilePyramid = DEFAULT_PYRAMID,
    ):
        self._graph, self._names, self.pyramid = graph, names, pyramid

    @property
    def graph(self) -> SpatialGraph:
        return self._graph

    def raster(self, params: Mapping) -> dict:
        p = {k: _number(params, k) for k in RASTER_PARAMS}
        if p["w"] <= 0 or p["h"] <= 0:
            raise MalformedInput(f"viewport size must be positive, got {p['w']}x{p['h']}")
        viewport = BoundingBox(p["ullon"], p["ullat"], p["lrlon"], p["lrlat"])
        return select_tiles(viewport, p["w"], p["h"], self.pyramid).to_params()

    def autocomplete(self, prefix: str) -> list[str]:
        return self._names.search_prefix(prefix)

    def locations(self, name: str) -> list[dict]:
        # unpruned point set, so pruned places still resolve
        out = []
        for pid in self._names.lookup_exact(name):
            p = self._graph.location(pid)
            out.append({"lat": p.lat, "lon": p.lon, "name": p.name, "id": pid})
        return out
