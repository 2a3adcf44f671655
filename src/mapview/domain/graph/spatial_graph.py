# mapview/domain/graph/spatial_graph.py
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

import numpy as np

from mapview.domain.entities.geography import Point
from mapview.domain.errors import NotFound
from mapview.domain.geomath import bearing_deg, distance_mi, distances_mi


def _copy(p: Point) -> Point:
    return replace(p, tags=dict(p.tags))


class SpatialGraph:
    """
    Read-only graph of connected points (vertices) and road segments.

    Built by GraphBuilder.finalize_pruning(); safe to share across threads.
    Distances are miles, bearings degrees in (-180, 180].
    """

    def __init__(
        self,
        *,
        points: Mapping[int, Point],
        all_points: Mapping[int, Point],
        adjacency: Mapping[int, tuple[int, ...]],
        edge_way: Mapping[tuple[int, int], int],
        ways: Mapping[int, Mapping[str, str]],
    ):
        # copied; the builder's Point objects stay out of this graph
        self._all_points = MappingProxyType({pid: _copy(p) for pid, p in all_points.items()})
        self._points = MappingProxyType({pid: _copy(p) for pid, p in points.items()})
        self._adj = MappingProxyType(dict(adjacency))
        self._edge_way = MappingProxyType(dict(edge_way))
        self._ways = MappingProxyType({wid: MappingProxyType(dict(t)) for wid, t in ways.items()})

        # columnar copy of active coordinates for closest(); order = insertion order
        self._ids = np.fromiter(self._points.keys(), dtype=np.int64, count=len(self._points))
        self._lons = np.fromiter((p.lon for p in self._points.values()), dtype=float)
        self._lats = np.fromiter((p.lat for p in self._points.values()), dtype=float)
        for arr in (self._ids, self._lons, self._lats):
            arr.setflags(write=False)

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, v: int) -> bool:
        return v in self._points

    # ---------------- vertices & edges ----------------

    def vertices(self) -> list[int]:
        return list(self._points)

    def ways(self) -> list[int]:
        return list(self._ways)

    def adjacent(self, v: int) -> list[int]:
        try:
            return list(self._adj[v])
        except KeyError:
            raise NotFound(f"no adjacency for point {v}") from None

    def edge_way_id(self, a: int, b: int) -> int:
        try:
            return self._edge_way[(a, b)]
        except KeyError:
            raise NotFound(f"no edge {a} -> {b}") from None

    def way_name_of(self, way_id: int) -> str | None:
        try:
            return self._ways[way_id].get("name")
        except KeyError:
            raise NotFound(f"unknown way {way_id}") from None

    # ---------------- points ----------------

    def _active(self, v: int) -> Point:
        try:
            return self._points[v]
        except KeyError:
            raise NotFound(f"unknown or pruned point {v}") from None

    def point(self, v: int) -> Point:
        """A copy of an active point; changing it does not touch the graph."""
        return _copy(self._active(v))

    def location(self, v: int) -> Point:
        """Copy of a point from the unpruned set (survives pruning)."""
        try:
            return _copy(self._all_points[v])
        except KeyError:
            raise NotFound(f"unknown point {v}") from None

    def lon(self, v: int) -> float:
        return self._active(v).lon

    def lat(self, v: int) -> float:
        return self._active(v).lat

    # ---------------- geometry ----------------

    def distance(self, v: int, w: int) -> float:
        a, b = self._active(v), self._active(w)
        return distance_mi(a.lon, a.lat, b.lon, b.lat)

    def bearing(self, v: int, w: int) -> float:
        a, b = self._active(v), self._active(w)
        return bearing_deg(a.lon, a.lat, b.lon, b.lat)

    def closest(self, lon: float, lat: float) -> int:
        # full O(V) scan; argmin keeps the first vertex on ties
        if not len(self._ids):
            raise NotFound("closest() on an empty graph")
        d = distances_mi(self._lons, self._lats, lon, lat)
        return int(self._ids[int(np.argmin(d))])
