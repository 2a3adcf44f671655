"""
Shared pytest fixtures: a tiny street map around one intersection.

        21
        |  (oneway 11 -> 20 -> 21, Telegraph Avenue)
        20
        |
  10 -- 11 -- 12      (two-way, Bancroft Way)

Way 102 is an unnamed two-way footway 21 -- 12.

Points 30/31 carry names but sit on no way, so pruning drops them from the graph.
"""

import pytest

from mapview.domain.entities.geography import Point, Way
from mapview.domain.graph.builder import GraphBuilder


def node(id, lon, lat, **tags):
    return {"type": "node", "id": str(id), "lon": str(lon), "lat": str(lat), "tags": tags}


def way(id, nodes, **tags):
    return {"type": "way", "id": str(id), "nodes": [str(n) for n in nodes], "tags": tags}


@pytest.fixture
def map_records():
    return [
        node(10, -122.2600, 37.8700),
        node(11, -122.2590, 37.8700, name="Bancroft & Telegraph"),
        node(12, -122.2580, 37.8700),
        node(20, -122.2590, 37.8710),
        node(21, -122.2590, 37.8720),
        node(30, -122.2500, 37.8600, name="Top Dog"),
        node(31, -122.2510, 37.8610, name="TOP DOG!"),
        way(100, [10, 11, 12], name="Bancroft Way", highway="residential"),
        way(101, [11, 20, 21], name="Telegraph Avenue", highway="primary", oneway="yes"),
        way(102, [21, 12], highway="footway"),
    ]


@pytest.fixture
def builder() -> GraphBuilder:
    b = GraphBuilder()
    for pid, lon, lat in [
        (1, -122.2600, 37.8700),
        (2, -122.2590, 37.8700),
        (3, -122.2580, 37.8700),
        (4, -122.2590, 37.8710),
        (9, -122.2400, 37.8500),  # never on a way
    ]:
        b.add_point(Point(id=pid, lon=lon, lat=lat))
    return b


@pytest.fixture
def two_way_graph(builder):
    builder.add_way(Way(id=7, nodes=[1, 2, 3], tags={"name": "Durant Avenue"}))
    builder.build_edges(7)
    builder.add_way(Way(id=8, nodes=[2, 4]))
    builder.build_edges(8)
    return builder.finalize_pruning()
