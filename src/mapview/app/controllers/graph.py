# mapview/app/controllers/graph.py
from collections.abc import Iterable

from mapview.app.events import NodeParsed, RecordRejected, WayParsed
from mapview.domain.entities.geography import Point, Way
from mapview.domain.errors import MalformedInput
from mapview.domain.graph.builder import GraphBuilder


class GraphHandler:
    def __init__(self, builder: GraphBuilder, *, allowed_highways: Iterable[str] | None = None):
        self.builder = builder
        self.allowed_highways = frozenset(allowed_highways) if allowed_highways else None
        self.filtered_ways = 0
        self.segments = 0
        self.rejected_points: set[int | str] = set()

    def on_node(self, ev: NodeParsed):
        self.builder.add_point(Point(id=ev.id, lon=ev.lon, lat=ev.lat, tags=dict(ev.tags)))
        self.rejected_points.discard(ev.id)

    def on_rejected(self, ev: RecordRejected):
        # a point that was already added keeps its earlier record
        if ev.kind == "node" and ev.ref is not None and ev.ref not in self.builder:
            self.rejected_points.add(ev.ref)

    def on_way(self, ev: WayParsed):
        # non-road ways (footpaths, buildings...) never enter the graph when a filter is set
        if self.allowed_highways is not None and ev.tags.get("highway") not in self.allowed_highways:
            self.filtered_ways += 1
            return
        bad = [v for v in ev.nodes if v in self.rejected_points]
        if bad:
            raise MalformedInput(f"way {ev.id} references rejected points {bad[:5]}")
        self.builder.add_way(Way(id=ev.id, nodes=list(ev.nodes), tags=dict(ev.tags)))
        self.segments += self.builder.build_edges(ev.id)
