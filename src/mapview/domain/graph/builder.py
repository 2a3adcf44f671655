# mapview/domain/graph/builder.py
from collections.abc import Iterable

from mapview.domain.entities.geography import Point, Way
from mapview.domain.errors import NotFound, PreconditionViolation
from mapview.domain.graph.spatial_graph import SpatialGraph


class GraphBuilder:
    """
    Build phase of the spatial graph.

    Responsibilities:
      • Collect points and ways in document order (single producer).
      • Expand each way into adjacency following the oneway rule.
      • Prune unconnected points once, handing back an immutable SpatialGraph.
    Consumed by finalize_pruning(); every mutator raises afterwards.
    """

    def __init__(self, *, oneway_values: Iterable[str] = ("yes",)):
        self.oneway_values = frozenset(oneway_values)
        self._points: dict[int, Point] = {}
        self._ways: dict[int, Way] = {}
        self._adj: dict[int, list[int]] = {}
        self._edge_way: dict[tuple[int, int], int] = {}
        self._frozen = False

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, pid: int) -> bool:
        return pid in self._points

    def _check_open(self, op: str) -> None:
        if self._frozen:
            raise PreconditionViolation(f"{op} after finalize_pruning()")

    # ---------------- ingestion ----------------

    def add_point(self, p: Point) -> None:
        # duplicate ids: last write wins
        self._check_open("add_point")
        self._points[p.id] = p

    def add_way(self, w: Way) -> None:
        self._check_open("add_way")
        self._ways[w.id] = w

    def build_edges(self, way_id: int) -> int:
        """Expand a stored way into edges. Returns the number of segments expanded."""
        self._check_open("build_edges")
        try:
            w = self._ways[way_id]
        except KeyError:
            raise NotFound(f"unknown way {way_id}") from None

        missing = [v for v in w.nodes if v not in self._points]
        if missing:
            raise PreconditionViolation(f"way {w.id} references unadded points {missing[:5]}")

        oneway = w.is_oneway(self.oneway_values)
        for begin, end in zip(w.nodes, w.nodes[1:]):
            self._adj.setdefault(begin, []).append(end)
            self._adj.setdefault(end, [])
            self._edge_way[(begin, end)] = w.id
            if not oneway:
                self._adj[end].append(begin)
                self._edge_way[(end, begin)] = w.id
            self._points[begin].connected = True
            self._points[end].connected = True
        return max(0, len(w.nodes) - 1)

    # ---------------- finalize ----------------

    def finalize_pruning(self) -> SpatialGraph:
        self._check_open("finalize_pruning")
        self._frozen = True
        all_points = dict(self._points)
        active = {pid: p for pid, p in self._points.items() if p.connected}
        return SpatialGraph(
            points=active,
            all_points=all_points,
            adjacency={v: tuple(ns) for v, ns in self._adj.items()},
            edge_way=dict(self._edge_way),
            ways={wid: dict(w.tags) for wid, w in self._ways.items()},
        )
