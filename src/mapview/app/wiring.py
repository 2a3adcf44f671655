# mapview/app/wiring.py
from mapview.app.controllers.graph import GraphHandler
from mapview.app.controllers.names import NameHandler
from mapview.app.events import NodeParsed, RecordRejected, WayParsed
from mapview.ingest.bus import IngestBus


def wire(bus: IngestBus, *, graph: GraphHandler, names: NameHandler) -> None:
    b = bus

    # points first into the graph, then the name index (same event)
    b.on(NodeParsed, graph.on_node)
    b.on(NodeParsed, names.on_node)

    # ways arrive after every point they reference
    b.on(WayParsed, graph.on_way)

    # ways through a rejected point are rejected in turn
    b.on(RecordRejected, graph.on_rejected)
