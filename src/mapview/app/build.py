# mapview/app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from mapview.app.controllers.graph import GraphHandler
from mapview.app.controllers.names import NameHandler
from mapview.app.service import MapService
from mapview.app.wiring import wire
from mapview.config.models import MapModel, RasterModel
from mapview.domain.entities.geography import BoundingBox
from mapview.domain.graph.builder import GraphBuilder
from mapview.domain.graph.spatial_graph import SpatialGraph
from mapview.domain.names.trie import PrefixIndex
from mapview.domain.raster.tiles import TilePyramid
from mapview.ingest.bus import IngestBus, IngestReport
from mapview.ingest.hooks import NoopHooks
from mapview.io.ingest_logging import IngestLogging  # JSON logs


@dataclass
class App:
    graph: SpatialGraph
    names: PrefixIndex
    pyramid: TilePyramid
    service: MapService
    report: IngestReport
    filtered_ways: int = 0
    segments: int = 0  # way segments expanded into edges


def make_pyramid(cfg: RasterModel) -> TilePyramid:
    r = cfg.root
    return TilePyramid(
        root=BoundingBox(ullon=r.ullon, ullat=r.ullat, lrlon=r.lrlon, lrlat=r.lrlat),
        levels=cfg.levels,
        tile_px=cfg.tile_px,
        tile_name=cfg.tile_name,
    )


def build(cfg: MapModel | Mapping, records: Iterable, *, use_logging: bool = True) -> App:
    """Startup phase: ingest every record, prune once, hand back read-only query handles."""
    # 0) Validate config
    model = cfg if isinstance(cfg, MapModel) else MapModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        IngestLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Build-phase state & handlers (inject deps explicitly)
    builder = GraphBuilder(oneway_values=model.graph.oneway_values)
    names = PrefixIndex()
    graph_handler = GraphHandler(builder, allowed_highways=model.graph.allowed_highways)
    name_handler = NameHandler(names)

    # 3) Wiring & ingestion (single producer)
    bus = IngestBus(hooks=hooks)
    wire(bus, graph=graph_handler, names=name_handler)
    report = bus.run(records)

    # 4) Freeze
    total = len(builder)
    graph = builder.finalize_pruning()
    hooks.pruned(active=len(graph), total=total, segments=graph_handler.segments)

    pyramid = make_pyramid(model.raster)
    return App(
        graph=graph,
        names=names,
        pyramid=pyramid,
        service=MapService(graph, names, pyramid),
        report=report,
        filtered_ways=graph_handler.filtered_ways,
        segments=graph_handler.segments,
    )
