# tests/ingest/test_ingest_logging.py
import json
import logging

from mapview.app.events import NodeParsed
from mapview.io.ingest_logging import IngestLogging, _default_json_logger


def _payloads(caplog):
    return [(r.levelname, r.getMessage(), r.extra) for r in caplog.records]


def test_lifecycle_and_rejects_are_logged(caplog):
    hooks = IngestLogging(run_id="r-1", logger=logging.getLogger("mapview.test"))
    with caplog.at_level(logging.INFO, logger="mapview.test"):
        hooks.run_start(handlers=3)
        hooks.rejected(seq=4, reason="bad id", raw={"id": "x"})
        hooks.pruned(active=8, total=10, segments=12)
        hooks.run_end(processed=9, rejected=1, wall_ms=1.5)

    logs = _payloads(caplog)
    assert [m for _, m, _ in logs] == ["ingest_start", "record_rejected", "graph_pruned", "ingest_end"]
    assert all(extra["run_id"] == "r-1" for _, _, extra in logs)
    level, _, extra = logs[1]
    assert level == "WARNING" and extra["seq"] == 4 and extra["reason"] == "bad id"
    assert logs[2][2]["dropped"] == 2 and logs[2][2]["segments"] == 12


def test_dispatch_is_sampled_only_in_debug(caplog):
    quiet = IngestLogging(logger=logging.getLogger("mapview.quiet"))
    loud = IngestLogging(debug=True, sample_every=2, logger=logging.getLogger("mapview.loud"))
    ev = NodeParsed(id=7, lon=0.0, lat=0.0, tags={"name": "x"})
    with caplog.at_level(logging.DEBUG, logger="mapview.loud"):
        for seq in range(4):
            quiet.dispatch(ev, seq=seq, handlers=2)
            loud.dispatch(ev, seq=seq, handlers=2)

    logs = _payloads(caplog)
    assert [extra["seq"] for _, _, extra in logs] == [0, 2]
    assert logs[0][2]["event"] == "NodeParsed" and logs[0][2]["tags"] == 1


def test_json_formatter_output():
    logger = _default_json_logger(name="mapview.fmt", level="INFO")
    record = logger.makeRecord(
        "mapview.fmt", logging.INFO, __file__, 1, "graph_pruned", None, None,
        extra={"extra": {"run_id": "r", "active": 3}},
    )
    line = logger.handlers[0].formatter.format(record)
    assert json.loads(line) == {
        "level": "INFO", "msg": "graph_pruned", "logger": "mapview.fmt", "run_id": "r", "active": 3,
    }
