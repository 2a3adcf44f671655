# io/ingest_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from mapview.ingest.hooks import NoopHooks


def _default_json_logger(name="mapview", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class IngestLogging(NoopHooks):
    """
    Structured logs for the build phase: run lifecycle, rejected records, pruning.
    Per-record logs only when debug is on, and then every `sample_every` records.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev) -> dict:
        base = {"event": type(ev).__name__}
        for f in ("id", "records"):
            if hasattr(ev, f):
                base[f] = getattr(ev, f)
        if is_dataclass(ev):
            # tag payloads can be large; keep only their size
            tags = asdict(ev).get("tags")
            if tags:
                base["tags"] = len(tags)
        return base

    # --------------------------------------------------------

    def run_start(self, *, handlers: int):
        self._emit("INFO", "ingest_start", handlers=handlers)

    def run_end(self, *, processed: int, rejected: int, wall_ms: float):
        self._emit("INFO", "ingest_end", processed=processed, rejected=rejected, wall_ms=wall_ms)

    def dispatch(self, ev, *, seq: int, handlers: int):
        if self.debug and (seq % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch", **self._shape_event(ev), seq=seq, handlers=handlers)

    def rejected(self, *, seq: int, reason: str, raw=None):
        self._emit("WARNING", "record_rejected", seq=seq, reason=reason)

    def pruned(self, *, active: int, total: int, segments: int = 0):
        self._emit(
            "INFO", "graph_pruned", active=active, total=total, dropped=total - active, segments=segments
        )
