# ingest/bus.py

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from mapview.app.events import BaseEvent, EndOfStream, RecordRejected
from mapview.domain.errors import MalformedInput
from mapview.io.records import decode_record, record_ref

from .hooks import IngestHooks, NoopHooks

Handler = Callable[[BaseEvent], None]


@dataclass(frozen=True)
class Rejected:
    seq: int  # 0-based position in the record stream
    reason: str
    raw: object = None


@dataclass
class IngestReport:
    processed: int = 0
    rejected: list[Rejected] = field(default_factory=list)


class IngestBus:
    """
    Single-producer dispatcher for the build phase.

    Records are decoded and handed to subscribers in document order. MalformedInput
    (from decoding or a handler) skips that record, is reported to the hooks and the
    IngestReport, and is re-published as RecordRejected; anything else aborts.
    """

    def __init__(self, hooks: IngestHooks | None = None):
        self._subs: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def _dispatch(self, ev: BaseEvent, seq: int) -> None:
        handlers = self._subs.get(type(ev), ())
        self._hooks.dispatch(ev, seq=seq, handlers=len(handlers))
        for h in handlers:
            h(ev)

    def run(self, records: Iterable) -> IngestReport:
        t0 = time.perf_counter()
        self._hooks.run_start(handlers=sum(len(hs) for hs in self._subs.values()))
        report = IngestReport()
        seq = -1
        for seq, raw in enumerate(records):
            try:
                ev = decode_record(raw)
                self._dispatch(ev, seq)
            except MalformedInput as exc:
                report.rejected.append(Rejected(seq=seq, reason=str(exc), raw=raw))
                self._hooks.rejected(seq=seq, reason=str(exc), raw=raw)
                kind, ref = record_ref(raw)
                self._dispatch(RecordRejected(seq=seq, kind=kind, ref=ref, reason=str(exc)), seq)
                continue
            report.processed += 1
        self._dispatch(EndOfStream(records=seq + 1), seq + 1)
        self._hooks.run_end(
            processed=report.processed,
            rejected=len(report.rejected),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return report
