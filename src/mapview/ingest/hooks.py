# ingest/hooks.py
from typing import Protocol

from mapview.app.events import BaseEvent


class IngestHooks(Protocol):
    def run_start(self, *, handlers: int): ...
    def run_end(self, *, processed: int, rejected: int, wall_ms: float): ...
    def dispatch(self, ev: BaseEvent, *, seq: int, handlers: int): ...
    def rejected(self, *, seq: int, reason: str, raw=None): ...
    def pruned(self, *, active: int, total: int, segments: int = 0): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def dispatch(self, *_, **__):
        pass

    def rejected(self, **_):
        pass

    def pruned(self, **_):
        pass
