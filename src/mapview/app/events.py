# app/events.py
from dataclasses import dataclass, field


# Base type for ingestion events (dispatched by IngestBus in document order)
@dataclass(frozen=True)
class BaseEvent:
    pass


@dataclass(frozen=True)
class NodeParsed(BaseEvent):
    id: int
    lon: float
    lat: float
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class WayParsed(BaseEvent):
    id: int
    nodes: tuple[int, ...] = ()  # point ids in path order
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndOfStream(BaseEvent):
    records: int  # raw records seen, rejected ones included


@dataclass(frozen=True)
class RecordRejected(BaseEvent):
    seq: int
    kind: str | None  # raw "type" field, when there was one
    ref: int | str | None  # parsed id, else the raw id string
    reason: str = ""
