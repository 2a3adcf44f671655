# mapview/io/records.py
"""
Decoding of raw records handed over by the map-data parser.

The parser emits one mapping per <node>/<way> element, values usually still strings:
    {"type": "node", "id": "53", "lon": "-122.25", "lat": "37.86", "tags": {"name": "..."}}
    {"type": "way", "id": "9", "nodes": ["53", "54"], "tags": {"oneway": "yes"}}
"""

import math
from collections.abc import Mapping

from mapview.app.events import BaseEvent, NodeParsed, WayParsed
from mapview.domain.errors import MalformedInput


def parse_id(v, what: str = "id") -> int:
    if isinstance(v, bool):
        raise MalformedInput(f"bad {what}: {v!r}")
    if isinstance(v, int):
        return v
    try:
        return int(str(v).strip())
    except (TypeError, ValueError):
        raise MalformedInput(f"bad {what}: {v!r}") from None


def parse_coord(v, what: str, bound: float) -> float:
    if isinstance(v, bool):
        raise MalformedInput(f"bad {what}: {v!r}")
    try:
        x = float(v)
    except (TypeError, ValueError):
        raise MalformedInput(f"bad {what}: {v!r}") from None
    if not math.isfinite(x) or abs(x) > bound:
        raise MalformedInput(f"{what} out of range: {x}")
    return x


def _tags(raw: Mapping) -> dict[str, str]:
    tags = raw.get("tags") or {}
    if not isinstance(tags, Mapping):
        raise MalformedInput(f"tags must be a mapping, got {type(tags).__name__}")
    return {str(k): str(v) for k, v in tags.items()}


def decode_record(raw) -> BaseEvent:
    """Raw parser record -> typed event. Already-typed events pass through."""
    if isinstance(raw, BaseEvent):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedInput(f"record must be a mapping, got {type(raw).__name__}")

    kind = raw.get("type")
    if kind == "node":
        return NodeParsed(
            id=parse_id(raw.get("id")),
            lon=parse_coord(raw.get("lon"), "lon", 180.0),
            lat=parse_coord(raw.get("lat"), "lat", 90.0),
            tags=_tags(raw),
        )
    if kind == "way":
        nodes = raw.get("nodes") or ()
        if not isinstance(nodes, (list, tuple)):
            raise MalformedInput("way nodes must be a sequence of ids")
        return WayParsed(
            id=parse_id(raw.get("id")),
            nodes=tuple(parse_id(n, "node ref") for n in nodes),
            tags=_tags(raw),
        )
    raise MalformedInput(f"unknown record type {kind!r}")


def record_ref(raw) -> tuple[str | None, int | str | None]:
    """Best-effort (type, id) of a rejected record. Never raises."""
    if isinstance(raw, NodeParsed):
        return "node", raw.id
    if isinstance(raw, WayParsed):
        return "way", raw.id
    if not isinstance(raw, Mapping):
        return None, None
    kind, rid = raw.get("type"), raw.get("id")
    kind = kind if isinstance(kind, str) else None
    if rid is None:
        return kind, None
    try:
        return kind, parse_id(rid)
    except MalformedInput:
        return kind, str(rid)
