# mapview/domain/errors.py


class MapViewError(Exception):
    pass


class NotFound(MapViewError, LookupError):
    """Unknown point/way id, or no direct edge between a queried pair."""


class PreconditionViolation(MapViewError, RuntimeError):
    """Build-phase contract broken (edge to an unadded point, double finalize, late mutation)."""


class MalformedInput(MapViewError, ValueError):
    """Ingestion record or query parameter that cannot be parsed."""
