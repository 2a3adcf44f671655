from dataclasses import dataclass, field


# Core map types used by the graph builder and the tile selector
@dataclass
class Point:
    id: int
    lon: float  # degrees
    lat: float
    connected: bool = False  # set once any way segment references it
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.tags.get("name")


@dataclass
class Way:
    id: int
    nodes: list[int] = field(default_factory=list)  # point ids in path order
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.tags.get("name")

    def is_oneway(self, values: frozenset[str] = frozenset({"yes"})) -> bool:
        return self.tags.get("oneway") in values


@dataclass(frozen=True)
class BoundingBox:
    ullon: float  # upper-left
    ullat: float
    lrlon: float  # lower-right
    lrlat: float

    @property
    def width(self) -> float:
        return self.lrlon - self.ullon

    @property
    def height(self) -> float:
        return self.ullat - self.lrlat

    def intersects(self, other: "BoundingBox") -> bool:
        return not (
            other.lrlon <= self.ullon
            or other.ullon >= self.lrlon
            or other.lrlat >= self.ullat
            or other.ullat <= self.lrlat
        )
