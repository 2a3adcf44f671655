# mapview/domain/raster/tiles.py
import math
from dataclasses import dataclass, field

from mapview.domain.entities.geography import BoundingBox

ROOT_BOX = BoundingBox(
    ullon=-122.2998046875,
    ullat=37.892195547244356,
    lrlon=-122.2119140625,
    lrlat=37.82280243352756,
)
TILE_PX = 256
LEVELS = 8  # depths 0..7


@dataclass(frozen=True)
class TilePyramid:
    """
    Quadtree of pre-rendered tiles over `root`.
    Depth d splits the root into 2^d x 2^d tiles of `tile_px` pixels each.
    """

    root: BoundingBox = ROOT_BOX
    levels: int = LEVELS
    tile_px: int = TILE_PX
    tile_name: str = "d{depth}_x{x}_y{y}.png"

    # per-depth tables, derived in __post_init__
    tile_w: tuple[float, ...] = field(init=False, repr=False)
    tile_h: tuple[float, ...] = field(init=False, repr=False)
    lon_dpp: tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self):
        # division by a power of two is exact, so span / tile_w[d] == 2^d
        w = tuple(self.root.width / 2**d for d in range(self.levels))
        h = tuple(self.root.height / 2**d for d in range(self.levels))
        object.__setattr__(self, "tile_w", w)
        object.__setattr__(self, "tile_h", h)
        object.__setattr__(self, "lon_dpp", tuple(x / self.tile_px for x in w))

    @property
    def max_depth(self) -> int:
        return self.levels - 1

    def tiles_per_side(self, depth: int) -> int:
        return int(self.root.width / self.tile_w[depth])

    def depth_for(self, required_lon_dpp: float) -> int:
        for d, dpp in enumerate(self.lon_dpp):
            if dpp < required_lon_dpp:
                return d
        return self.max_depth


DEFAULT_PYRAMID = TilePyramid()


@dataclass(frozen=True)
class TileSelection:
    render_grid: list[list[str]]
    raster_box: BoundingBox
    depth: int
    query_success: bool

    def to_params(self) -> dict:
        return {
            "render_grid": [list(row) for row in self.render_grid],
            "raster_ul_lon": self.raster_box.ullon,
            "raster_ul_lat": self.raster_box.ullat,
            "raster_lr_lon": self.raster_box.lrlon,
            "raster_lr_lat": self.raster_box.lrlat,
            "depth": self.depth,
            "query_success": self.query_success,
        }


def select_tiles(
    viewport: BoundingBox,
    width_px: float,
    height_px: float,
    pyramid: TilePyramid = DEFAULT_PYRAMID,
) -> TileSelection:
    """
    Pick the shallowest depth whose resolution beats the viewport's LonDPP and the
    tile range covering the viewport at that depth.

    Never raises for viewports outside the root; check `query_success` first.
    `height_px` does not affect depth, which is driven by longitude resolution only.
    """
    root = pyramid.root
    depth = pyramid.depth_for(viewport.width / width_px)
    w, h = pyramid.tile_w[depth], pyramid.tile_h[depth]
    last = pyramid.tiles_per_side(depth) - 1

    ulx = max(0, math.floor((viewport.ullon - root.ullon) / w))
    uly = max(0, math.floor((root.ullat - viewport.ullat) / h))
    lrx = min(last, math.floor((viewport.lrlon - root.ullon) / w))
    lry = min(last, math.floor((root.ullat - viewport.lrlat) / h))

    grid = [
        [pyramid.tile_name.format(depth=depth, x=x, y=y) for x in range(ulx, lrx + 1)]
        for y in range(uly, lry + 1)
    ]
    raster = BoundingBox(
        ullon=root.ullon + ulx * w,
        ullat=root.ullat - uly * h,
        lrlon=root.ullon + (lrx + 1) * w,
        lrlat=root.ullat - (lry + 1) * h,
    )
    return TileSelection(
        render_grid=grid,
        raster_box=raster,
        depth=depth,
        query_success=root.intersects(viewport),
    )
