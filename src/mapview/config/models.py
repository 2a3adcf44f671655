from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mapview.domain.raster.tiles import LEVELS, ROOT_BOX, TILE_PX


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)


# ----------------- GRAPH ---------------------


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    oneway_values: list[str] = Field(default_factory=lambda: ["yes"])
    allowed_highways: list[str] | None = None  # None => build every way

    @field_validator("allowed_highways", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        # YAML [] or "" should mean "no filter"
        if v is None or (isinstance(v, (list, tuple, str)) and len(v) == 0):
            return None
        return v


# ----------------- RASTER ---------------------


class BoxModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    ullon: float = ROOT_BOX.ullon
    ullat: float = ROOT_BOX.ullat
    lrlon: float = ROOT_BOX.lrlon
    lrlat: float = ROOT_BOX.lrlat

    @model_validator(mode="after")
    def _check_corners(self):
        if not self.ullon < self.lrlon:
            raise ValueError(f"ullon must be < lrlon, got {self.ullon} >= {self.lrlon}")
        if not self.ullat > self.lrlat:
            raise ValueError(f"ullat must be > lrlat, got {self.ullat} <= {self.lrlat}")
        return self


class RasterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    root: BoxModel = Field(default_factory=BoxModel)
    levels: int = Field(default=LEVELS, ge=1, le=30)
    tile_px: int = Field(default=TILE_PX, gt=0)
    tile_name: str = "d{depth}_x{x}_y{y}.png"

    @field_validator("tile_name")
    @classmethod
    def _has_placeholders(cls, v: str) -> str:
        for key in ("{depth}", "{x}", "{y}"):
            if key not in v:
                raise ValueError(f"tile_name must contain {key}")
        return v


# ------------------------------------------------------------------


class MapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    graph: GraphModel = Field(default_factory=GraphModel)
    raster: RasterModel = Field(default_factory=RasterModel)
