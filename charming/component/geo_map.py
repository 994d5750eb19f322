from enum import Enum
from typing import Any, Dict, Optional

from ..base import EChartsModel


class GeoMapType(str, Enum):
    GEO_JSON = "geoJSON"
    SVG = "svg"


class GeoMap(EChartsModel):
    """A map registered with the renderer before the option is applied.

    Geo maps never appear in the option document itself; renderers read them
    from the chart to issue ``echarts.registerMap`` calls.
    """

    map_name_: str
    type_: GeoMapType = GeoMapType.GEO_JSON
    geo_json_: Optional[Dict[str, Any]] = None
    svg_: Optional[str] = None
    special_areas_: Optional[Dict[str, Any]] = None

    @classmethod
    def from_geo_json(cls, map_name: str, geo_json: Dict[str, Any]) -> "GeoMap":
        return cls(map_name_=map_name, type_=GeoMapType.GEO_JSON, geo_json_=geo_json)

    @classmethod
    def from_svg(cls, map_name: str, svg: str) -> "GeoMap":
        return cls(map_name_=map_name, type_=GeoMapType.SVG, svg_=svg)
