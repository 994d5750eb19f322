from enum import Enum
from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.color import Color
from ..element.types import Number, Radius
from .axis import AxisLine, SplitArea, SplitLine


class RadarShape(str, Enum):
    POLYGON = "polygon"
    CIRCLE = "circle"


class RadarIndicator(EChartsModel):
    name_: Optional[str] = None
    min_: Optional[Number] = None
    max_: Optional[Number] = None
    color_: Optional[Color] = None


class RadarCoordinate(EChartsModel):
    id_: Optional[str] = None
    z_: Optional[int] = None
    center_: Optional[List[Union[Number, str]]] = None
    radius_: Optional[Radius] = None
    start_angle_: Optional[Number] = None
    shape_: Optional[RadarShape] = None
    split_number_: Optional[int] = None
    axis_line_: Optional[AxisLine] = None
    split_line_: Optional[SplitLine] = None
    split_area_: Optional[SplitArea] = None
    indicator_: List[RadarIndicator] = []
