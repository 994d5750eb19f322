from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.types import AxisType, Number, Radius
from .axis import AxisBound, AxisLabel, AxisLine, SplitLine


class PolarCoordinate(EChartsModel):
    id_: Optional[str] = None
    z_: Optional[int] = None
    center_: Optional[List[Union[Number, str]]] = None
    radius_: Optional[Radius] = None


class AngleAxis(EChartsModel):
    id_: Optional[str] = None
    polar_index_: Optional[int] = None
    type_: Optional[AxisType] = None
    start_angle_: Optional[Number] = None
    clockwise_: Optional[bool] = None
    boundary_gap_: Optional[bool] = None
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    axis_line_: Optional[AxisLine] = None
    axis_label_: Optional[AxisLabel] = None
    split_line_: Optional[SplitLine] = None
    data_: List[Union[str, Number]] = []


class RadiusAxis(EChartsModel):
    id_: Optional[str] = None
    polar_index_: Optional[int] = None
    type_: Optional[AxisType] = None
    name_: Optional[str] = None
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    axis_line_: Optional[AxisLine] = None
    axis_label_: Optional[AxisLabel] = None
    split_line_: Optional[SplitLine] = None
    data_: List[Union[str, Number]] = []
