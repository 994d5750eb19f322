from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.types import AxisType, Number, Position
from .axis import AxisBound, AxisLabel


class ParallelCoordinate(EChartsModel):
    id_: Optional[str] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    layout_: Optional[str] = None
    axis_expandable_: Optional[bool] = None


class ParallelAxis(EChartsModel):
    id_: Optional[str] = None
    dim_: Optional[int] = None
    parallel_index_: Optional[int] = None
    name_: Optional[str] = None
    type_: Optional[AxisType] = None
    inverse_: Optional[bool] = None
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    axis_label_: Optional[AxisLabel] = None
    data_: List[Union[str, Number]] = []
