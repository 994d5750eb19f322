from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.axis_pointer import AxisPointer
from ..element.types import AxisType, Number, Orient, Position
from .axis import AxisBound, AxisLabel, SplitLine


class SingleAxis(EChartsModel):
    id_: Optional[str] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    orient_: Optional[Orient] = None
    type_: Optional[AxisType] = None
    name_: Optional[str] = None
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    boundary_gap_: Optional[Union[bool, List[Union[Number, str]]]] = None
    axis_label_: Optional[AxisLabel] = None
    axis_pointer_: Optional[AxisPointer] = None
    split_line_: Optional[SplitLine] = None
    data_: List[Union[str, Number]] = []
