from typing import List, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..element.axis_pointer import AxisPointer
from ..element.color import Color
from ..element.raw_string import Formatter
from ..element.style import AreaStyle, LineStyle, TextStyle
from ..element.types import AxisType, NameLocation, Number

# Numeric bound, or "dataMin" / "dataMax", or a function of the extent.
AxisBound = Union[Number, Formatter]


class AxisLine(EChartsModel):
    show_: Optional[bool] = None
    on_zero_: Optional[bool] = None
    line_style_: Optional[LineStyle] = None


class AxisTick(EChartsModel):
    show_: Optional[bool] = None
    align_with_label_: Optional[bool] = None
    inside_: Optional[bool] = None
    length_: Optional[Number] = None
    interval_: Optional[Union[Number, Formatter]] = None
    line_style_: Optional[LineStyle] = None


class AxisLabel(EChartsModel):
    show_: Optional[bool] = None
    interval_: Optional[Union[Number, Formatter]] = None
    inside_: Optional[bool] = None
    rotate_: Optional[Number] = None
    margin_: Optional[Number] = None
    formatter_: Optional[Formatter] = None
    color_: Optional[Color] = None
    font_size_: Optional[Number] = None
    font_weight_: Optional[Union[str, int]] = None
    hide_overlap_: Optional[bool] = None


class SplitLine(EChartsModel):
    show_: Optional[bool] = None
    interval_: Optional[Union[Number, Formatter]] = None
    line_style_: Optional[LineStyle] = None


class SplitArea(EChartsModel):
    show_: Optional[bool] = None
    interval_: Optional[Union[Number, Formatter]] = None
    area_style_: Optional[AreaStyle] = None


class Axis(EChartsModel):
    """Cartesian x or y axis."""

    id_: Optional[str] = None
    show_: Optional[bool] = None
    type_: Optional[AxisType] = None
    grid_index_: Optional[int] = None
    position_: Optional[str] = None
    offset_: Optional[Number] = None
    name_: Optional[str] = None
    name_location_: Optional[NameLocation] = None
    name_text_style_: Optional[TextStyle] = None
    name_gap_: Optional[Number] = None
    name_rotate_: Optional[Number] = None
    inverse_: Optional[bool] = None
    boundary_gap_: Optional[Union[bool, List[Union[Number, str]]]] = None
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    scale_: Optional[bool] = None
    split_number_: Optional[int] = None
    interval_: Optional[Number] = None
    log_base_: Optional[Number] = None
    silent_: Optional[bool] = None
    axis_line_: Optional[AxisLine] = None
    axis_tick_: Optional[AxisTick] = None
    axis_label_: Optional[AxisLabel] = None
    split_line_: Optional[SplitLine] = None
    split_area_: Optional[SplitArea] = None
    axis_pointer_: Optional[AxisPointer] = None
    data_: List[Union[str, Number]] = []


class Axis3D(EChartsModel):
    type_: Optional[AxisType] = None
    name_: Optional[str] = None
    grid3d_index_: Optional[int] = Field(None, alias="grid3DIndex")
    min_: Optional[AxisBound] = None
    max_: Optional[AxisBound] = None
    split_number_: Optional[int] = None
    axis_label_: Optional[AxisLabel] = None
    data_: List[Union[str, Number]] = []
