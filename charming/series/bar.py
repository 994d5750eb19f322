from typing import Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..datatype import DataFrame
from ..element import (
    BorderRadius,
    Color,
    ColorBy,
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    Label,
    MarkArea,
    MarkLine,
    MarkPoint,
    Number,
    Tooltip,
)
from .types import SeriesBase


class BackgroundStyle(EChartsModel):
    color_: Optional[Color] = None
    border_color_: Optional[Color] = None
    border_width_: Optional[Number] = None
    border_radius_: Optional[BorderRadius] = None
    opacity_: Optional[float] = None


class Bar(SeriesBase):
    type_: Literal["bar"] = Field("bar", alias="type", frozen=True)
    color_by_: Optional[ColorBy] = None
    legend_hover_link_: Optional[bool] = None
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    polar_index_: Optional[float] = None
    round_cap_: Optional[bool] = None
    realtime_sort_: Optional[bool] = None
    show_background_: Optional[bool] = None
    background_style_: Optional[BackgroundStyle] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    stack_: Optional[str] = None
    bar_width_: Optional[Union[Number, str]] = None
    bar_max_width_: Optional[Union[Number, str]] = None
    bar_min_height_: Optional[Number] = None
    bar_gap_: Optional[str] = None
    bar_category_gap_: Optional[str] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    dataset_id_: Optional[str] = None
    encode_: Optional[DimensionEncode] = None
    tooltip_: Optional[Tooltip] = None
    silent_: Optional[bool] = None
    z_: Optional[int] = None
    data_: DataFrame = []
