from typing import List, Literal, Optional

from pydantic import Field

from ..base import EChartsModel
from ..component import AxisLabel, AxisLine, AxisTick, SplitLine
from ..datatype import DataFrame
from ..element import Color, Formatter, ItemStyle, Number, Position, Radius, TextStyle, Tooltip
from .types import SeriesBase


class GaugeProgress(EChartsModel):
    show_: Optional[bool] = None
    overlap_: Optional[bool] = None
    width_: Optional[Number] = None
    round_cap_: Optional[bool] = None
    clip_: Optional[bool] = None
    item_style_: Optional[ItemStyle] = None


class GaugePointer(EChartsModel):
    show_: Optional[bool] = None
    show_above_: Optional[bool] = None
    icon_: Optional[str] = None
    length_: Optional[Position] = None
    width_: Optional[Number] = None
    item_style_: Optional[ItemStyle] = None


class GaugeAnchor(EChartsModel):
    show_: Optional[bool] = None
    show_above_: Optional[bool] = None
    size_: Optional[Number] = None
    icon_: Optional[str] = None
    item_style_: Optional[ItemStyle] = None


class GaugeTitle(EChartsModel):
    show_: Optional[bool] = None
    offset_center_: Optional[List[Position]] = None
    color_: Optional[Color] = None
    font_size_: Optional[Number] = None


class GaugeDetail(EChartsModel):
    show_: Optional[bool] = None
    width_: Optional[Number] = None
    height_: Optional[Number] = None
    offset_center_: Optional[List[Position]] = None
    value_animation_: Optional[bool] = None
    formatter_: Optional[Formatter] = None
    color_: Optional[Color] = None
    font_size_: Optional[Number] = None
    text_style_: Optional[TextStyle] = None


class Gauge(SeriesBase):
    type_: Literal["gauge"] = Field("gauge", alias="type", frozen=True)
    center_: Optional[List[Position]] = None
    radius_: Optional[Radius] = None
    start_angle_: Optional[Number] = None
    end_angle_: Optional[Number] = None
    clockwise_: Optional[bool] = None
    min_: Optional[Number] = None
    max_: Optional[Number] = None
    split_number_: Optional[int] = None
    progress_: Optional[GaugeProgress] = None
    axis_line_: Optional[AxisLine] = None
    axis_tick_: Optional[AxisTick] = None
    axis_label_: Optional[AxisLabel] = None
    split_line_: Optional[SplitLine] = None
    pointer_: Optional[GaugePointer] = None
    anchor_: Optional[GaugeAnchor] = None
    item_style_: Optional[ItemStyle] = None
    title_: Optional[GaugeTitle] = None
    detail_: Optional[GaugeDetail] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
