from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import Field

from ..datatype import DataFrame
from ..element import (
    ColorBy,
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    Label,
    LabelLine,
    MarkArea,
    MarkLine,
    MarkPoint,
    Number,
    Position,
    Radius,
    Tooltip,
)
from .types import SeriesBase


class RoseType(str, Enum):
    RADIUS = "radius"
    AREA = "area"


class Pie(SeriesBase):
    type_: Literal["pie"] = Field("pie", alias="type", frozen=True)
    color_by_: Optional[ColorBy] = None
    legend_hover_link_: Optional[bool] = None
    coordinate_system_: Optional[CoordinateSystem] = None
    selected_mode_: Optional[Union[bool, str]] = None
    selected_offset_: Optional[Number] = None
    clockwise_: Optional[bool] = None
    start_angle_: Optional[Number] = None
    end_angle_: Optional[Union[Number, str]] = None
    min_angle_: Optional[Number] = None
    pad_angle_: Optional[Number] = None
    rose_type_: Optional[RoseType] = None
    avoid_label_overlap_: Optional[bool] = None
    still_show_zero_sum_: Optional[bool] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    center_: Optional[List[Position]] = None
    radius_: Optional[Radius] = None
    label_: Optional[Label] = None
    label_line_: Optional[LabelLine] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    dataset_id_: Optional[str] = None
    encode_: Optional[DimensionEncode] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
