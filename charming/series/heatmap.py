from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import CoordinateSystem, DimensionEncode, Emphasis, ItemStyle, Label, MarkArea, MarkLine, MarkPoint, Tooltip
from .types import SeriesBase


class Heatmap(SeriesBase):
    type_: Literal["heatmap"] = Field("heatmap", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    geo_index_: Optional[float] = None
    calendar_index_: Optional[float] = None
    point_size_: Optional[float] = None
    blur_size_: Optional[float] = None
    min_opacity_: Optional[float] = None
    max_opacity_: Optional[float] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    encode_: Optional[DimensionEncode] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
