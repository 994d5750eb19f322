from typing import Literal, Optional, Union

from pydantic import Field

from ..datatype import DataFrame
from ..element import (
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    MarkArea,
    MarkLine,
    MarkPoint,
    Number,
    Orient,
    Tooltip,
)
from .types import SeriesBase


class Candlestick(SeriesBase):
    """K-line chart; each data item is ``[open, close, lowest, highest]``."""

    type_: Literal["candlestick"] = Field("candlestick", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    legend_hover_link_: Optional[bool] = None
    hover_animation_: Optional[bool] = None
    layout_: Optional[Orient] = None
    bar_width_: Optional[Union[Number, str]] = None
    bar_min_width_: Optional[Union[Number, str]] = None
    bar_max_width_: Optional[Union[Number, str]] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    large_: Optional[bool] = None
    dataset_index_: Optional[float] = None
    encode_: Optional[DimensionEncode] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    tooltip_: Optional[Tooltip] = None
    z_: Optional[int] = None
    data_: DataFrame = []
