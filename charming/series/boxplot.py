from typing import List, Literal, Optional, Union

from pydantic import Field

from ..datatype import DataFrame
from ..element import (
    ColorBy,
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


class Boxplot(SeriesBase):
    """Box-and-whisker plot; each data item is ``[min, Q1, median, Q3, max]``."""

    type_: Literal["boxplot"] = Field("boxplot", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    color_by_: Optional[ColorBy] = None
    legend_hover_link_: Optional[bool] = None
    hover_animation_: Optional[bool] = None
    layout_: Optional[Orient] = None
    box_width_: Optional[List[Union[Number, str]]] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    dataset_index_: Optional[float] = None
    encode_: Optional[DimensionEncode] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    tooltip_: Optional[Tooltip] = None
    z_: Optional[int] = None
    data_: DataFrame = []
