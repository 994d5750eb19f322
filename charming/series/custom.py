from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import CoordinateSystem, DimensionEncode, Emphasis, Formatter, ItemStyle, Label, Tooltip
from .types import SeriesBase


class Custom(SeriesBase):
    """Series drawn by a user ``renderItem`` function, usually a ``RawString``."""

    type_: Literal["custom"] = Field("custom", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    polar_index_: Optional[float] = None
    geo_index_: Optional[float] = None
    calendar_index_: Optional[float] = None
    dataset_index_: Optional[float] = None
    render_item_: Optional[Formatter] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None
    emphasis_: Optional[Emphasis] = None
    encode_: Optional[DimensionEncode] = None
    clip_: Optional[bool] = None
    tooltip_: Optional[Tooltip] = None
    z_: Optional[int] = None
    data_: DataFrame = []
