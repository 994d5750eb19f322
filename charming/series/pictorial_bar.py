from typing import List, Literal, Optional, Union

from pydantic import Field

from ..datatype import DataFrame
from ..element import (
    CoordinateSystem,
    Emphasis,
    ItemStyle,
    Label,
    MarkArea,
    MarkLine,
    MarkPoint,
    Number,
    Symbol,
    SymbolSize,
    Tooltip,
)
from .types import SeriesBase


class PictorialBar(SeriesBase):
    """Bars drawn with repeated or stretched symbols."""

    type_: Literal["pictorialBar"] = Field("pictorialBar", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    symbol_position_: Optional[str] = None
    symbol_offset_: Optional[List[Union[Number, str]]] = None
    symbol_rotate_: Optional[Number] = None
    symbol_repeat_: Optional[Union[bool, int, str]] = None
    symbol_repeat_direction_: Optional[str] = None
    symbol_margin_: Optional[Union[Number, str]] = None
    symbol_clip_: Optional[bool] = None
    symbol_bounding_data_: Optional[Number] = None
    bar_gap_: Optional[str] = None
    bar_category_gap_: Optional[str] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    tooltip_: Optional[Tooltip] = None
    z_: Optional[int] = None
    data_: DataFrame = []
