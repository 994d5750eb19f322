from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import AreaStyle, ColorBy, Emphasis, ItemStyle, Label, LineStyle, Symbol, SymbolSize, Tooltip
from .types import SeriesBase


class Radar(SeriesBase):
    type_: Literal["radar"] = Field("radar", alias="type", frozen=True)
    color_by_: Optional[ColorBy] = None
    radar_index_: Optional[float] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    area_style_: Optional[AreaStyle] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
