from typing import Literal, Optional

from pydantic import Field

from ..controller import Controller
from ..datatype import DataFrame
from ..element import (
    ColorBy,
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    Label,
    MarkArea,
    MarkLine,
    Symbol,
    SymbolSize,
)
from .types import SeriesBase


class Scatter(SeriesBase):
    type_: Literal["scatter"] = Field("scatter", alias="type", frozen=True)
    color_by_: Optional[ColorBy] = None
    label_: Optional[Label] = None
    dataset_index_: Optional[float] = None
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    encode_: Optional[DimensionEncode] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    data_: DataFrame = []


class ScatterController(Controller[Scatter]):
    def with_marker_size(self, size: SymbolSize) -> "ScatterController":
        return self._set("symbol_size_", size)

    def with_name(self, name: str) -> "ScatterController":
        return self._set("name_", name)

    def with_data(self, data: DataFrame) -> "ScatterController":
        return self._set("data_", data)
