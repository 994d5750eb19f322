from enum import Enum
from typing import List, Optional, Union

from ..base import EChartsModel
from .raw_string import SymbolSize
from .style import ItemStyle, Label, LineStyle
from .types import Number, Position, Symbol


class MarkDataType(str, Enum):
    MIN = "min"
    MAX = "max"
    AVERAGE = "average"
    MEDIAN = "median"


class MarkPointData(EChartsModel):
    type_: Optional[MarkDataType] = None
    name_: Optional[str] = None
    value_: Optional[Union[Number, str]] = None
    coord_: Optional[List[Union[Number, str]]] = None
    x_: Optional[Position] = None
    y_: Optional[Position] = None
    x_axis_: Optional[Union[Number, str]] = None
    y_axis_: Optional[Union[Number, str]] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None


class MarkPoint(EChartsModel):
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    silent_: Optional[bool] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    data_: List[MarkPointData] = []


class MarkLineData(EChartsModel):
    type_: Optional[MarkDataType] = None
    name_: Optional[str] = None
    value_: Optional[Union[Number, str]] = None
    coord_: Optional[List[Union[Number, str]]] = None
    x_: Optional[Position] = None
    y_: Optional[Position] = None
    x_axis_: Optional[Union[Number, str]] = None
    y_axis_: Optional[Union[Number, str]] = None
    symbol_: Optional[Symbol] = None
    label_: Optional[Label] = None
    line_style_: Optional[LineStyle] = None


class MarkLine(EChartsModel):
    """Reference lines; each data entry is one statistic line or a [start, end] pair."""

    silent_: Optional[bool] = None
    symbol_: Optional[Union[Symbol, List[Symbol]]] = None
    precision_: Optional[int] = None
    label_: Optional[Label] = None
    line_style_: Optional[LineStyle] = None
    data_: List[Union[MarkLineData, List[MarkLineData]]] = []


class MarkAreaData(EChartsModel):
    type_: Optional[MarkDataType] = None
    name_: Optional[str] = None
    coord_: Optional[List[Union[Number, str]]] = None
    x_: Optional[Position] = None
    y_: Optional[Position] = None
    x_axis_: Optional[Union[Number, str]] = None
    y_axis_: Optional[Union[Number, str]] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None


class MarkArea(EChartsModel):
    silent_: Optional[bool] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    data_: List[List[MarkAreaData]] = []
