from enum import Enum
from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.color import Color
from ..element.raw_string import Formatter
from ..element.style import TextStyle
from ..element.types import Number, Orient, Position


class VisualMapType(str, Enum):
    CONTINUOUS = "continuous"
    PIECEWISE = "piecewise"


class VisualMapChannel(EChartsModel):
    color_: List[Color] = []
    symbol_size_: Optional[List[Number]] = None
    color_alpha_: Optional[List[float]] = None
    opacity_: Optional[List[float]] = None


class VisualMapPiece(EChartsModel):
    min_: Optional[Number] = None
    max_: Optional[Number] = None
    lt_: Optional[Number] = None
    lte_: Optional[Number] = None
    gt_: Optional[Number] = None
    gte_: Optional[Number] = None
    value_: Optional[Union[Number, str]] = None
    label_: Optional[str] = None
    color_: Optional[Color] = None


class VisualMap(EChartsModel):
    type_: Optional[VisualMapType] = None
    id_: Optional[str] = None
    show_: Optional[bool] = None
    min_: Optional[Number] = None
    max_: Optional[Number] = None
    range_: Optional[List[Number]] = None
    calculable_: Optional[bool] = None
    realtime_: Optional[bool] = None
    inverse_: Optional[bool] = None
    precision_: Optional[int] = None
    split_number_: Optional[int] = None
    item_width_: Optional[Number] = None
    item_height_: Optional[Number] = None
    align_: Optional[str] = None
    text_: Optional[List[str]] = None
    dimension_: Optional[Union[int, str]] = None
    series_index_: Optional[Union[int, List[int]]] = None
    orient_: Optional[Orient] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    formatter_: Optional[Formatter] = None
    in_range_: Optional[VisualMapChannel] = None
    out_of_range_: Optional[VisualMapChannel] = None
    text_style_: Optional[TextStyle] = None
    pieces_: List[VisualMapPiece] = []
