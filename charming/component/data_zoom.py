from enum import Enum
from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.types import Number, Orient, Position


class DataZoomType(str, Enum):
    INSIDE = "inside"
    SLIDER = "slider"


class FilterMode(str, Enum):
    FILTER = "filter"
    WEAK_FILTER = "weakFilter"
    EMPTY = "empty"
    NONE = "none"


class DataZoom(EChartsModel):
    type_: Optional[DataZoomType] = None
    id_: Optional[str] = None
    show_: Optional[bool] = None
    disabled_: Optional[bool] = None
    x_axis_index_: Optional[Union[int, List[int]]] = None
    y_axis_index_: Optional[Union[int, List[int]]] = None
    filter_mode_: Optional[FilterMode] = None
    start_: Optional[Number] = None
    end_: Optional[Number] = None
    start_value_: Optional[Union[Number, str]] = None
    end_value_: Optional[Union[Number, str]] = None
    min_span_: Optional[Number] = None
    max_span_: Optional[Number] = None
    orient_: Optional[Orient] = None
    zoom_lock_: Optional[bool] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
