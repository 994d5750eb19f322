from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import Emphasis, ItemStyle, Label, LabelLine, Number, Orient, Position, Tooltip
from .types import SeriesBase


class FunnelSort(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    NONE = "none"


class Funnel(SeriesBase):
    type_: Literal["funnel"] = Field("funnel", alias="type", frozen=True)
    min_: Optional[Number] = None
    max_: Optional[Number] = None
    min_size_: Optional[Position] = None
    max_size_: Optional[Position] = None
    orient_: Optional[Orient] = None
    sort_: Optional[FunnelSort] = None
    gap_: Optional[Number] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    label_: Optional[Label] = None
    label_line_: Optional[LabelLine] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
