from typing import List, Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import Emphasis, Label, Position, Tooltip
from .types import SeriesBase


class ThemeRiver(SeriesBase):
    """Stream graph over a single axis; each item is ``[date, value, theme]``."""

    type_: Literal["themeRiver"] = Field("themeRiver", alias="type", frozen=True)
    coordinate_system_: Optional[str] = None
    single_axis_index_: Optional[float] = None
    bounding_gap_: Optional[List[Position]] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    label_: Optional[Label] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
