from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import Emphasis, LineStyle, Number
from .types import SeriesBase


class Parallel(SeriesBase):
    type_: Literal["parallel"] = Field("parallel", alias="type", frozen=True)
    coordinate_system_: Optional[str] = None
    parallel_index_: Optional[float] = None
    line_style_: Optional[LineStyle] = None
    emphasis_: Optional[Emphasis] = None
    inactive_opacity_: Optional[Number] = None
    active_opacity_: Optional[Number] = None
    realtime_: Optional[bool] = None
    smooth_: Optional[bool] = None
    progressive_: Optional[int] = None
    data_: DataFrame = []
