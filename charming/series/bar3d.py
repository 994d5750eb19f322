from typing import Literal, Optional

from pydantic import Field

from ..datatype import DataFrame
from ..element import CoordinateSystem, Emphasis, ItemStyle, Label, Number
from .types import SeriesBase


class Bar3d(SeriesBase):
    type_: Literal["bar3D"] = Field("bar3D", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    grid3d_index_: Optional[float] = Field(None, alias="grid3DIndex")
    shading_: Optional[str] = None
    bar_size_: Optional[Number] = None
    bevel_size_: Optional[float] = None
    stack_: Optional[str] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    data_: DataFrame = []
