from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from ..base import EChartsModel
from ..datatype import DataFrame
from ..element import (
    Color,
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    Label,
    Number,
    Symbol,
    SymbolSize,
    Tooltip,
)
from .types import SeriesBase


class BrushType(str, Enum):
    STROKE = "stroke"
    FILL = "fill"


class RippleEffect(EChartsModel):
    color_: Optional[Color] = None
    number_: Optional[int] = None
    period_: Optional[Number] = None
    scale_: Optional[Number] = None
    brush_type_: Optional[BrushType] = None


class EffectScatter(SeriesBase):
    type_: Literal["effectScatter"] = Field("effectScatter", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    show_effect_on_: Optional[str] = None
    ripple_effect_: Optional[RippleEffect] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    encode_: Optional[DimensionEncode] = None
    tooltip_: Optional[Tooltip] = None
    z_: Optional[int] = None
    data_: DataFrame = []
