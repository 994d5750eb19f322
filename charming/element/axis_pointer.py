from enum import Enum
from typing import Optional

from ..base import EChartsModel
from .style import Label, LineStyle


class AxisPointerType(str, Enum):
    LINE = "line"
    SHADOW = "shadow"
    CROSS = "cross"
    NONE = "none"


class AxisPointer(EChartsModel):
    id_: Optional[str] = None
    show_: Optional[bool] = None
    type_: Optional[AxisPointerType] = None
    snap_: Optional[bool] = None
    z_: Optional[int] = None
    label_: Optional[Label] = None
    line_style_: Optional[LineStyle] = None
    trigger_tooltip_: Optional[bool] = None
