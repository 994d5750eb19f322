from enum import Enum
from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.color import Color
from ..element.raw_string import Formatter
from ..element.shape import Padding
from ..element.style import ItemStyle, TextStyle
from ..element.types import Number, Orient, Position, Symbol


class LegendType(str, Enum):
    PLAIN = "plain"
    SCROLL = "scroll"


class LegendItem(EChartsModel):
    name_: Optional[str] = None
    icon_: Optional[Symbol] = None
    item_style_: Optional[ItemStyle] = None
    text_style_: Optional[TextStyle] = None


class Legend(EChartsModel):
    type_: Optional[LegendType] = None
    id_: Optional[str] = None
    show_: Optional[bool] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    orient_: Optional[Orient] = None
    align_: Optional[str] = None
    padding_: Optional[Padding] = None
    item_gap_: Optional[Number] = None
    item_width_: Optional[Number] = None
    item_height_: Optional[Number] = None
    formatter_: Optional[Formatter] = None
    selected_mode_: Optional[Union[bool, str]] = None
    inactive_color_: Optional[Color] = None
    text_style_: Optional[TextStyle] = None
    icon_: Optional[Symbol] = None
    data_: List[Union[str, LegendItem]] = []


# A chart holds either one legend or several.
LegendConfig = Union[Legend, List[Legend]]
