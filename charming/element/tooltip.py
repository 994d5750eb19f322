from typing import List, Optional, Union

from ..base import EChartsModel
from .axis_pointer import AxisPointer
from .color import Color
from .raw_string import Formatter
from .shape import Padding
from .style import TextStyle
from .types import Number, Position, Trigger


class Tooltip(EChartsModel):
    show_: Optional[bool] = None
    trigger_: Optional[Trigger] = None
    trigger_on_: Optional[str] = None
    show_content_: Optional[bool] = None
    always_show_content_: Optional[bool] = None
    axis_pointer_: Optional[AxisPointer] = None
    position_: Optional[Union[Formatter, List[Position]]] = None
    formatter_: Optional[Formatter] = None
    value_formatter_: Optional[Formatter] = None
    background_color_: Optional[Color] = None
    border_color_: Optional[Color] = None
    border_width_: Optional[Number] = None
    padding_: Optional[Padding] = None
    text_style_: Optional[TextStyle] = None
    confine_: Optional[bool] = None
    extra_css_text_: Optional[str] = None
