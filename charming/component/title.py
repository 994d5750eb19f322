from typing import Optional

from ..base import EChartsModel
from ..element.color import Color
from ..element.shape import Padding
from ..element.style import TextStyle
from ..element.types import Number, Position


class Title(EChartsModel):
    """Main title and subtitle. A chart may carry several titles."""

    id_: Optional[str] = None
    show_: Optional[bool] = None
    text_: Optional[str] = None
    link_: Optional[str] = None
    target_: Optional[str] = None
    text_style_: Optional[TextStyle] = None
    subtext_: Optional[str] = None
    sublink_: Optional[str] = None
    subtarget_: Optional[str] = None
    subtext_style_: Optional[TextStyle] = None
    text_align_: Optional[str] = None
    text_vertical_align_: Optional[str] = None
    padding_: Optional[Padding] = None
    item_gap_: Optional[Number] = None
    background_color_: Optional[Color] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
