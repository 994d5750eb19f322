from typing import Optional

from pydantic import Field

from ..base import EChartsModel
from ..element.color import Color
from ..element.tooltip import Tooltip
from ..element.types import Number, Position


class Grid(EChartsModel):
    """Drawing area of a cartesian coordinate system."""

    id_: Optional[str] = None
    show_: Optional[bool] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    contain_label_: Optional[bool] = None
    background_color_: Optional[Color] = None
    border_color_: Optional[Color] = None
    border_width_: Optional[Number] = None
    tooltip_: Optional[Tooltip] = None


class Grid3D(EChartsModel):
    show_: Optional[bool] = None
    box_width_: Optional[Number] = None
    box_height_: Optional[Number] = None
    box_depth_: Optional[Number] = None
    environment_: Optional[Color] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    axis_pointer_show_: Optional[bool] = Field(None, alias="axisPointerShow")
