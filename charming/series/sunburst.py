from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..element import Emphasis, ItemStyle, Label, Number, Position, Radius, Tooltip
from .types import SeriesBase


class SunburstNode(EChartsModel):
    name_: Optional[str] = None
    value_: Optional[Number] = None
    link_: Optional[str] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None
    children_: List["SunburstNode"] = []


class SunburstLevel(EChartsModel):
    radius_: Optional[Radius] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None


class Sunburst(SeriesBase):
    type_: Literal["sunburst"] = Field("sunburst", alias="type", frozen=True)
    center_: Optional[List[Position]] = None
    radius_: Optional[Radius] = None
    start_angle_: Optional[Number] = None
    min_angle_: Optional[Number] = None
    sort_: Optional[str] = None
    node_click_: Optional[Union[bool, str]] = None
    render_label_for_zero_data_: Optional[bool] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    levels_: List[SunburstLevel] = []
    data_: List[SunburstNode] = []
