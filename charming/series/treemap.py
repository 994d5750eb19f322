from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..element import Color, Emphasis, ItemStyle, Label, Number, Position, Tooltip
from .types import SeriesBase


class TreemapNode(EChartsModel):
    name_: Optional[str] = None
    value_: Optional[Union[Number, List[Number]]] = None
    id_: Optional[str] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None
    children_: List["TreemapNode"] = []


class TreemapLevel(EChartsModel):
    visual_dimension_: Optional[int] = None
    color_: List[Color] = []
    color_saturation_: Optional[List[float]] = None
    item_style_: Optional[ItemStyle] = None
    upper_label_: Optional[Label] = None


class TreemapBreadcrumb(EChartsModel):
    show_: Optional[bool] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    height_: Optional[Number] = None
    item_style_: Optional[ItemStyle] = None


class Treemap(SeriesBase):
    type_: Literal["treemap"] = Field("treemap", alias="type", frozen=True)
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    square_ratio_: Optional[float] = None
    leaf_depth_: Optional[int] = None
    drill_down_icon_: Optional[str] = None
    roam_: Optional[Union[bool, str]] = None
    node_click_: Optional[Union[bool, str]] = None
    zoom_to_node_ratio_: Optional[float] = None
    visible_min_: Optional[Number] = None
    label_: Optional[Label] = None
    upper_label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    breadcrumb_: Optional[TreemapBreadcrumb] = None
    tooltip_: Optional[Tooltip] = None
    levels_: List[TreemapLevel] = []
    data_: List[TreemapNode] = []
