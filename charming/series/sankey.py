from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..element import Emphasis, ItemStyle, Label, LineStyle, Number, Orient, Position, Tooltip
from .types import SeriesBase


class SankeyNode(EChartsModel):
    name_: str
    value_: Optional[Number] = None
    depth_: Optional[int] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None


class SankeyLink(EChartsModel):
    source_: Union[int, str]
    target_: Union[int, str]
    value_: Optional[Number] = None
    line_style_: Optional[LineStyle] = None


class SankeyLevel(EChartsModel):
    depth_: int
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    label_: Optional[Label] = None


class Sankey(SeriesBase):
    """Flow diagram. Nodes go in ``data``; ``links`` join them by name or index."""

    type_: Literal["sankey"] = Field("sankey", alias="type", frozen=True)
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    node_width_: Optional[Number] = None
    node_gap_: Optional[Number] = None
    node_align_: Optional[str] = None
    layout_iterations_: Optional[int] = None
    orient_: Optional[Orient] = None
    draggable_: Optional[bool] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    levels_: List[SankeyLevel] = []
    data_: List[SankeyNode] = []
    links_: List[SankeyLink] = []
