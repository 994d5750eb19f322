from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..datatype import CompositeValue
from ..element import Emphasis, ItemStyle, Label, LineStyle, Position, Symbol, SymbolSize, Tooltip
from .types import SeriesBase


class TreeLayout(str, Enum):
    ORTHOGONAL = "orthogonal"
    RADIAL = "radial"


class TreeEdgeShape(str, Enum):
    CURVE = "curve"
    POLYLINE = "polyline"


class TreeLeaves(EChartsModel):
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None


class TreeNode(EChartsModel):
    name_: Optional[str] = None
    value_: Optional[CompositeValue] = None
    collapsed_: Optional[bool] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None
    children_: List["TreeNode"] = []


class Tree(SeriesBase):
    type_: Literal["tree"] = Field("tree", alias="type", frozen=True)
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    layout_: Optional[TreeLayout] = None
    # LR, RL, TB or BT
    orient_: Optional[str] = None
    edge_shape_: Optional[TreeEdgeShape] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    roam_: Optional[Union[bool, str]] = None
    initial_tree_depth_: Optional[int] = None
    expand_and_collapse_: Optional[bool] = None
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    label_: Optional[Label] = None
    leaves_: Optional[TreeLeaves] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    data_: List[TreeNode] = []
