from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base import EChartsModel
from ..datatype import CompositeValue
from ..element import (
    CoordinateSystem,
    Emphasis,
    ItemStyle,
    Label,
    LineStyle,
    Number,
    Symbol,
    SymbolSize,
    Tooltip,
)
from .types import SeriesBase


class GraphLayout(str, Enum):
    NONE = "none"
    CIRCULAR = "circular"
    FORCE = "force"


class GraphForce(EChartsModel):
    init_layout_: Optional[str] = None
    repulsion_: Optional[Union[Number, List[Number]]] = None
    gravity_: Optional[Number] = None
    edge_length_: Optional[Union[Number, List[Number]]] = None
    layout_animation_: Optional[bool] = None
    friction_: Optional[Number] = None


class GraphCategory(EChartsModel):
    name_: Optional[str] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None


class GraphNode(EChartsModel):
    id_: Optional[str] = None
    name_: Optional[str] = None
    x_: Optional[Number] = None
    y_: Optional[Number] = None
    fixed_: Optional[bool] = None
    value_: Optional[CompositeValue] = None
    category_: Optional[Union[int, str]] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None


class GraphLink(EChartsModel):
    source_: Union[int, str]
    target_: Union[int, str]
    value_: Optional[Number] = None
    line_style_: Optional[LineStyle] = None
    label_: Optional[Label] = None


class Graph(SeriesBase):
    type_: Literal["graph"] = Field("graph", alias="type", frozen=True)
    legend_hover_link_: Optional[bool] = None
    coordinate_system_: Optional[CoordinateSystem] = None
    layout_: Optional[GraphLayout] = None
    force_: Optional[GraphForce] = None
    roam_: Optional[Union[bool, str]] = None
    draggable_: Optional[bool] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    edge_symbol_: Optional[List[str]] = None
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    label_: Optional[Label] = None
    emphasis_: Optional[Emphasis] = None
    tooltip_: Optional[Tooltip] = None
    categories_: List[GraphCategory] = []
    data_: List[GraphNode] = []
    links_: List[GraphLink] = []
