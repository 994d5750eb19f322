from typing import List, Literal, Optional, Union

from pydantic import Field

from ..datatype import DataFrame
from ..element import Emphasis, ItemStyle, Label, Number, Position, Tooltip
from .types import SeriesBase


class Map(SeriesBase):
    """Choropleth over a registered map (see ``GeoMap``)."""

    type_: Literal["map"] = Field("map", alias="type", frozen=True)
    map_: Optional[str] = None
    roam_: Optional[Union[bool, str]] = None
    center_: Optional[List[Number]] = None
    zoom_: Optional[Number] = None
    aspect_scale_: Optional[Number] = None
    name_property_: Optional[str] = None
    selected_mode_: Optional[Union[bool, str]] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    geo_index_: Optional[float] = None
    map_value_calculation_: Optional[str] = None
    show_legend_symbol_: Optional[bool] = None
    tooltip_: Optional[Tooltip] = None
    data_: DataFrame = []
