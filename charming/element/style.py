from typing import List, Optional, Union

from ..base import EChartsModel
from .color import Color
from .raw_string import Formatter
from .shape import BorderRadius, Padding
from .types import EmphasisFocus, LineStyleType, Number, Position


class TextStyle(EChartsModel):
    color_: Optional[Color] = None
    font_style_: Optional[str] = None
    font_weight_: Optional[Union[str, int]] = None
    font_family_: Optional[str] = None
    font_size_: Optional[Number] = None
    align_: Optional[str] = None
    vertical_align_: Optional[str] = None
    line_height_: Optional[Number] = None
    width_: Optional[Number] = None
    height_: Optional[Number] = None
    text_border_color_: Optional[Color] = None
    text_border_width_: Optional[Number] = None
    overflow_: Optional[str] = None
    padding_: Optional[Padding] = None


class LineStyle(EChartsModel):
    color_: Optional[Color] = None
    width_: Optional[Number] = None
    type_: Optional[Union[LineStyleType, List[Number]]] = None
    cap_: Optional[str] = None
    join_: Optional[str] = None
    opacity_: Optional[float] = None
    curveness_: Optional[float] = None
    shadow_blur_: Optional[Number] = None
    shadow_color_: Optional[Color] = None
    shadow_offset_x_: Optional[Number] = None
    shadow_offset_y_: Optional[Number] = None


class AreaStyle(EChartsModel):
    color_: Optional[Color] = None
    origin_: Optional[Union[str, Number]] = None
    opacity_: Optional[float] = None
    shadow_blur_: Optional[Number] = None
    shadow_color_: Optional[Color] = None


class ItemStyle(EChartsModel):
    color_: Optional[Color] = None
    color0_: Optional[Color] = None
    border_color_: Optional[Color] = None
    border_color0_: Optional[Color] = None
    border_width_: Optional[Number] = None
    border_type_: Optional[LineStyleType] = None
    border_radius_: Optional[BorderRadius] = None
    opacity_: Optional[float] = None
    shadow_blur_: Optional[Number] = None
    shadow_color_: Optional[Color] = None
    shadow_offset_x_: Optional[Number] = None
    shadow_offset_y_: Optional[Number] = None


class Label(EChartsModel):
    show_: Optional[bool] = None
    position_: Optional[Union[str, List[Position]]] = None
    distance_: Optional[Number] = None
    rotate_: Optional[Number] = None
    offset_: Optional[List[Number]] = None
    formatter_: Optional[Formatter] = None
    color_: Optional[Color] = None
    font_style_: Optional[str] = None
    font_weight_: Optional[Union[str, int]] = None
    font_family_: Optional[str] = None
    font_size_: Optional[Number] = None
    align_: Optional[str] = None
    vertical_align_: Optional[str] = None
    line_height_: Optional[Number] = None
    background_color_: Optional[Color] = None
    border_color_: Optional[Color] = None
    border_width_: Optional[Number] = None
    border_radius_: Optional[BorderRadius] = None
    padding_: Optional[Padding] = None


class LabelLine(EChartsModel):
    show_: Optional[bool] = None
    show_above_: Optional[bool] = None
    length_: Optional[Number] = None
    length2_: Optional[Number] = None
    smooth_: Optional[Union[bool, float]] = None
    line_style_: Optional[LineStyle] = None


class Emphasis(EChartsModel):
    disabled_: Optional[bool] = None
    focus_: Optional[EmphasisFocus] = None
    blur_scope_: Optional[str] = None
    scale_: Optional[Union[bool, Number]] = None
    label_: Optional[Label] = None
    item_style_: Optional[ItemStyle] = None
    line_style_: Optional[LineStyle] = None
    area_style_: Optional[AreaStyle] = None
