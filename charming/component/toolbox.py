from enum import Enum
from typing import List, Optional

from ..base import EChartsModel
from ..element.types import Number, Orient, Position


class SaveAsImageType(str, Enum):
    PNG = "png"
    JPG = "jpg"
    SVG = "svg"


class SaveAsImage(EChartsModel):
    show_: Optional[bool] = None
    type_: Optional[SaveAsImageType] = None
    name_: Optional[str] = None
    title_: Optional[str] = None
    pixel_ratio_: Optional[Number] = None


class Restore(EChartsModel):
    show_: Optional[bool] = None
    title_: Optional[str] = None


class DataView(EChartsModel):
    show_: Optional[bool] = None
    title_: Optional[str] = None
    read_only_: Optional[bool] = None


class ToolboxDataZoom(EChartsModel):
    show_: Optional[bool] = None
    y_axis_index_: Optional[str] = None


class MagicTypeType(str, Enum):
    LINE = "line"
    BAR = "bar"
    STACK = "stack"


class MagicType(EChartsModel):
    show_: Optional[bool] = None
    type_: List[MagicTypeType] = []


class ToolboxFeature(EChartsModel):
    save_as_image_: Optional[SaveAsImage] = None
    restore_: Optional[Restore] = None
    data_view_: Optional[DataView] = None
    data_zoom_: Optional[ToolboxDataZoom] = None
    magic_type_: Optional[MagicType] = None


class Toolbox(EChartsModel):
    id_: Optional[str] = None
    show_: Optional[bool] = None
    orient_: Optional[Orient] = None
    item_size_: Optional[Number] = None
    item_gap_: Optional[Number] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    feature_: Optional[ToolboxFeature] = None

    def save_as_image_type(self) -> Optional[SaveAsImageType]:
        if self.feature_ is None or self.feature_.save_as_image_ is None:
            return None
        return self.feature_.save_as_image_.type_
