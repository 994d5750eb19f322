from typing import List, Optional, Union

from ..base import EChartsModel
from ..element.style import ItemStyle, Label
from ..element.types import Number, Orient, Position
from .axis import SplitLine


class Calendar(EChartsModel):
    id_: Optional[str] = None
    z_: Optional[int] = None
    left_: Optional[Position] = None
    top_: Optional[Position] = None
    right_: Optional[Position] = None
    bottom_: Optional[Position] = None
    width_: Optional[Position] = None
    height_: Optional[Position] = None
    # "2024", "2024-02", or ["2024-01-01", "2024-06-30"].
    range_: Optional[Union[Number, str, List[Union[Number, str]]]] = None
    cell_size_: Optional[Union[Number, str, List[Union[Number, str]]]] = None
    orient_: Optional[Orient] = None
    split_line_: Optional[SplitLine] = None
    item_style_: Optional[ItemStyle] = None
    day_label_: Optional[Label] = None
    month_label_: Optional[Label] = None
    year_label_: Optional[Label] = None
