from typing import List, Optional, Union

from ..base import EChartsModel

Dimension = Union[int, str]


class DimensionEncode(EChartsModel):
    """Maps dataset dimensions (by index or name) onto the series' visual channels."""

    x_: Optional[Union[Dimension, List[Dimension]]] = None
    y_: Optional[Union[Dimension, List[Dimension]]] = None
    z_: Optional[Union[Dimension, List[Dimension]]] = None
    radius_: Optional[Union[Dimension, List[Dimension]]] = None
    angle_: Optional[Union[Dimension, List[Dimension]]] = None
    item_name_: Optional[Dimension] = None
    item_id_: Optional[Dimension] = None
    value_: Optional[Union[Dimension, List[Dimension]]] = None
    tooltip_: Optional[Union[Dimension, List[Dimension]]] = None
    series_name_: Optional[Union[Dimension, List[Dimension]]] = None
