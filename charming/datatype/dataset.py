from typing import Annotated, Any, Dict, List, Optional, Union

from ..base import EChartsModel, OneOrMany, Repeated
from .data_point import CompositeValue


class DatasetDimension(EChartsModel):
    name_: Optional[str] = None
    type_: Optional[str] = None
    display_name_: Optional[str] = None


class Transform(EChartsModel):
    """A dataset transform such as ``filter`` or ``sort``."""

    type_: str
    config_: Optional[Dict[str, Any]] = None
    print_: Optional[bool] = None


class Dataset(EChartsModel):
    id_: Optional[str] = None
    dimensions_: List[Union[str, DatasetDimension]] = []
    source_: Optional[Union[List[List[CompositeValue]], List[Dict[str, CompositeValue]], Dict[str, List[CompositeValue]]]] = None
    source_header_: Optional[Union[bool, int]] = None
    from_dataset_index_: Optional[int] = None
    from_dataset_id_: Optional[str] = None
    from_transform_result_: Optional[int] = None
    transform_: Annotated[OneOrMany[Transform], Repeated()] = []
