from .data_point import CompositeValue, DataFrame, DataPoint, DataPointItem, df
from .dataset import Dataset, DatasetDimension, Transform

__all__ = [
    "CompositeValue",
    "DataFrame",
    "DataPoint",
    "DataPointItem",
    "Dataset",
    "DatasetDimension",
    "Transform",
    "df",
]
