"""Plotted values.

A series' ``data`` is an ordered ``DataFrame`` of points. A point is either a
bare value (a number, a category string, or an array such as ``[x, y]``) or a
structured ``DataPointItem`` carrying a name and per-point styling.
"""

from numbers import Real
from typing import Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator
from typing_extensions import TypeAliasType

from ..base import EChartsModel
from ..element.raw_string import SymbolSize
from ..element.style import Emphasis, ItemStyle, Label
from ..element.types import Symbol

CompositeValue = TypeAliasType("CompositeValue", Union[int, float, str, List["CompositeValue"]])


class DataPointItem(EChartsModel):
    value_: Optional[CompositeValue] = None
    name_: Optional[str] = None
    item_style_: Optional[ItemStyle] = None
    label_: Optional[Label] = None
    emphasis_: Optional[Emphasis] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None


def _named_value(value: Any) -> Any:
    # (40, "rose 1") is a named value, not a two-element array.
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], Real)
        and not isinstance(value[0], bool)
        and isinstance(value[1], str)
    ):
        return DataPointItem(value=value[0], name=value[1])
    return value


DataPoint = Annotated[Union[DataPointItem, CompositeValue], BeforeValidator(_named_value)]

DataFrame = List[DataPoint]


def df(*points: Any) -> List[Any]:
    """Collect points into a data frame: ``df([0, 1], [2, 3])``."""
    return list(points)
