from .axis_pointer import AxisPointer, AxisPointerType
from .color import Color, ColorStop, LinearGradient, RadialGradient
from .encode import Dimension, DimensionEncode
from .mark import MarkArea, MarkAreaData, MarkDataType, MarkLine, MarkLineData, MarkPoint, MarkPointData
from .raw_string import AnimationTime, Formatter, RawString, SymbolSize, process_raw_strings
from .shape import BorderRadius, FloatTuple, Padding
from .style import AreaStyle, Emphasis, ItemStyle, Label, LabelLine, LineStyle, TextStyle
from .tooltip import Tooltip
from .types import (
    AxisType,
    ColorBy,
    CoordinateSystem,
    Easing,
    EmphasisFocus,
    LineStyleType,
    NameLocation,
    Number,
    Orient,
    Position,
    Radius,
    Sampling,
    Smoothness,
    Step,
    StepType,
    Symbol,
    SymbolType,
    Trigger,
)

__all__ = [
    "AnimationTime",
    "AreaStyle",
    "AxisPointer",
    "AxisPointerType",
    "AxisType",
    "BorderRadius",
    "Color",
    "ColorBy",
    "ColorStop",
    "CoordinateSystem",
    "Dimension",
    "DimensionEncode",
    "Easing",
    "Emphasis",
    "EmphasisFocus",
    "FloatTuple",
    "Formatter",
    "ItemStyle",
    "Label",
    "LabelLine",
    "LineStyle",
    "LineStyleType",
    "LinearGradient",
    "MarkArea",
    "MarkAreaData",
    "MarkDataType",
    "MarkLine",
    "MarkLineData",
    "MarkPoint",
    "MarkPointData",
    "NameLocation",
    "Number",
    "Orient",
    "Padding",
    "Position",
    "RadialGradient",
    "Radius",
    "RawString",
    "Sampling",
    "Smoothness",
    "Step",
    "StepType",
    "Symbol",
    "SymbolSize",
    "SymbolType",
    "TextStyle",
    "Tooltip",
    "Trigger",
    "process_raw_strings",
]
