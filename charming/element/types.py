from enum import Enum
from typing import List, Union


class CoordinateSystem(str, Enum):
    CARTESIAN_2D = "cartesian2d"
    CARTESIAN_3D = "cartesian3D"
    POLAR = "polar"
    GEO = "geo"
    SINGLE_AXIS = "singleAxis"
    CALENDAR = "calendar"
    PARALLEL = "parallel"
    NONE = "none"


class Orient(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Sampling(str, Enum):
    LTTB = "lttb"
    AVERAGE = "average"
    MAX = "max"
    MIN = "min"
    MIN_MAX = "minmax"
    SUM = "sum"


class StepType(str, Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class SymbolType(str, Enum):
    EMPTY_CIRCLE = "emptyCircle"
    CIRCLE = "circle"
    RECT = "rect"
    ROUND_RECT = "roundRect"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    PIN = "pin"
    ARROW = "arrow"
    NONE = "none"


class AxisType(str, Enum):
    VALUE = "value"
    CATEGORY = "category"
    TIME = "time"
    LOG = "log"


class NameLocation(str, Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class Trigger(str, Enum):
    ITEM = "item"
    AXIS = "axis"
    NONE = "none"


class ColorBy(str, Enum):
    SERIES = "series"
    DATA = "data"


class LineStyleType(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class Easing(str, Enum):
    LINEAR = "linear"
    QUADRATIC_IN = "quadraticIn"
    QUADRATIC_OUT = "quadraticOut"
    QUADRATIC_IN_OUT = "quadraticInOut"
    CUBIC_IN = "cubicIn"
    CUBIC_OUT = "cubicOut"
    CUBIC_IN_OUT = "cubicInOut"
    SINUSOIDAL_IN_OUT = "sinusoidalInOut"
    EXPONENTIAL_OUT = "exponentialOut"
    ELASTIC_OUT = "elasticOut"
    BACK_OUT = "backOut"
    BOUNCE_OUT = "bounceOut"


class EmphasisFocus(str, Enum):
    NONE = "none"
    SELF = "self"
    SERIES = "series"


Number = Union[int, float]

# "10%", "center", or a pixel count.
Position = Union[int, float, str]

# true/false, or a smoothing factor between 0 and 1.
Smoothness = Union[bool, float]

Step = Union[bool, StepType]

# Built-in symbol name, or a custom "image://" / "path://" reference.
Symbol = Union[SymbolType, str]

# Scalar or [inner, outer] style pair ("50%", ["40%", "70%"]).
Radius = Union[Position, List[Position]]
