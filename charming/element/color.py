from typing import List, Literal, Union

from pydantic import Field

from ..base import EChartsModel


class ColorStop(EChartsModel):
    offset_: float = Field(alias="offset")
    color_: str = Field(alias="color")


class LinearGradient(EChartsModel):
    """Gradient along the (x, y) -> (x2, y2) vector, in bounding-box fractions."""

    type_: Literal["linear"] = Field("linear", alias="type", frozen=True)
    x_: float = 0.0
    y_: float = 0.0
    x2_: float = 0.0
    y2_: float = 1.0
    color_stops_: List[ColorStop] = []
    global_coord_: bool = Field(False, alias="global")


class RadialGradient(EChartsModel):
    type_: Literal["radial"] = Field("radial", alias="type", frozen=True)
    x_: float = 0.5
    y_: float = 0.5
    r_: float = 0.5
    color_stops_: List[ColorStop] = []
    global_coord_: bool = Field(False, alias="global")


# Any CSS color string ("#5470c6", "rgba(0,0,0,0.3)") or a gradient.
Color = Union[str, LinearGradient, RadialGradient]
