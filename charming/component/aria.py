from typing import Optional

from ..base import EChartsModel


class AriaLabel(EChartsModel):
    enabled_: Optional[bool] = None
    description_: Optional[str] = None


class AriaDecal(EChartsModel):
    show_: Optional[bool] = None


class Aria(EChartsModel):
    """Accessibility options: generated descriptions and decal patterns."""

    enabled_: Optional[bool] = None
    label_: Optional[AriaLabel] = None
    decal_: Optional[AriaDecal] = None
