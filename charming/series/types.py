from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..controller import Controller, MutableModel


class SeriesType(str, Enum):
    BAR = "bar"
    BAR3D = "bar3D"
    BOXPLOT = "boxplot"
    CANDLESTICK = "candlestick"
    CUSTOM = "custom"
    EFFECT_SCATTER = "effectScatter"
    FUNNEL = "funnel"
    GAUGE = "gauge"
    GRAPH = "graph"
    HEATMAP = "heatmap"
    LINE = "line"
    MAP = "map"
    PARALLEL = "parallel"
    PICTORIAL_BAR = "pictorialBar"
    PIE = "pie"
    RADAR = "radar"
    SANKEY = "sankey"
    SCATTER = "scatter"
    SUNBURST = "sunburst"
    THEME_RIVER = "themeRiver"
    TREE = "tree"
    TREEMAP = "treemap"


class SeriesBase(MutableModel):
    """Fields and accessors shared by every series variant.

    ``type_`` is the discriminant. Each variant narrows it to its own literal
    with a default, and it is frozen so it never gets a setter.
    """

    type_: str = Field(alias="type", frozen=True)
    id_: Optional[str] = None
    name_: Optional[str] = None

    def get_id(self) -> Optional[str]:
        return self.id_

    def get_name(self) -> Optional[str]:
        return self.name_

    def get_data(self) -> Optional[List[Any]]:
        """Plotted data, or ``None`` when the variant has no ``data`` field."""
        return getattr(self, "data_", None)

    def _open_controller(self) -> Controller[Any]:
        from .controller import SeriesController

        return SeriesController(self)
