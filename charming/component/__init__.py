from .aria import Aria, AriaDecal, AriaLabel
from .axis import Axis, Axis3D, AxisBound, AxisLabel, AxisLine, AxisTick, SplitArea, SplitLine
from .calendar import Calendar
from .data_zoom import DataZoom, DataZoomType, FilterMode
from .geo_map import GeoMap, GeoMapType
from .grid import Grid, Grid3D
from .legend import Legend, LegendConfig, LegendItem, LegendType
from .parallel import ParallelAxis, ParallelCoordinate
from .polar import AngleAxis, PolarCoordinate, RadiusAxis
from .radar import RadarCoordinate, RadarIndicator, RadarShape
from .single_axis import SingleAxis
from .title import Title
from .toolbox import (
    DataView,
    MagicType,
    MagicTypeType,
    Restore,
    SaveAsImage,
    SaveAsImageType,
    Toolbox,
    ToolboxDataZoom,
    ToolboxFeature,
)
from .visual_map import VisualMap, VisualMapChannel, VisualMapPiece, VisualMapType

__all__ = [
    "AngleAxis",
    "Aria",
    "AriaDecal",
    "AriaLabel",
    "Axis",
    "Axis3D",
    "AxisBound",
    "AxisLabel",
    "AxisLine",
    "AxisTick",
    "Calendar",
    "DataView",
    "DataZoom",
    "DataZoomType",
    "FilterMode",
    "GeoMap",
    "GeoMapType",
    "Grid",
    "Grid3D",
    "Legend",
    "LegendConfig",
    "LegendItem",
    "LegendType",
    "MagicType",
    "MagicTypeType",
    "ParallelAxis",
    "ParallelCoordinate",
    "PolarCoordinate",
    "RadarCoordinate",
    "RadarIndicator",
    "RadarShape",
    "RadiusAxis",
    "Restore",
    "SaveAsImage",
    "SaveAsImageType",
    "SingleAxis",
    "SplitArea",
    "SplitLine",
    "Title",
    "Toolbox",
    "ToolboxDataZoom",
    "ToolboxFeature",
    "VisualMap",
    "VisualMapChannel",
    "VisualMapPiece",
    "VisualMapType",
]
