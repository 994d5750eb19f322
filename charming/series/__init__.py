from .bar import BackgroundStyle, Bar
from .bar3d import Bar3d
from .boxplot import Boxplot
from .candlestick import Candlestick
from .codec import decode_series, encode_series
from .controller import SeriesController
from .custom import Custom
from .effect_scatter import BrushType, EffectScatter, RippleEffect
from .funnel import Funnel, FunnelSort
from .gauge import Gauge, GaugeAnchor, GaugeDetail, GaugePointer, GaugeProgress, GaugeTitle
from .graph import Graph, GraphCategory, GraphForce, GraphLayout, GraphLink, GraphNode
from .heatmap import Heatmap
from .line import Line, LineController
from .map import Map
from .parallel import Parallel
from .pictorial_bar import PictorialBar
from .pie import Pie, RoseType
from .radar import Radar
from .sankey import Sankey, SankeyLevel, SankeyLink, SankeyNode
from .scatter import Scatter, ScatterController
from .sunburst import Sunburst, SunburstLevel, SunburstNode
from .theme_river import ThemeRiver
from .tree import Tree, TreeEdgeShape, TreeLayout, TreeLeaves, TreeNode
from .treemap import Treemap, TreemapBreadcrumb, TreemapLevel, TreemapNode
from .types import SeriesBase, SeriesType
from .union import SERIES_VARIANTS, Series

__all__ = [
    "SERIES_VARIANTS",
    "BackgroundStyle",
    "Bar",
    "Bar3d",
    "Boxplot",
    "BrushType",
    "Candlestick",
    "Custom",
    "EffectScatter",
    "Funnel",
    "FunnelSort",
    "Gauge",
    "GaugeAnchor",
    "GaugeDetail",
    "GaugePointer",
    "GaugeProgress",
    "GaugeTitle",
    "Graph",
    "GraphCategory",
    "GraphForce",
    "GraphLayout",
    "GraphLink",
    "GraphNode",
    "Heatmap",
    "Line",
    "LineController",
    "Map",
    "Parallel",
    "PictorialBar",
    "Pie",
    "Radar",
    "RippleEffect",
    "RoseType",
    "Sankey",
    "SankeyLevel",
    "SankeyLink",
    "SankeyNode",
    "Scatter",
    "ScatterController",
    "Series",
    "SeriesBase",
    "SeriesController",
    "SeriesType",
    "Sunburst",
    "SunburstLevel",
    "SunburstNode",
    "ThemeRiver",
    "Tree",
    "TreeEdgeShape",
    "TreeLayout",
    "TreeLeaves",
    "TreeNode",
    "Treemap",
    "TreemapBreadcrumb",
    "TreemapLevel",
    "TreemapNode",
    "decode_series",
    "encode_series",
]
