from typing import Dict, Type, Union, get_args

from .bar import Bar
from .bar3d import Bar3d
from .boxplot import Boxplot
from .candlestick import Candlestick
from .custom import Custom
from .effect_scatter import EffectScatter
from .funnel import Funnel
from .gauge import Gauge
from .graph import Graph
from .heatmap import Heatmap
from .line import Line
from .map import Map
from .parallel import Parallel
from .pictorial_bar import PictorialBar
from .pie import Pie
from .radar import Radar
from .sankey import Sankey
from .scatter import Scatter
from .sunburst import Sunburst
from .theme_river import ThemeRiver
from .tree import Tree
from .treemap import Treemap
from .types import SeriesBase, SeriesType

Series = Union[
    Bar,
    Bar3d,
    Boxplot,
    Candlestick,
    Custom,
    EffectScatter,
    Funnel,
    Gauge,
    Graph,
    Heatmap,
    Line,
    Map,
    Parallel,
    PictorialBar,
    Pie,
    Radar,
    Sankey,
    Scatter,
    Sunburst,
    ThemeRiver,
    Tree,
    Treemap,
]

# Discriminant -> record class. SeriesType() fails at import if a variant's
# literal is missing from the enum.
SERIES_VARIANTS: Dict[str, Type[SeriesBase]] = {
    SeriesType(cls.model_fields["type_"].default).value: cls for cls in get_args(Series)
}
