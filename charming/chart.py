"""The root option document.

``Chart`` aggregates components and series and converts to the JSON option
object the renderer consumes::

    chart = (
        Chart()
        .title(Title().text("Sales"))
        .x_axis(Axis().type(AxisType.CATEGORY))
        .series(Line().data([[0, 1], [2, 3]]))
    )
    print(chart)

List fields append on each setter call and have a ``reset_<field>()``
counterpart. Unset options and empty lists never reach the output.
"""

import copy
import json
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Dict, List, Optional, Tuple, Union

from pydantic import Field, SerializeAsAny, ValidationError, field_validator

from . import config
from .base import OneOrMany, Repeated
from .component import (
    AngleAxis,
    Aria,
    Axis,
    Axis3D,
    Calendar,
    DataZoom,
    GeoMap,
    Grid,
    Grid3D,
    LegendConfig,
    ParallelAxis,
    ParallelCoordinate,
    PolarCoordinate,
    RadarCoordinate,
    RadiusAxis,
    SaveAsImageType,
    SingleAxis,
    Title,
    Toolbox,
    VisualMap,
)
from .controller import Controller, MutableModel
from .datatype import Dataset
from .element import AnimationTime, AxisPointer, Color, Easing, MarkLine, Tooltip, process_raw_strings
from .errors import DecodeError, unwrap_validation_error
from .series import SeriesBase, SeriesController, decode_series

logger = logging.getLogger(__name__)


class Chart(MutableModel):
    title_: Annotated[List[Title], Repeated()] = []
    tooltip_: Optional[Tooltip] = None
    legend_: Optional[LegendConfig] = None
    toolbox_: Optional[Toolbox] = None
    grid_: Annotated[List[Grid], Repeated()] = []
    grid3d_: Annotated[List[Grid3D], Repeated()] = Field([], alias="grid3D")
    x_axis_: Annotated[OneOrMany[Axis], Repeated()] = []
    y_axis_: Annotated[OneOrMany[Axis], Repeated()] = []
    x_axis3d_: Annotated[List[Axis3D], Repeated()] = Field([], alias="xAxis3D")
    y_axis3d_: Annotated[List[Axis3D], Repeated()] = Field([], alias="yAxis3D")
    z_axis3d_: Annotated[List[Axis3D], Repeated()] = Field([], alias="zAxis3D")
    polar_: Annotated[List[PolarCoordinate], Repeated()] = []
    angle_axis_: Annotated[List[AngleAxis], Repeated()] = []
    radius_axis_: Annotated[List[RadiusAxis], Repeated()] = []
    single_axis_: Optional[SingleAxis] = None
    parallel_axis_: Annotated[List[ParallelAxis], Repeated()] = []
    axis_pointer_: Annotated[List[AxisPointer], Repeated()] = []
    visual_map_: Annotated[List[VisualMap], Repeated()] = []
    data_zoom_: Annotated[List[DataZoom], Repeated()] = []
    parallel_: Optional[ParallelCoordinate] = None
    calendar_: Optional[Calendar] = None
    dataset_: Optional[Dataset] = None
    radar_: Annotated[List[RadarCoordinate], Repeated()] = []
    color_: Annotated[List[Color], Repeated()] = []
    background_color_: Optional[Color] = None
    mark_line_: Optional[MarkLine] = None
    aria_: Optional[Aria] = None
    animation_: Optional[bool] = None
    animation_threshold_: Optional[int] = None
    animation_duration_: Optional[AnimationTime] = None
    animation_easing_: Optional[Easing] = None
    animation_delay_: Optional[AnimationTime] = None
    animation_duration_update_: Optional[AnimationTime] = None
    animation_easing_update_: Optional[Easing] = None
    animation_delay_update_: Optional[AnimationTime] = None
    series_: Annotated[List[SerializeAsAny[SeriesBase]], Repeated()] = []
    # Registered with the renderer, not part of the option object.
    geo_map_: Annotated[List[GeoMap], Repeated()] = Field([], exclude=True)

    @field_validator("series_", mode="before")
    @classmethod
    def _decode_series(cls, value: Any) -> Any:
        items = value if isinstance(value, (list, tuple)) else [value]
        return [decode_series(item) if isinstance(item, Mapping) else item for item in items]

    def get_color(self) -> List[Color]:
        return copy.deepcopy(self.color_)

    def get_all_series(self) -> Tuple[SeriesBase, ...]:
        """Copies of the series; edits go through ``mutable()``."""
        return tuple(s._detached_copy() for s in self.series_)

    def get_series(self, series_id: str) -> Optional[SeriesBase]:
        """First series whose ``id`` equals ``series_id``."""
        found = next((s for s in self.series_ if s.get_id() == series_id), None)
        return found._detached_copy() if found is not None else None

    def get_all_ids(self) -> List[str]:
        return [s.id_ for s in self.series_ if s.id_ is not None]

    def get_geo_maps(self) -> List[GeoMap]:
        return copy.deepcopy(self.geo_map_)

    def save_as_image_type(self) -> Optional[SaveAsImageType]:
        if self.toolbox_ is None:
            return None
        return self.toolbox_.save_as_image_type()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Option object as JSON text. Raw strings stay sentinel-wrapped, so the text decodes again."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Chart":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            logger.debug("Chart decode failed: %s", exc)
            raise unwrap_validation_error(exc, cls.__name__) from exc

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Chart":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"chart is not valid JSON: {exc}") from exc
        if not isinstance(data, Mapping):
            raise DecodeError(f"chart must be a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)

    def _open_controller(self) -> "ChartController":
        return ChartController(self)

    def __str__(self) -> str:
        # Raw strings are unwrapped here, so the result is JavaScript, not JSON.
        return process_raw_strings(self.to_json(indent=config.get_json_indent()))


class ChartController(Controller[Chart]):
    """Mutation access to a chart already built, opened by ``Chart.mutable()``.

    Series controllers handed out by ``series_mut_by_index`` / ``series_mut_by_id``
    hold the borrow of their series and close with this controller.
    """

    def __init__(self, chart: Chart):
        super().__init__(chart)
        self._series_controllers: Dict[int, SeriesController] = {}

    def reset_x_axis(self) -> "ChartController":
        return self._set("x_axis_", [])

    def with_x_axis(self, axis: Union[Axis, List[Axis]]) -> "ChartController":
        return self._extend("x_axis_", axis)

    def reset_y_axis(self) -> "ChartController":
        return self._set("y_axis_", [])

    def with_y_axis(self, axis: Union[Axis, List[Axis]]) -> "ChartController":
        return self._extend("y_axis_", axis)

    def reset_series(self) -> "ChartController":
        self._close_children()
        self._series_controllers.clear()
        return self._set("series_", [])

    def with_series(self, series: Union[SeriesBase, List[SeriesBase]]) -> "ChartController":
        return self._extend("series_", series)

    def series_mut_by_index(self, index: int) -> SeriesController:
        series = self.target.series_
        if not 0 <= index < len(series):
            raise IndexError(f"series index {index} out of range for {len(series)} series")
        controller = self._series_controllers.get(index)
        if controller is None or not controller.is_open:
            controller = SeriesController(series[index], self)
            self._series_controllers[index] = controller
        return controller

    def series_mut_by_id(self, series_id: str) -> Optional[SeriesController]:
        for index, series in enumerate(self.target.series_):
            if series.get_id() == series_id:
                return self.series_mut_by_index(index)
        return None
