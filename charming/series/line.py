from typing import Literal, Optional

from pydantic import Field

from ..controller import Controller
from ..datatype import DataFrame
from ..element import (
    AreaStyle,
    CoordinateSystem,
    DimensionEncode,
    Emphasis,
    ItemStyle,
    Label,
    LineStyle,
    MarkArea,
    MarkLine,
    MarkPoint,
    Sampling,
    Smoothness,
    Step,
    Symbol,
    SymbolSize,
    Tooltip,
)
from .types import SeriesBase


class Line(SeriesBase):
    type_: Literal["line"] = Field("line", alias="type", frozen=True)
    coordinate_system_: Optional[CoordinateSystem] = None
    symbol_: Optional[Symbol] = None
    symbol_size_: Optional[SymbolSize] = None
    show_symbol_: Optional[bool] = None
    stack_: Optional[str] = None
    sampling_: Optional[Sampling] = None
    label_: Optional[Label] = None
    line_style_: Optional[LineStyle] = None
    area_style_: Optional[AreaStyle] = None
    item_style_: Optional[ItemStyle] = None
    emphasis_: Optional[Emphasis] = None
    smooth_: Optional[Smoothness] = None
    step_: Optional[Step] = None
    connect_nulls_: Optional[bool] = None
    mark_point_: Optional[MarkPoint] = None
    mark_line_: Optional[MarkLine] = None
    mark_area_: Optional[MarkArea] = None
    dataset_id_: Optional[str] = None
    encode_: Optional[DimensionEncode] = None
    x_axis_index_: Optional[float] = None
    y_axis_index_: Optional[float] = None
    tooltip_: Optional[Tooltip] = None
    silent_: Optional[bool] = None
    z_: Optional[int] = None
    data_: DataFrame = []

    def get_symbol(self) -> Optional[Symbol]:
        return self.symbol_

    def get_show_symbol(self) -> Optional[bool]:
        return self.show_symbol_

    def get_smoothness(self) -> Optional[Smoothness]:
        return self.smooth_

    def get_line_style(self) -> Optional[LineStyle]:
        return self.line_style_


class LineController(Controller[Line]):
    """Edits one ``Line`` already owned by a chart.

    Obtained from ``SeriesController.as_line_mut``; every method returns the
    controller so edits chain.
    """

    def with_name(self, name: str) -> "LineController":
        return self._set("name_", name)

    def with_area_style(self, style: AreaStyle) -> "LineController":
        return self._set("area_style_", style)

    def with_connect_nulls(self, connect: bool) -> "LineController":
        return self._set("connect_nulls_", connect)

    def with_coordinate_system(self, system: CoordinateSystem) -> "LineController":
        return self._set("coordinate_system_", system)

    def with_data(self, data: DataFrame) -> "LineController":
        return self._set("data_", data)

    def with_dataset_id(self, dataset_id: str) -> "LineController":
        return self._set("dataset_id_", dataset_id)

    def with_emphasis(self, emphasis: Emphasis) -> "LineController":
        return self._set("emphasis_", emphasis)

    def with_encode(self, encode: DimensionEncode) -> "LineController":
        return self._set("encode_", encode)

    def with_item_style(self, style: ItemStyle) -> "LineController":
        return self._set("item_style_", style)

    def with_label(self, label: Label) -> "LineController":
        return self._set("label_", label)

    def with_line_style(self, style: LineStyle) -> "LineController":
        return self._set("line_style_", style)

    def with_mark_area(self, area: MarkArea) -> "LineController":
        return self._set("mark_area_", area)

    def with_mark_line(self, line: MarkLine) -> "LineController":
        return self._set("mark_line_", line)

    def with_mark_point(self, point: MarkPoint) -> "LineController":
        return self._set("mark_point_", point)

    def with_sampling(self, sampling: Sampling) -> "LineController":
        return self._set("sampling_", sampling)

    def with_silent(self, silent: bool) -> "LineController":
        return self._set("silent_", silent)

    def with_smooth(self, smooth: Smoothness) -> "LineController":
        return self._set("smooth_", smooth)

    def with_stack(self, stack: str) -> "LineController":
        return self._set("stack_", stack)

    def with_step(self, step: Step) -> "LineController":
        return self._set("step_", step)

    def with_symbol(self, symbol: Symbol) -> "LineController":
        return self._set("symbol_", symbol)

    def with_show_symbol(self, show: bool) -> "LineController":
        return self._set("show_symbol_", show)

    def with_symbol_size(self, size: SymbolSize) -> "LineController":
        return self._set("symbol_size_", size)

    def with_tooltip(self, tooltip: Tooltip) -> "LineController":
        return self._set("tooltip_", tooltip)

    def with_x_axis_index(self, index: float) -> "LineController":
        return self._set("x_axis_index_", index)

    def with_y_axis_index(self, index: float) -> "LineController":
        return self._set("y_axis_index_", index)

    def with_z(self, z: int) -> "LineController":
        return self._set("z_", z)
