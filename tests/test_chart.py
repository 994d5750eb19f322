import pytest

from charming import Chart
from charming.component import Axis, Axis3D, GeoMap, Grid3D, Legend, SaveAsImage, SaveAsImageType, Title, Toolbox, ToolboxFeature
from charming.element import AxisType, Padding, RawString, Tooltip, Trigger
from charming.errors import DecodeError, FieldDecodeError, InvalidShapeLengthError, UnknownVariantError
from charming.series import Line, Pie, Scatter


@pytest.fixture(autouse=True)
def default_indent(monkeypatch):
    monkeypatch.delenv("CHARMING_JSON_INDENT", raising=False)


def test_empty_chart_is_empty_object():
    chart = Chart()
    assert chart.to_dict() == {}
    assert chart.to_json() == "{}"
    assert str(chart) == "{}"


def test_unset_nested_options_are_omitted():
    chart = Chart().title(Title().text("Sales")).tooltip(Tooltip())
    assert chart.to_dict() == {"title": [{"text": "Sales"}], "tooltip": {}}


def test_single_x_axis_is_written_bare():
    chart = Chart().x_axis(Axis().type(AxisType.CATEGORY).data(["Mon", "Tue"]))
    assert chart.to_dict() == {"xAxis": {"type": "category", "data": ["Mon", "Tue"]}}

    decoded = Chart.from_json(chart.to_json())
    assert len(decoded.x_axis_) == 1
    assert decoded == chart


def test_two_x_axes_are_written_as_array():
    chart = Chart().x_axis(Axis().name("a")).x_axis(Axis().name("b"))
    assert chart.to_dict() == {"xAxis": [{"name": "a"}, {"name": "b"}]}

    decoded = Chart.from_json(chart.to_json())
    assert [axis.name_ for axis in decoded.x_axis_] == ["a", "b"]


def test_three_dimensional_keys():
    chart = Chart().grid3d(Grid3D().show(True)).x_axis3d(Axis3D().grid3d_index(0)).y_axis3d(Axis3D()).z_axis3d(Axis3D())
    encoded = chart.to_dict()
    assert encoded["grid3D"] == [{"show": True}]
    assert encoded["xAxis3D"] == [{"grid3DIndex": 0}]
    assert "yAxis3D" in encoded and "zAxis3D" in encoded
    assert Chart.from_dict(encoded) == chart


def test_line_data_survives_round_trip():
    chart = Chart().series(Line().data([[0, 1], [2, 3]]))
    decoded = Chart.from_json(chart.to_json())

    (series,) = decoded.get_all_series()
    assert isinstance(series, Line)
    assert series.get_data() == [[0, 1], [2, 3]]


def test_built_chart_round_trips():
    chart = (
        Chart()
        .title(Title().text("Weekly").padding([5, 10]))
        .tooltip(Tooltip().trigger(Trigger.AXIS).formatter(RawString("function (p) { return p[0].name; }")))
        .legend(Legend().data(["temperature", "share"]))
        .color(["#5470c6", "#91cc75"])
        .x_axis(Axis().type(AxisType.CATEGORY).data(["Mon", "Tue", "Wed"]))
        .y_axis(Axis().type(AxisType.VALUE))
        .series(Line().id("t").name("temperature").smooth(True).data([20, 22.5, 19]))
        .series(Scatter().id("s").data([[1, 2], [3, 4]]))
        .series(Pie().name("share").data([(40, "a"), (60, "b")]))
    )
    decoded = Chart.from_json(chart.to_json())
    assert decoded == chart
    assert decoded.to_dict() == chart.to_dict()
    assert decoded.title_[0].padding_ == Padding.double(5, 10)


def test_series_appends_and_resets():
    chart = Chart().series(Line().id("a")).series([Scatter().id("b"), Line()])
    assert chart.get_all_ids() == ["a", "b"]
    assert isinstance(chart.get_series("b"), Scatter)
    assert chart.get_series("missing") is None

    chart.reset_series()
    assert chart.get_all_series() == ()


def test_palette_appends():
    chart = Chart().color("#a").color(["#b", "#c"])
    assert chart.get_color() == ["#a", "#b", "#c"]
    assert chart.to_dict() == {"color": ["#a", "#b", "#c"]}


def test_raw_strings_are_unquoted_in_display():
    chart = Chart().tooltip(Tooltip().formatter(RawString('function (p) { return "<b>" + p.name; }')))

    text = str(chart)
    assert '"formatter": function (p) { return "<b>" + p.name; }' in text
    assert "--x_x--" not in text

    # to_json keeps the sentinel so the text is still valid JSON
    decoded = Chart.from_json(chart.to_json())
    assert isinstance(decoded.tooltip_.formatter_, RawString)


def test_display_indent_is_configurable(monkeypatch):
    chart = Chart().background_color("#fff")
    assert str(chart) == '{\n  "backgroundColor": "#fff"\n}'

    monkeypatch.setenv("CHARMING_JSON_INDENT", "none")
    assert str(chart) == '{"backgroundColor": "#fff"}'


def test_geo_maps_are_not_serialized():
    chart = Chart().geo_map(GeoMap.from_geo_json("world", {"type": "FeatureCollection", "features": []}))
    assert chart.to_dict() == {}
    assert chart.get_geo_maps()[0].map_name_ == "world"


def test_save_as_image_type():
    assert Chart().save_as_image_type() is None

    toolbox = Toolbox().feature(ToolboxFeature().save_as_image(SaveAsImage().type(SaveAsImageType.SVG)))
    assert Chart().toolbox(toolbox).save_as_image_type() == SaveAsImageType.SVG


def test_decode_reports_unknown_series_tag():
    with pytest.raises(UnknownVariantError) as excinfo:
        Chart.from_dict({"series": [{"type": "line"}, {"type": "not_a_real_type"}]})
    assert excinfo.value.tag == "not_a_real_type"


def test_decode_reports_series_field_error():
    with pytest.raises(FieldDecodeError) as excinfo:
        Chart.from_dict({"series": [{"type": "scatter", "symbolSize": "big"}]})
    assert excinfo.value.variant == "Scatter"


def test_decode_reports_padding_length():
    with pytest.raises(InvalidShapeLengthError):
        Chart.from_json('{"title": [{"padding": [1, 2, 3]}]}')


def test_decode_rejects_non_object_text():
    with pytest.raises(DecodeError):
        Chart.from_json("[]")
    with pytest.raises(DecodeError):
        Chart.from_json("{")
