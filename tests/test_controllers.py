import pytest

from charming import Chart
from charming.component import Axis
from charming.element import LineStyle, Sampling
from charming.errors import BorrowError, ControllerClosedError, WrongVariantError
from charming.series import Line, LineController, Scatter, SeriesController


@pytest.fixture
def chart():
    return Chart().series(Line().id("temp").name("before").data([[0, 1]])).series(Scatter().id("dots"))


def test_edit_line_through_chart(chart):
    with chart.mutable() as controller:
        line = controller.series_mut_by_id("temp").as_line_mut()
        line.with_name("after").with_smooth(True).with_sampling(Sampling.LTTB).with_line_style(LineStyle().width(2))

    series = chart.get_series("temp")
    assert series.get_name() == "after"
    assert series.get_smoothness() is True
    assert series.get_line_style() == LineStyle().width(2)
    assert series.sampling_ == Sampling.LTTB


def test_scatter_controller_on_line_fails(chart):
    with chart.mutable() as controller:
        series = controller.series_mut_by_index(0)
        with pytest.raises(WrongVariantError) as excinfo:
            series.as_scatter_mut()
    assert "Expected Scatter" in str(excinfo.value)
    assert excinfo.value.actual == "Line"


def test_line_controller_on_scatter_fails(chart):
    with chart.mutable() as controller:
        with pytest.raises(WrongVariantError, match="Expected Line"):
            controller.series_mut_by_id("dots").as_line_mut()


def test_scatter_controller_edits(chart):
    def edit(controller):
        controller.series_mut_by_id("dots").as_scatter_mut().with_marker_size(12).with_name("points").with_data([[5, 6]])

    assert chart.with_mutable(edit) is chart
    scatter = chart.get_series("dots")
    assert scatter.symbol_size_ == 12
    assert scatter.get_name() == "points"
    assert scatter.get_data() == [[5, 6]]


def test_series_lookup_misses(chart):
    with chart.mutable() as controller:
        assert controller.series_mut_by_id("missing") is None
        with pytest.raises(IndexError):
            controller.series_mut_by_index(2)
        with pytest.raises(IndexError):
            controller.series_mut_by_index(-1)


def test_chart_level_edits(chart):
    with chart.mutable() as controller:
        controller.with_x_axis(Axis().name("x")).with_y_axis([Axis(), Axis()])
        controller.with_series(Line().id("extra"))

    assert chart.to_dict()["xAxis"] == {"name": "x"}
    assert len(chart.y_axis_) == 2
    assert chart.get_all_ids() == ["temp", "dots", "extra"]

    with chart.mutable() as controller:
        controller.reset_x_axis().reset_y_axis().reset_series()

    assert chart.to_dict() == {}


def test_second_borrow_is_rejected(chart):
    with chart.mutable():
        with pytest.raises(BorrowError):
            with chart.mutable():
                pass

    # borrow ends with the block
    with chart.mutable():
        pass


def test_series_borrowed_through_chart_cannot_be_borrowed_directly(chart):
    line = chart.series_[0]
    with chart.mutable() as controller:
        controller.series_mut_by_index(0)
        with pytest.raises(BorrowError):
            with line.mutable():
                pass
    with line.mutable() as direct:
        assert isinstance(direct, SeriesController)


def test_same_index_returns_same_controller(chart):
    with chart.mutable() as controller:
        assert controller.series_mut_by_index(0) is controller.series_mut_by_id("temp")


def test_controllers_close_with_their_scope(chart):
    with chart.mutable() as controller:
        series = controller.series_mut_by_index(0)
        line = series.as_line_mut()
        assert isinstance(line, LineController)

    for handle in (controller, series, line):
        assert not handle.is_open
        with pytest.raises(ControllerClosedError):
            handle.target

    with pytest.raises(ControllerClosedError):
        line.with_name("too late")


def test_reset_series_closes_series_controllers(chart):
    with chart.mutable() as controller:
        series = controller.series_mut_by_index(0)
        controller.reset_series()
        assert not series.is_open
        assert chart.get_all_series() == ()


def test_direct_series_mutation():
    line = Line()
    with line.mutable() as controller:
        controller.as_line_mut().with_stack("total").with_z(3)
    assert line.stack_ == "total"
    assert line.z_ == 3


def test_read_views_are_detached_from_the_chart(chart):
    with chart.mutable():
        chart.get_all_series()[0].name("sneaky")
        chart.get_series("temp").name("sneaky")
    assert chart.series_[0].get_name() == "before"
    assert chart.get_series("temp") == chart.series_[0]


def test_fluent_setters_refuse_a_borrowed_record(chart):
    line = chart.series_[0]
    with chart.mutable() as controller:
        controller.series_mut_by_index(0)
        with pytest.raises(BorrowError):
            line.name("sneaky")
        with pytest.raises(BorrowError):
            chart.series(Line())
        with pytest.raises(BorrowError):
            chart.reset_series()
    assert line.get_name() == "before"
    assert len(chart.series_) == 2

    assert line.name("after").get_name() == "after"


def test_controller_writes_pass_the_borrow_guard(chart):
    with chart.mutable() as controller:
        controller.with_series([Line().id("a"), Line().id("b")])
        controller.series_mut_by_id("a").as_line_mut().with_name("first")
    assert chart.get_all_ids() == ["temp", "dots", "a", "b"]
    assert chart.get_series("a").get_name() == "first"
