import pytest
from pydantic import ValidationError

from charming.datatype import DataPointItem, df
from charming.series import Line, Pie, decode_series, encode_series


def test_points_keep_order_and_shape():
    line = Line().data([5, "x", [1, 2], [3, [4, 5]]])
    assert line.get_data() == [5, "x", [1, 2], [3, [4, 5]]]


def test_number_name_pair_becomes_named_item():
    pie = Pie().data([(1048, "Search Engine")])
    (item,) = pie.get_data()
    assert isinstance(item, DataPointItem)
    assert (item.value_, item.name_) == (1048, "Search Engine")


def test_list_pair_stays_a_value():
    assert Line().data([[1048, "Search Engine"]]).get_data() == [[1048, "Search Engine"]]


def test_structured_point_from_wire():
    line = Line.model_validate({"data": [{"value": [1, 2], "name": "peak", "symbolSize": 12}]})
    (item,) = line.get_data()
    assert item == DataPointItem(value=[1, 2], name="peak", symbolSize=12)


def test_df_collects_points():
    assert df([0, 1], [2, 3]) == [[0, 1], [2, 3]]
    assert Line().data(df([0, 1], [2, 3])).get_data() == [[0, 1], [2, 3]]


def test_invalid_point_is_rejected():
    with pytest.raises(ValidationError):
        Line().data([None])


def test_empty_value_survives_a_round_trip():
    pie = Pie().data([DataPointItem(value=[], name="x")])
    wire = encode_series(pie)
    assert wire["data"] == [{"value": [], "name": "x"}]
    assert decode_series(wire) == pie
