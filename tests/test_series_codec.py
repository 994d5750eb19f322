import json

import pytest
from pydantic import ValidationError

from charming.element import ItemStyle, Label, RawString, SymbolType
from charming.errors import (
    DecodeError,
    FieldDecodeError,
    InvalidShapeLengthError,
    MissingDiscriminantError,
    UnknownVariantError,
)
from charming.series import (
    SERIES_VARIANTS,
    Graph,
    GraphLink,
    GraphNode,
    Line,
    Pie,
    Sankey,
    SankeyLink,
    SankeyNode,
    Scatter,
    SeriesType,
    Tree,
    TreeNode,
    decode_series,
    encode_series,
)


def test_every_tag_has_a_variant():
    assert set(SERIES_VARIANTS) == {t.value for t in SeriesType}
    assert len(SERIES_VARIANTS) == 22


def test_unknown_tag_names_the_tag():
    with pytest.raises(UnknownVariantError) as excinfo:
        decode_series({"type": "not_a_real_type"})
    assert excinfo.value.tag == "not_a_real_type"
    assert "not_a_real_type" in str(excinfo.value)
    assert "line" in excinfo.value.known


def test_tag_match_is_case_sensitive():
    with pytest.raises(UnknownVariantError):
        decode_series({"type": "Line"})


@pytest.mark.parametrize("value", [{}, {"name": "a"}, {"type": None}, {"type": 3}])
def test_missing_tag(value):
    with pytest.raises(MissingDiscriminantError):
        decode_series(value)


def test_non_object_input():
    with pytest.raises(DecodeError):
        decode_series("[1, 2]")
    with pytest.raises(DecodeError):
        decode_series("{not json")


def test_field_error_names_the_variant():
    with pytest.raises(FieldDecodeError) as excinfo:
        decode_series({"type": "line", "smooth": "very"})
    assert excinfo.value.variant == "Line"
    assert any(err["loc"][0] == "smooth" for err in excinfo.value.errors)


def test_field_error_keeps_nested_shape_error():
    with pytest.raises(FieldDecodeError) as excinfo:
        decode_series({"type": "bar", "itemStyle": {"borderRadius": [1, 2]}})
    assert excinfo.value.variant == "Bar"
    assert isinstance(excinfo.value.nested, InvalidShapeLengthError)


def test_discriminant_is_a_sibling_field():
    encoded = encode_series(Scatter().name("s").data([[1, 2]]))
    assert encoded == {"type": "scatter", "name": "s", "data": [[1, 2]]}


def test_discriminant_is_not_settable():
    assert not hasattr(Line(), "type")
    with pytest.raises(ValidationError):
        Line().type_ = "bar"


def test_decode_from_json_text():
    series = decode_series('{"type": "scatter", "data": [[1, 2], [3, 4]]}')
    assert isinstance(series, Scatter)
    assert series.get_data() == [[1, 2], [3, 4]]


@pytest.mark.parametrize("tag", sorted(SERIES_VARIANTS))
def test_every_variant_round_trips(tag):
    series = SERIES_VARIANTS[tag]().id(f"{tag}-id").name(tag)
    decoded = decode_series(encode_series(series))
    assert type(decoded) is type(series)
    assert decoded == series


def test_line_round_trips_with_nested_fields():
    line = (
        Line()
        .name("temperature")
        .smooth(0.4)
        .symbol(SymbolType.CIRCLE)
        .symbol_size(RawString("function (v) { return v[1] / 2; }"))
        .item_style(ItemStyle().border_radius([1, 2, 3, 4]).color("#5470c6"))
        .label(Label().show(True).formatter("{c} C"))
        .x_axis_index(1)
        .data([[0, 1], [2, 3]])
    )
    text = json.dumps(encode_series(line))
    decoded = decode_series(text)
    assert decoded == line
    assert isinstance(decoded.symbol_size_, RawString)


def test_pie_named_values():
    pie = Pie().data([(40, "rose 1"), (38, "rose 2")])
    encoded = encode_series(pie)
    assert encoded["data"] == [{"value": 40, "name": "rose 1"}, {"value": 38, "name": "rose 2"}]
    assert decode_series(encoded) == pie


def test_graph_and_sankey_round_trip():
    graph = (
        Graph()
        .data([GraphNode().id("a").name("A"), GraphNode().id("b").name("B")])
        .links([GraphLink(source="a", target="b")])
    )
    assert decode_series(encode_series(graph)) == graph

    sankey = Sankey().data([SankeyNode(name="a"), SankeyNode(name="b")]).links([SankeyLink(source="a", target="b", value=5)])
    assert encode_series(sankey)["links"] == [{"source": "a", "target": "b", "value": 5}]
    assert decode_series(encode_series(sankey)) == sankey


def test_tree_children_nest():
    tree = Tree().data([TreeNode().name("root").children([TreeNode().name("leaf").value(1)])])
    encoded = encode_series(tree)
    assert encoded["data"] == [{"name": "root", "children": [{"name": "leaf", "value": 1}]}]
    assert decode_series(encoded) == tree
