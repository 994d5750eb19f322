from typing import Optional

import pytest
from pydantic import ValidationError

from charming.base import EChartsModel, wire_alias
from charming.component import Title
from charming.datatype import Dataset, Transform
from charming.element import ColorStop, ItemStyle, Label, LinearGradient
from charming.series import Line


@pytest.mark.parametrize(
    "field, alias",
    [("name_", "name"), ("item_style_", "itemStyle"), ("x_axis_index_", "xAxisIndex"), ("z_", "z")],
)
def test_wire_alias(field, alias):
    assert wire_alias(field) == alias


def test_setters_chain_on_the_same_instance():
    title = Title()
    assert title.text("Sales").left("center") is title
    assert (title.text_, title.left_) == ("Sales", "center")


def test_setters_validate():
    with pytest.raises(ValidationError):
        Title().z("high")


def test_fields_accept_wire_names_and_field_names():
    assert Title(itemGap=4) == Title(item_gap_=4)


def test_omission_applies_at_every_level():
    line = Line().item_style(ItemStyle()).label(Label().show(None))
    assert line.model_dump(by_alias=True) == {"type": "line", "itemStyle": {}, "label": {}}


def test_empty_optional_list_is_kept_but_default_empty_list_is_not():
    dataset = Dataset().source([])
    assert dataset.model_dump(by_alias=True) == {"source": []}
    assert Dataset.model_validate(dataset.model_dump(by_alias=True)) == dataset
    assert Line().data([]).model_dump(by_alias=True) == {"type": "line"}


def test_frozen_tag_has_no_setter():
    gradient = LinearGradient().color_stops([ColorStop(offset=0, color="#fff"), ColorStop(offset=1, color="#000")])
    assert not hasattr(gradient, "type")
    assert gradient.model_dump(by_alias=True) == {
        "type": "linear",
        "x": 0.0,
        "y": 0.0,
        "x2": 0.0,
        "y2": 1.0,
        "colorStops": [{"offset": 0.0, "color": "#fff"}, {"offset": 1.0, "color": "#000"}],
        "global": False,
    }


def test_repeated_field_appends_and_resets():
    dataset = Dataset().transform(Transform(type="filter")).transform(Transform(type="sort", config={"dimension": 1}))
    assert [t.type_ for t in dataset.transform_] == ["filter", "sort"]
    assert dataset.reset_transform().transform_ == []


def test_one_or_many_field_accepts_both_shapes():
    single = Dataset.model_validate({"transform": {"type": "filter"}})
    assert len(single.transform_) == 1
    assert single.model_dump(by_alias=True) == {"transform": {"type": "filter"}}

    several = Dataset.model_validate({"transform": [{"type": "filter"}, {"type": "sort"}]})
    assert len(several.transform_) == 2
    assert several.model_dump(by_alias=True)["transform"] == [{"type": "filter"}, {"type": "sort"}]


def test_setter_may_not_shadow_model_api():
    with pytest.raises(TypeError):

        class Shadowing(EChartsModel):
            copy_: Optional[int] = None
