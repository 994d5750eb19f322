import pytest
from pydantic import ValidationError

from charming.component import Title
from charming.element import BorderRadius, ItemStyle, Padding
from charming.errors import InvalidShapeLengthError, ShapeDecodeError


def test_single_padding_encodes_as_bare_number():
    assert Padding.single(5).model_dump() == 5.0


def test_double_padding_encodes_as_pair():
    assert Padding.double(1, 2).model_dump() == [1.0, 2.0]


def test_quadruple_padding_encodes_top_right_bottom_left():
    assert Padding.quadruple(1, 2, 3, 4).model_dump() == [1.0, 2.0, 3.0, 4.0]


@pytest.mark.parametrize(
    "wire, expected",
    [
        (7, (7.0,)),
        ([7], (7.0,)),
        ([1, 2], (1.0, 2.0)),
        ([1, 2, 3, 4], (1.0, 2.0, 3.0, 4.0)),
    ],
)
def test_decode_picks_shape_from_length(wire, expected):
    assert Padding.model_validate(wire).values == expected


@pytest.mark.parametrize("wire", [[], [1, 2, 3], [1, 2, 3, 4, 5]])
def test_decode_rejects_unsupported_lengths(wire):
    with pytest.raises(InvalidShapeLengthError) as excinfo:
        Padding.decode(wire)
    assert excinfo.value.length == len(wire)
    assert excinfo.value.allowed == (1, 2, 4)


def test_decode_error_survives_validation_wrapping():
    with pytest.raises(ValidationError) as excinfo:
        Padding.model_validate([1, 2, 3])
    cause = excinfo.value.errors()[0]["ctx"]["error"]
    assert isinstance(cause, InvalidShapeLengthError)
    assert cause.length == 3


def test_from_wire_returns_an_instance():
    assert Padding.from_wire([4, 8]) == Padding.double(4, 8)
    assert Padding.from_wire(3).top == 3.0
    assert isinstance(BorderRadius.from_wire([1, 2, 3, 4]), BorderRadius)


def test_from_wire_raises_typed_length_error():
    with pytest.raises(InvalidShapeLengthError) as excinfo:
        Padding.from_wire([1, 2, 3])
    assert excinfo.value.length == 3
    assert excinfo.value.allowed == (1, 2, 4)


@pytest.mark.parametrize("wire", [{"values": [1, 2]}, {"top": 1}])
def test_objects_are_not_a_padding_shape(wire):
    with pytest.raises(ShapeDecodeError):
        Padding.from_wire(wire)


def test_object_padding_inside_a_record_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        Title.model_validate({"padding": {"values": [1, 2]}})
    cause = excinfo.value.errors()[0]["ctx"]["error"]
    assert isinstance(cause, ShapeDecodeError)


@pytest.mark.parametrize("wire", [True, "10", [1, "2"], {"top": 1}])
def test_decode_rejects_non_numeric_input(wire):
    with pytest.raises(ShapeDecodeError):
        Padding.decode(wire)


def test_css_side_expansion():
    assert (Padding.single(3).top, Padding.single(3).left) == (3.0, 3.0)

    double = Padding.double(10, 20)
    assert (double.top, double.right, double.bottom, double.left) == (10.0, 20.0, 10.0, 20.0)

    quad = Padding.quadruple(1, 2, 3, 4)
    assert (quad.top, quad.right, quad.bottom, quad.left) == (1.0, 2.0, 3.0, 4.0)


def test_setter_converts_plain_numbers():
    title = Title().padding(5)
    assert title.padding_ == Padding.single(5)
    assert title.model_dump(by_alias=True) == {"padding": 5.0}

    title.padding([4, 8])
    assert title.model_dump(by_alias=True) == {"padding": [4.0, 8.0]}


def test_setter_rejects_length_three():
    with pytest.raises(ValidationError):
        Title().padding([1, 2, 3])


def test_border_radius_allows_one_or_four_values():
    assert ItemStyle().border_radius([1, 2, 3, 4]).border_radius_ == BorderRadius.corners(1, 2, 3, 4)
    assert BorderRadius.uniform(6).model_dump() == 6.0
    with pytest.raises(InvalidShapeLengthError):
        BorderRadius.decode([1, 2])
