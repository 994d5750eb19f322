import json

import pytest
from pydantic import ValidationError

from charming.element import Label, RawString, Tooltip, process_raw_strings
from charming.element.raw_string import RAW_PREFIX, RAW_SUFFIX, is_wrapped
from charming.series import Line


def test_wrapped_form():
    raw = RawString("function () {}")
    assert raw.wrapped() == f"{RAW_PREFIX}function () {{}}{RAW_SUFFIX}"
    assert is_wrapped(raw.wrapped())
    assert not is_wrapped("function () {}")


def test_process_replaces_only_wrapped_strings():
    text = '{"a": "plain", "b": "%s"}' % RawString("x => x * 2").wrapped()
    assert process_raw_strings(text) == '{"a": "plain", "b": x => x * 2}'


def test_process_unescapes_json():
    raw = RawString('function (p) {\n  return "a\\\\b";\n}')
    text = json.dumps({"f": raw.wrapped()})
    assert process_raw_strings(text) == '{"f": ' + str(raw) + "}"


def test_formatter_accepts_text_and_raw():
    assert Label().formatter("{b}").model_dump(by_alias=True) == {"formatter": "{b}"}

    label = Label().formatter(RawString("p => p.name"))
    assert label.model_dump(by_alias=True) == {"formatter": RawString("p => p.name").wrapped()}


def test_wrapped_text_decodes_to_raw_string():
    tooltip = Tooltip.model_validate({"formatter": RawString("p => p").wrapped()})
    assert isinstance(tooltip.formatter_, RawString)
    assert tooltip.formatter_ == "p => p"


def test_symbol_size_shapes():
    assert Line().symbol_size(8).symbol_size_ == 8
    assert Line().symbol_size((8, 4)).symbol_size_ == [8, 4]
    assert isinstance(Line().symbol_size(RawString("v => v[2]")).symbol_size_, RawString)
    with pytest.raises(ValidationError):
        Line().symbol_size("large")
    with pytest.raises(ValidationError):
        Line().symbol_size([1, 2, 3])
