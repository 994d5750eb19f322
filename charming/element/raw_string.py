"""JavaScript literals carried through JSON.

The renderer accepts bare function expressions for callback options such as
formatters. A ``RawString`` is serialized as a string wrapped in a sentinel;
``process_raw_strings`` then strips the quotes and the sentinel from the final
text so the code lands unquoted in the emitted option object.
"""

import json
import re
from numbers import Real
from typing import Annotated, Any, Callable, List, Union

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import core_schema

RAW_PREFIX = "--x_x--0_0--"
RAW_SUFFIX = "--0_0--x_x--"

_RAW_PATTERN = re.compile(r'"' + re.escape(RAW_PREFIX) + r'(.*?)' + re.escape(RAW_SUFFIX) + r'"', re.DOTALL)


class RawString(str):
    """Source text emitted verbatim, e.g. ``RawString("function (p) { return p.name; }")``."""

    def __repr__(self) -> str:
        return f"RawString({str.__repr__(self)})"

    def wrapped(self) -> str:
        return f"{RAW_PREFIX}{self}{RAW_SUFFIX}"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _raw_or(lambda v: False, "a sentinel-wrapped string").func,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize),
        )


def is_wrapped(value: str) -> bool:
    return value.startswith(RAW_PREFIX) and value.endswith(RAW_SUFFIX) and len(value) >= len(RAW_PREFIX) + len(RAW_SUFFIX)


def _unwrap(value: str) -> RawString:
    return RawString(value[len(RAW_PREFIX) : len(value) - len(RAW_SUFFIX)])


def process_raw_strings(text: str) -> str:
    """Replace every quoted sentinel string in JSON text with its raw content."""
    return _RAW_PATTERN.sub(lambda m: json.loads(f'"{m.group(1)}"'), text)


def _raw_or(accept: Callable[[Any], bool], expected: str) -> PlainValidator:
    def validate(value: Any) -> Any:
        if isinstance(value, RawString):
            return value
        if isinstance(value, str) and is_wrapped(value):
            return _unwrap(value)
        if accept(value):
            return list(value) if isinstance(value, tuple) else value
        raise ValueError(f"expected {expected} or a RawString, got {value!r}")

    return PlainValidator(validate)


def _serialize(value: Any) -> Any:
    if isinstance(value, RawString):
        return value.wrapped()
    return value


_RAW_AWARE = PlainSerializer(_serialize)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_number_pair(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2 and all(_is_number(v) for v in value)


# Text option that may also be a function literal (formatters, renderItem, ...).
Formatter = Annotated[Union[RawString, str], _raw_or(lambda v: isinstance(v, str), "a string"), _RAW_AWARE]

# Duration in milliseconds, or a function of the data index.
AnimationTime = Annotated[Union[RawString, int, float], _raw_or(_is_number, "a number"), _RAW_AWARE]

# Symbol size: one number, a [width, height] pair, or a function.
SymbolSize = Annotated[
    Union[RawString, int, float, List[Union[int, float]]],
    _raw_or(lambda v: _is_number(v) or _is_number_pair(v), "a number or a [width, height] pair"),
    _RAW_AWARE,
]
