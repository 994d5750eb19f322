"""Numeric values whose wire shape depends on their arity.

A ``FloatTuple`` is written as a bare number when it holds one value and as
an array otherwise. Decoding looks at the shape first (number or sequence,
then the sequence length) and never pads or guesses missing elements.
"""

import logging
from numbers import Real
from collections.abc import Mapping
from typing import Any, ClassVar, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_serializer, model_validator

from ..errors import InvalidShapeLengthError, ShapeDecodeError, unwrap_validation_error

logger = logging.getLogger(__name__)

F = TypeVar("F", bound="FloatTuple")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class FloatTuple(BaseModel):
    model_config = ConfigDict(frozen=True)

    allowed_lengths: ClassVar[Tuple[int, ...]] = (1, 2, 4)

    values: Tuple[float, ...]

    @classmethod
    def decode(cls, value: Any) -> Tuple[float, ...]:
        """Normalize a number or a numeric sequence into the stored tuple."""
        if _is_number(value):
            items: Sequence[Any] = (value,)
        elif isinstance(value, (list, tuple)):
            items = value
        else:
            raise ShapeDecodeError(f"{cls.__name__} expects a number or a sequence of numbers, got {type(value).__name__}")

        if len(items) not in cls.allowed_lengths:
            logger.debug("Rejecting %s of length %d", cls.__name__, len(items))
            raise InvalidShapeLengthError(cls.__name__, len(items), cls.allowed_lengths)
        for item in items:
            if not _is_number(item):
                raise ShapeDecodeError(f"{cls.__name__} elements must be numbers, got {item!r}")
        return tuple(float(item) for item in items)

    @classmethod
    def from_wire(cls: Type[F], value: Any) -> F:
        """Decode a wire value into an instance, raising the typed shape error."""
        try:
            return cls.model_validate(value)
        except ValidationError as exc:
            raise unwrap_validation_error(exc, cls.__name__) from exc

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if isinstance(data, FloatTuple):
            data = data.values
        elif isinstance(data, Mapping):
            raise ShapeDecodeError(f"{cls.__name__} expects a number or a sequence of numbers, got an object")
        return {"values": cls.decode(data)}

    @model_validator(mode="after")
    def _check_length(self) -> "FloatTuple":
        if len(self.values) not in self.allowed_lengths:
            raise InvalidShapeLengthError(type(self).__name__, len(self.values), self.allowed_lengths)
        return self

    @model_serializer(mode="plain")
    def _to_wire(self) -> Any:
        if len(self.values) == 1:
            return self.values[0]
        return list(self.values)

    def __len__(self) -> int:
        return len(self.values)


class Padding(FloatTuple):
    """Padding space around content.

    - one value: all sides;
    - two values: top/bottom, then left/right;
    - four values: top, right, bottom, left (clockwise, as in CSS).
    """

    allowed_lengths: ClassVar[Tuple[int, ...]] = (1, 2, 4)

    @classmethod
    def single(cls, padding: float) -> "Padding":
        return cls.model_validate((padding,))

    @classmethod
    def double(cls, top_bottom: float, left_right: float) -> "Padding":
        return cls.model_validate((top_bottom, left_right))

    @classmethod
    def quadruple(cls, top: float, right: float, bottom: float, left: float) -> "Padding":
        return cls.model_validate((top, right, bottom, left))

    def _expanded(self) -> Tuple[float, float, float, float]:
        if len(self.values) == 1:
            (v,) = self.values
            return v, v, v, v
        if len(self.values) == 2:
            vertical, horizontal = self.values
            return vertical, horizontal, vertical, horizontal
        top, right, bottom, left = self.values
        return top, right, bottom, left

    @property
    def top(self) -> float:
        return self._expanded()[0]

    @property
    def right(self) -> float:
        return self._expanded()[1]

    @property
    def bottom(self) -> float:
        return self._expanded()[2]

    @property
    def left(self) -> float:
        return self._expanded()[3]


class BorderRadius(FloatTuple):
    """Corner radius: one value for all corners, or top-left, top-right, bottom-right, bottom-left."""

    allowed_lengths: ClassVar[Tuple[int, ...]] = (1, 4)

    @classmethod
    def uniform(cls, radius: float) -> "BorderRadius":
        return cls.model_validate((radius,))

    @classmethod
    def corners(cls, top_left: float, top_right: float, bottom_right: float, bottom_left: float) -> "BorderRadius":
        return cls.model_validate((top_left, top_right, bottom_right, bottom_left))
