"""Exception hierarchy for decoding and scoped mutation.

Decode errors subclass ``ValueError`` so that pydantic wraps them when they are
raised from a nested validator; ``unwrap_validation_error`` digs them back out
so callers always see the typed error.
"""

from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError


class CharmingError(Exception):
    pass


class DecodeError(CharmingError, ValueError):
    """A wire value could not be decoded into the document model."""


class MissingDiscriminantError(DecodeError):
    def __init__(self, field: str = "type"):
        self.field = field
        super().__init__(f"missing discriminant field '{field}'")


class UnknownVariantError(DecodeError):
    def __init__(self, tag: str, known: Sequence[str]):
        self.tag = tag
        self.known = tuple(known)
        super().__init__(f"unknown variant '{tag}', expected one of: {', '.join(self.known)}")


class FieldDecodeError(DecodeError):
    """A field of a record had the wrong shape or a required field was absent."""

    def __init__(self, variant: str, errors: List[Dict[str, Any]]):
        self.variant = variant
        self.errors = errors
        details = "; ".join(f"{_format_loc(e.get('loc', ()))}: {e.get('msg', '')}" for e in errors)
        super().__init__(f"failed to decode {variant}: {details}")

    @property
    def nested(self) -> Optional[DecodeError]:
        """First typed decode error raised below this record, if any."""
        return _first_decode_error(self.errors)


class ShapeDecodeError(DecodeError):
    """A shape-polymorphic value was neither a number nor a numeric sequence."""


class InvalidShapeLengthError(ShapeDecodeError):
    def __init__(self, type_name: str, length: int, allowed: Sequence[int]):
        self.type_name = type_name
        self.length = length
        self.allowed = tuple(allowed)
        allowed_txt = ", ".join(str(n) for n in self.allowed)
        super().__init__(f"invalid length {length} for {type_name}, expected one of: {allowed_txt}")


class WrongVariantError(CharmingError, TypeError):
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} series variant, got {actual}")


class BorrowError(CharmingError, RuntimeError):
    """A second mutation handle was requested while one is active."""


class ControllerClosedError(BorrowError):
    """A controller was used after its scope ended."""


def _format_loc(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _first_decode_error(errors: List[Dict[str, Any]]) -> Optional[DecodeError]:
    for err in errors:
        cause = (err.get("ctx") or {}).get("error")
        if isinstance(cause, DecodeError):
            return cause
    return None


def unwrap_validation_error(exc: ValidationError, variant: str) -> DecodeError:
    """Return the typed error behind a pydantic ``ValidationError``."""
    errors = exc.errors(include_url=False)
    cause = _first_decode_error(errors)
    if cause is not None:
        return cause
    return FieldDecodeError(variant, errors)
