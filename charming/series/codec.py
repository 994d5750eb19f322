"""Discriminant-first encoding of the series union.

A series is a flat JSON object whose ``type`` member selects the variant.
Decoding reads that member from the untyped value before committing to a
record class, then validates the whole object (``type`` included) against
the selected class.
"""

import json
import logging
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from ..errors import DecodeError, FieldDecodeError, MissingDiscriminantError, UnknownVariantError
from .types import SeriesBase, SeriesType
from .union import SERIES_VARIANTS

logger = logging.getLogger(__name__)

DISCRIMINANT = "type"


def decode_series(value: Union[str, bytes, Mapping[str, Any]]) -> SeriesBase:
    """Decode one series from a mapping or from JSON text.

    Raises:
        MissingDiscriminantError: the object has no string ``type`` member.
        UnknownVariantError: ``type`` names no known variant (exact, case-sensitive match).
        FieldDecodeError: the selected variant rejected a field; ``variant`` names it.
    """
    if isinstance(value, (str, bytes)):
        try:
            data = json.loads(value)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"series is not valid JSON: {exc}") from exc
    else:
        data = value

    if not isinstance(data, Mapping):
        raise DecodeError(f"series must be a JSON object, got {type(data).__name__}")

    tag = data.get(DISCRIMINANT)
    if not isinstance(tag, str):
        logger.debug("Series without a string '%s' member: %r", DISCRIMINANT, tag)
        raise MissingDiscriminantError(DISCRIMINANT)

    variant = SERIES_VARIANTS.get(tag)
    if variant is None:
        logger.debug("Unknown series type %r", tag)
        raise UnknownVariantError(tag, [t.value for t in SeriesType])

    logger.debug("Decoding series as %s", variant.__name__)
    try:
        return variant.model_validate(dict(data))
    except ValidationError as exc:
        logger.debug("Field errors decoding %s: %s", variant.__name__, exc)
        raise FieldDecodeError(variant.__name__, exc.errors(include_url=False)) from exc


def encode_series(series: SeriesBase) -> Dict[str, Any]:
    """Flat JSON object for ``series``; the ``type`` member sits beside the other fields."""
    return series.model_dump(mode="json", by_alias=True)
