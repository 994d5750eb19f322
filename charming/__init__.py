import logging

from charming import config
from charming.log import configure_logging

LOG_LEVEL = config.get_log_level()

logger = configure_logging(LOG_LEVEL)
logger.debug(f"Package logger initialized with level: {logging.getLevelName(logger.level)}")

from charming.chart import Chart, ChartController  # noqa: E402
from charming.element import Padding, RawString  # noqa: E402
from charming.errors import (  # noqa: E402
    BorrowError,
    CharmingError,
    ControllerClosedError,
    DecodeError,
    FieldDecodeError,
    InvalidShapeLengthError,
    MissingDiscriminantError,
    ShapeDecodeError,
    UnknownVariantError,
    WrongVariantError,
)
from charming.series import Series, SeriesType, decode_series, encode_series  # noqa: E402

__all__ = [
    "BorrowError",
    "CharmingError",
    "Chart",
    "ChartController",
    "ControllerClosedError",
    "DecodeError",
    "FieldDecodeError",
    "InvalidShapeLengthError",
    "MissingDiscriminantError",
    "Padding",
    "RawString",
    "Series",
    "SeriesType",
    "ShapeDecodeError",
    "UnknownVariantError",
    "WrongVariantError",
    "decode_series",
    "encode_series",
]
