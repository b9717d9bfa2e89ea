
from gridref._version import __version__  # noqa: F401
from gridref.utils.logging import LOGGER
from gridref.coordinates import Coordinate
from gridref.datum import Datum, wgs84
from gridref.errors import (
    EastingDigitsError, GridRefError, InputTooShortError, InvalidBandLetterError,
    InvalidCoordinateError, InvalidGridLetterError, InvalidUtmError, InvalidZoneError,
    MgrsDecodeError, NorthingDigitsError, UnevenDigitsError, UnsupportedProjectionError
)
from gridref.projection import TransverseMercator
from gridref.utm import Utm
from gridref.mgrs import Mgrs


__all__ = [
    'Coordinate',
    'Datum',
    'Mgrs',
    'TransverseMercator',
    'Utm',
    'wgs84',
    'EastingDigitsError',
    'GridRefError',
    'InputTooShortError',
    'InvalidBandLetterError',
    'InvalidCoordinateError',
    'InvalidGridLetterError',
    'InvalidUtmError',
    'InvalidZoneError',
    'MgrsDecodeError',
    'NorthingDigitsError',
    'UnevenDigitsError',
    'UnsupportedProjectionError',
    'LOGGER',
]
