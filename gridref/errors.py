"""
Exceptions raised by gridref

Every error derives from GridRefError, which is itself a ValueError.
"""

__all__ = [
    'EastingDigitsError', 'GridRefError', 'InputTooShortError', 'InvalidBandLetterError',
    'InvalidCoordinateError', 'InvalidGridLetterError', 'InvalidUtmError',
    'InvalidZoneError', 'MgrsDecodeError', 'NorthingDigitsError', 'UnevenDigitsError',
    'UnsupportedProjectionError',
]


class GridRefError(ValueError):
    """Base class for all gridref errors"""


class InvalidCoordinateError(GridRefError):
    """Latitude or longitude outside of its valid range"""

    def __init__(self, latitude: float, longitude: float):
        super().__init__(
            f'Invalid coordinate ({latitude}, {longitude}); latitude must be within '
            f'[-90, 90] and longitude within [-180, 180]'
        )
        self.latitude = latitude
        self.longitude = longitude


class InvalidUtmError(GridRefError):
    """A UTM value which cannot be projected or encoded"""


class UnsupportedProjectionError(GridRefError):
    """Raised for polar (UPS) values, which are not supported"""


class MgrsDecodeError(GridRefError):
    """
    Base class for MGRS parsing failures.

    Args:
        mgrs_str:
            The (whitespace-stripped) MGRS string that failed to decode

        reason:
            Human readable description of the failure
    """

    def __init__(self, mgrs_str: str, reason: str):
        super().__init__(f'Could not decode MGRS string {mgrs_str!r}: {reason}')
        self.mgrs_str = mgrs_str
        self.reason = reason


class InputTooShortError(MgrsDecodeError):
    """Fewer characters than zone, band and grid square letters require"""


class InvalidZoneError(MgrsDecodeError):
    """Zone digits missing or outside 1..60"""


class InvalidBandLetterError(MgrsDecodeError):
    """Band letter has no minimum northing entry"""


class InvalidGridLetterError(MgrsDecodeError):
    """100km grid square letter is not reachable within one pass of the alphabet"""


class UnevenDigitsError(MgrsDecodeError):
    """Easting and northing digits are not of equal length"""


class EastingDigitsError(MgrsDecodeError):
    """Easting digits are not a base-10 integer"""


class NorthingDigitsError(MgrsDecodeError):
    """Northing digits are not a base-10 integer"""
