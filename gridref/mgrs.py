"""
Module for Military Grid Reference System (MGRS) encoding and decoding

A MGRS reference is the UTM zone (two digits), the latitude band letter, two letters
naming the 100km grid square, then `precision` easting digits followed by
`precision` northing digits, e.g. '23KPQ6026454563'.
"""

__all__ = ['Mgrs', 'decode', 'encode']

import math
import re
from typing import Optional, Tuple

from gridref._const import (
    ANGEPS, DEFAULT_MGRS_PRECISION, LATITUDE_BANDS, MAX_MGRS_PRECISION, MAX_UTM_ZONE,
    MGRS_BAND_MIN_NORTHING, MGRS_COLUMN_LETTERS, MGRS_EVEN_ROW_SHIFT, MGRS_MAX_SROW,
    MGRS_MULT, MGRS_NORTHING_CYCLE, MGRS_ROW_LETTERS, MGRS_ROW_PERIOD,
    MGRS_SET_ORIGIN_COLUMNS, MGRS_SET_ORIGIN_ROWS, MGRS_TILE, MIN_UTM_ZONE
)
from gridref.calc import fmod
from gridref.datum import Datum
from gridref.errors import (
    EastingDigitsError, InputTooShortError, InvalidBandLetterError, InvalidGridLetterError,
    InvalidUtmError, InvalidZoneError, MgrsDecodeError, NorthingDigitsError,
    UnevenDigitsError, UnsupportedProjectionError
)
from gridref.utm import Utm, band_index, check_utm
from gridref.utils.logging import LOGGER

_ZONE_PATTERN = re.compile(r'[0-9]{1,2}')
_DIGITS_PATTERN = re.compile(r'[0-9]+')

# Shortest accepted input: two zone digits, band, column and row letters
_MIN_LENGTH = 5


def _check_precision(precision: int):
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f'MGRS precision must be an integer, not {type(precision).__name__}')

    if not 0 <= precision <= MAX_MGRS_PRECISION:
        raise ValueError(
            f'MGRS precision must be within 0..{MAX_MGRS_PRECISION}, got {precision}'
        )


def _row_in_band(iband: int, icol: int, yh: int, north: bool) -> bool:
    """
    Whether a 100km row index is consistent with the latitude band it was encoded
    with. Rows just across a band edge are accepted in the four places where the band
    boundary cuts a grid square.

    The result is informational only; encoding never alters the row.

    Args:
        iband:
            Band index, -10 through 9

        icol:
            Column index, 0 through 7

        yh:
            Northing, in 100km units

        north:
            True for the northern hemisphere

    Returns:
        bool
    """
    c = 100 * (8 * iband + 4) / 90
    minrow = math.floor(c - 4.3 - 0.1 * north) if iband > -10 else -90
    maxrow = math.floor(c + 4.4 - 0.1 * north) if iband < 9 else 94
    baserow = int((minrow + maxrow) / 2) - MGRS_ROW_PERIOD // 2
    irow = fmod(fmod(yh, MGRS_ROW_PERIOD) - baserow + MGRS_MAX_SROW, MGRS_ROW_PERIOD) + baserow
    if minrow <= irow <= maxrow:
        return True

    sband = iband if iband >= 0 else -1 - iband
    srow = irow if irow >= 0 else -1 - irow
    scol = icol if icol < 4 else 7 - icol
    return (
        (srow == 70 and sband == 8 and scol >= 2) or
        (srow == 71 and sband == 7 and scol <= 2) or
        (srow == 79 and sband == 9 and scol >= 1) or
        (srow == 80 and sband == 8 and scol <= 1)
    )


def encode(utm: Utm, precision: int = DEFAULT_MGRS_PRECISION, datum: Optional[Datum] = None) -> str:
    """
    Encodes a UTM coordinate as a MGRS string.

    Easting and northing are truncated (not rounded) to the requested precision, so
    the reference names the grid cell the point falls in.

    Args:
        utm:
            A non-polar Utm

        precision: (int) (Default 5)
            Digits per easting/northing; 0 gives the 100km square only, 5 gives 1m,
            11 gives 1 micrometer

        datum: (Default WGS84)
            The datum used to recover the latitude band

    Returns:
        str
    """
    _check_precision(precision)
    if utm.ups:
        raise UnsupportedProjectionError(
            'UPS (polar stereographic) coordinates cannot be encoded as MGRS.'
        )
    check_utm(utm)

    tile = MGRS_MULT * MGRS_TILE
    ix = math.floor(utm.easting * MGRS_MULT)
    iy = math.floor(utm.northing * MGRS_MULT)
    xh, yh = ix // tile, iy // tile

    icol = xh - 1
    if not 0 <= icol < len(MGRS_COLUMN_LETTERS[0]):
        raise InvalidUtmError(
            f'Easting {utm.easting} is outside of the range covered by MGRS grid squares'
        )
    if yh < 0:
        raise InvalidUtmError(f'Northing must not be negative, got {utm.northing}')

    latitude = utm.to_coordinate(datum).latitude
    if abs(latitude) > ANGEPS:
        iband = band_index(latitude)
    else:
        iband = 0 if utm.north else -1

    if not _row_in_band(iband, icol, yh, utm.north):
        LOGGER.debug(
            'MGRS row %s is outside of the expected range for band %s',
            yh, LATITUDE_BANDS[10 + iband]
        )

    zone1 = utm.zone - 1
    row_shift = MGRS_EVEN_ROW_SHIFT if zone1 % 2 else 0
    irow = int(fmod(yh + row_shift, MGRS_ROW_PERIOD))

    mgrs_str = (
        f'{utm.zone:02d}'
        f'{LATITUDE_BANDS[10 + iband]}'
        f'{MGRS_COLUMN_LETTERS[zone1 % 3][icol]}'
        f'{MGRS_ROW_LETTERS[irow]}'
    )

    if precision > 0:
        divisor = 10 ** (MAX_MGRS_PRECISION - precision)
        easting_digits = (ix - tile * xh) // divisor
        northing_digits = (iy - tile * yh) // divisor
        mgrs_str += f'{easting_digits:0{precision}d}{northing_digits:0{precision}d}'

    return mgrs_str


def _letter_offset(mgrs_str: str, letter: str, origin: str, last: str) -> int:
    """
    Counts the letters from origin to letter, skipping I and O and wrapping from
    `last` back to A at most once.

    Args:
        mgrs_str:
            The MGRS string being decoded (for error reporting)

        letter:
            The grid square letter

        origin:
            The first letter of the zone's letter set

        last:
            The last letter before wrapping; Z for columns, V for rows

    Returns:
        int
    """
    current, steps, wrapped = origin, 0, False
    while current != letter:
        current = chr(ord(current) + 1)
        if current in ('I', 'O'):
            current = chr(ord(current) + 1)

        if current > last:
            if wrapped:
                raise InvalidGridLetterError(
                    mgrs_str, f'grid square letter {letter!r} is not valid for this zone'
                )
            current, wrapped = 'A', True

        steps += 1

    return steps


def _parse(mgrs_str: str) -> Tuple[Utm, int]:
    """Decodes a MGRS string into a Utm and the precision it was written with"""
    text = ''.join(mgrs_str.split()).upper()
    if len(text) < _MIN_LENGTH - 1:
        raise InputTooShortError(text, 'expected zone, band and two grid square letters')

    match = _ZONE_PATTERN.match(text)
    if match is None:
        raise InvalidZoneError(text, 'missing zone digits')

    zone = int(match.group())
    if not MIN_UTM_ZONE <= zone <= MAX_UTM_ZONE:
        raise InvalidZoneError(text, f'zone must be within {MIN_UTM_ZONE}..{MAX_UTM_ZONE}')

    position = match.end()
    if len(text) < position + 3:
        raise InputTooShortError(text, 'expected zone, band and two grid square letters')

    band, column, row = text[position:position + 3]
    if band not in MGRS_BAND_MIN_NORTHING:
        raise InvalidBandLetterError(text, f'{band!r} is not a UTM latitude band')

    letter_set = (zone - 1) % 6
    easting = MGRS_TILE * (
        _letter_offset(text, column, MGRS_SET_ORIGIN_COLUMNS[letter_set], 'Z') + 1
    )
    northing = MGRS_TILE * _letter_offset(text, row, MGRS_SET_ORIGIN_ROWS[letter_set], 'V')

    # Row letters repeat every 2,000km
    while northing < MGRS_BAND_MIN_NORTHING[band]:
        northing += MGRS_NORTHING_CYCLE

    digits = text[position + 3:]
    if len(digits) % 2:
        raise UnevenDigitsError(text, 'easting and northing must have the same number of digits')

    precision = len(digits) // 2
    if precision > MAX_MGRS_PRECISION:
        raise MgrsDecodeError(
            text, f'at most {MAX_MGRS_PRECISION} digits each of easting and northing'
        )

    if precision:
        easting_str, northing_str = digits[:precision], digits[precision:]
        if not _DIGITS_PATTERN.fullmatch(easting_str):
            raise EastingDigitsError(text, f'easting {easting_str!r} is not numeric')
        if not _DIGITS_PATTERN.fullmatch(northing_str):
            raise NorthingDigitsError(text, f'northing {northing_str!r} is not numeric')

        resolution = MGRS_TILE / 10 ** precision
        easting += int(easting_str) * resolution
        northing += int(northing_str) * resolution

    return Utm(easting, northing, band >= 'N', zone, band), precision


def decode(mgrs_str: str) -> Utm:
    """
    Decodes a MGRS string into a Utm. Whitespace anywhere in the string is ignored
    and letters may be lowercase.

    The easting/northing returned are the south-west corner of the referenced cell.

    Args:
        mgrs_str:
            A MGRS grid reference, e.g. '48P UV 77298 83034'

    Returns:
        Utm
    """
    return _parse(mgrs_str)[0]


class Mgrs:
    """
    A MGRS grid reference: a Utm plus the number of digits it is written with.

    Args:
        utm:
            A non-polar Utm

        precision: (int) (Default 5)
            Digits per easting/northing, 0 through 11
    """

    __slots__ = ('_utm', '_precision')

    def __init__(self, utm: Utm, precision: int = DEFAULT_MGRS_PRECISION):
        _check_precision(precision)
        object.__setattr__(self, '_utm', utm)
        object.__setattr__(self, '_precision', precision)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Mgrs):
            return False

        return self.utm == other.utm and self.precision == other.precision

    def __hash__(self):
        return hash((self.utm, self.precision))

    def __repr__(self):
        return f'<Mgrs({self.utm!r}, precision={self.precision})>'

    def __str__(self):
        return self.to_string()

    @property
    def utm(self) -> Utm:
        return self._utm

    @property
    def precision(self) -> int:
        return self._precision

    @classmethod
    def from_string(cls, mgrs_str: str) -> 'Mgrs':
        """Create a Mgrs from a string; precision is taken from the digit count"""
        return cls(*_parse(mgrs_str))

    def to_string(self, datum: Optional[Datum] = None) -> str:
        """The MGRS string, with no internal spaces"""
        return encode(self.utm, self.precision, datum)
