"""
Universal Transverse Mercator (UTM) coordinates
"""

__all__ = [
    'Utm', 'band_index', 'central_meridian', 'check_utm', 'latitude_band', 'utm_zone'
]

import math
from typing import Optional, Tuple

from gridref._const import (
    DEFAULT_MGRS_PRECISION, LATITUDE_BANDS, MAX_UTM_LAT, MAX_UTM_ZONE, MIN_UTM_LAT,
    MIN_UTM_ZONE
)
from gridref.calc import fmod
from gridref.coordinates import Coordinate
from gridref.datum import Datum, wgs84
from gridref.errors import InvalidUtmError, UnsupportedProjectionError
from gridref.projection import TransverseMercator
from gridref.utils.functions import truncate
from gridref.utils.logging import warn_once


def band_index(latitude: float) -> int:
    """
    The latitude band a latitude falls in, counted from the equator: -10 (C) through 9 (X).

    Band X is 12 degrees tall; latitudes beyond the UTM limits are clamped to C or X.

    Args:
        latitude:
            Latitude, in degrees

    Returns:
        int
    """
    ilat = math.floor(latitude)
    return max(-10, min(9, (ilat + 80) // 8 - 10))


def latitude_band(latitude: float) -> str:
    """The latitude band letter, C through X (I and O omitted)"""
    return LATITUDE_BANDS[10 + band_index(latitude)]


def central_meridian(zone: int) -> float:
    """The central meridian of a UTM zone, in degrees"""
    return 6.0 * zone - 183.0


def utm_zone(latitude: float, longitude: float, utm_exceptions: bool = True) -> int:
    """
    The UTM zone for a coordinate, or 0 in the polar (UPS) regions.

    Args:
        latitude:
            Latitude, in degrees

        longitude:
            Longitude, in degrees

        utm_exceptions: (bool) (Default True)
            Whether to apply the Norway (32V) and Svalbard (31X-37X) exceptions

    Returns:
        int
    """
    if latitude < MIN_UTM_LAT or latitude >= MAX_UTM_LAT:
        return 0

    # Longitude in [-180, 180)
    ilon = fmod(longitude, 360.0)
    if ilon >= 180:
        ilon -= 360
    elif ilon < -180:
        ilon += 360

    zone = math.floor((ilon + 186) / 6)
    if not utm_exceptions:
        return zone

    band = band_index(latitude)
    if band == 7 and zone == 31 and ilon >= 3:
        # Norway
        zone = 32
    elif band == 9 and 0 <= ilon < 42:
        # Svalbard
        zone = 2 * ((math.floor(ilon) + 183) // 12) + 1

    return zone


class Utm:
    """
    A projected UTM coordinate. Immutable.

    Polar values (ups=True, zone 0) are placeholders; they can be constructed but
    not inverted or MGRS-encoded.

    Args:
        easting:
            Easting, in meters (false easting included)

        northing:
            Northing, in meters (false northing included)

        north:
            True for the northern hemisphere

        zone:
            UTM zone, 1 through 60 (0 for polar)

        band:
            Latitude band letter

        ups: (bool) (Default False)
            True for the polar regions
    """

    __slots__ = ('_easting', '_northing', '_north', '_zone', '_band', '_ups')

    def __init__(
        self,
        easting: float,
        northing: float,
        north: bool,
        zone: int,
        band: str,
        ups: bool = False,
    ):
        if isinstance(zone, bool) or not isinstance(zone, int):
            raise TypeError(f'UTM zone must be an integer, not {type(zone).__name__}')
        if not isinstance(band, str) or len(band) != 1 or not band.isalpha():
            raise ValueError(f'UTM band must be a single letter, got {band!r}')

        for key, value in (
            ('_easting', float(easting)),
            ('_northing', float(northing)),
            ('_north', bool(north)),
            ('_zone', zone),
            ('_band', band.upper()),
            ('_ups', bool(ups)),
        ):
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Utm):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f'<Utm(easting={self.easting}, northing={self.northing}, north={self.north}, '
            f'zone={self.zone}, band={self.band!r}, ups={self.ups})>'
        )

    def __str__(self):
        return f'{self.zone}{self.band} {truncate(self.easting)} {truncate(self.northing)}'

    def _key(self) -> Tuple:
        return self.easting, self.northing, self.north, self.zone, self.band, self.ups

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def north(self) -> bool:
        return self._north

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def band(self) -> str:
        return self._band

    @property
    def ups(self) -> bool:
        return self._ups

    @classmethod
    def from_coordinate(
        cls,
        coordinate: Coordinate,
        datum: Optional[Datum] = None,
        utm_exceptions: bool = True,
    ) -> 'Utm':
        """
        Projects a geodetic coordinate into UTM.

        Args:
            coordinate:
                The coordinate to project

            datum: (Default WGS84)
                The datum used for projection

            utm_exceptions: (bool) (Default True)
                Whether to apply the Norway and Svalbard zone exceptions

        Returns:
            Utm
        """
        datum = datum or wgs84()
        lat, lon = coordinate.latitude, coordinate.longitude
        band = latitude_band(lat)
        north = lat >= 0

        if coordinate.is_polar:
            warn_once(
                'UPS (polar stereographic) projection is not supported; latitude %s '
                'and all other polar coordinates project to zone 0 at easting/northing 0.',
                lat,
            )
            return cls(0.0, 0.0, north, 0, band, ups=True)

        zone = utm_zone(lat, lon, utm_exceptions)
        x, y, _, _ = TransverseMercator(datum).forward(central_meridian(zone), lat, lon)
        false_easting, false_northing = datum.false_origin(north)
        return cls(x + false_easting, y + false_northing, north, zone, band)

    @classmethod
    def from_mgrs(cls, mgrs_str: str) -> 'Utm':
        """Create a Utm from a MGRS string. Embedded whitespace is ignored."""
        from gridref.mgrs import decode  # pylint: disable=import-outside-toplevel

        return decode(mgrs_str)

    def _reverse(self, datum: Optional[Datum]) -> Tuple[float, float, float, float]:
        if self.ups:
            raise UnsupportedProjectionError(
                'UPS (polar stereographic) coordinates cannot be inverted.'
            )
        check_utm(self)

        datum = datum or wgs84()
        false_easting, false_northing = datum.false_origin(self.north)
        return TransverseMercator(datum).reverse(
            central_meridian(self.zone),
            self.easting - false_easting,
            self.northing - false_northing,
        )

    def to_coordinate(self, datum: Optional[Datum] = None) -> Coordinate:
        """
        Inverse projection back to a geodetic coordinate.

        Args:
            datum: (Default WGS84)
                The datum used for projection

        Returns:
            Coordinate
        """
        lat, lon, _, _ = self._reverse(datum)
        return Coordinate(lat, lon)

    def convergence(self, datum: Optional[Datum] = None) -> float:
        """
        Meridian convergence at this point: the angle, in degrees, from grid north
        clockwise to true north.
        """
        return self._reverse(datum)[2]

    def scale(self, datum: Optional[Datum] = None) -> float:
        """Point scale factor at this point"""
        return self._reverse(datum)[3]

    def to_mgrs(self, precision: int = DEFAULT_MGRS_PRECISION, datum: Optional[Datum] = None) -> str:
        """
        Encode as a MGRS string.

        Args:
            precision: (int) (Default 5)
                Digits per easting/northing, 0 (100km) through 11 (micrometers)

            datum: (Default WGS84)
                The datum used to recover the latitude band

        Returns:
            str
        """
        from gridref.mgrs import encode  # pylint: disable=import-outside-toplevel

        return encode(self, precision, datum)


def check_utm(utm: Utm):
    """
    Raises InvalidUtmError for values which cannot be projected.

    Args:
        utm:
            A non-polar Utm

    Returns:
        None
    """
    if not (math.isfinite(utm.easting) and math.isfinite(utm.northing)):
        raise InvalidUtmError(
            f'Easting and northing must be finite, got {utm.easting}, {utm.northing}'
        )

    if not MIN_UTM_ZONE <= utm.zone <= MAX_UTM_ZONE:
        raise InvalidUtmError(
            f'UTM zone must be within {MIN_UTM_ZONE}..{MAX_UTM_ZONE}, got {utm.zone}'
        )
