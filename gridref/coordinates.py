"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Optional, Tuple, Union

from gridref._const import DEFAULT_MGRS_PRECISION
from gridref.datum import Datum
from gridref.errors import InvalidCoordinateError


class Coordinate:
    """
    Representation of a geodetic coordinate on the WGS84 ellipsoid (i.e., a lat/lon pair).

    Values outside of [-90, 90] (latitude) or [-180, 180] (longitude), as well as
    NaN and infinities, raise InvalidCoordinateError. Coordinates are immutable.

    Args:
        latitude:
            Latitude, in degrees

        longitude:
            Longitude, in degrees
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not (-90 <= lat <= 90 and -180 <= lon <= 180):
            raise InvalidCoordinateError(lat, lon)

        object.__setattr__(self, '_latitude', lat)
        object.__setattr__(self, '_longitude', lon)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    def __str__(self):
        return f'({self.latitude}, {self.longitude})'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def is_polar(self) -> bool:
        """True where UTM does not apply (south of 80S, or at/north of 84N)"""
        return self.latitude < -80 or self.latitude >= 84

    @classmethod
    def from_mgrs(cls, mgrs_str: str, datum: Optional[Datum] = None) -> 'Coordinate':
        """
        Create a Coordinate from a MGRS string. Embedded whitespace is ignored.

        Args:
            mgrs_str:
                A MGRS grid reference, e.g. '48P UV 77298 83034'

            datum: (Default WGS84)
                The datum used for the inverse projection

        Returns:
            Coordinate
        """
        from gridref.mgrs import decode  # pylint: disable=import-outside-toplevel

        return decode(mgrs_str).to_coordinate(datum)

    @classmethod
    def from_utm(cls, utm, datum: Optional[Datum] = None) -> 'Coordinate':
        """Create a Coordinate from a Utm (inverse projection)"""
        return utm.to_coordinate(datum)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of length 2
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_mgrs(self, precision: int = DEFAULT_MGRS_PRECISION, datum: Optional[Datum] = None) -> str:
        """
        Convert this coordinate to a MGRS string.

        Args:
            precision: (int) (Default 5)
                Digits per easting/northing, 0 (100km) through 11 (micrometers)

            datum: (Default WGS84)
                The datum used for projection

        Returns:
            str
        """
        from gridref.mgrs import encode  # pylint: disable=import-outside-toplevel

        return encode(self.to_utm(datum), precision, datum)

    def to_utm(self, datum: Optional[Datum] = None, utm_exceptions: bool = True):
        """
        Project this coordinate into UTM.

        Args:
            datum: (Default WGS84)
                The datum used for projection

            utm_exceptions: (bool) (Default True)
                Whether to apply the Norway and Svalbard zone exceptions

        Returns:
            Utm
        """
        from gridref.utm import Utm  # pylint: disable=import-outside-toplevel

        return Utm.from_coordinate(self, datum, utm_exceptions)
