"""
Batch conversion of coordinate arrays
"""

__all__ = ['from_utm_array', 'to_utm_array']

from typing import Optional, Union

import numpy as np

from gridref._const import MAX_UTM_ZONE, MIN_UTM_ZONE
from gridref.coordinates import Coordinate
from gridref.datum import Datum, wgs84
from gridref.errors import InvalidUtmError
from gridref.projection import TransverseMercator
from gridref.utm import Utm, central_meridian


def to_utm_array(latitudes, longitudes, datum: Optional[Datum] = None) -> np.ndarray:
    """
    Projects arrays of latitudes and longitudes into UTM.

    Args:
        latitudes:
            Array-like of latitudes, in degrees

        longitudes:
            Array-like of longitudes, in degrees, the same shape as latitudes

        datum: (Default WGS84)
            The datum used for projection

    Returns:
        np.ndarray of shape (n, 3); columns are easting, northing and zone
    """
    lats = np.atleast_1d(np.asarray(latitudes, dtype=float)).ravel()
    lons = np.atleast_1d(np.asarray(longitudes, dtype=float)).ravel()
    if lats.shape != lons.shape:
        raise ValueError(
            f'latitudes and longitudes must be the same length, got {lats.size} and {lons.size}'
        )

    out = np.empty((lats.size, 3), dtype=float)
    for i, (lat, lon) in enumerate(zip(lats, lons)):
        utm = Utm.from_coordinate(Coordinate(lat, lon), datum)
        out[i] = (utm.easting, utm.northing, utm.zone)

    return out


def from_utm_array(
    eastings,
    northings,
    zones,
    north: Union[bool, np.ndarray],
    datum: Optional[Datum] = None,
) -> np.ndarray:
    """
    Inverse projection of arrays of UTM eastings and northings.

    Args:
        eastings:
            Array-like of eastings, in meters

        northings:
            Array-like of northings, in meters

        zones:
            UTM zone, as a single int or one per point

        north:
            Hemisphere, as a single bool or one per point

        datum: (Default WGS84)
            The datum used for projection

    Returns:
        np.ndarray of shape (n, 2); columns are latitude and longitude
    """
    datum = datum or wgs84()
    projection = TransverseMercator(datum)
    eastings, northings, zones, north = np.broadcast_arrays(
        np.atleast_1d(np.asarray(eastings, dtype=float)).ravel(),
        np.atleast_1d(np.asarray(northings, dtype=float)).ravel(),
        np.atleast_1d(np.asarray(zones, dtype=int)).ravel(),
        np.atleast_1d(np.asarray(north, dtype=bool)).ravel(),
    )

    if not (np.isfinite(eastings).all() and np.isfinite(northings).all()):
        raise InvalidUtmError('Eastings and northings must be finite')
    if ((zones < MIN_UTM_ZONE) | (zones > MAX_UTM_ZONE)).any():
        raise InvalidUtmError(
            f'UTM zones must be within {MIN_UTM_ZONE}..{MAX_UTM_ZONE}, got {np.unique(zones)}'
        )

    out = np.empty((eastings.size, 2), dtype=float)
    for i, (easting, northing, zone, is_north) in enumerate(
        zip(eastings, northings, zones, north)
    ):
        false_easting, false_northing = datum.false_origin(bool(is_north))
        lat, lon, _, _ = projection.reverse(
            central_meridian(int(zone)), easting - false_easting, northing - false_northing
        )
        out[i] = (lat, lon)

    return out
