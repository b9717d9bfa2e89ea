import math

import pytest

from gridref import Coordinate, InvalidCoordinateError, Utm
from tests.functions import assert_coordinates_equal


def test_coordinate_init():
    c = Coordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.

    c = Coordinate('1.0', '0.0')
    assert c.latitude == 1.
    assert c.longitude == 0.

    # Boundaries are inclusive
    assert Coordinate(90., 180.).to_float() == (90., 180.)
    assert Coordinate(-90., -180.).to_float() == (-90., -180.)


@pytest.mark.parametrize('lat, lon', [
    (-90.0001, 0.), (90.0001, 0.), (0., -180.0001), (0., 180.0001),
    (math.nan, 0.), (0., math.nan), (math.inf, 0.), (0., -math.inf),
])
def test_coordinate_init_invalid(lat, lon):
    with pytest.raises(InvalidCoordinateError):
        Coordinate(lat, lon)

    # Also a ValueError
    with pytest.raises(ValueError):
        Coordinate(lat, lon)


def test_coordinate_immutable():
    c = Coordinate(1., 2.)
    with pytest.raises(AttributeError):
        c.latitude = 5.

    with pytest.raises(AttributeError):
        c.foo = 5.


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(1., 0.)) == '<Coordinate(1.0, 0.0)>'


def test_coordinate_str():
    assert str(Coordinate(-23.0095839, -43.4361816)) == '(-23.0095839, -43.4361816)'


def test_coordinate_to_float():
    assert Coordinate(1., 0.).to_float() == (1.0, 0.0)
    assert Coordinate(1., 0.).to_float(reverse=True) == (0.0, 1.0)


def test_coordinate_is_polar():
    assert not Coordinate(-80., 0.).is_polar
    assert not Coordinate(83.999, 0.).is_polar
    assert Coordinate(-80.001, 0.).is_polar
    assert Coordinate(84., 0.).is_polar


def test_coordinate_to_utm():
    utm = Coordinate(-23.0095839, -43.4361816).to_utm()
    assert isinstance(utm, Utm)
    assert utm.zone == 23
    assert utm.band == 'K'
    assert math.trunc(utm.easting) == 660265
    assert math.trunc(utm.northing) == 7454564

    # Zone exceptions can be disabled
    assert Coordinate(61.076521, 4.680180).to_utm().zone == 32
    assert Coordinate(61.076521, 4.680180).to_utm(utm_exceptions=False).zone == 31


def test_coordinate_from_utm():
    utm = Utm(660265.094407, 7454564.243306, False, 23, 'K')
    assert_coordinates_equal(
        Coordinate.from_utm(utm),
        Coordinate(-23.0095839, -43.4361816),
    )


def test_coordinate_to_mgrs():
    assert Coordinate(0., 0.).to_mgrs() == '31NAA6602100000'
    assert Coordinate(-23.00958611, -43.43618250).to_mgrs() == '23KPQ6026454563'
    assert Coordinate(-23.00958611, -43.43618250).to_mgrs(precision=1) == '23KPQ65'


def test_coordinate_from_mgrs():
    assert_coordinates_equal(
        Coordinate.from_mgrs('31NAA6602100000'),
        Coordinate(0., 0.),
        abs_tol=1e-5,
    )
    assert_coordinates_equal(
        Coordinate.from_mgrs('48P UV 77298 83034'),
        Coordinate(13.4125, 103.8667),
        abs_tol=1e-3,
    )


def test_coordinate_mgrs_matches_mgrs_package():
    mgrs = pytest.importorskip('mgrs')
    _MGRS = mgrs.MGRS()

    # The mgrs package rounds its digits rather than truncating, so only the grid
    # square is compared when encoding
    for lat, lon in (
        (0.5, 0.5), (13.41250188, 103.86666901), (-23.00958611, -43.43618250),
        (51.4778, -0.0014), (40.6892, -74.0445), (-33.8568, 151.2153),
    ):
        assert Coordinate(lat, lon).to_mgrs()[:5] == _MGRS.toMGRS(lat, lon)[:5]

    for mgrs_str in (
        '31NAA6602100000', '48PUV7729883034', '23KPQ6026454563', '30UYC0822007224',
        '18TWL8073504695', '56HLH3490052288',
    ):
        lat, lon = _MGRS.toLatLon(mgrs_str)
        assert_coordinates_equal(Coordinate.from_mgrs(mgrs_str), Coordinate(lat, lon))
