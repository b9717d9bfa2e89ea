from pytest import approx

from gridref import Coordinate, Utm


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(c1.latitude, c1.longitude)
        print(c2.latitude, c2.longitude)
        raise e


def assert_utms_equal(u1: Utm, u2: Utm, abs_tol=1e-3):
    """
    Asserts that two Utms are in the same zone/band/hemisphere and within
    abs_tol meters of each other.
    """
    assert (u1.zone, u1.band, u1.north, u1.ups) == (u2.zone, u2.band, u2.north, u2.ups)
    assert u1.easting == approx(u2.easting, abs=abs_tol)
    assert u1.northing == approx(u2.northing, abs=abs_tol)
