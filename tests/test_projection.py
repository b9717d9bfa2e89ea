import pytest

from gridref.datum import wgs84
from gridref.projection import TransverseMercator


@pytest.fixture
def projection():
    return TransverseMercator(wgs84())


def test_forward_origin(projection):
    x, y, gamma, k = projection.forward(3., 0., 3.)
    assert x == 0.
    assert y == 0.
    assert gamma == 0.
    assert k == pytest.approx(0.9996, abs=1e-12)


def test_forward_central_meridian(projection):
    # Meridian arc to 45N, scaled by k0
    x, y, gamma, k = projection.forward(3., 45., 3.)
    assert x == pytest.approx(0., abs=1e-9)
    assert y == pytest.approx(4982950.400227, abs=1e-5)
    assert gamma == pytest.approx(0., abs=1e-12)
    assert k == pytest.approx(0.9996, abs=1e-12)


def test_forward_pole(projection):
    x, y, gamma, k = projection.forward(3., 90., 10.)
    assert x == pytest.approx(0., abs=1e-9)
    assert y == pytest.approx(9997964.943021, abs=1e-5)
    # The pole lies on the central meridian, where scale is exactly k0
    assert k == pytest.approx(0.9996, abs=1e-12)


def test_forward_convergence_and_scale(projection):
    # East of the central meridian in the north, grid north is west of true north
    _, _, gamma, k = projection.forward(-45., 40., -42.)
    assert gamma > 0
    assert k > 0.9996

    _, _, gamma, _ = projection.forward(-45., 40., -48.)
    assert gamma < 0

    _, _, gamma, _ = projection.forward(-45., -40., -42.)
    assert gamma < 0


def test_forward_symmetry(projection):
    x1, y1, _, _ = projection.forward(0., 30., 2.)
    x2, y2, _, _ = projection.forward(0., -30., -2.)
    assert x1 == pytest.approx(-x2)
    assert y1 == pytest.approx(-y2)


def test_reverse(projection):
    lat, lon, gamma, k = projection.reverse(3., 0., 4982950.400227)
    assert lat == pytest.approx(45., abs=1e-10)
    assert lon == pytest.approx(3., abs=1e-10)
    assert gamma == pytest.approx(0., abs=1e-12)
    assert k == pytest.approx(0.9996, abs=1e-12)


def test_reverse_pole(projection):
    lat, lon, _, k = projection.reverse(3., 0., 9997964.943021)
    assert lat == pytest.approx(90., abs=1e-7)
    assert k == pytest.approx(0.9996, rel=1e-9)


@pytest.mark.parametrize('lat, lon', [
    (0., 0.5), (12.5, 2.), (-37.2, -1.7), (62., 2.9), (-79.9, 2.5), (83.9, -2.8),
    (45., 20.), (-10., 8.),
])
def test_round_trip(projection, lat, lon):
    x, y, gamma, k = projection.forward(0., lat, lon)
    lat2, lon2, gamma2, k2 = projection.reverse(0., x, y)
    assert lat2 == pytest.approx(lat, abs=1e-9)
    assert lon2 == pytest.approx(lon, abs=1e-9)
    assert gamma2 == pytest.approx(gamma, abs=1e-9)
    assert k2 == pytest.approx(k, rel=1e-9)


def test_round_trip_backside(projection):
    # More than 90 degrees from the central meridian
    x, y, _, _ = projection.forward(0., 10., 170.)
    lat, lon, _, _ = projection.reverse(0., x, y)
    assert lat == pytest.approx(10., abs=1e-9)
    assert lon == pytest.approx(170., abs=1e-9)
