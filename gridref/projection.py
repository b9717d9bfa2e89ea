"""
Transverse Mercator projection using the order 6 Krüger series

The forward series maps conformal coordinates (xi', eta') to rectifying ones
(xi, eta) with the alpha coefficients; the reverse series maps back with beta.
Both are summed with Clenshaw's recurrence over complex numbers, which also yields
the derivative used for meridian convergence and point scale.
"""

__all__ = ['TransverseMercator']

import math
from typing import Sequence, Tuple

from gridref.calc import angle_diff, angle_normalize, tauf, taupf
from gridref.datum import Datum
from gridref.utils.functions import sign


def _clenshaw(
    coefficients: Sequence[float],
    maxpow: int,
    xi: float,
    eta: float,
    direction: int,
) -> Tuple[complex, complex]:
    """
    Sums the series xi + i*eta + sum(c[j] * sin(2j * (xi + i*eta))) and its derivative.

    Args:
        coefficients:
            Series coefficients, c[1..maxpow] (c[0] is unused and zero)

        maxpow:
            Order of the series

        xi:
            Real part of the argument

        eta:
            Imaginary part of the argument

        direction:
            1 to add the series (forward), -1 to subtract it (reverse)

    Returns:
        Tuple of (summed value, derivative)
    """
    c0, ch0 = math.cos(2 * xi), math.cosh(2 * eta)
    s0, sh0 = math.sin(2 * xi), math.sinh(2 * eta)
    a = complex(2 * c0 * ch0, -2 * s0 * sh0)

    n = maxpow
    y0 = complex(direction * coefficients[n] if n & 1 else 0.0)
    z0 = complex(direction * 2 * n * coefficients[n] if n & 1 else 0.0)
    y1 = z1 = 0j
    if n & 1:
        n -= 1

    while n:
        y1 = a * y0 - y1 + direction * coefficients[n]
        z1 = a * z0 - z1 + direction * 2 * n * coefficients[n]
        n -= 1
        y0 = a * y1 - y0 + direction * coefficients[n]
        z0 = a * z1 - z0 + direction * 2 * n * coefficients[n]
        n -= 1

    a /= 2
    z1 = 1 - z1 + a * z0
    a = complex(s0 * ch0, c0 * sh0)
    y1 = complex(xi, eta) + a * y0
    return y1, z1


class TransverseMercator:
    """
    Transverse Mercator projection about an arbitrary central meridian. Output is in
    meters relative to the central meridian and the equator (no false origin).

    Args:
        datum:
            The ellipsoid and its series coefficients
    """

    def __init__(self, datum: Datum):
        self.datum = datum

    def __repr__(self):
        return f'<TransverseMercator(a={self.datum.a}, f={self.datum.f}, k0={self.datum.k0})>'

    def forward(self, lon0: float, lat: float, lon: float) -> Tuple[float, float, float, float]:
        """
        Projects a geodetic coordinate.

        Args:
            lon0:
                Central meridian, in degrees

            lat:
                Latitude, in degrees

            lon:
                Longitude, in degrees

        Returns:
            Tuple of (x, y, convergence in degrees, point scale)
        """
        datum = self.datum
        lon = angle_diff(lon0, lon)

        latsign, lonsign = sign(lat), sign(lon)
        lat *= latsign
        lon *= lonsign

        # Points more than 90 degrees from the central meridian lie on the far side
        backside = lon > 90
        if backside:
            if lat == 0:
                latsign = -1
            lon = 180 - lon

        sphi, cphi = math.sin(math.radians(lat)), math.cos(math.radians(lat))
        slam, clam = math.sin(math.radians(lon)), math.cos(math.radians(lon))

        if lat != 90:
            tau = sphi / cphi
            taup = taupf(tau, datum.es)
            xip = math.atan2(taup, clam)
            etap = math.asinh(slam / math.hypot(taup, clam))
            gamma = math.degrees(math.atan2(slam * taup, clam * math.hypot(1.0, taup)))
            k = math.sqrt(datum.e2m + datum.e2 * cphi ** 2) * math.hypot(1.0, tau) / \
                math.hypot(taup, clam)
        else:
            xip = math.pi / 2
            etap = 0.0
            gamma = lon
            k = datum.c

        y1, z1 = _clenshaw(datum.alp, datum.maxpow, xip, etap, 1)
        gamma -= math.degrees(math.atan2(z1.imag, z1.real))
        k *= datum.b1 * abs(z1)

        xi, eta = y1.real, y1.imag
        y = datum.a1 * datum.k0 * (math.pi - xi if backside else xi) * latsign
        x = datum.a1 * datum.k0 * eta * lonsign

        if backside:
            gamma = 180 - gamma
        gamma = angle_normalize(gamma * latsign * lonsign)

        return x, y, gamma, k * datum.k0

    def reverse(self, lon0: float, x: float, y: float) -> Tuple[float, float, float, float]:
        """
        Inverse projection, back to a geodetic coordinate.

        Args:
            lon0:
                Central meridian, in degrees

            x:
                Easting relative to the central meridian, in meters

            y:
                Northing relative to the equator, in meters

        Returns:
            Tuple of (latitude, longitude, convergence in degrees, point scale)
        """
        datum = self.datum
        xi = y / (datum.a1 * datum.k0)
        eta = x / (datum.a1 * datum.k0)

        xisign, etasign = sign(xi), sign(eta)
        xi *= xisign
        eta *= etasign

        backside = xi > math.pi / 2
        if backside:
            xi = math.pi - xi

        y1, z1 = _clenshaw(datum.bet, datum.maxpow, xi, eta, -1)
        gamma = math.degrees(math.atan2(z1.imag, z1.real))
        k = datum.b1 / abs(z1)

        xip, etap = y1.real, y1.imag
        s = math.sinh(etap)
        c = max(0.0, math.cos(xip))
        r = math.hypot(s, c)
        if r != 0:
            lon = math.degrees(math.atan2(s, c))
            sxip = math.sin(xip)
            tau = tauf(sxip / r, datum.es)
            gamma += math.degrees(math.atan2(sxip * math.tanh(etap), c))
            lat = math.degrees(math.atan(tau))
            k *= math.sqrt(datum.e2m + datum.e2 / (1 + tau ** 2)) * math.hypot(1.0, tau) * r
        else:
            # Pole
            lat, lon = 90.0, 0.0
            k *= datum.c

        lat *= xisign
        if backside:
            lon = 180 - lon
        lon = angle_normalize(lon * etasign + lon0)

        if backside:
            gamma = 180 - gamma
        gamma = angle_normalize(gamma * xisign * etasign)

        return lat, lon, gamma, k * datum.k0
