""" Numeric helpers for the transverse Mercator series """

__all__ = [
    'angle_diff', 'angle_normalize', 'eatanhe', 'fmod', 'polyval',
    'remainder', 'tauf', 'taupf'
]

import math
import sys
from typing import Sequence

from gridref.utils.logging import LOGGER

_TAUF_ITERATIONS = 5
_TAUF_TOLERANCE = math.sqrt(sys.float_info.epsilon) / 10


def eatanhe(x: float, es: float) -> float:
    """
    Computes e * atanh(e * x) for a signed eccentricity. A negative eccentricity
    denotes a prolate ellipsoid, in which case the circular counterpart is used.

    Args:
        x:
            The value to transform

        es:
            The signed eccentricity of the ellipsoid

    Returns:
        float
    """
    if es > 0:
        return es * math.atanh(es * x)

    return -es * math.atan(es * x)


def taupf(tau: float, es: float) -> float:
    """
    Converts tan(phi) of a geodetic latitude to tan(chi) of the conformal latitude.

    Args:
        tau:
            Tangent of the geodetic latitude

        es:
            The signed eccentricity of the ellipsoid

    Returns:
        float
    """
    tau1 = math.hypot(1.0, tau)
    sig = math.sinh(eatanhe(tau / tau1, es))
    return math.hypot(1.0, sig) * tau - sig * tau1


def tauf(taup: float, es: float) -> float:
    """
    Inverse of taupf, solved with Newton's method.

    Stops after 5 iterations or once the correction falls below
    sqrt(epsilon) / 10 (scaled by max(|taup|, 1)), whichever comes first.

    Args:
        taup:
            Tangent of the conformal latitude

        es:
            The signed eccentricity of the ellipsoid

    Returns:
        float, the tangent of the geodetic latitude
    """
    e2m = 1.0 - es ** 2
    tau = taup / e2m
    stol = _TAUF_TOLERANCE * max(abs(taup), 1.0)
    for _ in range(_TAUF_ITERATIONS):
        taupa = taupf(tau, es)
        dtau = (taup - taupa) * (1 + e2m * tau ** 2) / (
            e2m * math.hypot(1.0, tau) * math.hypot(1.0, taupa)
        )
        tau += dtau
        if not abs(dtau) >= stol:
            break
    else:
        LOGGER.debug('tauf did not converge for taup=%r; last correction %r', taup, dtau)

    return tau


def fmod(a: float, b: float) -> float:
    """Floating point modulus which keeps the sign of a (C fmod)"""
    return math.fmod(a, b)


def remainder(numer: float, denom: float) -> float:
    """IEEE 754 remainder; the result lies within [-denom/2, denom/2]"""
    return math.remainder(numer, denom)


def angle_normalize(degrees: float) -> float:
    """
    Reduces an angle to the range (-180, 180].

    Args:
        degrees:
            The angle, in degrees

    Returns:
        float
    """
    x = remainder(degrees, 360.0)
    return 180.0 if x == -180.0 else x


def angle_diff(x: float, y: float) -> float:
    """
    The normalized difference y - x between two angles, in degrees. Each angle is
    reduced on its own before subtracting so that large inputs keep their precision.

    Args:
        x:
            The first angle, in degrees

        y:
            The second angle, in degrees

    Returns:
        float
    """
    return angle_normalize(remainder(-x, 360.0) + remainder(y, 360.0))


def polyval(order: int, coefficients: Sequence[float], x: float) -> float:
    """
    Evaluates a polynomial with Horner's method.

    Args:
        order:
            The order of the polynomial; coefficients[0:order + 1] are used

        coefficients:
            Coefficients, highest power first. [1.0, 0.0, -3.5] is x**2 - 3.5

        x:
            The value at which to evaluate

    Returns:
        float
    """
    y = 0.0
    for coefficient in coefficients[:order + 1]:
        y = y * x + coefficient

    return y
