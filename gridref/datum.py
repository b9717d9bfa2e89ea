"""
Reference ellipsoid and its precomputed transverse Mercator coefficients
"""

__all__ = ['Datum', 'wgs84']

from dataclasses import dataclass
from functools import lru_cache
import math
from typing import Sequence, Tuple

from gridref._const import (
    FALSE_EASTING, FALSE_NORTHING, MAXPOW, UTM_K0, WGS84_A, WGS84_ALPHA_COEFFS,
    WGS84_B1_COEFFS, WGS84_BETA_COEFFS, WGS84_F
)
from gridref.calc import eatanhe, polyval


def _series_table_length(maxpow: int) -> int:
    """Number of entries needed by an alpha/beta coefficient table of the given order"""
    return sum(m + 2 for m in range(maxpow))


@dataclass(frozen=True)
class Datum:
    """
    An ellipsoid with the constants derived from it. Instances are immutable and
    may be shared freely between threads.

    Use Datum.build() (or wgs84()) rather than instantiating directly.
    """
    a: float
    f: float
    k0: float
    e2: float
    es: float
    e2m: float
    b1: float
    a1: float
    c: float
    n: float
    alp: Tuple[float, ...]
    bet: Tuple[float, ...]
    false_easting: Tuple[float, ...] = FALSE_EASTING
    false_northing: Tuple[float, ...] = FALSE_NORTHING
    maxpow: int = MAXPOW

    @classmethod
    def build(
        cls,
        a: float,
        f: float,
        k0: float,
        alpha_coeffs: Sequence[float],
        beta_coeffs: Sequence[float],
        b1_coeffs: Sequence[float],
    ) -> 'Datum':
        """
        Precomputes the ellipsoid constants and the order 6 Krüger series coefficients.

        Args:
            a:
                Semi-major axis, in meters

            f:
                Flattening

            k0:
                Central scale factor

            alpha_coeffs:
                Coefficient table for the forward series

            beta_coeffs:
                Coefficient table for the reverse series

            b1_coeffs:
                Coefficient table for the rectifying radius

        Returns:
            Datum
        """
        maxpow = MAXPOW
        table_length = _series_table_length(maxpow)
        for name, table in (('alpha', alpha_coeffs), ('beta', beta_coeffs)):
            if len(table) < table_length:
                raise ValueError(
                    f'{name} coefficient table requires {table_length} entries, '
                    f'got {len(table)}'
                )
        if len(b1_coeffs) < maxpow // 2 + 2:
            raise ValueError(
                f'b1 coefficient table requires {maxpow // 2 + 2} entries, got {len(b1_coeffs)}'
            )

        e2 = f * (2 - f)
        es = (-1 if f < 0 else 1) * math.sqrt(abs(e2))
        e2m = 1 - e2
        c = math.sqrt(e2m) * math.exp(eatanhe(1.0, es))
        n = f / (2 - f)

        m = maxpow // 2
        b1 = polyval(m, b1_coeffs, n ** 2) / (b1_coeffs[m + 1] * (1 + n))

        alp, bet = [0.0], [0.0]
        offset, d = 0, n
        for i in range(maxpow):
            m = maxpow - i - 1
            alp.append(d * polyval(m, alpha_coeffs[offset:], n) / alpha_coeffs[offset + m + 1])
            bet.append(d * polyval(m, beta_coeffs[offset:], n) / beta_coeffs[offset + m + 1])
            offset += m + 2
            d *= n

        return cls(
            a=a, f=f, k0=k0, e2=e2, es=es, e2m=e2m, b1=b1, a1=b1 * a, c=c, n=n,
            alp=tuple(alp), bet=tuple(bet), maxpow=maxpow,
        )

    def false_origin(self, north: bool, ups: bool = False) -> Tuple[float, float]:
        """
        The (false easting, false northing) pair for a hemisphere.

        Args:
            north:
                True for the northern hemisphere

            ups:
                True for the polar (UPS) origins

        Returns:
            Tuple of (false easting, false northing), in meters
        """
        index = (0 if ups else 2) + (1 if north else 0)
        return self.false_easting[index], self.false_northing[index]


@lru_cache(maxsize=None)
def wgs84() -> Datum:
    """The WGS84 datum with the UTM scale factor. Computed once and cached."""
    return Datum.build(
        WGS84_A,
        WGS84_F,
        UTM_K0,
        WGS84_ALPHA_COEFFS,
        WGS84_BETA_COEFFS,
        WGS84_B1_COEFFS,
    )
