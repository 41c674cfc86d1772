# -*- coding: utf-8 -*-
"""
IO Models Common - Primitive types used by every SICD schema version.

Coordinates (XYZ, LatLon, LatLonHAE, RowCol) and polynomials (Poly1D,
Poly2D, XYZPoly) appear with the same XML layout in the 0.x and 1.x
schemas, so both families build on these.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass
from typing import Optional

# Third-party
import numpy as np


def _coefs_equal(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> bool:
    """Value equality of two coefficient arrays, either possibly None."""
    if a is None or b is None:
        return a is b
    return bool(np.array_equal(a, b))


@dataclass
class XYZ:
    """ECF (Earth-Centered Fixed) vector, meters or m/s."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class LatLon:
    """WGS-84 latitude/longitude in degrees."""

    lat: float = 0.0
    lon: float = 0.0


@dataclass
class LatLonHAE:
    """WGS-84 point with Height Above Ellipsoid (meters)."""

    lat: float = 0.0
    lon: float = 0.0
    hae: float = 0.0


@dataclass
class RowCol:
    """Pixel coordinate in the full image."""

    row: float = 0.0
    col: float = 0.0


@dataclass(eq=False)
class Poly1D:
    """1D polynomial, ``coefs[i]`` multiplies ``x**i``.

    Parameters
    ----------
    coefs : numpy.ndarray, optional
        Coefficients, shape ``(order1 + 1,)``.
    """

    coefs: Optional[np.ndarray] = None

    def __call__(self, x):
        return np.polynomial.polynomial.polyval(x, self.coefs)

    def __eq__(self, other):
        if not isinstance(other, Poly1D):
            return NotImplemented
        return _coefs_equal(self.coefs, other.coefs)


@dataclass(eq=False)
class Poly2D:
    """2D polynomial, ``coefs[i, j]`` multiplies ``x**i * y**j``.

    Parameters
    ----------
    coefs : numpy.ndarray, optional
        Coefficients, shape ``(order1 + 1, order2 + 1)``.
    """

    coefs: Optional[np.ndarray] = None

    def __call__(self, x, y):
        return np.polynomial.polynomial.polyval2d(x, y, self.coefs)

    def __eq__(self, other):
        if not isinstance(other, Poly2D):
            return NotImplemented
        return _coefs_equal(self.coefs, other.coefs)


@dataclass
class XYZPoly:
    """ECF position polynomial, one Poly1D in time per component."""

    x: Optional[Poly1D] = None
    y: Optional[Poly1D] = None
    z: Optional[Poly1D] = None
