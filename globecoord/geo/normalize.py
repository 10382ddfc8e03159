"""Angle normalization for geographic coordinates.

Longitudes live in the half-open range [-π, +π) and latitudes in the closed
range [-π/2, +π/2]. The functions here map any raw angle (in radians, or an
angle unit) into those ranges.

Longitude adjustment:
    Both boundaries of the longitude range are consecutive, so overflowing
    one is the same as continuing from the other in the same direction:
    π + ε becomes -π + ε. The value π itself is canonicalized to -π.

Latitude adjustment:
    Overflowing a latitude boundary means passing over a pole and moving
    back towards the other one. Passing a pole also moves the point to the
    opposite half of its meridian circle, which shifts the longitude by
    exactly π. normalize_latitude returns that shift so the caller can apply
    it; a raw latitude that completes full laps without a residual pole
    crossing yields no shift.

Example:
    >>> normalize_longitude(math.pi + 1)  # -π + 1
    -2.141592653589793
    >>> normalize_latitude(-5 * math.pi / 4)  # (π/4, π)
    (0.7853981633974483, 3.141592653589793)
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi
HALF_TURN = math.pi
QUARTER_TURN = math.pi / 2


def _wrap(raw: float) -> float:
    """Reduce an angle modulo 2π into [-π, +π)."""
    raw = float(raw)
    if -HALF_TURN <= raw < HALF_TURN:
        return raw
    reduced = (raw + HALF_TURN) % FULL_TURN - HALF_TURN
    # float modulo may round up to the divisor itself
    if reduced >= HALF_TURN:
        reduced -= FULL_TURN
    return reduced


def normalize_longitude(raw: float) -> float:
    """Map a longitude in radians into [-π, +π).

    Args:
        raw: Longitude in radians (any value).

    Returns:
        float: The equivalent longitude in [-π, +π). NaN and infinite input
        yield NaN.
    """
    return _wrap(raw)


def normalize_latitude(raw: float) -> tuple[float, float]:
    """Map a latitude in radians into [-π/2, +π/2].

    Args:
        raw: Latitude in radians (any value).

    Returns:
        tuple[float, float]: ``(latitude, longitude_delta)`` where
        ``longitude_delta`` is π when the raw value crossed a pole and 0
        otherwise. Callers add the delta to the current longitude and
        normalize the result with normalize_longitude.
    """
    reduced = _wrap(raw)
    if reduced > QUARTER_TURN:
        return HALF_TURN - reduced, HALF_TURN
    if reduced < -QUARTER_TURN:
        return -HALF_TURN - reduced, HALF_TURN
    return reduced, 0.0


def normalize(longitude: float, latitude: float) -> tuple[float, float]:
    """Normalize a longitude/latitude pair, applying the pole-crossing flip.

    Args:
        longitude: Raw longitude in radians.
        latitude: Raw latitude in radians.

    Returns:
        tuple[float, float]: Normalized ``(longitude, latitude)``.
    """
    latitude, delta = normalize_latitude(latitude)
    if delta:
        logger.debug("Latitude crossed a pole, shifting longitude by %s", delta)
    return normalize_longitude(float(longitude) + delta), latitude
