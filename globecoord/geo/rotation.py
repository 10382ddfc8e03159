"""Axis-angle rotation about lines through the origin.

Rotations follow the right-hand rule: with the thumb pointing from the
origin towards the axis point, a positive angle turns counter-clockwise.
Both helpers use the Rodrigues formula

    v' = v·cosθ + (k × v)·sinθ + k·(k·v)·(1 − cosθ)

where k is the unit vector along the axis. Rotations are isometries about
the origin: they preserve the distance of a point to the origin and to the
axis line.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from globecoord.errors import DegenerateAxisError

logger = logging.getLogger(__name__)


def unit_axis(axis: ArrayLike) -> NDArray[np.float64]:
    """Return the unit vector pointing from the origin towards ``axis``.

    Raises:
        DegenerateAxisError: If ``axis`` is the origin.
    """
    k = np.asarray(axis, dtype=float)
    # scaled, so tiny and huge axes neither underflow nor overflow
    norm = math.hypot(*k)
    if norm == 0.0:
        logger.debug("Refusing to rotate about a zero-length axis %s", k)
        msg = "Rotation axis must not be the origin"
        raise DegenerateAxisError(msg)
    return k / norm


def rotate_vector(vector: ArrayLike, axis: ArrayLike, theta: float) -> NDArray[np.float64]:
    """Rotate a 3D vector by ``theta`` radians about the line origin -> ``axis``.

    Args:
        vector: The (x, y, z) vector to rotate.
        axis: Any point on the rotation axis other than the origin.
        theta: Rotation angle in radians (or an angle unit).

    Returns:
        NDArray[np.float64]: The rotated vector.

    Raises:
        DegenerateAxisError: If ``axis`` is the origin.
    """
    k = unit_axis(axis)
    v = np.asarray(vector, dtype=float)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return v * cos_t + np.cross(k, v) * sin_t + k * np.dot(k, v) * (1.0 - cos_t)


def rotation_matrix(axis: ArrayLike, theta: float) -> NDArray[np.float64]:
    """Build the 3x3 matrix of the rotation used by rotate_vector.

    Useful to rotate many points at once: ``points @ rotation_matrix(a, t).T``.

    Raises:
        DegenerateAxisError: If ``axis`` is the origin.
    """
    kx, ky, kz = unit_axis(axis)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    # cross-product matrix of k
    k_cross = np.array([
        [0.0, -kz, ky],
        [kz, 0.0, -kx],
        [-ky, kx, 0.0],
    ])
    return np.eye(3) + sin_t * k_cross + (1.0 - cos_t) * (k_cross @ k_cross)
