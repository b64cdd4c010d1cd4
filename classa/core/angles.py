"""
Classification angles of reconstructed phase-space points.

Each (Yn, Xn) pair is mapped to a polar angle in [0, 360) degrees. The angle
distribution is summarised by four statistics:

- RAS: mean angle
- P1: fraction of angles in [0, 90)
- P24: fraction of angles in [90, 180) or [270, 360)
- P3: fraction of angles in [180, 270)
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidParameter

ANGLE_UNITS = ("deg", "rad")


class ClassAStats(NamedTuple):
    """Classification statistics (RAS, P1, P24, P3)."""

    ras: float
    p1: float
    p24: float
    p3: float


def classification_angles(yn: NDArray[np.float64], xn: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Compute quadrant-corrected angles of (Yn, Xn) pairs, in degrees.

    The raw angle is arctan(Yn / Xn). Points in the second and third quadrants
    are shifted by 180 degrees and points in the fourth quadrant by 360 degrees,
    so every angle lies in [0, 360). The undefined ratio 0/0 maps to 0.

    Parameters
    ----------
    yn, xn : arrays (n,)
        Phase-space coordinates

    Returns
    -------
    array (n,)
        Angles in degrees
    """
    yn = np.asarray(yn, dtype=np.float64)
    xn = np.asarray(xn, dtype=np.float64)
    if yn.shape != xn.shape:
        raise InvalidParameter(
            f"yn and xn must have the same shape, got {yn.shape} and {xn.shape}"
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        theta = np.degrees(np.arctan(yn / xn))

    theta = np.where((yn < 0) & (xn < 0), theta + 180.0, theta)
    # xn == 0 with yn < 0 gives arctan(-inf) = -90, i.e. 270 after the shift
    theta = np.where((yn < 0) & (xn >= 0), theta + 360.0, theta)
    theta = np.where((yn > 0) & (xn < 0), theta + 180.0, theta)
    theta = np.where(np.isnan(theta), 0.0, theta)

    # Tiny negative angles round to exactly 360 after the shift
    theta = np.where(theta >= 360.0, theta - 360.0, theta)
    # Clear negative zeros left by arctan(-0.0)
    return theta + 0.0


def classification_stats(theta: NDArray[np.float64]) -> ClassAStats:
    """
    Summarise an angle sequence (degrees) into RAS, P1, P24 and P3.

    Bin boundaries are lower-inclusive, so the three proportions partition
    [0, 360) and sum to one.
    """
    theta = np.asarray(theta, dtype=np.float64)
    n = len(theta)
    if n == 0:
        raise InvalidParameter("Cannot classify an empty angle sequence")

    n1 = np.count_nonzero((theta >= 0.0) & (theta < 90.0))
    n3 = np.count_nonzero((theta >= 180.0) & (theta < 270.0))
    n24 = np.count_nonzero(
        ((theta >= 90.0) & (theta < 180.0)) | ((theta >= 270.0) & (theta < 360.0))
    )

    return ClassAStats(
        ras=float(np.mean(theta)),
        p1=n1 / n,
        p24=n24 / n,
        p3=n3 / n,
    )


def to_angle_unit(stats: ClassAStats, unit: str = "deg") -> ClassAStats:
    """
    Express classification statistics in the requested angle unit.

    ``unit="rad"`` multiplies all four fields by pi/180. Only RAS is an angle;
    P1, P24 and P3 are proportions, yet they are scaled too for compatibility with
    existing ClassA outputs. Treat the radian proportions with suspicion.
    """
    unit = check_angle_unit(unit)
    if unit == "deg":
        return stats
    return ClassAStats(*(float(v) * np.pi / 180.0 for v in stats))


def check_angle_unit(unit) -> str:
    if not isinstance(unit, str) or unit.strip().lower() not in ANGLE_UNITS:
        raise InvalidParameter(f"angle_unit must be one of {ANGLE_UNITS}, got {unit!r}")
    return unit.strip().lower()
