"""Latitude-dependent conversion between arc-seconds and metres.

Spherical-Earth approximation: one arc-minute of a great circle is one
nautical mile (1852 m), so one arc-second is 1852/60 m at the equator. Arcs
of longitude narrow with the cosine of latitude. The absolute value keeps
the scale non-negative for latitudes beyond ±90°.

Both functions scale by ``|cos(latitude)|``; off the equator they are
therefore not inverses of each other.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..constants import DEGREES_TO_RADIANS, METRES_PER_ARC_SECOND
from ..scalar import as_scalar
from .linear import LinearCategory


def arc_seconds_to_metres(arc_seconds, latitude_degrees=0.0):
    """Convert arc-seconds to metres at a given latitude.

    Args:
        arc_seconds: Angular distance in arc-seconds (scalar or array-like).
        latitude_degrees: Latitude in degrees. Defaults to the equator.

    Returns:
        ``arc_seconds * |cos(lat) * 1852/60|`` in metres.
    """
    cos_lat = np.cos(DEGREES_TO_RADIANS * as_scalar(latitude_degrees))
    return as_scalar(arc_seconds) * np.abs(cos_lat * METRES_PER_ARC_SECOND)


def metres_to_arc_seconds(metres, latitude_degrees=0.0):
    """Convert metres to arc-seconds at a given latitude.

    Args:
        metres: Distance in metres (scalar or array-like).
        latitude_degrees: Latitude in degrees. Defaults to the equator.

    Returns:
        ``metres * |cos(lat) / (1852/60)|`` in arc-seconds.
    """
    cos_lat = np.cos(DEGREES_TO_RADIANS * as_scalar(latitude_degrees))
    return as_scalar(metres) * np.abs(cos_lat / METRES_PER_ARC_SECOND)


@dataclass(frozen=True, eq=False)
class DistanceCategory(LinearCategory):
    """Linear distance category with the geospatial helpers attached."""

    arc_seconds_to_metres = staticmethod(arc_seconds_to_metres)
    metres_to_arc_seconds = staticmethod(metres_to_arc_seconds)
