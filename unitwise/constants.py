"""Centralized physical and numeric constants."""

from __future__ import annotations

import numpy as np

from .scalar import Scalar

# Temperature
ABSOLUTE_ZERO: Scalar = Scalar("0.0")
# Upper bound used by clamp_temperature, K.
PLANCK_TEMPERATURE: Scalar = Scalar("1.42e35")
# CODATA 2018 Planck temperature, K. Pass as planck_temperature= to opt in.
CODATA_PLANCK_TEMPERATURE: Scalar = Scalar("1.416784e32")
CELSIUS_OFFSET: Scalar = Scalar("273.15")
# Offset used by older callers that expect 0 °C == 272.15 K.
LEGACY_CELSIUS_OFFSET: Scalar = Scalar("272.15")
FAHRENHEIT_OFFSET: Scalar = Scalar("459.67")
FAHRENHEIT_SCALE: Scalar = Scalar("1.8")

# Angles
PI: Scalar = Scalar(4) * np.arctan(Scalar(1))
DEGREES_TO_RADIANS: Scalar = PI / Scalar(180)
RADIANS_TO_DEGREES: Scalar = Scalar(180) / PI

# Geospatial
NAUTICAL_MILE_METRES: Scalar = Scalar("1852.0")
# One arc-minute of a great circle is one nautical mile.
METRES_PER_ARC_SECOND: Scalar = NAUTICAL_MILE_METRES / Scalar(60)
