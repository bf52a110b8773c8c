"""Rotation units, aliases and factors (base unit: degrees)."""

from __future__ import annotations

from enum import Enum

from ..constants import RADIANS_TO_DEGREES


class RotationUnit(Enum):
    GRADIAN = "gradian"
    DEGREE = "degree"
    RADIAN = "radian"
    TURN = "turn"


BASE_UNIT = RotationUnit.DEGREE

ALIASES = (
    ("grad", RotationUnit.GRADIAN),
    ("gradians", RotationUnit.GRADIAN),
    ("°", RotationUnit.DEGREE),
    ("d", RotationUnit.DEGREE),
    ("deg", RotationUnit.DEGREE),
    ("degree", RotationUnit.DEGREE),
    ("degrees", RotationUnit.DEGREE),
    ("rad", RotationUnit.RADIAN),
    ("radians", RotationUnit.RADIAN),
    ("turns", RotationUnit.TURN),
    ("turn", RotationUnit.TURN),
    ("cycle", RotationUnit.TURN),
    ("pla", RotationUnit.TURN),
    ("rev", RotationUnit.TURN),
    ("tr", RotationUnit.TURN),
)

SYMBOLS = {
    RotationUnit.GRADIAN: "grad",
    RotationUnit.DEGREE: "deg",
    RotationUnit.RADIAN: "rad",
    RotationUnit.TURN: "tr",
}

FACTORS = {
    RotationUnit.GRADIAN: "0.9",
    RotationUnit.DEGREE: "1.0",
    RotationUnit.RADIAN: RADIANS_TO_DEGREES,
    RotationUnit.TURN: "360.0",
}
