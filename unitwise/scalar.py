"""Extended-precision scalar used by every conversion.

Conversion factors span roughly 1e-12 (nanograms in kilograms) to 1e16
(parsecs in metres). Ratios between the extremes lose the low digits of a
64-bit double, so all tables and results use :class:`numpy.longdouble`.

On x86-64 Linux ``longdouble`` is the x87 80-bit format (18 significant
decimal digits); on aarch64 Linux it is IEEE quad precision. Some platforms
(Windows, macOS on Apple silicon) alias it to ``float64``; a
``RuntimeWarning`` is emitted at import in that case.
"""

from __future__ import annotations

import warnings

import numpy as np

Scalar = np.longdouble

EXTENDED_PRECISION_DIGITS = 18
SCALAR_INFO = np.finfo(Scalar)


def has_extended_precision() -> bool:
    """Return True when ``Scalar`` carries at least 18 significant digits."""
    return int(SCALAR_INFO.precision) >= EXTENDED_PRECISION_DIGITS


def as_scalar(value):
    """Coerce a number, decimal string or array-like to ``Scalar``.

    Args:
        value: Python or numpy number, decimal string such as ``"0.2777778"``,
            or any array-like (list, ndarray, pandas Series).

    Returns:
        numpy.longdouble for 0-d input; numpy.ndarray of dtype ``Scalar``
        otherwise.

    Raises:
        ValueError: If a string cannot be parsed as a number.

    Note:
        Strings are parsed directly at extended precision. A Python ``float``
        has already been rounded to 53 bits before it reaches this function,
        so table literals are kept as strings.
    """
    if isinstance(value, str):
        try:
            return Scalar(value.strip())
        except ValueError:
            raise ValueError(f"Cannot interpret {value!r} as a number.") from None
    if np.ndim(value) == 0:
        return Scalar(value)
    return np.asarray(value, dtype=Scalar)


if not has_extended_precision():
    warnings.warn(
        f"numpy.longdouble has only {SCALAR_INFO.precision} significant digits on "
        f"this platform; conversions between extreme units (parsecs, gigatons) "
        f"are display-grade only.",
        RuntimeWarning,
        stacklevel=2,
    )
