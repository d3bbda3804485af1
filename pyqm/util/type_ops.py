"""
Small type conversion and checking operations used when values arrive
from outside the library (user input, arrays, etc).
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt


# Written by Eric J. Whitney, February 2024.


# ======================================================================

def all_finite(x: float | npt.ArrayLike) -> bool:
    """
    Returns ``True`` if `x` is finite, i.e. not NaN or ±∞.  If `x` is
    array-like, every element must be finite.  Values that numpy can't
    interpret as numbers (e.g. strings) are not finite.

    Examples
    --------
    >>> all_finite(3.5)
    True
    >>> all_finite([1.0, float('nan')])
    False
    """
    try:
        return bool(np.all(np.isfinite(x)))
    except TypeError:
        return False


# ----------------------------------------------------------------------

def round_half_away(x: float, places: int = 0) -> float:
    """
    Round `x` to `places` decimal places, with values exactly halfway
    being rounded away from zero (unlike ``round()``, which rounds
    halves to even).  The value is scaled by ``10**places`` before
    rounding.

    Examples
    --------
    >>> round_half_away(0.125, 2)
    0.13
    >>> round(0.125, 2)
    0.12
    >>> round_half_away(-2.5)
    -3.0
    """
    scale = 10 ** places
    return math.copysign(math.floor(abs(x) * scale + 0.5), x) / scale


# ----------------------------------------------------------------------

def try_parse_float(s: str | None) -> tuple[bool, float]:
    """
    Try converting string `s` to a ``float``.  This never raises;
    failure is reported by the first element of the returned tuple.

    Examples
    --------
    >>> try_parse_float(' 2.5 ')
    (True, 2.5)
    >>> try_parse_float('abc')
    (False, 0.0)
    >>> try_parse_float(None)
    (False, 0.0)

    Parameters
    ----------
    s : str or None
        Input string.  Leading / trailing whitespace is ignored.

    Returns
    -------
    (success, value) : (bool, float)
        `success` is ``False`` if `s` was ``None``, blank or not a
        number, in which case `value` is ``0.0``.

    .. note:: Strings such as ``'nan'`` or ``'inf'`` parse
       successfully; checking the value is left to the caller.
    """
    if s is None or not s.strip():
        return False, 0.0

    try:
        return True, float(s)
    except (TypeError, ValueError):
        return False, 0.0

# ======================================================================
