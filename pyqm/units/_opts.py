from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

# Written by Eric J. Whitney, January 2020.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class QuantityOptions:
    """
    Dataclass that holds option flags for handling quantities.  See
    'get_quantity_options' and  'set_quantity_options' for full details.
    """
    tolerance: float
    round_places: int | None
    zero_divisor_tol: float

    def __post_init__(self):
        """Check certain values"""
        if self.tolerance <= 0:
            raise ValueError("Require 'tolerance' > 0.")
        if self.round_places is not None and self.round_places < 0:
            raise ValueError("Require 'round_places' >= 0 or None.")
        if self.zero_divisor_tol < 0:
            raise ValueError("Require 'zero_divisor_tol' >= 0.")


# Create single instance and set defaults.
_quantity_options = QuantityOptions(
    tolerance=1e-6,
    round_places=2,
    zero_divisor_tol=1e-9
)


# ----------------------------------------------------------------------

def get_quantity_options() -> QuantityOptions:
    """
    Returns
    -------
    quantity_options : QuantityOptions
        Returns a QuantityOptions object containing the options.  For a
        full description of each option, see `set_quantity_options`.
    """
    return replace(_quantity_options)


# noinspection PyIncorrectDocstring
def set_quantity_options(**kwargs):
    """
    Set the current quantity options.

    Parameters
    ----------
    tolerance : float, default = 1e-6
        Absolute tolerance used when comparing two quantities for
        equality.  Both values are converted to the base unit of their
        category and are equal when they differ by less than this
        amount.

    round_places : int or None, default = 2
        Number of decimal places that the results of addition and
        subtraction are rounded to (in the result unit).  If `None`,
        results are not rounded.

        .. note:: Division results are never rounded.

    zero_divisor_tol : float, default = 1e-9
        A divisor whose base unit value is smaller in magnitude than
        this is treated as zero.

    See Also
    --------
    get_quantity_options, quantity_options

    Examples
    --------
    By default sums are rounded to two decimal places:
    >>> from pyqm.units import qty, LengthUnit, quantity_options
    >>> qty(1, LengthUnit.FEET) + qty(1, LengthUnit.INCH)
    qty(1.08, LengthUnit.FEET)

    If rounding is disabled the full result is kept:
    >>> with quantity_options(round_places=None):
    ...     qty(1, LengthUnit.FEET) + qty(1, LengthUnit.INCH)
    qty(1.0833333333333333, LengthUnit.FEET)
    """
    global _quantity_options
    _quantity_options = replace(_quantity_options, **kwargs)


@contextmanager
def quantity_options(**kwargs) -> Iterator[QuantityOptions]:
    """
    Context manager that applies the given options (see
    `set_quantity_options`) on entry and restores the previous options
    on exit.
    """
    global _quantity_options
    previous = _quantity_options
    set_quantity_options(**kwargs)
    try:
        yield get_quantity_options()
    finally:
        _quantity_options = previous

# ----------------------------------------------------------------------
