"""
Measurement service (:mod:`pyqm.service`)
=========================================

.. currentmodule:: pyqm.service

Stateless facade over ``pyqm.units`` for use by front ends (console
menus, forms, etc).  Methods are generic over the unit type, so a single
``MeasurementService`` handles every category.  User input that is not a
valid number gives ``None`` rather than an exception, because this is
an expected condition; programming errors (missing quantities,
temperature arithmetic) raise as usual.

Examples
--------
>>> from pyqm.units import LengthUnit
>>> service = MeasurementService()
>>> a = service.parse_quantity('2', LengthUnit.YARD)
>>> b = service.parse_quantity('36', LengthUnit.INCH)
>>> service.add_with_target(a, b, LengthUnit.FEET)
qty(9.0, LengthUnit.FEET)
>>> service.parse_quantity('abc', LengthUnit.FEET) is None
True
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np
import numpy.typing as npt

from pyqm.exception import InvalidValue, NullArgument
from pyqm.units import Measurable, Quantity, check_value
from pyqm.util import try_parse_float

# Written by Eric J. Whitney, March 2024.

U = TypeVar('U', bound=Measurable)


# ======================================================================

class MeasurementService:
    """
    Facade giving parsing, comparison, conversion and arithmetic on
    quantities.  Holds no state and is safe to share.
    """

    # -- Parsing -------------------------------------------------------

    @staticmethod
    def parse_quantity(text: str | None, unit: U) -> Quantity[U] | None:
        """
        Make a ``Quantity`` from string `text` in `unit`.  Returns
        ``None`` if `text` is ``None``, blank, not a number or is not
        finite (e.g. 'nan').
        """
        ok, value = try_parse_float(text)
        if not ok:
            return None

        try:
            return Quantity(value, unit)
        except InvalidValue:
            return None

    # -- Comparison ----------------------------------------------------

    @staticmethod
    def are_equal(q1: Quantity[U] | None, q2: Quantity[U] | None) -> bool:
        """
        Returns ``True`` if both quantities are given and equal (see
        ``Quantity.equals``).
        """
        if q1 is None or q2 is None:
            return False
        return q1.equals(q2)

    @staticmethod
    def are_different_categories_equal(q1: Quantity, q2: Quantity
                                       ) -> bool:
        """
        Quantities of different categories are never equal, so this
        always returns ``False``.
        """
        return False

    # -- Conversion ----------------------------------------------------

    @staticmethod
    def convert_value(value: float, source: U, target: U) -> float:
        """Convert a single value from `source` to `target` units."""
        return Quantity(value, source).convert_to_scalar(target)

    @staticmethod
    def convert_values(values: npt.ArrayLike, source: U, target: U
                       ) -> npt.NDArray[float]:
        """
        Convert an array of values from `source` to `target` units.
        Every value must be finite.

        Examples
        --------
        >>> from pyqm.units import TemperatureUnit as T
        >>> MeasurementService.convert_values([0, 100], T.CELSIUS,
        ...                                   T.FAHRENHEIT)
        array([ 32., 212.])
        """
        values = check_value(np.asarray(values, dtype=float))
        return source.convert(target, values)

    # -- Arithmetic ----------------------------------------------------

    @staticmethod
    def add(q1: Quantity[U], q2: Quantity[U]) -> Quantity[U]:
        """Add two quantities giving the result in the units of `q1`."""
        _check_operands(q1, q2)
        return q1.add(q2)

    @staticmethod
    def add_with_target(q1: Quantity[U], q2: Quantity[U], target: U
                        ) -> Quantity[U]:
        """Add two quantities giving the result in `target` units."""
        _check_operands(q1, q2)
        return q1.add(q2, target)

    @staticmethod
    def subtract(q1: Quantity[U], q2: Quantity[U], target: U = None
                 ) -> Quantity[U]:
        """
        Subtract `q2` from `q1` giving the result in `target` units (or
        the units of `q1` if not given).
        """
        _check_operands(q1, q2)
        return q1.subtract(q2, target)

    @staticmethod
    def divide(q1: Quantity[U], q2: Quantity[U]) -> float:
        """Returns the ratio `q1` / `q2`."""
        _check_operands(q1, q2)
        return q1.divide(q2)


# ----------------------------------------------------------------------

def _check_operands(q1: Quantity | None, q2: Quantity | None):
    if q1 is None:
        raise NullArgument('q1')
    if q2 is None:
        raise NullArgument('q2')

# ======================================================================
