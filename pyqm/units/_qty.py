from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pyqm.exception import (DivisionByZero, InvalidValue, NullArgument)
from pyqm.util import round_half_away, try_parse_float
from ._base import Measurable, check_value
from ._opts import get_quantity_options

U = TypeVar('U', bound=Measurable)


# ======================================================================

@dataclass(frozen=True, eq=False)
class Quantity(Generic[U]):
    """
    ``Quantity`` represents a physical quantity, consisting of a finite
    value and the unit it is measured in.  The unit type `U` fixes the
    category (length, weight, etc) so that only quantities of the same
    category can be compared or combined.

    ``Quantity`` objects are frozen dataclasses and are immutable.
    Every operation (conversion, addition, etc) gives a new object.

    .. note:: Equality is approximate (see `equals`), however hashing
       uses the base unit value rounded to 6 decimal places.  Two
       quantities that compare equal can therefore (rarely) give
       different hashes if they sit either side of a rounding boundary.
       Quantities should not be relied on as dictionary keys or set
       members for this reason.
    """
    value: float
    unit: U

    def __post_init__(self):
        if self.unit is None:
            raise NullArgument('unit')
        if not isinstance(self.unit, Measurable):
            raise TypeError(f"Expected a unit of measure, got "
                            f"{type(self.unit).__name__}.")

        object.__setattr__(self, 'value', float(check_value(self.value)))

    # -- Conversion ----------------------------------------------------

    def convert_to(self, target: U) -> Quantity[U]:
        """
        Generate new ``Quantity`` object converted to `target` units.
        """
        return Quantity(self.convert_to_scalar(target), target)

    def convert_to_scalar(self, target: U) -> float:
        """
        Returns the value of this quantity expressed in `target` units.
        """
        if target is None:
            raise NullArgument('target')
        if not isinstance(target, Measurable):
            raise TypeError(f"Expected a unit of measure, got "
                            f"{type(target).__name__}.")
        return self.unit.convert(target, self.value)

    def to_base(self) -> float:
        """Returns the value expressed in the base unit of the category."""
        return self.unit.to_base(self.value)

    # -- Arithmetic ----------------------------------------------------

    def add(self, other: Quantity[U], target: U = None) -> Quantity[U]:
        """
        Add `other` to this quantity.  Both values are converted to the
        base unit before adding, and the sum is given in `target` units
        (or the units of this quantity if `target` is not given).  The
        result is rounded, see ``set_quantity_options()``.

        Raises
        ------
        UnsupportedOperation
            If the category does not support arithmetic (temperature).
        """
        return self._combine(other, target, 'addition', operator.add)

    def subtract(self, other: Quantity[U], target: U = None
                 ) -> Quantity[U]:
        """
        Subtract `other` from this quantity.  Follows the same rules as
        ``add()``.
        """
        return self._combine(other, target, 'subtraction', operator.sub)

    def divide(self, other: Quantity[U]) -> float:
        """
        Divide this quantity by `other` giving a dimensionless ratio.
        The ratio is computed in base units and is not rounded.

        Raises
        ------
        DivisionByZero
            If the base unit value of `other` is zero (to within
            `zero_divisor_tol`).
        UnsupportedOperation
            If the category does not support arithmetic (temperature).
        """
        lhs, rhs = self._base_operands(other, 'division')
        if abs(rhs) < get_quantity_options().zero_divisor_tol:
            raise DivisionByZero("Cannot divide by a zero quantity.",
                                 details=f"{self} / {other}")
        return lhs / rhs

    # -- Comparison ----------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Returns ``True`` if `other` is a quantity of the same category
        whose base unit value differs from this one by less than the
        equality `tolerance` (see ``set_quantity_options()``).  Any
        other object (including ``None``) gives ``False``.
        """
        if self is other:
            return True
        if not self._same_category(other):
            return False

        diff = abs(self.to_base() - other.to_base())
        return diff < get_quantity_options().tolerance

    # -- Magic Methods -------------------------------------------------

    def __abs__(self) -> Quantity[U]:
        return Quantity(abs(self.value), self.unit)

    def __add__(self, rhs: Quantity[U]) -> Quantity[U]:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.add(rhs)

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.equals(rhs)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec) + f" {self.unit.symbol}"

    def __hash__(self) -> int:
        return hash((self.unit.category, round(self.to_base(), 6)))

    def __neg__(self) -> Quantity[U]:
        return Quantity(-self.value, self.unit)

    def __repr__(self) -> str:
        # Lowercase qty() used so that __repr__ builds use factory function.
        return f"qty({self.value}, {self.unit!r})"

    def __str__(self) -> str:
        return self.__format__('')

    def __sub__(self, rhs: Quantity[U]) -> Quantity[U]:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.subtract(rhs)

    def __truediv__(self, rhs: Quantity[U]) -> float:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.divide(rhs)

    # -- Private Methods -----------------------------------------------

    def _base_operands(self, other: Quantity[U], operation: str
                       ) -> tuple[float, float]:
        # Common checks for all arithmetic, giving both operands in base
        # units.
        if other is None:
            raise NullArgument('other')
        if not self._same_category(other):
            raise TypeError(f"Can't apply {operation} to {self!r} and "
                            f"{other!r}.")

        self.unit.validate_operation_support(operation)
        return self.to_base(), other.to_base()

    def _combine(self, other: Quantity[U], target: U | None,
                 operation: str, op: Callable[[float, float], float]
                 ) -> Quantity[U]:
        lhs, rhs = self._base_operands(other, operation)
        if target is None:
            target = self.unit
        elif not isinstance(target, Measurable) or (
                target.category is not self.unit.category):
            raise TypeError(f"Can't give result of {operation} in "
                            f"{target!r}.")

        res_value = target.from_base(op(lhs, rhs))
        places = get_quantity_options().round_places
        if places is not None:
            res_value = round_half_away(res_value, places)

        return Quantity(res_value, target)

    def _same_category(self, other: object) -> bool:
        return (isinstance(other, Quantity) and
                other.unit.category is self.unit.category)


# ======================================================================

def qty(value: float | str | Quantity[U], unit: U = None) -> Quantity[U]:
    """
    Factory function for making ``Quantity`` objects.

    Examples
    --------
    >>> from pyqm.units import LengthUnit, TemperatureUnit
    >>> qty(2, LengthUnit.YARD).convert_to(LengthUnit.FEET)
    qty(6.0, LengthUnit.FEET)
    >>> qty(-40, TemperatureUnit.CELSIUS) == qty(-40,
    ...                                          TemperatureUnit.FAHRENHEIT)
    True

    Calling qty() on an existing ``Quantity`` with a new unit converts
    it:
    >>> qty(qty(36, LengthUnit.INCH), LengthUnit.YARD)
    qty(1.0, LengthUnit.YARD)

    Parameters
    ----------
    value : float, str or Quantity
        Value of the quantity.  If a string is given it is parsed to a
        ``float`` (with a warning, as this is normally unintentional).
        If a ``Quantity`` is given it is converted to `unit`.

    unit : Measurable, optional
        Unit of measure.  Only optional if `value` is a ``Quantity``.

    Returns
    -------
    Quantity

    Raises
    ------
    InvalidValue
        If the value is not finite or a string could not be parsed.
    """
    if isinstance(value, Quantity):
        # Case qty(Quantity) / qty(Quantity, unit): Return or convert.
        return value if unit is None else value.convert_to(unit)

    if unit is None:
        raise NullArgument('unit')

    if isinstance(value, str):
        # Warn if a string was given for the value.  This is normally
        # unintentional.
        warnings.warn("Warning: qty() received string where a numeric "
                      "value was expected.")
        ok, parsed = try_parse_float(value)
        if not ok:
            raise InvalidValue(value, f"Couldn't parse {value!r} as a "
                                      f"number.")
        value = parsed

    return Quantity(value, unit)

# ======================================================================
