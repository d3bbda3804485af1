from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

import numpy as np

from pyqm.exception import InvalidValue, UnsupportedOperation
from pyqm.util import all_finite

# Written by Eric J. Whitney, January 2020.

_ValT = TypeVar('_ValT', float, np.ndarray)


# ======================================================================

class Category(Enum):
    """The measurement categories.  Units only convert within one."""
    LENGTH = 'length'
    WEIGHT = 'weight'
    VOLUME = 'volume'
    TEMPERATURE = 'temperature'


# ----------------------------------------------------------------------

def check_value(value: _ValT) -> _ValT:
    """
    Returns `value` unchanged if it is finite (every element, for
    arrays), otherwise raises ``InvalidValue``.
    """
    if not all_finite(value):
        raise InvalidValue(value)
    return value


# ======================================================================

class Measurable:
    """
    Mixin giving the common behaviour of every unit of measure.  Each
    measurement category is a closed ``Enum`` combining this mixin
    (or one of its subclasses) with ``Enum``, so the members are fixed
    and compare by identity.

    Subclasses provide the `category` property and the raw conversions
    ``_to_base()`` / ``_from_base()``.  All conversions are done via the
    base unit of the category; the public ``to_base()`` / ``from_base()``
    methods check that values are finite before converting.  Values may
    be scalars or numpy arrays.
    """
    unit_name: str
    symbol: str

    # -- Required in Subclasses ----------------------------------------

    @property
    def category(self) -> Category:
        raise NotImplementedError

    def _to_base(self, value: _ValT) -> _ValT:
        raise NotImplementedError

    def _from_base(self, value_in_base: _ValT) -> _ValT:
        raise NotImplementedError

    # -- Public Methods ------------------------------------------------

    def conversion_factor(self) -> float:
        """
        Returns the fixed factor that converts a value in this unit to
        the base unit.  Only available for linear units.
        """
        raise UnsupportedOperation(
            'conversion_factor',
            f"{self.category.value.capitalize()} conversions are "
            f"non-linear. Use to_base() / from_base() instead.",
            unit=self)

    def convert(self, target: Measurable, value: _ValT) -> _ValT:
        """
        Convert `value` from this unit into `target` units (via the
        base unit).  Both units must be the same category.
        """
        if target.category is not self.category:
            raise TypeError(f"Can't convert {self.category.value} units "
                            f"to {target.category.value} units.")
        return target.from_base(self.to_base(value))

    def from_base(self, value_in_base: _ValT) -> _ValT:
        """Convert a finite value in the base unit to this unit."""
        return self._from_base(check_value(value_in_base))

    def supports_arithmetic(self) -> bool:
        """
        Returns ``True`` if quantities in this unit can be added,
        subtracted and divided.
        """
        return True

    def to_base(self, value: _ValT) -> _ValT:
        """Convert a finite value in this unit to the base unit."""
        return self._to_base(check_value(value))

    def validate_operation_support(self, operation: str):
        """
        Raises ``UnsupportedOperation`` if arithmetic `operation` (e.g.
        'addition') is not allowed for this unit, otherwise does
        nothing.
        """
        if not self.supports_arithmetic():
            raise UnsupportedOperation(
                operation,
                f"{self.category.value.capitalize()} units do not "
                f"support {operation}.", unit=self)

    # -- String Magic Methods ------------------------------------------

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    def __str__(self) -> str:
        return f"{self.unit_name} ({self.symbol})"


# ----------------------------------------------------------------------

class LinearUnit(Measurable):
    """
    Mixin for units that convert to the base unit by a fixed factor,
    i.e. ``base = value * factor``.  Enum members are defined using
    tuples of ``(unit_name, symbol, factor)``.
    """

    def __init__(self, unit_name: str, symbol: str, factor: float):
        self.unit_name, self.symbol = unit_name, symbol
        self.factor = factor

    def conversion_factor(self) -> float:
        return self.factor

    def _to_base(self, value: _ValT) -> _ValT:
        return value * self.factor

    def _from_base(self, value_in_base: _ValT) -> _ValT:
        return value_in_base / self.factor


# ----------------------------------------------------------------------

class FormulaUnit(Measurable):
    """
    Mixin for units with non-linear (e.g. offset) conversions.  Enum
    members are defined using tuples of ``(unit_name, symbol, to_base,
    from_base)`` where the last two are the conversion functions.  No
    scalar conversion factor exists for these units.
    """

    def __init__(self, unit_name: str, symbol: str,
                 to_base: Callable[[_ValT], _ValT],
                 from_base: Callable[[_ValT], _ValT]):
        self.unit_name, self.symbol = unit_name, symbol
        self._to_base_fn, self._from_base_fn = to_base, from_base

    def _to_base(self, value: _ValT) -> _ValT:
        return self._to_base_fn(value)

    def _from_base(self, value_in_base: _ValT) -> _ValT:
        return self._from_base_fn(value_in_base)

# ======================================================================
