from enum import Enum

from ._base import Category, FormulaUnit, LinearUnit

# Written by Eric J. Whitney, January 2020.

# == Linear Unit Definitions ===========================================

# Members are (unit name, symbol, factor to base unit).

# -- Length ------------------------------------------------------------


class LengthUnit(LinearUnit, Enum):
    """Units of length.  Base unit is the (international) foot."""
    FEET = ('feet', 'ft', 1.0)
    INCH = ('inches', 'in', 1.0 / 12.0)
    YARD = ('yards', 'yd', 3.0)
    CENTIMETER = ('centimeters', 'cm', 1.0 / (2.54 * 12.0))
    # Note: 1 in = 2.54 cm exactly (international inch).

    @property
    def category(self) -> Category:
        return Category.LENGTH


# -- Weight ------------------------------------------------------------

class WeightUnit(LinearUnit, Enum):
    """Units of weight (mass).  Base unit is the kilogram."""
    KILOGRAM = ('kilograms', 'kg', 1.0)
    GRAM = ('grams', 'g', 0.001)
    POUND = ('pounds', 'lb', 0.45359237)  # Defn Intl & US Standard Pound.

    @property
    def category(self) -> Category:
        return Category.WEIGHT


# -- Volume ------------------------------------------------------------

class VolumeUnit(LinearUnit, Enum):
    """Units of volume.  Base unit is the litre."""
    LITRE = ('litres', 'L', 1.0)
    MILLILITRE = ('millilitres', 'mL', 0.001)
    GALLON = ('gallons', 'gal', 3.78541)  # US liquid gallon.

    @property
    def category(self) -> Category:
        return Category.VOLUME


# == Non-Linear Unit Definitions =======================================

# -- Temperature -------------------------------------------------------

class TemperatureUnit(FormulaUnit, Enum):
    """
    Units of (total) temperature.  Base unit is degrees Celsius.

    Because °C and °F are offset scales, conversions are given by
    formulas rather than a factor.  Adding, subtracting or dividing two
    temperatures is not allowed, as the result depends on the scale
    chosen; temperatures can only be converted and compared.
    """
    CELSIUS = ('Celsius', '°C',
               lambda c: c,
               lambda c: c)
    FAHRENHEIT = ('Fahrenheit', '°F',
                  lambda f: (f - 32) * 5 / 9,
                  lambda c: (c * 9 / 5) + 32)
    KELVIN = ('Kelvin', 'K',
              lambda k: k - 273.15,
              lambda c: c + 273.15)

    @property
    def category(self) -> Category:
        return Category.TEMPERATURE

    def supports_arithmetic(self) -> bool:
        return False
