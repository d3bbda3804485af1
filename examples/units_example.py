#!/usr/bin/env python3

# Examples of quantities and the measurement service.
# Written by: Eric J. Whitney  Last updated: 12 March 2024

from pyqm.exception import UnsupportedOperation
from pyqm.service import MeasurementService
from pyqm.units import (LengthUnit, TemperatureUnit, VolumeUnit,
                        WeightUnit, qty)


# ----------------------------------------------------------------------------

def main():
    fence = qty(2, LengthUnit.YARD) + qty(36, LengthUnit.INCH)
    print(f"Fence length = {fence} "
          f"[{fence.convert_to(LengthUnit.CENTIMETER):.2f}]")

    flour = qty(2, WeightUnit.KILOGRAM).add(qty(2000, WeightUnit.GRAM),
                                            WeightUnit.POUND)
    print(f"Flour = {flour:.3f} "
          f"[{flour.convert_to(WeightUnit.KILOGRAM):.3f}]")

    tank, bucket = qty(50, VolumeUnit.GALLON), qty(10, VolumeUnit.LITRE)
    print(f"A {tank} tank takes {tank / bucket:.1f} buckets of {bucket}")

    t_body = qty(98.6, TemperatureUnit.FAHRENHEIT)
    print(f"Body temperature = {t_body} "
          f"[{t_body.convert_to(TemperatureUnit.CELSIUS):.1f}] "
          f"[{t_body.convert_to(TemperatureUnit.KELVIN):.2f}]")
    try:
        t_body + qty(1, TemperatureUnit.CELSIUS)
    except UnsupportedOperation as e:
        print(f"Adding temperatures: {e}")

    service = MeasurementService()
    for text in ('12', 'twelve', ''):
        q = service.parse_quantity(text, LengthUnit.INCH)
        print(f"Input {text!r} -> {q}, equal to 1 ft: "
              f"{service.are_equal(q, qty(1, LengthUnit.FEET))}")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
