#!/usr/bin/env python3
"""
Temperature conversion utilities for the converter
Holds the supported units, the directed conversion formulas and display rounding
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Optional


# Celsius value of 0 Kelvin
ABSOLUTE_ZERO = -273.15

DEGREES_QUANTUM = Decimal('0.01')

# Enough digits for any finite float written out in full
DECIMAL_PRECISION = 400


class TemperatureUnit(Enum):
    """Supported temperature units with their short code, name and lowest value"""

    CELSIUS = ('C', 'Celsius', ABSOLUTE_ZERO)
    FAHRENHEIT = ('F', 'Fahrenheit', -459.67)
    KELVIN = ('K', 'Kelvin', 0.0)

    def __init__(self, code: str, display_name: str, minimum: float):
        self.code = code
        self.display_name = display_name
        self.minimum = minimum


def unit_from_code(code) -> Optional[TemperatureUnit]:
    """Look up a unit by its short code

    Args:
        code: Unit code ('C', 'F', or 'K'), case-insensitive

    Returns:
        Matching TemperatureUnit, or None if the code is not supported
    """
    if not isinstance(code, str):
        return None
    code = code.casefold()
    for unit in TemperatureUnit:
        if unit.code.casefold() == code:
            return unit
    return None


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit

    Args:
        celsius: Temperature in degrees Celsius

    Returns:
        Temperature in degrees Fahrenheit
    """
    return celsius * 9 / 5 + 32.0


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius

    Args:
        kelvin: Temperature in Kelvin

    Returns:
        Temperature in degrees Celsius
    """
    return kelvin + ABSOLUTE_ZERO


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """Convert Fahrenheit to Kelvin

    Args:
        fahrenheit: Temperature in degrees Fahrenheit

    Returns:
        Temperature in Kelvin
    """
    return (fahrenheit - 32) * 5 / 9 - ABSOLUTE_ZERO


# Only these directed pairs are supported; the reverse directions are not
CONVERSIONS = {
    (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): celsius_to_fahrenheit,
    (TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS): kelvin_to_celsius,
    (TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN): fahrenheit_to_kelvin,
}


def format_degrees(degrees: float) -> str:
    """Format a degree value for display

    Rounds half-up to at most two decimal places and drops trailing zeros,
    so 0.0 renders as "0" and 99.999 as "100". Values whose shortest
    representation already fits in two decimals are written from those
    digits, so 1e26 renders as a 1 followed by 26 zeros.

    Args:
        degrees: Temperature value

    Returns:
        Formatted value without unit
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        shortest = Decimal(repr(float(degrees)))
        if shortest.as_tuple().exponent >= -2:
            rounded = shortest
        else:
            # Round the exact binary value, not its shortest digits
            rounded = Decimal(degrees).quantize(DEGREES_QUANTUM, rounding=ROUND_HALF_UP)
        return format(rounded.normalize(), 'f')
