#!/usr/bin/env python3
"""
Temperature converter
Builder style converter supporting:
  1. Celsius to Fahrenheit
  2. Kelvin to Celsius
  3. Fahrenheit to Kelvin

Usage:
    TemperatureConverter().from_('C', 0).to('F').convert()   # "0 C = 32 F"
    TemperatureConverter().to('F').from_('C', 0).convert()   # same result
"""

import logging
import math
from numbers import Real
from typing import Optional

from temperature_utils import CONVERSIONS, TemperatureUnit, format_degrees, unit_from_code

logger = logging.getLogger(__name__)


class InvalidTemperatureError(ValueError):
    """Raised when a unit code or degree value is rejected"""


class UnsupportedUnitError(InvalidTemperatureError):
    """Raised when a unit code is not one of the supported units"""


class BelowMinimumError(InvalidTemperatureError):
    """Raised when degrees are below the lowest value of their unit"""


class ConverterStateError(RuntimeError):
    """Raised when the converter is not ready to convert"""


class Temperature:
    """A unit and degree value, either of which may be unset"""

    def __init__(self, unit: Optional[TemperatureUnit] = None):
        self.unit = unit
        self.degrees: Optional[float] = None

    def __str__(self):
        degrees = format_degrees(self.degrees) if self.degrees is not None else '<degrees not specified>'
        unit = self.unit.code if self.unit is not None else '<unit not specified>'
        return f"{degrees} {unit}"

    def set_unit(self, unit: TemperatureUnit) -> None:
        if unit is None:
            raise InvalidTemperatureError("Unit must be provided.")
        self.unit = unit

    def set_degrees(self, degrees: float) -> None:
        """Set degrees, checking them against the lowest value of the current unit"""
        if degrees is None or isinstance(degrees, bool) or not isinstance(degrees, Real):
            raise InvalidTemperatureError("Degrees must be provided.")
        if not math.isfinite(degrees):
            raise InvalidTemperatureError(f"Degrees must be a finite number, got {degrees}.")
        if self.unit is None:
            raise ConverterStateError("The temperature unit must be set before the degrees.")

        if degrees < self.unit.minimum:
            raise BelowMinimumError(
                f"The lowest value you can set [{self.unit.display_name}] to is [{self.unit.minimum}]."
            )
        self.degrees = float(degrees)


class TemperatureConverter:
    """Converts a temperature from one unit to another"""

    def __init__(self):
        self.source = Temperature()
        self.target = Temperature()

    def from_(self, unit: str, degrees: float) -> 'TemperatureConverter':
        """Set the unit and degrees to convert from"""
        from_unit = unit_from_code(unit)
        if from_unit is None:
            logger.warning(f"Rejected unit to convert from: {unit!r}")
            raise UnsupportedUnitError(
                f"The temperature unit [{unit}] you are converting from is not supported."
            )

        # Unit goes in before degrees so the lower bound is known
        source = Temperature()
        source.set_unit(from_unit)
        try:
            source.set_degrees(degrees)
        except InvalidTemperatureError as e:
            logger.warning(f"Rejected degrees to convert from: {e}")
            raise
        self.source = source
        return self

    def to(self, unit: str) -> 'TemperatureConverter':
        """Set the unit to convert to"""
        to_unit = unit_from_code(unit)
        if to_unit is None:
            logger.warning(f"Rejected unit to convert to: {unit!r}")
            raise UnsupportedUnitError(
                f"The temperature unit [{unit}] you are converting to is not supported."
            )
        self.target.set_unit(to_unit)
        return self

    def convert(self) -> str:
        """Convert the source temperature to the target unit

        Returns:
            Conversion result, e.g. "0 C = 32 F"

        Raises:
            ConverterStateError: If the converter is not ready or the
                unit pair is not supported
        """
        if self.source.unit is None or self.source.degrees is None:
            logger.warning(f"Cannot convert, incomplete source temperature: {self.source}")
            raise ConverterStateError(
                f"Missing information on the temperature you are converting from: [{self.source}]."
            )

        if self.target.unit is None:
            logger.warning("Cannot convert, no target unit set")
            raise ConverterStateError("You have not specified the temperature unit to convert to.")

        from_name = self.source.unit.display_name
        to_name = self.target.unit.display_name
        if self.source.unit is self.target.unit:
            logger.warning(f"Refused conversion from {from_name} to itself")
            raise ConverterStateError(
                f"The temperature unit [{from_name}] you are converting from is the same "
                f"as the one [{to_name}] you are converting to."
            )

        conversion = CONVERSIONS.get((self.source.unit, self.target.unit))
        if conversion is None:
            logger.warning(f"Refused unsupported conversion {from_name} -> {to_name}")
            raise ConverterStateError(f"Conversion is not supported from [{from_name}] to [{to_name}].")

        self.target.set_degrees(conversion(self.source.degrees))
        result = f"{self.source} = {self.target}"
        logger.debug(f"Converted {result}")
        return result
