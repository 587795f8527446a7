"""Unit conversions.

Linear units convert through each category's base unit (metres, kilograms,
litres, metres per second, square metres); temperature goes through Celsius.
"""
from __future__ import annotations

from typing import Dict

from calckit.models import ConversionResult
from calckit.presets import UNIT_FACTORS

TEMPERATURE_UNITS = ("celsius", "fahrenheit", "kelvin")


def _factors(category: str) -> Dict[str, float]:
    try:
        return UNIT_FACTORS[category]
    except KeyError:
        raise ValueError(f"Unknown unit category: {category!r}") from None


def _factor(category: str, unit: str) -> float:
    factors = _factors(category)
    if unit not in factors:
        raise ValueError(f"Unknown {category} unit: {unit!r}")
    return factors[unit]


def convert(category: str, value, from_unit: str, to_unit: str) -> ConversionResult:
    base = value * _factor(category, from_unit)
    return ConversionResult(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        result=base / _factor(category, to_unit),
    )


def convert_all(category: str, value, from_unit: str) -> Dict[str, float]:
    base = value * _factor(category, from_unit)
    return {unit: base / factor for unit, factor in _factors(category).items()}


def convert_length(value, from_unit, to_unit):
    return convert("length", value, from_unit, to_unit)


def convert_weight(value, from_unit, to_unit):
    return convert("weight", value, from_unit, to_unit)


def convert_volume(value, from_unit, to_unit):
    return convert("volume", value, from_unit, to_unit)


def convert_speed(value, from_unit, to_unit):
    return convert("speed", value, from_unit, to_unit)


def convert_area(value, from_unit, to_unit):
    return convert("area", value, from_unit, to_unit)


def to_celsius(value, unit: str) -> float:
    if unit == "celsius":
        return value
    if unit == "fahrenheit":
        return (value - 32) * 5 / 9
    if unit == "kelvin":
        return value - 273.15
    raise ValueError(f"Unknown temperature unit: {unit!r}")


def from_celsius(celsius, unit: str) -> float:
    if unit == "celsius":
        return celsius
    if unit == "fahrenheit":
        return celsius * 9 / 5 + 32
    if unit == "kelvin":
        return celsius + 273.15
    raise ValueError(f"Unknown temperature unit: {unit!r}")


def convert_temperature(value, from_unit: str, to_unit: str) -> ConversionResult:
    return ConversionResult(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        result=from_celsius(to_celsius(value, from_unit), to_unit),
    )


def convert_all_temperatures(value, from_unit: str) -> Dict[str, float]:
    c = to_celsius(value, from_unit)
    return {unit: from_celsius(c, unit) for unit in TEMPERATURE_UNITS}
