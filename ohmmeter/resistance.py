"""Resistance arithmetic: divider measurement, E12 rounding and colour bands."""

from __future__ import annotations

import math
from dataclasses import dataclass

KNOWN_RESISTANCE = 10000
ADC_RESOLUTION = 4095

# E12 nominal values for one decade, in tenths so that scaling stays exact.
E12_TENTHS = (10, 12, 15, 18, 22, 27, 33, 39, 47, 56, 68, 82)
E12_SERIES = tuple(tenths / 10 for tenths in E12_TENTHS)

COLORS = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)
ERROR = "ERRO"
MAX_MULTIPLIER_EXPONENT = 6


@dataclass(frozen=True)
class ColorCode:
    """The three colour bands of a resistor: two digits and a multiplier."""

    band1: str
    band2: str
    multiplier: str

    @property
    def is_valid(self) -> bool:
        """Whether the value could be expressed in three bands."""
        return ERROR not in (self.band1, self.band2, self.multiplier)


INVALID_CODE = ColorCode(ERROR, ERROR, ERROR)


def measured_resistance(
    mean: float, known: float = KNOWN_RESISTANCE, resolution: float = ADC_RESOLUTION
) -> float:
    """Resistance of the unknown leg of a voltage divider from an ADC mean."""
    span = resolution - mean
    if span == 0:
        raise ValueError("ADC reading is at full scale; resistance is unbounded")
    return known * mean / span


def approximate_resistance(resistance: float) -> float:
    """Round a resistance to the nearest E12 commercial value.

    The decade multiplier is an integer, so values below one ohm come out as 0.
    """
    if not math.isfinite(resistance) or resistance <= 0:
        raise ValueError(f"resistance must be positive and finite, got {resistance!r}")
    multiplier = 1
    while resistance >= 10.0:
        resistance /= 10.0
        multiplier *= 10
    while resistance < 1.0:
        resistance *= 10.0
        multiplier //= 10
    best = min(E12_TENTHS, key=lambda tenths: abs(resistance - tenths / 10))
    return best * multiplier / 10


def color_code(resistance: float) -> ColorCode:
    """Colour bands for a resistance; bands read ``ERRO`` if it does not fit."""
    if resistance < 1:
        resistance = 1
    exponent = 0
    while resistance >= 100 and exponent < MAX_MULTIPLIER_EXPONENT:
        resistance /= 10
        exponent += 1
    value = int(resistance + 0.5)
    first, second = divmod(value, 10)
    if 0 <= first <= 9:
        return ColorCode(COLORS[first], COLORS[second], COLORS[exponent])
    return INVALID_CODE