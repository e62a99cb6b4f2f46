"""The ohmmeter: sample the divider, compute the reading, draw it on the display."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .resistance import (
    ADC_RESOLUTION,
    KNOWN_RESISTANCE,
    ColorCode,
    approximate_resistance,
    color_code,
    measured_resistance,
)
from .ssd1306 import SSD1306

SAMPLE_COUNT = 500


@dataclass(frozen=True)
class Reading:
    """One measurement cycle's results."""

    mean: float
    measured: float
    approximate: float
    colors: ColorCode

    @property
    def adc_text(self) -> str:
        return f"{self.mean:.0f}"

    @property
    def resistance_text(self) -> str:
        return f"{self.approximate:.0f}"


def average(samples: Iterable[float]) -> float:
    """Arithmetic mean of the ADC samples."""
    values = list(samples)
    if not values:
        raise ValueError("no samples to average")
    return sum(values) / len(values)


def take_reading(
    mean: float, known: float = KNOWN_RESISTANCE, resolution: float = ADC_RESOLUTION
) -> Reading:
    """Turn a mean ADC value into a full reading."""
    measured = measured_resistance(mean, known, resolution)
    approximate = approximate_resistance(measured)
    return Reading(mean, measured, approximate, color_code(approximate))


def render(display: SSD1306, reading: Reading, color: bool = True) -> None:
    """Draw a reading onto the display's frame buffer."""
    display.fill(not color)
    display.rect(3, 3, 122, 60, color, not color)
    display.line(3, 20, 123, 20, color)
    display.draw_string("Ohmimetro", 15, 6)
    display.draw_string("ADC", 5, 26)
    display.draw_string("Res.", 5, 38)
    display.draw_string(reading.adc_text, 45, 26)
    display.draw_string(reading.resistance_text, 45, 38)
    display.draw_string("Cores:", 5, 50)
    display.draw_string(reading.colors.band1, 40, 50)
    display.draw_string(reading.colors.band2, 70, 50)
    display.draw_string(reading.colors.multiplier, 100, 50)


def run(
    sampler: Callable[[], float],
    display: SSD1306,
    cycles: int | None = None,
    sample_count: int = SAMPLE_COUNT,
) -> Iterator[Reading]:
    """Configure the display, then measure and show readings, yielding each.

    ``sampler`` returns one raw ADC value per call and sets the sampling pace.
    With ``cycles`` left as None the loop never ends.
    """
    display.config()
    display.send_data()
    display.fill(False)
    display.send_data()
    done = 0
    while cycles is None or done < cycles:
        mean = average(sampler() for _ in range(sample_count))
        reading = take_reading(mean)
        render(display, reading)
        display.send_data()
        yield reading
        done += 1


def _format(reading: Reading) -> str:
    colors = reading.colors
    return (
        f"ADC {reading.adc_text}\n"
        f"Res. {reading.resistance_text}\n"
        f"Cores: {colors.band1} {colors.band2} {colors.multiplier}"
    )


def main(argv: list[str] | None = None) -> int:
    """Print the reading for each mean ADC value given on the command line."""
    parser = argparse.ArgumentParser(
        prog="ohmmeter", description="Resistance from a voltage-divider ADC reading."
    )
    parser.add_argument("means", nargs="+", type=float, help="mean ADC values")
    parser.add_argument("--known", type=float, default=KNOWN_RESISTANCE,
                        help="known resistor in ohms")
    parser.add_argument("--resolution", type=float, default=ADC_RESOLUTION,
                        help="ADC full-scale count")
    args = parser.parse_args(argv)
    for mean in args.means:
        try:
            reading = take_reading(mean, args.known, args.resolution)
        except ValueError as exc:
            print(f"ohmmeter: {exc}", file=sys.stderr)
            return 1
        print(_format(reading))
    return 0


if __name__ == "__main__":
    sys.exit(main())