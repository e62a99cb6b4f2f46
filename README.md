# ohmmeter

A small resistance meter. It works out an unknown resistor from the mean ADC
count of a voltage divider, rounds it to the nearest E12 standard value and
names the resistor's three colour bands. It can also draw the reading into a
128×64 SSD1306 OLED frame buffer and send it over an I2C bus object you supply.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
ohmmeter 1365
```

Each positional argument is a mean ADC count. For each one the command prints
the reading:

```
ADC 1365
Res. 4700
Cores: Amarelo Violeta Vermelho
```

Options:

- `--known OHMS` is the known resistor of the divider (default 10000).
- `--resolution COUNT` is the ADC full-scale count (default 4095).

If a count cannot be turned into a resistance, the command prints
`ohmmeter: <reason>` to standard error and exits with status 1. This happens
when the count is at full scale, or when it gives a resistance that is not
positive.

## Library

### `ohmmeter.resistance`

- `measured_resistance(mean, known=10000, resolution=4095)` returns
  `known * mean / (resolution - mean)`. It raises `ValueError` when `mean`
  equals `resolution`.
- `approximate_resistance(resistance)` snaps a value to the nearest E12 value
  (1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2 per decade). The
  decade multiplier is an integer, so values below one ohm come out as `0.0`.
  Non-positive or non-finite input raises `ValueError`.
- `color_code(resistance)` returns a frozen `ColorCode` with `band1`, `band2`
  and `multiplier`. The colour names are in Portuguese (`Preto`, `Marrom`,
  `Vermelho`, …). Values below 1 are treated as 1. If a value is too large for
  a multiplier of at most 10⁶, every band reads `ERRO`, and
  `ColorCode.is_valid` is then `False`.

```python
from ohmmeter.resistance import approximate_resistance, color_code, measured_resistance

r = measured_resistance(2047.5, 10000, 4095)   # 10000.0
nominal = approximate_resistance(r)             # 10000.0
bands = color_code(nominal)                     # Marrom, Preto, Laranja
```

### `ohmmeter.meter`

- `average(samples)` gives the mean of an iterable of samples. It raises
  `ValueError` when the iterable is empty.
- `take_reading(mean, known, resolution)` returns a `Reading` with `mean`,
  `measured`, `approximate` and `colors`. The `adc_text` and
  `resistance_text` properties hold the values rounded to whole numbers.
- `render(display, reading, color=True)` draws the meter screen on an
  `SSD1306`: a frame, the title "Ohmimetro", the ADC count, the resistance and
  the colour bands.
- `run(sampler, display, cycles=None, sample_count=500)` configures the
  display and then runs the measurement loop. Each cycle calls `sampler()`
  `sample_count` times, averages the results, renders the reading and sends
  the frame. It yields each `Reading`. With `cycles=None` it never stops.
- `main(argv=None)` is the command line described above.

### `ohmmeter.ssd1306`

`SSD1306(bus, width=128, height=64, external_vcc=False, address=0x3C)` keeps a
frame buffer in memory. `bus` is any object with a `write(address, data)`
method. The height must be a multiple of 8.

- `config()` sends the power-up command sequence.
- `command(byte)` sends one command byte.
- `send_data()` sends the whole buffer.
- The drawing methods are `pixel`, `get_pixel`, `fill`,
  `rect(top, left, width, height, value, fill)`, `line`, `hline`, `vline`,
  `draw_char` and `draw_string`. Text wraps at the right edge and stops at
  the bottom.
- Pixels outside the display raise `IndexError`.

`Command` is an `IntEnum` of the controller's opcodes.

### `ohmmeter.font`

`glyph(char)` returns the eight column bytes of an 8×8 glyph. Characters
outside printable ASCII are drawn as a space.

## What it does not do

The package does not read an ADC and does not open an I2C bus. You supply the
sampler for `run` and the bus object for `SSD1306`. The `ohmmeter` command
only works from the counts you give it and prints text. It does not drive a
display.