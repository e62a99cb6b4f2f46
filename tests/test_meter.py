import itertools

import pytest

from ohmmeter.meter import Reading, average, main, render, run, take_reading
from ohmmeter.resistance import ColorCode
from ohmmeter.ssd1306 import SSD1306


class _Bus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


def _display():
    return SSD1306(_Bus())


def test_average_of_samples():
    assert average([1, 2, 3]) == 2


def test_average_accepts_generators():
    assert average(x for x in (2047, 2048)) == 2047.5


def test_average_of_nothing_rejected():
    with pytest.raises(ValueError):
        average([])


def test_take_reading_balanced_divider():
    reading = take_reading(2047.5, 10000, 4095)
    assert reading.measured == pytest.approx(10000)
    assert reading.approximate == pytest.approx(10000)
    assert reading.colors == ColorCode("Marrom", "Preto", "Laranja")


def test_reading_text_formats():
    reading = take_reading(2047.5)
    assert reading.resistance_text == "10000"
    assert reading.adc_text == f"{2047.5:.0f}"


def test_take_reading_full_scale_rejected():
    with pytest.raises(ValueError):
        take_reading(4095, 10000, 4095)


def test_render_draws_frame_and_divider():
    display = _display()
    render(display, take_reading(2047.5))
    assert display.get_pixel(3, 3)
    assert display.get_pixel(124, 62)
    assert display.get_pixel(60, 20)
    assert not display.get_pixel(0, 0)
    assert not display.get_pixel(120, 30)


def test_render_inverted():
    display = _display()
    render(display, take_reading(2047.5), False)
    assert display.get_pixel(0, 0)
    assert not display.get_pixel(3, 3)
    assert not display.get_pixel(60, 20)


def test_render_draws_title():
    display = _display()
    render(display, take_reading(2047.5))
    reference = _display()
    reference.draw_string("Ohmimetro", 15, 6)
    for x in range(15, 15 + 9 * 8):
        for y in range(6, 14):
            assert display.get_pixel(x, y) == reference.get_pixel(x, y)


def test_run_yields_readings_and_pushes_frames():
    bus = _Bus()
    display = SSD1306(bus)
    sampler = itertools.cycle([2047, 2048]).__next__
    readings = list(run(sampler, display, cycles=2, sample_count=4))
    assert len(readings) == 2
    assert all(isinstance(r, Reading) and r.mean == 2047.5 for r in readings)
    assert bus.writes[0] == (0x3C, bytes([0x80, 0xAE]))
    assert bus.writes[-1] == (0x3C, bytes(display.buffer))
    frames = [data for _, data in bus.writes if len(data) == len(display.buffer)]
    assert len(frames) == 4


def test_run_without_samples_fails():
    with pytest.raises(ValueError):
        list(run(lambda: 100, _display(), cycles=1, sample_count=0))


def test_main_prints_reading(capsys):
    assert main(["2047.5"]) == 0
    out = capsys.readouterr().out
    assert "Res. 10000" in out
    assert "Cores: Marrom Preto Laranja" in out


def test_main_reports_full_scale(capsys):
    assert main(["4095"]) == 1
    assert "ohmmeter:" in capsys.readouterr().err