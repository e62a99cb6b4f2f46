[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmmeter"
version = "0.1.0"
description = "Resistance meter logic with E12 rounding, colour-band codes and an SSD1306 framebuffer renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e12", "color-code", "ssd1306", "oled", "framebuffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmmeter = "ohmmeter.meter:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmmeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
