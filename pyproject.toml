[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "tileoled"
version = "0.1.0"
description = "Tile-based monochrome OLED display toolkit: controller drivers, text helpers, button debouncing and simple menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["oled", "ssd1306", "ssd1312", "sh1106", "display", "embedded", "menu", "debounce"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["tileoled*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
