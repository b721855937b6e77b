"""Solutions for six advent puzzle days, with grid, math and input-file helpers."""

__version__ = "0.1.0"