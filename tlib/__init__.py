"""Game and media utility building blocks: math, ranges, containers, grids, packing, input and system queries."""

__version__ = "0.1.0"