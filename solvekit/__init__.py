"""Classic algorithm solutions over linked lists, arrays, strings, grids, histograms and small containers."""

__version__ = "0.1.0"