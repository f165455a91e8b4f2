"""Fixed-point maths, C-style library helpers, a chunk heap, a software frame
buffer, bar-chart drawing, sorting and priority control for a teaching OS."""

__version__ = "0.1.0"