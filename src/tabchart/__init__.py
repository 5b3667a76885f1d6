"""Tabchart: turn tabular text streams into chart data."""

__version__ = "0.1.0"
