"""Tessendorf FFT ocean simulation."""

__version__ = "0.1.0"
