# -*- coding: utf-8 -*-

"""
Filename: ocean_errors.py
Author: storro
Date: 2026-10-18
Description: Exception types raised by the ocean simulation
"""


class OceanError(Exception):
    """Base class for every error raised by the ocean package."""


class OceanConfigError(OceanError, ValueError):
    """Invalid simulation parameters, rejected at initialization."""


class OceanInvariantError(OceanError, RuntimeError):
    """
    Internal invariant violation (lifecycle ordering bug).
    Not recoverable: a table built for another resolution, a released texture, ...
    """
