# -*- coding: utf-8 -*-

"""
Filename: ocean_conjugate.py
Author: storro
Date: 2026-10-18
Description: Packs conj(h0(-k)) next to h0(k) so the inverse transform yields a real height field
"""

import numpy as np

from oceanfft.ocean.ocean_errors import OceanInvariantError


def mirror_indices(resolution: int) -> np.ndarray:
    """(N - i) mod N for every index, the grid position of -k."""
    return (resolution - np.arange(resolution)) % resolution


def pack_minus_k_conj(h0: np.ndarray) -> np.ndarray:
    """
    h0_conj[i, j] = conj(h0[(N - i) % N, (N - j) % N]), wrap-around at index 0 included.
    Runs once per spectrum initialization, never per frame.
    """
    if h0.ndim != 2 or h0.shape[0] != h0.shape[1]:
        raise OceanInvariantError(f"h0 must be a square grid, got shape {h0.shape}")

    mirror = mirror_indices(h0.shape[0])
    return np.conj(h0[np.ix_(mirror, mirror)])
