# -*- coding: utf-8 -*-

"""
Filename: ocean_butterfly.py
Author: storro
Date: 2026-10-18
Description: Precomputed butterfly stages (source indices + twiddle factors) for an N-point FFT
"""

import math

from dataclasses import dataclass

import numpy as np

from oceanfft.ocean.ocean_config import is_power_of_two
from oceanfft.ocean.ocean_errors import OceanConfigError


def bit_reverse(resolution: int) -> np.ndarray:
    """Bit-reversal permutation of 0..N-1."""
    bits = int(math.log2(resolution))
    idx = np.arange(resolution)
    rev = np.zeros_like(idx)
    for b in range(bits):
        rev |= ((idx >> b) & 1) << (bits - 1 - b)
    return rev


@dataclass(frozen=True)
class ButterflyStage:
    # out[p] = in[top[p]] + twiddle[p] * in[bottom[p]]
    top: np.ndarray
    bottom: np.ndarray
    twiddle: np.ndarray   # forward twiddle exp(-2*pi*i*q / 2^(s+1))


class ButterflyTable:
    """
    Radix-2 decimation-in-time stages for an N-point transform.

    Stage s combines sub-sequences of length 2^s into length 2^(s+1). Output
    position p with q = p mod 2^(s+1) reads the pair (base + q mod 2^s,
    base + q mod 2^s + 2^s). The bit-reversal permutation is folded into the
    source indices of stage 0, so input and output are both in natural order.

    Pure function of N: built once, shared read-only across frames.
    """

    def __init__(self, resolution: int) -> None:
        if not is_power_of_two(resolution):
            raise OceanConfigError(f"resolution must be a power of two, got {resolution}")

        self.resolution = int(resolution)
        self.stage_count = int(math.log2(self.resolution))
        self.bit_reversed = bit_reverse(self.resolution)
        self.stages = tuple(self._build_stage(s) for s in range(self.stage_count))

        self.bit_reversed.flags.writeable = False
        for stage in self.stages:
            stage.top.flags.writeable = False
            stage.bottom.flags.writeable = False
            stage.twiddle.flags.writeable = False

    def _build_stage(self, stage: int) -> ButterflyStage:
        half = 1 << stage
        span = half << 1

        p = np.arange(self.resolution)
        q = p % span
        base = p - q
        top = base + q % half
        bottom = top + half
        # Upper half of each group gets -w, which exp(-2*pi*i*q/span) gives directly
        twiddle = np.exp(-2j * np.pi * q / span)

        if stage == 0:
            top = self.bit_reversed[top]
            bottom = self.bit_reversed[bottom]

        return ButterflyStage(top=top, bottom=bottom, twiddle=twiddle)

    def twiddles(self, stage: int, inverse: bool, dtype: type) -> np.ndarray:
        """Stage twiddles for the requested direction, conjugated for the inverse."""
        tw = self.stages[stage].twiddle
        if inverse:
            tw = np.conj(tw)
        return tw.astype(dtype)

    def __len__(self) -> int:
        return self.stage_count
