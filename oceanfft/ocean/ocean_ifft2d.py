# -*- coding: utf-8 -*-

"""
Filename: ocean_ifft2d.py
Author: storro
Date: 2026-10-18
Description: Converts the time spectrum to spatial domain using a 2D Inverse Fast Fourier Transform (IFFT)
"""

import numpy as np

from oceanfft.ocean.ocean_butterfly import ButterflyTable
from oceanfft.ocean.ocean_errors import OceanInvariantError

HORIZONTAL = -1
VERTICAL = -2


def checkerboard(resolution: int) -> np.ndarray:
    """(-1)^(x + y), undoes the shift of the zero frequency to the grid center."""
    idx = np.arange(resolution)
    return np.where((idx[:, None] + idx[None, :]) % 2 == 0, 1.0, -1.0)


class OceanIFFT2D:
    """
    Row/column separable inverse FFT over the last two axes of a (..., N, N) grid.

    Every stage is one data-parallel dispatch over all rows (or columns) and all
    leading channels at once. A stage reads only the previous stage's buffer and
    writes the other one (ping/pong), so no output sample ever sees a partially
    updated stage. Each dispatch completes before the next one starts.

    The transform is unnormalized, h(x) = sum_k h(k) exp(+i k x), as in Tessendorf.
    """

    def __init__(self, table: ButterflyTable, dtype: type = np.complex128) -> None:
        self.table = table
        self.dtype = np.dtype(dtype)
        if self.dtype.kind != "c":
            raise OceanInvariantError(f"IFFT working buffers must be complex, got {self.dtype}")

        n = self.table.resolution
        self._twiddles = tuple(
            self.table.twiddles(stage, inverse=True, dtype=self.dtype)
            for stage in range(len(self.table))
        )
        self._sign = checkerboard(n).astype(np.finfo(self.dtype).dtype)

        for tw in self._twiddles:
            tw.flags.writeable = False
        self._sign.flags.writeable = False

    @property
    def resolution(self) -> int:
        return self.table.resolution

    def _check_grid(self, field: np.ndarray) -> None:
        n = self.table.resolution
        if field.ndim < 2 or field.shape[-2:] != (n, n):
            raise OceanInvariantError(
                f"butterfly table built for N={n} cannot transform a grid of shape {field.shape}"
            )

    def _run_pass(self, field: np.ndarray, axis: int) -> np.ndarray:
        src = np.asarray(field).astype(self.dtype, copy=False)
        ping = np.empty(src.shape, dtype=self.dtype)
        pong = np.empty(src.shape, dtype=self.dtype)

        for stage, tw in zip(self.table.stages, self._twiddles):
            dst = ping if src is not ping else pong
            if axis == VERTICAL:
                tw = tw[:, None]
            np.multiply(np.take(src, stage.bottom, axis=axis), tw, out=dst)
            dst += np.take(src, stage.top, axis=axis)
            src = dst

        return src

    def horizontal_pass(self, field: np.ndarray) -> np.ndarray:
        """1D inverse FFT of every row (along axis j)."""
        self._check_grid(field)
        return self._run_pass(field, HORIZONTAL)

    def vertical_pass(self, field: np.ndarray) -> np.ndarray:
        """1D inverse FFT of every column (along axis i)."""
        self._check_grid(field)
        return self._run_pass(field, VERTICAL)

    def ifft2d(self, spectrum: np.ndarray, centered: bool = True) -> np.ndarray:
        """
        Horizontal pass then vertical pass.

        With centered=True the input has its zero frequency at (N/2, N/2) and the
        result is multiplied by (-1)^(x+y); the real part is then the spatial field.
        """
        self._check_grid(spectrum)
        spatial = self._run_pass(self._run_pass(spectrum, HORIZONTAL), VERTICAL)
        if centered:
            spatial *= self._sign
        return spatial
