# -*- coding: utf-8 -*-

"""
Filename: ocean_time_spectrum.py
Author: storro
Date: 2026-10-18
Description: Advances phases and builds a time-varying frequency spectrum.
"""

import numpy as np

from oceanfft.ocean.ocean_config import GRAVITY
from oceanfft.ocean.ocean_errors import OceanInvariantError

TWO_PI = 2.0 * np.pi

# Channels of the packed spectrum, each one inverse-transforms to real + i * real
PACKED_HEIGHT = 0
PACKED_DISPLACEMENT = 1   # dx + i * dz
PACKED_SLOPE = 2          # sx + i * sz


def dispersion(kx: np.ndarray, kz: np.ndarray) -> np.ndarray:
    """Deep water dispersion relation: w(k) = sqrt(g * |k|)."""
    return np.sqrt(GRAVITY * np.hypot(kx, kz))


def evolve(
    h0: np.ndarray, h0_conj: np.ndarray, omega: np.ndarray, time: float
) -> np.ndarray:
    """
    h(k, t) = h0(k) * exp(i w t) + h0_conj(k) * exp(-i w t)

    The phase is evaluated in double precision and wrapped to [0, 2*pi) before
    the exponential so a large clock keeps its resolution.
    """
    if h0.shape != h0_conj.shape or h0.shape != omega.shape:
        raise OceanInvariantError(
            f"spectrum shapes differ: h0 {h0.shape}, h0_conj {h0_conj.shape}, omega {omega.shape}"
        )

    phase = np.mod(omega.astype(np.float64) * float(time), TWO_PI)
    rotor = np.exp(1j * phase).astype(h0.dtype)

    h = h0 * rotor + h0_conj * np.conj(rotor)

    # w = 0 at k = 0, no mean offset
    n = h.shape[0]
    h[n // 2, n // 2] = 0.0
    return h


class OceanTimeSpectrum:
    """Advances phases and builds a time-varying frequency spectrum."""

    def __init__(self,
                 h0: np.ndarray,
                 h0_conj: np.ndarray,
                 kx: np.ndarray,
                 kz: np.ndarray) -> None:
        if not (h0.shape == h0_conj.shape == kx.shape == kz.shape):
            raise OceanInvariantError("h0, h0_conj and the wave vectors must share one grid")

        self.h0 = h0
        self.h0_conj = h0_conj
        self.resolution = h0.shape[0]
        self.omega = dispersion(kx, kz)

        k_len = np.hypot(kx, kz)
        safe_k_len = np.where(k_len == 0.0, 1.0, k_len)

        # -k of the first row/column is the row/column itself (Nyquist), so
        # odd derivative spectra are not Hermitian there and get dropped
        mask_x = np.ones_like(kx)
        mask_x[0, :] = 0.0
        mask_z = np.ones_like(kz)
        mask_z[:, 0] = 0.0

        dtype = h0.dtype
        self._disp_x = (-1j * kx / safe_k_len * mask_x).astype(dtype)
        self._disp_z = (-1j * kz / safe_k_len * mask_z).astype(dtype)
        self._slope_x = (1j * kx * mask_x).astype(dtype)
        self._slope_z = (1j * kz * mask_z).astype(dtype)

    def evolve(self, time: float) -> np.ndarray:
        return evolve(self.h0, self.h0_conj, self.omega, time)

    def packed_spectra(self, h: np.ndarray) -> np.ndarray:
        """
        Pack five real-output spectra into three complex ones:
        [h, Dx + i Dz, Sx + i Sz] with D = -i k_hat h and S = i k h.
        """
        packed = np.empty((3,) + h.shape, dtype=h.dtype)
        packed[PACKED_HEIGHT] = h
        packed[PACKED_DISPLACEMENT] = self._disp_x * h + 1j * (self._disp_z * h)
        packed[PACKED_SLOPE] = self._slope_x * h + 1j * (self._slope_z * h)
        return packed

    def freeze(self) -> None:
        """Make every array read-only; called once the spectrum is published."""
        for arr in (self.h0, self.h0_conj, self.omega,
                    self._disp_x, self._disp_z, self._slope_x, self._slope_z):
            arr.flags.writeable = False
