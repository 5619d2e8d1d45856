# -*- coding: utf-8 -*-

"""
Filename: ocean_spectrum_generator.py
Author: storro
Date: 2026-10-18
Description: Generates the initial ocean spectrum h0 (Phillips spectrum sample) and its conjugate
"""

import logging

import numpy as np

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_conjugate import pack_minus_k_conj


def wave_vectors(resolution: int, ocean_size: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Wave vector components for every cell, k = 2*pi*(i - N/2, j - N/2) / L.
    Axis 0 is x, axis 1 is z. The zero frequency sits at the grid center (N/2, N/2).
    """
    n = np.arange(resolution, dtype=np.float64) - resolution // 2
    k = (2.0 * np.pi / ocean_size) * n
    kx, kz = np.meshgrid(k, k, indexing="ij")
    return kx, kz


def phillips(kx: np.ndarray, kz: np.ndarray, config: OceanConfig) -> np.ndarray:
    """
    P(k) = A * exp(-1 / (k L)^2) / k^4 * (k_hat . w_hat)^2 * exp(-k^2 l^2)

    L = U^2 / g is the largest wind wave, l the small-wave damping length.
    The DC term is excluded: P(0) = 0.
    """
    wx, wz = config.wind_direction
    wind_len = config.wind_wave_length
    damping = config.damping_length

    k_sq = kx * kx + kz * kz
    dc = k_sq == 0.0
    safe_k_sq = np.where(dc, 1.0, k_sq)

    k_dot_w = (kx * wx + kz * wz) / np.sqrt(safe_k_sq)
    p = (
        config.amplitude
        * np.exp(-1.0 / (safe_k_sq * wind_len * wind_len))
        / (safe_k_sq * safe_k_sq)
        * k_dot_w * k_dot_w
        * np.exp(-safe_k_sq * damping * damping)
    )
    return np.where(dc, 0.0, p)


def ring_rank(resolution: int) -> np.ndarray:
    """
    Draw index of every cell, counted ring by ring outward from the DC term.

    Ring r holds the wave numbers with max(|n|, |m|) == r. Ring r starts at
    (2r - 1)^2 and has 8r cells (top edge, bottom edge, left edge, right edge),
    so a mode keeps the same draw index at every resolution.
    """
    n_idx = np.arange(resolution) - resolution // 2
    n, m = np.meshgrid(n_idx, n_idx, indexing="ij")
    r = np.maximum(np.abs(n), np.abs(m))
    side = 2 * r + 1
    offset = (2 * r - 1) ** 2

    pos = np.select(
        [m == -r, m == r, n == -r],
        [n + r, side + n + r, 2 * side + m + r - 1],
        default=2 * side + 2 * r - 1 + m + r - 1,
    )
    return np.where(r == 0, 0, offset + pos)


def expected_height_variance(config: OceanConfig) -> float:
    """E[mean(height^2)] = sum over k of (P(k) + P(-k)) = 2 * sum P(k)."""
    config = config.validate()
    kx, kz = wave_vectors(config.resolution, config.ocean_size)
    return float(2.0 * phillips(kx, kz, config).sum())


class OceanSpectrumGenerator:
    """Generates the initial ocean spectrum h0 and its conjugate-packed companion."""

    def __init__(self, config: OceanConfig) -> None:
        self.config = config.validate()

    def wave_vectors(self) -> tuple[np.ndarray, np.ndarray]:
        return wave_vectors(self.config.resolution, self.config.ocean_size)

    def phillips(self) -> np.ndarray:
        kx, kz = self.wave_vectors()
        return phillips(kx, kz, self.config)

    def gaussian_draws(self, rng: np.random.Generator) -> np.ndarray:
        """Two independent N(0, 1) draws per cell packed as one complex number."""
        n = self.config.resolution
        draws = rng.standard_normal(size=((n + 1) * (n + 1), 2))
        rank = ring_rank(n)
        return draws[rank, 0] + 1j * draws[rank, 1]

    def generate(
        self, rng: np.random.Generator | None = None
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        Sample h0(k) = xi * sqrt(P(k) / 2) and pack h0_conj.
        Without an explicit generator, one is seeded from config.seed.
        """
        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        h0 = self.gaussian_draws(rng) * np.sqrt(self.phillips() / 2.0)
        h0 = h0.astype(self.config.complex_dtype)

        # h0 must be fully written before packing reads the mirrored cells
        h0_conj = pack_minus_k_conj(h0)

        logging.debug(
            "Initial spectrum generated (N=%d, L=%.1f, wind=%.1f m/s)",
            self.config.resolution, self.config.ocean_size, self.config.wind_speed,
        )
        return h0, h0_conj


def initialize_spectrum(
    config: OceanConfig, rng: np.random.Generator | None = None
) -> tuple[np.ndarray, np.ndarray]:
    return OceanSpectrumGenerator(config).generate(rng)
