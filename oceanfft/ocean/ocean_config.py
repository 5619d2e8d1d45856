# -*- coding: utf-8 -*-

"""
Filename: ocean_config.py
Author: storro
Date: 2026-10-18
Description: Simulation parameters shared by every stage of the ocean pipeline
"""

import math

from dataclasses import dataclass, replace

import numpy as np

from oceanfft.ocean.ocean_errors import OceanConfigError

# Gravity (m/s^2) used by the dispersion relation and the Phillips spectrum
GRAVITY = 9.81

MIN_RESOLUTION = 64
MAX_RESOLUTION = 1024

PRECISIONS = {
    "float32": (np.float32, np.complex64),
    "float64": (np.float64, np.complex128),
}

NORMAL_MODES = ("spectral", "finite_difference")


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


@dataclass(frozen=True)
class OceanConfig:
    # Grid side length N. Must be a power of 2 for the FFT
    resolution: int = 256

    # World-space size of the simulated patch in meters ("L" in Tessendorf's paper)
    ocean_size: float = 256.0

    # Any non-zero vector, normalized by validate()
    wind_direction: tuple[float, float] = (1.0, 1.0)
    wind_speed: float = 15.0

    # Phillips constant "A"
    amplitude: float = 5e-7

    # Small-wave damping length as a fraction of the largest wind wave (U^2 / g)
    damping_ratio: float = 0.001

    # Higher = sharper peaks, but more distortion
    choppiness: float = 1.5

    seed: int = 0

    # float32 for real-time use, float64 for verification
    precision: str = "float64"

    # "spectral" inverse-transforms the slope spectrum,
    # "finite_difference" differentiates the height field
    normal_mode: str = "spectral"

    def validate(self) -> "OceanConfig":
        """
        Check every parameter and return a copy with a normalized wind direction.
        Raises OceanConfigError, never rounds or clamps a value.
        """
        n = self.resolution
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise OceanConfigError(f"resolution must be an integer, got {n!r}")
        if not is_power_of_two(int(n)):
            raise OceanConfigError(f"resolution must be a power of two, got {n}")
        if not MIN_RESOLUTION <= n <= MAX_RESOLUTION:
            raise OceanConfigError(
                f"resolution must be in [{MIN_RESOLUTION}, {MAX_RESOLUTION}], got {n}"
            )

        _require_positive("ocean_size", self.ocean_size)
        _require_positive("wind_speed", self.wind_speed)
        _require_positive("amplitude", self.amplitude)
        _require_non_negative("damping_ratio", self.damping_ratio)
        _require_non_negative("choppiness", self.choppiness)

        if len(self.wind_direction) != 2:
            raise OceanConfigError("wind_direction must be a 2D vector")
        wx, wz = (float(c) for c in self.wind_direction)
        if not (math.isfinite(wx) and math.isfinite(wz)):
            raise OceanConfigError(f"wind_direction must be finite, got {self.wind_direction}")
        norm = math.hypot(wx, wz)
        if norm == 0.0:
            raise OceanConfigError("wind_direction must not be the zero vector")

        if self.precision not in PRECISIONS:
            raise OceanConfigError(
                f"precision must be one of {sorted(PRECISIONS)}, got {self.precision!r}"
            )
        if self.normal_mode not in NORMAL_MODES:
            raise OceanConfigError(
                f"normal_mode must be one of {NORMAL_MODES}, got {self.normal_mode!r}"
            )

        return replace(
            self,
            resolution=int(n),
            ocean_size=float(self.ocean_size),
            wind_direction=(wx / norm, wz / norm),
            wind_speed=float(self.wind_speed),
            seed=int(self.seed),
        )

    @property
    def real_dtype(self) -> type:
        return PRECISIONS[self.precision][0]

    @property
    def complex_dtype(self) -> type:
        return PRECISIONS[self.precision][1]

    @property
    def wind_wave_length(self) -> float:
        """Largest wave arising from a continuous wind: U^2 / g."""
        return self.wind_speed ** 2 / GRAVITY

    @property
    def damping_length(self) -> float:
        return self.damping_ratio * self.wind_wave_length


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(float(value)) or value <= 0:
        raise OceanConfigError(f"{name} must be a positive number, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(float(value)) or value < 0:
        raise OceanConfigError(f"{name} must be >= 0, got {value}")
