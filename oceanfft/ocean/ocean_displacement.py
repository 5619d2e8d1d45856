# -*- coding: utf-8 -*-

"""
Filename: ocean_displacement.py
Author: storro
Date: 2026-10-18
Description: Generates height, displacement and normal fields from the IFFT output
"""

from dataclasses import dataclass

import numpy as np

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_errors import OceanInvariantError
from oceanfft.ocean.ocean_time_spectrum import PACKED_DISPLACEMENT, PACKED_HEIGHT, PACKED_SLOPE


@dataclass(frozen=True)
class OceanFrame:
    """Output fields of one frame, (N, N) grids indexed [x, z]."""

    time: float
    height: np.ndarray        # meters, centered at 0
    displacement: np.ndarray  # (N, N, 2) horizontal offset (dx, dz), choppiness applied
    normal: np.ndarray        # (N, N, 3) unit vectors (nx, ny, nz), y up

    @property
    def resolution(self) -> int:
        return self.height.shape[0]


def normals_from_slopes(slope_x: np.ndarray, slope_z: np.ndarray) -> np.ndarray:
    normal = np.stack([-slope_x, np.ones_like(slope_x), -slope_z], axis=-1)
    normal /= np.linalg.norm(normal, axis=-1, keepdims=True)
    return normal


def slopes_from_height(height: np.ndarray, spacing: float) -> tuple[np.ndarray, np.ndarray]:
    """Central differences. The patch tiles, so neighbors wrap around the borders."""
    slope_x = (np.roll(height, -1, axis=0) - np.roll(height, 1, axis=0)) / (2.0 * spacing)
    slope_z = (np.roll(height, -1, axis=1) - np.roll(height, 1, axis=1)) / (2.0 * spacing)
    return slope_x, slope_z


class OceanDisplacement:
    """Unpacks the inverse-transformed channels into height, displacement and normal fields."""

    def __init__(self, config: OceanConfig) -> None:
        self.config = config

    def derive(self, spatial: np.ndarray, time: float) -> OceanFrame:
        n = self.config.resolution
        if spatial.shape != (3, n, n):
            raise OceanInvariantError(
                f"expected packed spatial channels of shape (3, {n}, {n}), got {spatial.shape}"
            )

        dtype = self.config.real_dtype
        height = spatial[PACKED_HEIGHT].real.astype(dtype)

        disp = spatial[PACKED_DISPLACEMENT]
        displacement = np.stack([disp.real, disp.imag], axis=-1).astype(dtype)
        displacement *= dtype(self.config.choppiness)

        if self.config.normal_mode == "spectral":
            slope = spatial[PACKED_SLOPE]
            slope_x, slope_z = slope.real, slope.imag
        else:
            slope_x, slope_z = slopes_from_height(height, self.config.ocean_size / n)
        normal = normals_from_slopes(slope_x, slope_z).astype(dtype)

        return OceanFrame(time=float(time),
                          height=height,
                          displacement=displacement,
                          normal=normal)
