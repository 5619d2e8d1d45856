# -*- coding: utf-8 -*-

"""
Filename: ocean_textures.py
Author: storro
Date: 2026-10-18
Description: Panda3D textures holding the published height, displacement and normal fields
"""

import logging

import numpy as np

from panda3d.core import SamplerState, Texture

from oceanfft.ocean.ocean_displacement import OceanFrame
from oceanfft.ocean.ocean_errors import OceanInvariantError


class OceanFieldTexture:
    """
    One N x N float field owned as a Panda3D texture: created at initialization,
    overwritten every frame, released exactly once.

    Texel (u, v) holds grid cell [x, z], so RAM image rows are z and columns are x.
    """

    def __init__(self, name: str, resolution: int, channels: int) -> None:
        if channels not in (1, 4):
            raise OceanInvariantError(f"field textures have 1 or 4 channels, got {channels}")

        self.name = name
        self.resolution = int(resolution)
        self.channels = channels
        self._released = False
        self.texture = self._make_texture()
        logging.debug("Created field texture %s (%dx%d, %d channels)",
                      name, resolution, resolution, channels)

    def _make_texture(self) -> Texture:
        tex = Texture(self.name)
        tex.setup_2d_texture(self.resolution,
                             self.resolution,
                             Texture.T_float,
                             Texture.F_r32 if self.channels == 1 else Texture.F_rgba32)
        tex.set_clear_color((0.0, 0.0, 0.0, 0.0))
        # Bilinear filtering, otherwise the field looks blocky when sampled up close
        tex.set_minfilter(SamplerState.FT_linear)
        tex.set_magfilter(SamplerState.FT_linear)
        # The patch tiles seamlessly
        tex.set_wrap_u(SamplerState.WM_repeat)
        tex.set_wrap_v(SamplerState.WM_repeat)
        return tex

    @property
    def released(self) -> bool:
        return self._released

    def publish(self, field: np.ndarray) -> None:
        """Overwrite the RAM image with an (N, N) or (N, N, C <= channels) field."""
        if self._released:
            raise OceanInvariantError(f"texture {self.name} was already released")

        data = np.asarray(field, dtype=np.float32)
        if data.ndim == 2:
            data = data[..., None]
        n = self.resolution
        if data.ndim != 3 or data.shape[:2] != (n, n) or data.shape[2] > self.channels:
            raise OceanInvariantError(
                f"texture {self.name} is {n}x{n}x{self.channels}, got a field of shape {field.shape}"
            )

        image = np.zeros((n, n, self.channels), dtype=np.float32)
        image[..., :data.shape[2]] = data
        image = image.transpose(1, 0, 2)
        if self.channels == 4:
            # Panda3D keeps 4-component RAM images in BGRA order
            image = image[..., [2, 1, 0, 3]]

        self.texture.set_ram_image(np.ascontiguousarray(image).tobytes())

    def read(self) -> np.ndarray:
        """Copy of the current RAM image as an (N, N, channels) field indexed [x, z]."""
        if self._released:
            raise OceanInvariantError(f"texture {self.name} was already released")

        n = self.resolution
        raw = np.frombuffer(self.texture.get_ram_image().get_data(), dtype=np.float32)
        image = raw.reshape(n, n, self.channels)
        if self.channels == 4:
            image = image[..., [2, 1, 0, 3]]
        return image.transpose(1, 0, 2).copy()

    def release(self) -> None:
        if self._released:
            raise OceanInvariantError(f"texture {self.name} released twice")
        self.texture.clear_ram_image()
        self.texture.release_all()
        self._released = True
        logging.debug("Released field texture %s", self.name)


class OceanFieldTextures:
    """Height (r), displacement (dx, height, dz) and normal (nx, ny, nz) textures."""

    def __init__(self, resolution: int) -> None:
        self.height_map = OceanFieldTexture("ocean_height", resolution, channels=1)
        self.displacement_map = OceanFieldTexture("ocean_displacement", resolution, channels=4)
        self.normal_map = OceanFieldTexture("ocean_normal", resolution, channels=4)

    def all(self) -> tuple[OceanFieldTexture, ...]:
        return (self.height_map, self.displacement_map, self.normal_map)

    def publish(self, frame: OceanFrame) -> None:
        self.height_map.publish(frame.height)
        self.displacement_map.publish(
            np.stack([frame.displacement[..., 0], frame.height, frame.displacement[..., 1]], axis=-1)
        )
        self.normal_map.publish(frame.normal)

    def release(self) -> None:
        for tex in self.all():
            tex.release()
        logging.info("Ocean field textures released")
