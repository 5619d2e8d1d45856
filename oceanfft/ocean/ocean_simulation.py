# -*- coding: utf-8 -*-

"""
Filename: ocean_simulation.py
Author: storro
Date: 2026-10-18
Description: Frame driver: one-time spectrum/table setup, then per-frame evolve -> IFFT -> derive
"""

import logging

from dataclasses import dataclass, replace

import numpy as np

from oceanfft.ocean.ocean_butterfly import ButterflyTable
from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_displacement import OceanDisplacement, OceanFrame
from oceanfft.ocean.ocean_errors import OceanConfigError, OceanInvariantError
from oceanfft.ocean.ocean_ifft2d import OceanIFFT2D
from oceanfft.ocean.ocean_spectrum_generator import OceanSpectrumGenerator
from oceanfft.ocean.ocean_textures import OceanFieldTextures
from oceanfft.ocean.ocean_time_spectrum import OceanTimeSpectrum

# Past this clock value a float32 host clock has lost more than ~10 ms of resolution
PHASE_PRECISION_WARN_TIME = 1.0e5


@dataclass(frozen=True)
class OceanSimulationState:
    """
    Everything built once per set of grid/wind parameters. Read-only once
    returned by initialize(), safe to share between concurrent frame evaluations.
    """

    config: OceanConfig
    kx: np.ndarray
    kz: np.ndarray
    spectrum: OceanTimeSpectrum
    table: ButterflyTable
    ifft: OceanIFFT2D
    deriver: OceanDisplacement

    @property
    def h0(self) -> np.ndarray:
        return self.spectrum.h0

    @property
    def h0_conj(self) -> np.ndarray:
        return self.spectrum.h0_conj


def initialize(config: OceanConfig, rng: np.random.Generator | None = None) -> OceanSimulationState:
    """Validate parameters, sample and pack the base spectrum, build the butterfly table."""
    config = config.validate()

    generator = OceanSpectrumGenerator(config)
    kx, kz = generator.wave_vectors()
    h0, h0_conj = generator.generate(rng)

    spectrum = OceanTimeSpectrum(h0, h0_conj, kx, kz)
    spectrum.freeze()
    kx.flags.writeable = False
    kz.flags.writeable = False

    table = ButterflyTable(config.resolution)
    ifft = OceanIFFT2D(table, dtype=config.complex_dtype)

    logging.info(
        "Ocean state initialized: N=%d, L=%.1f m, wind=(%.3f, %.3f) at %.1f m/s, %d FFT stages, %s",
        config.resolution, config.ocean_size,
        config.wind_direction[0], config.wind_direction[1], config.wind_speed,
        table.stage_count, config.precision,
    )
    return OceanSimulationState(config=config,
                                kx=kx,
                                kz=kz,
                                spectrum=spectrum,
                                table=table,
                                ifft=ifft,
                                deriver=OceanDisplacement(config))


def step_frame(state: OceanSimulationState, time: float) -> OceanFrame:
    """Evaluate the ocean at an absolute time. Idempotent, nothing carries over between calls."""
    if state.table.resolution != state.spectrum.resolution:
        raise OceanInvariantError(
            f"butterfly table (N={state.table.resolution}) does not match "
            f"the spectrum (N={state.spectrum.resolution})"
        )

    h = state.spectrum.evolve(time)
    packed = state.spectrum.packed_spectra(h)
    spatial = state.ifft.ifft2d(packed)
    return state.deriver.derive(spatial, time)


class OceanSimulation:
    """
    Stateful driver for a host application: owns the current state, the
    simulation clock and the published textures.
    """

    def __init__(self,
                 config: OceanConfig,
                 publish: bool = True,
                 rng: np.random.Generator | None = None) -> None:
        self.state = initialize(config, rng)
        self.textures = OceanFieldTextures(self.state.config.resolution) if publish else None
        self.time = 0.0
        self.frame: OceanFrame | None = None
        self._precision_warned = False

    @property
    def config(self) -> OceanConfig:
        return self.state.config

    def __enter__(self) -> "OceanSimulation":
        return self

    def __exit__(self, *exc) -> None:
        self.release()

    def step(self, delta_time: float) -> OceanFrame:
        """Call once per frame."""
        if delta_time < 0:
            raise OceanConfigError(f"the simulation clock only moves forward, got dt={delta_time}")
        self.time += float(delta_time)
        return self.evaluate(self.time)

    def evaluate(self, time: float) -> OceanFrame:
        """Evaluate and publish an absolute time without touching the clock."""
        if (not self._precision_warned
                and self.config.precision == "float32"
                and time > PHASE_PRECISION_WARN_TIME):
            logging.warning(
                "Simulation time %.0f s: float32 hosts lose phase precision, "
                "keep the clock in double precision", time
            )
            self._precision_warned = True

        # Local reference: a concurrent set_wind() swaps self.state, never mutates it
        state = self.state
        frame = step_frame(state, time)
        if self.textures is not None:
            self.textures.publish(frame)
        self.frame = frame
        return frame

    def set_wind(self, direction: tuple[float, float], speed: float) -> None:
        self._reinitialize(replace(self.config, wind_direction=tuple(direction), wind_speed=speed))

    def set_ocean_size(self, ocean_size: float) -> None:
        self._reinitialize(replace(self.config, ocean_size=ocean_size))

    def set_choppiness(self, value: float) -> None:
        # Choppiness only scales the unpacked displacement, h0 stays valid
        config = replace(self.config, choppiness=value).validate()
        self.state = replace(self.state, config=config, deriver=OceanDisplacement(config))

    def _reinitialize(self, config: OceanConfig) -> None:
        # Full rebuild, the published state is never updated in place
        self.state = initialize(config)
        logging.info("Ocean spectrum regenerated")

    def release(self) -> None:
        if self.textures is not None:
            self.textures.release()
            self.textures = None
