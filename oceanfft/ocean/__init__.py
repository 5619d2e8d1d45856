from oceanfft.ocean.ocean_butterfly import ButterflyTable
from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_conjugate import pack_minus_k_conj
from oceanfft.ocean.ocean_displacement import OceanDisplacement, OceanFrame
from oceanfft.ocean.ocean_errors import OceanConfigError, OceanError, OceanInvariantError
from oceanfft.ocean.ocean_ifft2d import OceanIFFT2D
from oceanfft.ocean.ocean_simulation import (
    OceanSimulation,
    OceanSimulationState,
    initialize,
    step_frame,
)
from oceanfft.ocean.ocean_spectrum_generator import OceanSpectrumGenerator, initialize_spectrum
from oceanfft.ocean.ocean_textures import OceanFieldTexture, OceanFieldTextures
from oceanfft.ocean.ocean_time_spectrum import OceanTimeSpectrum, evolve

"""Ocean package public API."""

__all__ = [
    "ButterflyTable",
    "OceanConfig",
    "OceanConfigError",
    "OceanDisplacement",
    "OceanError",
    "OceanFieldTexture",
    "OceanFieldTextures",
    "OceanFrame",
    "OceanIFFT2D",
    "OceanInvariantError",
    "OceanSimulation",
    "OceanSimulationState",
    "OceanSpectrumGenerator",
    "OceanTimeSpectrum",
    "evolve",
    "initialize",
    "initialize_spectrum",
    "pack_minus_k_conj",
    "step_frame",
]
