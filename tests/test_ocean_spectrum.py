import numpy as np
import pytest

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_conjugate import mirror_indices, pack_minus_k_conj
from oceanfft.ocean.ocean_errors import OceanInvariantError
from oceanfft.ocean.ocean_spectrum_generator import (
    OceanSpectrumGenerator,
    expected_height_variance,
    initialize_spectrum,
    phillips,
    ring_rank,
    wave_vectors,
)
from oceanfft.ocean.ocean_time_spectrum import dispersion, evolve


def test_wave_vectors_are_centered():
    kx, kz = wave_vectors(64, 128.0)
    assert kx.shape == kz.shape == (64, 64)
    assert kx[32, 0] == 0.0
    assert kz[0, 32] == 0.0
    # k = 2*pi*(i - N/2) / L
    assert kx[0, 5] == pytest.approx(2.0 * np.pi * -32 / 128.0)
    assert kz[7, 63] == pytest.approx(2.0 * np.pi * 31 / 128.0)


def test_phillips_excludes_dc(small_config):
    generator = OceanSpectrumGenerator(small_config)
    p = generator.phillips()
    assert p[32, 32] == 0.0
    assert np.all(np.isfinite(p))
    assert np.all(p >= 0.0)


def test_phillips_vanishes_perpendicular_to_wind():
    config = OceanConfig(resolution=64, wind_direction=(1.0, 0.0)).validate()
    kx, kz = wave_vectors(config.resolution, config.ocean_size)
    p = phillips(kx, kz, config)
    # kx == 0 column: waves travelling along z, perpendicular to the wind
    assert np.all(p[32, :] == 0.0)
    assert p[40, 32] > 0.0


def test_phillips_is_even_in_k(small_config):
    p = OceanSpectrumGenerator(small_config).phillips()
    inner = p[1:, 1:]
    np.testing.assert_array_equal(inner, inner[::-1, ::-1])


def test_phillips_matches_formula():
    config = OceanConfig(resolution=64, ocean_size=100.0, wind_speed=12.0,
                         wind_direction=(0.0, 1.0), amplitude=2e-6).validate()
    kx, kz = wave_vectors(64, 100.0)
    p = phillips(kx, kz, config)

    i, j = 35, 41
    k = np.hypot(kx[i, j], kz[i, j])
    lw = 12.0 ** 2 / 9.81
    l_small = 0.001 * lw
    k_dot_w = kz[i, j] / k
    expected = (2e-6 * np.exp(-1.0 / (k * lw) ** 2) / k ** 4
                * k_dot_w ** 2 * np.exp(-k ** 2 * l_small ** 2))
    assert p[i, j] == pytest.approx(expected, rel=1e-12)


def test_ring_rank_is_a_dense_permutation():
    rank = ring_rank(64)
    flat = np.sort(rank.ravel())
    assert flat[0] == 0
    assert len(np.unique(flat)) == 64 * 64
    assert flat[-1] < 65 * 65
    assert rank[32, 32] == 0


def test_ring_rank_does_not_depend_on_resolution():
    small = ring_rank(64)
    large = ring_rank(256)
    # Same wave numbers n = i - N/2 sit at offset 128 - 32 in the larger grid
    np.testing.assert_array_equal(large[96:160, 96:160], small)


def test_same_seed_same_spectrum(small_config):
    h0_a, conj_a = initialize_spectrum(small_config)
    h0_b, conj_b = initialize_spectrum(small_config)
    np.testing.assert_array_equal(h0_a, h0_b)
    np.testing.assert_array_equal(conj_a, conj_b)


def test_different_seed_different_spectrum(small_config):
    from dataclasses import replace

    h0_a, _ = initialize_spectrum(small_config)
    h0_b, _ = initialize_spectrum(replace(small_config, seed=8))
    assert not np.allclose(h0_a, h0_b)


def test_explicit_generator_is_used(small_config):
    h0_a, _ = initialize_spectrum(small_config, rng=np.random.default_rng(99))
    h0_b, _ = initialize_spectrum(small_config, rng=np.random.default_rng(99))
    h0_seed, _ = initialize_spectrum(small_config)
    np.testing.assert_array_equal(h0_a, h0_b)
    assert not np.allclose(h0_a, h0_seed)


def test_low_modes_shared_across_resolutions():
    from dataclasses import replace

    config = OceanConfig(resolution=64, ocean_size=256.0, seed=3)
    h0_small, _ = initialize_spectrum(config)
    h0_large, _ = initialize_spectrum(replace(config, resolution=256))
    np.testing.assert_allclose(h0_large[96:160, 96:160], h0_small, rtol=1e-12, atol=0.0)


def test_dc_amplitude_is_zero(small_config):
    h0, h0_conj = initialize_spectrum(small_config)
    assert h0[32, 32] == 0.0
    assert h0_conj[32, 32] == 0.0


def test_precision_sets_spectrum_dtype(small_config):
    from dataclasses import replace

    h0, h0_conj = initialize_spectrum(replace(small_config, precision="float32"))
    assert h0.dtype == np.complex64
    assert h0_conj.dtype == np.complex64


def test_mirror_indices_wrap_at_zero():
    np.testing.assert_array_equal(mirror_indices(4), [0, 3, 2, 1])


def test_conjugate_packing_is_exact(small_config):
    h0, h0_conj = initialize_spectrum(small_config)
    n = small_config.resolution
    for i, j in [(0, 0), (0, 5), (5, 0), (1, 63), (17, 40), (32, 32), (63, 63)]:
        assert h0_conj[i, j] == np.conj(h0[(n - i) % n, (n - j) % n])

    m = mirror_indices(n)
    np.testing.assert_array_equal(h0_conj, np.conj(h0[np.ix_(m, m)]))


def test_conjugate_packing_rejects_non_square():
    with pytest.raises(OceanInvariantError):
        pack_minus_k_conj(np.zeros((4, 8), dtype=complex))


def test_packing_twice_gives_back_h0(rng):
    h0 = rng.standard_normal((8, 8)) + 1j * rng.standard_normal((8, 8))
    np.testing.assert_array_equal(pack_minus_k_conj(pack_minus_k_conj(h0)), h0)


def test_evolve_at_zero_time(small_config):
    h0, h0_conj = initialize_spectrum(small_config)
    kx, kz = wave_vectors(64, small_config.ocean_size)
    h = evolve(h0, h0_conj, dispersion(kx, kz), 0.0)
    expected = h0 + h0_conj
    expected[32, 32] = 0.0
    np.testing.assert_allclose(h, expected, rtol=0, atol=1e-15)


@pytest.mark.parametrize("time", [0.0, 0.5, 13.7, 1.0e4])
def test_evolved_spectrum_is_hermitian_with_zero_dc(small_config, time):
    h0, h0_conj = initialize_spectrum(small_config)
    kx, kz = wave_vectors(64, small_config.ocean_size)
    h = evolve(h0, h0_conj, dispersion(kx, kz), time)

    assert h[32, 32] == 0.0
    m = mirror_indices(64)
    np.testing.assert_allclose(h[np.ix_(m, m)], np.conj(h), rtol=0, atol=1e-12)


def test_evolve_is_idempotent(small_config):
    h0, h0_conj = initialize_spectrum(small_config)
    kx, kz = wave_vectors(64, small_config.ocean_size)
    omega = dispersion(kx, kz)
    first = evolve(h0, h0_conj, omega, 42.0)
    evolve(h0, h0_conj, omega, 7.0)
    again = evolve(h0, h0_conj, omega, 42.0)
    np.testing.assert_array_equal(first, again)


def test_evolve_rejects_mismatched_shapes():
    with pytest.raises(OceanInvariantError):
        evolve(np.zeros((8, 8), complex), np.zeros((8, 8), complex), np.zeros((4, 4)), 1.0)


def test_dispersion_relation():
    kx = np.array([[0.0, 3.0]])
    kz = np.array([[0.0, 4.0]])
    np.testing.assert_allclose(dispersion(kx, kz), [[0.0, np.sqrt(9.81 * 5.0)]])


def test_expected_variance_positive(scenario_config):
    assert expected_height_variance(scenario_config) > 0.0
